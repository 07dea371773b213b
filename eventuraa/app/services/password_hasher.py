"""
Password Hasher

Salted, deliberately slow one-way hashing with bcrypt.
"""

import bcrypt

# ~tens of milliseconds per hash on commodity hardware
BCRYPT_COST = 10

# bcrypt only reads the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """
    bcrypt wrapper.

    Digests are self-describing ($2b$<cost>$<salt><hash>) so verify() needs
    nothing but the digest. A malformed digest raises ValueError; that is an
    internal error, never a validation error.
    """

    def __init__(self, cost: int = BCRYPT_COST):
        self.cost = cost
        self._dummy_digest = None

    def hash(self, plaintext: str) -> str:
        """Hash with a fresh random salt"""
        digest = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(self.cost))
        return digest.decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Constant-time comparison against a stored digest"""
        encoded = plaintext.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            # Never stored by signup, so it cannot match; keep the timing
            self.verify_dummy(plaintext)
            return False
        return bcrypt.checkpw(encoded, digest.encode("utf-8"))

    def verify_dummy(self, plaintext: str) -> None:
        """Spend the same time as verify() when there is no stored digest"""
        if self._dummy_digest is None:
            self._dummy_digest = bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(self.cost))
        bcrypt.checkpw(plaintext.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES], self._dummy_digest)
