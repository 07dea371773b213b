"""
Session Token Service

Signed, self-contained bearer tokens (JWT, HS256).

Tokens are never persisted and cannot be revoked server-side: there is no
blacklist, and nothing (password reset included) invalidates a token
before its exp claim. Logout or forced invalidation would need a
persisted revocation list or short-lived tokens plus refresh.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from eventuraa.libs.result import Error, Result, Return

DEFAULT_TOKEN_LIFETIME = timedelta(days=30)


class SessionTokenService:
    """
    Issues and verifies session tokens.

    The signing secret is injected; the service never falls back to a
    built-in value. Verification is pure and safe to run concurrently.
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def issue(self, user_id: UUID) -> str:
        """
        Mint a token for a subject.

        Args:
            user_id: Identity the token speaks for

        Returns:
            JWT string carrying user_id, iat and exp
        """
        now = datetime.now(UTC)
        payload = {
            "user_id": str(user_id),
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Result[UUID]:
        """
        Check signature and expiry.

        Returns:
            Result with the subject's UUID, or Error TOKEN_EXPIRED / TOKEN_INVALID
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return Return.err(Error("TOKEN_EXPIRED", "Token has expired"))
        except JWTError:
            return Return.err(Error("TOKEN_INVALID", "Token signature or format is invalid"))

        if "exp" not in payload:
            return Return.err(Error("TOKEN_INVALID", "Token has no expiry"))

        try:
            user_id = UUID(payload["user_id"])
        except (KeyError, TypeError, ValueError):
            return Return.err(Error("TOKEN_INVALID", "Token subject is missing or malformed"))

        return Return.ok(user_id)
