import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()

# Local development only. create_app refuses to start in production with these.
INSECURE_JWT_SECRET = "eventuraa-dev-jwt-secret-change-in-production"
INSECURE_ADMIN_SIGNUP_SECRET = "eventuraa-dev-admin-signup-secret"


def _get(key, default):
    """Environment variable wins over env.yaml, env.yaml wins over the default"""
    if key in os.environ:
        value = os.environ[key]
        if isinstance(default, bool):
            return value.lower() in ("1", "true", "yes")
        if isinstance(default, int):
            return int(value)
        if isinstance(default, list):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value
    return data.get(key, default)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./eventuraa.db")
    # SQLite: lock wait per statement. Other dialects: wait for a pooled connection.
    DB_TIMEOUT_SECONDS = _get("DB_TIMEOUT_SECONDS", 10)
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = _get("API_PORT", 8000)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = _get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENVIRONMENT = _get("ENVIRONMENT", "development")
    JWT_SECRET = _get("JWT_SECRET", INSECURE_JWT_SECRET)
    JWT_LIFETIME_DAYS = _get("JWT_LIFETIME_DAYS", 30)
    ADMIN_SIGNUP_SECRET = _get("ADMIN_SIGNUP_SECRET", INSECURE_ADMIN_SIGNUP_SECRET)
    PASSWORD_RESET_TTL_MINUTES = _get("PASSWORD_RESET_TTL_MINUTES", 60)
