import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Session tokens (Authorization:*)
    AUTH_SECRET_KEY = data.get("AUTH_SECRET_KEY", "dev-secret-key-change-in-production")
    AUTH_AUDIENCE = data.get("AUTH_AUDIENCE", "employee-clients")
    AUTH_ISSUER = data.get("AUTH_ISSUER", "employee-account-service")
    AUTH_LIFETIME_MINUTES = int(data.get("AUTH_LIFETIME_MINUTES", 60))

    # Invite tokens (Invite:*), independent of the session-token key
    INVITE_SECRET_KEY = data.get("INVITE_SECRET_KEY", "dev-invite-key-change-in-production")
