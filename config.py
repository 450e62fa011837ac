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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./gym.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 7 * 24 * 60))
    BASE_URL = data.get("BASE_URL", "http://localhost:8000")
    DAILY_RUN_HOUR = int(data.get("DAILY_RUN_HOUR", 9))
    SCHEDULER_ENABLED = bool(data.get("SCHEDULER_ENABLED", True))
    EMAIL_ENABLED = bool(data.get("EMAIL_ENABLED", False))
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    MAIL_FROM = data.get("MAIL_FROM", "Gym Management <no-reply@gym.local>")
    ADMIN_SEED_EMAIL = data.get("ADMIN_SEED_EMAIL", "admin@gym.com")
    ADMIN_SEED_PASSWORD = data.get("ADMIN_SEED_PASSWORD", "admin123")
