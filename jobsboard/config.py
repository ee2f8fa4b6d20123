import os
from dataclasses import dataclass


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "super-secret-key")

    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite:///jobsboard.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "jwt-super-secret")

    # development | production | anything else (no real mail outside production)
    APP_ENV = os.getenv("APP_ENV", "development")

    # SMTP (Flask-Mail); STARTTLS is always required
    MAIL_SERVER = os.getenv("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USE_TLS = True
    MAIL_USE_SSL = False
    MAIL_USERNAME = os.getenv("MAIL_USERNAME", "")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", "")
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", os.getenv("MAIL_USERNAME", ""))

    # Mail queue
    MAIL_OVERSIGHT_ADDRESS = os.getenv("MAIL_OVERSIGHT_ADDRESS", "careers@csesoc.org.au")
    MAIL_DAILY_LIMIT = int(os.getenv("MAIL_DAILY_LIMIT", "100"))
    MAIL_MAX_ATTEMPTS = int(os.getenv("MAIL_MAX_ATTEMPTS", "1"))
    MAIL_STRICT_VALIDATION = _flag("MAIL_STRICT_VALIDATION")
    MAIL_QUEUE_ENABLED = _flag("MAIL_QUEUE_ENABLED", "1" if APP_ENV == "production" else "0")

    PASSWORD_RESET_EXPIRES_MINUTES = int(os.getenv("PASSWORD_RESET_EXPIRES_MINUTES", "60"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    APP_ENV = "testing"
    MAIL_USERNAME = "jobsboard@example.com"
    MAIL_DEFAULT_SENDER = "jobsboard@example.com"
    MAIL_OVERSIGHT_ADDRESS = "oversight@example.com"
    MAIL_MAX_ATTEMPTS = 1
    MAIL_STRICT_VALIDATION = False
    MAIL_QUEUE_ENABLED = False
    MAIL_SUPPRESS_SEND = True


@dataclass(frozen=True)
class MailSettings:
    """Mail queue settings, built once per app and passed to the queue components."""

    sender: str
    password: str
    smtp_server: str
    smtp_port: int
    environment: str
    oversight_address: str
    daily_limit: int = 100
    max_attempts: int = 1
    strict_validation: bool = False

    @classmethod
    def from_config(cls, config) -> "MailSettings":
        return cls(
            sender=config.get("MAIL_USERNAME") or "",
            password=config.get("MAIL_PASSWORD") or "",
            smtp_server=config.get("MAIL_SERVER") or "",
            smtp_port=int(config.get("MAIL_PORT") or 0),
            environment=config.get("APP_ENV") or "development",
            oversight_address=config.get("MAIL_OVERSIGHT_ADDRESS") or "",
            daily_limit=int(config.get("MAIL_DAILY_LIMIT") or 0),
            max_attempts=max(1, int(config.get("MAIL_MAX_ATTEMPTS") or 1)),
            strict_validation=bool(config.get("MAIL_STRICT_VALIDATION")),
        )

    @property
    def is_live(self) -> bool:
        return self.environment == "production"

    def require_smtp_credentials(self):
        missing = [
            name for name, value in (
                ("MAIL_SERVER", self.smtp_server),
                ("MAIL_USERNAME", self.sender),
                ("MAIL_PASSWORD", self.password),
            ) if not value
        ]
        if missing:
            raise ValueError(f"Missing mail configuration: {', '.join(missing)}")
