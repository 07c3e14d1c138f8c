from functools import lru_cache

from pydantic_settings import BaseSettings
from pydantic import EmailStr


class Settings(BaseSettings):
    # 1️⃣ Database
    DATABASE_URL: str
    DATABASE_ECHO: bool = False

    # 2️⃣ Email config
    MAIL_USERNAME: str
    MAIL_PASSWORD: str
    MAIL_FROM: EmailStr
    MAIL_PORT: int = 587
    MAIL_SERVER: str
    MAIL_FROM_NAME: str = "Contact Form"
    MAIL_STARTTLS: bool = True
    MAIL_SSL_TLS: bool = False
    USE_CREDENTIALS: bool = True
    MAIL_SUPPRESS_SEND: bool = False

    # operator who receives every contact notification
    OWNER_EMAIL: EmailStr

    # 3️⃣ Pipeline behaviour
    # when true a failed notification turns the whole request into a 500
    NOTIFICATION_REQUIRED: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # optional, for safety


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings once per process."""
    return Settings()
