import os
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = os.getenv("ENV", "development")  # development, dev-server, production
    DEBUG: bool = ENV in ["development", "dev-server"]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")
    LOG_USE_COLORS: bool = os.getenv("LOG_USE_COLORS", "true").lower() == "true"
    SLOW_REQUEST_SECONDS: float = float(os.getenv("SLOW_REQUEST_SECONDS", "1.0"))

    # Auth settings
    SECRET_KEY: str = os.getenv("SECRET_KEY", "tiyende-super-secret-key")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

    # Bootstrap data
    SEED_SAMPLE_DATA: bool = os.getenv("SEED_SAMPLE_DATA", "true").lower() == "true"
    DEFAULT_ADMIN_USERNAME: str = os.getenv("DEFAULT_ADMIN_USERNAME", "admin")
    DEFAULT_ADMIN_PASSWORD: str = os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123")
    DEFAULT_ADMIN_EMAIL: str = os.getenv("DEFAULT_ADMIN_EMAIL", "admin@tiyende.com")

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # API specific settings
    API_PREFIX: str = "/api"
    APP_NAME: str = "Tiyende Bus Reservation"
    APP_VERSION: str = "1.0.0"

    class Config:
        case_sensitive = True
        env_file = None


settings = Settings()
