"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "SplitTrip"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Database
    DATABASE_URL: str = "sqlite:///./splittrip.db"
    DB_ECHO: bool = False

    # JWT
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Trip codes
    TRIP_CODE_LENGTH: int = 6
    TRIP_CODE_MAX_ATTEMPTS: int = 10

    # Currency (amounts are always stored in minor units)
    CURRENCY_CODE: str = "INR"
    CURRENCY_SYMBOL: str = "₹"
    CURRENCY_DECIMALS: int = 2  # Minor units per major unit = 10 ** CURRENCY_DECIMALS

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
