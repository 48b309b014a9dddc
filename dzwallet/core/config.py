# dzwallet/core/config.py
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # ==================== APPLICATION ====================
    APP_NAME: str = "DZ Wallet Gateway"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = Field(default=False)

    # ==================== API ====================
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = Field(default=["*"])

    # ==================== BACKEND (RPC) ====================
    BACKEND_URL: str = Field(default="http://localhost:54321")
    BACKEND_API_KEY: str | None = Field(default=None)
    BACKEND_TIMEOUT: float = Field(default=10.0, gt=0)

    # ==================== LOGGING ====================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_DIR: Path = Field(default=Path("./logs"))
    LOG_TO_FILE: bool = Field(default=True)

    # ==================== MONEY RULES ====================
    MIN_AMOUNT: float = Field(default=1, ge=0)
    MAX_AMOUNT: float = Field(default=1_000_000_000, gt=0)
    MIN_TRANSFER_AMOUNT: float = Field(default=100, ge=0)
    MAX_TRANSFER_AMOUNT: float = Field(default=100_000, gt=0)

    # ==================== RATE LIMITING ====================
    RATE_LIMIT_COOLDOWN_SECONDS: int = Field(default=30, ge=0)
    BILL_PAYMENT_MAX_ATTEMPTS: int = Field(default=3, ge=1)

    @field_validator("BACKEND_URL")
    def strip_trailing_slash(cls, value: str) -> str:
        """Backend paths are joined with a leading slash"""
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
