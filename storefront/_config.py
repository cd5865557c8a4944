"""
Settings — environment-driven configuration.

    STOREFRONT_GATEWAY_NAME=Wompi
    STOREFRONT_GATEWAY_TIMEOUT_SECONDS=30
    STOREFRONT_DATABASE_URL=sqlite+aiosqlite:///storefront.db
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    # Payment gateway
    gateway_name: str = Field(default="Wompi")
    gateway_timeout_seconds: float = Field(default=30.0, gt=0)

    # Catalog
    default_currency: str = Field(default="COP", min_length=3, max_length=3)

    # Persistence
    database_url: str = Field(default="sqlite+aiosqlite:///:memory:")

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("default_currency", "log_level")
    @classmethod
    def _upper(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ("Settings", "get_settings")
