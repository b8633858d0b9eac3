"""Configuration for the food ordering service."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Food ordering service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    APP_NAME: str = Field(default="Food Ordering Service")
    SERVICE_NAME: str = Field(default="food-ordering")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=False)

    # Order rules
    ORDER_CANCELLATION_WINDOW_MINUTES: int = Field(default=20, ge=1)
    UNIQUE_FOOD_NUMBER_PREFIX: str = Field(default="FO", min_length=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
