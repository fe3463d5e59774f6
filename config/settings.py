"""
Application settings loaded from environment variables (and an optional .env file).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database (local device storage for the list and the orders)
    database_url: str = "sqlite:///shopsmart.db"

    # Kroger API (product image lookup)
    kroger_client_id: str = ""
    kroger_client_secret: str = ""
    kroger_location_id: str = ""  # Optional, narrows search to one store
    image_search_timeout: float = 10.0  # Seconds

    # Display
    display_timezone: str = ""  # IANA name, e.g. "Asia/Kolkata"; empty = local
    currency_symbol: str = "₹"

    # Totals
    delivery_fee: int = 0
    discount: int = 0

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
