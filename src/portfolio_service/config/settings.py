"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Portfolio Bucket Service"
    app_version: str = "0.1.0"

    # Listener (TLS termination is left to the deployment)
    host: str = "127.0.0.1"
    port: int = 8345

    log_level: str = "INFO"

    # Market data settings
    price_source: Literal["yahoo", "stub"] = "yahoo"
    price_cache_ttl_seconds: int = 15 * 60
    price_fetch_timeout_seconds: float = 10.0
    price_history_period: str = "1mo"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
