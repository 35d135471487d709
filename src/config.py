"""
Configuration management for the locale router.
Uses Pydantic Settings to load configuration from environment variables.
"""
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.errors import ConfigError
from src.domain.models import LocaleConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Locales
    # LOCALES is read as JSON, e.g. LOCALES='["en", "fr", "de"]'
    locales: list[str] = Field(
        default=["en", "ru", "zh", "fr", "es", "ar", "de"],
        description="Supported locale identifiers"
    )
    default_locale: str = Field(
        default="en",
        description="Locale used for paths without a locale prefix"
    )
    prefix_default: bool = Field(
        default=False,
        description="Also prefix paths of the default locale (/en/about instead of /about)"
    )

    # HTTP layer
    rewrite_localized_paths: bool = Field(
        default=True,
        description="Route /{locale}/path requests to the handler registered for /path"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")


def load_locale_config(source: Settings) -> LocaleConfig:
    """
    Build the immutable LocaleConfig from settings.

    Raises:
        ConfigError: If the locale settings are invalid
    """
    try:
        return LocaleConfig(
            locales=tuple(source.locales),
            default_locale=source.default_locale,
            prefix_default=source.prefix_default,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid locale configuration: {e}") from e


# Global settings instance
settings = Settings()
