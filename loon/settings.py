"""loon configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoonSettings(BaseSettings):
    """Environment driven defaults for the process-wide dictionary.

    Environment Variables:
        LOON_LOCALES_PATH_PATTERN: Glob pattern for locale documents
            (default: config/locales/*.*)
        LOON_DEFAULT_LOCALE: Locale used when a call names none (default: en)
        LOON_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOON_ENVIRONMENT: Deployment environment; "production" switches
            log rendering to JSON

    Example:
        ```python
        from loon.settings import get_settings

        settings = get_settings()
        pattern = settings.LOCALES_PATH_PATTERN
        ```
    """

    LOCALES_PATH_PATTERN: str = Field(
        default="config/locales/*.*",
        alias="LOON_LOCALES_PATH_PATTERN",
        description="Glob pattern used to discover locale documents",
    )
    DEFAULT_LOCALE: Optional[str] = Field(
        default=None,
        alias="LOON_DEFAULT_LOCALE",
        description="Default locale; the dictionary falls back to 'en' when unset",
    )
    LOG_LEVEL: str = Field(default="INFO", alias="LOON_LOG_LEVEL")
    ENVIRONMENT: str = Field(default="development", alias="LOON_ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production."""
        return self.ENVIRONMENT.lower() == "production"


@lru_cache
def get_settings() -> LoonSettings:
    """Get process-wide settings singleton.

    Returns:
        LoonSettings: Cached settings instance loaded from environment.
    """
    return LoonSettings()
