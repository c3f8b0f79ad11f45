"""Library configuration.

Configuration is loaded from environment variables using pydantic-settings.
Nothing is required: the calculation functions take all their inputs as
arguments, settings only supply optional defaults.

## Optional Environment Variables

- SUN_POSITION_DEFAULT_OBSERVER: Default observer as "lat,lon" in degrees
- SUN_POSITION_DEFAULT_LATITUDE: Default observer latitude in degrees
- SUN_POSITION_DEFAULT_LONGITUDE: Default observer longitude in degrees
- SUN_POSITION_LOG_LEVEL: Level for the `sun_position` logger (default: WARNING)
- SUN_POSITION_DEBUG: Shortcut for DEBUG logging (default: false)

## Example .env file

```
SUN_POSITION_DEFAULT_OBSERVER=51.5074,-0.1278
SUN_POSITION_LOG_LEVEL=INFO
```
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sun_position.models.location import Coordinates


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUN_POSITION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the sun_position logger",
    )

    # Default observer; the combined string wins over the separate values
    default_observer: str | None = Field(
        default=None,
        description="Default observer as 'latitude,longitude'",
    )
    default_latitude: float | None = None
    default_longitude: float | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_observer", mode="after")
    @classmethod
    def validate_default_observer(cls, v: str | None) -> str | None:
        """Reject observer strings that do not parse as coordinates."""
        if v is not None:
            Coordinates.from_string(v)
        return v

    @property
    def default_coordinates(self) -> Coordinates | None:
        """Default observer from the combined string, or both separate values."""
        if self.default_observer is not None:
            return Coordinates.from_string(self.default_observer)
        if self.default_latitude is None or self.default_longitude is None:
            return None
        return Coordinates(
            latitude=self.default_latitude, longitude=self.default_longitude
        )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger.

    Handlers are left to the application.
    """
    settings = settings or get_settings()
    logging.getLogger("sun_position").setLevel(settings.effective_log_level)
