"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Nothing is required; every setting has a working default.

## Optional Environment Variables

- LOG_LEVEL: Root log level for the CLI and server (default: INFO)
- CATALOG_PATH: JSON file with activities replacing the built-in catalog
- RECOMMENDATION_LIMIT: How many recommendations the API/CLI return by default
- DEBUG: Enable debug mode (default: false)

## Example .env file

```
LOG_LEVEL=DEBUG
CATALOG_PATH=/etc/activity-recommender/activities.json
RECOMMENDATION_LIMIT=6
```
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Activity Recommender"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="CORS allowed origins",
    )

    # Catalog
    catalog_path: Path | None = Field(
        default=None,
        description="JSON catalog replacing the built-in activities",
    )

    # Recommendations
    recommendation_limit: int = Field(default=6, ge=1, le=1000)

    # Browse filter
    browse_outdoor_high: float = Field(
        default=0.7, ge=0, le=1, description="Above this, indoor activities are hidden"
    )
    browse_outdoor_low: float = Field(
        default=0.3, ge=0, le=1, description="Below this, outdoor activities are hidden"
    )
    browse_physical_tolerance: float = Field(
        default=0.4, ge=0, le=1, description="Max physical level difference shown"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return str(v).upper()

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
