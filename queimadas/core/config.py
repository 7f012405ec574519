"""
Queimadas - Configuration Management
Centralized configuration using pydantic-settings.
"""

from functools import lru_cache
from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from queimadas.core import constants


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QUEIMADAS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    log_level: str = "INFO"

    # Data sources (URLs or local paths, resolved against data_base_url)
    data_base_url: Optional[str] = None
    biomas_outline_path: str = constants.BIOMAS_OUTLINE_PATH
    queimadas_month_paths: Dict[str, str] = Field(
        default_factory=lambda: dict(constants.QUEIMADAS_MONTH_PATHS)
    )
    default_month: str = "2024-05"

    # GeoJSON attribute names
    biome_label_field: str = constants.BIOME_LABEL_FIELD
    fire_biome_field: str = constants.FIRE_BIOME_FIELD
    country_field: str = constants.COUNTRY_FIELD
    country_sentinel: str = constants.COUNTRY_SENTINEL

    # Biome selection behaviour: "pass_through" or "strict"
    filter_policy: str = "pass_through"

    # Camera
    default_center_lat: float = constants.DEFAULT_CENTER[0]
    default_center_lon: float = constants.DEFAULT_CENTER[1]
    default_zoom: int = constants.DEFAULT_ZOOM
    fit_padding_px: int = constants.DEFAULT_FIT_PADDING_PX

    # HTTP / cache
    http_timeout_seconds: float = 30.0
    geojson_cache_ttl_seconds: int = 300

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
