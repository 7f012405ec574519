"""
Queimadas - Core Utilities
Central configuration, logging, and utility functions.
"""

from queimadas.core.constants import (
    DEFAULT_CENTER,
    DEFAULT_ZOOM,
    BIOME_LABEL_FIELD,
    FIRE_BIOME_FIELD,
    COUNTRY_FIELD,
    COUNTRY_SENTINEL,
)
from queimadas.core.config import settings, get_settings
from queimadas.core.geo_utils import (
    Point,
    BoundingBox,
    union_bounds,
)

__all__ = [
    "settings",
    "get_settings",
    "DEFAULT_CENTER",
    "DEFAULT_ZOOM",
    "BIOME_LABEL_FIELD",
    "FIRE_BIOME_FIELD",
    "COUNTRY_FIELD",
    "COUNTRY_SENTINEL",
    "Point",
    "BoundingBox",
    "union_bounds",
]
