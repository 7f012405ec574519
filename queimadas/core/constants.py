"""
Queimadas - Constants and Reference Data
Static values used throughout the application.
"""

from typing import Any, Dict, Tuple

# =============================================================================
# GEOGRAPHIC BOUNDARIES
# =============================================================================

# Default viewport: Brasília, zoom 4
DEFAULT_CENTER: Tuple[float, float] = (-15.78, -47.93)
DEFAULT_ZOOM: int = 4

# Navigable area of the map ((south, west), (north, east))
MAP_MAX_BOUNDS: Tuple[Tuple[float, float], Tuple[float, float]] = (
    (-35.0, -75.0),
    (6.0, -32.0),
)
MIN_ZOOM: int = 4

# Padding applied when fitting the map to a region (pixels)
DEFAULT_FIT_PADDING_PX: int = 20

# =============================================================================
# DATASETS
# =============================================================================

BIOMAS_OUTLINE_PATH: str = "/data/divisao_bioma.geojson"

# Month key (YYYY-MM) -> fire detection dataset
QUEIMADAS_MONTH_PATHS: Dict[str, str] = {
    "2024-05": "/data/queimadas_pontos1.geojson",
    "2024-06": "/data/queimadas_pontos2.geojson",
    "2024-07": "/data/queimadas_pontos3.geojson",
}

# =============================================================================
# GEOJSON ATTRIBUTES
# =============================================================================

# Biome label on the outline dataset
BIOME_LABEL_FIELD: str = "CD_LEGEN1"

# Biome label on fire detection features
FIRE_BIOME_FIELD: str = "bioma"

# The national boundary feature is tagged with NomeDoPais == "Brasil"
COUNTRY_FIELD: str = "NomeDoPais"
COUNTRY_SENTINEL: str = "Brasil"

# Display-only attributes of a fire detection
FIRE_DATE_FIELD: str = "data"
FIRE_SATELLITE_FIELD: str = "satelite"
FIRE_CONFIDENCE_FIELD: str = "confianca"

# =============================================================================
# BIOME DATA
# =============================================================================

# Label shown for the "no selection" option
ALL_BIOMES_LABEL: str = "Todos os Biomas"

# =============================================================================
# MAP STYLES
# =============================================================================

TILE_URL: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILE_ATTRIBUTION: str = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)

COUNTRY_OUTLINE_STYLE: Dict[str, Any] = {
    "color": "#000000",
    "weight": 3,
    "opacity": 1,
    "fillColor": "#DAA520",
    "fillOpacity": 1,
}

BIOME_OUTLINE_STYLE: Dict[str, Any] = {
    "color": "#0000FF",
    "weight": 1.5,
    "opacity": 0.8,
    "fillColor": "transparent",
    "fillOpacity": 0,
}

FIRE_POLYGON_STYLE: Dict[str, Any] = {
    "color": "#FF0000",
    "weight": 1,
    "opacity": 0.7,
    "fillColor": "#FF0000",
    "fillOpacity": 0.4,
}

FIRE_POINT_STYLE: Dict[str, Any] = {
    "radius": 4,
    "fill_color": "#FF0000",
    "color": "#000",
    "weight": 0.5,
    "opacity": 1,
    "fill_opacity": 0.8,
}
