"""
Queimadas - Visualization Module
Folium map generation, outline layers and popups.
"""

from queimadas.visualization.layers import feature_bounds, outline_layers
from queimadas.visualization.popups import biome_popup, fire_popup
from queimadas.visualization.map_generator import (
    create_queimadas_map,
    generate_queimadas_map,
)

__all__ = [
    "feature_bounds",
    "outline_layers",
    "biome_popup",
    "fire_popup",
    "create_queimadas_map",
    "generate_queimadas_map",
]
