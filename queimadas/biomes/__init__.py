"""
Queimadas - Biome Logic
Biome name normalization, fire/biome correlation and camera resolution.
"""

from queimadas.biomes.normalizer import normalize_biome_name, same_biome
from queimadas.biomes.correlator import (
    FilterPolicy,
    extract_biome_keys,
    filter_by_selection,
    count_by_biome,
)
from queimadas.biomes.bounds import (
    DEFAULT_VIEW,
    DefaultView,
    OutlineLayer,
    ViewRegion,
    resolve_bounds,
)

__all__ = [
    # Normalizer
    "normalize_biome_name",
    "same_biome",
    # Correlator
    "FilterPolicy",
    "extract_biome_keys",
    "filter_by_selection",
    "count_by_biome",
    # Bounds
    "DEFAULT_VIEW",
    "DefaultView",
    "OutlineLayer",
    "ViewRegion",
    "resolve_bounds",
]
