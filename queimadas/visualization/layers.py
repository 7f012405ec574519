"""
Queimadas - Outline Layers
Builds the biome outline layers (key + bounds) consumed by the camera.
"""

import logging
from typing import Any, Dict, List, Optional

from shapely.errors import ShapelyError
from shapely.geometry import shape

from queimadas.biomes.bounds import OutlineLayer
from queimadas.biomes.correlator import feature_property, is_country_feature, iter_features
from queimadas.biomes.normalizer import normalize_biome_name
from queimadas.core.constants import BIOME_LABEL_FIELD, COUNTRY_FIELD, COUNTRY_SENTINEL
from queimadas.core.geo_utils import BoundingBox

logger = logging.getLogger(__name__)


def feature_bounds(feature: Dict[str, Any]) -> Optional[BoundingBox]:
    """
    Get the bounding box of a GeoJSON feature.

    Returns:
        BoundingBox, or None for missing, empty or invalid geometry
    """
    geometry = feature.get("geometry")
    if not geometry:
        return None

    try:
        geom = shape(geometry)
    except (ShapelyError, KeyError, ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Skipping feature with invalid geometry: {e}")
        return None

    if geom.is_empty:
        return None
    return BoundingBox.from_bounds(geom.bounds)


def outline_layers(
    outline: Optional[Dict[str, Any]],
    label_field: str = BIOME_LABEL_FIELD,
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
    include_country: bool = False,
) -> List[OutlineLayer]:
    """
    Build one OutlineLayer per outline feature, in dataset order.

    Args:
        outline: Biome outline FeatureCollection (None if not loaded)
        label_field: Property holding the biome label
        country_field: Property identifying the country feature
        country_sentinel: Value of country_field on the country feature
        include_country: Keep the national boundary feature (with key None)

    Returns:
        List of OutlineLayer objects
    """
    layers = []
    for feature in iter_features(outline):
        is_country = is_country_feature(feature, country_field, country_sentinel)
        if is_country and not include_country:
            continue

        bounds = feature_bounds(feature)
        if bounds is None:
            continue

        key = None if is_country else normalize_biome_name(feature_property(feature, label_field))
        layers.append(OutlineLayer(key=key, bounds=bounds))

    return layers
