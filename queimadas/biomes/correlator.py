"""
Queimadas - Fire / Biome Correlation
Derives the biome list from the outline dataset and filters fire detections
by the selected biome.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from queimadas.biomes.normalizer import normalize_biome_name
from queimadas.core.constants import (
    BIOME_LABEL_FIELD,
    COUNTRY_FIELD,
    COUNTRY_SENTINEL,
    FIRE_BIOME_FIELD,
)

logger = logging.getLogger(__name__)

Feature = Dict[str, Any]
FeatureCollection = Dict[str, Any]


class FilterPolicy(str, Enum):
    """
    How a biome selection affects fire visibility.

    PASS_THROUGH: selection only moves the camera, every fire stays visible.
    STRICT: fires outside the selected biome are hidden.
    """

    PASS_THROUGH = "pass_through"
    STRICT = "strict"


def iter_features(data: Union[FeatureCollection, Iterable[Feature], None]) -> List[Feature]:
    """
    Return the features of a FeatureCollection, a bare feature list, or [].

    Entries that are not GeoJSON objects (None, numbers, strings) are skipped.
    """
    if not data:
        return []
    features = data.get("features") if isinstance(data, dict) else data
    if isinstance(features, (str, bytes, dict)) or not isinstance(features, Iterable):
        return []
    return [feature for feature in features if isinstance(feature, dict)]


def feature_property(feature: Feature, name: str) -> Any:
    """Get a property of a GeoJSON feature, None when absent."""
    if not isinstance(feature, dict):
        return None
    properties = feature.get("properties")
    if not isinstance(properties, dict):
        return None
    return properties.get(name)


def is_country_feature(
    feature: Feature,
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
) -> bool:
    """Check if the feature is the national boundary rather than a biome region."""
    return feature_property(feature, country_field) == country_sentinel


def extract_biome_keys(
    outline_features: Union[FeatureCollection, Iterable[Feature], None],
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
    label_field: str = BIOME_LABEL_FIELD,
) -> List[str]:
    """
    Get the distinct biome keys found in an outline dataset.

    Args:
        outline_features: Outline FeatureCollection or list of features
        country_field: Property identifying the country feature
        country_sentinel: Value of country_field on the country feature
        label_field: Property holding the biome label

    Returns:
        Normalized biome keys, sorted ascending, without duplicates
    """
    unique_biomes = set()
    for feature in iter_features(outline_features):
        if is_country_feature(feature, country_field, country_sentinel):
            continue
        biome_name = normalize_biome_name(feature_property(feature, label_field))
        if biome_name:
            unique_biomes.add(biome_name)

    return sorted(unique_biomes)


def feature_matches(
    feature: Feature,
    selection: Optional[str],
    label_field: str = FIRE_BIOME_FIELD,
) -> bool:
    """Check if a feature's biome equals the selected key. Missing biomes never match."""
    biome = normalize_biome_name(feature_property(feature, label_field))
    return biome is not None and biome == selection


def filter_by_selection(
    collections: Optional[Iterable[FeatureCollection]],
    selection: Optional[str],
    policy: FilterPolicy = FilterPolicy.PASS_THROUGH,
    label_field: str = FIRE_BIOME_FIELD,
) -> List[FeatureCollection]:
    """
    Select the fire features to render for a biome selection.

    Args:
        collections: Fire detection FeatureCollections, one per data source
        selection: Selected biome key, or None for all biomes
        policy: PASS_THROUGH keeps every feature, STRICT keeps the selected biome only
        label_field: Property holding the fire's biome label

    Returns:
        New list of FeatureCollections. Input collections are not modified.
    """
    collections = list(collections or [])
    policy = FilterPolicy(policy)

    # Raw labels are accepted as selection
    selection = normalize_biome_name(selection)

    if policy is FilterPolicy.PASS_THROUGH or selection is None:
        return collections

    filtered = []
    for collection in collections:
        features = iter_features(collection)
        kept = [f for f in features if feature_matches(f, selection, label_field)]
        logger.debug(f"Biome {selection}: kept {len(kept)} of {len(features)} features")
        if isinstance(collection, dict):
            filtered.append({**collection, "features": kept})
        else:
            filtered.append({"type": "FeatureCollection", "features": kept})

    return filtered


def count_by_biome(
    collections: Optional[Iterable[FeatureCollection]],
    label_field: str = FIRE_BIOME_FIELD,
) -> Dict[Optional[str], int]:
    """
    Count fire features per normalized biome key.

    Features without a biome are counted under None.
    """
    counts: Dict[Optional[str], int] = {}
    for collection in collections or []:
        for feature in iter_features(collection):
            key = normalize_biome_name(feature_property(feature, label_field))
            counts[key] = counts.get(key, 0) + 1
    return counts
