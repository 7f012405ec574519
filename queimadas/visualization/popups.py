"""
Queimadas - Popup Content
HTML shown when clicking biome outlines and fire detections.
"""

from html import escape
from typing import Any, Dict, Optional

from queimadas.biomes.correlator import feature_property, is_country_feature
from queimadas.biomes.normalizer import normalize_biome_name
from queimadas.core.constants import (
    BIOME_LABEL_FIELD,
    COUNTRY_FIELD,
    COUNTRY_SENTINEL,
    FIRE_BIOME_FIELD,
    FIRE_CONFIDENCE_FIELD,
    FIRE_DATE_FIELD,
    FIRE_SATELLITE_FIELD,
)

COUNTRY_POPUP = "Contorno do Brasil"


def biome_popup(
    feature: Dict[str, Any],
    label_field: str = BIOME_LABEL_FIELD,
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
) -> Optional[str]:
    """Popup for an outline feature, None if it has no biome label."""
    if is_country_feature(feature, country_field, country_sentinel):
        return COUNTRY_POPUP

    biome = normalize_biome_name(feature_property(feature, label_field))
    if not biome:
        return None
    return f"Bioma: <b>{escape(biome)}</b>"


def fire_popup(feature: Dict[str, Any], label_field: str = FIRE_BIOME_FIELD) -> str:
    """
    Popup for a fire detection.

    Points show their coordinates, other geometries their type. Date,
    satellite, confidence and biome lines appear only when present.
    """
    geometry = feature.get("geometry") or {}
    geometry_type = geometry.get("type")
    lines = ["<strong>Queimada Detectada</strong>"]

    if geometry_type == "Point":
        longitude, latitude = geometry["coordinates"][:2]
        lines.append(f"Latitude: {latitude:.4f}")
        lines.append(f"Longitude: {longitude:.4f}")
    else:
        lines.append(f"Tipo de Geometria: {escape(str(geometry_type))}")

    for field_name, label in (
        (FIRE_DATE_FIELD, "Data"),
        (FIRE_SATELLITE_FIELD, "Satélite"),
        (FIRE_CONFIDENCE_FIELD, "Confiança"),
    ):
        value = feature_property(feature, field_name)
        if value:
            lines.append(f"{label}: {escape(str(value))}")

    biome = normalize_biome_name(feature_property(feature, label_field))
    if biome:
        lines.append(f"Bioma: {escape(biome)}")

    return "<div>" + "<br/>".join(lines) + "<br/></div>"
