"""
Queimadas - Camera Bounds Resolution
Decides which viewport the map shows for the current biome selection.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from queimadas.biomes.normalizer import normalize_biome_name
from queimadas.core.constants import DEFAULT_CENTER, DEFAULT_FIT_PADDING_PX, DEFAULT_ZOOM
from queimadas.core.geo_utils import BoundingBox, Point, union_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutlineLayer:
    """A biome outline region: its normalized key and geometry bounds."""
    key: Optional[str]
    bounds: BoundingBox


@dataclass(frozen=True)
class DefaultView:
    """Fixed fallback viewport."""
    center: Point
    zoom: int

    @classmethod
    def from_settings(cls, settings) -> "DefaultView":
        """Build from the default_center_* / default_zoom settings."""
        return cls(
            center=Point(
                latitude=settings.default_center_lat,
                longitude=settings.default_center_lon,
            ),
            zoom=settings.default_zoom,
        )


@dataclass(frozen=True)
class ViewRegion:
    """
    Viewport to apply to the map.

    Either a region to fit (bounds + padding in pixels) or a fixed
    center/zoom view when no region is known.
    """
    bounds: Optional[BoundingBox] = None
    padding: Tuple[int, int] = (0, 0)
    center: Optional[Point] = None
    zoom: Optional[int] = None

    @property
    def is_fit(self) -> bool:
        return self.bounds is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.is_fit:
            return {
                "mode": "fit_bounds",
                "bounds": self.bounds.to_leaflet(),
                "padding": list(self.padding),
            }
        return {
            "mode": "set_view",
            "center": list(self.center.to_tuple()),
            "zoom": self.zoom,
        }


DEFAULT_VIEW = DefaultView(
    center=Point(latitude=DEFAULT_CENTER[0], longitude=DEFAULT_CENTER[1]),
    zoom=DEFAULT_ZOOM,
)


def default_region(default_view: DefaultView = DEFAULT_VIEW) -> ViewRegion:
    """ViewRegion for the fixed fallback viewport."""
    return ViewRegion(center=default_view.center, zoom=default_view.zoom)


def fit_region(bounds: BoundingBox, padding: int = DEFAULT_FIT_PADDING_PX) -> ViewRegion:
    """ViewRegion fitting the given bounds with a padding margin."""
    return ViewRegion(bounds=bounds, padding=(padding, padding))


def resolve_bounds(
    selection: Optional[str],
    outline_layers: Iterable[OutlineLayer],
    default_view: DefaultView = DEFAULT_VIEW,
    padding: int = DEFAULT_FIT_PADDING_PX,
) -> ViewRegion:
    """
    Resolve the viewport for a biome selection.

    With no selection, fits the whole outline dataset. With a selection, fits
    the first outline layer carrying that key; if several layers share the
    key only the first one is used. Falls back to the default view when the
    outline is not loaded or the biome has no layer.

    Args:
        selection: Selected biome key (raw labels are normalized), or None
        outline_layers: Outline regions in dataset order
        default_view: Fallback viewport
        padding: Fit padding in pixels

    Returns:
        ViewRegion to apply to the map
    """
    layers = list(outline_layers or [])
    selected_key = normalize_biome_name(selection)

    if selected_key is None:
        bounds = union_bounds(layer.bounds for layer in layers)
        if bounds is None:
            return default_region(default_view)
        return fit_region(bounds, padding)

    for layer in layers:
        if layer.key is not None and layer.key == selected_key:
            return fit_region(layer.bounds, padding)

    logger.warning(f"No outline layer found for biome '{selection}', resetting view")
    return default_region(default_view)
