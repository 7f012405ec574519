"""
Map Visualization Module for Queimadas

Generates interactive maps using Folium to display fire detections over
the Brazilian biome outlines, with optional biome selection.
"""

import copy
import logging
from html import escape
from typing import Any, Dict, List, Optional

import folium

from queimadas.biomes.bounds import DEFAULT_VIEW, DefaultView, ViewRegion, resolve_bounds
from queimadas.biomes.correlator import (
    FilterPolicy,
    filter_by_selection,
    is_country_feature,
    iter_features,
)
from queimadas.biomes.normalizer import normalize_biome_name
from queimadas.core.constants import (
    BIOME_LABEL_FIELD,
    BIOME_OUTLINE_STYLE,
    COUNTRY_FIELD,
    COUNTRY_OUTLINE_STYLE,
    COUNTRY_SENTINEL,
    DEFAULT_FIT_PADDING_PX,
    FIRE_BIOME_FIELD,
    FIRE_POINT_STYLE,
    FIRE_POLYGON_STYLE,
    MAP_MAX_BOUNDS,
    MIN_ZOOM,
    TILE_ATTRIBUTION,
    TILE_URL,
)
from queimadas.visualization.layers import outline_layers
from queimadas.visualization.popups import biome_popup, fire_popup

logger = logging.getLogger(__name__)


def style_outline(
    feature: Dict[str, Any],
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
) -> Dict[str, Any]:
    """Country boundary in black over gold, biome divisions as blue lines."""
    if is_country_feature(feature, country_field, country_sentinel):
        return dict(COUNTRY_OUTLINE_STYLE)
    return dict(BIOME_OUTLINE_STYLE)


def style_fire_polygon(feature: Dict[str, Any]) -> Dict[str, Any]:
    """Fire polygons in semi-transparent red."""
    return dict(FIRE_POLYGON_STYLE)


def create_base_map(view: ViewRegion) -> folium.Map:
    """Create the Brazil-restricted base map positioned at the given view."""
    (south, west), (north, east) = MAP_MAX_BOUNDS
    center = view.center.to_tuple() if view.center else DEFAULT_VIEW.center.to_tuple()

    fire_map = folium.Map(
        location=center,
        zoom_start=view.zoom or DEFAULT_VIEW.zoom,
        min_zoom=MIN_ZOOM,
        max_bounds=True,
        min_lat=south,
        max_lat=north,
        min_lon=west,
        max_lon=east,
        tiles=None,
    )

    folium.TileLayer(
        tiles=TILE_URL,
        name="OpenStreetMap",
        attr=TILE_ATTRIBUTION,
    ).add_to(fire_map)

    if view.is_fit:
        fire_map.fit_bounds(view.bounds.to_leaflet(), padding=view.padding)

    return fire_map


def add_outline_layer(
    fire_map: folium.Map,
    outline: Dict[str, Any],
    label_field: str = BIOME_LABEL_FIELD,
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
) -> folium.FeatureGroup:
    """Add the biome outlines (and the country boundary) to the map."""
    outline_group = folium.FeatureGroup(name="Biomas")

    for feature in iter_features(outline):
        if not feature.get("geometry"):
            continue
        layer = folium.GeoJson(
            feature,
            style_function=lambda x: style_outline(x, country_field, country_sentinel),
        )
        popup_html = biome_popup(feature, label_field, country_field, country_sentinel)
        if popup_html:
            folium.Popup(popup_html, max_width=300).add_to(layer)
        layer.add_to(outline_group)

    outline_group.add_to(fire_map)
    return outline_group


def add_fire_layer(
    fire_map: folium.Map,
    collection: Dict[str, Any],
    name: str = "Queimadas",
    label_field: str = FIRE_BIOME_FIELD,
) -> folium.FeatureGroup:
    """Add one fire detection collection: points as circles, polygons in red."""
    fire_group = folium.FeatureGroup(name=name)

    for feature in iter_features(collection):
        geometry = feature.get("geometry")
        if not geometry:
            continue

        popup = folium.Popup(fire_popup(feature, label_field), max_width=300)

        if geometry.get("type") == "Point":
            longitude, latitude = geometry["coordinates"][:2]
            folium.CircleMarker(
                location=[latitude, longitude],
                popup=popup,
                fill=True,
                **FIRE_POINT_STYLE,
            ).add_to(fire_group)
        else:
            layer = folium.GeoJson(feature, style_function=style_fire_polygon)
            popup.add_to(layer)
            layer.add_to(fire_group)

    fire_group.add_to(fire_map)
    return fire_group


def create_queimadas_map(
    outline: Optional[Dict[str, Any]],
    fire_collections: List[Dict[str, Any]],
    selection: Optional[str] = None,
    policy: FilterPolicy = FilterPolicy.PASS_THROUGH,
    title: str = "Mapa de Queimadas por Bioma",
    default_view: DefaultView = DEFAULT_VIEW,
    padding: int = DEFAULT_FIT_PADDING_PX,
    label_field: str = BIOME_LABEL_FIELD,
    fire_label_field: str = FIRE_BIOME_FIELD,
    country_field: str = COUNTRY_FIELD,
    country_sentinel: str = COUNTRY_SENTINEL,
) -> folium.Map:
    """
    Create an interactive map with biome outlines and fire detections.

    Args:
        outline: Biome outline FeatureCollection (None if not loaded)
        fire_collections: Fire detection FeatureCollections
        selection: Selected biome (raw label or key), None for all biomes
        policy: Whether the selection hides fires from other biomes
        title: Map title
        default_view: Fallback viewport
        padding: Fit padding in pixels
        label_field: Biome label property on the outline
        fire_label_field: Biome label property on fire detections
        country_field: Property identifying the country feature
        country_sentinel: Value of country_field on the country feature

    Returns:
        Folium Map object
    """
    selection = normalize_biome_name(selection)

    # folium annotates GeoJSON features in place
    outline = copy.deepcopy(outline)
    fire_collections = copy.deepcopy(fire_collections)

    layers = outline_layers(
        outline,
        label_field=label_field,
        country_field=country_field,
        country_sentinel=country_sentinel,
        include_country=True,
    )
    view = resolve_bounds(selection, layers, default_view=default_view, padding=padding)

    fire_map = create_base_map(view)

    if outline:
        add_outline_layer(fire_map, outline, label_field, country_field, country_sentinel)
    else:
        logger.warning("No biome outline provided, drawing fires only")

    visible = filter_by_selection(fire_collections, selection, policy, fire_label_field)
    fire_count = 0
    for index, collection in enumerate(visible):
        add_fire_layer(fire_map, collection, name=f"Queimadas {index + 1}", label_field=fire_label_field)
        fire_count += len(iter_features(collection))

    folium.LayerControl(position="topright").add_to(fire_map)

    # Add title
    subtitle = f"Bioma: {escape(selection)}" if selection else "Todos os Biomas"
    title_html = f'''
    <div style="position: fixed;
                top: 10px; left: 50px;
                background-color: rgba(40,44,52,0.9);
                padding: 10px 20px;
                border-radius: 5px;
                z-index: 9999;
                font-family: Arial;">
        <h3 style="margin: 0; color: white;">{escape(title)}</h3>
        <p style="margin: 5px 0 0 0; color: #ccc; font-size: 12px;">
            {subtitle} | {fire_count} focos de calor
        </p>
    </div>
    '''
    fire_map.get_root().html.add_child(folium.Element(title_html))

    # Add legend
    legend_html = '''
    <div style="position: fixed;
                bottom: 30px; right: 30px;
                background-color: rgba(255,255,255,0.9);
                padding: 10px;
                border-radius: 5px;
                z-index: 9999;
                font-family: Arial;
                font-size: 12px;
                color: #333;">
        <span style="color: #FF0000;">●</span> Queimada<br>
        <span style="color: #0000FF;">━</span> Limite de bioma<br>
        <span style="color: #000000;">━</span> Contorno do Brasil
    </div>
    '''
    fire_map.get_root().html.add_child(folium.Element(legend_html))

    logger.info(f"Created map with {fire_count} fire features (biome={selection}, policy={FilterPolicy(policy).value})")
    return fire_map


def generate_queimadas_map(
    outline: Optional[Dict[str, Any]],
    fire_collections: List[Dict[str, Any]],
    output_path: str = "queimadas_map.html",
    **kwargs: Any,
) -> str:
    """
    Generate and save a fire map.

    Args:
        outline: Biome outline FeatureCollection
        fire_collections: Fire detection FeatureCollections
        output_path: Path to save HTML file
        **kwargs: Passed to create_queimadas_map

    Returns:
        Path to saved file
    """
    fire_map = create_queimadas_map(outline, fire_collections, **kwargs)
    fire_map.save(output_path)
    logger.info(f"Map saved to {output_path}")

    return output_path
