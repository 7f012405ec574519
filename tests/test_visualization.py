"""
Tests for outline layers, popups and map generation
"""
import folium

from queimadas.biomes.correlator import FilterPolicy
from queimadas.core.geo_utils import BoundingBox
from queimadas.visualization.layers import feature_bounds, outline_layers
from queimadas.visualization.map_generator import (
    create_queimadas_map,
    generate_queimadas_map,
    style_outline,
)
from queimadas.visualization.popups import COUNTRY_POPUP, biome_popup, fire_popup


class TestOutlineLayers:
    """Test suite for outline layer construction."""

    def test_biome_layers_in_order(self, outline_geojson):
        layers = outline_layers(outline_geojson)

        assert [layer.key for layer in layers] == [
            "AMAZONIA", "CERRADO", "MATA ATLANTICA", "CERRADO",
        ]
        assert layers[0].bounds == BoundingBox(-73.0, -9.0, -44.0, 5.0)

    def test_include_country(self, outline_geojson):
        layers = outline_layers(outline_geojson, include_country=True)

        assert layers[0].key is None
        assert layers[0].bounds == BoundingBox(-74.0, -34.0, -34.8, 5.3)

    def test_no_outline(self):
        assert outline_layers(None) == []

    def test_feature_bounds_point(self):
        feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [-47.9, -15.8]}}

        assert feature_bounds(feature) == BoundingBox(-47.9, -15.8, -47.9, -15.8)

    def test_feature_bounds_missing_or_invalid(self):
        assert feature_bounds({"type": "Feature", "geometry": None}) is None
        assert feature_bounds({"type": "Feature", "geometry": {"type": "Blob", "coordinates": []}}) is None

    def test_invalid_geometry_skipped(self, outline_geojson):
        outline_geojson["features"].append({
            "type": "Feature",
            "properties": {"CD_LEGEN1": "Pampa"},
            "geometry": {"type": "Blob", "coordinates": []},
        })

        keys = [layer.key for layer in outline_layers(outline_geojson)]

        assert "PAMPA" not in keys


class TestPopups:
    """Test popup content."""

    def test_country_popup(self, outline_geojson):
        assert biome_popup(outline_geojson["features"][0]) == COUNTRY_POPUP

    def test_biome_popup(self, outline_geojson):
        assert biome_popup(outline_geojson["features"][1]) == "Bioma: <b>AMAZONIA</b>"

    def test_biome_popup_without_label(self):
        assert biome_popup({"type": "Feature", "properties": {}}) is None

    def test_fire_point_popup(self, fire_collections):
        html = fire_popup(fire_collections[0]["features"][0])

        assert "Queimada Detectada" in html
        assert "Latitude: -15.8000" in html
        assert "Longitude: -47.9000" in html
        assert "Data: 2024-05-03" in html
        assert "Satélite: AQUA_M-T" in html
        assert "Confiança: 80" in html
        assert "Bioma: CERRADO" in html

    def test_fire_polygon_popup(self, fire_collections):
        html = fire_popup(fire_collections[1]["features"][0])

        assert "Tipo de Geometria: Polygon" in html
        assert "Latitude" not in html

    def test_optional_lines_omitted(self, fire_collections):
        html = fire_popup(fire_collections[0]["features"][2])

        assert "Satélite" not in html
        assert "Bioma" not in html


class TestMapGenerator:
    """Test suite for map generation."""

    def test_style_outline(self, outline_geojson):
        assert style_outline(outline_geojson["features"][0])["fillColor"] == "#DAA520"
        assert style_outline(outline_geojson["features"][1])["color"] == "#0000FF"

    def test_create_map(self, outline_geojson, fire_collections):
        fire_map = create_queimadas_map(outline_geojson, fire_collections)

        assert isinstance(fire_map, folium.Map)
        html = fire_map.get_root().render()
        assert "Todos os Biomas" in html
        assert "4 focos de calor" in html

    def test_strict_selection_hides_other_biomes(self, outline_geojson, fire_collections):
        fire_map = create_queimadas_map(
            outline_geojson, fire_collections, selection="Amazônia", policy=FilterPolicy.STRICT
        )

        html = fire_map.get_root().render()
        assert "Bioma: AMAZONIA" in html
        assert "1 focos de calor" in html

    def test_pass_through_selection_keeps_fires(self, outline_geojson, fire_collections):
        fire_map = create_queimadas_map(outline_geojson, fire_collections, selection="CERRADO")

        html = fire_map.get_root().render()
        assert "4 focos de calor" in html
        assert "fitBounds" in html

    def test_map_without_outline(self, fire_collections):
        fire_map = create_queimadas_map(None, fire_collections, selection="CERRADO")

        assert isinstance(fire_map, folium.Map)
        assert fire_map.location == [-15.78, -47.93]

    def test_generate_map_file(self, tmp_path, outline_geojson, fire_collections):
        output = tmp_path / "map.html"

        path = generate_queimadas_map(outline_geojson, fire_collections, output_path=str(output))

        assert path == str(output)
        assert output.exists()
        assert "Queimada Detectada" in output.read_text(encoding="utf-8")

    def test_title_is_escaped(self, outline_geojson, fire_collections):
        fire_map = create_queimadas_map(
            outline_geojson, fire_collections, title="<script>alert(1)</script>"
        )

        html = fire_map.get_root().render()
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "<script>alert(1)</script>" not in html


class TestCountryFields:
    """Country boundary detected through configurable field names."""

    def setup_method(self):
        self.country = {
            "type": "Feature",
            "properties": {"PAIS": "BR", "CD_LEGEN1": "Brasil"},
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[-74.0, -34.0], [-34.8, -34.0], [-34.8, 5.3], [-74.0, 5.3], [-74.0, -34.0]]],
            },
        }
        self.outline = {"type": "FeatureCollection", "features": [self.country]}

    def test_style_outline(self):
        assert style_outline(self.country, "PAIS", "BR")["fillColor"] == "#DAA520"
        assert style_outline(self.country)["color"] == "#0000FF"

    def test_biome_popup(self):
        assert biome_popup(self.country, country_field="PAIS", country_sentinel="BR") == COUNTRY_POPUP
        assert biome_popup(self.country) == "Bioma: <b>BRASIL</b>"

    def test_country_is_not_a_selectable_biome(self):
        fire_map = create_queimadas_map(
            self.outline, [], selection="Brasil", country_field="PAIS", country_sentinel="BR"
        )

        assert fire_map.location == [-15.78, -47.93]
        assert "fitBounds" not in fire_map.get_root().render()

    def test_default_fields_treat_it_as_biome(self):
        fire_map = create_queimadas_map(self.outline, [], selection="Brasil")

        assert "fitBounds" in fire_map.get_root().render()
