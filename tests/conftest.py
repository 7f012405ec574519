"""
Pytest configuration and fixtures
"""
import json

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def polygon(west, south, east, north):
    """Rectangular GeoJSON polygon geometry."""
    return {
        "type": "Polygon",
        "coordinates": [[
            [west, south],
            [east, south],
            [east, north],
            [west, north],
            [west, south],
        ]],
    }


def point(longitude, latitude):
    return {"type": "Point", "coordinates": [longitude, latitude]}


@pytest.fixture
def outline_geojson():
    """Biome outline with a mis-encoded label and the country boundary."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"NomeDoPais": "Brasil", "CD_LEGEN1": "Brasil"},
                "geometry": polygon(-74.0, -34.0, -34.8, 5.3),
            },
            {
                "type": "Feature",
                "properties": {"CD_LEGEN1": "AMAZ\ufffdNIA"},
                "geometry": polygon(-73.0, -9.0, -44.0, 5.0),
            },
            {
                "type": "Feature",
                "properties": {"CD_LEGEN1": "Cerrado"},
                "geometry": polygon(-60.0, -24.0, -41.0, -2.0),
            },
            {
                "type": "Feature",
                "properties": {"CD_LEGEN1": "Mata Atlântica"},
                "geometry": polygon(-55.0, -30.0, -35.0, -3.0),
            },
            {
                "type": "Feature",
                "properties": {"CD_LEGEN1": "CERRADO"},
                "geometry": polygon(-50.0, -20.0, -45.0, -15.0),
            },
        ],
    }


@pytest.fixture
def fire_collections():
    """Two monthly fire detection datasets."""
    return [
        {
            "type": "FeatureCollection",
            "name": "queimadas_pontos1",
            "features": [
                {
                    "type": "Feature",
                    "properties": {
                        "bioma": "cerrado",
                        "data": "2024-05-03",
                        "satelite": "AQUA_M-T",
                        "confianca": "80",
                    },
                    "geometry": point(-47.9, -15.8),
                },
                {
                    "type": "Feature",
                    "properties": {"bioma": "Amazônia", "data": "2024-05-04"},
                    "geometry": point(-60.0, -3.1),
                },
                {
                    "type": "Feature",
                    "properties": {"data": "2024-05-05"},
                    "geometry": point(-50.0, -10.0),
                },
            ],
        },
        {
            "type": "FeatureCollection",
            "features": [
                {
                    "type": "Feature",
                    "properties": {"bioma": "Cerrado"},
                    "geometry": polygon(-48.0, -16.0, -47.5, -15.5),
                },
            ],
        },
    ]


@pytest.fixture
def data_dir(tmp_path, outline_geojson, fire_collections):
    """Datasets written to disk the way the app serves them."""
    data = tmp_path / "data"
    data.mkdir()
    (data / "divisao_bioma.geojson").write_text(json.dumps(outline_geojson), encoding="utf-8")
    (data / "queimadas_pontos1.geojson").write_text(json.dumps(fire_collections[0]), encoding="utf-8")
    (data / "queimadas_pontos2.geojson").write_text(json.dumps(fire_collections[1]), encoding="utf-8")
    return data


@pytest.fixture
def month_paths():
    return {
        "2024-05": "/data/queimadas_pontos1.geojson",
        "2024-06": "/data/queimadas_pontos2.geojson",
        "2024-07": "/data/queimadas_pontos3.geojson",
    }
