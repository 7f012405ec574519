"""
Queimadas - Data Ingestion Module
Loaders for the biome outline and fire detection datasets.
"""

from queimadas.ingestion.geojson_client import (
    GeoJSONClient,
    GeoJSONLoadError,
    QueimadasDatasets,
    load_datasets,
)

__all__ = [
    "GeoJSONClient",
    "GeoJSONLoadError",
    "QueimadasDatasets",
    "load_datasets",
]
