"""
GeoJSON Data Client for Queimadas

This module loads the static GeoJSON datasets the map is built from:

- Biome outlines (divisao_bioma.geojson): one feature per biome region plus
  the national boundary of Brazil
- Fire detections (queimadas_pontos*.geojson): one file per month

Sources may be http(s) URLs or local paths. Relative paths are resolved
against the configured base URL when one is set.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import httpx

from queimadas.core.config import settings

logger = logging.getLogger(__name__)


class GeoJSONLoadError(Exception):
    """Raised when a GeoJSON dataset cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load GeoJSON from {source}: {reason}")


@dataclass
class QueimadasDatasets:
    """Snapshot of the datasets needed to draw one map."""
    outline: Optional[Dict[str, Any]]
    fires: List[Dict[str, Any]] = field(default_factory=list)
    month: Optional[str] = None

    @property
    def fire_count(self) -> int:
        return sum(len(c.get("features") or []) for c in self.fires)


class GeoJSONClient:
    """
    Client for the static GeoJSON datasets.

    Usage:
        with GeoJSONClient(base_url="https://example.org") as client:
            outline = client.load_outline()
            fires = client.load_month("2024-05")

    Loaded datasets are cached per source for cache_ttl seconds.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        cache_ttl: Optional[int] = None,
        month_paths: Optional[Dict[str, str]] = None,
        outline_path: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize GeoJSON client.

        Args:
            base_url: Prefix for relative dataset paths (local paths if None)
            timeout: HTTP request timeout in seconds
            cache_ttl: Cache lifetime in seconds, 0 disables caching
            month_paths: Month key (YYYY-MM) -> fire dataset path
            outline_path: Biome outline dataset path
            transport: Custom httpx transport (used in tests)
        """
        self.base_url = base_url if base_url is not None else settings.data_base_url
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.cache_ttl = cache_ttl if cache_ttl is not None else settings.geojson_cache_ttl_seconds
        self.month_paths = dict(month_paths if month_paths is not None else settings.queimadas_month_paths)
        self.outline_path = outline_path or settings.biomas_outline_path
        self._client = httpx.Client(timeout=self.timeout, transport=transport)
        self._cache: Dict[str, Tuple[float, Dict[str, Any]]] = {}

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def months(self) -> List[str]:
        """Available month keys, in configuration order."""
        return list(self.month_paths)

    def resolve(self, source: str) -> str:
        """Turn a dataset path into a URL or local file path."""
        if source.startswith(("http://", "https://")):
            return source
        if self.base_url:
            return f"{self.base_url.rstrip('/')}/{source.lstrip('/')}"
        return source

    def clear_cache(self) -> None:
        self._cache.clear()

    def _get_cached(self, location: str) -> Optional[Dict[str, Any]]:
        if self.cache_ttl <= 0:
            return None
        entry = self._cache.get(location)
        if entry is None:
            return None
        stored_at, data = entry
        if time.monotonic() - stored_at > self.cache_ttl:
            del self._cache[location]
            return None
        return data

    def _fetch_text(self, location: str) -> str:
        if location.startswith(("http://", "https://")):
            try:
                response = self._client.get(location)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise GeoJSONLoadError(location, f"HTTP {e.response.status_code}") from e
            except httpx.HTTPError as e:
                raise GeoJSONLoadError(location, str(e)) from e
            return response.text

        try:
            return Path(location).read_text(encoding="utf-8")
        except OSError as e:
            raise GeoJSONLoadError(location, str(e)) from e

    @staticmethod
    def _parse(location: str, text: str) -> Dict[str, Any]:
        """Parse and sanity-check a GeoJSON document."""
        try:
            data = json.loads(text)
        except ValueError as e:
            raise GeoJSONLoadError(location, f"invalid JSON ({e})") from e

        if not isinstance(data, dict) or "type" not in data:
            raise GeoJSONLoadError(location, "not a GeoJSON object")
        if data["type"] == "FeatureCollection" and not isinstance(data.get("features"), list):
            raise GeoJSONLoadError(location, "FeatureCollection without a features list")

        return data

    def load(self, source: str) -> Dict[str, Any]:
        """
        Load a GeoJSON dataset.

        Args:
            source: URL, local path, or path relative to base_url

        Returns:
            Parsed GeoJSON object

        Raises:
            GeoJSONLoadError: If the dataset cannot be fetched or parsed
        """
        location = self.resolve(source)

        cached = self._get_cached(location)
        if cached is not None:
            logger.debug(f"Cache hit for {location}")
            return cached

        logger.info(f"Loading GeoJSON from {location}")
        data = self._parse(location, self._fetch_text(location))
        logger.info(f"Loaded {len(data.get('features') or [])} features from {location}")

        if self.cache_ttl > 0:
            self._cache[location] = (time.monotonic(), data)

        return data

    def load_outline(self, source: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Load the biome outline dataset.

        Returns:
            Parsed outline, or None if it could not be loaded
        """
        try:
            return self.load(source or self.outline_path)
        except GeoJSONLoadError as e:
            logger.error(f"Error loading biome outlines: {e}")
            return None

    def load_many(self, sources: List[str]) -> List[Dict[str, Any]]:
        """
        Load several fire datasets in order.

        Sources that fail are logged and skipped.
        """
        collections = []
        for source in sources:
            try:
                collections.append(self.load(source))
            except GeoJSONLoadError as e:
                logger.error(f"Error loading fire data: {e}")
        return collections

    def load_month(self, month: str) -> List[Dict[str, Any]]:
        """
        Load the fire datasets of one month.

        Returns:
            List of FeatureCollections ([] for an unknown month)
        """
        path = self.month_paths.get(month)
        if path is None:
            logger.warning(f"No fire dataset configured for month {month}")
            return []
        return self.load_many([path])


def load_datasets(
    month: Optional[str] = None,
    client: Optional[GeoJSONClient] = None,
) -> QueimadasDatasets:
    """Convenience function to load the outline and one month of fires."""
    month = month or settings.default_month
    if client is not None:
        return QueimadasDatasets(
            outline=client.load_outline(),
            fires=client.load_month(month),
            month=month,
        )

    with GeoJSONClient() as own_client:
        return QueimadasDatasets(
            outline=own_client.load_outline(),
            fires=own_client.load_month(month),
            month=month,
        )
