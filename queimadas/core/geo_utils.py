"""
Queimadas - Geospatial Utilities
Bounding boxes and coordinate helpers shared by the camera and map layers.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Point:
    """Geographic point with latitude and longitude."""
    latitude: float
    longitude: float

    def to_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box."""
    west: float   # min longitude
    south: float  # min latitude
    east: float   # max longitude
    north: float  # max latitude

    @classmethod
    def from_bounds(cls, bounds: Tuple[float, float, float, float]) -> "BoundingBox":
        """Build from a (minx, miny, maxx, maxy) tuple, as returned by shapely."""
        west, south, east, north = bounds
        return cls(west=west, south=south, east=east, north=north)

    def contains(self, point: Point) -> bool:
        """Check if a point is within the bounding box."""
        return (
            self.west <= point.longitude <= self.east and
            self.south <= point.latitude <= self.north
        )

    def union(self, other: "BoundingBox") -> "BoundingBox":
        """Smallest box covering both boxes."""
        return BoundingBox(
            west=min(self.west, other.west),
            south=min(self.south, other.south),
            east=max(self.east, other.east),
            north=max(self.north, other.north),
        )

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.west, self.south, self.east, self.north)

    def to_leaflet(self) -> List[List[float]]:
        """Return [[south, west], [north, east]] as Leaflet expects."""
        return [[self.south, self.west], [self.north, self.east]]

    @property
    def center(self) -> Point:
        """Get the center point of the bounding box."""
        return Point(
            latitude=(self.south + self.north) / 2,
            longitude=(self.west + self.east) / 2
        )


def union_bounds(boxes: Iterable[BoundingBox]) -> Optional[BoundingBox]:
    """
    Calculate the box covering every box in the sequence.

    Returns:
        The union box, or None if the sequence is empty
    """
    result = None
    for box in boxes:
        result = box if result is None else result.union(box)
    return result
