"""Geographic helpers: haversine distance and map bounding boxes."""
import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


def check_lat(lat: float) -> None:
    """Raise ValueError unless lat is a WGS84 latitude."""
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"Latitude out of range: {lat}")


def check_lng(lng: float) -> None:
    """Raise ValueError unless lng is a WGS84 longitude."""
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"Longitude out of range: {lng}")


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float


def distance_km(a: LatLng, b: LatLng) -> float:
    """Great-circle distance between a and b in km (haversine)."""
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    la1 = math.radians(a.lat)
    la2 = math.radians(b.lat)
    h = math.sin(d_lat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(d_lng / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


@dataclass(frozen=True)
class Bounds:
    """Map viewport in WGS84 degrees. Does not wrap the antimeridian (west <= east)."""

    north: float
    south: float
    east: float
    west: float

    def __post_init__(self) -> None:
        for lat in (self.north, self.south):
            check_lat(lat)
        for lng in (self.east, self.west):
            check_lng(lng)
        if self.south > self.north:
            raise ValueError("south must not be greater than north")
        if self.west > self.east:
            raise ValueError("west must not be greater than east")
