"""
Decode geocoder responses. The GeoGratis locate endpoint has returned a few different shapes over time,
so each known shape gets an extractor and they are tried in order.
"""
import math
from dataclasses import dataclass
from typing import Callable, List, Optional


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


class GeocodeError(Exception):
    def __init__(self, reason: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.url = url
        self.status = status

    def to_json(self):
        return {"ok": False, "reason": self.reason, "status": self.status, "url": self.url}


def _geometry_coordinates(candidate):
    geometry = candidate.get("geometry")
    return geometry.get("coordinates") if isinstance(geometry, dict) else None


def _location_coordinates(candidate):
    location = candidate.get("location")
    return location.get("coordinates") if isinstance(location, dict) else None


def _location_list(candidate):
    location = candidate.get("location")
    return location if isinstance(location, list) else None


SHAPE_EXTRACTORS: List[Callable] = [
    _geometry_coordinates,
    _location_coordinates,
    _location_list,
]


def candidates_of(payload) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("items", "results"):
            if isinstance(payload.get(key), list):
                return payload[key]
    return []


def decode_coordinates(payload) -> Coordinates:
    candidates = candidates_of(payload)
    if not candidates:
        raise GeocodeError("empty")

    first = candidates[0]
    if not isinstance(first, dict):
        raise GeocodeError("unrecognized_shape")

    coords = next((c for c in (extract(first) for extract in SHAPE_EXTRACTORS) if c), None)
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        raise GeocodeError("unrecognized_shape")

    # GeoJSON order: [lon, lat]
    try:
        lon, lat = float(coords[0]), float(coords[1])
    except (TypeError, ValueError):
        raise GeocodeError("bad_coords")

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise GeocodeError("bad_coords")

    return Coordinates(lat=lat, lon=lon)
