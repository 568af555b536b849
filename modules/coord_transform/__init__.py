from .adapters import (
    from_lat_lng,
    from_point,
    normalize_coordinate,
    to_lat_lng,
    to_point,
    validate_coordinate,
)
from .core import batch_transform, to_bd09, to_gcj02, to_wgs84, transform
from .schemas import Coordinate, CoordSystem, LatLng, Point

__all__ = [
    "batch_transform",
    "Coordinate",
    "CoordSystem",
    "from_lat_lng",
    "from_point",
    "LatLng",
    "normalize_coordinate",
    "Point",
    "to_bd09",
    "to_gcj02",
    "to_lat_lng",
    "to_point",
    "to_wgs84",
    "transform",
    "validate_coordinate",
]
