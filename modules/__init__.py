"""Convenience exports for the coordinate and geometry helpers."""

from core.exceptions import ConvergenceError, CoordinateError, UnsupportedSystemError

from .coord_transform import (
    Coordinate,
    CoordSystem,
    LatLng,
    Point,
    batch_transform,
    from_lat_lng,
    from_point,
    to_bd09,
    to_gcj02,
    to_lat_lng,
    to_point,
    to_wgs84,
    transform,
)
from .geometry import (
    DEGREES_TO_RADIANS,
    EARTH_RADIUS,
    RADIANS_TO_DEGREES,
    BoundingBox,
    calculate_polygon_area,
    create_bounding_box,
    get_distance,
    get_offset_coordinate,
    is_point_in_polygon,
)

__all__ = [
    "batch_transform",
    "BoundingBox",
    "calculate_polygon_area",
    "ConvergenceError",
    "Coordinate",
    "CoordinateError",
    "CoordSystem",
    "create_bounding_box",
    "DEGREES_TO_RADIANS",
    "EARTH_RADIUS",
    "from_lat_lng",
    "from_point",
    "get_distance",
    "get_offset_coordinate",
    "is_point_in_polygon",
    "LatLng",
    "Point",
    "RADIANS_TO_DEGREES",
    "to_bd09",
    "to_gcj02",
    "to_lat_lng",
    "to_point",
    "to_wgs84",
    "transform",
    "UnsupportedSystemError",
]
