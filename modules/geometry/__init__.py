from .bounding_box import create_bounding_box
from .core import (
    DEGREES_TO_RADIANS,
    EARTH_RADIUS,
    RADIANS_TO_DEGREES,
    calculate_polygon_area,
    get_distance,
    get_offset_coordinate,
    is_point_in_polygon,
)
from .schemas import BoundingBox

__all__ = [
    "BoundingBox",
    "calculate_polygon_area",
    "create_bounding_box",
    "DEGREES_TO_RADIANS",
    "EARTH_RADIUS",
    "get_distance",
    "get_offset_coordinate",
    "is_point_in_polygon",
    "RADIANS_TO_DEGREES",
]
