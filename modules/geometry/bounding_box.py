from typing import Any

from core.exceptions import CoordinateError
from modules.coord_transform.adapters import ensure_sequence, parse_coordinate

from .schemas import BoundingBox


def create_bounding_box(points: Any) -> BoundingBox:
    """
    计算坐标点集的外包矩形。
    经度、纬度分别独立取最值，跨日期变更线的点集不做修正。
    """
    coords = [parse_coordinate(p) for p in ensure_sequence(points)]
    if not coords:
        raise CoordinateError("坐标数组不能为空")

    first = coords[0]
    min_lat = max_lat = first.latitude
    min_lng = max_lng = first.longitude
    for coord in coords[1:]:
        min_lat = min(min_lat, coord.latitude)
        max_lat = max(max_lat, coord.latitude)
        min_lng = min(min_lng, coord.longitude)
        max_lng = max(max_lng, coord.longitude)

    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lng=min_lng, max_lng=max_lng)
