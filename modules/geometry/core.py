"""
球面几何运算：距离、点在多边形内判断、多边形面积、偏移坐标。
所有计算都先把输入统一转换到 WGS84，再使用固定半径的球体模型。
"""

import logging
import math
from typing import Any, List

from core.exceptions import CoordinateError
from modules.coord_transform.adapters import ensure_sequence
from modules.coord_transform.core import transform
from modules.coord_transform.schemas import Coordinate, CoordSystem

logger = logging.getLogger(__name__)

EARTH_RADIUS = 6371000  # 地球平均半径（米）
DEGREES_TO_RADIANS = math.pi / 180
RADIANS_TO_DEGREES = 180 / math.pi


def _to_wgs84_list(points: Any, system: Any, name: str) -> List[Coordinate]:
    return [transform(p, system, CoordSystem.WGS84) for p in ensure_sequence(points, name)]


def _finite_number(value: Any, message: str) -> float:
    if isinstance(value, bool):
        raise CoordinateError(message, payload={"value": value})
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise CoordinateError(message, payload={"value": repr(value)})
    if not math.isfinite(number):
        raise CoordinateError(message, payload={"value": number})
    return number


def get_distance(coord1: Any, coord2: Any, system: Any = CoordSystem.WGS84) -> float:
    """
    计算两点间的大圆距离（Haversine 公式）

    Args:
        coord1: 第一个坐标点
        coord2: 第二个坐标点
        system: 两个坐标点所在的坐标系

    Returns:
        距离 (m)
    """
    point1 = transform(coord1, system, CoordSystem.WGS84)
    point2 = transform(coord2, system, CoordSystem.WGS84)

    lat1 = point1.latitude * DEGREES_TO_RADIANS
    lat2 = point2.latitude * DEGREES_TO_RADIANS
    dlat = lat2 - lat1
    dlng = (point2.longitude - point1.longitude) * DEGREES_TO_RADIANS

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS * c


def is_point_in_polygon(point: Any, polygon: Any, system: Any = CoordSystem.WGS84) -> bool:
    """
    射线法（奇偶规则）判断点是否在多边形内。
    末顶点到首顶点的边自动闭合，边界上的点按经典算法的半开区间处理。
    """
    vertices = _to_wgs84_list(polygon, system, "多边形")
    target = transform(point, system, CoordSystem.WGS84)
    px, py = target.longitude, target.latitude

    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = vertices[i].longitude, vertices[i].latitude
        xj, yj = vertices[j].longitude, vertices[j].latitude
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside


def calculate_polygon_area(polygon: Any, system: Any = CoordSystem.WGS84) -> float:
    """
    计算多边形面积（平方米）

    顶点少于 3 个时返回 0。不检查多边形是否自相交，自相交时返回的
    是有向面积之和的绝对值。
    """
    points = ensure_sequence(polygon, "多边形")
    if len(points) < 3:
        return 0.0

    vertices = _to_wgs84_list(points, system, "多边形")
    area = 0.0
    for i, vertex in enumerate(vertices):
        nxt = vertices[(i + 1) % len(vertices)]
        xi = vertex.longitude * DEGREES_TO_RADIANS
        yi = vertex.latitude * DEGREES_TO_RADIANS
        xj = nxt.longitude * DEGREES_TO_RADIANS
        yj = nxt.latitude * DEGREES_TO_RADIANS
        area += xi * math.sin(yj) - xj * math.sin(yi)

    return abs(area * EARTH_RADIUS * EARTH_RADIUS / 2)


def get_offset_coordinate(
    coord: Any,
    distance: Any,
    bearing: Any,
    system: Any = CoordSystem.WGS84,
) -> Coordinate:
    """
    从一点沿指定方位角移动指定距离，返回目标点

    Args:
        coord: 起点
        distance: 距离 (m)，非负
        bearing: 方位角 (度，0-360，0=北)
        system: 起点所在坐标系，结果也使用该坐标系

    Returns:
        目标点 Coordinate
    """
    distance = _finite_number(distance, "偏移距离必须是非负有限数值")
    if distance < 0:
        raise CoordinateError("偏移距离必须是非负有限数值", payload={"value": distance})
    bearing = _finite_number(bearing, "方位角必须在0-360度之间")
    if bearing < 0 or bearing > 360:
        raise CoordinateError("方位角必须在0-360度之间", payload={"value": bearing})

    start = transform(coord, system, CoordSystem.WGS84)

    lat1 = start.latitude * DEGREES_TO_RADIANS
    lng1 = start.longitude * DEGREES_TO_RADIANS
    brng = bearing * DEGREES_TO_RADIANS
    angular_dist = distance / EARTH_RADIUS

    sin_lat2 = (
        math.sin(lat1) * math.cos(angular_dist) +
        math.cos(lat1) * math.sin(angular_dist) * math.cos(brng)
    )
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    lng2 = lng1 + math.atan2(
        math.sin(brng) * math.sin(angular_dist) * math.cos(lat1),
        math.cos(angular_dist) - math.sin(lat1) * math.sin(lat2)
    )

    destination = Coordinate(
        longitude=(lng2 * RADIANS_TO_DEGREES + 540) % 360 - 180,  # 标准化经度到 [-180, 180)
        latitude=lat2 * RADIANS_TO_DEGREES,
    )
    logger.debug("Offset %s by %sm at %s deg -> %s", start, distance, bearing, destination)

    return transform(destination, CoordSystem.WGS84, system)
