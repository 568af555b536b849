"""
坐标输入输出格式适配：把 [lng, lat]、{lat, lng}、{longitude, latitude}
等形式统一为 Coordinate，并在操作入口处完成校验。
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, List

from core.exceptions import CoordinateError, UnsupportedSystemError

from .schemas import Coordinate, CoordSystem, LatLng, Point


def _to_float(value: Any, field: str) -> float:
    if value is None:
        raise CoordinateError(f"坐标缺少 {field}", payload={"field": field})
    if isinstance(value, bool):
        raise CoordinateError(f"{field} 必须是数值", payload={"field": field, "value": value})
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise CoordinateError(
            f"{field} 必须是数值",
            payload={"field": field, "value": repr(value)},
        )


def normalize_coordinate(value: Any) -> Coordinate:
    """
    标准化不同格式的坐标输入，不做范围校验。
    """
    if isinstance(value, Coordinate):
        return value
    if value is None:
        raise CoordinateError("坐标不能为空")

    if isinstance(value, Mapping):
        if "lat" in value and "lng" in value:
            lng, lat = value["lng"], value["lat"]
        elif "longitude" in value and "latitude" in value:
            lng, lat = value["longitude"], value["latitude"]
        else:
            raise CoordinateError(
                "坐标字段不完整，需要 lat/lng 或 longitude/latitude",
                payload={"keys": sorted(str(k) for k in value.keys())},
            )
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 2:
            raise CoordinateError("坐标点必须为 [lng, lat] 数组", payload={"length": len(value)})
        lng, lat = value[0], value[1]
    elif hasattr(value, "lng") and hasattr(value, "lat"):
        lng, lat = value.lng, value.lat
    elif hasattr(value, "longitude") and hasattr(value, "latitude"):
        lng, lat = value.longitude, value.latitude
    else:
        raise CoordinateError("无法识别的坐标格式", payload={"type": type(value).__name__})

    return Coordinate(longitude=_to_float(lng, "longitude"), latitude=_to_float(lat, "latitude"))


def validate_coordinate(coord: Coordinate) -> None:
    lng, lat = coord.longitude, coord.latitude
    if not math.isfinite(lng) or not math.isfinite(lat):
        raise CoordinateError(
            "坐标值必须是有限数值",
            payload={"longitude": lng, "latitude": lat},
        )
    if abs(lng) > 180 or abs(lat) > 90:
        raise CoordinateError(
            "无效的坐标范围",
            payload={"longitude": lng, "latitude": lat},
        )


def parse_coordinate(value: Any) -> Coordinate:
    """标准化并校验一个坐标输入"""
    coord = normalize_coordinate(value)
    validate_coordinate(coord)
    return coord


def resolve_system(value: Any, role: str = "源") -> CoordSystem:
    """
    把坐标系标识解析为 CoordSystem，字符串不区分大小写。
    :param role: 错误信息中的角色描述（"源" 或 "目标"）
    """
    if isinstance(value, CoordSystem):
        return value
    if isinstance(value, str):
        try:
            return CoordSystem(value.strip().upper())
        except ValueError:
            pass
    raise UnsupportedSystemError(f"不支持的{role}坐标系: {value}", system=value)


def ensure_sequence(points: Any, name: str = "坐标数组") -> List[Any]:
    if points is None or isinstance(points, (str, bytes, Mapping)) or not isinstance(points, Iterable):
        raise CoordinateError(f"{name}必须是坐标数组", payload={"type": type(points).__name__})
    return list(points)


def to_point(coord: Any) -> Point:
    coord = normalize_coordinate(coord)
    return (coord.longitude, coord.latitude)


def to_lat_lng(coord: Any) -> LatLng:
    coord = normalize_coordinate(coord)
    return {"lat": coord.latitude, "lng": coord.longitude}


def from_point(point: Point) -> Coordinate:
    return normalize_coordinate(point)


def from_lat_lng(latlng: LatLng) -> Coordinate:
    return normalize_coordinate(latlng)
