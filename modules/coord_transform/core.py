import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List

from core.config import settings

from .adapters import ensure_sequence, parse_coordinate, resolve_system
from .schemas import Coordinate, CoordSystem
from .transform_posi import (
    bd09_to_gcj02 as _raw_bd09_to_gcj02,
    gcj02_to_bd09 as _raw_gcj02_to_bd09,
    gcj02_to_wgs84 as _raw_gcj02_to_wgs84,
    out_of_china,
    wgs84_to_gcj02 as _raw_wgs84_to_gcj02,
)

logger = logging.getLogger(__name__)


def _rounded(lng: float, lat: float) -> Coordinate:
    digits = settings.coord_precision
    return Coordinate(longitude=round(lng, digits), latitude=round(lat, digits))


def _clone(coord: Coordinate) -> Coordinate:
    return Coordinate(longitude=coord.longitude, latitude=coord.latitude)


def _wgs84_to_gcj02(coord: Coordinate) -> Coordinate:
    if out_of_china(coord.longitude, coord.latitude):
        return _clone(coord)
    return _rounded(*_raw_wgs84_to_gcj02(coord.longitude, coord.latitude))


def _gcj02_to_wgs84(coord: Coordinate) -> Coordinate:
    if out_of_china(coord.longitude, coord.latitude):
        return _clone(coord)
    lng, lat = _raw_gcj02_to_wgs84(
        coord.longitude,
        coord.latitude,
        max_iter=settings.inverse_max_iterations,
        threshold=settings.inverse_threshold,
    )
    return _rounded(lng, lat)


def _gcj02_to_bd09(coord: Coordinate) -> Coordinate:
    return _rounded(*_raw_gcj02_to_bd09(coord.longitude, coord.latitude))


def _bd09_to_gcj02(coord: Coordinate) -> Coordinate:
    return _rounded(*_raw_bd09_to_gcj02(coord.longitude, coord.latitude))


# 管道只对境内的点做极坐标平移，境外点在三个坐标系间保持不变
def _to_wgs84(coord: Coordinate, source: CoordSystem) -> Coordinate:
    if source is CoordSystem.WGS84:
        return _clone(coord)
    if source is CoordSystem.GCJ02:
        return _gcj02_to_wgs84(coord)
    # 平移后的 BD09 点可能越过区域边界，按还原出的 GCJ02 点判断
    gcj = _bd09_to_gcj02(coord)
    if out_of_china(gcj.longitude, gcj.latitude):
        return _clone(coord)
    return _gcj02_to_wgs84(gcj)


def _from_wgs84(coord: Coordinate, target: CoordSystem) -> Coordinate:
    if target is CoordSystem.WGS84:
        return _clone(coord)
    if target is CoordSystem.GCJ02:
        return _wgs84_to_gcj02(coord)
    if out_of_china(coord.longitude, coord.latitude):
        return _clone(coord)
    return _gcj02_to_bd09(_wgs84_to_gcj02(coord))


def transform(coord: Any, from_system: Any, to_system: Any) -> Coordinate:
    """
    统一坐标转换入口，所有转换都以 WGS84 为中转。

    Args:
        coord: 源坐标，支持 [lng, lat]、{lat, lng}、{longitude, latitude} 或 Coordinate
        from_system: 源坐标系
        to_system: 目标坐标系

    Returns:
        转换后的 Coordinate；源、目标坐标系相同时返回原值的副本

    Raises:
        CoordinateError: 坐标无效，或坐标系不受支持
    """
    source = resolve_system(from_system, "源")
    target = resolve_system(to_system, "目标")
    point = parse_coordinate(coord)

    if source is target:
        return _clone(point)
    return _from_wgs84(_to_wgs84(point, source), target)


def batch_transform(coords: Any, from_system: Any, to_system: Any) -> List[Coordinate]:
    """
    批量转换坐标点，保持输入顺序；任一坐标无效时整批失败。
    """
    points = ensure_sequence(coords)
    source = resolve_system(from_system, "源")
    target = resolve_system(to_system, "目标")

    workers = settings.batch_workers
    if workers > 1 and len(points) >= settings.batch_parallel_min_size:
        logger.debug("Batch transform of %s points on %s workers", len(points), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(lambda c: transform(c, source, target), points))

    return [transform(c, source, target) for c in points]


def to_gcj02(coord: Any) -> Coordinate:
    return transform(coord, CoordSystem.WGS84, CoordSystem.GCJ02)


def to_bd09(coord: Any) -> Coordinate:
    return transform(coord, CoordSystem.WGS84, CoordSystem.BD09)


def to_wgs84(coord: Any, from_system: Any) -> Coordinate:
    return transform(coord, from_system, CoordSystem.WGS84)
