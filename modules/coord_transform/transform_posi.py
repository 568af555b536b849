"""
坐标偏移算法的数值内核。
所有函数都基于 (lng, lat) 浮点数，不做取整，也不做参数校验。
"""

import logging
import math
from typing import Tuple

from core.exceptions import ConvergenceError

logger = logging.getLogger(__name__)

# 克拉索夫斯基椭球参数
A = 6378245.0  # 长半轴
EE = 0.00669342162296594323  # 偏心率平方

X_PI = math.pi * 3000.0 / 180.0

# BD09 相对 GCJ02 的固定平移量
BD_LNG_SHIFT = 0.0065
BD_LAT_SHIFT = 0.006

# 中国大陆近似外包矩形，落在边界上的点视为境内
CHINA_BOUNDS = {
    "lng": (72.004, 137.8347),
    "lat": (0.8293, 55.8271),
}


def out_of_china(lng: float, lat: float) -> bool:
    """
    判断坐标点是否在中国范围外
    """
    lng_min, lng_max = CHINA_BOUNDS["lng"]
    lat_min, lat_max = CHINA_BOUNDS["lat"]
    return lng < lng_min or lng > lng_max or lat < lat_min or lat > lat_max


def transform_lng(x: float, y: float) -> float:
    """
    计算经度偏移量的辅助函数，x/y 为相对 (105, 35) 的经纬度差
    """
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0 / 3.0
    return ret


def transform_lat(x: float, y: float) -> float:
    """
    计算纬度偏移量的辅助函数，x/y 为相对 (105, 35) 的经纬度差
    """
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * math.pi) + 320 * math.sin(y * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def wgs84_to_gcj02(lng: float, lat: float) -> Tuple[float, float]:
    """
    将WGS84坐标系转换为GCJ-02坐标系（火星坐标系）
    :param lng: WGS84坐标系的经度
    :param lat: WGS84坐标系的纬度
    :return: 转换后的GCJ-02坐标系的经纬度
    """
    if out_of_china(lng, lat):
        # 若坐标点不在中国范围内，直接返回原坐标
        return lng, lat

    d_lng = transform_lng(lng - 105.0, lat - 35.0)
    d_lat = transform_lat(lng - 105.0, lat - 35.0)

    rad_lat = lat / 180.0 * math.pi
    magic = math.sin(rad_lat)
    sqrt_magic = math.sqrt(1 - EE * magic * magic)

    # 按椭球曲率半径把偏移量从米换算为度
    lat_offset = (d_lat * 180.0) / ((A * (1 - EE)) / (sqrt_magic * sqrt_magic * sqrt_magic) * math.pi)
    lng_offset = (d_lng * 180.0) / (A / sqrt_magic * math.cos(rad_lat) * math.pi)

    return lng + lng_offset, lat + lat_offset


def gcj02_to_wgs84(
    lng: float,
    lat: float,
    max_iter: int = 50,
    threshold: float = 1e-8,
) -> Tuple[float, float]:
    """
    将GCJ-02坐标系反推为WGS84坐标系（不动点迭代）。

    :param lng: GCJ-02 坐标系的经度
    :param lat: GCJ-02 坐标系的纬度
    :param max_iter: 最大迭代次数
    :param threshold: 收敛阈值（度），两个分量都不超过阈值时停止
    :return: 反推后的 WGS84 坐标系经纬度 (lng, lat)
    :raises ConvergenceError: 超过最大迭代次数仍未收敛
    """
    if out_of_china(lng, lat):
        return lng, lat

    guess_lng, guess_lat = lng, lat
    d_lng = d_lat = float("nan")
    for iteration in range(1, max_iter + 1):
        calc_lng, calc_lat = wgs84_to_gcj02(guess_lng, guess_lat)
        d_lng = calc_lng - lng
        d_lat = calc_lat - lat
        if abs(d_lng) <= threshold and abs(d_lat) <= threshold:
            logger.debug("GCJ02 inverse converged after %s iterations", iteration)
            return guess_lng, guess_lat
        guess_lng -= d_lng
        guess_lat -= d_lat

    logger.error(
        "GCJ02 inverse did not converge for (%s, %s): last delta (%s, %s)",
        lng, lat, d_lng, d_lat,
    )
    raise ConvergenceError(
        f"GCJ02 反算在 {max_iter} 次迭代内未收敛: ({lng}, {lat})",
        iterations=max_iter,
        delta=(d_lng, d_lat),
    )


def gcj02_to_bd09(lng: float, lat: float) -> Tuple[float, float]:
    """
    GCJ02 转 BD09（极坐标平移，不区分境内外）
    """
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    return z * math.cos(theta) + BD_LNG_SHIFT, z * math.sin(theta) + BD_LAT_SHIFT


def bd09_to_gcj02(lng: float, lat: float) -> Tuple[float, float]:
    """
    BD09 转 GCJ02，与 gcj02_to_bd09 近似互逆
    """
    x = lng - BD_LNG_SHIFT
    y = lat - BD_LAT_SHIFT
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return z * math.cos(theta), z * math.sin(theta)
