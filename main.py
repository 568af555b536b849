"""
命令行入口
职责：解析参数、调用坐标转换与几何运算、以 JSON 输出结果
Usage:
  python main.py transform 116.404 39.915 --from wgs84 --to gcj02
  python main.py distance 116.404 39.915 116.405 39.916
  python main.py area 116.404,39.915 116.405,39.915 116.405,39.916
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from core.config import settings
from core.exceptions import CoordinateError
from modules import (
    batch_transform,
    calculate_polygon_area,
    create_bounding_box,
    get_distance,
    get_offset_coordinate,
    is_point_in_polygon,
    transform,
)

logger = logging.getLogger(__name__)

SYSTEM_CHOICES = ["wgs84", "gcj02", "bd09"]


def _parse_pair(text: str) -> List[float]:
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"坐标应为 lng,lat 格式: {text}")
    try:
        return [float(parts[0]), float(parts[1])]
    except ValueError:
        raise argparse.ArgumentTypeError(f"坐标应为 lng,lat 格式: {text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="geoshift", description="WGS84 / GCJ02 / BD09 坐标转换工具")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("transform", help="转换单个坐标")
    p.add_argument("lng", type=float)
    p.add_argument("lat", type=float)
    p.add_argument("--from", dest="from_system", choices=SYSTEM_CHOICES, required=True)
    p.add_argument("--to", dest="to_system", choices=SYSTEM_CHOICES, required=True)

    p = sub.add_parser("batch", help="批量转换多个 lng,lat 坐标")
    p.add_argument("points", type=_parse_pair, nargs="+")
    p.add_argument("--from", dest="from_system", choices=SYSTEM_CHOICES, required=True)
    p.add_argument("--to", dest="to_system", choices=SYSTEM_CHOICES, required=True)

    p = sub.add_parser("distance", help="两点间大圆距离（米）")
    p.add_argument("lng1", type=float)
    p.add_argument("lat1", type=float)
    p.add_argument("lng2", type=float)
    p.add_argument("lat2", type=float)
    p.add_argument("--system", choices=SYSTEM_CHOICES, default="wgs84")

    p = sub.add_parser("offset", help="按距离和方位角计算目标点")
    p.add_argument("lng", type=float)
    p.add_argument("lat", type=float)
    p.add_argument("--distance", type=float, required=True)
    p.add_argument("--bearing", type=float, required=True)
    p.add_argument("--system", choices=SYSTEM_CHOICES, default="wgs84")

    p = sub.add_parser("area", help="多边形面积（平方米）")
    p.add_argument("points", type=_parse_pair, nargs="+")
    p.add_argument("--system", choices=SYSTEM_CHOICES, default="wgs84")

    p = sub.add_parser("contains", help="判断点是否在多边形内")
    p.add_argument("lng", type=float)
    p.add_argument("lat", type=float)
    p.add_argument("--polygon", type=_parse_pair, nargs="+", required=True)
    p.add_argument("--system", choices=SYSTEM_CHOICES, default="wgs84")

    p = sub.add_parser("bbox", help="点集外包矩形")
    p.add_argument("points", type=_parse_pair, nargs="+")

    return parser


def run(args: argparse.Namespace) -> dict:
    if args.command == "transform":
        return transform([args.lng, args.lat], args.from_system, args.to_system).model_dump()
    if args.command == "batch":
        return {
            "points": [c.model_dump() for c in batch_transform(args.points, args.from_system, args.to_system)]
        }
    if args.command == "distance":
        meters = get_distance([args.lng1, args.lat1], [args.lng2, args.lat2], args.system)
        return {"distance_m": meters}
    if args.command == "offset":
        return get_offset_coordinate([args.lng, args.lat], args.distance, args.bearing, args.system).model_dump()
    if args.command == "area":
        return {"area_m2": calculate_polygon_area(args.points, args.system)}
    if args.command == "contains":
        return {"inside": is_point_in_polygon([args.lng, args.lat], args.polygon, args.system)}
    bbox = create_bounding_box(args.points)
    return bbox.model_dump()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        result = run(args)
    except CoordinateError as exc:
        logger.error(f"CoordinateError: {exc.message} | Payload: {exc.payload}")
        return 1
    print(json.dumps(result, ensure_ascii=False))
    return 0


def cli() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )
    sys.exit(main())


# ==================== 主入口 ====================

if __name__ == "__main__":
    cli()
