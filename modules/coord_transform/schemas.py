from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CoordSystem(str, Enum):
    """坐标系统"""

    # 全球卫星定位系统坐标，国际标准
    WGS84 = "WGS84"
    # 国测局02坐标系，在WGS84基础上加密
    GCJ02 = "GCJ02"
    # 百度坐标系，在GCJ02基础上进一步偏移
    BD09 = "BD09"


class Coordinate(BaseModel):
    """
    标准坐标点
    不可变，每次转换都返回新的实例；取值范围在操作入口处校验
    """

    model_config = ConfigDict(frozen=True)

    longitude: float = Field(..., description="经度，范围 [-180, 180]")
    latitude: float = Field(..., description="纬度，范围 [-90, 90]")


# [经度, 纬度]
Point = Tuple[float, float]
# {"lat": 纬度, "lng": 经度}
LatLng = Dict[str, float]
