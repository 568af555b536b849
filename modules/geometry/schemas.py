from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class BoundingBox(BaseModel):
    """
    坐标点集的外包矩形
    不做日期变更线展开，跨 ±180° 的点集按原始经度取最值
    """

    model_config = ConfigDict(frozen=True)

    min_lat: float = Field(..., description="最小纬度")
    max_lat: float = Field(..., description="最大纬度")
    min_lng: float = Field(..., description="最小经度")
    max_lng: float = Field(..., description="最大经度")

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_lng, min_lat, max_lng, max_lat)，与 shapely 的 bounds 顺序一致"""
        return (self.min_lng, self.min_lat, self.max_lng, self.max_lat)
