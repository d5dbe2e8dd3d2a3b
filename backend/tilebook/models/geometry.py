"""
页面几何模型 - 模板页面尺寸与图片落位

坐标约定：单位为PDF点（1英寸=72点），原点在页面左下角。
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PageGeometry(BaseModel):
    """页面尺寸（整次运行不变，取自模板最后一页）"""
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = {"frozen": True}


class Placement(BaseModel):
    """单个图片落位（左下角原点）"""
    x: float
    y: float
    width: float
    height: float

    model_config = {"frozen": True}

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height
