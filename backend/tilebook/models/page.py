"""
页面序列模型 - 输出文档中每一页的来源
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class PageKind(str, Enum):
    """页面来源"""
    FRONT_MATTER = "front_matter"
    IMAGE = "image"
    SEPARATOR = "separator"
    BACK_MATTER = "back_matter"


class PageSlot(BaseModel):
    """输出文档中的一页"""
    number: int = Field(..., ge=1, description="页码（从1开始）")
    kind: PageKind
    source: Path | None = Field(None, description="图片或附页来源文件")

    model_config = {"frozen": True}


class AssemblyResult(BaseModel):
    """单个目录的组装结果"""
    output_path: Path
    offset: int = Field(0, description="前置附页页数")
    slots: list[PageSlot] = Field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.slots)

    @property
    def image_pages(self) -> list[int]:
        return self.pages_of(PageKind.IMAGE)

    def pages_of(self, kind: PageKind) -> list[int]:
        """指定类型的页码列表"""
        return [s.number for s in self.slots if s.kind == kind]
