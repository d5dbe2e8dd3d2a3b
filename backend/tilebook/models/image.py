"""
图片条目模型
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

VECTOR_SUFFIXES = {".svg"}


class ImageKind(str, Enum):
    """图片类型"""
    RASTER = "raster"
    VECTOR = "vector"

    @classmethod
    def for_path(cls, path: Path) -> ImageKind:
        return cls.VECTOR if path.suffix.lower() in VECTOR_SUFFIXES else cls.RASTER


class ImageEntry(BaseModel):
    """图片文件及其原始尺寸（像素；矢量图为其自身单位）"""
    path: Path
    kind: ImageKind
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = {"frozen": True}
