"""
文档组装模块 - 模板/附页/图片落位/乱序/输出

子模块：
- template: 模板加载与模板页生成
- sequence: 输出页面序列记录
- matter: 前置/后置附页插入
- images: 图片尺寸读取与共享绘制资源
- placement: 页码计算与铺满/平铺落位
- randomizer: 图片乱序
- finalizer: 原子写出
- assembler: 组装流程编排
"""

from .assembler import DocumentAssembler
from .finalizer import save_document
from .images import ImageResource, inspect_image
from .matter import insert_matter
from .placement import (
    MARGIN_SIZE,
    PlacementEngine,
    fit_placement,
    page_index,
    tile_counts,
    tile_placements,
    to_page_rect,
)
from .randomizer import Randomizer
from .sequence import PageSequence
from .template import TemplateLoader

__all__ = [
    "DocumentAssembler",
    "TemplateLoader",
    "PageSequence",
    "insert_matter",
    "inspect_image",
    "ImageResource",
    "MARGIN_SIZE",
    "PlacementEngine",
    "page_index",
    "fit_placement",
    "tile_counts",
    "tile_placements",
    "to_page_rect",
    "Randomizer",
    "save_document",
]
