"""
图片落位引擎 - 页码计算、铺满与平铺

职责：
1. 计算第i张图片所在页码（考虑前置附页和分隔页）
2. 铺满模式：按固定边距拉伸填满可印刷区域（不保持宽高比）
3. 平铺模式：按原始尺寸横纵重复，最后一行/列允许超出页面

坐标约定：落位以页面左下角为原点，绘制时转换为PyMuPDF的左上角坐标。

测试要点：
- test_page_index: 页码公式
- test_fit_placement: 铺满区域恒为 (W-2m)x(H-2m)，位于 (m, m)
- test_tile_counts: 621/300 → 3
- test_tile_order: 从左到右、从下到上
"""

from __future__ import annotations

import logging
import math

import fitz

from ..interfaces import IPlacementEngine
from ..models import ImageEntry, PageGeometry, Placement
from .images import ImageResource

logger = logging.getLogger(__name__)

# 出血边距（点）
# 模板实测 621x801 点，对应 8.625x11.125 英寸；0.125 英寸出血按比例约为 9 点
MARGIN_SIZE = 9.0


def page_index(offset: int, image_index: int, skip_separators: bool) -> int:
    """第 image_index 张图片（从0开始）所在页码（从1开始）"""
    return offset + image_index + 1 + (image_index if skip_separators else 0)


def fit_placement(geometry: PageGeometry, margin: float = MARGIN_SIZE) -> Placement:
    """铺满模式的落位，与图片尺寸无关"""
    return Placement(
        x=margin,
        y=margin,
        width=geometry.width - margin * 2,
        height=geometry.height - margin * 2,
    )


def tile_counts(geometry: PageGeometry, image_width: float, image_height: float) -> tuple[int, int]:
    """横向、纵向重复次数"""
    horizontal = math.ceil(geometry.width / image_width)
    vertical = math.ceil(geometry.height / image_height)
    return horizontal, vertical


def tile_placements(
    geometry: PageGeometry, image_width: float, image_height: float
) -> list[Placement]:
    """平铺模式的全部落位（按列从左到右，每列从下到上）"""
    horizontal, vertical = tile_counts(geometry, image_width, image_height)
    return [
        Placement(x=i * image_width, y=j * image_height, width=image_width, height=image_height)
        for i in range(horizontal)
        for j in range(vertical)
    ]


def to_page_rect(placement: Placement, geometry: PageGeometry) -> fitz.Rect:
    """左下角原点的落位 → PyMuPDF页面矩形（左上角原点）"""
    return fitz.Rect(
        placement.x,
        geometry.height - placement.top,
        placement.right,
        geometry.height - placement.y,
    )


class PlacementEngine(IPlacementEngine):
    """图片落位引擎实现"""

    def __init__(self, margin: float = MARGIN_SIZE):
        self.margin = margin

    def place(
        self,
        page: fitz.Page,
        image: ImageEntry,
        geometry: PageGeometry,
        tileable: bool,
    ) -> list[Placement]:
        """将图片绘制到页面，返回使用的落位"""
        if tileable:
            placements = tile_placements(geometry, image.width, image.height)
            logger.info(f"平铺图片 {image.path.name}: {len(placements)} 份")
        else:
            placements = [fit_placement(geometry, self.margin)]
            logger.info(f"铺满图片 {image.path.name}")

        with ImageResource(image) as resource:
            for placement in placements:
                resource.draw(page, to_page_rect(placement, geometry))

        return placements
