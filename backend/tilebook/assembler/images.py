"""
图片资源 - 读取尺寸与绘制

职责：
1. 读取图片原始尺寸（栅格图用Pillow，SVG用PyMuPDF）
2. 每张图片只解码一次，平铺时所有副本引用同一资源
3. 解码失败统一报 ImageDecodeError

测试要点：
- test_inspect_raster_size: 栅格图像素尺寸
- test_inspect_svg_size: SVG尺寸
- test_inspect_corrupt_image: 损坏图片报错
"""

from __future__ import annotations

from pathlib import Path

import fitz
from PIL import Image, UnidentifiedImageError

from ..interfaces import ImageDecodeError
from ..models import ImageEntry, ImageKind


def inspect_image(path: str | Path) -> ImageEntry:
    """读取图片类型与原始尺寸"""
    path = Path(path)
    kind = ImageKind.for_path(path)

    if kind == ImageKind.VECTOR:
        try:
            with fitz.open(path) as svg_doc:
                rect = svg_doc[0].rect
        except (RuntimeError, ValueError, IndexError) as e:
            raise ImageDecodeError(f"SVG无法解析: {path}: {e}") from e
        width, height = rect.width, rect.height
    else:
        try:
            with Image.open(path) as img:
                width, height = img.size
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise ImageDecodeError(f"图片无法解码: {path}: {e}") from e

    if width <= 0 or height <= 0:
        raise ImageDecodeError(f"图片尺寸无效: {path} ({width}x{height})")

    return ImageEntry(path=path, kind=kind, width=width, height=height)


class ImageResource:
    """单张图片在输出文档中的共享资源

    栅格图第一次绘制时嵌入，之后按 xref 引用；
    SVG 转为单页PDF后，每次绘制都显示同一页。
    """

    def __init__(self, entry: ImageEntry):
        self.entry = entry
        self._xref = 0
        self._vector_doc: fitz.Document | None = None

    def __enter__(self) -> ImageResource:
        if self.entry.kind == ImageKind.VECTOR:
            try:
                with fitz.open(self.entry.path) as svg_doc:
                    pdf_bytes = svg_doc.convert_to_pdf()
                self._vector_doc = fitz.open("pdf", pdf_bytes)
            except (RuntimeError, ValueError) as e:
                raise ImageDecodeError(f"SVG无法转换: {self.entry.path}: {e}") from e
        return self

    def __exit__(self, *exc) -> None:
        if self._vector_doc is not None:
            self._vector_doc.close()
            self._vector_doc = None

    def draw(self, page: fitz.Page, rect: fitz.Rect) -> None:
        """在页面指定区域绘制图片（拉伸填满rect）"""
        try:
            if self._vector_doc is not None:
                page.show_pdf_page(rect, self._vector_doc, 0, keep_proportion=False)
            elif self._xref:
                page.insert_image(rect, xref=self._xref, keep_proportion=False)
            else:
                self._xref = page.insert_image(
                    rect, filename=str(self.entry.path), keep_proportion=False
                )
        except (RuntimeError, ValueError) as e:
            raise ImageDecodeError(f"图片无法绘制: {self.entry.path}: {e}") from e
