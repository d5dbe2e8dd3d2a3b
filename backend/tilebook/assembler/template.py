"""
模板加载器 - 读取模板PDF并按模板生成新页面

职责：
1. 校验模板存在且可读
2. 从模板最后一页读取页面尺寸（整次运行只读一次）
3. 提供“追加一页模板页”操作

测试要点：
- test_geometry_from_last_page: 尺寸取自最后一页
- test_missing_template: 模板不存在时报 TemplateNotFoundError
- test_encrypted_template / test_tiny_template: 加密或过小的模板同样报错
- test_append_page_copies_content: 新页带模板内容
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz

from ..interfaces import TemplateNotFoundError
from ..models import PageGeometry
from .placement import MARGIN_SIZE

logger = logging.getLogger(__name__)


class TemplateLoader:
    """模板文档句柄（上下文管理器，保证关闭）"""

    def __init__(self, path: Path, doc: fitz.Document):
        self.path = path
        self._doc = doc
        last_page = doc[doc.page_count - 1]
        rect = last_page.rect
        # 页边距两侧都要留出，否则铺满区域为负
        if rect.width <= 2 * MARGIN_SIZE or rect.height <= 2 * MARGIN_SIZE:
            raise TemplateNotFoundError(
                f"模板页面过小（{rect.width:g}x{rect.height:g}，"
                f"至少需大于 {2 * MARGIN_SIZE:g}pt）: {path}"
            )
        self.geometry = PageGeometry(width=rect.width, height=rect.height)
        # 空白模板页内容为空，show_pdf_page 会拒绝
        self._has_content = bool(last_page.read_contents().strip())

    @classmethod
    def open(cls, path: str | Path) -> TemplateLoader:
        """打开模板（失败时不会留下已打开的句柄）"""
        path = Path(path)
        if not path.is_file():
            raise TemplateNotFoundError(f"模板文件不存在: {path}")

        try:
            doc = fitz.open(path)
        except (RuntimeError, ValueError) as e:
            raise TemplateNotFoundError(f"模板文件无法读取: {path}: {e}") from e

        try:
            if doc.needs_pass:
                raise TemplateNotFoundError(f"模板已加密，无法读取: {path}")
            if not doc.is_pdf or doc.page_count == 0:
                raise TemplateNotFoundError(f"模板不是有效的PDF: {path}")
            template = cls(path, doc)
        except Exception:
            doc.close()
            raise

        logger.info(f"加载模板: {path}")
        return template

    def append_page(self, document: fitz.Document) -> fitz.Page:
        """在输出文档末尾追加一页模板页"""
        page = document.new_page(width=self.geometry.width, height=self.geometry.height)
        if self._has_content:
            page.show_pdf_page(page.rect, self._doc, self._doc.page_count - 1)
        return page

    def close(self) -> None:
        if not self._doc.is_closed:
            self._doc.close()

    def __enter__(self) -> TemplateLoader:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
