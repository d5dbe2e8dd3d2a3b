"""
页面序列 - 输出文档的只追加页面记录

每追加一页都记录来源，页码恒等于 1 + 已追加页数。
"""

from __future__ import annotations

from pathlib import Path

import fitz

from ..models import PageKind, PageSlot
from .template import TemplateLoader


class PageSequence:
    """输出文档及其页面记录"""

    def __init__(self, document: fitz.Document, template: TemplateLoader):
        self.document = document
        self.template = template
        self.slots: list[PageSlot] = []

    def __len__(self) -> int:
        return len(self.slots)

    @property
    def next_number(self) -> int:
        return len(self.slots) + 1

    def append_template_page(self, kind: PageKind, source: Path | None = None) -> fitz.Page:
        """追加一页模板页（图片页或分隔页）"""
        page = self.template.append_page(self.document)
        self._record(kind, source)
        return page

    def append_copied_pages(self, source_doc: fitz.Document, kind: PageKind, source: Path) -> int:
        """按原顺序复制另一文档的全部页面，返回页数"""
        count = source_doc.page_count
        self.document.insert_pdf(source_doc)
        for _ in range(count):
            self._record(kind, source)
        return count

    def _record(self, kind: PageKind, source: Path | None) -> None:
        self.slots.append(PageSlot(number=self.next_number, kind=kind, source=source))
        if self.document.page_count != len(self.slots):
            raise RuntimeError(
                f"页面记录与文档不一致: {len(self.slots)} != {self.document.page_count}"
            )
