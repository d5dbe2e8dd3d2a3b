"""
前置/后置附页插入

前置附页在所有图片页之前按原顺序复制，其页数即后续图片页码的偏移量；
后置附页在所有页面之后追加。
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz

from ..interfaces import MatterNotFoundError
from ..models import PageKind
from .sequence import PageSequence

logger = logging.getLogger(__name__)


def insert_matter(sequence: PageSequence, path: Path | None, kind: PageKind) -> int:
    """复制附页到输出文档末尾，返回复制的页数（未指定时为0）"""
    if path is None:
        return 0

    path = Path(path)
    if not path.is_file():
        raise MatterNotFoundError(f"附页文件不存在: {path}")

    try:
        matter_doc = fitz.open(path)
    except (RuntimeError, ValueError) as e:
        raise MatterNotFoundError(f"附页文件无法读取: {path}: {e}") from e

    with matter_doc:
        if matter_doc.needs_pass:
            raise MatterNotFoundError(f"附页已加密，无法读取: {path}")
        if not matter_doc.is_pdf:
            raise MatterNotFoundError(f"附页不是有效的PDF: {path}")
        count = sequence.append_copied_pages(matter_doc, kind, path)

    logger.info(f"已复制{kind.value} {count} 页: {path}")
    return count
