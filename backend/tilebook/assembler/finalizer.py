"""
输出写出 - 创建目录并原子写出PDF

先写入同目录下的临时文件，成功后再替换目标文件；
任何失败都不会留下写了一半的输出。
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import fitz

from ..config.runtime_config import OutputConfig
from ..interfaces import EmptyDocumentError, OutputWriteError

logger = logging.getLogger(__name__)


def save_document(
    document: fitz.Document,
    output_path: str | Path,
    options: OutputConfig | None = None,
) -> Path:
    """保存文档到 output_path，返回最终路径"""
    options = options or OutputConfig()
    output_path = Path(output_path)

    if document.page_count == 0:
        raise EmptyDocumentError(f"没有任何页面可输出: {output_path}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"无法创建输出目录: {output_path.parent}: {e}") from e

    tmp_path = output_path.with_name(f".{output_path.name}.part")
    try:
        document.save(str(tmp_path), garbage=options.garbage, deflate=options.deflate)
        os.replace(tmp_path, output_path)
    except (OSError, RuntimeError, ValueError) as e:
        tmp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"输出文件写入失败: {output_path}: {e}") from e

    logger.info(f"已写出 {document.page_count} 页: {output_path}")
    return output_path
