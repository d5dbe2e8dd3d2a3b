"""
图片发现 - 列出目录下可处理的图片

按后缀（不区分大小写）过滤，默认只看顶层目录，结果按路径排序。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..config import AppConfig, get_config
from ..interfaces import DiscoveryError, IFileDiscovery

logger = logging.getLogger(__name__)


def discover_images(directory: str | Path, extensions: Iterable[str], recursive: bool = False) -> list[Path]:
    """列出目录下扩展名匹配的图片文件"""
    directory = Path(directory)
    if not directory.is_dir():
        raise DiscoveryError(f"输入目录不存在: {directory}")

    suffixes = {"." + ext.lower().lstrip(".") for ext in extensions}
    candidates = directory.rglob("*") if recursive else directory.iterdir()

    try:
        files = [p for p in candidates if p.is_file() and p.suffix.lower() in suffixes]
    except OSError as e:
        raise DiscoveryError(f"输入目录无法读取: {directory}: {e}") from e

    return sorted(files)


class FileDiscovery(IFileDiscovery):
    """图片发现实现"""

    def __init__(self, config: AppConfig | None = None):
        self.config = config or get_config()

    def discover(self, directory: Path, recursive: bool) -> list[Path]:
        files = discover_images(directory, self.config.discovery.image_extensions, recursive)
        logger.info(f"找到 {len(files)} 张图片: {directory}")
        return files
