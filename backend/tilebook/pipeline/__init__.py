"""
流水线模块 - 图片发现与多目录批处理

子模块：
- discovery: 图片发现
- executor: 批处理执行器
"""

from .discovery import FileDiscovery, discover_images
from .executor import BatchExecutor

__all__ = [
    "FileDiscovery",
    "discover_images",
    "BatchExecutor",
]
