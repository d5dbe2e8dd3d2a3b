"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from tilebook.interfaces import IFileDiscovery

    class MyDiscovery(IFileDiscovery):
        def discover(self, directory: Path, recursive: bool) -> list[Path]:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import fitz

    from .models import AssemblyResult, ImageEntry, PageGeometry, Placement, RunConfig


# ============================================================================
# 图片发现接口
# ============================================================================

class IFileDiscovery(ABC):
    """图片发现接口 - 列出目录下可处理的图片"""

    @abstractmethod
    def discover(self, directory: Path, recursive: bool) -> list[Path]:
        """
        列出目录下的图片文件

        Args:
            directory: 输入目录
            recursive: 是否包含子目录

        Returns:
            有序的图片路径列表

        Raises:
            DiscoveryError: 目录不存在或不可读
        """
        ...


# ============================================================================
# 文档组装接口
# ============================================================================

class IPlacementEngine(ABC):
    """图片落位接口 - 在单页上铺满或平铺一张图片"""

    @abstractmethod
    def place(
        self,
        page: fitz.Page,
        image: ImageEntry,
        geometry: PageGeometry,
        tileable: bool,
    ) -> list[Placement]:
        """
        将图片绘制到页面

        Args:
            page: 目标页面（已按模板生成）
            image: 图片条目（含像素尺寸）
            geometry: 模板页面尺寸
            tileable: True为平铺，False为按边距铺满

        Returns:
            实际使用的落位列表（左下角为原点）

        Raises:
            ImageDecodeError: 图片无法解码
        """
        ...


class IDocumentAssembler(ABC):
    """文档组装器接口 - 一个输入目录生成一个PDF"""

    @abstractmethod
    def assemble(self, run: RunConfig, images: list[Path]) -> AssemblyResult:
        """
        组装并保存输出文档

        流程：
        1. 可选乱序
        2. 打开模板，读取页面尺寸
        3. 前置附页 → 图片页（含分隔页）→ 后置附页
        4. 原子写出到 run.output_path

        Raises:
            TilebookError: 任一致命错误，输出文件不会被写出
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class TilebookError(Exception):
    """基础异常"""
    pass


class TemplateNotFoundError(TilebookError):
    """模板不存在或不可读"""
    pass


class MatterNotFoundError(TilebookError):
    """前置/后置附页不存在或不可读"""
    pass


class ImageDecodeError(TilebookError):
    """图片解码失败"""
    pass


class OutputWriteError(TilebookError):
    """输出文件写入失败"""
    pass


class DiscoveryError(TilebookError):
    """输入目录不可用"""
    pass


class EmptyDocumentError(TilebookError):
    """没有任何页面可输出"""
    pass
