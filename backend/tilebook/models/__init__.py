"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- BatchOptions/RunConfig: 命令行选项与单目录运行配置
- RunReport: 单目录运行结果
- PageGeometry/Placement: 页面尺寸与图片落位
- ImageEntry: 图片文件与原始尺寸
- PageSlot/AssemblyResult: 输出页面序列
"""

from .geometry import PageGeometry, Placement
from .image import ImageEntry, ImageKind
from .page import AssemblyResult, PageKind, PageSlot
from .run import BatchOptions, RunConfig, RunReport, RunStatus

__all__ = [
    "BatchOptions",
    "RunConfig",
    "RunReport",
    "RunStatus",
    "PageGeometry",
    "Placement",
    "ImageEntry",
    "ImageKind",
    "PageKind",
    "PageSlot",
    "AssemblyResult",
]
