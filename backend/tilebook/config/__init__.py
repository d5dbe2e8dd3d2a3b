"""
配置层 - 加载运行期配置

职责：
- 加载 config/tilebook.yaml（运行期参数）
- 提供类型安全的配置访问接口
- 配置日志输出
"""

from .logging_setup import configure_logging
from .runtime_config import AppConfig, get_config, reload_config

__all__ = [
    "AppConfig",
    "get_config",
    "reload_config",
    "configure_logging",
]
