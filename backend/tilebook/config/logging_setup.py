"""
日志配置

verbose 打开时输出 INFO 级状态信息到标准输出，否则只输出 WARNING 及以上。
"""

from __future__ import annotations

import logging
import sys

from .runtime_config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(message)s"


def configure_logging(config: AppConfig, verbose: bool = False) -> logging.Logger:
    """配置 tilebook 包日志（可重复调用，不会叠加handler）"""
    logger = logging.getLogger("tilebook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_level = logging.INFO if verbose else logging.WARNING
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    level = console_level
    if config.logging.log_to_file:
        file_handler = logging.FileHandler(config.logging.log_file, encoding="utf-8")
        file_handler.setLevel(config.logging.log_level.upper())
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
        level = min(level, file_handler.level)

    logger.setLevel(level)
    return logger
