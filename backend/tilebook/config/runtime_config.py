"""
运行期配置 - 读取 config/tilebook.yaml

职责：
- 加载模板/输出/图片格式/日志等运行参数
- 提供环境变量覆盖机制（TILEBOOK_ 前缀）
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_PATH = Path("config/tilebook.yaml")


class AssemblyConfig(BaseModel):
    """组装配置"""

    default_template: str = "template.pdf"
    default_output_name: str = "output"
    # 启用分隔页时，最后一张图片之后是否也补一张空白页
    trailing_separator: bool = True


class DiscoveryConfig(BaseModel):
    """图片发现配置"""

    image_extensions: list[str] = Field(
        default_factory=lambda: ["jpg", "jpeg", "png", "gif", "tiff", "bmp", "svg"]
    )


class OutputConfig(BaseModel):
    """PDF保存参数"""

    garbage: int = 3
    deflate: bool = True


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "tilebook.log"


class AppConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    assembly: AssemblyConfig = Field(default_factory=AssemblyConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "TILEBOOK_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """环境变量 > 构造参数（YAML） > 默认值"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> AppConfig:
        """从YAML文件加载配置（文件不存在时返回默认配置）"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        options = data.get("runtime_options") or {}

        # 只传YAML中实际出现的键，未出现的键保持默认值，环境变量优先级更高
        sections = {}
        for key in ("assembly", "discovery", "output", "logging"):
            values = cls._extract(options, key)
            if values:
                sections[key] = values
        return cls(**sections)

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置（支持 {default: 值} 写法）"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


# 全局配置实例
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = AppConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> AppConfig:
    """重新加载配置"""
    global _config
    _config = AppConfig.from_yaml(yaml_path or DEFAULT_CONFIG_PATH)
    return _config
