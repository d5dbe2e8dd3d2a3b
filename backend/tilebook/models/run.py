"""
运行模型 - 命令行选项、单目录运行配置与运行结果

BatchOptions 对应命令行的全部选项；每个输入目录由它派生一份不可变的
RunConfig，目录之间不共享任何可变状态。
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class BatchOptions(BaseModel):
    """命令行选项（多目录）"""
    directories: list[Path] = Field(default_factory=lambda: [Path.cwd()])
    verbose: bool = False
    recursive: bool = False
    output_dir: Path | None = Field(None, description="输出目录，默认为各输入目录")
    name: str | None = Field(None, description="输出文件名（不含.pdf）")
    tileable: bool = False
    skip_separators: bool = False
    randomize: bool = False
    front_matter: Path | None = None
    back_matter: Path | None = None
    template: Path | None = None

    model_config = {"frozen": True}

    def run_config_for(
        self,
        directory: Path,
        default_template: str = "template.pdf",
        default_name: str = "output",
    ) -> RunConfig:
        """派生单个目录的运行配置"""
        output_dir = self.output_dir or directory
        name = self.name or default_name
        return RunConfig(
            input_dir=directory,
            output_path=output_dir / f"{name}.pdf",
            template_path=self.template or Path(default_template),
            front_matter=self.front_matter,
            back_matter=self.back_matter,
            recursive=self.recursive,
            tileable=self.tileable,
            skip_separators=self.skip_separators,
            randomize=self.randomize,
            verbose=self.verbose,
        )


class RunConfig(BaseModel):
    """单个目录的运行配置（运行期间不可变）"""
    input_dir: Path
    output_path: Path
    template_path: Path = Path("template.pdf")
    front_matter: Path | None = None
    back_matter: Path | None = None
    recursive: bool = False
    tileable: bool = False
    skip_separators: bool = False
    randomize: bool = False
    verbose: bool = False

    model_config = {"frozen": True}


class RunStatus(str, Enum):
    """运行状态"""
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RunReport(BaseModel):
    """单个目录的运行结果"""
    input_dir: Path
    output_path: Path | None = None
    status: RunStatus = RunStatus.PENDING

    image_count: int = 0
    page_count: int = 0
    errors: list[str] = Field(default_factory=list, description="错误信息")

    started_at: datetime | None = None
    finished_at: datetime | None = None

    def mark_running(self) -> None:
        """标记为运行中"""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now()

    def mark_succeeded(self, page_count: int) -> None:
        """标记为成功"""
        self.status = RunStatus.SUCCEEDED
        self.finished_at = datetime.now()
        self.page_count = page_count

    def mark_failed(self, error: str) -> None:
        """标记为失败"""
        self.status = RunStatus.FAILED
        self.finished_at = datetime.now()
        self.errors.append(error)

    @property
    def succeeded(self) -> bool:
        return self.status == RunStatus.SUCCEEDED
