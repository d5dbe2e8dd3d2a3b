"""
批处理执行器 - 逐个目录生成PDF

职责：
1. 按顺序处理每个输入目录（单线程，一个目录完成后再处理下一个）
2. 失败隔离：单个目录失败不影响其他目录
3. 记录每个目录的运行结果

测试要点：
- test_run_multiple_directories: 每个目录一个输出
- test_failure_isolation: 模板缺失的目录失败，后续目录照常处理
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..assembler import DocumentAssembler
from ..config import AppConfig, get_config
from ..interfaces import IDocumentAssembler, IFileDiscovery, TilebookError
from ..models import BatchOptions, RunReport
from .discovery import FileDiscovery

logger = logging.getLogger(__name__)


class BatchExecutor:
    """批处理执行器"""

    def __init__(
        self,
        config: AppConfig | None = None,
        discovery: IFileDiscovery | None = None,
        assembler: IDocumentAssembler | None = None,
    ):
        self.config = config or get_config()
        self.discovery = discovery or FileDiscovery(self.config)
        self.assembler = assembler or DocumentAssembler(self.config)

    def run(self, options: BatchOptions) -> list[RunReport]:
        """处理全部目录"""
        logger.info("开始处理")
        reports = [self.run_directory(options, directory) for directory in options.directories]
        failed = sum(1 for r in reports if not r.succeeded)
        logger.info(f"处理完成: {len(reports) - failed} 成功, {failed} 失败")
        return reports

    def run_directory(self, options: BatchOptions, directory: Path) -> RunReport:
        """处理单个目录"""
        run = options.run_config_for(
            directory,
            default_template=self.config.assembly.default_template,
            default_name=self.config.assembly.default_output_name,
        )
        report = RunReport(input_dir=directory, output_path=run.output_path)
        report.mark_running()

        try:
            images = self.discovery.discover(directory, run.recursive)
            report.image_count = len(images)
            result = self.assembler.assemble(run, images)
            report.mark_succeeded(result.page_count)

        except TilebookError as e:
            logger.error(f"目录处理失败 {directory}: {e}")
            report.mark_failed(str(e))

        except Exception as e:
            logger.exception(f"目录处理异常 {directory}")
            report.mark_failed(f"{type(e).__name__}: {e}")

        return report
