"""
文档组装器 - 一个输入目录生成一个PDF

职责：
1. 可选乱序（在任何页码计算之前）
2. 打开模板，读取页面尺寸
3. 前置附页 → 每张图片一页模板页（铺满或平铺）→ 分隔页 → 后置附页
4. 原子写出，所有打开的文档在任何退出路径上都会关闭

依赖：
- PyMuPDF: 页面生成、页面复制、图片嵌入
- Pillow: 栅格图尺寸读取

测试要点：
- test_page_count_without_separators: 页数 = n
- test_page_count_with_separators: 页数 = 2n（或 2n-1，取决于末尾分隔页策略）
- test_front_matter_offset: 前置附页使图片页码整体偏移
- test_back_matter_last: 后置附页位于所有图片页之后
- test_missing_template_no_output: 模板缺失时不生成输出
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path

import fitz

from ..config import AppConfig, get_config
from ..interfaces import IDocumentAssembler, IPlacementEngine
from ..models import AssemblyResult, PageKind, RunConfig
from .finalizer import save_document
from .images import inspect_image
from .matter import insert_matter
from .placement import PlacementEngine, page_index
from .randomizer import Randomizer
from .sequence import PageSequence
from .template import TemplateLoader

logger = logging.getLogger(__name__)


class DocumentAssembler(IDocumentAssembler):
    """文档组装器实现"""

    def __init__(
        self,
        config: AppConfig | None = None,
        placer: IPlacementEngine | None = None,
        randomizer: Randomizer | None = None,
    ):
        self.config = config or get_config()
        self.placer = placer or PlacementEngine()
        self.randomizer = randomizer or Randomizer()

    def assemble(self, run: RunConfig, images: list[Path]) -> AssemblyResult:
        """组装并保存输出文档"""
        images = list(images)
        if run.randomize:
            self.randomizer.shuffle(images)
            logger.info("图片顺序已打乱")

        with ExitStack() as stack:
            template = stack.enter_context(TemplateLoader.open(run.template_path))
            output = stack.enter_context(fitz.open())
            sequence = PageSequence(output, template)
            geometry = template.geometry
            logger.info(f"页面尺寸: {geometry.width} x {geometry.height}")

            offset = insert_matter(sequence, run.front_matter, PageKind.FRONT_MATTER)

            # 逐页明细仅在 verbose 时以 INFO 输出
            detail_level = logging.INFO if run.verbose else logging.DEBUG

            for i, image_path in enumerate(images):
                expected = page_index(offset, i, run.skip_separators)
                if sequence.next_number != expected:
                    raise RuntimeError(f"图片页码错位: 期望第{expected}页，实际第{sequence.next_number}页")

                logger.log(detail_level, f"添加第{expected}页（当前共{len(sequence)}页）: {image_path}")
                entry = inspect_image(image_path)
                page = sequence.append_template_page(PageKind.IMAGE, source=entry.path)
                self.placer.place(page, entry, geometry, run.tileable)

                if run.skip_separators and self._wants_separator(i, len(images)):
                    sequence.append_template_page(PageKind.SEPARATOR)
                    logger.log(detail_level, f"添加分隔页: 第{len(sequence)}页")

            insert_matter(sequence, run.back_matter, PageKind.BACK_MATTER)

            output_path = save_document(output, run.output_path, self.config.output)

        logger.info(f"PDF生成完成: {output_path}")
        return AssemblyResult(output_path=output_path, offset=offset, slots=sequence.slots)

    def _wants_separator(self, image_index: int, image_count: int) -> bool:
        """图片之后是否追加分隔页"""
        if image_index < image_count - 1:
            return True
        return self.config.assembly.trailing_separator
