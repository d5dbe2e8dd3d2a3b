"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(template_pdf, make_image):
        image = make_image("a.png", (300, 400))
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Callable, Generator

import fitz
import pytest
from PIL import Image

from tilebook.config import AppConfig
from tilebook.models import PageGeometry, RunConfig

TEMPLATE_WIDTH = 621
TEMPLATE_HEIGHT = 801


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """每个用例结束后移除 tilebook 日志handler"""
    yield
    logger = logging.getLogger("tilebook")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def app_config() -> AppConfig:
    """默认运行期配置（末尾补分隔页）"""
    return AppConfig()


@pytest.fixture
def no_trailing_config() -> AppConfig:
    """最后一张图片之后不补分隔页"""
    config = AppConfig()
    config.assembly.trailing_separator = False
    return config


@pytest.fixture
def geometry() -> PageGeometry:
    return PageGeometry(width=TEMPLATE_WIDTH, height=TEMPLATE_HEIGHT)


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_pdf(temp_dir: Path) -> Callable[..., Path]:
    """生成PDF：每页写一行文字，便于确认页面来源"""

    def _make(
        name: str,
        pages: int = 1,
        size: tuple[float, float] = (TEMPLATE_WIDTH, TEMPLATE_HEIGHT),
        label: str | None = "page",
    ) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with fitz.open() as doc:
            for i in range(pages):
                page = doc.new_page(width=size[0], height=size[1])
                if label:
                    page.insert_text((72, 72), f"{label} {i + 1}")
            doc.save(str(path))
        return path

    return _make


@pytest.fixture
def template_pdf(make_pdf: Callable[..., Path]) -> Path:
    """621x801 模板（带文字内容）"""
    return make_pdf("template.pdf", label="TEMPLATE")


@pytest.fixture
def blank_template_pdf(make_pdf: Callable[..., Path]) -> Path:
    """621x801 空白模板（无内容流）"""
    return make_pdf("blank_template.pdf", label=None)


@pytest.fixture
def encrypted_pdf(temp_dir: Path) -> Path:
    """需要用户密码才能打开的PDF"""
    path = temp_dir / "encrypted.pdf"
    with fitz.open() as doc:
        doc.new_page(width=TEMPLATE_WIDTH, height=TEMPLATE_HEIGHT).insert_text((72, 72), "SECRET")
        doc.save(
            str(path),
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner",
            user_pw="secret",
        )
    return path


@pytest.fixture
def make_image(temp_dir: Path) -> Callable[..., Path]:
    """生成纯色图片（格式由后缀决定）"""

    def _make(name: str, size: tuple[int, int] = (300, 400), color: str = "red") -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color).save(path)
        return path

    return _make


@pytest.fixture
def make_svg(temp_dir: Path) -> Callable[..., Path]:
    """生成简单SVG"""

    def _make(name: str, size: tuple[int, int] = (120, 80)) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        w, h = size
        path.write_text(
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
            f'viewBox="0 0 {w} {h}">'
            f'<rect x="0" y="0" width="{w}" height="{h}" fill="blue"/>'
            f"</svg>",
            encoding="utf-8",
        )
        return path

    return _make


@pytest.fixture
def image_dir(make_image: Callable[..., Path]) -> Path:
    """包含3张PNG的图片目录"""
    paths = [
        make_image(f"images/img_{i}.png", (300, 400), color)
        for i, color in enumerate(["red", "green", "blue"])
    ]
    return paths[0].parent


@pytest.fixture
def make_run(temp_dir: Path, template_pdf: Path) -> Callable[..., RunConfig]:
    """生成运行配置（默认使用带文字的模板）"""

    def _make(**overrides) -> RunConfig:
        fields = {
            "input_dir": temp_dir / "images",
            "output_path": temp_dir / "out" / "book.pdf",
            "template_path": template_pdf,
        }
        fields.update(overrides)
        return RunConfig(**fields)

    return _make


def _image_bboxes(page: fitz.Page) -> list[tuple[float, float, float, float]]:
    return [tuple(info["bbox"]) for info in page.get_image_info()]


@pytest.fixture
def image_bboxes() -> Callable[[fitz.Page], list]:
    """页面上每次图片绘制的外框（左上角原点）"""
    return _image_bboxes
