"""
命令行单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_cli.py -v
"""

from pathlib import Path
from typing import Callable

import fitz
import pytest

from tilebook.cli import build_parser, main, options_from_args


@pytest.fixture
def config_yaml(temp_dir: Path) -> Path:
    path = temp_dir / "tilebook.yaml"
    path.write_text(
        "runtime_options:\n  assembly:\n    trailing_separator: true\n", encoding="utf-8"
    )
    return path


class TestParser:
    """参数解析测试"""

    def test_defaults(self):
        options = options_from_args(build_parser().parse_args([]))
        assert options.directories == [Path.cwd()]
        assert options.template is None
        assert not (options.tileable or options.skip_separators or options.randomize)

    def test_all_flags(self):
        args = build_parser().parse_args([
            "-d", "vol1", "vol2",
            "-o", "out",
            "-n", "vol1234",
            "-r", "-t", "-s", "--randomize", "-v",
            "--frontmatter", "front.pdf",
            "-b", "back.pdf",
            "--template", "template.pdf",
        ])
        options = options_from_args(args)
        assert options.directories == [Path("vol1"), Path("vol2")]
        assert options.output_dir == Path("out")
        assert options.name == "vol1234"
        assert options.recursive and options.tileable and options.skip_separators
        assert options.randomize and options.verbose
        assert options.front_matter == Path("front.pdf")
        assert options.back_matter == Path("back.pdf")
        assert options.template == Path("template.pdf")

    def test_unknown_flag_exits(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(["--unknown"])
        assert exc.value.code == 2


class TestMain:
    """入口测试"""

    def test_success(
        self,
        template_pdf: Path,
        image_dir: Path,
        temp_dir: Path,
        config_yaml: Path,
        capsys: pytest.CaptureFixture[str],
    ):
        code = main([
            "-d", str(image_dir),
            "-o", str(temp_dir / "out"),
            "-n", "book",
            "-s", "-v",
            "--template", str(template_pdf),
            "--config", str(config_yaml),
        ])
        assert code == 0
        with fitz.open(temp_dir / "out" / "book.pdf") as doc:
            assert doc.page_count == 6
        assert "找到 3 张图片" in capsys.readouterr().out

    def test_failure_exit_code(
        self, image_dir: Path, temp_dir: Path, config_yaml: Path
    ):
        code = main([
            "-d", str(image_dir),
            "--template", str(temp_dir / "missing.pdf"),
            "--config", str(config_yaml),
        ])
        assert code == 1
        assert not (image_dir / "output.pdf").exists()
