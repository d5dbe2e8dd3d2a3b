"""
命令行入口

示例：
    tilebook -d "Books/Stained Glass/Vol1" -o out/ -n vol1 -r -s --randomize \
        --frontmatter pages/frontmatter.pdf --template pages/template.pdf -v
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import configure_logging, get_config, reload_config
from .models import BatchOptions
from .pipeline import BatchExecutor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilebook",
        description="Combine the images of each directory into one PDF built from a page template.",
    )
    parser.add_argument(
        "-d", "--directories",
        nargs="+",
        type=Path,
        default=None,
        help="输入目录，可指定多个（默认：当前目录）",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="输出目录（默认：图片所在目录）",
    )
    parser.add_argument(
        "-n", "--name",
        default=None,
        help="输出PDF文件名，不含.pdf（默认：output）",
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="递归搜索子目录，所有图片合入同一个PDF",
    )
    parser.add_argument(
        "-t", "--tileable",
        action="store_true",
        help="在页面上平铺图片，而不是每页铺满一张",
    )
    parser.add_argument(
        "-s", "--skip",
        action="store_true",
        help="图片之间插入空白页（涂色书防止马克笔透页）",
    )
    parser.add_argument(
        "--randomize",
        action="store_true",
        help="打乱图片顺序",
    )
    parser.add_argument(
        "--frontmatter",
        type=Path,
        default=None,
        help="插入到书开头的PDF",
    )
    parser.add_argument(
        "-b", "--backmatter",
        type=Path,
        default=None,
        help="追加到书末尾的PDF",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="页面模板PDF（默认：template.pdf）",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="输出全部状态信息",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="运行期配置YAML（默认：config/tilebook.yaml）",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> BatchOptions:
    """命令行参数 → BatchOptions"""
    fields = {
        "verbose": args.verbose,
        "recursive": args.recursive,
        "output_dir": args.output,
        "name": args.name,
        "tileable": args.tileable,
        "skip_separators": args.skip,
        "randomize": args.randomize,
        "front_matter": args.frontmatter,
        "back_matter": args.backmatter,
        "template": args.template,
    }
    if args.directories:
        fields["directories"] = args.directories
    return BatchOptions(**fields)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    configure_logging(config, verbose=args.verbose)

    reports = BatchExecutor(config).run(options_from_args(args))
    return 0 if all(r.succeeded for r in reports) else 1


if __name__ == "__main__":
    raise SystemExit(main())
