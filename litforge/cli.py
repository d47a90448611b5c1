# litforge/cli.py
from __future__ import annotations

import argparse
import logging
import os
import shlex
import sys
from typing import List, Optional

from . import __version__
from .config import RenderConfig
from .core import process_files
from .errors import ExtractError
from .render.html import generate_html
from .utils.fs import collect_source_files

logger = logging.getLogger("litforge.cli")

EPILOG = """examples:
  litforge hello.c
  litforge a.c b.js --output-html docs.html
  litforge hello.c --stdout > docs.html
  litforge src/ --code-url https://github.com/user/repo/tree/main/
  litforge --title "My Project" --description "**Documentation** for my project" main.c
  litforge --argfile myproject.argfile
"""


def read_argfile(path: str) -> List[str]:
    """Arguments stored in a file, split like a shell would (quotes and # comments)."""
    try:
        with open(path, encoding="utf-8") as f:
            return shlex.split(f.read(), comments=True)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Error reading argfile '{path}': {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="litforge",
        description="Render annotated source files as paired documentation/code HTML.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", metavar="FILE", nargs="*",
                        help="source files or directories, rendered in the order given")
    parser.add_argument("-o", "--output-html", metavar="FILE",
                        help="output HTML file (default: first input with .html)")
    parser.add_argument("-s", "--stdout", action="store_true",
                        help="write HTML to stdout instead of a file")
    parser.add_argument("-u", "--code-url", metavar="URL",
                        help="base URL for linking to source files")
    parser.add_argument("-t", "--title", help="custom page title")
    parser.add_argument("-d", "--description", help="custom description (markdown supported)")
    parser.add_argument("-f", "--argfile", metavar="FILE",
                        help="read arguments from a file (replaces command-line arguments)")
    parser.add_argument("-v", "--version", action="version", version=f"litforge v{__version__}")
    parser.add_argument("--verbose", action="store_true", help="log per-file block counts")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("-f", "--argfile")
    known, _rest = pre.parse_known_args(argv)
    if known.argfile:
        argv = read_argfile(known.argfile)
    args = parser.parse_args(argv)
    if not args.files:
        parser.error("at least one input file is required")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )
    quiet = args.stdout

    files = collect_source_files(args.files)
    if not files:
        logger.error("Error: no supported source files found in %s", ", ".join(args.files))
        return 1
    output_html = args.output_html or os.path.splitext(files[0])[0] + ".html"

    if not quiet:
        logger.info("Processing %d file(s): %s", len(files), ", ".join(files))
        logger.info("Output: %s", output_html)
        if args.code_url:
            logger.info("Code URL: %s", args.code_url)

    config = RenderConfig(title=args.title, description=args.description)
    try:
        processed = process_files(
            files, args.code_url, logger=None if quiet else logging.getLogger("litforge.core")
        )
    except ExtractError as e:
        logger.error("Error: %s", e)
        return 1

    page = generate_html(processed, config)
    if quiet:
        sys.stdout.write(page)
        return 0

    with open(output_html, "w", encoding="utf-8") as f:
        f.write(page)

    total = sum(len(p.blocks) for p in processed)
    comments = sum(p.comment_count for p in processed)
    code = sum(p.code_count for p in processed)
    logger.info("Generated HTML: %s", output_html)
    logger.info(
        "Processed %d files with %d blocks (%d comments, %d code)", len(processed), total, comments, code
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
