__version__ = "1.2.0"

from .assemble import assemble_blocks
from .config import RenderConfig
from .core import parse_source_file, parse_source_text, process_files
from .errors import (
    ExtractError,
    ParserInitError,
    SourceReadError,
    UnsupportedLanguageError,
)
from .layout import pair_blocks, render_groups, render_side_by_side, render_stacked
from .locate import locate
from .models import Block, BlockKind, CommentSpan, PairGroup, ProcessedFile
from .normalize import normalize_comment
from .render.html import generate_html
from .utils.fs import collect_source_files

__all__ = [
    "locate",
    "normalize_comment",
    "assemble_blocks",
    "pair_blocks",
    "render_groups",
    "render_stacked",
    "render_side_by_side",
    "parse_source_text",
    "parse_source_file",
    "process_files",
    "collect_source_files",
    "generate_html",
    "RenderConfig",
    "Block",
    "BlockKind",
    "CommentSpan",
    "PairGroup",
    "ProcessedFile",
    "ExtractError",
    "UnsupportedLanguageError",
    "ParserInitError",
    "SourceReadError",
]
