# litforge/assemble.py
from __future__ import annotations

from typing import Iterable, List, Optional

from .models.blocks import Block, BlockKind, CommentSpan
from .normalize import normalize_comment
from .utils.language import get_block_language


def _code_block(
    lines: List[str], first: int, last: int, file_name: str, language: str
) -> Optional[Block]:
    """
    Code block for 1-indexed lines first..last with blank edges dropped,
    or None when nothing but blank lines remain.
    """
    while first <= last and not lines[first - 1].strip():
        first += 1
    while last >= first and not lines[last - 1].strip():
        last -= 1
    if first > last:
        return None
    content = "\n".join(line.rstrip("\r") for line in lines[first - 1 : last])
    return Block(
        kind=BlockKind.CODE,
        content=content,
        line_start=first,
        line_end=last,
        source_file=file_name,
        language=language,
    )


def assemble_blocks(spans: Iterable[CommentSpan], source_text: str, file_name: str) -> List[Block]:
    """
    Interleave comment spans with the code between them.

    `spans` must be sorted by line_start. The cursor is the last line already
    consumed; gaps after it become Code blocks, each span becomes a Comment
    block, and whatever follows the last span becomes a trailing Code block.
    Gaps holding only blank lines produce nothing.
    """
    lines = source_text.split("\n")
    language = get_block_language(file_name)
    blocks: List[Block] = []
    cursor = 0

    for span in spans:
        if cursor < span.line_start - 1:
            code = _code_block(lines, cursor + 1, span.line_start - 1, file_name, language)
            if code is not None:
                blocks.append(code)
        blocks.append(
            Block(
                kind=BlockKind.COMMENT,
                content=normalize_comment(span.raw_text),
                line_start=span.line_start,
                line_end=span.line_end,
                source_file=file_name,
            )
        )
        cursor = max(cursor, span.line_end)

    if cursor < len(lines):
        code = _code_block(lines, cursor + 1, len(lines), file_name, language)
        if code is not None:
            blocks.append(code)

    return blocks
