# litforge/layout.py
"""
Pair comments with the code they describe and lay the pairs out twice.

`pair_blocks` is a one-cursor walk with one block of lookahead:

    Comment, Code  -> PairGroup(comment, code), advance 2
    anything else  -> PairGroup(block, None) or PairGroup(None, block), advance 1

Both views (stacked for narrow screens, side-by-side for wide ones) are built
from the same rendered groups, so they always show identical content.
"""
from __future__ import annotations

from typing import Iterator, List, NamedTuple, Optional, Sequence

from .config import RenderConfig
from .models.blocks import Block, PairGroup
from .render.highlight import highlight_code
from .render.markdown import render_markdown

EMPTY_CELL = '<div class="empty"></div>'


def pair_blocks(blocks: Sequence[Block]) -> Iterator[PairGroup]:
    i = 0
    while i < len(blocks):
        current = blocks[i]
        following = blocks[i + 1] if i + 1 < len(blocks) else None
        if current.is_comment and following is not None and following.is_code:
            yield PairGroup(current, following)
            step = 2
        elif current.is_comment:
            yield PairGroup(current, None)
            step = 1
        else:
            yield PairGroup(None, current)
            step = 1
        i += step


class RenderedGroup(NamedTuple):
    docs_html: Optional[str]
    code_html: Optional[str]


def render_groups(groups: Sequence[PairGroup], config: RenderConfig) -> List[RenderedGroup]:
    """Render each block of each group exactly once."""
    rendered: List[RenderedGroup] = []
    for group in groups:
        docs_html = render_markdown(group.comment.content, config) if group.comment else None
        code_html = (
            highlight_code(group.code.content, group.code.language or "", config)
            if group.code
            else None
        )
        rendered.append(RenderedGroup(docs_html, code_html))
    return rendered


def _docs_div(docs_html: str) -> str:
    return f'<div class="docs"><div class="prose">{docs_html}</div></div>'


def _code_div(code_html: str) -> str:
    return f'<div class="code">{code_html}</div>'


def render_stacked(rendered: Sequence[RenderedGroup]) -> str:
    """Every part of every group, one after the other."""
    parts: List[str] = []
    for group in rendered:
        if group.docs_html is not None:
            parts.append(_docs_div(group.docs_html))
        if group.code_html is not None:
            parts.append(_code_div(group.code_html))
    return "\n".join(parts)


def render_side_by_side(rendered: Sequence[RenderedGroup]) -> str:
    """One row per group: prose on the left, code on the right."""
    rows: List[str] = []
    for group in rendered:
        left = _docs_div(group.docs_html) if group.docs_html is not None else (
            f'<div class="docs">{EMPTY_CELL}</div>'
        )
        right = _code_div(group.code_html) if group.code_html is not None else (
            f'<div class="code">{EMPTY_CELL}</div>'
        )
        rows.append(f'<div class="section">{left}{right}</div>')
    return "\n".join(rows)
