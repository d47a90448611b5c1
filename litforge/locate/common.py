# litforge/locate/common.py
from typing import List

from ..models.blocks import CommentSpan
from ..normalize import normalize_comment


def is_standalone(text: str, start: int, end: int) -> bool:
    """
    True when text[start:end] has nothing but whitespace around it on its
    first and last lines. Works on str or bytes offsets alike.
    """
    newline = "\n" if isinstance(text, str) else b"\n"
    line_start = text.rfind(newline, 0, start) + 1
    line_end = text.find(newline, end)
    if line_end == -1:
        line_end = len(text)
    return not text[line_start:start].strip() and not text[end:line_end].strip()


def is_shebang(span: CommentSpan) -> bool:
    return span.line_start == 1 and span.raw_text.startswith("#!")


def keep_span(span: CommentSpan) -> bool:
    """Spans that become Comment blocks: not a shebang, not whitespace-only."""
    if is_shebang(span):
        return False
    return bool(normalize_comment(span.raw_text).strip())


def sort_spans(spans: List[CommentSpan]) -> List[CommentSpan]:
    return sorted(spans, key=lambda s: (s.line_start, s.line_end))
