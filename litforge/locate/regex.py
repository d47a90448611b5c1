# litforge/locate/regex.py
"""Regex comment locator for files without a registered grammar."""
import re
from typing import List

from ..errors import UnsupportedLanguageError
from ..models.blocks import CommentSpan
from .common import is_standalone, keep_span, sort_spans

# Fallback convention -> non-greedy pattern matching one whole comment.
CONVENTIONS = {
    "block": re.compile(r"/\*[\s\S]*?\*/"),
}


def locate_with_regex(source_text: str, convention: str) -> List[CommentSpan]:
    """
    Scan `source_text` for comments of the given fallback convention.

    Empty comments (nothing left after delimiter stripping) are dropped.
    """
    pattern = CONVENTIONS.get(convention)
    if pattern is None:
        raise UnsupportedLanguageError(f"Unknown comment convention: {convention}")

    spans: List[CommentSpan] = []
    for m in pattern.finditer(source_text):
        if not is_standalone(source_text, m.start(), m.end()):
            continue
        raw = m.group(0)
        line_start = source_text.count("\n", 0, m.start()) + 1
        span = CommentSpan(
            line_start=line_start,
            line_end=line_start + raw.count("\n"),
            raw_text=raw,
        )
        if keep_span(span):
            spans.append(span)
    return sort_spans(spans)
