# litforge/normalize.py
"""
Turn raw comment text into prose, whatever delimiter style produced it.

The family is chosen from the shape of the trimmed text, never from the file's
language, so one function serves every grammar and the regex fallback.
"""
from __future__ import annotations

import re
import textwrap
from typing import Callable, List, Tuple

_BLOCK_OPEN_RE = re.compile(r"^/\*[*!]?")
_BLOCK_CLOSE_RE = re.compile(r"\*/$")
_BLOCK_LINE_RE = re.compile(r"^\s*\*(?!/)\s?")
_SLASH_LINE_RE = re.compile(r"^\s*//[/!]?\s?")
_HASH_LINE_RE = re.compile(r"^\s*#\s?")
_DASH_LINE_RE = re.compile(r"^\s*--\s?")
_MARKUP_OPEN_RE = re.compile(r"^<!--")
_MARKUP_CLOSE_RE = re.compile(r"-->$")


def _strip_each_line(text: str, marker: re.Pattern) -> str:
    return "\n".join(marker.sub("", line, count=1) for line in text.split("\n")).strip()


def _clean_block(text: str) -> str:
    # Closing delimiter first, so '/**/' leaves nothing behind.
    body = _BLOCK_OPEN_RE.sub("", _BLOCK_CLOSE_RE.sub("", text, count=1), count=1)
    lines = [_BLOCK_LINE_RE.sub("", line, count=1) for line in body.split("\n")]
    # Continuation lines without a '*' gutter keep their source indentation.
    if len(lines) > 1:
        lines = [lines[0]] + textwrap.dedent("\n".join(lines[1:])).split("\n")
    return "\n".join(lines).strip()


def _clean_markup(text: str) -> str:
    return _MARKUP_CLOSE_RE.sub("", _MARKUP_OPEN_RE.sub("", text, count=1), count=1).strip()


# Order matters: '/*' before '//', '<!--' before '--'.
COMMENT_FAMILIES: List[Tuple[str, Callable[[str], bool], Callable[[str], str]]] = [
    ("block", lambda s: s.startswith("/*"), _clean_block),
    ("line", lambda s: s.startswith("//"), lambda s: _strip_each_line(s, _SLASH_LINE_RE)),
    ("shell", lambda s: s.startswith("#"), lambda s: _strip_each_line(s, _HASH_LINE_RE)),
    ("markup", lambda s: s.startswith("<!--"), _clean_markup),
    ("dash", lambda s: s.startswith("--"), lambda s: _strip_each_line(s, _DASH_LINE_RE)),
]


def detect_comment_family(raw_comment: str) -> str | None:
    """Name of the delimiter family `raw_comment` belongs to, or None."""
    content = raw_comment.strip()
    for name, test, _clean in COMMENT_FAMILIES:
        if test(content):
            return name
    return None


def normalize_comment(raw_comment: str) -> str:
    """
    Strip comment delimiters from `raw_comment` and return the prose inside.

    Unrecognized text is returned trimmed, so the function never fails and
    leaves plain prose untouched.
    """
    if not raw_comment:
        return ""
    content = raw_comment.strip()
    for _name, test, clean in COMMENT_FAMILIES:
        if test(content):
            return clean(content)
    return content
