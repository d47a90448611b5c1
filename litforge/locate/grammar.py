# litforge/locate/grammar.py
"""
Grammar-based comment locator built on tree-sitter.

Each registered grammar ships as its own `tree_sitter_<name>` distribution.
Comment nodes are found by walking the whole tree; grammars name them
differently ("comment" vs. "line_comment"/"block_comment"), so a family of
node types is matched rather than a single name.
"""
from __future__ import annotations

import importlib
import logging
from typing import List

from tree_sitter import Language, Parser

from ..errors import ParserInitError
from ..models.blocks import CommentSpan
from .common import is_standalone, keep_span, sort_spans

log = logging.getLogger(__name__)

# Grammar name -> (module, factory returning the language pointer).
GRAMMARS = {
    "c": ("tree_sitter_c", "language"),
    "javascript": ("tree_sitter_javascript", "language"),
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "rust": ("tree_sitter_rust", "language"),
    "python": ("tree_sitter_python", "language"),
}

COMMENT_NODE_TYPES = frozenset({"comment", "line_comment", "block_comment", "html_comment"})


def load_language(grammar: str) -> Language:
    """Import and build the tree-sitter Language for `grammar`."""
    try:
        module_name, factory = GRAMMARS[grammar]
    except KeyError:
        raise ParserInitError(f"No tree-sitter grammar registered for '{grammar}'") from None
    try:
        module = importlib.import_module(module_name)
        return Language(getattr(module, factory)())
    except Exception as e:
        raise ParserInitError(f"Failed to load tree-sitter grammar '{grammar}': {e}") from e


def _make_parser(grammar: str) -> Parser:
    language = load_language(grammar)
    try:
        return Parser(language)
    except Exception as e:
        raise ParserInitError(f"Failed to initialize tree-sitter parser for '{grammar}': {e}") from e


def _iter_comment_nodes(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in COMMENT_NODE_TYPES:
            yield node
            continue
        stack.extend(reversed(node.children))


def locate_with_grammar(source_text: str, grammar: str) -> List[CommentSpan]:
    """
    Parse `source_text` with `grammar` and return its standalone comments,
    sorted by starting line.

    Comments that share a line with code are left out so the code around
    them stays intact inside its Code block.
    """
    parser = _make_parser(grammar)
    source = source_text.encode("utf-8")
    try:
        tree = parser.parse(source)
    except Exception as e:
        raise ParserInitError(f"tree-sitter failed to parse source as '{grammar}': {e}") from e

    spans: List[CommentSpan] = []
    for node in _iter_comment_nodes(tree.root_node):
        start_byte, end_byte = node.start_byte, node.end_byte
        # Some grammars end a line comment at column 0 of the next row.
        while end_byte > start_byte and source[end_byte - 1 : end_byte] in (b"\n", b"\r"):
            end_byte -= 1
        if not is_standalone(source, start_byte, end_byte):
            continue
        raw = source[start_byte:end_byte].decode("utf-8")
        line_start = node.start_point[0] + 1
        span = CommentSpan(
            line_start=line_start,
            line_end=line_start + raw.count("\n"),
            raw_text=raw,
        )
        if keep_span(span):
            spans.append(span)

    log.debug("grammar %s located %d comment(s)", grammar, len(spans))
    return sort_spans(spans)
