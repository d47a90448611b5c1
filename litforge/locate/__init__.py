from typing import List

from ..errors import UnsupportedLanguageError
from ..models.blocks import CommentSpan
from ..utils.language import COMMENT_STRATEGIES
from .grammar import locate_with_grammar
from .regex import locate_with_regex

_STRATEGIES = {
    "grammar": locate_with_grammar,
    "regex": locate_with_regex,
}


def locate(source_text: str, language_id: str) -> List[CommentSpan]:
    """
    Locate the comments of `source_text`, sorted by starting line.

    The strategy (tree-sitter grammar or regex convention) comes from
    COMMENT_STRATEGIES; an unregistered language is an error, never plain text.
    """
    try:
        strategy, argument = COMMENT_STRATEGIES[language_id]
    except KeyError:
        raise UnsupportedLanguageError(f"Unsupported language: {language_id}") from None
    return _STRATEGIES[strategy](source_text, argument)


__all__ = ["locate", "locate_with_grammar", "locate_with_regex"]
