from .extract import ExtractError
from .locate import ParserInitError, UnsupportedLanguageError
from .source import SourceReadError

__all__ = ["ExtractError", "UnsupportedLanguageError", "ParserInitError", "SourceReadError"]
