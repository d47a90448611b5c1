from .extract import ExtractError


class UnsupportedLanguageError(ExtractError):
    """No grammar and no fallback convention is registered for a file."""

    def __init__(self, message: str, extension: str = ""):
        super().__init__(message)
        self.extension = extension


class ParserInitError(ExtractError):
    """A tree-sitter grammar failed to load, initialize or parse."""
