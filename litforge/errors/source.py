from .extract import ExtractError


class SourceReadError(ExtractError):
    """A source file is missing or unreadable."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
