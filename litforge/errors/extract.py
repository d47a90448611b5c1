class ExtractError(Exception):
    """A source file could not be turned into blocks; the run must stop."""
