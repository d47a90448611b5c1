# litforge/utils/language.py
import os

from ..errors import UnsupportedLanguageError

# Source extension -> language identifier used to pick a comment locator.
EXTENSION_LANGUAGES = {
    ".c": "c",
    ".h": "c",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".rs": "rust",
    ".py": "python",
    ".ld": "linker-script",
}

# Language identifier -> (strategy, argument).
# "grammar" takes the tree-sitter grammar name; "regex" takes a fallback convention.
COMMENT_STRATEGIES = {
    "c": ("grammar", "c"),
    "javascript": ("grammar", "javascript"),
    "typescript": ("grammar", "typescript"),
    "rust": ("grammar", "rust"),
    "python": ("grammar", "python"),
    "linker-script": ("regex", "block"),
}

# Code block language tag (extension without the dot) -> Pygments lexer alias.
HIGHLIGHT_LEXERS = {
    "c": "c",
    "h": "c",
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "ts": "typescript",
    "ld": "text",
    "py": "python",
    "rs": "rust",
    "go": "go",
    "java": "java",
    "cpp": "cpp",
    "hpp": "cpp",
}


def get_file_extension(file_path: str) -> str:
    """Return the lowercased extension including the dot, or '' when there is none."""
    return os.path.splitext(file_path)[1].lower()


def get_block_language(file_path: str) -> str:
    """Language tag stamped on every Code block of a file."""
    return get_file_extension(file_path).lstrip(".")


def get_language_for_path(file_path: str) -> str:
    """Map a file path to its language identifier or raise UnsupportedLanguageError."""
    ext = get_file_extension(file_path)
    language = EXTENSION_LANGUAGES.get(ext)
    if language is None:
        raise UnsupportedLanguageError(
            f"Unsupported file extension: {ext or '(none)'}", extension=ext
        )
    return language


def get_lexer_alias(language_tag: str) -> str:
    return HIGHLIGHT_LEXERS.get(language_tag, "text")


def is_supported_path(file_path: str) -> bool:
    return get_file_extension(file_path) in EXTENSION_LANGUAGES
