# litforge/utils/__init__.py
from .fs import collect_source_files, read_source_text
from .gitignore import get_gitignore
from .language import get_block_language, get_file_extension, get_language_for_path

__all__ = [
    "collect_source_files",
    "read_source_text",
    "get_gitignore",
    "get_block_language",
    "get_file_extension",
    "get_language_for_path",
]
