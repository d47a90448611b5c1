import os
from typing import Iterable, List

from ..errors import SourceReadError
from .gitignore import get_gitignore
from .language import is_supported_path


def read_source_text(file_path: str) -> str:
    """Read a source file as UTF-8; any failure is a SourceReadError."""
    try:
        with open(file_path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Failed to read source file '{file_path}': {e}", path=file_path) from e


def _walk_sources(root_dir: str) -> List[str]:
    spec = get_gitignore(root_dir)
    found: List[str] = []
    for root, dirs, files in os.walk(root_dir):
        rel_root = os.path.relpath(root, root_dir).replace(os.sep, "/")
        prefix = "" if rel_root == "." else rel_root + "/"
        # Trailing '/' so directory patterns like 'build/' match.
        dirs[:] = sorted(d for d in dirs if not spec.match_file(prefix + d + "/"))
        for name in sorted(files):
            rel_path = prefix + name
            if spec.match_file(rel_path) or not is_supported_path(name):
                continue
            found.append(os.path.join(root, name))
    return found


def collect_source_files(paths: Iterable[str]) -> List[str]:
    """
    Expand command-line inputs into an ordered list of files.

    Files are kept as given (in order, unchecked). Directories are walked in
    sorted order, keeping supported extensions not excluded by .gitignore.
    """
    collected: List[str] = []
    for path in paths:
        if os.path.isdir(path):
            collected.extend(_walk_sources(path))
        else:
            collected.append(path)
    return collected
