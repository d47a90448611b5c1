# litforge/utils/gitignore.py
import os
from typing import List

import pathspec


def get_gitignore(path: str) -> pathspec.PathSpec:
    """
    PathSpec compiled from the nearest .gitignore at or above `path`
    (file or directory), always ignoring '.git/'.
    """
    defaults: List[str] = [".git/"]
    lines: List[str] = list(defaults)

    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    cur = base
    while True:
        gi = os.path.join(cur, ".gitignore")
        if os.path.isfile(gi):
            try:
                with open(gi, encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
                break
            except OSError:
                pass
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)
