# litforge/config.py
from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_MARKDOWN_EXTENSIONS: Tuple[str, ...] = ("fenced_code", "tables", "sane_lists")


@dataclass(frozen=True)
class RenderConfig:
    """Rendering options, built once per run and passed to every renderer."""

    title: Optional[str] = None
    description: Optional[str] = None
    markdown_extensions: Tuple[str, ...] = field(default=DEFAULT_MARKDOWN_EXTENSIONS)
    pygments_style: str = "github-dark"
    code_css_class: str = "highlight"
