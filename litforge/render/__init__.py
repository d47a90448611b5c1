from .highlight import highlight_code
from .markdown import render_markdown

__all__ = ["highlight_code", "render_markdown"]
