# litforge/render/markdown.py
import html
import logging

import markdown

from ..config import RenderConfig

logger = logging.getLogger(__name__)


def fallback_paragraph(text: str) -> str:
    return "<p>" + html.escape(text).replace("\n", "<br>") + "</p>"


def render_markdown(text: str, config: RenderConfig) -> str:
    """Render comment prose to HTML. Never raises; degrades to a plain paragraph."""
    try:
        return markdown.markdown(text, extensions=list(config.markdown_extensions))
    except Exception as e:
        logger.warning("Failed to process markdown: %s", e)
        return fallback_paragraph(text)
