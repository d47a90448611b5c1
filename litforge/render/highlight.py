# litforge/render/highlight.py
import html
import logging

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name

from ..config import RenderConfig
from ..utils.language import get_lexer_alias

logger = logging.getLogger(__name__)

PLAIN_LEXER = "text"


def escaped_code(code: str, config: RenderConfig) -> str:
    return f'<pre class="{config.code_css_class}"><code>{html.escape(code, quote=False)}</code></pre>'


def highlight_code(code: str, language: str, config: RenderConfig) -> str:
    """
    Highlight `code` as HTML.

    Tries the lexer mapped from the block's language tag, then the plain-text
    lexer, then plain escaping. Highlighting problems are logged, never raised.
    """
    attempts = [get_lexer_alias(language or "")]
    if attempts[0] != PLAIN_LEXER:
        attempts.append(PLAIN_LEXER)

    for tier, lexer_name in enumerate(attempts, start=1):
        try:
            formatter = HtmlFormatter(style=config.pygments_style, cssclass=config.code_css_class)
            return pygments_highlight(code, get_lexer_by_name(lexer_name), formatter)
        except Exception as e:
            logger.warning(
                "Highlight strategy %d (%s) failed, trying fallback: %s", tier, lexer_name, e
            )
    return escaped_code(code, config)


def highlight_style_defs(config: RenderConfig) -> str:
    """CSS rules for the configured Pygments style, or '' if the style is unknown."""
    try:
        return HtmlFormatter(style=config.pygments_style).get_style_defs(f".{config.code_css_class}")
    except Exception as e:
        logger.warning("Unknown Pygments style %r: %s", config.pygments_style, e)
        return ""
