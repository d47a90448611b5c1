import logging
from unittest.mock import patch

from litforge.config import RenderConfig
from litforge.render.markdown import fallback_paragraph, render_markdown


def test_renders_markdown():
    out = render_markdown("# Title\n\nSome **bold** and `code`.", RenderConfig())
    assert "<h1>Title</h1>" in out
    assert "<strong>bold</strong>" in out
    assert "<code>code</code>" in out


def test_fenced_code_extension_enabled():
    out = render_markdown("```c\nint x;\n```", RenderConfig())
    assert "<pre>" in out
    assert "int x;" in out


def test_failure_falls_back_to_paragraph(caplog):
    with patch("litforge.render.markdown.markdown.markdown", side_effect=ValueError("bad")):
        with caplog.at_level(logging.WARNING):
            out = render_markdown("line one\nline <two>", RenderConfig())
    assert out == "<p>line one<br>line &lt;two&gt;</p>"
    assert any("Failed to process markdown" in r.message for r in caplog.records)


def test_unknown_extension_is_recoverable():
    out = render_markdown("text", RenderConfig(markdown_extensions=("no_such_extension_xyz",)))
    assert out == fallback_paragraph("text")
