# litforge/render/html.py
"""
Aggregate HTML for a run: one page holding every processed file.

The page carries both layouts; CSS shows the stacked view on narrow screens
and the side-by-side view on wide ones.
"""
from __future__ import annotations

import html
import posixpath
from typing import List, Optional, Sequence

from ..config import RenderConfig
from ..layout import pair_blocks, render_groups, render_side_by_side, render_stacked
from ..models.blocks import ProcessedFile
from .highlight import highlight_style_defs
from .markdown import render_markdown

DEFAULT_DESCRIPTION = "Literate Programming Documentation"

PAGE_CSS = """
* { box-sizing: border-box; }
body { margin: 0; font-family: system-ui, sans-serif; background: #f9fafb; color: #374151; }
header.page { padding: 2rem 1.5rem; background: #fff; border-bottom: 1px solid #e5e7eb; }
header.page h1 { margin: 0; font-size: 1.875rem; color: #111827; }
.file-header { display: flex; background: #f3f4f6; border-bottom: 2px solid #d1d5db; }
.file-header h2 { margin: 0; padding: 1.5rem; font-size: 1.25rem; }
.docs, .code { padding: 1.5rem; }
.docs { background: #fff; border-bottom: 1px solid #e5e7eb; }
.code { background: #0d1117; overflow-x: auto; }
.code pre { margin: 0; }
.empty { min-height: 4rem; }
.prose code { background: #f3f4f6; padding: 0.125rem 0.25rem; border-radius: 0.25rem; }
.prose pre { background: #1f2937; color: #e5e7eb; padding: 0.75rem; overflow-x: auto; }
.side-by-side { display: none; }
@media (min-width: 1024px) {
  .stacked { display: none; }
  .side-by-side { display: flex; flex-direction: column; }
  .section { display: flex; width: 100%; }
  .section .docs { width: 40%; border-right: 1px solid #e5e7eb; }
  .section .code { width: 60%; }
}
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>{page_css}</style>
  <style>{pygments_css}</style>
</head>
<body>
  <header class="page">
    <h1>{title}</h1>
    <div class="description prose">{description}</div>
  </header>
  <main>
    <div class="stacked">
{stacked}
    </div>
    <div class="side-by-side">
{side_by_side}
    </div>
  </main>
</body>
</html>
"""


def source_link(file_name: str, base_url: Optional[str]) -> Optional[str]:
    if not base_url:
        return None
    return (base_url if base_url.endswith("/") else base_url + "/") + file_name


def generate_file_header(file_name: str, base_url: Optional[str] = None) -> str:
    """Header row marking the start of a file, linked to its source when possible."""
    display_name = html.escape(posixpath.basename(file_name.replace("\\", "/")) or file_name)
    link = source_link(file_name, base_url)
    if link:
        label = (
            f'<a href="{html.escape(link)}" target="_blank" rel="noopener noreferrer">'
            f"{display_name}</a>"
        )
    else:
        label = display_name
    return f'<!-- File: {html.escape(file_name)} -->\n<div class="file-header"><h2>{label}</h2></div>'


def page_title(files: Sequence[ProcessedFile], config: RenderConfig) -> str:
    if config.title:
        return config.title
    if len(files) == 1:
        return posixpath.basename(files[0].file_name.replace("\\", "/")) or "Literate Code"
    return f"Literate Code ({len(files)} files)"


def generate_html(files: Sequence[ProcessedFile], config: RenderConfig) -> str:
    """Render every processed file, in order, into a single HTML document."""
    stacked: List[str] = []
    side_by_side: List[str] = []

    for processed in files:
        header = generate_file_header(processed.file_name, processed.base_url)
        rendered = render_groups(list(pair_blocks(processed.blocks)), config)
        stacked.extend([header, render_stacked(rendered)])
        side_by_side.extend([header, render_side_by_side(rendered)])

    description = (
        render_markdown(config.description, config) if config.description else DEFAULT_DESCRIPTION
    )
    return PAGE_TEMPLATE.format(
        title=html.escape(page_title(files, config)),
        description=description,
        page_css=PAGE_CSS,
        pygments_css=highlight_style_defs(config),
        stacked="\n".join(stacked),
        side_by_side="\n".join(side_by_side),
    )
