"""Entry points: diagram text -> DiagramContext -> SVG fragment -> HTML document."""

from __future__ import annotations

import logging

from dia2svg.engine.config import RenderConfig
from dia2svg.engine.context import DiagramContext
from dia2svg.engine.grid import Grid
from dia2svg.engine.pipeline import create_pipeline
from dia2svg.svg.serializer import serialize_svg
from dia2svg.utils.text import equalize_line_lengths, hide_embedded_o

logger = logging.getLogger(__name__)

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <title>SVG</title>
  </head>
  <body>
{fragment}
  </body>
</html>"""


def parse_diagram(diagram_text: str) -> DiagramContext:
    """Pad ragged lines into a rectangular grid and wrap it in a fresh context."""
    if not diagram_text:
        raise ValueError("Diagram text is empty")
    if "\n" not in diagram_text:
        raise ValueError("Diagram text must contain at least one newline")

    # A letter o between two letters is prose, never a point decoration
    rows = equalize_line_lengths(hide_embedded_o(diagram_text))
    grid = Grid(rows)
    logger.debug("Parsed %dx%d diagram grid", grid.width, grid.height)
    return DiagramContext(grid=grid)


def convert(diagram_text: str) -> DiagramContext:
    """Run stroke and decoration detection, returning the populated context."""
    ctx = parse_diagram(diagram_text)
    create_pipeline().run(ctx)
    return ctx


def render_fragment(
    diagram_text: str,
    alignment_hint: str = "",
    config: RenderConfig | None = None,
) -> str:
    """Convert diagram text to a self-contained SVG fragment."""
    ctx = convert(diagram_text)
    return serialize_svg(ctx, alignment_hint, config)


def wrap_as_document(svg_fragment: str) -> str:
    """Wrap an SVG fragment in a minimal HTML5 page."""
    return _HTML_TEMPLATE.format(fragment=svg_fragment)
