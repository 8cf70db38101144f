"""T0.02 — Horizontal Lines.

Row-major scan for middle (---) rules. An end that turns into a curved
corner is pulled back one cell; T0.05 draws the corner itself.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import (
    is_bottom_vertex,
    is_solid_vline_or_jump_or_point,
    is_top_vertex,
    is_vertex,
)
from dia2svg.engine.grid import Grid
from dia2svg.engine.lines import solid_hline_at
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


def _turns_into_curve(grid: Grid, x: int, y: int, dx: int) -> bool:
    """Is the run end at (x, y) a curved corner opening toward x + dx?"""
    if is_vertex(grid.cell(x + dx, y)):
        return False
    c = grid.cell(x, y)
    return (is_top_vertex(c) and is_solid_vline_or_jump_or_point(grid.cell(x + dx, y + 1))) or (
        is_bottom_vertex(c) and is_solid_vline_or_jump_or_point(grid.cell(x + dx, y - 1))
    )


@transform(
    id="T0.02",
    layer=Layer.STROKES,
    dependencies=["T0.01"],
    description="Find solid horizontal lines",
)
def horizontal_lines(ctx: DiagramContext) -> None:
    grid = ctx.grid
    found = 0

    for y in range(grid.height):
        x = 0
        while x < grid.width:
            if solid_hline_at(grid, x, y):
                left = x
                while solid_hline_at(grid, x, y):
                    grid.mark_used(x, y)
                    x += 1
                right = x - 1

                ax = left + 1 if _turns_into_curve(grid, left, y, -1) else left
                bx = right - 1 if _turns_into_curve(grid, right, y, +1) else right

                if ax != bx:
                    ctx.paths.insert(Path(Vec2(ax, y), Vec2(bx, y)))
                    found += 1
            x += 1

    logger.debug("T0.02: %d horizontal strokes", found)
