"""T0.05 — Curved Corners.

Quarter-circle corners and ( ) lens connectors. Every case can be found from
three horizontally adjacent characters plus the row above or below. Because
+ is both a top and a bottom vertex the cases are not exclusive.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import (
    is_bottom_vertex,
    is_point,
    is_solid_hline,
    is_solid_vline,
    is_top_vertex,
)
from dia2svg.engine.grid import Grid
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.registry import Layer, transform
from dia2svg.engine.spatial_constants import CORNER_TANGENT_OFFSET, LENS_TANGENT_OFFSET

logger = logging.getLogger(__name__)


def _corner(grid: Grid, x: int, y: int, dx: int, dy: int) -> Path:
    """Curve from the rule at (x - dx, y) to the vertical at (x + dx, y + dy)."""
    grid.mark_used(x - dx, y)
    grid.mark_used(x, y)
    grid.mark_used(x + dx, y + dy)
    return Path(
        Vec2(x - dx, y),
        Vec2(x + dx, y + dy),
        Vec2(x + dx * CORNER_TANGENT_OFFSET, y),
        Vec2(x + dx, y + dy),
    )


def _lens(grid: Grid, x: int, y: int, dx: int) -> Path:
    """Curve bulging toward (x, y) from the . and ' at column x - dx."""
    grid.mark_used(x, y)
    grid.mark_used(x - dx, y - 1)
    grid.mark_used(x - dx, y + 1)
    return Path(
        Vec2(x - 2 * dx, y - 1),
        Vec2(x - 2 * dx, y + 1),
        Vec2(x + dx * LENS_TANGENT_OFFSET, y - 1),
        Vec2(x + dx * LENS_TANGENT_OFFSET, y + 1),
    )


@transform(
    id="T0.05",
    layer=Layer.STROKES,
    dependencies=["T0.04"],
    description="Find curved corners and lens connectors",
)
def curved_corners(ctx: DiagramContext) -> None:
    grid = ctx.grid
    found = 0

    for y in range(grid.height):
        for x in range(grid.width):
            c = grid.cell(x, y)

            if is_top_vertex(c):
                # -.
                #   |
                if is_solid_hline(grid.cell(x - 1, y)) and is_solid_vline(grid.cell(x + 1, y + 1)):
                    ctx.paths.insert(_corner(grid, x, y, +1, +1))
                    found += 1

                #  .-
                # |
                if is_solid_hline(grid.cell(x + 1, y)) and is_solid_vline(grid.cell(x - 1, y + 1)):
                    ctx.paths.insert(_corner(grid, x, y, -1, +1))
                    found += 1

            #   .  .   .  .
            #  (  o     )  o
            #   '  '   '  '
            if (c == ")" or is_point(c)) and grid.cell(x - 1, y - 1) == "." and grid.cell(x - 1, y + 1) == "'":
                ctx.paths.insert(_lens(grid, x, y, +1))
                found += 1

            if (c == "(" or is_point(c)) and grid.cell(x + 1, y - 1) == "." and grid.cell(x + 1, y + 1) == "'":
                ctx.paths.insert(_lens(grid, x, y, -1))
                found += 1

            if is_bottom_vertex(c):
                #   |
                # -'
                if is_solid_hline(grid.cell(x - 1, y)) and is_solid_vline(grid.cell(x + 1, y - 1)):
                    ctx.paths.insert(_corner(grid, x, y, +1, -1))
                    found += 1

                # |
                #  '-
                if is_solid_hline(grid.cell(x + 1, y)) and is_solid_vline(grid.cell(x - 1, y - 1)):
                    ctx.paths.insert(_corner(grid, x, y, -1, -1))
                    found += 1

    logger.debug("T0.05: %d curved strokes", found)
