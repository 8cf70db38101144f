"""T0.03 — Back-Diagonal Lines.

Left-to-right downward (\\) strokes, scanned along each diagonal once.
A run made only of vertices is not a line.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import is_point, is_solid_hline, is_solid_vline, is_vertex
from dia2svg.engine.lines import line_contains, solid_bline_at
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.registry import Layer, transform
from dia2svg.engine.spatial_constants import HALF_CELL, QUARTER_CELL

logger = logging.getLogger(__name__)


@transform(
    id="T0.03",
    layer=Layer.STROKES,
    dependencies=["T0.02"],
    description="Find solid back-diagonal lines",
)
def back_diagonal_lines(ctx: DiagramContext) -> None:
    grid = ctx.grid
    found = 0

    for i in range(-grid.height, grid.width):
        x, y = i, 0
        while y < grid.height:
            if solid_bline_at(grid, x, y):
                ax, ay = x, y
                while solid_bline_at(grid, x, y):
                    x += 1
                    y += 1
                bx, by = x - 1, y - 1

                if line_contains(grid, ax, ay, bx, by, "\\"):
                    for j in range(ax, bx + 1):
                        grid.mark_used(j, ay + (j - ax))

                    A = Vec2(ax, ay)
                    B = Vec2(bx, by)

                    top = grid.cell(ax, ay)
                    up = grid.cell(ax, ay - 1)
                    uplt = grid.cell(ax - 1, ay - 1)
                    if up in ("/", "_") or uplt == "_" or (
                        not is_vertex(top) and (is_solid_hline(uplt) or is_solid_vline(uplt))
                    ):
                        #  ___   ___
                        #  \        \    /      ----     |
                        #   \        \   \        ^      |^
                        A = A.offset(-HALF_CELL, -HALF_CELL)
                    elif is_point(uplt):
                        #  o
                        #   ^
                        #    \
                        A = A.offset(-QUARTER_CELL, -QUARTER_CELL)

                    dnrt = grid.cell(bx + 1, by + 1)
                    if (
                        grid.cell(bx, by + 1) == "/"
                        or grid.cell(bx + 1, by) == "_"
                        or grid.cell(bx - 1, by) == "_"
                        or (not is_vertex(grid.cell(bx, by)) and (is_solid_hline(dnrt) or is_solid_vline(dnrt)))
                    ):
                        #                       \      \ |
                        #  \       \     \       v      v|
                        #   \__   __\    /      ----     |
                        B = B.offset(HALF_CELL, HALF_CELL)
                    elif is_point(dnrt):
                        #    \
                        #     v
                        #      o
                        B = B.offset(QUARTER_CELL, QUARTER_CELL)

                    ctx.paths.insert(Path(A, B))
                    found += 1
            x += 1
            y += 1

    logger.debug("T0.03: %d back-diagonal strokes", found)
