"""T0.04 — Diagonal Lines.

Left-to-right upward (/) strokes, scanned bottom-up along each diagonal.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import is_point, is_solid_hline, is_solid_vline, is_vertex
from dia2svg.engine.lines import line_contains, solid_dline_at
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.registry import Layer, transform
from dia2svg.engine.spatial_constants import HALF_CELL, QUARTER_CELL

logger = logging.getLogger(__name__)


@transform(
    id="T0.04",
    layer=Layer.STROKES,
    dependencies=["T0.03"],
    description="Find solid diagonal lines",
)
def diagonal_lines(ctx: DiagramContext) -> None:
    grid = ctx.grid
    found = 0

    for i in range(-grid.height, grid.width):
        x, y = i, grid.height - 1
        while y >= 0:
            if solid_dline_at(grid, x, y):
                ax, ay = x, y
                while solid_dline_at(grid, x, y):
                    x += 1
                    y -= 1
                bx, by = x - 1, y + 1

                if line_contains(grid, ax, ay, bx, by, "/"):
                    for j in range(ax, bx + 1):
                        grid.mark_used(j, ay - (j - ax))

                    A = Vec2(ax, ay)
                    B = Vec2(bx, by)

                    up = grid.cell(bx, by - 1)
                    uprt = grid.cell(bx + 1, by - 1)
                    if up in ("\\", "_") or uprt == "_" or (
                        not is_vertex(grid.cell(bx, by)) and (is_solid_hline(uprt) or is_solid_vline(uprt))
                    ):
                        #     __   __  ---     |
                        #    /      /   ^     ^|
                        #   /      /   /     / |
                        B = B.offset(HALF_CELL, -HALF_CELL)
                    elif is_point(uprt):
                        #       o
                        #      ^
                        #     /
                        B = B.offset(QUARTER_CELL, -QUARTER_CELL)

                    dnlt = grid.cell(ax - 1, ay + 1)
                    if (
                        grid.cell(ax, ay + 1) == "\\"
                        or grid.cell(ax - 1, ay) == "_"
                        or grid.cell(ax + 1, ay) == "_"
                        or (not is_vertex(grid.cell(ax, ay)) and (is_solid_hline(dnlt) or is_solid_vline(dnlt)))
                    ):
                        #               /     \ |
                        #    /  /      v       v|
                        # __/  /__   ----       |
                        A = A.offset(-HALF_CELL, HALF_CELL)
                    elif is_point(dnlt):
                        #       /
                        #      v
                        #     o
                        A = A.offset(-QUARTER_CELL, QUARTER_CELL)

                    ctx.paths.insert(Path(A, B))
                    found += 1
            x += 1
            y -= 1

    logger.debug("T0.04: %d diagonal strokes", found)
