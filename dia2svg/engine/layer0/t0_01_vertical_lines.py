"""T0.01 — Vertical Lines.

Scan column by column so no vertical run is visited twice. Also emits the
half-cell stubs that circuit diagrams draw with ' and . between rules.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import (
    is_bottom_vertex,
    is_jump,
    is_solid_vline_or_jump_or_point,
    is_top_vertex,
    is_vertex,
)
from dia2svg.engine.lines import solid_vline_at
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.registry import Layer, transform
from dia2svg.engine.spatial_constants import HALF_CELL

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.STROKES,
    description="Find solid vertical lines",
)
def vertical_lines(ctx: DiagramContext) -> None:
    grid = ctx.grid
    found = 0

    for x in range(grid.width):
        y = 0
        while y < grid.height:
            if solid_vline_at(grid, x, y):
                top = y
                while solid_vline_at(grid, x, y):
                    grid.mark_used(x, y)
                    y += 1
                bottom = y - 1

                ay: float = top
                by: float = bottom

                up = grid.cell(x, top)
                upup = grid.cell(x, top - 1)
                if (
                    not is_vertex(up)
                    and (
                        upup in ("-", "_")
                        or grid.cell(x - 1, top - 1) == "_"
                        or grid.cell(x + 1, top - 1) == "_"
                        or is_bottom_vertex(upup)
                    )
                ) or is_jump(upup):
                    # Stretch up to almost reach the line above (a
                    # decoration there finishes the gap)
                    ay -= HALF_CELL

                dn = grid.cell(x, bottom)
                dndn = grid.cell(x, bottom + 1)
                if (
                    (not is_vertex(dn) and (dndn == "-" or is_top_vertex(dndn)))
                    or is_jump(dndn)
                    or grid.cell(x - 1, bottom) == "_"
                    or grid.cell(x + 1, bottom) == "_"
                ):
                    # Stretch down to almost reach the line below
                    by += HALF_CELL

                if ay != by:
                    ctx.paths.insert(Path(Vec2(x, ay), Vec2(x, by)))
                    found += 1

            # Short stubs for circuit diagrams, only when not on a curve:
            #      _  _
            #    -'    '-
            elif grid.cell(x, y) == "'" and (
                (
                    grid.cell(x - 1, y) == "-"
                    and grid.cell(x + 1, y - 1) == "_"
                    and not is_solid_vline_or_jump_or_point(grid.cell(x - 1, y - 1))
                )
                or (
                    grid.cell(x - 1, y - 1) == "_"
                    and grid.cell(x + 1, y) == "-"
                    and not is_solid_vline_or_jump_or_point(grid.cell(x + 1, y - 1))
                )
            ):
                ctx.paths.insert(Path(Vec2(x, y - HALF_CELL), Vec2(x, y)))
                found += 1

            #    _.-  -._
            elif grid.cell(x, y) == "." and (
                (
                    grid.cell(x - 1, y) == "_"
                    and grid.cell(x + 1, y) == "-"
                    and not is_solid_vline_or_jump_or_point(grid.cell(x + 1, y + 1))
                )
                or (
                    grid.cell(x - 1, y) == "-"
                    and grid.cell(x + 1, y) == "_"
                    and not is_solid_vline_or_jump_or_point(grid.cell(x - 1, y + 1))
                )
            ):
                ctx.paths.insert(Path(Vec2(x, y), Vec2(x, y + HALF_CELL)))
                found += 1

            y += 1

    logger.debug("T0.01: %d vertical strokes", found)
