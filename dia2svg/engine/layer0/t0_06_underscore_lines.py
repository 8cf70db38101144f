"""T0.06 — Underscore Lines.

Low horizontal lines drawn with underscores, read top to bottom and left to
right in a single sweep. The stroke sits half a cell below the row.

Double underscores running straight into a letter are skipped: they are
more likely a source identifier such as __FILE__ than a rule.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.grid import Grid
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.registry import Layer, transform
from dia2svg.engine.spatial_constants import HALF_CELL
from dia2svg.utils.text import is_ascii_letter

logger = logging.getLogger(__name__)


def _starts_rule(grid: Grid, x: int, y: int) -> bool:
    lt = grid.cell(x - 1, y)
    after = grid.cell(x + 2, y)
    return (
        grid.cell(x, y) == "_"
        and grid.cell(x + 1, y) == "_"
        and (not is_ascii_letter(after) or lt == "_")
        and (not is_ascii_letter(lt) or after == "_")
    )


def _left_end(grid: Grid, x: int, y: int) -> float:
    lt = grid.cell(x - 1, y)
    ltlt = grid.cell(x - 2, y)
    ax = x - HALF_CELL

    if lt in ("|", ".") or grid.cell(x - 1, y + 1) in ("|", "'"):
        # Meet the adjacent vertical
        ax -= HALF_CELL
        # Overrun into the side of a logic-gate curve
        if lt == "." and ltlt in ("-", ".") and grid.cell(x - 2, y + 1) == "(":
            ax -= HALF_CELL
    elif lt == "/":
        ax -= 1.0

    # Overrun of a tight double curve
    if lt == "(" and ltlt == "(" and grid.cell(x, y + 1) == "'" and grid.cell(x, y - 1) == ".":
        ax += HALF_CELL
    return ax


def _right_end(grid: Grid, x: int, y: int) -> float:
    """x is the first column past the run."""
    c = grid.cell(x, y)
    rt = grid.cell(x + 1, y)
    bx = x - HALF_CELL

    if c in ("|", ".") or grid.cell(x, y + 1) in ("|", "'"):
        bx += HALF_CELL
        if c == "." and rt in ("-", ".") and grid.cell(x + 1, y + 1) == ")":
            bx += HALF_CELL
    elif c == "\\":
        bx += 1.0

    if c == ")" and rt == ")" and grid.cell(x - 1, y + 1) == "'" and grid.cell(x - 1, y - 1) == ".":
        bx -= HALF_CELL
    return bx


@transform(
    id="T0.06",
    layer=Layer.STROKES,
    dependencies=["T0.05"],
    description="Find low horizontal lines drawn with underscores",
)
def underscore_lines(ctx: DiagramContext) -> None:
    grid = ctx.grid
    found = 0

    for y in range(grid.height):
        x = 0
        while x < grid.width - 2:
            if _starts_rule(grid, x, y):
                ax = _left_end(grid, x, y)
                while grid.cell(x, y) == "_":
                    grid.mark_used(x, y)
                    x += 1
                bx = _right_end(grid, x, y)
                ctx.paths.insert(Path(Vec2(ax, y + HALF_CELL), Vec2(bx, y + HALF_CELL)))
                found += 1
            x += 1

    logger.debug("T0.06: %d underscore strokes", found)
