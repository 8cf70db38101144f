"""T1.01 — Decorations.

Points, arrow heads, jumps, gray blocks and triangles. Every candidate glyph
except gray and triangle blocks must be confirmed by a stroke from layer 0;
unconfirmed glyphs stay unused and render as text.

All arrow heads are stored as ">" rotated into place.
"""

from __future__ import annotations

import logging

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import (
    is_empty_or_vertex,
    is_gray,
    is_jump,
    is_point,
    is_tri,
)
from dia2svg.engine.grid import Grid
from dia2svg.engine.paths import PathSet, Vec2
from dia2svg.engine.registry import Layer, transform
from dia2svg.engine.spatial_constants import DIAGONAL_ANGLE, HALF_CELL, QUARTER_CELL

logger = logging.getLogger(__name__)

# Because of the aspect ratio, a line may end half a cell or a quarter cell
# short of the arrow head, or at its center. Nearest-first is last.
_DIAGONAL_REACH = (HALF_CELL, QUARTER_CELL, 0.0)

# (PathSet query, x direction per unit of reach, rotation) per vertical arrow.
# The y direction is the arrow's own pointing direction.
_UP_DIAGONALS = (
    ("diagonal_up_ends_at", +1, 270 + DIAGONAL_ANGLE),
    ("back_diagonal_up_ends_at", -1, 270 - DIAGONAL_ANGLE),
)
_DOWN_DIAGONALS = (
    ("diagonal_down_ends_at", -1, 90 + DIAGONAL_ANGLE),
    ("back_diagonal_down_ends_at", +1, 90 - DIAGONAL_ANGLE),
)


def _is_isolated_point(grid: Grid, x: int, y: int) -> bool:
    """Surrounded by blanks or symbols. Vertically adjacent points are
    allowed but horizontal ones are not: they would not fit, and may be text."""
    up = grid.cell(x, y - 1)
    dn = grid.cell(x, y + 1)
    lt = grid.cell(x - 1, y)
    rt = grid.cell(x + 1, y)
    return (
        (is_empty_or_vertex(dn) or is_point(dn))
        and (is_empty_or_vertex(up) or is_point(up))
        and is_empty_or_vertex(rt)
        and is_empty_or_vertex(lt)
    )


def _point_is_attached(paths: PathSet, grid: Grid, x: int, y: int) -> bool:
    return (
        paths.right_ends_at(x - 1, y)  # at the end of a line...
        or paths.left_ends_at(x + 1, y)
        or paths.down_ends_at(x, y - 1)
        or paths.up_ends_at(x, y + 1)
        or paths.up_ends_at(x, y)  # on a vertical line surrounded by text
        or paths.down_ends_at(x, y)
        or _is_isolated_point(grid, x, y)  # ...or completely isolated NSEW
    )


def resolve_vertical_arrow(paths: PathSet, x: int, y: int, pointing_up: bool) -> tuple[Vec2, float] | None:
    """Placement and rotation for ^ or v, or None for a stray character.

    Probes run in priority order and the first match wins.
    """
    dy = -1 if pointing_up else +1
    angle = 270 if pointing_up else 90
    ends_at = paths.up_ends_at if pointing_up else paths.down_ends_at

    # A vertical line ending half a cell beyond, or at the glyph itself
    if ends_at(x, y + dy * HALF_CELL):
        return Vec2(x, y + dy * HALF_CELL), angle
    if ends_at(x, y):
        return Vec2(x, y), angle

    for query_name, dx, diagonal_angle in _UP_DIAGONALS if pointing_up else _DOWN_DIAGONALS:
        query = getattr(paths, query_name)
        for reach in _DIAGONAL_REACH:
            tip = Vec2(x + dx * reach, y + dy * reach)
            if query(tip.x, tip.y):
                return tip, diagonal_angle

    # Only try this if all others failed
    if paths.vertical_passes_through(x, y):
        return Vec2(x, y + dy * HALF_CELL), angle
    return None


def resolve_horizontal_arrow(paths: PathSet, grid: Grid, x: int, y: int, pointing_right: bool) -> tuple[Vec2, float] | None:
    ends_at = paths.right_ends_at if pointing_right else paths.left_ends_at
    if not (ends_at(x, y) or paths.horizontal_passes_through(x, y)):
        return None
    dx = +1 if pointing_right else -1
    tip_x: float = x
    if is_point(grid.cell(x + dx, y)):
        # Back up so as not to overlap the point
        tip_x -= dx * HALF_CELL
    return Vec2(tip_x, y), 0 if pointing_right else 180


@transform(
    id="T1.01",
    layer=Layer.DECORATIONS,
    dependencies=["T0.06"],
    description="Find points, arrow heads, jumps, gray blocks and triangles",
)
def decorations(ctx: DiagramContext) -> None:
    grid = ctx.grid
    paths = ctx.paths
    found = 0

    for x in range(grid.width):
        for y in range(grid.height):
            c = grid.cell(x, y)
            placement: tuple[Vec2, float] | None = None
            glyph = c

            if is_jump(c):
                # A wire must end just above and just below
                if paths.down_ends_at(x, y - HALF_CELL) and paths.up_ends_at(x, y + HALF_CELL):
                    placement = Vec2(x, y), 0
            elif is_point(c):
                if _point_is_attached(paths, grid, x, y):
                    placement = Vec2(x, y), 0
            elif is_gray(c) or is_tri(c):
                placement = Vec2(x, y), 0
            elif c in (">", "<"):
                glyph = ">"
                placement = resolve_horizontal_arrow(paths, grid, x, y, c == ">")
            elif c in ("^", "v"):
                glyph = ">"
                placement = resolve_vertical_arrow(paths, x, y, c == "^")

            if placement is not None:
                center, angle = placement
                ctx.decorations.insert(center, glyph, angle)
                grid.mark_used(x, y)
                found += 1

    logger.debug("T1.01: %d decorations", found)
