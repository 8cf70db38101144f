"""Local continuation tests: does a solid line of some orientation pass through (x, y)?

Each test looks only at the cell and its immediate neighbours, so a run is
the maximal sequence of cells for which the test holds.
"""

from __future__ import annotations

from dia2svg.engine.glyphs import (
    is_bottom_vertex,
    is_jump,
    is_point,
    is_solid_bline,
    is_solid_dline,
    is_solid_hline,
    is_solid_vline,
    is_top_vertex,
    is_vertex,
    is_vertex_or_left_decoration,
    is_vertex_or_right_decoration,
)
from dia2svg.engine.grid import Grid
from dia2svg.utils.geometry import cells_between


def solid_vline_at(grid: Grid, x: int, y: int) -> bool:
    up = grid.cell(x, y - 1)
    c = grid.cell(x, y)
    dn = grid.cell(x, y + 1)
    uprt = grid.cell(x + 1, y - 1)
    uplt = grid.cell(x - 1, y - 1)

    if is_solid_vline(c):
        # Looks like a vertical line...does it continue?
        return (
            is_top_vertex(up) or up == "^" or is_solid_vline(up) or is_jump(up)
            or is_bottom_vertex(dn) or dn == "v" or is_solid_vline(dn) or is_jump(dn)
            or is_point(up) or is_point(dn)
            or up == "_" or uplt == "_" or uprt == "_"
            # 1-high vertical between two curved corners
            or (
                (is_top_vertex(uplt) or is_top_vertex(uprt))
                and (is_bottom_vertex(grid.cell(x - 1, y + 1)) or is_bottom_vertex(grid.cell(x + 1, y + 1)))
            )
        )
    if is_top_vertex(c) or c == "^":
        # May be the top of a vertical line
        return is_solid_vline(dn) or (is_jump(dn) and c != ".")
    if is_bottom_vertex(c) or c == "v":
        return is_solid_vline(up) or (is_jump(up) and c != "'")
    if is_point(c):
        return is_solid_vline(up) or is_solid_vline(dn)
    return False


def solid_hline_at(grid: Grid, x: int, y: int) -> bool:
    """Middle (---) horizontal lines. Underscores are handled separately."""
    ltlt = grid.cell(x - 2, y)
    lt = grid.cell(x - 1, y)
    c = grid.cell(x, y)
    rt = grid.cell(x + 1, y)
    rtrt = grid.cell(x + 2, y)

    if is_solid_hline(c) or (is_solid_hline(lt) and is_jump(c)):
        # Three in a row, unless anchored by a vertex or decoration
        if is_solid_hline(lt):
            return (
                is_solid_hline(rt) or is_vertex_or_right_decoration(rt)
                or is_solid_hline(ltlt) or is_vertex_or_left_decoration(ltlt)
            )
        if is_vertex_or_left_decoration(lt):
            return is_solid_hline(rt)
        return is_solid_hline(rt) and (is_solid_hline(rtrt) or is_vertex_or_right_decoration(rtrt))
    if c == "<":
        return is_solid_hline(rt) and is_solid_hline(rtrt)
    if c == ">":
        return is_solid_hline(lt) and is_solid_hline(ltlt)
    if is_vertex(c):
        return (is_solid_hline(lt) and is_solid_hline(ltlt)) or (is_solid_hline(rt) and is_solid_hline(rtrt))
    return False


def solid_bline_at(grid: Grid, x: int, y: int) -> bool:
    """Back-diagonal (\\) lines."""
    c = grid.cell(x, y)
    lt = grid.cell(x - 1, y - 1)
    rt = grid.cell(x + 1, y + 1)

    if c == "\\":
        # Two in a row
        return (
            is_solid_bline(rt) or is_bottom_vertex(rt) or is_point(rt) or rt == "v"
            or is_solid_bline(lt) or is_top_vertex(lt) or is_point(lt) or lt == "^"
            or grid.cell(x, y - 1) == "/" or grid.cell(x, y + 1) == "/"
            or rt == "_" or lt == "_"
        )
    if c == ".":
        return rt == "\\"
    if c == "'":
        return lt == "\\"
    if c == "^":
        return rt == "\\"
    if c == "v":
        return lt == "\\"
    if is_vertex(c) or is_point(c) or c == "|":
        return is_solid_bline(lt) or is_solid_bline(rt)
    return False


def solid_dline_at(grid: Grid, x: int, y: int) -> bool:
    """Diagonal (/) lines."""
    c = grid.cell(x, y)
    lt = grid.cell(x - 1, y + 1)
    rt = grid.cell(x + 1, y - 1)

    if c == "/" and (grid.cell(x, y - 1) == "\\" or grid.cell(x, y + 1) == "\\"):
        # Tiny hexagon corner
        return True
    if is_solid_dline(c):
        # Two in a row
        return (
            is_solid_dline(rt) or is_top_vertex(rt) or is_point(rt) or rt == "^" or rt == "_"
            or is_solid_dline(lt) or is_bottom_vertex(lt) or is_point(lt) or lt == "v" or lt == "_"
        )
    if c == ".":
        return lt == "/"
    if c == "'":
        return rt == "/"
    if c == "^":
        return lt == "/"
    if c == "v":
        return rt == "/"
    if is_vertex(c) or is_point(c) or c == "|":
        return is_solid_dline(lt) or is_solid_dline(rt)
    return False


def line_contains(grid: Grid, ax: int, ay: int, bx: int, by: int, c: str) -> bool:
    """Does the straight or 45° line from A to B contain at least one c?"""
    return any(grid.cell(x, y) == c for x, y in cells_between(ax, ay, bx, by))
