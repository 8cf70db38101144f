"""Glyph classifier — table lookup from a character to its diagram roles.

No engine imports. Every predicate returns a plain bool.
"""

from __future__ import annotations

import enum
import re


class Role(enum.Flag):
    NONE = 0
    UNDIRECTED_VERTEX = enum.auto()
    TOP_VERTEX = enum.auto()
    BOTTOM_VERTEX = enum.auto()
    POINT = enum.auto()
    JUMP = enum.auto()
    ARROW_HEAD = enum.auto()
    GRAY = enum.auto()
    TRI = enum.auto()

    VERTEX = UNDIRECTED_VERTEX | TOP_VERTEX | BOTTOM_VERTEX
    DECORATION = POINT | JUMP | ARROW_HEAD | GRAY | TRI


# Order is the rotation order used when drawing: > is 0°, v is 90°, ...
ARROW_HEAD_CHARACTERS = ">v<^"
POINT_CHARACTERS = "o*"
JUMP_CHARACTERS = "()"
UNDIRECTED_VERTEX_CHARACTERS = "+"
VERTEX_CHARACTERS = UNDIRECTED_VERTEX_CHARACTERS + ".'"

# GRAY_CHARACTERS[i] is the block character for (i+1)/4 level gray
GRAY_CHARACTERS = "░▒▓█"

# TRI_CHARACTERS[i] is a right triangle rotated by 90*i
TRI_CHARACTERS = "◢◣◤◥"

HEXAGON_CHARACTERS = "⬢⬡"

DECORATION_CHARACTERS = (
    ARROW_HEAD_CHARACTERS + POINT_CHARACTERS + JUMP_CHARACTERS + GRAY_CHARACTERS + TRI_CHARACTERS
)


def _build_role_table() -> dict[str, Role]:
    table: dict[str, Role] = {}

    def add(chars: str, role: Role) -> None:
        for c in chars:
            table[c] = table.get(c, Role.NONE) | role

    add("+", Role.UNDIRECTED_VERTEX | Role.TOP_VERTEX | Role.BOTTOM_VERTEX)
    add(".", Role.TOP_VERTEX)
    add("'", Role.BOTTOM_VERTEX)
    add(POINT_CHARACTERS, Role.POINT)
    add(JUMP_CHARACTERS, Role.JUMP)
    add(ARROW_HEAD_CHARACTERS, Role.ARROW_HEAD)
    add(GRAY_CHARACTERS, Role.GRAY)
    add(TRI_CHARACTERS, Role.TRI)
    return table


GLYPH_ROLES: dict[str, Role] = _build_role_table()

_ALNUM_RE = re.compile(r"[a-zA-Z0-9]")


def role_of(c: str) -> Role:
    return GLYPH_ROLES.get(c, Role.NONE)


def _has(c: str, role: Role) -> bool:
    return bool(role_of(c) & role)


def is_undirected_vertex(c: str) -> bool:
    return _has(c, Role.UNDIRECTED_VERTEX)


def is_vertex(c: str) -> bool:
    return _has(c, Role.VERTEX)


def is_top_vertex(c: str) -> bool:
    return _has(c, Role.TOP_VERTEX)


def is_bottom_vertex(c: str) -> bool:
    return _has(c, Role.BOTTOM_VERTEX)


def is_point(c: str) -> bool:
    return _has(c, Role.POINT)


def is_jump(c: str) -> bool:
    return _has(c, Role.JUMP)


def is_arrow_head(c: str) -> bool:
    return _has(c, Role.ARROW_HEAD)


def is_gray(c: str) -> bool:
    return _has(c, Role.GRAY)


def is_tri(c: str) -> bool:
    return _has(c, Role.TRI)


def is_decoration(c: str) -> bool:
    return _has(c, Role.DECORATION)


def is_vertex_or_left_decoration(c: str) -> bool:
    return is_vertex(c) or c == "<" or is_point(c)


def is_vertex_or_right_decoration(c: str) -> bool:
    return is_vertex(c) or c == ">" or is_point(c)


# Characters that may appear anywhere on a solid line of each orientation.
# "D" = diagonal slash (/), "B" = diagonal backslash (\)

def is_solid_hline(c: str) -> bool:
    return c == "-" or is_undirected_vertex(c) or is_jump(c)


def is_solid_vline(c: str) -> bool:
    return c == "|" or is_undirected_vertex(c)


def is_solid_dline(c: str) -> bool:
    return c == "/" or is_undirected_vertex(c)


def is_solid_bline(c: str) -> bool:
    return c == "\\" or is_undirected_vertex(c)


def is_solid_vline_or_jump_or_point(c: str) -> bool:
    return is_solid_vline(c) or is_jump(c) or is_point(c)


def is_empty_or_vertex(c: str) -> bool:
    """Blank, punctuation, or the letters o/v that double as decorations."""
    return c == " " or c in "ov" or not _ALNUM_RE.match(c)


def gray_level(c: str) -> int:
    """0..3, lightest first."""
    return GRAY_CHARACTERS.index(c)


def tri_rotation(c: str) -> int:
    """Rotation of a triangle glyph in degrees (0, 90, 180 or 270)."""
    return TRI_CHARACTERS.index(c) * 90
