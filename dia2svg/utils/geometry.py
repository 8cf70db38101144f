"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterator


def sign(v: float) -> int:
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0


def cells_between(ax: int, ay: int, bx: int, by: int) -> Iterator[tuple[int, int]]:
    """Cells on the straight or 45° line from A to B, both ends included."""
    dx = sign(bx - ax)
    dy = sign(by - ay)
    x, y = ax, ay
    while (x, y) != (bx, by):
        yield x, y
        x += dx
        y += dy
    yield x, y


def format_number(v: float) -> str:
    """Shortest round-trip form, with no trailing ``.0`` for integral values."""
    if float(v).is_integer():
        return str(int(v))
    return repr(float(v))
