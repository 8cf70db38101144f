"""Grid — an immutable rectangular character buffer with a parallel used mask."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


class Grid:
    """Character-addressable view over padded diagram text.

    Reads outside the grid return a blank, so neighbourhood tests never need
    bounds checks. Consumed cells are recorded in ``used``.
    """

    def __init__(self, rows: list[str]) -> None:
        if not rows:
            raise ValueError("Grid requires at least one row")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Grid rows must all have length {width}; row {y} has length {len(row)}"
                )
        self._rows = tuple(rows)
        self.width = width
        self.height = len(rows)
        self._used: NDArray[np.bool_] = np.zeros((self.height, self.width), dtype=bool)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> str:
        if self.in_bounds(x, y):
            return self._rows[y][x]
        return " "

    def mark_used(self, x: int, y: int) -> None:
        if self.in_bounds(x, y):
            self._used[y, x] = True

    def is_used(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self._used[y, x])

    @property
    def used(self) -> NDArray[np.bool_]:
        """Read-only view of the used mask, indexed [y, x]."""
        view = self._used.view()
        view.flags.writeable = False
        return view

    @property
    def rows(self) -> tuple[str, ...]:
        return self._rows
