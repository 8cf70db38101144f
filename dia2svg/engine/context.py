"""DiagramContext — the single mutable state object flowing through all transforms.

Layer 0 fills ``paths`` and layer 1 fills ``decorations``; both mark the
cells they consume in ``grid``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dia2svg.engine.decorations import DecorationSet
from dia2svg.engine.grid import Grid
from dia2svg.engine.paths import PathSet


@dataclass
class DiagramContext:
    """Shared state for one conversion call."""

    grid: Grid
    paths: PathSet = field(default_factory=PathSet)
    decorations: DecorationSet = field(default_factory=DecorationSet)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_paths(self) -> int:
        return len(self.paths)

    @property
    def num_decorations(self) -> int:
        return len(self.decorations)

    def unused_cells(self) -> list[tuple[int, int, str]]:
        """Non-blank cells no transform consumed, in row-major order."""
        g = self.grid
        return [
            (x, y, g.cell(x, y))
            for y in range(g.height)
            for x in range(g.width)
            if g.cell(x, y) != " " and not g.is_used(x, y)
        ]
