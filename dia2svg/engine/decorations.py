"""Decoration and DecorationSet — symbolic markers found by layer 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from dia2svg.engine.glyphs import Role, is_decoration, is_point, role_of
from dia2svg.engine.paths import Vec2


@dataclass(frozen=True)
class Decoration:
    center: Vec2
    glyph: str
    angle: float = 0.0  # degrees, rotation of arrow heads

    @property
    def kind(self) -> Role:
        """The single decoration role of this glyph (POINT, ARROW_HEAD, ...)."""
        return role_of(self.glyph) & Role.DECORATION


class DecorationSet:
    """Arrow heads go to the front and points to the back, so points draw on top."""

    def __init__(self) -> None:
        self._decorations: deque[Decoration] = deque()

    def insert(self, center: Vec2, glyph: str, angle: float = 0.0) -> Decoration:
        if not is_decoration(glyph):
            raise ValueError(f"Illegal decoration character: {glyph!r}")
        d = Decoration(center=center, glyph=glyph, angle=angle)
        if is_point(glyph):
            self._decorations.append(d)
        else:
            self._decorations.appendleft(d)
        return d

    def __iter__(self) -> Iterator[Decoration]:
        return iter(self._decorations)

    def __len__(self) -> int:
        return len(self._decorations)
