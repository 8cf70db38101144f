"""Vec2, Path and PathSet — the stroke primitives found by layer 0."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from dia2svg.engine.spatial_constants import EPSILON


@dataclass(frozen=True)
class Vec2:
    """A position in character cells, at quarter-cell granularity."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Vec2:
        return Vec2(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Path:
    """One maximal stroke. With control points C and D it is a cubic curve."""

    A: Vec2
    B: Vec2
    C: Vec2 | None = None
    D: Vec2 | None = None
    dashed: bool = False

    def __post_init__(self) -> None:
        if not (isinstance(self.A, Vec2) and isinstance(self.B, Vec2)):
            raise TypeError(f"Path requires two Vec2 endpoints, got {self.A!r} and {self.B!r}")
        if self.C is not None and self.D is None:
            object.__setattr__(self, "D", self.C)

    def is_vertical(self) -> bool:
        return self.B.x == self.A.x

    def is_horizontal(self) -> bool:
        return self.B.y == self.A.y

    def is_diagonal(self) -> bool:
        """Diagonal lines look like: /  See also is_back_diagonal."""
        dx = self.B.x - self.A.x
        dy = self.B.y - self.A.y
        return abs(dy + dx) < EPSILON

    def is_back_diagonal(self) -> bool:
        dx = self.B.x - self.A.x
        dy = self.B.y - self.A.y
        return abs(dy - dx) < EPSILON

    def is_curved(self) -> bool:
        return self.C is not None

    def _upper(self) -> Vec2:
        return self.A if self.A.y < self.B.y else self.B

    def _lower(self) -> Vec2:
        return self.A if self.B.y < self.A.y else self.B

    def ends_at(self, x: float, y: float) -> bool:
        return (self.A.x == x and self.A.y == y) or (self.B.x == x and self.B.y == y)

    def up_ends_at(self, x: float, y: float) -> bool:
        return self.is_vertical() and self.A.x == x and min(self.A.y, self.B.y) == y

    def down_ends_at(self, x: float, y: float) -> bool:
        return self.is_vertical() and self.A.x == x and max(self.A.y, self.B.y) == y

    def left_ends_at(self, x: float, y: float) -> bool:
        return self.is_horizontal() and self.A.y == y and min(self.A.x, self.B.x) == x

    def right_ends_at(self, x: float, y: float) -> bool:
        return self.is_horizontal() and self.A.y == y and max(self.A.x, self.B.x) == x

    def diagonal_up_ends_at(self, x: float, y: float) -> bool:
        if not self.is_diagonal():
            return False
        end = self._upper()
        return end.x == x and end.y == y

    def diagonal_down_ends_at(self, x: float, y: float) -> bool:
        if not self.is_diagonal():
            return False
        end = self._lower()
        return end.x == x and end.y == y

    def back_diagonal_up_ends_at(self, x: float, y: float) -> bool:
        if not self.is_back_diagonal():
            return False
        end = self._upper()
        return end.x == x and end.y == y

    def back_diagonal_down_ends_at(self, x: float, y: float) -> bool:
        if not self.is_back_diagonal():
            return False
        end = self._lower()
        return end.x == x and end.y == y

    def vertical_passes_through(self, x: float, y: float) -> bool:
        return (
            self.is_vertical()
            and self.A.x == x
            and min(self.A.y, self.B.y) <= y <= max(self.A.y, self.B.y)
        )

    def horizontal_passes_through(self, x: float, y: float) -> bool:
        return (
            self.is_horizontal()
            and self.A.y == y
            and min(self.A.x, self.B.x) <= x <= max(self.A.x, self.B.x)
        )


def _any_path(method: Callable[[Path, float, float], bool]) -> Callable[[PathSet, float, float], bool]:
    """Lift a Path predicate to 'true for some path in the set'."""

    def query(self: PathSet, x: float, y: float) -> bool:
        return any(method(p, x, y) for p in self._paths)

    query.__name__ = method.__name__
    query.__doc__ = f"True if any path satisfies Path.{method.__name__}(x, y)."
    return query


class PathSet:
    """Insertion-ordered group of paths. Queries are O(n) scans."""

    def __init__(self) -> None:
        self._paths: list[Path] = []

    def insert(self, path: Path) -> None:
        self._paths.append(path)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    ends_at = _any_path(Path.ends_at)
    up_ends_at = _any_path(Path.up_ends_at)
    down_ends_at = _any_path(Path.down_ends_at)
    left_ends_at = _any_path(Path.left_ends_at)
    right_ends_at = _any_path(Path.right_ends_at)
    diagonal_up_ends_at = _any_path(Path.diagonal_up_ends_at)
    diagonal_down_ends_at = _any_path(Path.diagonal_down_ends_at)
    back_diagonal_up_ends_at = _any_path(Path.back_diagonal_up_ends_at)
    back_diagonal_down_ends_at = _any_path(Path.back_diagonal_down_ends_at)
    vertical_passes_through = _any_path(Path.vertical_passes_through)
    horizontal_passes_through = _any_path(Path.horizontal_passes_through)
