"""Transform registry — every detection pass is a standalone function registered via decorator.

Usage:
    @transform(id="T0.02", layer=Layer.STROKES, dependencies=["T0.01"])
    def horizontal_lines(ctx: DiagramContext) -> None:
        for y in range(ctx.grid.height):
            ...

Adding a new pass = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from dia2svg.engine.context import DiagramContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    STROKES = 0
    DECORATIONS = 1


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["DiagramContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Singleton registry of all transforms."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        specs = [s for s in self._transforms.values() if s.layer == layer]
        return sorted(specs, key=lambda s: s.id)

    def resolve_order(self) -> list[TransformSpec]:
        """Every transform, each after the passes it depends on.

        Among passes that are ready at the same time the lowest ID runs first,
        so the order is fixed for a given set of registrations.
        """
        waiting: dict[str, set[str]] = {}
        for tid, spec in self._transforms.items():
            unknown = [d for d in spec.dependencies if d not in self._transforms]
            if unknown:
                raise ValueError(f"Transform {tid} depends on unregistered {unknown}")
            waiting[tid] = set(spec.dependencies)

        ready = [tid for tid, deps in waiting.items() if not deps]
        heapq.heapify(ready)
        ordered: list[TransformSpec] = []

        while ready:
            tid = heapq.heappop(ready)
            ordered.append(self._transforms[tid])
            for other_id, deps in waiting.items():
                if tid in deps:
                    deps.discard(tid)
                    if not deps:
                        heapq.heappush(ready, other_id)

        if len(ordered) != len(self._transforms):
            stuck = sorted(tid for tid, deps in waiting.items() if deps)
            raise ValueError(f"Circular dependency detected among: {stuck}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["DiagramContext"], None]):
        spec = TransformSpec(
            id=id,
            layer=layer,
            fn=fn,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
