"""Pipeline orchestrator — runs detection passes in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from dia2svg.engine.context import DiagramContext
from dia2svg.engine.registry import Layer, TransformRegistry, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1"]


class Pipeline:
    """Orchestrates the stroke and decoration passes.

    A failing pass is recorded in ``ctx.errors`` and re-raised: a failure
    here is a detection bug, so there is no partial result to return.
    """

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: DiagramContext) -> DiagramContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()

        ordered = self.registry.resolve_order()
        logger.info(
            "Pipeline: %d transforms queued on %dx%d grid",
            len(ordered),
            ctx.grid.width,
            ctx.grid.height,
        )

        for spec in ordered:
            self._run_one(ctx, spec.id, spec.fn)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d paths, %d decorations in %.1fms",
            ctx.num_paths,
            ctx.num_decorations,
            total,
        )
        return ctx

    def run_layer(self, ctx: DiagramContext, layer: Layer) -> DiagramContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(ctx, spec.id, spec.fn)
        return ctx

    def _run_one(self, ctx: DiagramContext, transform_id: str, fn) -> None:
        t0 = time.perf_counter()
        try:
            fn(ctx)
        except Exception as e:
            ctx.errors[transform_id] = str(e)
            logger.error("  %s FAILED: %s", transform_id, e)
            raise
        ctx.completed_transforms.add(transform_id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", transform_id, elapsed)


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"dia2svg.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    register_transforms()
    return Pipeline()
