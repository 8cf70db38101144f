"""dia2svg stroke and decoration detection engine."""

from dia2svg.engine.registry import transform, Layer, get_registry
from dia2svg.engine.context import DiagramContext
from dia2svg.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "DiagramContext",
    "Pipeline",
    "create_pipeline",
]
