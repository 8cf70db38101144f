"""dia2svg — convert ASCII-art diagrams embedded in plain text to SVG."""

from dia2svg.diagram import convert, render_fragment, wrap_as_document

__all__ = ["convert", "render_fragment", "wrap_as_document"]
