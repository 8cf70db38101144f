"""Render configuration — controls output styling and debug overlays."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Styling knobs for the SVG renderer. Geometry lives in spatial_constants."""

    # Stroke width in pixels for lines, curves and outlines
    stroke_width: int = 2

    # Passthrough text
    font_family: str = "Menlo"
    font_size: str = "13px"
    text_baseline_offset: int = 4  # px below the cell center
    hexagon_font_size: str = "20.5px"

    # Debug overlays
    debug_show_grid: bool = False  # tint every cell by used/unused/blank
    debug_show_source: bool = False  # overlay the source characters in red
    debug_hide_passthrough: bool = False  # suppress unconsumed text
