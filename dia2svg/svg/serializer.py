"""Write the SVG fragment for a fully detected diagram."""

from __future__ import annotations

from typing import Literal

from dia2svg.engine.config import RenderConfig
from dia2svg.engine.context import DiagramContext
from dia2svg.engine.glyphs import HEXAGON_CHARACTERS
from dia2svg.engine.spatial_constants import ASPECT, SCALE
from dia2svg.svg.primitives import decoration_element, path_element, text_element
from dia2svg.utils.geometry import format_number
from dia2svg.utils.text import restore_embedded_o

Alignment = Literal["", "floatleft", "floatright", "center"]

ALIGNMENT_STYLES: dict[str, str] = {
    "": "",
    "floatleft": "float:left;margin: 15px 30px 15px 0px;",
    "floatright": "float:right;margin: 15px 0px 15px 30px;",
    "center": "margin: 0px auto 0px auto;",
}


def style_block(config: RenderConfig) -> str:
    return f"""<style>
    svg.diagram {{
        display:block;
        font-family: {config.font_family};
        font-size: {config.font_size};
        text-align:center;
        stroke-linecap:round;
        stroke-width: {config.stroke_width}px;
        stroke:#000;
        fill:#000;
    }}

    svg.diagram .opendot {{
        fill:#FFF
    }}

    svg.diagram text {{
        stroke:none;
    }}
</style>"""


def _debug_grid(ctx: DiagramContext) -> list[str]:
    grid = ctx.grid
    lines = ['<g style="opacity:0.1">']
    for x in range(grid.width):
        for y in range(grid.height):
            if grid.is_used(x, y):
                fill = "red;"
            elif grid.cell(x, y) == " ":
                fill = "gray; opacity:0.05"
            else:
                fill = "blue;"
            lines.append(
                f'<rect x="{format_number((x - 0.5) * SCALE + 1)}" y="{format_number((y - 0.5) * SCALE * ASPECT + 2)}"'
                f' width="{SCALE - 2}" height="{SCALE * ASPECT - 2}" style="fill:{fill}"/>'
            )
    lines.append("</g>")
    return lines


def _passthrough_text(ctx: DiagramContext, config: RenderConfig) -> list[str]:
    grid = ctx.grid
    lines = ['<g transform="translate(0,0)">']
    for y in range(grid.height):
        for x in range(grid.width):
            c = grid.cell(x, y)
            if c in HEXAGON_CHARACTERS:
                # Enlarge hexagons so that they fill a grid cell
                lines.append(text_element(x, y, c, config, style=f"font-size:{config.hexagon_font_size}"))
            elif c != " " and not grid.is_used(x, y):
                lines.append(text_element(x, y, c, config))
    lines.append("</g>")
    return lines


def _debug_source(ctx: DiagramContext, config: RenderConfig) -> list[str]:
    grid = ctx.grid
    # Offset the characters a little for easier viewing
    lines = ['<g transform="translate(2,2)">']
    for x in range(grid.width):
        for y in range(grid.height):
            c = grid.cell(x, y)
            if c != " ":
                lines.append(
                    text_element(
                        x, y, c, config,
                        style="fill:#F00;font-family:Menlo,monospace;font-size:12px;text-align:center",
                    )
                )
    lines.append("</g>")
    return lines


def serialize_svg(
    ctx: DiagramContext,
    alignment_hint: str = "",
    config: RenderConfig | None = None,
) -> str:
    """Generate the SVG fragment: style, paths, decorations, then leftover text."""
    if alignment_hint not in ALIGNMENT_STYLES:
        raise ValueError(
            f"Unknown alignment hint {alignment_hint!r}; expected one of {sorted(ALIGNMENT_STYLES)}"
        )
    config = config or RenderConfig()
    grid = ctx.grid

    height = format_number((grid.height + 1) * SCALE * ASPECT)
    width = format_number((grid.width + 1) * SCALE)
    align = ALIGNMENT_STYLES[alignment_hint]
    style_attr = f' style="{align}"' if align else ""

    lines = [
        f'<svg class="diagram" xmlns="http://www.w3.org/2000/svg" version="1.1"'
        f' height="{height}" width="{width}"{style_attr}>',
        style_block(config),
        f'<g transform="translate({SCALE},{SCALE * ASPECT})">',
    ]

    if config.debug_show_grid:
        lines.extend(_debug_grid(ctx))

    lines.extend(path_element(p) for p in ctx.paths)
    lines.extend(decoration_element(d, config) for d in ctx.decorations)

    if not config.debug_hide_passthrough:
        lines.extend(_passthrough_text(ctx, config))

    if config.debug_show_source:
        lines.extend(_debug_source(ctx, config))

    lines.append("</g></svg>")
    return restore_embedded_o("\n".join(lines))
