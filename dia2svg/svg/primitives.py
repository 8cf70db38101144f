"""SVG element markup for paths, decorations and passthrough text.

Grid coordinates are converted to pixels here: x by SCALE, y by SCALE * ASPECT.
"""

from __future__ import annotations

from dia2svg.engine.config import RenderConfig
from dia2svg.engine.decorations import Decoration
from dia2svg.engine.glyphs import Role, gray_level, tri_rotation
from dia2svg.engine.paths import Path, Vec2
from dia2svg.engine.spatial_constants import ASPECT, JUMP_BULGE, SCALE
from dia2svg.utils.geometry import format_number
from dia2svg.utils.text import escape_html_entities


def px(v: Vec2) -> str:
    """'x,y' in pixels."""
    return f"{format_number(v.x * SCALE)},{format_number(v.y * SCALE * ASPECT)}"


def _points(*vs: Vec2) -> str:
    return " ".join(px(v) for v in vs)


def path_element(path: Path) -> str:
    if path.is_curved():
        d = f"M {px(path.A)} C {_points(path.C, path.D, path.B)}"
    else:
        d = f"M {px(path.A)} L {px(path.B)}"
    dash = ' stroke-dasharray="3,6"' if path.dashed else ""
    return f'<path d="{d}" style="fill:none;"{dash}/>'


def _jump(C: Vec2, glyph: str) -> str:
    # Bridge bulges toward the open side of the parenthesis
    dx = JUMP_BULGE if glyph == ")" else -JUMP_BULGE
    up = C.offset(0, -0.5)
    dn = C.offset(0, 0.5)
    cup = C.offset(dx, -0.5)
    cdn = C.offset(dx, 0.5)
    return f'<path d="M {px(dn)} C {_points(cdn, cup, up)}" style="fill:none;"/>'


def _point(C: Vec2, glyph: str, config: RenderConfig) -> str:
    cls = "closeddot" if glyph == "*" else "opendot"
    return (
        f'<circle cx="{format_number(C.x * SCALE)}" cy="{format_number(C.y * SCALE * ASPECT)}"'
        f' r="{SCALE - config.stroke_width}" class="{cls}"/>'
    )


def _gray(C: Vec2, glyph: str) -> str:
    # Round half up; levels land on 191, 128, 64, 0
    shade = int((3 - gray_level(glyph)) * 63.75 + 0.5)
    return (
        f'<rect x="{format_number((C.x - 0.5) * SCALE)}" y="{format_number((C.y - 0.5) * SCALE * ASPECT)}"'
        f' width="{SCALE}" height="{SCALE * ASPECT}" fill="rgb({shade},{shade},{shade})"/>'
    )


def _triangle(C: Vec2, glyph: str) -> str:
    index = tri_rotation(glyph) // 90
    xs = 0.5 - (index & 1)
    ys = 0.5 - (index >> 1)
    xs = xs if ys > 0 else -xs
    tip = C.offset(xs, -ys)
    up = C.offset(xs, ys)
    dn = C.offset(-xs, ys)
    return f'<polygon points="{_points(tip, up, dn)}" style="stroke:none"/>'


def _arrow_head(C: Vec2, angle: float) -> str:
    tip = C.offset(1, 0)
    up = C.offset(-0.5, -0.35)
    dn = C.offset(-0.5, 0.35)
    return (
        f'<polygon points="{_points(tip, up, dn)}" style="stroke:none"'
        f' transform="rotate({format_number(angle)},{px(C)})"/>'
    )


def decoration_element(decoration: Decoration, config: RenderConfig) -> str:
    C = decoration.center
    kind = decoration.kind
    if kind == Role.JUMP:
        return _jump(C, decoration.glyph)
    if kind == Role.POINT:
        return _point(C, decoration.glyph, config)
    if kind == Role.GRAY:
        return _gray(C, decoration.glyph)
    if kind == Role.TRI:
        return _triangle(C, decoration.glyph)
    if kind == Role.ARROW_HEAD:
        return _arrow_head(C, decoration.angle)
    raise ValueError(f"Cannot draw decoration glyph {decoration.glyph!r}")


def text_element(x: int, y: int, c: str, config: RenderConfig, style: str = "") -> str:
    style_attr = f' style="{style}"' if style else ""
    return (
        f'<text text-anchor="middle" x="{format_number(x * SCALE)}"'
        f' y="{format_number(config.text_baseline_offset + y * SCALE * ASPECT)}"{style_attr}>'
        f"{escape_html_entities(c)}</text>"
    )
