"""Tests for SVG serialization."""

import pytest

from dia2svg.diagram import convert, render_fragment
from dia2svg.engine.config import RenderConfig
from dia2svg.engine.decorations import Decoration
from dia2svg.engine.paths import Path, Vec2
from dia2svg.svg.primitives import decoration_element, path_element, text_element
from dia2svg.svg.serializer import ALIGNMENT_STYLES, serialize_svg
from tests.conftest import ARROW, ARROW_INTO_POINT, BOX, JUMP, SHADES


def test_header_size_and_class():
    svg = render_fragment(BOX)
    assert svg.startswith(
        '<svg class="diagram" xmlns="http://www.w3.org/2000/svg" version="1.1" height="64" width="40">'
    )
    assert svg.endswith("</g></svg>")
    assert '<g transform="translate(8,16)">' in svg


def test_style_block():
    svg = render_fragment(BOX)
    assert "<style>" in svg
    assert "stroke-width: 2px;" in svg
    assert "font-family: Menlo;" in svg
    assert "svg.diagram .opendot" in svg


@pytest.mark.parametrize("hint", ["floatleft", "floatright", "center"])
def test_alignment_styles(hint):
    svg = render_fragment(ARROW, hint)
    assert f'style="{ALIGNMENT_STYLES[hint]}"' in svg.split(">", 1)[0]


def test_unknown_alignment_rejected():
    with pytest.raises(ValueError, match="alignment"):
        serialize_svg(convert(ARROW), "left")


def test_box_paths():
    svg = render_fragment(BOX)
    assert '<path d="M 0,0 L 0,32" style="fill:none;"/>' in svg
    assert '<path d="M 0,0 L 24,0" style="fill:none;"/>' in svg
    assert svg.count("<path ") == 4
    assert "<text " not in svg


def test_dashed_path():
    element = path_element(Path(Vec2(0, 0), Vec2(2, 0), dashed=True))
    assert element == '<path d="M 0,0 L 16,0" style="fill:none;" stroke-dasharray="3,6"/>'


def test_curved_path():
    element = path_element(Path(Vec2(0, 0), Vec2(2, 1), Vec2(2.5, 0), Vec2(2, 1)))
    assert element == '<path d="M 0,0 C 20,0 16,16 16,16" style="fill:none;"/>'


def test_arrow_head():
    svg = render_fragment(ARROW)
    assert (
        '<polygon points="40,0 28,-5.6 28,5.6" style="stroke:none" transform="rotate(0,32,0)"/>'
        in svg
    )


def test_points_drawn_over_arrow_heads():
    svg = render_fragment(ARROW_INTO_POINT)
    assert svg.index("<polygon") < svg.index("<circle")
    assert '<circle cx="40" cy="0" r="6" class="opendot"/>' in svg


def test_jump_bridge():
    svg = render_fragment(JUMP)
    assert '<path d="M 8,24 C 14,24 14,8 8,8" style="fill:none;"/>' in svg


def test_gray_shades():
    svg = render_fragment(SHADES)
    fills = [s.split('"', 1)[0] for s in svg.split('fill="')[1:]]
    assert fills == ["rgb(0,0,0)", "rgb(64,64,64)", "rgb(128,128,128)", "rgb(191,191,191)"]


def test_triangle():
    config = RenderConfig()
    element = decoration_element(Decoration(Vec2(0, 0), "◢"), config)
    assert element == '<polygon points="4,-8 4,8 -4,8" style="stroke:none"/>'


def test_closed_dot_radius_follows_stroke_width():
    element = decoration_element(Decoration(Vec2(1, 1), "*"), RenderConfig(stroke_width=3))
    assert element == '<circle cx="8" cy="16" r="5" class="closeddot"/>'


def test_non_decoration_rejected():
    with pytest.raises(ValueError):
        decoration_element(Decoration(Vec2(0, 0), "x"), RenderConfig())


def test_text_is_escaped():
    svg = render_fragment("a<b\n")
    assert '<text text-anchor="middle" x="8" y="4">&lt;</text>' in svg
    assert text_element(0, 1, "&", RenderConfig()) == '<text text-anchor="middle" x="0" y="20">&amp;</text>'


def test_hexagons_are_enlarged():
    svg = render_fragment("⬢\n")
    assert 'style="font-size:20.5px">⬢</text>' in svg


def test_debug_overlays():
    ctx = convert("+-- x\n")
    svg = serialize_svg(ctx, config=RenderConfig(debug_show_grid=True, debug_show_source=True))
    assert '<g style="opacity:0.1">' in svg
    assert "fill:red;" in svg
    assert "fill:blue;" in svg
    assert '<g transform="translate(2,2)">' in svg
    assert svg.count(">+</text>") == 1


def test_hide_passthrough():
    ctx = convert("a*b\n")
    svg = serialize_svg(ctx, config=RenderConfig(debug_hide_passthrough=True))
    assert "<text" not in svg
