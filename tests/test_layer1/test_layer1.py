"""Tests for Layer 1 transforms (decorations)."""

import pytest

import dia2svg.engine.layer1.t1_01_decorations
from dia2svg.engine.layer1.t1_01_decorations import resolve_vertical_arrow

from dia2svg.engine.paths import Path, PathSet, Vec2
from dia2svg.engine.registry import Layer, get_registry
from dia2svg.engine.spatial_constants import DIAGONAL_ANGLE
from tests.conftest import (
    ARROW,
    ARROW_INTO_POINT,
    BACK_DIAGONAL_DOWN_ARROW,
    DIAGONAL_UP_ARROW,
    DOWN_ARROW,
    JUMP,
    LEFT_ARROW,
    SHADES,
    STRAY_ASTERISK,
    UP_ARROW,
    detect,
)


def _decorations(ctx) -> list[tuple[str, Vec2, float]]:
    return [(d.glyph, d.center, d.angle) for d in ctx.decorations]


def test_layer1_registers_decorations():
    layer1 = get_registry().get_layer(Layer.DECORATIONS)
    assert [s.id for s in layer1] == ["T1.01"]
    assert layer1[0].dependencies == ["T0.06"]


def test_right_arrow():
    ctx = detect(ARROW)
    assert _decorations(ctx) == [(">", Vec2(4, 0), 0)]


def test_left_arrow():
    ctx = detect(LEFT_ARROW)
    assert _decorations(ctx) == [(">", Vec2(0, 0), 180)]


def test_arrow_backs_off_a_point():
    ctx = detect(ARROW_INTO_POINT)
    assert _decorations(ctx) == [
        (">", Vec2(3.5, 0), 0),
        ("o", Vec2(5, 0), 0),
    ]
    assert ctx.unused_cells() == []


def test_up_arrow():
    ctx = detect(UP_ARROW)
    assert _decorations(ctx) == [(">", Vec2(0, 0), 270)]


def test_down_arrow():
    ctx = detect(DOWN_ARROW)
    assert _decorations(ctx) == [(">", Vec2(0, 2), 90)]


def test_arrow_at_end_of_back_diagonal():
    ctx = detect(BACK_DIAGONAL_DOWN_ARROW)
    ((glyph, center, angle),) = _decorations(ctx)
    assert glyph == ">"
    assert center == Vec2(2, 2)
    assert angle == pytest.approx(63.43494882292201)
    assert angle == pytest.approx(90 - DIAGONAL_ANGLE)


def test_arrow_at_end_of_diagonal():
    ctx = detect(DIAGONAL_UP_ARROW)
    ((glyph, center, angle),) = _decorations(ctx)
    assert center == Vec2(2, 0)
    assert angle == pytest.approx(270 + DIAGONAL_ANGLE)


def test_jump_between_wire_ends():
    ctx = detect(JUMP)
    assert _decorations(ctx) == [(")", Vec2(1, 1), 0)]
    assert ctx.unused_cells() == []


def test_jump_without_wires_is_text():
    ctx = detect("a)b\n")
    assert ctx.num_decorations == 0


def test_stray_point_between_letters_is_text():
    ctx = detect(STRAY_ASTERISK)
    assert ctx.num_decorations == 0
    assert not ctx.grid.is_used(1, 0)


def test_isolated_point():
    ctx = detect(" * \n")
    assert _decorations(ctx) == [("*", Vec2(1, 0), 0)]


@pytest.mark.parametrize("text", ["v\n", "x ^ y\n", "a > b\n"])
def test_unattached_arrow_heads_are_text(text):
    ctx = detect(text)
    assert ctx.num_decorations == 0


def test_gray_blocks_always_accepted():
    ctx = detect(SHADES)
    assert [d.glyph for d in ctx.decorations] == ["█", "▓", "▒", "░"]
    assert ctx.unused_cells() == []


def test_block_elements_outside_the_shade_scale_are_text():
    ctx = detect("▔ ▉\n")
    assert ctx.num_decorations == 0
    assert [c for _, _, c in ctx.unused_cells()] == ["▔", "▉"]


def test_triangles_always_accepted():
    ctx = detect("◢ ◥\n")
    assert {d.glyph for d in ctx.decorations} == {"◢", "◥"}


def test_vertical_arrow_prefers_half_cell_end():
    paths = PathSet()
    paths.insert(Path(Vec2(0, 0.5), Vec2(0, 4)))
    assert resolve_vertical_arrow(paths, 0, 1, pointing_up=True) == (Vec2(0, 0.5), 270)


def test_vertical_arrow_falls_back_to_pass_through():
    paths = PathSet()
    paths.insert(Path(Vec2(0, 0), Vec2(0, 4)))
    assert resolve_vertical_arrow(paths, 0, 2, pointing_up=False) == (Vec2(0, 2.5), 90)


def test_vertical_arrow_diagonal_reach_order():
    paths = PathSet()
    # One diagonal ends at the glyph, another a quarter cell beyond it
    paths.insert(Path(Vec2(1, 3), Vec2(3, 1)))
    paths.insert(Path(Vec2(1.25, 2.75), Vec2(3.25, 0.75)))
    center, angle = resolve_vertical_arrow(paths, 3, 1, pointing_up=True)
    assert center == Vec2(3.25, 0.75)
    assert angle == pytest.approx(270 + DIAGONAL_ANGLE)


def test_vertical_arrow_without_strokes():
    assert resolve_vertical_arrow(PathSet(), 0, 0, pointing_up=True) is None
