"""Tests for Path geometry queries, PathSet and DecorationSet."""

import pytest

from dia2svg.engine.decorations import DecorationSet
from dia2svg.engine.glyphs import Role
from dia2svg.engine.paths import Path, PathSet, Vec2


def test_path_requires_vec2_endpoints():
    with pytest.raises(TypeError):
        Path(Vec2(0, 0), (1, 1))


def test_single_control_point_is_duplicated():
    p = Path(Vec2(0, 0), Vec2(2, 1), Vec2(2, 0))
    assert p.D == Vec2(2, 0)
    assert p.is_curved()


def test_orientations():
    assert Path(Vec2(0, 0), Vec2(0, 3)).is_vertical()
    assert Path(Vec2(0, 0), Vec2(3, 0)).is_horizontal()
    assert Path(Vec2(0, 2), Vec2(2, 0)).is_diagonal()
    assert Path(Vec2(0, 0), Vec2(2, 2)).is_back_diagonal()
    assert not Path(Vec2(0, 0), Vec2(2, 2)).is_diagonal()


def test_vertical_end_queries():
    p = Path(Vec2(1, 3), Vec2(1, 0.5))
    assert p.up_ends_at(1, 0.5)
    assert p.down_ends_at(1, 3)
    assert not p.up_ends_at(1, 3)
    assert not p.left_ends_at(1, 0.5)
    assert p.vertical_passes_through(1, 2)
    assert not p.vertical_passes_through(1, 4)


def test_horizontal_end_queries():
    p = Path(Vec2(4, 2), Vec2(0, 2))
    assert p.left_ends_at(0, 2)
    assert p.right_ends_at(4, 2)
    assert p.horizontal_passes_through(2, 2)
    assert p.ends_at(4, 2)


def test_diagonal_end_queries():
    slash = Path(Vec2(0, 2), Vec2(2, 0))
    assert slash.diagonal_up_ends_at(2, 0)
    assert slash.diagonal_down_ends_at(0, 2)
    assert not slash.back_diagonal_up_ends_at(2, 0)

    backslash = Path(Vec2(0, 0), Vec2(2, 2))
    assert backslash.back_diagonal_up_ends_at(0, 0)
    assert backslash.back_diagonal_down_ends_at(2, 2)
    assert not backslash.diagonal_down_ends_at(2, 2)


def test_path_set_queries_any_member():
    paths = PathSet()
    paths.insert(Path(Vec2(0, 0), Vec2(0, 2)))
    paths.insert(Path(Vec2(0, 0), Vec2(3, 0)))
    assert len(paths) == 2
    assert paths.up_ends_at(0, 0)
    assert paths.right_ends_at(3, 0)
    assert not paths.right_ends_at(0, 2)
    assert [p.B for p in paths] == [Vec2(0, 2), Vec2(3, 0)]


def test_decoration_set_rejects_non_decorations():
    decorations = DecorationSet()
    with pytest.raises(ValueError):
        decorations.insert(Vec2(0, 0), "x")
    assert len(decorations) == 0


def test_points_draw_after_other_decorations():
    decorations = DecorationSet()
    decorations.insert(Vec2(1, 0), "o")
    decorations.insert(Vec2(1, 0), ">", 90)
    decorations.insert(Vec2(2, 0), "*")
    decorations.insert(Vec2(3, 0), "░")

    glyphs = [d.glyph for d in decorations]
    assert glyphs == ["░", ">", "o", "*"]
    assert [d.kind for d in decorations] == [Role.GRAY, Role.ARROW_HEAD, Role.POINT, Role.POINT]
