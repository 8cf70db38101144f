"""Tests for the character grid and its used mask."""

import pytest

from dia2svg.engine.grid import Grid


def test_rows_are_kept_in_order():
    grid = Grid(["ab", "cd"])
    assert grid.width == 2
    assert grid.height == 2
    assert grid.cell(1, 1) == "d"
    assert grid.rows == ("ab", "cd")


def test_rows_must_be_rectangular():
    with pytest.raises(ValueError, match="row 1"):
        Grid(["abc", "d"])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        Grid([])


def test_out_of_bounds_reads_blank():
    grid = Grid(["ab"])
    assert grid.cell(-1, 0) == " "
    assert grid.cell(2, 0) == " "
    assert grid.cell(0, 5) == " "


def test_mark_used():
    grid = Grid(["ab", "cd"])
    grid.mark_used(1, 0)
    grid.mark_used(9, 9)  # ignored
    assert grid.is_used(1, 0)
    assert not grid.is_used(0, 1)
    assert not grid.is_used(9, 9)
    assert grid.used.sum() == 1
    assert bool(grid.used[0, 1])


def test_used_view_is_read_only():
    grid = Grid(["ab"])
    with pytest.raises(ValueError):
        grid.used[0, 0] = True
