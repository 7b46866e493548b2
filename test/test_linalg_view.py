################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import pytest

from oasis_linalg.linalg_errors import IndexOutOfBoundsError
from oasis_linalg.linalg_errors import InvalidShapeError
from oasis_linalg.linalg_view import View1D
from oasis_linalg.linalg_view import View2D


def test_contiguous_positions() -> None:
    view: View1D = View1D.contiguous(4)

    assert view.positions() == [0, 1, 2, 3]
    assert view.position(3) == 3


def test_select_composes_offset_and_stride() -> None:
    view: View1D = View1D.contiguous(10).select(1, 9, 2)

    assert view == View1D(offset=1, stride=2, length=4)
    assert view.positions() == [1, 3, 5, 7]


def test_nested_selection_equals_direct_selection() -> None:
    """Selecting twice addresses the same positions as one composed selection."""
    nested: View1D = View1D.contiguous(10).select(1, 9, 2).select(3, 0, -1)
    direct: View1D = View1D.contiguous(10).select(7, 1, -2)

    assert nested == direct
    assert nested.positions() == [7, 5, 3]


def test_view_rejects_empty_length() -> None:
    with pytest.raises(InvalidShapeError):
        View1D(offset=0, stride=1, length=0)


def test_check_bounds_against_capacity() -> None:
    View1D(offset=5, stride=-2, length=3).check_bounds(6)

    with pytest.raises(IndexOutOfBoundsError):
        View1D(offset=5, stride=1, length=2).check_bounds(6)

    with pytest.raises(IndexOutOfBoundsError):
        View1D(offset=1, stride=-1, length=3).check_bounds(6)


def test_column_major_root() -> None:
    view: View2D = View2D.column_major(3, 2)

    assert view.shape == (3, 2)
    assert view.positions() == [0, 1, 2, 3, 4, 5]
    assert view.position(1, 1) == 4
    assert view.position(2, 0) == 2


def test_2d_select_per_axis() -> None:
    view: View2D = View2D.column_major(4, 4).select(3, 0, -1, 0, 4, 2)

    assert view.shape == (3, 2)
    assert view.position(0, 0) == 3
    assert view.position(2, 1) == 1 + 8


def test_transposed_swaps_axes() -> None:
    view: View2D = View2D.column_major(3, 2)
    flipped: View2D = view.transposed()

    assert flipped.shape == (2, 3)
    assert flipped.position(1, 2) == view.position(2, 1)
    assert flipped.transposed() == view


def test_2d_position_out_of_range() -> None:
    view: View2D = View2D.column_major(3, 2)

    with pytest.raises(IndexOutOfBoundsError):
        view.position(3, 0)

    with pytest.raises(IndexOutOfBoundsError):
        view.position(0, 2)


def test_2d_check_bounds_uses_corners() -> None:
    view: View2D = View2D.column_major(3, 2).select(2, -1, -1, 1, -1, -1)

    assert sorted(view.positions()) == [0, 1, 2, 3, 4, 5]
    view.check_bounds(6)

    with pytest.raises(IndexOutOfBoundsError):
        view.check_bounds(5)


def _selections(length: int) -> list[tuple[int, int, int]]:
    """Every valid (start, stop, stride) on a dimension of ``length``."""
    selections: list[tuple[int, int, int]] = []
    for start in range(length):
        for stop in range(-1, length + 1):
            for stride in (-3, -2, -1, 1, 2, 3):
                if stop == start or (stop - start) * stride < 0:
                    continue
                selections.append((start, stop, stride))
    return selections


def _indices(selection: tuple[int, int, int]) -> list[int]:
    start, stop, stride = selection
    return list(range(start, stop, stride))


@pytest.mark.parametrize("outer", _selections(7))
def test_1d_nested_selection_composes(outer: tuple[int, int, int]) -> None:
    """A selection of a selection addresses the parent's selected positions."""
    root: View1D = View1D(offset=3, stride=2, length=7)
    parent: View1D = root.select(*outer)
    parent_positions: list[int] = parent.positions()

    assert parent_positions == [root.positions()[i] for i in _indices(outer)]

    for inner in _selections(parent.length):
        nested: View1D = parent.select(*inner)

        assert nested.positions() == [parent_positions[i] for i in _indices(inner)]
        assert nested.offset == parent.offset + parent.stride * inner[0]
        assert nested.stride == parent.stride * inner[2]


_AXIS_SAMPLES: list[tuple[int, int, int]] = [(0, 3, 1), (2, -1, -1), (0, 3, 2)]


@pytest.mark.parametrize("transpose", [False, True])
@pytest.mark.parametrize("outer_rows", _selections(3))
@pytest.mark.parametrize("outer_cols", _AXIS_SAMPLES)
def test_2d_nested_selection_composes_per_axis(
    transpose: bool,
    outer_rows: tuple[int, int, int],
    outer_cols: tuple[int, int, int],
) -> None:
    """Each axis of a 2-D view composes independently, transposed or not."""
    root: View2D = View2D.column_major(3, 5)
    if transpose:
        root = root.transposed()
    parent: View2D = root.select(*outer_rows, *outer_cols)

    for r, i in enumerate(_indices(outer_rows)):
        for c, j in enumerate(_indices(outer_cols)):
            assert parent.position(r, c) == root.position(i, j)

    for inner_rows in _selections(parent.rows):
        for inner_cols in _selections(parent.cols):
            nested: View2D = parent.select(*inner_rows, *inner_cols)
            for r, i in enumerate(_indices(inner_rows)):
                for c, j in enumerate(_indices(inner_cols)):
                    assert nested.position(r, c) == parent.position(i, j)


@pytest.mark.parametrize("rows", _selections(4))
@pytest.mark.parametrize("cols", _AXIS_SAMPLES[:2])
def test_select_then_transpose_equals_transpose_then_select(
    rows: tuple[int, int, int], cols: tuple[int, int, int]
) -> None:
    root: View2D = View2D.column_major(4, 3)

    assert root.select(*rows, *cols).transposed() == root.transposed().select(
        *cols, *rows
    )
