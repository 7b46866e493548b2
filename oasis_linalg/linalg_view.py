################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Addressing schemes mapping logical indices to buffer positions

A 1-D view maps logical ``i`` to ``offset + i * stride``. A 2-D view maps
``(r, c)`` to ``row_offset + r * row_stride + col_offset + c * col_stride``.
Freshly allocated matrices are stored column-major, so a root ``rows x cols``
view has ``row_stride = 1`` and ``col_stride = rows``.

Selecting from a view composes rather than nests: the new offset is the
outer offset plus the outer stride times the selection start, and the new
stride is the product of the outer and selection strides. Views never touch
storage and are immutable; every selection returns a new view.
"""

from __future__ import annotations

from dataclasses import dataclass

from oasis_linalg.linalg_errors import IndexOutOfBoundsError
from oasis_linalg.linalg_errors import InvalidShapeError
from oasis_linalg.linalg_selection import resolve_index
from oasis_linalg.linalg_selection import validate_selection


def _check_positions(low: int, high: int, capacity: int) -> None:
    if low < 0 or high >= capacity:
        raise IndexOutOfBoundsError(
            f"view addresses positions [{low}, {high}] outside buffer "
            f"capacity {capacity}"
        )


@dataclass(frozen=True)
class View1D:
    """Offset and stride addressing for a vector.

    Attributes:
        offset: Buffer position of logical index 0
        stride: Buffer distance between consecutive elements, nonzero
        length: Number of logical elements, positive
    """

    offset: int
    stride: int
    length: int

    def __post_init__(self) -> None:
        """Validate the view extent."""
        if self.length <= 0:
            raise InvalidShapeError(f"view length must be positive, got {self.length}")

    @classmethod
    def contiguous(cls, length: int) -> View1D:
        """Return the root view over ``length`` consecutive positions."""
        return cls(offset=0, stride=1, length=length)

    def position(self, index: int) -> int:
        """Return the buffer position of a logical index."""
        return resolve_index(index, self.offset, self.stride, self.length)

    def positions(self) -> list[int]:
        """Return buffer positions in increasing logical order."""
        return [self.offset + i * self.stride for i in range(self.length)]

    def check_bounds(self, capacity: int) -> None:
        """Ensure every mapped position lies in ``[0, capacity)``."""
        first: int = self.offset
        last: int = self.offset + (self.length - 1) * self.stride
        _check_positions(min(first, last), max(first, last), capacity)

    def select(self, start: int, stop: int, stride: int) -> View1D:
        """Return the composed view of a selection on this view."""
        length: int = validate_selection(start, stop, stride, self.length)
        return View1D(
            offset=self.offset + self.stride * start,
            stride=self.stride * stride,
            length=length,
        )


@dataclass(frozen=True)
class View2D:
    """Per-axis offset and stride addressing for a matrix.

    Attributes:
        row_offset: Buffer offset contributed by the row axis
        row_stride: Buffer distance between consecutive rows
        rows: Number of rows, positive
        col_offset: Buffer offset contributed by the column axis
        col_stride: Buffer distance between consecutive columns
        cols: Number of columns, positive
    """

    row_offset: int
    row_stride: int
    rows: int
    col_offset: int
    col_stride: int
    cols: int

    def __post_init__(self) -> None:
        """Validate the view extent."""
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidShapeError(
                f"view shape must be positive, got {self.rows}x{self.cols}"
            )

    @classmethod
    def column_major(cls, rows: int, cols: int) -> View2D:
        """Return the root view of a freshly allocated ``rows x cols`` matrix."""
        return cls(
            row_offset=0,
            row_stride=1,
            rows=rows,
            col_offset=0,
            col_stride=rows,
            cols=cols,
        )

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def position(self, row: int, col: int) -> int:
        """Return the buffer position of a logical ``(row, col)``."""
        row_part: int = resolve_index(row, self.row_offset, self.row_stride, self.rows)
        col_part: int = resolve_index(col, self.col_offset, self.col_stride, self.cols)
        return row_part + col_part

    def positions(self) -> list[int]:
        """Return buffer positions in column-major logical order."""
        base: int = self.row_offset + self.col_offset
        return [
            base + r * self.row_stride + c * self.col_stride
            for c in range(self.cols)
            for r in range(self.rows)
        ]

    def check_bounds(self, capacity: int) -> None:
        """Ensure every mapped position lies in ``[0, capacity)``."""
        base: int = self.row_offset + self.col_offset
        row_span: int = (self.rows - 1) * self.row_stride
        col_span: int = (self.cols - 1) * self.col_stride
        # The mapping is affine, so the extremes are at the corners
        low: int = base + min(0, row_span) + min(0, col_span)
        high: int = base + max(0, row_span) + max(0, col_span)
        _check_positions(low, high, capacity)

    def select(
        self,
        start_row: int,
        stop_row: int,
        row_stride: int,
        start_col: int,
        stop_col: int,
        col_stride: int,
    ) -> View2D:
        """Return the composed view of a selection on each axis."""
        rows: int = validate_selection(start_row, stop_row, row_stride, self.rows)
        cols: int = validate_selection(start_col, stop_col, col_stride, self.cols)
        return View2D(
            row_offset=self.row_offset + self.row_stride * start_row,
            row_stride=self.row_stride * row_stride,
            rows=rows,
            col_offset=self.col_offset + self.col_stride * start_col,
            col_stride=self.col_stride * col_stride,
            cols=cols,
        )

    def transposed(self) -> View2D:
        """Return the view with row and column roles swapped."""
        return View2D(
            row_offset=self.col_offset,
            row_stride=self.col_stride,
            rows=self.cols,
            col_offset=self.row_offset,
            col_stride=self.row_stride,
            cols=self.rows,
        )
