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
Two-dimensional matrices with aliasing strided views

Matrices are stored column-major: element (r, c) of a freshly allocated
``rows x cols`` matrix lives at buffer position ``r + c * rows``. Views
select rows and columns independently, each with its own stride, and
``transpose()`` swaps the two axes of the view without touching storage.

``times`` is the matrix product (``@``) and degrades to the elementwise
product when either operand is 1x1. The ``*`` operator is always
elementwise.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar
from typing import Union
from typing import cast

import numpy as np
from numpy.typing import NDArray

from oasis_linalg import linalg_fillers
from oasis_linalg.linalg_buffer import Buffer
from oasis_linalg.linalg_config import DEFAULT_PARAMS
from oasis_linalg.linalg_config import LinalgParams
from oasis_linalg.linalg_engine import is_number
from oasis_linalg.linalg_errors import DimensionMismatchError
from oasis_linalg.linalg_errors import InvalidShapeError
from oasis_linalg.linalg_errors import NegativeExponentError
from oasis_linalg.linalg_errors import NotSquareError
from oasis_linalg.linalg_fillers import MatrixFiller
from oasis_linalg.linalg_format import format_matrix
from oasis_linalg.linalg_format import format_row
from oasis_linalg.linalg_selection import default_stride
from oasis_linalg.linalg_tensor import MutableTensor
from oasis_linalg.linalg_tensor import Tensor
from oasis_linalg.linalg_view import View2D


_M = TypeVar("_M", bound="Matrix")

MatrixFill = Union[MatrixFiller, float, None]

_LOG: logging.Logger = logging.getLogger(__name__)


def _as_filler(fill: MatrixFill) -> MatrixFiller:
    if fill is None:
        return cast(MatrixFiller, linalg_fillers.constant(0.0))
    if is_number(fill):
        return cast(MatrixFiller, linalg_fillers.constant(cast(float, fill)))
    if callable(fill):
        return cast(MatrixFiller, fill)
    raise TypeError(f"matrix fill must be a number or a callable, got {type(fill)}")


def _column_major(rows: int, cols: int, filler: MatrixFiller) -> list[float]:
    return [filler(r, c) for c in range(cols) for r in range(rows)]


class Matrix(Tensor):
    """Immutable two-dimensional matrix.

    ``Matrix(rows)`` is a ``rows x 1`` zero column, ``Matrix(rows, cols)`` is
    all zeros, ``Matrix(rows, cols, value)`` repeats a value, and
    ``Matrix(rows, cols, filler)`` calls ``filler(r, c)`` for each element.
    """

    _view: View2D

    # A 1x1 left operand broadcasts over the right operand
    _allow_left_broadcast = True

    def __init__(self, rows: int, cols: int = 1, fill: MatrixFill = None) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidShapeError(f"matrix shape must be positive, got {rows}x{cols}")
        filler: MatrixFiller = _as_filler(fill)
        self._buffer = Buffer.from_values(_column_major(rows, cols, filler))
        self._view = View2D.column_major(rows, cols)

    @classmethod
    def _from_values(
        cls: type[_M], shape: tuple[int, ...], values: Sequence[float]
    ) -> _M:
        if len(shape) != 2:
            raise DimensionMismatchError(f"matrix shape must be 2-D, got {shape}")
        return cls._wrap(Buffer.from_values(values), View2D.column_major(*shape))

    #
    # Constructors
    #

    @classmethod
    def from_rows(cls: type[_M], rows: Sequence[Sequence[float]]) -> _M:
        """Return a matrix copying ``rows[r][c]`` into element (r, c).

        Raises:
            InvalidShapeError: If the nested sequence is empty
            DimensionMismatchError: If the rows differ in length
        """
        filler: MatrixFiller = linalg_fillers.from_rows(rows)
        return cls(len(rows), len(rows[0]), filler)

    @classmethod
    def zeros(cls: type[_M], rows: int, cols: int) -> _M:
        return cls(rows, cols, 0.0)

    @classmethod
    def ones(cls: type[_M], rows: int, cols: int) -> _M:
        return cls(rows, cols, 1.0)

    @classmethod
    def identity(cls: type[_M], rows: int) -> _M:
        return cls(rows, rows, linalg_fillers.identity)

    @classmethod
    def rand(
        cls: type[_M],
        rows: int,
        cols: int,
        rng: np.random.Generator | None = None,
        params: LinalgParams | None = None,
    ) -> _M:
        """Return a matrix of uniform samples in ``[0, 1)``.

        Samples come from ``rng`` if given, else from a generator seeded with
        ``params.random_seed``.
        """
        generator: np.random.Generator = (
            rng if rng is not None else (params or DEFAULT_PARAMS).make_rng()
        )
        return cls(rows, cols, cast(MatrixFiller, linalg_fillers.uniform(generator)))

    @classmethod
    def randn(
        cls: type[_M],
        rows: int,
        cols: int,
        rng: np.random.Generator | None = None,
        params: LinalgParams | None = None,
    ) -> _M:
        """Return a matrix of samples with mean 0 and variance 1."""
        generator: np.random.Generator = (
            rng if rng is not None else (params or DEFAULT_PARAMS).make_rng()
        )
        return cls(rows, cols, cast(MatrixFiller, linalg_fillers.gaussian(generator)))

    #
    # Getters
    #

    @property
    def rows(self) -> int:
        return self._view.rows

    @property
    def cols(self) -> int:
        return self._view.cols

    @property
    def shape(self) -> tuple[int, int]:
        return self._view.shape

    def get(self, row: int, col: int) -> float:
        """Return element (row, col), with indices starting at 0."""
        return self._buffer.read(self._view.position(row, col))

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def select(
        self: _M,
        start_row: int,
        stop_row: int,
        start_col: int,
        stop_col: int,
        row_stride: int | None = None,
        col_stride: int | None = None,
    ) -> _M:
        """Return an aliasing view of rows ``[start_row, stop_row)`` and
        columns ``[start_col, stop_col)``.

        Each stride defaults to +1 when its start is below its stop and -1
        otherwise.
        """
        row_step: int = (
            default_stride(start_row, stop_row) if row_stride is None else row_stride
        )
        col_step: int = (
            default_stride(start_col, stop_col) if col_stride is None else col_stride
        )
        view: View2D = self._view.select(
            start_row, stop_row, row_step, start_col, stop_col, col_step
        )
        _LOG.debug(
            "Matrix view rows (%d, %d, %d) cols (%d, %d, %d) of %dx%d -> %s",
            start_row,
            stop_row,
            row_step,
            start_col,
            stop_col,
            col_step,
            self.rows,
            self.cols,
            view,
        )
        return type(self)._wrap(self._buffer, view)

    def row(self: _M, r: int) -> _M:
        """Return an aliasing 1 x cols view of row ``r``."""
        return self.select(r, r + 1, 0, self.cols)

    def col(self: _M, c: int) -> _M:
        """Return an aliasing rows x 1 view of column ``c``."""
        return self.select(0, self.rows, c, c + 1)

    def to_list(self) -> list[list[float]]:
        """Return an independent copy as a list of rows."""
        values: list[float] = self.values()
        rows: int = self.rows
        return [
            [values[r + c * rows] for c in range(self.cols)] for r in range(rows)
        ]

    def to_numpy(self) -> NDArray[np.float64]:
        """Return an independent ``rows x cols`` float64 array copy."""
        return np.array(self.to_list(), dtype=np.float64)

    def _accepts(self, other: object) -> bool:
        return isinstance(other, Matrix)

    #
    # Matrix kernels
    #

    def transpose(self: _M) -> _M:
        """Return an aliasing view with rows and columns swapped."""
        return type(self)._wrap(self._buffer, self._view.transposed())

    @property
    def T(self: _M) -> _M:
        return self.transpose()

    def vec(self: _M) -> _M:
        """Return the columns stacked into a ``(rows * cols) x 1`` matrix.

        Element ``k`` of the result is ``self[k % rows, k // rows]``.
        """
        return type(self)._from_values((self.rows * self.cols, 1), self.values())

    def times_elementwise(self: _M, other: Matrix | float) -> _M:
        """Return the elementwise product with scalar broadcasting."""
        return Tensor.times(self, other)

    def pow_elementwise(self: _M, exponent: int) -> _M:
        """Return every element raised to ``exponent``."""
        return Tensor.pow(self, exponent)

    def times(self: _M, other: Matrix | float) -> _M:  # type: ignore[override]
        """Return the matrix product ``self @ other``.

        If either operand is 1x1 (or a number) the elementwise product is
        returned instead.

        Raises:
            DimensionMismatchError: If ``self.cols != other.rows``
        """
        if is_number(other):
            return self.times_elementwise(other)
        self._check_operand(other)
        rhs: Matrix = cast(Matrix, other)
        if self.is_scalar() or rhs.is_scalar():
            _LOG.debug(
                "Scalar operand in %dx%d @ %dx%d, using elementwise product",
                self.rows,
                self.cols,
                rhs.rows,
                rhs.cols,
            )
            return self.times_elementwise(rhs)

        if self.cols != rhs.rows:
            raise DimensionMismatchError(
                f"cannot multiply {self.rows}x{self.cols} by {rhs.rows}x{rhs.cols}: "
                f"{self.cols} columns do not match {rhs.rows} rows"
            )

        a: list[list[float]] = self.to_list()
        b: list[list[float]] = rhs.to_list()
        inner: int = self.cols
        out: list[float] = []
        for c in range(rhs.cols):
            for r in range(self.rows):
                row_a: list[float] = a[r]
                total: float = 0.0
                for k in range(inner):
                    total += row_a[k] * b[k][c]
                out.append(total)
        return type(self)._from_values((self.rows, rhs.cols), out)

    def pow(self: _M, exponent: int) -> _M:
        """Return the matrix power ``self @ ... @ self``.

        ``pow(0)`` is the identity with ``rows`` rows.

        Raises:
            NegativeExponentError: If ``exponent`` is negative
            NotSquareError: If the matrix is not square
        """
        if exponent < 0:
            raise NegativeExponentError(
                f"matrix power requires a non-negative exponent, got {exponent}"
            )
        if self.rows != self.cols:
            raise NotSquareError(
                f"matrix power requires a square matrix, got {self.rows}x{self.cols}"
            )
        result: _M = type(self).identity(self.rows)
        for _ in range(exponent):
            result = self.times(result)
        return result

    def __matmul__(self: _M, other: object) -> _M:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.times(other)

    #
    # Rendering
    #

    def row_to_string(self, row: int, params: LinalgParams | None = None) -> str:
        """Render one row of the matrix."""
        return format_row([self.get(row, c) for c in range(self.cols)], params)

    def as_string(self, params: LinalgParams | None = None) -> str:
        return format_matrix(self.to_list(), params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_rows({self.to_list()!r})"


class MutableMatrix(Matrix, MutableTensor):
    """Matrix with indexed assignment and in-place elementwise operations."""

    def set(self, row: int, col: int, value: float) -> None:
        """Store a value at (row, col) through this view."""
        self._buffer.write(self._view.position(row, col), value)

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    def fill(self, filler: MatrixFiller) -> None:
        """Set every element to ``filler(r, c)``."""
        self._store(_column_major(self.rows, self.cols, filler))
