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
Element generators used to construct vectors and matrices

A vector filler maps an index to a value and a matrix filler maps
``(row, col)`` to a value. Entities call the filler once per element in
logical order, so a random filler drawing from a generator consumes it in
that order.
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Sequence

import numpy as np

from oasis_linalg.linalg_errors import DimensionMismatchError
from oasis_linalg.linalg_errors import InvalidShapeError


VectorFiller = Callable[[int], float]
MatrixFiller = Callable[[int, int], float]


def constant(value: float) -> Callable[..., float]:
    """Return a filler producing ``value`` for any index."""
    fill_value: float = float(value)

    def _constant(*_index: int) -> float:
        return fill_value

    return _constant


def identity(row: int, col: int) -> float:
    return 1.0 if row == col else 0.0


def uniform(rng: np.random.Generator) -> Callable[..., float]:
    """Return a filler drawing uniform samples in ``[0, 1)``."""

    def _uniform(*_index: int) -> float:
        return float(rng.random())

    return _uniform


def gaussian(rng: np.random.Generator) -> Callable[..., float]:
    """Return a filler drawing samples with mean 0 and variance 1."""

    def _gaussian(*_index: int) -> float:
        return float(rng.standard_normal())

    return _gaussian


def from_sequence(values: Sequence[float]) -> VectorFiller:
    """Return a filler reading ``values[index]``."""
    if len(values) == 0:
        raise InvalidShapeError("cannot construct from an empty sequence")

    def _from_sequence(index: int) -> float:
        return float(values[index])

    return _from_sequence


def from_rows(rows: Sequence[Sequence[float]]) -> MatrixFiller:
    """Return a filler reading ``rows[row][col]``.

    Raises:
        InvalidShapeError: If there are no rows or the first row is empty
        DimensionMismatchError: If the rows do not all have the same length
    """
    if len(rows) == 0 or len(rows[0]) == 0:
        raise InvalidShapeError("cannot construct from an empty nested sequence")
    width: int = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise DimensionMismatchError(
                f"rows must all have length {width}, found a row of length {len(row)}"
            )

    def _from_rows(row: int, col: int) -> float:
        return float(rows[row][col])

    return _from_rows
