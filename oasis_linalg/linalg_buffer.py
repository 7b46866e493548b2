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
Flat float64 storage shared by vectors and matrices

A Buffer is allocated once by a root entity and never resized. Views hold a
plain reference to it, so the storage lives as long as any view that
addresses it. Many views may alias one Buffer; no locking is done here and
concurrent writers must be serialized by the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from oasis_linalg.linalg_errors import DimensionMismatchError
from oasis_linalg.linalg_errors import IndexOutOfBoundsError
from oasis_linalg.linalg_errors import InvalidShapeError


class Buffer:
    """Fixed-capacity flat storage of float64 values."""

    def __init__(self, data: NDArray[np.float64]) -> None:
        """Wrap an owned one-dimensional float64 array.

        Args:
            data: Array that becomes exclusively owned by this buffer

        Raises:
            InvalidShapeError: If the array is not 1-D or has no elements
        """
        if data.ndim != 1:
            raise InvalidShapeError("buffer storage must be one-dimensional")
        if data.size == 0:
            raise InvalidShapeError("buffer capacity must be positive")
        self._data: NDArray[np.float64] = data

    @classmethod
    def allocate(cls, capacity: int) -> Buffer:
        """Return a zero-filled buffer with the given capacity."""
        if capacity <= 0:
            raise InvalidShapeError(f"buffer capacity must be positive, got {capacity}")
        return cls(np.zeros(capacity, dtype=np.float64))

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Buffer:
        """Return a buffer holding a copy of the given values."""
        data: NDArray[np.float64] = np.array(
            [float(value) for value in values], dtype=np.float64
        )
        return cls(data)

    @property
    def capacity(self) -> int:
        """Return the number of stored values."""
        return int(self._data.size)

    def __len__(self) -> int:
        return self.capacity

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= self._data.size:
            raise IndexOutOfBoundsError(
                f"buffer position {position} outside [0, {self._data.size})"
            )

    def read(self, position: int) -> float:
        """Return the value stored at a buffer position."""
        self._check_position(position)
        return float(self._data[position])

    def write(self, position: int, value: float) -> None:
        """Store a value at a buffer position."""
        self._check_position(position)
        self._data[position] = float(value)

    def _as_index(self, positions: Sequence[int]) -> NDArray[np.intp]:
        index: NDArray[np.intp] = np.asarray(positions, dtype=np.intp)
        if index.size == 0:
            return index
        outside: NDArray[np.bool_] = (index < 0) | (index >= self._data.size)
        if np.any(outside):
            position: int = int(index[outside][0])
            raise IndexOutOfBoundsError(
                f"buffer position {position} outside [0, {self._data.size})"
            )
        return index

    def gather(self, positions: Sequence[int]) -> list[float]:
        """Return a snapshot of the values at the given positions."""
        index: NDArray[np.intp] = self._as_index(positions)
        return [float(value) for value in self._data[index]]

    def scatter(self, positions: Sequence[int], values: Sequence[float]) -> None:
        """Write values to positions, all or nothing.

        Raises:
            DimensionMismatchError: If the value count differs from the
                position count
            IndexOutOfBoundsError: If any position is invalid, before any write
        """
        if len(positions) != len(values):
            raise DimensionMismatchError(
                f"{len(values)} values cannot fill {len(positions)} positions"
            )
        index: NDArray[np.intp] = self._as_index(positions)
        self._data[index] = np.asarray(values, dtype=np.float64)
