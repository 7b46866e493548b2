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
One-dimensional vectors with aliasing strided views

Vector entries are addressed as ``offset + i * stride`` in a shared Buffer.
``select(start, stop, stride)`` returns a view of the same storage, for
example selecting ``(1, 6, 2)`` from ``[0, 1, ..., 8]`` gives ``[1, 3, 5]``
and ``(7, 1, -2)`` gives ``[7, 5, 3]``. Writes through a MutableVector view
are visible through the parent and every other overlapping view.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
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
from oasis_linalg.linalg_fillers import VectorFiller
from oasis_linalg.linalg_format import format_vector
from oasis_linalg.linalg_selection import default_stride
from oasis_linalg.linalg_tensor import MutableTensor
from oasis_linalg.linalg_tensor import Tensor
from oasis_linalg.linalg_view import View1D


_V = TypeVar("_V", bound="Vector")

VectorFill = Union[VectorFiller, float, None]

_LOG: logging.Logger = logging.getLogger(__name__)


def _as_filler(fill: VectorFill) -> VectorFiller:
    if fill is None:
        return cast(VectorFiller, linalg_fillers.constant(0.0))
    if is_number(fill):
        return cast(VectorFiller, linalg_fillers.constant(cast(float, fill)))
    if callable(fill):
        return cast(VectorFiller, fill)
    raise TypeError(f"vector fill must be a number or a callable, got {type(fill)}")


class Vector(Tensor):
    """Immutable one-dimensional vector.

    ``Vector(length)`` is all zeros, ``Vector(length, value)`` repeats a
    value, and ``Vector(length, filler)`` calls ``filler(i)`` for each index.
    """

    _view: View1D

    def __init__(self, length: int, fill: VectorFill = None) -> None:
        if length <= 0:
            raise InvalidShapeError(f"vector length must be positive, got {length}")
        filler: VectorFiller = _as_filler(fill)
        self._buffer = Buffer.from_values(filler(i) for i in range(length))
        self._view = View1D.contiguous(length)

    @classmethod
    def _from_values(
        cls: type[_V], shape: tuple[int, ...], values: Sequence[float]
    ) -> _V:
        if len(shape) != 1:
            raise DimensionMismatchError(f"vector shape must be 1-D, got {shape}")
        return cls._wrap(Buffer.from_values(values), View1D.contiguous(shape[0]))

    #
    # Constructors
    #

    @classmethod
    def from_values(cls: type[_V], values: Sequence[float]) -> _V:
        """Return a vector holding a copy of ``values``."""
        filler: VectorFiller = linalg_fillers.from_sequence(values)
        return cls(len(values), filler)

    @classmethod
    def zeros(cls: type[_V], length: int) -> _V:
        return cls(length, 0.0)

    @classmethod
    def ones(cls: type[_V], length: int) -> _V:
        return cls(length, 1.0)

    @classmethod
    def rand(
        cls: type[_V],
        length: int,
        rng: np.random.Generator | None = None,
        params: LinalgParams | None = None,
    ) -> _V:
        """Return a vector of uniform samples in ``[0, 1)``.

        Samples come from ``rng`` if given, else from a generator seeded with
        ``params.random_seed``.
        """
        generator: np.random.Generator = (
            rng if rng is not None else (params or DEFAULT_PARAMS).make_rng()
        )
        return cls(length, cast(VectorFiller, linalg_fillers.uniform(generator)))

    @classmethod
    def randn(
        cls: type[_V],
        length: int,
        rng: np.random.Generator | None = None,
        params: LinalgParams | None = None,
    ) -> _V:
        """Return a vector of standard normal samples."""
        generator: np.random.Generator = (
            rng if rng is not None else (params or DEFAULT_PARAMS).make_rng()
        )
        return cls(length, cast(VectorFiller, linalg_fillers.gaussian(generator)))

    #
    # Getters
    #

    @property
    def shape(self) -> tuple[int]:
        return (self._view.length,)

    def size(self) -> int:
        return self._view.length

    def __len__(self) -> int:
        return self._view.length

    def get(self, index: int) -> float:
        """Return the element at a logical index (no negative indexing)."""
        return self._buffer.read(self._view.position(index))

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values())

    def select(self: _V, start: int, stop: int, stride: int | None = None) -> _V:
        """Return an aliasing view of ``[start, stop)`` with the given stride.

        The stride defaults to +1 when ``start < stop`` and -1 otherwise.
        """
        step: int = default_stride(start, stop) if stride is None else stride
        view: View1D = self._view.select(start, stop, step)
        _LOG.debug(
            "Vector view (%d, %d, %d) of length %d -> %s",
            start,
            stop,
            step,
            len(self),
            view,
        )
        return type(self)._wrap(self._buffer, view)

    def to_list(self) -> list[float]:
        """Return an independent copy of the elements."""
        return self.values()

    def to_numpy(self) -> NDArray[np.float64]:
        """Return an independent float64 array copy of the elements."""
        return np.array(self.values(), dtype=np.float64)

    def _accepts(self, other: object) -> bool:
        return isinstance(other, Vector)

    #
    # Vector kernels
    #

    def dot(self, other: Vector) -> float:
        """Return the inner product, accumulated from index 0 upward.

        Raises:
            DimensionMismatchError: If the lengths differ
        """
        if len(self) != len(other):
            raise DimensionMismatchError(
                f"vectors must have the same size, got {len(self)} and {len(other)}"
            )
        total: float = 0.0
        for a, b in zip(self.values(), other.values()):
            total += a * b
        return total

    def __matmul__(self, other: object) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    #
    # Rendering
    #

    def as_string(self, params: LinalgParams | None = None) -> str:
        return format_vector(self.values(), params)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_values({self.values()!r})"


class MutableVector(Vector, MutableTensor):
    """Vector with indexed assignment and in-place operations."""

    def set(self, index: int, value: float) -> None:
        """Store a value at a logical index through this view."""
        self._buffer.write(self._view.position(index), value)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def fill(self, filler: VectorFiller) -> None:
        """Set every element to ``filler(i)``."""
        self._store([filler(i) for i in range(len(self))])

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at indices ``i`` and ``j``."""
        first: float = self.get(i)
        second: float = self.get(j)
        self.set(i, second)
        self.set(j, first)
