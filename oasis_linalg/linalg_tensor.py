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
Behavior shared by vectors and matrices

A tensor pairs a Buffer with a view. Reads always resolve through the view,
and mutable variants write back through the same view, so both paths address
identical positions. Out-of-place operations allocate a new Buffer for the
result; in-place operations overwrite the target's own positions.

Aliasing: every selection shares the parent's Buffer. Nothing here is
synchronized, so concurrent writers to overlapping views must be serialized
by the caller.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import ClassVar
from typing import TypeVar
from typing import Union

import numpy as np
from numpy.typing import NDArray

from oasis_linalg import linalg_engine
from oasis_linalg.linalg_buffer import Buffer
from oasis_linalg.linalg_config import DEFAULT_PARAMS
from oasis_linalg.linalg_config import LinalgParams
from oasis_linalg.linalg_engine import Operation
from oasis_linalg.linalg_format import with_name
from oasis_linalg.linalg_view import View1D
from oasis_linalg.linalg_view import View2D


_T = TypeVar("_T", bound="Tensor")

View = Union[View1D, View2D]


def _reversed_minus(a: float, b: float) -> float:
    return b - a


class Tensor:
    """Read-only base of vectors and matrices."""

    # Repeat a scalar left operand over a non-scalar right operand
    _allow_left_broadcast: ClassVar[bool] = False

    _buffer: Buffer
    _view: View

    @classmethod
    def _wrap(cls: type[_T], buffer: Buffer, view: View) -> _T:
        """Return an entity addressing ``buffer`` through ``view`` without copying."""
        view.check_bounds(buffer.capacity)
        tensor: _T = cls.__new__(cls)
        tensor._buffer = buffer
        tensor._view = view
        return tensor

    @classmethod
    def _from_values(
        cls: type[_T], shape: tuple[int, ...], values: Sequence[float]
    ) -> _T:
        """Return a root entity of the given shape owning a copy of ``values``."""
        raise NotImplementedError

    @property
    def shape(self) -> tuple[int, ...]:
        raise NotImplementedError

    def _accepts(self, other: object) -> bool:
        """Return True if ``other`` is an entity kind this one combines with."""
        raise NotImplementedError

    def as_string(self, params: LinalgParams | None = None) -> str:
        raise NotImplementedError

    def to_list(self) -> list:
        raise NotImplementedError

    def to_numpy(self) -> NDArray[np.float64]:
        raise NotImplementedError

    #
    # Getters
    #

    def is_scalar(self) -> bool:
        """Return True when the entity holds exactly one element."""
        return math.prod(self.shape) == 1

    def values(self) -> list[float]:
        """Return a snapshot of the elements in logical order."""
        return self._buffer.gather(self._view.positions())

    def shares_buffer(self, other: Tensor) -> bool:
        """Return True if both entities address the same storage."""
        return self._buffer is other._buffer

    #
    # Elementwise operations
    #

    def _check_operand(self, other: object) -> None:
        if linalg_engine.is_number(other) or self._accepts(other):
            return
        raise TypeError(
            f"cannot combine {type(self).__name__} with {type(other).__name__}"
        )

    def apply(self: _T, op: Operation, other: Tensor | float) -> _T:
        """Return ``op`` applied elementwise with scalar broadcasting."""
        self._check_operand(other)
        result: linalg_engine.ElementwiseResult = linalg_engine.apply(
            op, self, other, allow_left_broadcast=self._allow_left_broadcast
        )
        return type(self)._from_values(result.shape, result.values)

    def plus(self: _T, other: Tensor | float) -> _T:
        return self.apply(linalg_engine.plus, other)

    def minus(self: _T, other: Tensor | float) -> _T:
        return self.apply(linalg_engine.minus, other)

    def times(self: _T, other: Tensor | float) -> _T:
        """Return the elementwise product."""
        return self.apply(linalg_engine.times, other)

    def pow(self: _T, exponent: int) -> _T:
        """Return every element raised to ``exponent``."""
        return self.apply(linalg_engine.power(exponent), 0.0)

    def allclose(
        self,
        other: Tensor,
        tolerance: float | None = None,
        params: LinalgParams | None = None,
    ) -> bool:
        """Return True if shapes match and every element is within tolerance.

        An explicit ``tolerance`` wins over ``params.equality_tolerance``.
        """
        active: LinalgParams = params or DEFAULT_PARAMS
        tol: float = active.equality_tolerance if tolerance is None else tolerance
        if self.shape != other.shape:
            return False
        pairs = zip(self.values(), other.values(), strict=True)
        return all(abs(a - b) <= tol for a, b in pairs)

    #
    # Operators
    #

    def __add__(self: _T, other: object) -> _T:
        if not (linalg_engine.is_number(other) or self._accepts(other)):
            return NotImplemented
        return self.apply(linalg_engine.plus, other)  # type: ignore[arg-type]

    def __radd__(self: _T, other: object) -> _T:
        if not linalg_engine.is_number(other):
            return NotImplemented
        return self.apply(linalg_engine.plus, other)  # type: ignore[arg-type]

    def __sub__(self: _T, other: object) -> _T:
        if not (linalg_engine.is_number(other) or self._accepts(other)):
            return NotImplemented
        return self.apply(linalg_engine.minus, other)  # type: ignore[arg-type]

    def __rsub__(self: _T, other: object) -> _T:
        if not linalg_engine.is_number(other):
            return NotImplemented
        return self.apply(_reversed_minus, other)  # type: ignore[arg-type]

    def __mul__(self: _T, other: object) -> _T:
        if not (linalg_engine.is_number(other) or self._accepts(other)):
            return NotImplemented
        return self.apply(linalg_engine.times, other)  # type: ignore[arg-type]

    def __rmul__(self: _T, other: object) -> _T:
        if not linalg_engine.is_number(other):
            return NotImplemented
        return self.apply(linalg_engine.times, other)  # type: ignore[arg-type]

    def __neg__(self: _T) -> _T:
        return self.apply(linalg_engine.times, -1.0)

    #
    # Rendering
    #

    def __str__(self) -> str:
        return self.as_string()

    def print(self, name: str | None = None) -> None:
        """Write the rendering to stdout, preceded by ``"name = "`` if given."""
        print(with_name(name, self.as_string()))


class MutableTensor(Tensor):
    """Adds in-place operations that write through the entity's own view."""

    def _store(self, values: Sequence[float]) -> None:
        self._buffer.scatter(self._view.positions(), values)

    def apply_equals(self, op: Operation, other: Tensor | float) -> None:
        """Overwrite each element with ``op(self[i], other[i])``.

        A scalar ``other`` is broadcast. A scalar ``self`` is never grown to
        match a larger ``other``; that raises DimensionMismatchError.
        """
        self._check_operand(other)
        values: list[float] = linalg_engine.apply_in_place(op, self, other)
        self._store(values)

    def plus_equals(self, other: Tensor | float) -> None:
        self.apply_equals(linalg_engine.plus, other)

    def minus_equals(self, other: Tensor | float) -> None:
        self.apply_equals(linalg_engine.minus, other)

    def times_equals(self, other: Tensor | float) -> None:
        """Multiply elementwise in place."""
        self.apply_equals(linalg_engine.times, other)

    def pow_equals(self, exponent: int) -> None:
        """Raise every element to ``exponent`` in place."""
        self.apply_equals(linalg_engine.power(exponent), 0.0)

    def __iadd__(self: _T, other: object) -> _T:
        if not (linalg_engine.is_number(other) or self._accepts(other)):
            return NotImplemented
        self.plus_equals(other)  # type: ignore[attr-defined]
        return self

    def __isub__(self: _T, other: object) -> _T:
        if not (linalg_engine.is_number(other) or self._accepts(other)):
            return NotImplemented
        self.minus_equals(other)  # type: ignore[attr-defined]
        return self

    def __imul__(self: _T, other: object) -> _T:
        if not (linalg_engine.is_number(other) or self._accepts(other)):
            return NotImplemented
        self.times_equals(other)  # type: ignore[attr-defined]
        return self
