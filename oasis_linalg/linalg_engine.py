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
Elementwise operations with scalar broadcasting

The engine is shape agnostic. An operand exposes its shape, whether it is
scalar (a single element), and a snapshot of its values in logical order.
Vectors iterate in index order and matrices in column-major order, which is
also the storage order of a freshly allocated result.

Broadcasting rules for ``apply(op, left, right)``:

  * ``right`` scalar: ``op(left[i], right)`` with the shape of ``left``
  * ``left`` scalar and ``right`` not (only when ``allow_left_broadcast``):
    ``op(left, right[i])`` with the shape of ``right``
  * otherwise the shapes must match and ``op(left[i], right[i])``
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol
from typing import Union
from typing import cast

import numpy as np

from oasis_linalg.linalg_errors import DimensionMismatchError


Operation = Callable[[float, float], float]

_LOG: logging.Logger = logging.getLogger(__name__)


class Operand(Protocol):
    """Anything the engine can combine elementwise."""

    @property
    def shape(self) -> tuple[int, ...]: ...

    def is_scalar(self) -> bool: ...

    def values(self) -> list[float]: ...


OperandLike = Union[Operand, float, int]


@dataclass(frozen=True)
class ElementwiseResult:
    """Values produced by an elementwise operation.

    Attributes:
        shape: Shape of the result
        values: Result values in logical order
    """

    shape: tuple[int, ...]
    values: list[float]


def plus(a: float, b: float) -> float:
    return a + b


def minus(a: float, b: float) -> float:
    return a - b


def times(a: float, b: float) -> float:
    return a * b


def power(exponent: int) -> Operation:
    """Return an operation raising its left operand to ``exponent``.

    The right operand is ignored. Results follow IEEE 754, so overflow gives
    ``inf`` and ``0.0`` to a negative power gives ``inf`` rather than raising.
    """

    def _power(a: float, _b: float) -> float:
        with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
            return float(np.power(np.float64(a), np.float64(exponent)))

    return _power


def is_number(value: object) -> bool:
    """Return True for real numbers that broadcast as scalars."""
    return isinstance(value, numbers.Real)


def _scalar_value(operand: OperandLike) -> float | None:
    if is_number(operand):
        return float(cast(float, operand))
    entity: Operand = cast(Operand, operand)
    if entity.is_scalar():
        return entity.values()[0]
    return None


def _check_same_shape(left: Operand, right: Operand) -> None:
    if left.shape != right.shape:
        raise DimensionMismatchError(
            f"operand shapes {_shape_text(left.shape)} and "
            f"{_shape_text(right.shape)} do not match"
        )


def _shape_text(shape: tuple[int, ...]) -> str:
    return "x".join(str(dim) for dim in shape)


def apply(
    op: Operation,
    left: Operand,
    right: OperandLike,
    *,
    allow_left_broadcast: bool,
) -> ElementwiseResult:
    """Combine two operands elementwise.

    Args:
        op: Binary operation applied to each pair of elements
        left: Left operand
        right: Right operand, an entity or a real number
        allow_left_broadcast: Repeat a scalar ``left`` over a non-scalar
            ``right``

    Returns:
        Shape and values of the result

    Raises:
        DimensionMismatchError: If neither broadcast rule applies and the
            shapes differ
    """
    left_values: list[float] = left.values()

    right_scalar: float | None = _scalar_value(right)
    if right_scalar is not None:
        return ElementwiseResult(
            shape=left.shape,
            values=[op(a, right_scalar) for a in left_values],
        )

    other: Operand = cast(Operand, right)
    if allow_left_broadcast and left.is_scalar():
        a_value: float = left_values[0]
        return ElementwiseResult(
            shape=other.shape,
            values=[op(a_value, b) for b in other.values()],
        )

    _check_same_shape(left, other)
    return ElementwiseResult(
        shape=left.shape,
        values=[op(a, b) for a, b in zip(left_values, other.values())],
    )


def apply_in_place(op: Operation, target: Operand, right: OperandLike) -> list[float]:
    """Compute the values an in-place operation writes back to ``target``.

    Every operand value is read before anything is written, so aliased
    operands see the pre-operation state and a failure writes nothing.

    Args:
        op: Binary operation applied to each pair of elements
        target: Operand that will be overwritten
        right: Right operand, an entity or a real number

    Returns:
        New values for ``target`` in logical order

    Raises:
        DimensionMismatchError: If ``right`` is neither scalar nor the same
            shape as ``target``; a scalar ``target`` is never grown
    """
    target_values: list[float] = target.values()

    right_scalar: float | None = _scalar_value(right)
    if right_scalar is not None:
        return [op(a, right_scalar) for a in target_values]

    other: Operand = cast(Operand, right)
    _check_same_shape(target, other)
    _LOG.debug("In-place elementwise update of %s", _shape_text(target.shape))
    return [op(a, b) for a, b in zip(target_values, other.values())]
