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

import logging
import math

import pytest

from oasis_linalg import linalg_engine
from oasis_linalg.linalg_engine import ElementwiseResult
from oasis_linalg.linalg_errors import DimensionMismatchError
from oasis_linalg.linalg_matrix import Matrix
from oasis_linalg.linalg_vector import Vector


def test_same_shape_operands() -> None:
    result: ElementwiseResult = linalg_engine.apply(
        linalg_engine.plus,
        Vector.from_values([1.0, 2.0]),
        Vector.from_values([10.0, 20.0]),
        allow_left_broadcast=False,
    )

    assert result.shape == (2,)
    assert result.values == [11.0, 22.0]


def test_right_scalar_broadcasts() -> None:
    number: ElementwiseResult = linalg_engine.apply(
        linalg_engine.minus,
        Vector.from_values([1.0, 2.0, 3.0]),
        1.0,
        allow_left_broadcast=False,
    )
    entity: ElementwiseResult = linalg_engine.apply(
        linalg_engine.minus,
        Vector.from_values([1.0, 2.0, 3.0]),
        Vector.from_values([1.0]),
        allow_left_broadcast=False,
    )

    assert number.values == [0.0, 1.0, 2.0]
    assert entity == number


def test_left_scalar_needs_permission() -> None:
    left: Vector = Vector.from_values([2.0])
    right: Vector = Vector.from_values([1.0, 2.0, 3.0])

    with pytest.raises(DimensionMismatchError):
        linalg_engine.apply(
            linalg_engine.times, left, right, allow_left_broadcast=False
        )

    result: ElementwiseResult = linalg_engine.apply(
        linalg_engine.times, left, right, allow_left_broadcast=True
    )

    assert result.shape == (3,)
    assert result.values == [2.0, 4.0, 6.0]


def test_matrix_values_are_column_major() -> None:
    a: Matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])

    result: ElementwiseResult = linalg_engine.apply(
        linalg_engine.plus, a, 0.0, allow_left_broadcast=True
    )

    assert result.shape == (2, 2)
    assert result.values == [1.0, 3.0, 2.0, 4.0]


def test_shape_mismatch_rejected() -> None:
    with pytest.raises(DimensionMismatchError):
        linalg_engine.apply(
            linalg_engine.plus,
            Matrix.zeros(2, 3),
            Matrix.zeros(3, 2),
            allow_left_broadcast=True,
        )


def test_power_ignores_right_operand() -> None:
    cube: linalg_engine.Operation = linalg_engine.power(3)

    assert cube(2.0, 99.0) == 8.0
    assert cube(-1.0, 0.0) == -1.0


def test_is_number() -> None:
    assert linalg_engine.is_number(2)
    assert linalg_engine.is_number(2.5)
    assert not linalg_engine.is_number("2")
    assert not linalg_engine.is_number(Vector.ones(1))


def test_apply_in_place_never_grows_scalar_target() -> None:
    with pytest.raises(DimensionMismatchError):
        linalg_engine.apply_in_place(
            linalg_engine.plus, Vector.zeros(1), Vector.ones(3)
        )


def test_apply_in_place_logs_update(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="oasis_linalg.linalg_engine")

    values: list[float] = linalg_engine.apply_in_place(
        linalg_engine.plus, Matrix.ones(2, 2), Matrix.ones(2, 2)
    )

    assert values == [2.0, 2.0, 2.0, 2.0]
    assert "2x2" in caplog.text


def test_power_follows_ieee() -> None:
    square: linalg_engine.Operation = linalg_engine.power(2)
    inverse: linalg_engine.Operation = linalg_engine.power(-1)

    assert square(1e200, 0.0) == math.inf
    assert inverse(0.0, 0.0) == math.inf
    assert inverse(-0.0, 0.0) == -math.inf
    assert inverse(4.0, 0.0) == 0.25
