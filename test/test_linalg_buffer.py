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

import numpy as np
import pytest

from oasis_linalg.linalg_buffer import Buffer
from oasis_linalg.linalg_errors import DimensionMismatchError
from oasis_linalg.linalg_errors import IndexOutOfBoundsError
from oasis_linalg.linalg_errors import InvalidShapeError


def test_allocate_zero_fills() -> None:
    buffer: Buffer = Buffer.allocate(4)

    assert buffer.capacity == 4
    assert len(buffer) == 4
    assert buffer.gather([0, 1, 2, 3]) == [0.0, 0.0, 0.0, 0.0]


def test_empty_buffer_rejected() -> None:
    with pytest.raises(InvalidShapeError):
        Buffer.allocate(0)

    with pytest.raises(InvalidShapeError):
        Buffer.from_values([])


def test_non_flat_storage_rejected() -> None:
    with pytest.raises(InvalidShapeError):
        Buffer(np.zeros((2, 2), dtype=np.float64))


def test_read_write() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0, 3.0])

    buffer.write(1, 7.5)

    assert buffer.read(1) == 7.5
    assert isinstance(buffer.read(0), float)


def test_invalid_position_rejected() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0])

    with pytest.raises(IndexOutOfBoundsError):
        buffer.read(2)

    with pytest.raises(IndexOutOfBoundsError):
        buffer.write(-1, 0.0)


def test_scatter_is_all_or_nothing() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0, 3.0])

    with pytest.raises(IndexOutOfBoundsError):
        buffer.scatter([0, 5], [9.0, 9.0])

    assert buffer.gather([0, 1, 2]) == [1.0, 2.0, 3.0]


def test_scatter_length_mismatch_rejected() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0, 3.0])

    with pytest.raises(DimensionMismatchError):
        buffer.scatter([0, 1], [9.0])


def test_gather_returns_copy() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0])

    snapshot: list[float] = buffer.gather([1, 0])
    buffer.write(0, 5.0)

    assert snapshot == [2.0, 1.0]


def test_gather_and_scatter_follow_position_order() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0, 3.0, 4.0])

    buffer.scatter([3, 0], [30.0, 10.0])
    values: list[float] = buffer.gather([3, 2, 1, 0])

    assert values == [30.0, 3.0, 2.0, 10.0]
    assert all(type(value) is float for value in values)


def test_gather_rejects_negative_position() -> None:
    buffer: Buffer = Buffer.from_values([1.0, 2.0])

    with pytest.raises(IndexOutOfBoundsError):
        buffer.gather([0, -1])
