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
Selection validation and logical index resolution

A selection ``(start, stop, stride)`` picks the elements ``start``,
``start + stride``, ... of a dimension of size ``bound``, stopping before
``stop``. For example, on ``[0, 1, ..., 9]`` the selection ``(1, 7, 2)`` is
``[1, 3, 5]`` and ``(7, 1, -2)`` is ``[7, 5, 3]``. Every selection in the
package, 1-D or per axis in 2-D, is validated here.
"""

from __future__ import annotations

from oasis_linalg.linalg_errors import IndexOutOfBoundsError
from oasis_linalg.linalg_errors import InvalidSelectionError


def _check_in_bounds(index: int, lower: int, upper: int, name: str) -> None:
    if index < lower:
        raise IndexOutOfBoundsError(f"{name} {index} cannot be less than {lower}")
    if index >= upper:
        raise IndexOutOfBoundsError(
            f"{name} {index} cannot be greater than or equal to {upper}"
        )


def default_stride(start: int, stop: int) -> int:
    """Return +1 when ``start < stop`` and -1 otherwise."""
    return 1 if start < stop else -1


def selection_count(start: int, stop: int, stride: int) -> int:
    """Return the element count of a selection without bounds checks.

    The count is ``1 + (stop - 1 - start) // stride`` for positive strides
    and ``1 + (stop + 1 - start) // stride`` for negative strides. The
    numerator never has the opposite sign of the stride, so floor division
    matches truncating division.
    """
    if stride > 0:
        return 1 + (stop - 1 - start) // stride
    return 1 + (stop + 1 - start) // stride


def validate_selection(start: int, stop: int, stride: int, bound: int) -> int:
    """Validate a selection against a dimension and return its element count.

    Args:
        start: First selected index (inclusive)
        stop: End of the selection (exclusive)
        stride: Step between selected indices, nonzero
        bound: Size of the dimension being selected from

    Returns:
        Number of elements in the selection

    Raises:
        InvalidSelectionError: If the stride is zero, the selection is empty,
            or the stride sign disagrees with ``stop - start``
        IndexOutOfBoundsError: If ``start`` or the last selected index lies
            outside ``[0, bound)``
    """
    if stride == 0:
        raise InvalidSelectionError("stride must be nonzero")

    diff: int = stop - start
    if diff == 0:
        raise InvalidSelectionError("empty selection is not permitted")

    if diff * stride < 0:
        raise InvalidSelectionError(
            "stride direction must match the start to stop direction "
            f"(start={start}, stop={stop}, stride={stride})"
        )

    count: int = selection_count(start, stop, stride)

    _check_in_bounds(start, 0, bound, "start")
    _check_in_bounds(start + (count - 1) * stride, 0, bound, "last index")

    return count


def resolve_index(index: int, offset: int, stride: int, length: int) -> int:
    """Map a logical index to a buffer position.

    Reads and writes both resolve through this function, so the two paths
    always address the same position.

    Args:
        index: Logical index in ``[0, length)``
        offset: Buffer position of logical index 0
        stride: Buffer distance between consecutive logical indices
        length: Number of logical elements

    Returns:
        The buffer position ``offset + stride * index``

    Raises:
        IndexOutOfBoundsError: If ``index`` is outside ``[0, length)``
    """
    _check_in_bounds(index, 0, length, "index")
    return offset + stride * index
