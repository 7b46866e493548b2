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
Exception types raised by the linear algebra core

Every error is raised synchronously at the call that would break an
invariant. No operation leaves a partially written result behind.
"""

from __future__ import annotations


class LinalgError(Exception):
    """Base class for all linear algebra errors."""


class InvalidSelectionError(LinalgError, ValueError):
    """Raised for a zero stride, an empty selection, or a stride whose sign
    does not match the selection direction."""


class IndexOutOfBoundsError(LinalgError, IndexError):
    """Raised when a logical or buffer index falls outside its valid range."""


class DimensionMismatchError(LinalgError, ValueError):
    """Raised when operand shapes are incompatible for an operation."""


class NotSquareError(LinalgError, ValueError):
    """Raised when an operation requires a square matrix."""


class NegativeExponentError(LinalgError, ValueError):
    """Raised when a matrix power is requested with a negative exponent."""


class InvalidShapeError(LinalgError, ValueError):
    """Raised when an entity would be constructed with no elements."""


class LinalgConfigError(LinalgError):
    """Raised when linear algebra configuration validation fails."""
