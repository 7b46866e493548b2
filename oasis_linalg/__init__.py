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
Dense vectors and matrices over shared strided storage
"""

from __future__ import annotations

from oasis_linalg.linalg_buffer import Buffer
from oasis_linalg.linalg_config import DEFAULT_PARAMS
from oasis_linalg.linalg_config import LinalgParams
from oasis_linalg.linalg_errors import DimensionMismatchError
from oasis_linalg.linalg_errors import IndexOutOfBoundsError
from oasis_linalg.linalg_errors import InvalidSelectionError
from oasis_linalg.linalg_errors import InvalidShapeError
from oasis_linalg.linalg_errors import LinalgConfigError
from oasis_linalg.linalg_errors import LinalgError
from oasis_linalg.linalg_errors import NegativeExponentError
from oasis_linalg.linalg_errors import NotSquareError
from oasis_linalg.linalg_matrix import Matrix
from oasis_linalg.linalg_matrix import MutableMatrix
from oasis_linalg.linalg_vector import MutableVector
from oasis_linalg.linalg_vector import Vector


__all__ = [
    "Buffer",
    "DEFAULT_PARAMS",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "InvalidSelectionError",
    "InvalidShapeError",
    "LinalgConfigError",
    "LinalgError",
    "LinalgParams",
    "Matrix",
    "MutableMatrix",
    "MutableVector",
    "NegativeExponentError",
    "NotSquareError",
    "Vector",
]
