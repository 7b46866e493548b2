################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-width text rendering of vectors and matrices."""

from __future__ import annotations

from collections.abc import Sequence

from oasis_linalg.linalg_config import DEFAULT_PARAMS
from oasis_linalg.linalg_config import LinalgParams


def format_value(value: float, params: LinalgParams | None = None) -> str:
    """Render one element, for example ``" +1.5000 "`` with the defaults."""
    active: LinalgParams = params or DEFAULT_PARAMS
    return active.element_format() % value


def format_vector(values: Sequence[float], params: LinalgParams | None = None) -> str:
    """Render vector elements on one line, each followed by the separator."""
    active: LinalgParams = params or DEFAULT_PARAMS
    return "".join(
        format_value(value, active) + active.element_separator for value in values
    )


def format_row(values: Sequence[float], params: LinalgParams | None = None) -> str:
    """Render the elements of one matrix row."""
    return "".join(format_value(value, params) for value in values)


def format_matrix(
    rows: Sequence[Sequence[float]], params: LinalgParams | None = None
) -> str:
    """Render a matrix with one line per row."""
    return "".join(format_row(row, params) + "\n" for row in rows)


def with_name(name: str | None, text: str) -> str:
    """Prefix rendered text with ``"name = "`` on its own line."""
    if name is None:
        return text
    return f"{name} = \n{text}"
