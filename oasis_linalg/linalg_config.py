################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration values for rendering, comparison and random fills."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from typing import Any

import numpy as np

from oasis_linalg.linalg_errors import LinalgConfigError


# Minimum field width of a rendered element
FORMAT_WIDTH: int = 9
# Digits after the decimal point of a rendered element
FORMAT_PRECISION: int = 4
# Always render the sign of an element
FORMAT_SIGN: bool = True
# Separator appended after each rendered vector element
ELEMENT_SEPARATOR: str = ", "

# Absolute tolerance used when comparing elements
EQUALITY_TOLERANCE: float = 1e-8

# Seed for random fills when no generator is supplied (None draws OS entropy)
RANDOM_SEED: int | None = None


@dataclass(frozen=True)
class LinalgParams:
    """Rendering, comparison and random fill parameters.

    Attributes:
        format_width: Minimum field width of a rendered element
        format_precision: Digits after the decimal point
        format_sign: Prefix positive values with "+"
        element_separator: Text appended after each vector element
        equality_tolerance: Absolute tolerance for elementwise comparison
        random_seed: Seed for random fills, or None for OS entropy
    """

    format_width: int = FORMAT_WIDTH
    format_precision: int = FORMAT_PRECISION
    format_sign: bool = FORMAT_SIGN
    element_separator: str = ELEMENT_SEPARATOR
    equality_tolerance: float = EQUALITY_TOLERANCE
    random_seed: int | None = RANDOM_SEED

    @classmethod
    def defaults(cls) -> LinalgParams:
        """Return the default parameters."""
        return cls()

    def validate(self) -> None:
        """Validate parameter invariants."""
        if not isinstance(self.format_width, int) or self.format_width <= 0:
            raise LinalgConfigError("format_width must be a positive int")
        if not isinstance(self.format_precision, int) or self.format_precision < 0:
            raise LinalgConfigError("format_precision must be a non-negative int")
        if not np.isfinite(self.equality_tolerance) or self.equality_tolerance < 0.0:
            raise LinalgConfigError("equality_tolerance must be finite and >= 0")
        if self.random_seed is not None:
            if not isinstance(self.random_seed, int) or self.random_seed < 0:
                raise LinalgConfigError("random_seed must be a non-negative int")

    def replace(self, **overrides: Any) -> LinalgParams:
        """Return a validated copy with the given fields replaced."""
        params: LinalgParams = replace(self, **overrides)
        params.validate()
        return params

    def element_format(self) -> str:
        """Return the printf-style format used for a single element."""
        sign: str = "+" if self.format_sign else ""
        return f"%{sign}{self.format_width}.{self.format_precision}f "

    def make_rng(self) -> np.random.Generator:
        """Return a random generator seeded from ``random_seed``."""
        return np.random.default_rng(self.random_seed)


DEFAULT_PARAMS: LinalgParams = LinalgParams.defaults()
DEFAULT_PARAMS.validate()
