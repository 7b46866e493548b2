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

import dataclasses

import pytest

from oasis_linalg.linalg_config import DEFAULT_PARAMS
from oasis_linalg.linalg_config import LinalgParams
from oasis_linalg.linalg_errors import LinalgConfigError
from oasis_linalg.linalg_errors import LinalgError


def test_defaults_validate() -> None:
    params: LinalgParams = LinalgParams.defaults()

    params.validate()

    assert params == DEFAULT_PARAMS
    assert params.element_format() == "%+9.4f "


def test_replace_validates() -> None:
    with pytest.raises(LinalgConfigError):
        DEFAULT_PARAMS.replace(format_width=0)

    with pytest.raises(LinalgConfigError):
        DEFAULT_PARAMS.replace(format_precision=-1)

    with pytest.raises(LinalgConfigError):
        DEFAULT_PARAMS.replace(equality_tolerance=float("nan"))

    with pytest.raises(LinalgConfigError):
        DEFAULT_PARAMS.replace(random_seed=-3)


def test_replace_returns_new_params() -> None:
    params: LinalgParams = DEFAULT_PARAMS.replace(format_sign=False, format_width=6)

    assert params.element_format() == "%6.4f "
    assert DEFAULT_PARAMS.format_width == 9


def test_params_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PARAMS.format_width = 3  # type: ignore[misc]


def test_seeded_generator_is_reproducible() -> None:
    params: LinalgParams = DEFAULT_PARAMS.replace(random_seed=42)

    assert params.make_rng().random() == params.make_rng().random()


def test_config_error_is_linalg_error() -> None:
    assert issubclass(LinalgConfigError, LinalgError)
