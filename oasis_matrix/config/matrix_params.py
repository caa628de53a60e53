################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tolerances and tuning parameters for dense matrix operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Absolute per-element tolerance for matrix equality
EQ_TOL: float = 1.0e-7

# |det| at or below this value is treated as singular by inverse()
SINGULAR_TOL: float = 1.0e-7

# Square size at which Laplace expansion logs a cost warning
LAPLACE_WARN_SIZE: int = 9


class MatrixParamsError(Exception):
    """Raised when matrix parameter validation fails."""


def _require_finite(value: float, name: str) -> None:
    """Require a finite float value."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MatrixParamsError(f"{name} must be a number")
    if not math.isfinite(value):
        raise MatrixParamsError(f"{name} must be finite")


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    _require_finite(value, name)
    if value <= 0.0:
        raise MatrixParamsError(f"{name} must be positive")


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    _require_finite(value, name)
    if value < 0.0:
        raise MatrixParamsError(f"{name} must be non-negative")


@dataclass(frozen=True)
class MatrixParams:
    """Tolerances used by comparison and inversion.

    Attributes:
        eq_tol: Element-wise absolute tolerance for eq_matrix
        singular_tol: Determinant magnitude at or below which a matrix is
            singular
        laplace_warn_size: Square size at which determinant() warns that
            cofactor expansion is factorial in cost
    """

    eq_tol: float = EQ_TOL
    singular_tol: float = SINGULAR_TOL
    laplace_warn_size: int = LAPLACE_WARN_SIZE

    def __post_init__(self) -> None:
        """Reject invalid tolerances at construction."""
        self.validate()

    @classmethod
    def defaults(cls) -> MatrixParams:
        """Return the default parameters."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> MatrixParams:
        """Build validated parameters from a mapping, rejecting unknown keys."""
        known: set[str] = {field.name for field in fields(cls)}
        unknown: list[str] = sorted(key for key in values if key not in known)
        if unknown:
            raise MatrixParamsError(f"Unknown matrix params: {', '.join(unknown)}")

        return replace(cls.defaults(), **dict(values))

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_positive(self.eq_tol, "eq_tol")
        _require_non_negative(self.singular_tol, "singular_tol")

        if isinstance(self.laplace_warn_size, bool) or not isinstance(
            self.laplace_warn_size, int
        ):
            raise MatrixParamsError("laplace_warn_size must be an int")
        if self.laplace_warn_size < 2:
            raise MatrixParamsError("laplace_warn_size must be at least 2")

    def as_dict(self) -> dict[str, Any]:
        """Return a plain dict representation."""
        return {field.name: getattr(self, field.name) for field in fields(self)}
