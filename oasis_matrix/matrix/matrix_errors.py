################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exceptions raised by dense matrix operations."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix errors."""


class InvalidShapeError(MatrixError, ValueError):
    """Raised when a requested dimension is less than 1."""


class ShapeMismatchError(MatrixError, ValueError):
    """Raised when operand shapes are incompatible for an operation."""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Raised when an element index is negative or past the last row/col."""


class NotSquareError(MatrixError):
    """Raised when a square matrix is required."""


class SizeUnsupportedError(MatrixError):
    """Raised when cofactors are requested for a 1x1 matrix."""


class SingularMatrixError(MatrixError, ArithmeticError):
    """Raised when inverting a matrix whose determinant is within tolerance of 0."""


class SelfAliasingError(MatrixError):
    """Raised when a matrix is asked to copy itself into itself."""
