################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense real-valued matrices with cofactor-expansion determinant and inverse."""

from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.config.matrix_params import MatrixParamsError
from oasis_matrix.matrix.matrix import Matrix
from oasis_matrix.matrix.matrix_errors import IndexOutOfRangeError
from oasis_matrix.matrix.matrix_errors import InvalidShapeError
from oasis_matrix.matrix.matrix_errors import MatrixError
from oasis_matrix.matrix.matrix_errors import NotSquareError
from oasis_matrix.matrix.matrix_errors import SelfAliasingError
from oasis_matrix.matrix.matrix_errors import ShapeMismatchError
from oasis_matrix.matrix.matrix_errors import SingularMatrixError
from oasis_matrix.matrix.matrix_errors import SizeUnsupportedError


__all__ = [
    "IndexOutOfRangeError",
    "InvalidShapeError",
    "Matrix",
    "MatrixError",
    "MatrixParams",
    "MatrixParamsError",
    "NotSquareError",
    "SelfAliasingError",
    "ShapeMismatchError",
    "SingularMatrixError",
    "SizeUnsupportedError",
]
