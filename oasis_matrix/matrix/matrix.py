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
Dense real-valued matrix value type

A Matrix owns a row-major float64 numpy array of shape (rows, cols). Storage
is never shared between two matrices: copies are deep and moves hand the
array over, leaving the source empty (0x0, no storage).

Named operations (sum_matrix, mul_matrix, ...) and compound operators
(+=, -=, *=) mutate the left operand. Binary operators (+, -, *) work on a
copy and leave both operands untouched. Shapes are validated before any
element is written, so a failed operation changes nothing.

The determinant is the Laplace expansion along row 0:

    det(A) = sum_c A[0, c] * (-1)^c * det(minor(A, 0, c))

and the inverse is the scaled adjugate:

    inv(A) = transpose(C) / det(A),  C[i, j] = (-1)^(i + j) * det(minor(A, i, j))
"""

from __future__ import annotations

import logging
import numbers
import operator
from typing import Any
from typing import Sequence

import numpy as np

from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.matrix.matrix_errors import IndexOutOfRangeError
from oasis_matrix.matrix.matrix_errors import InvalidShapeError
from oasis_matrix.matrix.matrix_errors import NotSquareError
from oasis_matrix.matrix.matrix_errors import SelfAliasingError
from oasis_matrix.matrix.matrix_errors import ShapeMismatchError
from oasis_matrix.matrix.matrix_errors import SingularMatrixError
from oasis_matrix.matrix.matrix_errors import SizeUnsupportedError


_LOG: logging.Logger = logging.getLogger(__name__)

_DEFAULT_PARAMS: MatrixParams = MatrixParams.defaults()


def _as_int(value: Any, name: str) -> int:
    """Return value as an int, rejecting floats and other non-integers."""
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from exc


def _require_matrix(value: Any, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise TypeError(f"{name} must be a Matrix, got {type(value).__name__}")
    return value


def _require_scalar(value: Any) -> float:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"scalar must be a real number, got {type(value).__name__}")
    return float(value)


class Matrix:
    """Dense float64 matrix with value semantics.

    Attributes:
        rows: Number of rows, 0 only for the empty matrix
        cols: Number of columns, 0 only for the empty matrix
    """

    __slots__ = ("_rows", "_cols", "_data")

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    # Make numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, rows: int | None = None, cols: int | None = None) -> None:
        """Create a zero-filled rows x cols matrix, or the empty matrix.

        Args:
            rows: Number of rows, at least 1
            cols: Number of columns, at least 1

        Raises:
            InvalidShapeError: If either dimension is less than 1
            TypeError: If only one dimension is given or a dimension is not
                an integer
        """
        self._rows: int = 0
        self._cols: int = 0
        self._data: np.ndarray | None = None

        if rows is None and cols is None:
            return
        if rows is None or cols is None:
            raise TypeError("rows and cols must be given together")

        num_rows: int = _as_int(rows, "rows")
        num_cols: int = _as_int(cols, "cols")
        if num_rows < 1 or num_cols < 1:
            raise InvalidShapeError(
                f"Matrix dimensions must be at least 1, got {num_rows}x{num_cols}"
            )

        self._rows = num_rows
        self._cols = num_cols
        self._data = np.zeros((num_rows, num_cols), dtype=np.float64)

    @classmethod
    def from_rows(cls, values: Sequence[Sequence[float]]) -> Matrix:
        """Return a matrix holding a copy of a nested sequence of numbers."""
        try:
            array: np.ndarray = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise InvalidShapeError(
                "values must be a rectangular grid of numbers"
            ) from exc

        if array.ndim != 2:
            raise InvalidShapeError(f"values must be 2-D, got {array.ndim}-D")

        result: Matrix = cls(array.shape[0], array.shape[1])
        result._data = array
        return result

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the size x size identity matrix."""
        result: Matrix = cls(size, size)
        np.fill_diagonal(result._require_storage("identity"), 1.0)
        return result

    @classmethod
    def from_matrix(cls, source: Matrix) -> Matrix:
        """Return a deep copy of source."""
        result: Matrix = cls()
        result.copy_from(source)
        return result

    @classmethod
    def moved(cls, source: Matrix) -> Matrix:
        """Return a new matrix that takes over the storage of source."""
        result: Matrix = cls()
        result.move_from(source)
        return result

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def is_empty(self) -> bool:
        """True for the 0x0 matrix that owns no storage."""
        return self._data is None

    def copy_from(self, source: Matrix) -> None:
        """Replace this matrix with a deep copy of source.

        Raises:
            SelfAliasingError: If source is this matrix
        """
        _require_matrix(source, "source")
        if source is self:
            raise SelfAliasingError("Can't copy a matrix into itself")

        self._rows = source._rows
        self._cols = source._cols
        self._data = None if source._data is None else source._data.copy()

    def move_from(self, source: Matrix) -> Matrix:
        """Take the storage of source and leave source empty.

        Moving a matrix into itself leaves it unchanged.
        """
        _require_matrix(source, "source")
        if source is self:
            return self

        self._rows = source._rows
        self._cols = source._cols
        self._data = source._data

        source._rows = 0
        source._cols = 0
        source._data = None

        return self

    def assign(self, other: Matrix) -> Matrix:
        """Replace this matrix with a deep copy of other, unless other is self."""
        _require_matrix(other, "other")
        if other is not self:
            self.copy_from(other)
        return self

    def copy(self) -> Matrix:
        """Return a deep copy of this matrix."""
        return Matrix.from_matrix(self)

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def resize_rows(self, rows: int) -> None:
        """Change the row count, keeping overlapping elements and zero-filling."""
        self._resize(_as_int(rows, "rows"), self._cols)

    def resize_cols(self, cols: int) -> None:
        """Change the column count, keeping overlapping elements and zero-filling."""
        self._resize(self._rows, _as_int(cols, "cols"))

    def _resize(self, rows: int, cols: int) -> None:
        resized: Matrix = Matrix(rows, cols)
        target: np.ndarray = resized._require_storage("resize")

        if self._data is not None:
            keep_rows: int = min(rows, self._rows)
            keep_cols: int = min(cols, self._cols)
            target[:keep_rows, :keep_cols] = self._data[:keep_rows, :keep_cols]

        _LOG.debug(
            "Resized matrix from %dx%d to %dx%d", self._rows, self._cols, rows, cols
        )
        self.move_from(resized)

    def get(self, row: int, col: int) -> float:
        """Return the element at (row, col).

        Raises:
            IndexOutOfRangeError: If an index is negative or past the end
        """
        r, c = self._check_bounds(row, col)
        return float(self._require_storage("get")[r, c])

    def set(self, row: int, col: int, value: float) -> None:
        """Set the element at (row, col).

        Raises:
            IndexOutOfRangeError: If an index is negative or past the end
        """
        r, c = self._check_bounds(row, col)
        self._require_storage("set")[r, c] = _require_scalar(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = self._split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = self._split_key(key)
        self.set(row, col, value)

    @staticmethod
    def _split_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, col) pair")
        return key[0], key[1]

    def _check_bounds(self, row: int, col: int) -> tuple[int, int]:
        r: int = _as_int(row, "row")
        c: int = _as_int(col, "col")
        if r < 0 or c < 0:
            raise IndexOutOfRangeError(f"Negative index ({r}, {c})")
        if r >= self._rows or c >= self._cols:
            raise IndexOutOfRangeError(
                f"Index ({r}, {c}) out of bounds for {self._rows}x{self._cols} matrix"
            )
        return r, c

    def eq_matrix(self, other: Matrix, *, params: MatrixParams | None = None) -> bool:
        """Return True when shapes match and all elements agree within eq_tol."""
        _require_matrix(other, "other")
        tol: float = (params if params is not None else _DEFAULT_PARAMS).eq_tol

        if self.shape != other.shape:
            return False
        if self._data is None or other._data is None:
            return True

        return bool(np.all(np.abs(self._data - other._data) < tol))

    def sum_matrix(self, other: Matrix) -> None:
        """Add other element-wise in place."""
        self._check_same_shape(other, "sum")
        if self._data is not None and other._data is not None:
            self._data += other._data

    def sub_matrix(self, other: Matrix) -> None:
        """Subtract other element-wise in place."""
        self._check_same_shape(other, "difference")
        if self._data is not None and other._data is not None:
            self._data -= other._data

    def mul_number(self, num: float) -> None:
        """Multiply every element by a scalar in place."""
        scalar: float = _require_scalar(num)
        if self._data is not None:
            self._data *= scalar

    def mul_matrix(self, other: Matrix) -> None:
        """Replace this matrix with the product self @ other.

        Raises:
            ShapeMismatchError: If self.cols != other.rows
            InvalidShapeError: If both operands are empty
        """
        _require_matrix(other, "other")
        if self._cols != other._rows:
            raise ShapeMismatchError(
                f"Can't multiply {self._rows}x{self._cols} by "
                f"{other._rows}x{other._cols} matrix"
            )
        if self._data is None or other._data is None:
            raise InvalidShapeError("Matrix product requires non-empty operands")

        product: np.ndarray = self._data @ other._data
        self._cols = other._cols
        self._data = product

    def _check_same_shape(self, other: Matrix, name: str) -> None:
        _require_matrix(other, "other")
        if self.shape != other.shape:
            raise ShapeMismatchError(
                f"Matrix {name} requires equal shapes, got "
                f"{self._rows}x{self._cols} and {other._rows}x{other._cols}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.eq_matrix(other)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result: Matrix = self.copy()
        result.sum_matrix(other)
        return result

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        result: Matrix = self.copy()
        result.sub_matrix(other)
        return result

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            result: Matrix = self.copy()
            result.mul_matrix(other)
            return result
        if isinstance(other, numbers.Real):
            scaled: Matrix = self.copy()
            scaled.mul_number(other)
            return scaled
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self * other

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sum_matrix(other)
        return self

    def __isub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub_matrix(other)
        return self

    def __imul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            self.mul_matrix(other)
            return self
        if isinstance(other, numbers.Real):
            self.mul_number(other)
            return self
        return NotImplemented

    def transpose(self) -> Matrix:
        """Return a new cols x rows matrix with result[i, j] = self[j, i]."""
        data: np.ndarray = self._require_storage("transpose")
        result: Matrix = Matrix(self._cols, self._rows)
        result._data = data.T.copy()
        return result

    def minor(self, row: int, col: int) -> Matrix:
        """Return the matrix with the given row and column removed.

        Args:
            row: Row to remove
            col: Column to remove

        Returns:
            A (rows - 1) x (cols - 1) matrix keeping the relative order of
            the remaining elements

        Raises:
            IndexOutOfRangeError: If row or col is out of range
            InvalidShapeError: If the matrix has a single row or column
        """
        data: np.ndarray = self._require_storage("minor")
        r, c = self._check_bounds(row, col)

        result: Matrix = Matrix(self._rows - 1, self._cols - 1)
        result._data = np.delete(np.delete(data, r, axis=0), c, axis=1)
        return result

    def determinant(self, *, params: MatrixParams | None = None) -> float:
        """Return the determinant by cofactor expansion along row 0.

        The empty matrix has no row 0 to expand, so its determinant is 0.

        Raises:
            NotSquareError: If the matrix is not square
        """
        if self._data is None:
            return 0.0
        self._require_square("determinant")
        active: MatrixParams = params if params is not None else _DEFAULT_PARAMS
        if self._rows >= active.laplace_warn_size:
            _LOG.warning(
                "Laplace expansion of a %dx%d matrix is factorial in cost",
                self._rows,
                self._cols,
            )
        return self._laplace_determinant()

    def _laplace_determinant(self) -> float:
        data: np.ndarray = self._require_storage("determinant")
        if self._rows == 1:
            return float(data[0, 0])

        result: float = 0.0
        for col in range(self._cols):
            minor: Matrix = self.minor(0, col)
            sign: float = (-1.0) ** col
            result += float(data[0, col]) * sign * minor._laplace_determinant()
        return result

    def calc_complements(self) -> Matrix:
        """Return the cofactor matrix.

        Raises:
            NotSquareError: If the matrix is not square
            SizeUnsupportedError: If the matrix is 1x1
        """
        self._require_square("calc_complements")
        if self._rows == 1:
            raise SizeUnsupportedError("Cofactors are undefined for a 1x1 matrix")

        result: Matrix = Matrix(self._rows, self._cols)
        cofactors: np.ndarray = result._require_storage("calc_complements")
        for row in range(self._rows):
            for col in range(self._cols):
                minor: Matrix = self.minor(row, col)
                sign: float = (-1.0) ** (row + col)
                cofactors[row, col] = sign * minor._laplace_determinant()
        return result

    def inverse(self, *, params: MatrixParams | None = None) -> Matrix:
        """Return the inverse as the adjugate scaled by 1 / det.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If |det| <= singular_tol, including the empty
                matrix
            SizeUnsupportedError: If the matrix is 1x1
        """
        active: MatrixParams = params if params is not None else _DEFAULT_PARAMS
        det: float = self.determinant(params=active)
        if abs(det) <= active.singular_tol:
            _LOG.debug(
                "Refusing to invert %dx%d matrix with det=%g",
                self._rows,
                self._cols,
                det,
            )
            raise SingularMatrixError(
                f"Determinant {det:g} is within {active.singular_tol:g} of zero"
            )

        adjugate: Matrix = self.calc_complements().transpose()
        adjugate.mul_number(1.0 / det)
        return adjugate

    def _require_storage(self, name: str) -> np.ndarray:
        if self._data is None:
            raise InvalidShapeError(f"{name} requires a non-empty matrix")
        return self._data

    def _require_square(self, name: str) -> None:
        self._require_storage(name)
        if self._rows != self._cols:
            raise NotSquareError(
                f"{name} requires a square matrix, got {self._rows}x{self._cols}"
            )

    def as_array(self) -> np.ndarray:
        """Return a defensive copy of the elements."""
        if self._data is None:
            return np.zeros((0, 0), dtype=np.float64)
        return self._data.copy()

    def to_rows(self) -> list[list[float]]:
        """Return the elements as nested lists of floats."""
        if self._data is None:
            return []
        return [[float(value) for value in row] for row in self._data]

    def __repr__(self) -> str:
        if self._data is None:
            return "Matrix()"
        return f"Matrix.from_rows({self.to_rows()!r})"
