################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix equality and arithmetic."""

from __future__ import annotations

import numpy as np
import pytest

from oasis_matrix.config.matrix_params import MatrixParams
from oasis_matrix.matrix.matrix import Matrix
from oasis_matrix.matrix.matrix_errors import InvalidShapeError
from oasis_matrix.matrix.matrix_errors import ShapeMismatchError


def _random_matrix(rng: np.random.Generator, rows: int, cols: int) -> Matrix:
    """Return a matrix with uniform entries in [-1, 1)."""
    return Matrix.from_rows(rng.uniform(-1.0, 1.0, size=(rows, cols)))


def test_equality_is_reflexive_and_symmetric() -> None:
    """Ensure == behaves as an equivalence on equal matrices."""
    a: Matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b: Matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    assert a == a
    assert a == b
    assert b == a
    assert a.eq_matrix(b)
    assert Matrix() == Matrix()


def test_equality_tolerance() -> None:
    """Ensure elements closer than 1e-7 compare equal."""
    a: Matrix = Matrix.from_rows([[1.0, 2.0]])
    close: Matrix = Matrix.from_rows([[1.0 + 1e-8, 2.0 - 1e-8]])
    far: Matrix = Matrix.from_rows([[1.0 + 1e-6, 2.0]])
    assert a == close
    assert a != far
    assert a.eq_matrix(far, params=MatrixParams(eq_tol=1e-5))


def test_equality_is_shape_sensitive() -> None:
    """Ensure matrices of different shapes are never equal."""
    small: Matrix = Matrix(2, 2)
    large: Matrix = Matrix(3, 3)
    assert small != large
    assert not large.eq_matrix(small)
    assert Matrix(2, 3) != Matrix(3, 2)
    assert Matrix(1, 1) != Matrix()


def test_equality_rejects_nan() -> None:
    """Ensure NaN elements never compare equal."""
    a: Matrix = Matrix.from_rows([[float("nan")]])
    assert a != a.copy()


def test_equality_with_other_types() -> None:
    """Ensure comparison with non-matrices is False and matrices are unhashable."""
    a: Matrix = Matrix.from_rows([[1.0]])
    assert a != [[1.0]]
    with pytest.raises(TypeError):
        a.eq_matrix([[1.0]])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        hash(a)


def test_sum_and_sub_in_place() -> None:
    """Ensure sum_matrix and sub_matrix mutate the left operand only."""
    a: Matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b: Matrix = Matrix.from_rows([[0.5, 0.5], [-1.0, 2.0]])

    a.sum_matrix(b)
    assert a == Matrix.from_rows([[1.5, 2.5], [2.0, 6.0]])
    assert b == Matrix.from_rows([[0.5, 0.5], [-1.0, 2.0]])

    a.sub_matrix(b)
    assert a == Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])


def test_sum_with_itself() -> None:
    """Ensure adding a matrix to itself doubles it."""
    a: Matrix = Matrix.from_rows([[1.0, -2.0]])
    a.sum_matrix(a)
    assert a == Matrix.from_rows([[2.0, -4.0]])


@pytest.mark.parametrize("shapes", [((2, 3), (3, 2)), ((3, 2), (2, 3))])
def test_mismatched_sum_and_sub_raise(shapes: tuple[tuple[int, int], ...]) -> None:
    """Ensure add/sub reject differing shapes and leave operands unchanged."""
    rng: np.random.Generator = np.random.default_rng(1)
    a: Matrix = _random_matrix(rng, *shapes[0])
    b: Matrix = _random_matrix(rng, *shapes[1])
    a_before: np.ndarray = a.as_array()
    b_before: np.ndarray = b.as_array()

    with pytest.raises(ShapeMismatchError):
        a.sum_matrix(b)
    with pytest.raises(ShapeMismatchError):
        a.sub_matrix(b)
    with pytest.raises(ShapeMismatchError):
        a + b
    with pytest.raises(ShapeMismatchError):
        a -= b

    np.testing.assert_array_equal(a.as_array(), a_before)
    np.testing.assert_array_equal(b.as_array(), b_before)


def test_mul_number() -> None:
    """Ensure scalar multiplication scales every element."""
    a: Matrix = Matrix.from_rows([[1.0, -2.0], [0.5, 4.0]])
    a.mul_number(2)
    assert a == Matrix.from_rows([[2.0, -4.0], [1.0, 8.0]])
    with pytest.raises(TypeError):
        a.mul_number("2")  # type: ignore[arg-type]


def test_mul_matrix_known_product() -> None:
    """Ensure the product matches a hand-computed result."""
    a: Matrix = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    b: Matrix = Matrix.from_rows([[7.0, 8.0], [9.0, 10.0], [11.0, 12.0]])
    expected: Matrix = Matrix.from_rows([[58.0, 64.0], [139.0, 154.0]])

    assert a * b == expected

    a.mul_matrix(b)
    assert a.shape == (2, 2)
    assert a == expected


def test_mul_matrix_mismatch_raises() -> None:
    """Ensure products with differing inner dimensions are rejected."""
    a: Matrix = Matrix(2, 3)
    b: Matrix = Matrix(4, 2)
    with pytest.raises(ShapeMismatchError):
        a.mul_matrix(b)
    with pytest.raises(ShapeMismatchError):
        a * b
    with pytest.raises(ShapeMismatchError):
        a *= b
    assert a.shape == (2, 3)
    assert b.shape == (4, 2)


def test_mul_matrix_empty_operands_raise() -> None:
    """Ensure the product of two empty matrices is rejected."""
    with pytest.raises(InvalidShapeError):
        Matrix().mul_matrix(Matrix())


def test_mul_matrix_with_one_empty_operand_is_a_mismatch() -> None:
    """Ensure an empty operand against a sized one fails on inner dimensions."""
    a: Matrix = Matrix(2, 2)
    with pytest.raises(ShapeMismatchError):
        a * Matrix()
    with pytest.raises(ShapeMismatchError):
        Matrix() * a
    with pytest.raises(ShapeMismatchError):
        a *= Matrix()
    assert a.shape == (2, 2)


def test_mul_matrix_is_associative() -> None:
    """Ensure (A B) C equals A (B C) within tolerance."""
    rng: np.random.Generator = np.random.default_rng(7)
    a: Matrix = _random_matrix(rng, 2, 3)
    b: Matrix = _random_matrix(rng, 3, 4)
    c: Matrix = _random_matrix(rng, 4, 2)
    assert (a * b) * c == a * (b * c)


def test_binary_operators_do_not_mutate() -> None:
    """Ensure +, - and * return new matrices."""
    a: Matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b: Matrix = Matrix.from_rows([[1.0, 0.0], [0.0, 1.0]])
    a_before: Matrix = a.copy()
    b_before: Matrix = b.copy()

    total: Matrix = a + b
    diff: Matrix = a - b
    product: Matrix = a * b
    scaled: Matrix = a * 3.0

    assert total == Matrix.from_rows([[2.0, 2.0], [3.0, 5.0]])
    assert diff == Matrix.from_rows([[0.0, 2.0], [3.0, 3.0]])
    assert product == a_before
    assert scaled == Matrix.from_rows([[3.0, 6.0], [9.0, 12.0]])
    assert total is not a
    assert a == a_before
    assert b == b_before


def test_scalar_on_the_left() -> None:
    """Ensure Python and numpy scalars multiply from the left."""
    a: Matrix = Matrix.from_rows([[1.0, -1.0]])
    expected: Matrix = Matrix.from_rows([[2.0, -2.0]])

    left: Matrix = 2 * a
    numpy_left: Matrix = np.float64(2.0) * a

    assert isinstance(numpy_left, Matrix)
    assert left == expected
    assert numpy_left == expected
    assert a == Matrix.from_rows([[1.0, -1.0]])


def test_unsupported_operands_raise_type_error() -> None:
    """Ensure operators reject non-matrix, non-scalar operands."""
    a: Matrix = Matrix(2, 2)
    with pytest.raises(TypeError):
        a + 1.0  # type: ignore[operator]
    with pytest.raises(TypeError):
        a * "x"  # type: ignore[operator]
    with pytest.raises(TypeError):
        "x" * a  # type: ignore[operator]


def test_compound_operators_mutate_in_place() -> None:
    """Ensure +=, -= and *= update and return the left operand."""
    a: Matrix = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
    original: Matrix = a
    b: Matrix = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0]])

    a += b
    assert a is original
    assert a == Matrix.from_rows([[2.0, 3.0], [4.0, 5.0]])

    a -= b
    assert a is original
    assert a == Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])

    a *= 2
    assert a is original
    assert a == Matrix.from_rows([[2.0, 4.0], [6.0, 8.0]])

    a *= Matrix.from_rows([[1.0], [1.0]])
    assert a is original
    assert a.shape == (2, 1)
    assert a == Matrix.from_rows([[6.0], [14.0]])
