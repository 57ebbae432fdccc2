"""
Tests for matmul, scalar, determinant, cofactor, inverse and transpose.

Matrices are kept at 5x5 or smaller; cofactor expansion is O(n!).
"""

import numpy as np
import pytest

from pylean import Matrix
from pylean.core.exceptions import (
    ArithmeticFault,
    DeterminantEqualToZero,
    NonSquareMatrix,
    OperationNotSupported,
    RowOutOfRange,
    UninitializedMatrix,
    UnmatchedScheme,
    ValidationError,
)
from pylean.linalg import (
    cofactor,
    determinant,
    identity,
    inverse,
    is_identity,
    matmul,
    scalar,
    transpose,
)
from pylean.linalg._cofactor import warn_cost


# ═══════════════════════════════════════════════════════════════════════
# Determinant and cofactor
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_2x2(self):
        assert determinant(Matrix(np.int32, rows=[[2, 2], [4, 5]])) == 2

    def test_3x3_float(self, square_float):
        np.testing.assert_allclose(determinant(square_float), -45.0)

    def test_unimodular(self, unimodular_int):
        assert determinant(unimodular_int) == 1

    def test_1x1(self):
        assert determinant(Matrix(np.int32, rows=[[7]])) == 7

    def test_identity(self):
        assert determinant(identity(4, dtype=np.int64)) == 1

    def test_singular(self):
        m = Matrix(np.int64, rows=[[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert determinant(m) == 0

    def test_input_unchanged(self, square_float):
        before = square_float.copy()
        determinant(square_float)
        assert square_float == before

    def test_non_square(self, int_matrix):
        with pytest.raises(NonSquareMatrix) as exc_info:
            determinant(int_matrix)
        assert exc_info.value.scheme == (3, 2)

    def test_empty(self):
        with pytest.raises(UninitializedMatrix):
            determinant(Matrix(np.int32))

    def test_unsigned(self):
        with pytest.raises(OperationNotSupported, match="unsigned"):
            determinant(Matrix(np.uint8, rows=[[1, 2], [3, 4]]))

    def test_safe_overflow(self):
        m = Matrix(np.int8, rows=[[100, 2], [3, 100]])
        with pytest.raises(ArithmeticFault):
            determinant(m)


class TestCofactor:

    @pytest.fixture
    def pascal(self):
        return Matrix(np.int64, rows=[[1, 1, 1], [1, 2, 3], [1, 3, 6]])

    def test_signs(self, pascal):
        assert cofactor(pascal, 0, 0) == 3
        assert cofactor(pascal, 0, 1) == -3
        assert cofactor(pascal, 0, 2) == 1

    def test_expansion_matches_determinant(self, pascal):
        total = sum(pascal.get(j, 0) * cofactor(pascal, 0, j) for j in range(3))
        assert total == determinant(pascal)

    def test_out_of_range(self, pascal):
        with pytest.raises(RowOutOfRange):
            cofactor(pascal, 3, 0)

    def test_non_square(self, int_matrix):
        with pytest.raises(NonSquareMatrix):
            cofactor(int_matrix, 0, 0)

    def test_unsigned(self):
        with pytest.raises(OperationNotSupported):
            cofactor(Matrix(np.uint16, rows=[[1, 2], [3, 4]]), 0, 0)


# ═══════════════════════════════════════════════════════════════════════
# Inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_2x2_float(self):
        m = Matrix(np.float64, rows=[[4, 7], [2, 6]])
        np.testing.assert_allclose(inverse(m).to_array(), [[0.6, -0.7], [-0.2, 0.4]])

    def test_2x2_integer(self):
        m = Matrix(np.int64, rows=[[2, 1], [1, 1]])
        assert inverse(m).tolist() == [[1, -1], [-1, 2]]

    def test_unimodular_integer(self, unimodular_int):
        assert inverse(unimodular_int).tolist() == [[-24, 18, 5], [20, -15, -4], [-5, 4, 1]]

    def test_float_product_is_identity(self, square_float):
        assert is_identity(matmul(square_float, inverse(square_float)))

    def test_integer_product_is_identity(self, unimodular_int):
        assert is_identity(matmul(unimodular_int, inverse(unimodular_int)))

    def test_1x1(self):
        m = Matrix(np.float64, rows=[[4.0]])
        assert inverse(m).tolist() == [[0.25]]

    def test_singular(self):
        with pytest.raises(DeterminantEqualToZero) as exc_info:
            inverse(Matrix(np.float64, rows=[[1, 2], [2, 4]]))
        assert exc_info.value.scheme == (2, 2)

    def test_non_square(self, int_matrix):
        with pytest.raises(NonSquareMatrix):
            inverse(int_matrix)


# ═══════════════════════════════════════════════════════════════════════
# Product, scalar and power
# ═══════════════════════════════════════════════════════════════════════


class TestMatmul:

    def test_2x2(self):
        a = Matrix(np.int32, rows=[[1, 2], [3, 4]])
        b = Matrix(np.int32, rows=[[5, 6], [7, 8]])
        assert matmul(a, b).tolist() == [[19, 22], [43, 50]]

    def test_matches_numpy(self, rng):
        a = Matrix.random(4, 4, -10, 10, dtype=np.int64, rng=rng)
        b = Matrix.random(4, 4, -10, 10, dtype=np.int64, rng=rng)
        np.testing.assert_array_equal(matmul(a, b).to_array(), a.to_array() @ b.to_array())

    def test_identity_is_neutral(self, square_float):
        assert matmul(square_float, identity(3)) == square_float

    def test_mismatched(self):
        with pytest.raises(UnmatchedScheme):
            matmul(identity(2), identity(3))

    def test_non_square(self, int_matrix):
        with pytest.raises(NonSquareMatrix):
            matmul(int_matrix, int_matrix.copy())

    def test_empty(self):
        with pytest.raises(UninitializedMatrix):
            matmul(Matrix(np.int32), Matrix(np.int32))

    def test_safe_overflow(self):
        m = Matrix(np.int8, rows=[[100, 0], [0, 1]])
        with pytest.raises(ArithmeticFault):
            matmul(m, m)

    def test_fixed_keeps_left(self):
        m = Matrix(np.int8, mode="fixed", rows=[[100, 0], [0, 1]])
        assert matmul(m, m).get(0, 0) == 100


class TestScalar:

    def test_add(self, int_matrix):
        assert scalar(int_matrix, "add", 10).tolist() == [[11, 12, 13], [14, 15, 16]]

    def test_mul(self, int_matrix):
        assert scalar(int_matrix, "mul", -1).tolist() == [[-1, -2, -3], [-4, -5, -6]]

    def test_div_rounds_in_safe_mode(self):
        m = Matrix(np.int32, rows=[[4, 5], [8, 11]])
        assert scalar(m, "div", 2).tolist() == [[2, 3], [4, 6]]

    def test_div_truncates_in_fast_mode(self):
        m = Matrix(np.int32, mode="fast", rows=[[4, 5], [8, 11]])
        assert scalar(m, "div", 2).tolist() == [[2, 2], [4, 5]]

    def test_input_unchanged(self, int_matrix):
        scalar(int_matrix, "sub", 1)
        assert int_matrix.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_fractional_scalar_into_integer(self, int_matrix):
        with pytest.raises(ValidationError, match="fractional"):
            scalar(int_matrix, "mul", 0.5)

    def test_integral_float_scalar_into_integer(self, int_matrix):
        assert scalar(int_matrix, "mul", 2.0).tolist() == [[2, 4, 6], [8, 10, 12]]

    def test_unknown_operation(self, int_matrix):
        with pytest.raises(ValidationError):
            scalar(int_matrix, "mod", 2)

    def test_empty(self):
        with pytest.raises(UninitializedMatrix):
            scalar(Matrix(np.int32), "add", 1)


class TestPower:

    @pytest.fixture
    def fib(self):
        return Matrix(np.int64, rows=[[1, 1], [1, 0]])

    def test_one_is_copy(self, int_matrix):
        result = scalar(int_matrix, "pow", 1)
        assert result == int_matrix
        assert result is not int_matrix

    def test_zero_is_identity(self, fib):
        assert scalar(fib, "pow", 0).tolist() == [[1, 0], [0, 1]]

    def test_square(self, fib):
        assert scalar(fib, "pow", 2).tolist() == [[2, 1], [1, 1]]

    def test_cube(self, fib):
        assert scalar(fib, "pow", 3).tolist() == [[3, 2], [2, 1]]

    def test_integral_float_exponent(self, fib):
        assert scalar(fib, "pow", 2.0) == scalar(fib, "pow", 2)

    def test_negative_one_is_inverse(self):
        m = Matrix(np.int64, rows=[[2, 1], [1, 1]])
        assert scalar(m, "pow", -1).tolist() == [[1, -1], [-1, 2]]

    def test_negative_two(self):
        m = Matrix(np.int64, rows=[[2, 1], [1, 1]])
        assert scalar(m, "pow", -2).tolist() == [[2, -3], [-3, 5]]

    def test_fractional_exponent(self, fib):
        with pytest.raises(OperationNotSupported):
            scalar(fib, "pow", 0.5)

    def test_non_numeric_exponent(self, fib):
        with pytest.raises(ValidationError):
            scalar(fib, "pow", "2")

    def test_zero_on_non_square(self, int_matrix):
        with pytest.raises(NonSquareMatrix):
            scalar(int_matrix, "pow", 0)


# ═══════════════════════════════════════════════════════════════════════
# Transpose and identity
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_values(self, int_matrix):
        assert transpose(int_matrix).tolist() == [[1, 4], [2, 5], [3, 6]]

    def test_non_destructive(self, int_matrix):
        transpose(int_matrix)
        assert int_matrix.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_twice_is_identity(self, rng):
        m = Matrix.random(3, 5, -50, 50, dtype=np.int32, rng=rng)
        assert transpose(transpose(m)) == m

    def test_matches_in_place(self, rng):
        m = Matrix.random(3, 4, -1.0, 1.0, rng=rng)
        result = transpose(m)
        m.transpose()
        assert result == m


class TestIdentity:

    def test_values(self):
        assert identity(3, dtype=np.int8).tolist() == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]

    def test_mode(self):
        assert str(identity(2, mode="fast").mode) == "fast"

    @pytest.mark.parametrize("order", [0, -1, 2.0, True])
    def test_bad_order(self, order):
        with pytest.raises(ValidationError):
            identity(order)

    def test_is_identity_rejects(self, int_matrix, square_float):
        assert not is_identity(int_matrix)
        assert not is_identity(square_float)
        assert not is_identity(Matrix(np.int32))

    def test_is_identity_tolerates_rounding(self):
        m = Matrix(np.float64, rows=[[1.0 + 1e-14, 0.0], [1e-15, 1.0]])
        assert is_identity(m)


class TestCostWarning:

    def test_small_order_silent(self, recwarn):
        warn_cost(8, "determinant")
        assert len(recwarn) == 0

    def test_large_order_warns(self):
        with pytest.warns(RuntimeWarning, match="O\\(n!\\)"):
            warn_cost(9, "determinant")
