"""
Tests for DiagonalMatrix: storage, restricted writes and the fast paths
for arithmetic, determinant and inverse.
"""

import pickle

import numpy as np
import pytest

from pylinalg import DiagonalMatrix, LinAlgFactory, Matrix, Vector
from pylinalg.core.exceptions import (
    DimensionError,
    InvalidOperationError,
    SingularMatrixError,
)
from pylinalg.elements import (
    COMPLEX,
    F2_FACTORY,
    RATIONAL,
    polynomial_factory,
)


def mat(rows):
    return Matrix(rows, RATIONAL)


@pytest.fixture
def d():
    return DiagonalMatrix([1, 2, 3], RATIONAL)


class TestConstruction:

    def test_shape_and_entries(self, d, q):
        assert d.shape == (3, 3)
        assert d[0, 0] == q(1)
        assert d[2, 2] == q(3)
        assert d[0, 1].is_zero()
        assert d.diagonal == Vector([1, 2, 3], RATIONAL)

    def test_equals_dense(self, d):
        dense = mat([[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        assert d == dense
        assert dense == d
        assert d.to_matrix() == dense
        assert not isinstance(d.to_matrix(), DiagonalMatrix)

    def test_str(self, d):
        assert str(d) == '[1,0,0\n 0,2,0\n 0,0,3]'

    def test_scalar(self, q):
        s = DiagonalMatrix.scalar(3, 2, RATIONAL)
        assert s.diagonal == Vector([2, 2, 2], RATIONAL)
        assert s.det() == q(8)

    def test_factory_inferred(self, q):
        assert DiagonalMatrix([q(1), q(2)]).factory is RATIONAL
        with pytest.raises(InvalidOperationError):
            DiagonalMatrix([1, 2])

    def test_empty_rejected(self):
        with pytest.raises(DimensionError):
            DiagonalMatrix([], RATIONAL)

    def test_from_linalg_factory(self):
        m = LinAlgFactory(RATIONAL).diagonal([1, 2])
        assert isinstance(m, DiagonalMatrix)
        assert m.trace() == RATIONAL.get(3)

    def test_to_numpy(self, d):
        np.testing.assert_array_equal(d.to_numpy(), np.diag([1.0, 2.0, 3.0]))

    def test_pickle(self, d):
        restored = pickle.loads(pickle.dumps(d))
        assert isinstance(restored, DiagonalMatrix)
        assert restored == d


class TestWrites:

    def test_set_diagonal_entry(self, d, q):
        d[1, 1] = 5
        d.set_diagonal(2, '1/2')
        assert d.diagonal == Vector([1, 5, '1/2'], RATIONAL)

    def test_off_diagonal_zero_allowed(self, d):
        d[0, 1] = 0
        assert d[0, 1].is_zero()

    def test_off_diagonal_non_zero_rejected(self, d):
        with pytest.raises(InvalidOperationError):
            d[0, 1] = 1

    def test_set_row(self, d, q):
        d.set_row(1, Vector([0, 7, 0], RATIONAL))
        assert d[1, 1] == q(7)
        with pytest.raises(InvalidOperationError):
            d.set_col(1, Vector([1, 7, 0], RATIONAL))
        with pytest.raises(DimensionError):
            d.set_row(1, Vector([0, 7], RATIONAL))

    def test_set_all(self, d):
        with pytest.raises(InvalidOperationError):
            d.set_all(1)
        d.set_all(0)
        assert d.rank() == 0

    def test_swap(self, d):
        d.swap_rows(1, 1)
        with pytest.raises(InvalidOperationError):
            d.swap_rows(0, 1)
        with pytest.raises(InvalidOperationError):
            d.swap_cols(1, 2)

    def test_add_replace_keeps_diagonal(self, d):
        d.add_replace(DiagonalMatrix([1, 1, 1], RATIONAL))
        assert d.diagonal == Vector([2, 3, 4], RATIONAL)

    def test_add_replace_non_diagonal_result(self, d):
        with pytest.raises(InvalidOperationError):
            d.add_replace(mat([[0, 1, 0], [0, 0, 0], [0, 0, 0]]))
        assert d.diagonal == Vector([1, 2, 3], RATIONAL)

    def test_multiply_replace(self, d):
        d.multiply_replace(2)
        assert d.diagonal == Vector([2, 4, 6], RATIONAL)
        d.multiply_replace(d)
        assert d.diagonal == Vector([4, 16, 36], RATIONAL)


class TestArithmetic:

    def test_add_diagonal_stays_diagonal(self, d):
        s = d + d
        assert isinstance(s, DiagonalMatrix)
        assert s.diagonal == Vector([2, 4, 6], RATIONAL)
        assert isinstance(d - d, DiagonalMatrix)
        assert (d - d).rank() == 0

    def test_add_dense(self, d):
        ones = mat([[1, 1, 1], [1, 1, 1], [1, 1, 1]])
        s = d + ones
        assert not isinstance(s, DiagonalMatrix)
        assert s == mat([[2, 1, 1], [1, 3, 1], [1, 1, 4]])

    def test_add_scalar_is_dense(self, d):
        assert d + 1 == mat([[2, 1, 1], [1, 3, 1], [1, 1, 4]])

    def test_scalar_multiply_and_divide(self, d):
        assert isinstance(d * 2, DiagonalMatrix)
        assert (2 * d).diagonal == Vector([2, 4, 6], RATIONAL)
        assert (d / 2).diagonal == Vector(['1/2', 1, '3/2'], RATIONAL)
        assert (-d).diagonal == Vector([-1, -2, -3], RATIONAL)

    def test_product_of_diagonals(self, d):
        p = d @ d
        assert isinstance(p, DiagonalMatrix)
        assert p.diagonal == Vector([1, 4, 9], RATIONAL)

    def test_left_product_scales_rows(self, d):
        a = mat([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        expected = d.to_matrix().multiply(a, 'school')
        assert d @ a == expected
        assert d.multiply(a) == expected

    def test_right_product_scales_cols(self, d):
        a = mat([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        assert a @ d == a.multiply(d.to_matrix(), 'school')

    def test_product_shape_mismatch(self, d):
        with pytest.raises(DimensionError):
            d @ mat([[1, 2]])

    def test_vector_product(self, d):
        assert d @ Vector([1, 1, 1], RATIONAL) == Vector([1, 2, 3], RATIONAL)

    def test_transpose_and_hermitian(self, d):
        assert isinstance(d.transpose(), DiagonalMatrix)
        assert d.transpose() == d
        h = DiagonalMatrix(['1+i', '2'], COMPLEX).hermitian()
        assert h[0, 0] == COMPLEX.get('1-i')

    def test_trace(self, d, q):
        assert d.trace() == q(6)


class TestLinearAlgebra:

    def test_det_rank(self, d, q):
        assert d.det() == q(6)
        assert d.rank() == 3
        assert DiagonalMatrix([1, 0, 3], RATIONAL).rank() == 2

    def test_inverse(self, d):
        inv = d.inverse()
        assert isinstance(inv, DiagonalMatrix)
        assert inv.diagonal == Vector([1, '1/2', '1/3'], RATIONAL)
        assert (d @ inv).is_identity()

    def test_singular_inverse(self):
        with pytest.raises(SingularMatrixError) as excinfo:
            DiagonalMatrix([1, 0, 3], RATIONAL).inverse()
        assert excinfo.value.rank == 2
        assert excinfo.value.expected_rank == 3

    def test_power(self, d):
        p = d ** 2
        assert isinstance(p, DiagonalMatrix)
        assert p.diagonal == Vector([1, 4, 9], RATIONAL)
        assert d ** -1 == d.inverse()

    def test_gauss_jordan(self, d):
        assert d.gauss_jordan().is_identity()

    def test_characteristic_polynomial_matches_dense(self, d):
        assert d.characteristic_polynomial() == \
            d.to_matrix().characteristic_polynomial()

    def test_minimal_polynomial(self):
        s = DiagonalMatrix.scalar(3, 2, RATIONAL)
        assert str(s.minimal_polynomial()) == '-2+x'

    def test_minimal_polynomial_over_f2(self):
        P = polynomial_factory(F2_FACTORY)
        m = DiagonalMatrix([1, 1], F2_FACTORY)
        assert m.minimal_polynomial() == P.from_coefficients([1, 1])
