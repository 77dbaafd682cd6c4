"""
Tests for eigenvalues of real matrices.
"""

import numpy as np
import pytest

from pylinalg import Matrix
from pylinalg.core.exceptions import DimensionError, InvalidOperationError
from pylinalg.eigen import as_numpy, eigenvalues
from pylinalg.elements import (
    COMPLEX,
    DECIMAL,
    DOUBLE,
    F2_FACTORY,
    RATIONAL,
    field_p_factory,
)


class TestEigenvalues:

    def test_symmetric_real(self):
        values = eigenvalues(Matrix([[2, 1], [1, 2]], RATIONAL))
        assert values.factory is COMPLEX
        assert all(v.is_real() for v in values)
        np.testing.assert_allclose(as_numpy(values), [1.0, 3.0])

    def test_diagonal(self):
        values = eigenvalues(Matrix([[3, 0], [0, -1]], DOUBLE))
        np.testing.assert_allclose(as_numpy(values), [-1.0, 3.0])

    def test_rotation_has_complex_pair(self):
        values = eigenvalues(Matrix([[0, -1], [1, 0]], RATIONAL))
        np.testing.assert_allclose(as_numpy(values), [-1j, 1j], atol=1e-12)
        assert values[0].imag < RATIONAL.zero()

    def test_sorted_by_real_part(self):
        m = Matrix([[5, 0, 0], [0, -2, 0], [0, 0, 1]], RATIONAL)
        np.testing.assert_allclose(as_numpy(eigenvalues(m)), [-2, 1, 5])

    def test_matches_numpy(self, double_matrix):
        expected = np.sort_complex(np.linalg.eigvals(double_matrix.to_numpy()))
        np.testing.assert_allclose(
            as_numpy(eigenvalues(double_matrix)), expected, rtol=1e-10
        )

    def test_decimal_entries(self):
        m = Matrix([['0.5', 0], [0, '1.5']], DECIMAL)
        np.testing.assert_allclose(as_numpy(eigenvalues(m)), [0.5, 1.5])

    def test_matrix_eig(self, rational_matrix):
        np.testing.assert_allclose(
            as_numpy(rational_matrix.eig()),
            np.sort_complex(np.linalg.eigvals(rational_matrix.to_numpy())),
            rtol=1e-10,
        )

    def test_eigenvalues_are_char_poly_roots(self):
        m = Matrix([[2, 1], [1, 2]], RATIONAL)
        p = m.characteristic_polynomial()
        for v in as_numpy(eigenvalues(m)):
            assert abs(float(p(RATIONAL.get(float(v.real))))) < 1e-9

    def test_not_square(self):
        with pytest.raises(DimensionError):
            eigenvalues(Matrix([[1, 2]], RATIONAL))

    @pytest.mark.parametrize("factory", [
        F2_FACTORY, COMPLEX, field_p_factory(5),
    ])
    def test_non_real_types_rejected(self, factory):
        m = Matrix([[1, 0], [0, 1]], factory)
        with pytest.raises(InvalidOperationError):
            eigenvalues(m)
