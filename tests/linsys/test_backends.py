"""
Tests for the linear system backends used directly.
"""

import numpy as np
import pytest

from pylinalg import Matrix
from pylinalg.core.exceptions import InvalidOperationError
from pylinalg.core.protocols import Backend
from pylinalg.elements import DOUBLE, RATIONAL
from pylinalg.linsys import LinearSystemDesign, LinearSystemParams
from pylinalg.linsys.backends import (
    ExactGaussJordanBackend,
    NumericLstsqBackend,
)


@pytest.mark.parametrize("backend", [
    ExactGaussJordanBackend(), NumericLstsqBackend(),
])
def test_satisfies_backend_protocol(backend):
    assert isinstance(backend, Backend)


class TestExactGaussJordanBackend:

    def test_result_envelope(self, rational_matrix):
        design = LinearSystemDesign.from_matrix(rational_matrix, [1, 0, 0])
        result = ExactGaussJordanBackend().solve(design)
        assert isinstance(result.params, LinearSystemParams)
        assert result.backend_name == 'exact_gauss_jordan'
        assert result.info['rank'] == 3
        x = result.params.solution
        assert rational_matrix @ x == design.b

    def test_free_columns_in_info(self, singular_matrix):
        design = LinearSystemDesign.from_matrix(singular_matrix, [0, 0, 0])
        result = ExactGaussJordanBackend().solve(design)
        assert result.info['pivot_columns'] == (0, 1)
        assert result.info['n_free'] == 1


class TestNumericLstsqBackend:

    def test_rejects_rationals(self, rational_matrix):
        design = LinearSystemDesign.from_matrix(rational_matrix, [1, 0, 0])
        with pytest.raises(InvalidOperationError):
            NumericLstsqBackend().solve(design)

    def test_timing_sections(self):
        design = LinearSystemDesign.from_matrix(
            Matrix([[1, 0], [0, 2]], DOUBLE), [1, 1]
        )
        result = NumericLstsqBackend().solve(design)
        assert {'total_seconds', 'lstsq', 'diagnostics', 'null_space'} \
            <= set(result.timing)
        np.testing.assert_allclose(
            [float(e) for e in result.params.solution], [1.0, 0.5]
        )
