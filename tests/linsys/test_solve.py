"""
Tests for solve(), solution_space() and is_solvable().
"""

import numpy as np
import pytest

from pylinalg import LinearSubspace, Matrix, Vector
from pylinalg.core.exceptions import (
    DimensionError,
    InvalidOperationError,
    ValidationError,
)
from pylinalg.elements import DOUBLE, F2_FACTORY, RATIONAL, polynomial_factory
from pylinalg.linsys import (
    LinearSystemDesign,
    LinearSystemSolution,
    is_solvable,
    solution_space,
    solve,
)


def vec(*values):
    return Vector(values, RATIONAL)


def mat(rows):
    return Matrix(rows, RATIONAL)


# ═══════════════════════════════════════════════════════════════════════════
# Design
# ═══════════════════════════════════════════════════════════════════════════

class TestLinearSystemDesign:

    def test_shape(self, singular_matrix):
        d = LinearSystemDesign.from_matrix(singular_matrix, [1, 2, 3])
        assert d.n_equations == 3
        assert d.n_unknowns == 3
        assert d.factory is RATIONAL
        assert not d.is_homogeneous()

    def test_raw_rhs_converted(self, rational_matrix, q):
        d = LinearSystemDesign.from_matrix(rational_matrix, ['1/2', 0, 0])
        assert d.b[0] == q('1/2')

    def test_inputs_copied(self, rational_matrix, q):
        b = vec(1, 2, 3)
        d = LinearSystemDesign.from_matrix(rational_matrix, b)
        rational_matrix[0, 0] = 100
        b[0] = 100
        assert d.a[0, 0] == q(1)
        assert d.b[0] == q(1)

    def test_length_mismatch(self, rational_matrix):
        with pytest.raises(DimensionError):
            LinearSystemDesign.from_matrix(rational_matrix, [1, 2])

    def test_ring_mismatch(self, rational_matrix):
        with pytest.raises(InvalidOperationError):
            LinearSystemDesign.from_matrix(
                rational_matrix, Vector([1, 2, 3], DOUBLE)
            )

    def test_homogeneous(self, rational_matrix):
        d = LinearSystemDesign.from_matrix(rational_matrix, [0, 0, 0])
        assert d.is_homogeneous()


# ═══════════════════════════════════════════════════════════════════════════
# Exact backend
# ═══════════════════════════════════════════════════════════════════════════

class TestExactSolve:

    def test_unique_solution(self, q):
        result = solve(mat([[1, 2], [3, 4]]), [5, 6])
        assert isinstance(result, LinearSystemSolution)
        assert result.solution == vec(-4, '9/2')
        assert result.consistent
        assert result.unique
        assert result.rank == 2
        assert result.n_free == 0
        assert result.subspace.dimension == 0

    def test_infinitely_many_solutions(self, singular_matrix):
        result = solve(singular_matrix, [6, 15, 24])
        assert result.consistent
        assert not result.unique
        assert result.rank == 2
        assert result.n_free == 1
        assert result.solution == vec(0, 3, 0)
        assert result.subspace.generating_system == (vec(-1, 2, -1),)
        assert str(result.subspace) == '(0, 3, 0) + < { (-1, 2, -1) } >'
        assert result.subspace.contains(vec(1, 1, 1))

    def test_every_point_solves(self, singular_matrix):
        result = solve(singular_matrix, [6, 15, 24])
        x = result.solution + result.subspace.generating_system[0] * 5
        assert singular_matrix @ x == vec(6, 15, 24)

    def test_inconsistent(self, singular_matrix):
        result = solve(singular_matrix, [1, 1, 0])
        assert not result.consistent
        assert not result.unique
        assert result.solution is None
        assert result.subspace.is_empty()
        assert result.rank == 2
        assert result.info['consistent'] is False

    def test_homogeneous_gives_linear_subspace(self, singular_matrix):
        space = solution_space(singular_matrix, [0, 0, 0])
        assert isinstance(space, LinearSubspace)
        assert str(space) == '< { (-1, 2, -1) } >'

    def test_homogeneous_full_rank(self, rational_matrix):
        result = solve(rational_matrix, [0, 0, 0])
        assert result.unique
        assert result.solution.is_zero()
        assert isinstance(result.subspace, LinearSubspace)
        assert result.subspace.dimension == 0

    def test_overdetermined_consistent(self):
        result = solve(mat([[1, 0], [0, 1], [1, 1]]), [1, 2, 3])
        assert result.solution == vec(1, 2)
        assert result.unique

    def test_overdetermined_inconsistent(self):
        assert not is_solvable(mat([[1, 0], [0, 1], [1, 1]]), [1, 2, 4])

    def test_underdetermined(self):
        result = solve(mat([[1, 1, 1]]), [3])
        assert result.solution == vec(3, 0, 0)
        assert result.subspace.generating_system == (
            vec(1, -1, 0), vec(1, 0, -1),
        )
        assert result.subspace.dimension == 2

    def test_over_f2(self):
        a = Matrix([[1, 1], [0, 1]], F2_FACTORY)
        result = solve(a, [1, 1])
        assert result.solution == Vector([0, 1], F2_FACTORY)

    def test_over_double(self):
        a = Matrix([[2, 1], [1, 3]], DOUBLE)
        result = solve(a, [3, 5], backend='exact')
        np.testing.assert_allclose(
            [float(e) for e in result.solution], [0.8, 1.4]
        )

    def test_polynomials_rejected(self):
        P = polynomial_factory(RATIONAL)
        a = Matrix([[P.x()]])
        with pytest.raises(InvalidOperationError):
            solve(a, [P.one()])

    def test_metadata(self):
        result = solve(mat([[1, 2], [3, 4]]), [5, 6])
        assert result.backend_name == 'exact_gauss_jordan'
        assert result.info['method'] == 'gauss_jordan'
        assert result.info['pivot_columns'] == (0, 1)
        assert set(result.timing) == {
            'total_seconds', 'elimination', 'extraction',
        }
        assert result.warnings == ()
        assert result.design.n_unknowns == 2

    def test_summary(self):
        text = solve(mat([[1, 2], [3, 4]]), [5, 6]).summary()
        assert 'Unique solution: (-4, 9/2)' in text
        text = solve(mat([[1, 1], [1, 1]]), [1, 2]).summary()
        assert 'No solution' in text

    def test_repr(self):
        r = repr(solve(mat([[1]]), [1]))
        assert r.startswith('LinearSystemSolution(consistent=True')

    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            solve(mat([[1]]), [1], backend='gpu')


# ═══════════════════════════════════════════════════════════════════════════
# Numeric backend
# ═══════════════════════════════════════════════════════════════════════════

def hilbert(n):
    return Matrix([[1.0 / (i + j + 1) for j in range(n)] for i in range(n)],
                  DOUBLE)


class TestNumericSolve:

    def test_unique_solution(self):
        a = Matrix([[2, 1], [1, 3]], DOUBLE)
        result = solve(a, [3, 5], backend='numeric')
        assert result.backend_name == 'numeric_lstsq'
        assert result.unique
        np.testing.assert_allclose(
            [float(e) for e in result.solution], [0.8, 1.4], rtol=1e-12
        )
        assert result.info['tolerance'] == 'fp64'

    def test_matches_exact_backend(self, double_matrix, rng):
        b = rng.standard_normal(4).tolist()
        exact = solve(double_matrix, b, backend='exact')
        numeric = solve(double_matrix, b, backend='numeric')
        np.testing.assert_allclose(
            [float(e) for e in numeric.solution],
            [float(e) for e in exact.solution],
            rtol=1e-10,
        )

    def test_underdetermined(self):
        result = solve(Matrix([[1, 1]], DOUBLE), [2], backend='numeric')
        assert result.consistent
        assert result.n_free == 1
        assert len(result.subspace.generating_system) == 1
        np.testing.assert_allclose(
            [float(e) for e in result.solution], [1.0, 1.0]
        )

    def test_inconsistent(self):
        a = Matrix([[1, 1], [1, 1]], DOUBLE)
        result = solve(a, [1, 2], backend='numeric')
        assert not result.consistent
        assert result.solution is None
        assert result.subspace.is_empty()
        assert result.info['residual_norm'] > 0.5

    def test_homogeneous(self):
        a = Matrix([[1, 2], [2, 4]], DOUBLE)
        space = solution_space(a, [0, 0], backend='numeric')
        assert isinstance(space, LinearSubspace)
        assert len(space.generating_system) == 1

    def test_ill_conditioned_warns(self):
        h = hilbert(12)
        b = (h.to_numpy() @ np.ones(12)).tolist()
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            result = solve(h, b, backend='numeric')
        assert result.consistent
        assert result.warnings
        assert result.info['tolerance'] == 'fp64_ill_conditioned'
        assert result.info['condition_number'] > 1e10

    def test_exact_rationals_rejected(self, rational_matrix):
        with pytest.raises(InvalidOperationError):
            solve(rational_matrix, [1, 2, 3], backend='numeric')
