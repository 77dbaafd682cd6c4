"""
Tests for the element-wise operators and reductions.
"""

import pytest

from pylinalg import operators
from pylinalg.core.exceptions import ValidationError
from pylinalg.elements import F2_FACTORY, RATIONAL


class TestOperators:

    def test_dyadic(self, q):
        assert operators.add(q(1), q(2)) == q(3)
        assert operators.subtract(q(1), q(2)) == q(-1)
        assert operators.multiply(q(2), q(3)) == q(6)
        assert operators.divide(q(1), q(4)) == q('1/4')

    def test_logic_returns_one_or_zero(self, q):
        assert operators.and_(q(2), q(3)).is_one()
        assert operators.and_(q(2), q(0)).is_zero()
        assert operators.or_(q(0), q(5)).is_one()
        assert operators.not_(q(0)).is_one()

    def test_logic_over_f2(self):
        one, zero = F2_FACTORY.one(), F2_FACTORY.zero()
        assert operators.or_(zero, one) is one

    def test_monadic(self, q):
        assert operators.abs_(q(-2)) == q(2)
        assert operators.negate(q(2)) == q(-2)
        assert operators.square(q(-3)) == q(9)

    def test_comparators(self, q):
        assert operators.lt(q(1), q(2))
        assert operators.le(q(2), q(2))
        assert operators.gt(q(3), q(2))
        assert operators.ge(q(2), q(2))
        assert operators.eq(q('1/2'), q('2/4'))
        assert operators.ne(q(1), q(2))


class TestReductions:

    def test_sum(self, q):
        assert operators.sum_reduction([q(1), q(2), q(3)]) == q(6)

    def test_min_max(self, q):
        values = [q(3), q(-1), q(2)]
        assert operators.min_reduction(values) == q(-1)
        assert operators.max_reduction(values) == q(3)

    def test_generator_input(self, q):
        assert operators.sum_reduction(q(i) for i in range(4)) == q(6)

    def test_empty(self):
        with pytest.raises(ValidationError):
            operators.sum_reduction([])
        with pytest.raises(ValidationError):
            operators.max_reduction(iter(()))
