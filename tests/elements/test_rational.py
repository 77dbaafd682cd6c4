"""
Tests for Rational and its factory.
"""

import pickle
from decimal import Decimal
from fractions import Fraction

import pytest

from pylinalg.core.exceptions import DivisionByZeroError, InvalidOperationError
from pylinalg.elements import RATIONAL, Rational


class TestConversion:

    def test_int(self):
        assert str(RATIONAL.get(2)) == '2'

    def test_fraction_string(self):
        r = RATIONAL.get('6/8')
        assert r.numerator == 3
        assert r.denominator == 4
        assert str(r) == '3/4'

    def test_decimal_string(self):
        assert RATIONAL.get('0.25') == Rational(1, 4)

    def test_float_uses_shortest_repr(self):
        assert RATIONAL.get(0.1) == Rational(1, 10)

    def test_fraction_and_decimal(self):
        assert RATIONAL.get(Fraction(2, 6)) == Rational(1, 3)
        assert RATIONAL.get(Decimal('1.5')) == Rational(3, 2)

    def test_negative_denominator_normalised(self):
        assert str(Rational(1, -2)) == '-1/2'

    def test_garbage_string_rejected(self):
        with pytest.raises(InvalidOperationError):
            RATIONAL.get('one half')

    def test_zero_denominator_string(self):
        with pytest.raises(DivisionByZeroError):
            RATIONAL.get('1/0')

    def test_infinity_rejected(self):
        with pytest.raises(InvalidOperationError):
            RATIONAL.get(float('inf'))

    def test_unsupported_type(self):
        with pytest.raises(InvalidOperationError):
            RATIONAL.get([1, 2])


class TestArithmetic:

    def test_named_methods(self, q):
        assert q('1/2').add(q('1/3')) == q('5/6')
        assert q('1/2').subtract(q('1/3')) == q('1/6')
        assert q('2/3').multiply(q('3/4')) == q('1/2')
        assert q('2/3').divide(q('4/9')) == q('3/2')

    def test_operators_coerce_numbers(self, q):
        assert q('1/2') + 1 == q('3/2')
        assert 1 - q('1/2') == q('1/2')
        assert q('1/2') * 4 == q(2)
        assert 1 / q('1/3') == q(3)
        assert -q('1/2') == q('-1/2')

    def test_invert(self, q):
        assert q('-2/5').invert() == q('-5/2')

    def test_divide_by_zero(self, q):
        with pytest.raises(DivisionByZeroError):
            q(1).divide(RATIONAL.zero())
        with pytest.raises(ZeroDivisionError):
            q(1) / 0

    def test_invert_zero(self):
        with pytest.raises(DivisionByZeroError):
            RATIONAL.zero().invert()

    def test_floor(self, q):
        assert q('7/2').floor() == q(3)
        assert q('-7/2').floor() == q(-4)

    def test_abs(self, q):
        assert abs(q('-3/4')) == q('3/4')

    def test_mixing_types_rejected(self, q):
        from pylinalg.elements import DOUBLE
        with pytest.raises(InvalidOperationError):
            q(1).add(DOUBLE.one())


class TestOrdering:

    def test_comparisons(self, q):
        assert q('1/3') < q('1/2')
        assert q('1/2') <= 1
        assert q(2) > q('3/2')
        assert q(2).ge(q(2))

    def test_not_equal_to_plain_int(self, q):
        assert q(1) != 1

    def test_hash_consistent_with_equality(self):
        assert hash(Rational(2, 4)) == hash(Rational(1, 2))
        assert len({Rational(2, 4), Rational(1, 2)}) == 1

    def test_zero_is_falsy(self):
        assert not RATIONAL.zero()
        assert RATIONAL.one()


class TestFactory:

    def test_constants(self):
        assert RATIONAL.zero().is_zero()
        assert RATIONAL.one().is_one()
        assert RATIONAL.m_one() == Rational(-1)

    def test_random_value_in_unit_interval(self, rng):
        for _ in range(20):
            r = RATIONAL.random_value(rng=rng)
            assert RATIONAL.zero() <= r < RATIONAL.one()

    def test_random_value_in_range(self, rng, q):
        r = RATIONAL.random_value(q(2), q(3), rng)
        assert q(2) <= r < q(3)

    def test_random_value_reproducible(self):
        import numpy as np
        a = RATIONAL.gaussian_random_value(np.random.default_rng(7))
        b = RATIONAL.gaussian_random_value(np.random.default_rng(7))
        assert a == b

    def test_pickle(self, q):
        r = q('-7/3')
        assert pickle.loads(pickle.dumps(r)) == r
        assert pickle.loads(pickle.dumps(RATIONAL)) is RATIONAL
