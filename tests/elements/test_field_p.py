"""
Tests for prime fields F_p and the primality test.
"""

import pickle

import pytest

from pylinalg.core.exceptions import (
    DivisionByZeroError,
    InvalidOperationError,
    ValidationError,
)
from pylinalg.elements import field_p_factory, is_prime


@pytest.fixture
def f7():
    return field_p_factory(7)


class TestIsPrime:

    @pytest.mark.parametrize("n", [2, 3, 5, 7, 97, 7919, 2 ** 61 - 1])
    def test_primes(self, n):
        assert is_prime(n)

    @pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 561, 1105, 2 ** 61 + 1])
    def test_non_primes(self, n):
        assert not is_prime(n)

    def test_large_prime_probabilistic_branch(self):
        assert is_prime(2 ** 89 - 1)
        assert not is_prime((2 ** 89 - 1) * (2 ** 61 - 1))


class TestFactory:

    def test_one_factory_per_prime(self):
        assert field_p_factory(7) is field_p_factory(7)
        assert field_p_factory(7) is not field_p_factory(11)

    def test_non_prime_rejected(self):
        with pytest.raises(ValidationError):
            field_p_factory(8)

    def test_non_int_rejected(self):
        with pytest.raises(ValidationError):
            field_p_factory(7.0)

    def test_conversion(self, f7):
        assert f7.get(-1).value == 6
        assert f7.get('3m7').value == 3
        assert f7.get('10').value == 3
        assert f7.get(14.0).is_zero()

    def test_bad_conversion(self, f7):
        with pytest.raises(InvalidOperationError):
            f7.get(1.5)
        with pytest.raises(InvalidOperationError):
            f7.get('three')

    def test_random_value_in_field(self, f7, rng):
        values = {f7.random_value(rng=rng).value for _ in range(200)}
        assert values <= set(range(7))
        assert len(values) == 7

    def test_random_value_large_prime(self, rng):
        p = 2 ** 89 - 1
        f = field_p_factory(p)
        assert 0 <= f.random_value(rng=rng).value < p

    def test_pickle(self, f7):
        e = f7.get(5)
        restored = pickle.loads(pickle.dumps(e))
        assert restored == e
        assert restored.factory is f7


class TestArithmetic:

    def test_add_wraps(self, f7):
        assert (f7.get(5) + f7.get(4)).value == 2

    def test_subtract_wraps(self, f7):
        assert (f7.get(2) - f7.get(5)).value == 4

    def test_multiply(self, f7):
        assert (f7.get(3) * f7.get(5)).value == 1

    def test_invert(self, f7):
        for v in range(1, 7):
            assert (f7.get(v) * f7.get(v).invert()).is_one()

    def test_invert_zero(self, f7):
        with pytest.raises(DivisionByZeroError):
            f7.zero().invert()

    def test_divide(self, f7):
        assert (f7.get(1) / f7.get(3)).value == 5

    def test_int_operand_coerced(self, f7):
        assert (f7.get(6) + 1).is_zero()

    def test_str(self, f7):
        assert str(f7.get(3)) == '3m7'

    def test_different_fields_rejected(self, f7):
        with pytest.raises(InvalidOperationError):
            f7.get(1).add(field_p_factory(11).get(1))

    def test_floor_undefined(self, f7):
        with pytest.raises(InvalidOperationError):
            f7.get(3).floor()
