"""
Tests for DecimalWrapper and the decimal precision setting.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from pylinalg.core.exceptions import (
    DivisionByZeroError,
    InvalidOperationError,
    ValidationError,
)
from pylinalg.elements import DECIMAL, RATIONAL, set_precision
from pylinalg.elements.decimalwrapper import DEFAULT_PRECISION, get_precision


@pytest.fixture
def restore_precision():
    yield
    set_precision(DEFAULT_PRECISION)


class TestDecimalWrapper:

    def test_default_precision_division(self):
        third = DECIMAL.get(1) / DECIMAL.get(3)
        assert str(third) == '0.' + '3' * DEFAULT_PRECISION

    def test_set_precision(self, restore_precision):
        set_precision(5)
        assert get_precision() == 5
        assert str(DECIMAL.get(2) / DECIMAL.get(3)) == '0.66667'

    def test_invalid_precision(self):
        with pytest.raises(ValidationError):
            set_precision(0)

    def test_str_is_plain_notation(self):
        assert str(DECIMAL.get(10)) == '10'
        assert str(DECIMAL.get('1.50')) == '1.5'

    def test_conversion(self):
        assert DECIMAL.get(0.1).value == Decimal('0.1')
        assert DECIMAL.get(Fraction(1, 4)).value == Decimal('0.25')
        assert DECIMAL.get('3/4').value == Decimal('0.75')
        assert DECIMAL.get(RATIONAL.get('1/8')).value == Decimal('0.125')

    def test_bad_string(self):
        with pytest.raises(InvalidOperationError):
            DECIMAL.get('abc')

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            DECIMAL.one() / DECIMAL.zero()

    def test_sqrt_and_floor(self):
        assert DECIMAL.get(16).sqrt() == DECIMAL.get(4)
        assert DECIMAL.get('-2.5').floor() == DECIMAL.get(-3)
        with pytest.raises(InvalidOperationError):
            DECIMAL.get(-1).sqrt()

    def test_ordering(self):
        assert DECIMAL.get('0.1') < DECIMAL.get('0.2')
        assert abs(DECIMAL.get(-2)) == DECIMAL.get(2)
