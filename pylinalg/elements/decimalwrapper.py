"""
Arbitrary precision decimal numbers as field elements.

All arithmetic runs in a private decimal context whose precision is
``DEFAULT_PRECISION`` significant digits unless changed with
``set_precision``. Addition and multiplication are exact up to that
precision; division rounds half-even.
"""

from __future__ import annotations

import decimal
from decimal import Decimal
from fractions import Fraction
from typing import Any

import numpy as np

from pylinalg.core.exceptions import (
    DivisionByZeroError,
    InvalidOperationError,
    ValidationError,
)
from pylinalg.elements.base import (
    FieldElement,
    RingElement,
    RingElementFactory,
    TypeProperties,
    get_rng,
)

DEFAULT_PRECISION = 32

_context = decimal.Context(
    prec=DEFAULT_PRECISION, rounding=decimal.ROUND_HALF_EVEN,
)


def set_precision(digits: int) -> None:
    """Set the number of significant digits used by DecimalWrapper."""
    if digits < 1:
        raise ValidationError(f"precision must be positive, got {digits}")
    _context.prec = digits


def get_precision() -> int:
    return _context.prec


class DecimalWrapper(FieldElement):

    __slots__ = ('_value',)

    def __init__(self, value: Decimal | int | str = 0):
        self._value = _context.plus(Decimal(value))

    @classmethod
    def _wrap(cls, value: Decimal) -> DecimalWrapper:
        d = cls.__new__(cls)
        d._value = value
        return d

    @property
    def factory(self) -> DecimalWrapperFactory:
        return FACTORY

    @property
    def value(self) -> Decimal:
        return self._value

    def add(self, other: RingElement) -> DecimalWrapper:
        return DecimalWrapper._wrap(
            _context.add(self._value, _decimal_of(other))
        )

    def subtract(self, other: RingElement) -> DecimalWrapper:
        return DecimalWrapper._wrap(
            _context.subtract(self._value, _decimal_of(other))
        )

    def multiply(self, other: RingElement) -> DecimalWrapper:
        return DecimalWrapper._wrap(
            _context.multiply(self._value, _decimal_of(other))
        )

    def divide(self, other: RingElement) -> DecimalWrapper:
        divisor = _decimal_of(other)
        if divisor.is_zero():
            raise DivisionByZeroError(f"Tried to divide {self} by zero.")
        return DecimalWrapper._wrap(_context.divide(self._value, divisor))

    def negate(self) -> DecimalWrapper:
        return DecimalWrapper._wrap(_context.minus(self._value))

    def invert(self) -> DecimalWrapper:
        if self._value.is_zero():
            raise DivisionByZeroError("Tried to invert zero.")
        return DecimalWrapper._wrap(_context.divide(Decimal(1), self._value))

    def is_zero(self) -> bool:
        return self._value.is_zero()

    def is_one(self) -> bool:
        return self._value == 1

    def abs(self) -> DecimalWrapper:
        return DecimalWrapper._wrap(_context.abs(self._value))

    def sqrt(self) -> DecimalWrapper:
        if self._value < 0:
            raise InvalidOperationError(
                f"square root of negative value {self._value}"
            )
        return DecimalWrapper._wrap(_context.sqrt(self._value))

    def floor(self) -> DecimalWrapper:
        return DecimalWrapper._wrap(
            self._value.to_integral_value(rounding=decimal.ROUND_FLOOR)
        )

    def compare_to(self, other: RingElement) -> int:
        o = _decimal_of(other)
        return (self._value > o) - (self._value < o)

    def __float__(self) -> float:
        return float(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return format(self._value.normalize(_context), 'f')

    def __reduce__(self):
        return (DecimalWrapper, (str(self._value),))


def _decimal_of(other: RingElement) -> Decimal:
    if not isinstance(other, DecimalWrapper):
        raise InvalidOperationError(
            f"cannot combine a DecimalWrapper with {type(other).__name__} "
            f"{other}"
        )
    return other._value


class DecimalWrapperFactory(RingElementFactory):

    type_properties = TypeProperties(is_exact=False)

    def zero(self) -> DecimalWrapper:
        return DecimalWrapper(0)

    def one(self) -> DecimalWrapper:
        return DecimalWrapper(1)

    def get(self, value: Any) -> DecimalWrapper:
        if isinstance(value, DecimalWrapper):
            return value
        if isinstance(value, bool):
            return DecimalWrapper(int(value))
        if isinstance(value, (int, Decimal)):
            return DecimalWrapper(value)
        if isinstance(value, float):
            return DecimalWrapper(repr(value))
        if isinstance(value, Fraction):
            return DecimalWrapper._wrap(
                _context.divide(Decimal(value.numerator),
                                Decimal(value.denominator))
            )
        if isinstance(value, str):
            s = value.strip()
            try:
                if '/' in s:
                    num, _, den = s.partition('/')
                    return self.get(num).divide(self.get(den))
                return DecimalWrapper(s)
            except decimal.InvalidOperation:
                raise InvalidOperationError(
                    f"'{value}' is not a valid decimal number"
                ) from None
        if isinstance(value, RingElement) and hasattr(value, 'fraction'):
            return self.get(value.fraction)
        if isinstance(value, RingElement) and hasattr(value, '__float__'):
            return self.get(float(value))
        raise InvalidOperationError(
            f"cannot convert {value!r} of type {type(value).__name__} "
            f"into a DecimalWrapper"
        )

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> DecimalWrapper:
        u = self.get(float(get_rng(rng).random()))
        if minimum is None or maximum is None:
            return u
        return minimum.add(maximum.subtract(minimum).multiply(u))

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> DecimalWrapper:
        return self.get(float(get_rng(rng).standard_normal()))

    def __reduce__(self):
        return (_factory, ())


def _factory() -> DecimalWrapperFactory:
    return FACTORY


FACTORY = DecimalWrapperFactory()
