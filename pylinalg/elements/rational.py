"""
Arbitrary precision rational numbers.

Backed by fractions.Fraction, which keeps numerator and denominator in
lowest terms with a positive denominator. Floats enter through their
shortest decimal representation, so ``Rational.FACTORY.get(0.1)`` is 1/10
rather than the exact binary value 3602879701896397/36028797018963968.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any

import numpy as np

from pylinalg.core.exceptions import (
    DivisionByZeroError,
    InvalidOperationError,
)
from pylinalg.elements.base import (
    FieldElement,
    RingElement,
    RingElementFactory,
    TypeProperties,
    get_rng,
)


class Rational(FieldElement):
    """A fraction p/q in lowest terms with q > 0."""

    __slots__ = ('_value',)

    def __init__(self, numerator: int | Fraction = 0, denominator: int = 1):
        if denominator == 0:
            raise DivisionByZeroError(
                f"denominator of {numerator}/{denominator} is zero"
            )
        self._value = Fraction(numerator, denominator)

    @classmethod
    def _wrap(cls, value: Fraction) -> Rational:
        r = cls.__new__(cls)
        r._value = value
        return r

    @property
    def factory(self) -> RationalFactory:
        return FACTORY

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    @property
    def fraction(self) -> Fraction:
        return self._value

    def add(self, other: RingElement) -> Rational:
        return Rational._wrap(self._value + _fraction_of(other))

    def subtract(self, other: RingElement) -> Rational:
        return Rational._wrap(self._value - _fraction_of(other))

    def multiply(self, other: RingElement) -> Rational:
        return Rational._wrap(self._value * _fraction_of(other))

    def divide(self, other: RingElement) -> Rational:
        divisor = _fraction_of(other)
        if divisor == 0:
            raise DivisionByZeroError(f"Tried to divide {self} by zero.")
        return Rational._wrap(self._value / divisor)

    def negate(self) -> Rational:
        return Rational._wrap(-self._value)

    def invert(self) -> Rational:
        if self._value == 0:
            raise DivisionByZeroError("Tried to invert zero.")
        return Rational._wrap(1 / self._value)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def abs(self) -> Rational:
        return self if self._value >= 0 else self.negate()

    def floor(self) -> Rational:
        return Rational(math.floor(self._value))

    def compare_to(self, other: RingElement) -> int:
        o = _fraction_of(other)
        return (self._value > o) - (self._value < o)

    def __float__(self) -> float:
        return float(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        if self._value.denominator == 1:
            return str(self._value.numerator)
        return f"{self._value.numerator}/{self._value.denominator}"

    def __reduce__(self):
        return (Rational, (self.numerator, self.denominator))


def _fraction_of(other: RingElement) -> Fraction:
    if not isinstance(other, Rational):
        raise InvalidOperationError(
            f"cannot combine a Rational with {type(other).__name__} {other}"
        )
    return other._value


class RationalFactory(RingElementFactory):
    """Creates Rationals from ints, floats, Fractions, Decimals and strings."""

    type_properties = TypeProperties(is_exact=True)

    def __init__(self) -> None:
        self._zero = Rational(0)
        self._one = Rational(1)
        self._m_one = Rational(-1)

    def zero(self) -> Rational:
        return self._zero

    def one(self) -> Rational:
        return self._one

    def m_one(self) -> Rational:
        return self._m_one

    def get(self, value: Any) -> Rational:
        if isinstance(value, Rational):
            return value
        if isinstance(value, bool):
            return self._one if value else self._zero
        if isinstance(value, (int, Fraction)):
            return Rational._wrap(Fraction(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidOperationError(
                    f"{value} cannot be represented as a Rational"
                )
            return Rational._wrap(Fraction(repr(value)))
        if isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidOperationError(
                    f"{value} cannot be represented as a Rational"
                )
            return Rational._wrap(Fraction(value))
        if isinstance(value, str):
            return self._parse(value)
        if isinstance(value, RingElement) and hasattr(value, '__float__'):
            return self.get(float(value))
        raise InvalidOperationError(
            f"cannot convert {value!r} of type {type(value).__name__} "
            f"into a Rational"
        )

    def _parse(self, text: str) -> Rational:
        s = text.strip()
        if '/' in s:
            num, _, den = s.partition('/')
            try:
                n = self._parse(num)._value
                d = self._parse(den)._value
            except InvalidOperationError:
                raise InvalidOperationError(
                    f"'{text}' is not a valid rational number"
                ) from None
            if d == 0:
                raise DivisionByZeroError(
                    f"'{text}' has a zero denominator"
                )
            return Rational._wrap(n / d)
        try:
            value = Decimal(s)
        except InvalidOperation:
            raise InvalidOperationError(
                f"'{text}' is not a valid rational number"
            ) from None
        if not value.is_finite():
            raise InvalidOperationError(
                f"'{text}' is not a valid rational number"
            )
        return Rational._wrap(Fraction(value))

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> Rational:
        """Uniform value in [0, 1), or in [minimum, maximum) if both given."""
        u = self.get(float(get_rng(rng).random()))
        if minimum is None or maximum is None:
            return u
        return minimum.add(maximum.subtract(minimum).multiply(u))

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> Rational:
        return self.get(float(get_rng(rng).standard_normal()))

    def __reduce__(self):
        return (_factory, ())


def _factory() -> RationalFactory:
    return FACTORY


FACTORY = RationalFactory()
