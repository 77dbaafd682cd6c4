"""
Floating point numbers as field elements.

DoubleWrapper is the only inexact field. Equality is exact float equality,
so results of elimination should be compared with ``is_close`` (or
``numpy.testing`` on ``float()`` values), never with ``==``.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any

import numpy as np

from pylinalg.core.compute.tolerances import FP64, ToleranceTier
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


class DoubleWrapper(FieldElement):

    __slots__ = ('_value',)

    def __init__(self, value: float = 0.0):
        self._value = float(value)

    @property
    def factory(self) -> DoubleWrapperFactory:
        return FACTORY

    @property
    def value(self) -> float:
        return self._value

    def add(self, other: RingElement) -> DoubleWrapper:
        return DoubleWrapper(self._value + _float_of(other))

    def subtract(self, other: RingElement) -> DoubleWrapper:
        return DoubleWrapper(self._value - _float_of(other))

    def multiply(self, other: RingElement) -> DoubleWrapper:
        return DoubleWrapper(self._value * _float_of(other))

    def divide(self, other: RingElement) -> DoubleWrapper:
        divisor = _float_of(other)
        if divisor == 0.0:
            raise DivisionByZeroError(f"Tried to divide {self} by zero.")
        return DoubleWrapper(self._value / divisor)

    def negate(self) -> DoubleWrapper:
        return DoubleWrapper(-self._value)

    def invert(self) -> DoubleWrapper:
        if self._value == 0.0:
            raise DivisionByZeroError("Tried to invert zero.")
        return DoubleWrapper(1.0 / self._value)

    def is_zero(self) -> bool:
        return self._value == 0.0

    def is_one(self) -> bool:
        return self._value == 1.0

    def abs(self) -> DoubleWrapper:
        return DoubleWrapper(abs(self._value))

    def sqrt(self) -> DoubleWrapper:
        if self._value < 0.0:
            raise InvalidOperationError(
                f"square root of negative value {self._value}"
            )
        return DoubleWrapper(math.sqrt(self._value))

    def floor(self) -> DoubleWrapper:
        return DoubleWrapper(math.floor(self._value))

    def is_close(
        self,
        other: DoubleWrapper,
        tolerance: ToleranceTier = FP64,
    ) -> bool:
        """Compare within a tolerance tier (see core.compute.tolerances)."""
        return tolerance.is_close(self._value, _float_of(other))

    def compare_to(self, other: RingElement) -> int:
        o = _float_of(other)
        return (self._value > o) - (self._value < o)

    def __float__(self) -> float:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return repr(self._value)

    def __reduce__(self):
        return (DoubleWrapper, (self._value,))


def _float_of(other: RingElement) -> float:
    if not isinstance(other, DoubleWrapper):
        raise InvalidOperationError(
            f"cannot combine a DoubleWrapper with {type(other).__name__} "
            f"{other}"
        )
    return other._value


class DoubleWrapperFactory(RingElementFactory):
    """Creates DoubleWrappers from numbers, elements and "a/b" strings."""

    type_properties = TypeProperties(is_exact=False)

    def __init__(self) -> None:
        self._zero = DoubleWrapper(0.0)
        self._one = DoubleWrapper(1.0)
        self._m_one = DoubleWrapper(-1.0)

    def zero(self) -> DoubleWrapper:
        return self._zero

    def one(self) -> DoubleWrapper:
        return self._one

    def m_one(self) -> DoubleWrapper:
        return self._m_one

    def get(self, value: Any) -> DoubleWrapper:
        if isinstance(value, DoubleWrapper):
            return value
        if isinstance(value, (int, float, Fraction, np.floating, np.integer)):
            return DoubleWrapper(float(value))
        if isinstance(value, str):
            s = value.strip()
            try:
                if '/' in s:
                    num, _, den = s.partition('/')
                    d = float(den)
                    if d == 0.0:
                        raise DivisionByZeroError(
                            f"'{value}' has a zero denominator"
                        )
                    return DoubleWrapper(float(num) / d)
                return DoubleWrapper(float(s))
            except ValueError:
                raise InvalidOperationError(
                    f"'{value}' is not a valid floating point number"
                ) from None
        if isinstance(value, RingElement) and hasattr(value, '__float__'):
            return DoubleWrapper(float(value))
        raise InvalidOperationError(
            f"cannot convert {value!r} of type {type(value).__name__} "
            f"into a DoubleWrapper"
        )

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> DoubleWrapper:
        """Uniform value in [0, 1), or in [minimum, maximum) if both given."""
        generator = get_rng(rng)
        if minimum is None or maximum is None:
            return DoubleWrapper(generator.random())
        return DoubleWrapper(
            generator.uniform(float(minimum), float(maximum))
        )

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> DoubleWrapper:
        return DoubleWrapper(get_rng(rng).standard_normal())

    def __reduce__(self):
        return (_factory, ())


def _factory() -> DoubleWrapperFactory:
    return FACTORY


FACTORY = DoubleWrapperFactory()
