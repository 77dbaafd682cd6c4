"""
The field with two elements.

Only two instances exist, ``ZERO`` and ``ONE``. Addition is exclusive or,
multiplication is logical and, and every element is its own negative.
"""

from __future__ import annotations

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


class F2(FieldElement):

    __slots__ = ('_bit',)

    def __init__(self, bit: bool):
        self._bit = bool(bit)

    @property
    def factory(self) -> F2Factory:
        return FACTORY

    @property
    def value(self) -> int:
        return int(self._bit)

    def add(self, other: RingElement) -> F2:
        return ONE if self._bit != _bit_of(other) else ZERO

    def subtract(self, other: RingElement) -> F2:
        return self.add(other)

    def multiply(self, other: RingElement) -> F2:
        return ONE if self._bit and _bit_of(other) else ZERO

    def negate(self) -> F2:
        return self

    def invert(self) -> F2:
        if not self._bit:
            raise DivisionByZeroError("0m2 has no inverse")
        return self

    def is_zero(self) -> bool:
        return not self._bit

    def is_one(self) -> bool:
        return self._bit

    def abs(self) -> F2:
        return self

    def compare_to(self, other: RingElement) -> int:
        return self.value - int(_bit_of(other))

    def __int__(self) -> int:
        return self.value

    def __float__(self) -> float:
        return float(self.value)

    def __hash__(self) -> int:
        return hash(('F2', self._bit))

    def __str__(self) -> str:
        return f"{self.value}m2"

    def __reduce__(self):
        return (FACTORY.get, (self.value,))


def _bit_of(other: RingElement) -> bool:
    if not isinstance(other, F2):
        raise InvalidOperationError(
            f"cannot combine an F2 element with {type(other).__name__} "
            f"{other}"
        )
    return other._bit


ZERO = F2(False)
ONE = F2(True)


class F2Factory(RingElementFactory):
    """Creates F2 elements from ints (by parity), bools and "0m2"/"1m2"."""

    type_properties = TypeProperties(
        is_exact=True, is_discrete=True, has_negative_values=False,
        characteristic=2,
    )

    def zero(self) -> F2:
        return ZERO

    def one(self) -> F2:
        return ONE

    def m_one(self) -> F2:
        return ONE

    def get(self, value: Any) -> F2:
        if isinstance(value, F2):
            return value
        if isinstance(value, int):
            return ONE if value % 2 else ZERO
        if isinstance(value, str):
            s = value.strip()
            if s.endswith('m2'):
                s = s[:-2]
            try:
                return self.get(int(s))
            except ValueError:
                raise InvalidOperationError(
                    f"'{value}' is not a valid F2 element"
                ) from None
        raise InvalidOperationError(
            f"cannot convert {value!r} of type {type(value).__name__} "
            f"into an F2 element"
        )

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> F2:
        return ONE if get_rng(rng).random() < 0.5 else ZERO

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> F2:
        return self.random_value(rng=rng)

    def __reduce__(self):
        return (_factory, ())


def _factory() -> F2Factory:
    return FACTORY


FACTORY = F2Factory()
