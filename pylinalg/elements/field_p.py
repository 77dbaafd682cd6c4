"""
Prime fields F_p for arbitrary primes p.

Each prime has exactly one factory, obtained from ``field_p_factory(p)``.
Elements remember their factory; combining elements from different
fields raises InvalidOperationError.

Primality is checked with deterministic Miller-Rabin for p < 3.3e24 and
probabilistic Miller-Rabin (40 rounds) above.
"""

from __future__ import annotations

from functools import lru_cache
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

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
    """Miller-Rabin primality test."""
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    if n < 3_317_044_064_679_887_385_961_981:
        bases = _SMALL_PRIMES
    else:
        rng = np.random.default_rng(n % (2 ** 63))
        bases = tuple(
            2 + int(rng.integers(0, 2 ** 62)) % (n - 3) for _ in range(40)
        )
    for a in bases:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


class FieldP(FieldElement):
    """Element ``value`` of F_p, with 0 <= value < p."""

    __slots__ = ('_value', '_factory')

    def __init__(self, value: int, factory: FieldPFactory):
        self._value = value % factory.p
        self._factory = factory

    @property
    def factory(self) -> FieldPFactory:
        return self._factory

    @property
    def value(self) -> int:
        return self._value

    def _other(self, other: RingElement) -> int:
        if not isinstance(other, FieldP) or other._factory is not self._factory:
            raise InvalidOperationError(
                f"cannot combine {self} with {other}: elements of different "
                f"fields"
            )
        return other._value

    def _make(self, value: int) -> FieldP:
        return FieldP(value, self._factory)

    def add(self, other: RingElement) -> FieldP:
        return self._make(self._value + self._other(other))

    def subtract(self, other: RingElement) -> FieldP:
        return self._make(self._value - self._other(other))

    def multiply(self, other: RingElement) -> FieldP:
        return self._make(self._value * self._other(other))

    def negate(self) -> FieldP:
        return self._make(-self._value)

    def invert(self) -> FieldP:
        if self._value == 0:
            raise DivisionByZeroError(f"{self} has no inverse")
        return self._make(_mod_inverse(self._value, self._factory.p))

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def abs(self) -> FieldP:
        return self

    def floor(self) -> FieldP:
        raise InvalidOperationError("floor is not defined in a prime field")

    def compare_to(self, other: RingElement) -> int:
        o = self._other(other)
        return (self._value > o) - (self._value < o)

    def __int__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash((self._factory.p, self._value))

    def __str__(self) -> str:
        return f"{self._value}m{self._factory.p}"

    def __reduce__(self):
        return (_element, (self._factory.p, self._value))


def _mod_inverse(a: int, p: int) -> int:
    """Inverse of a modulo p by the extended Euclidean algorithm."""
    old_r, r = a, p
    old_s, s = 1, 0
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
    return old_s % p


class FieldPFactory(RingElementFactory):
    """
    Factory for the prime field F_p.

    Do not instantiate directly; use ``field_p_factory(p)`` so that each
    field has a single factory.
    """

    def __init__(self, p: int):
        self.p = p
        self.type_properties = TypeProperties(
            is_exact=True, is_discrete=True, has_negative_values=False,
            characteristic=p,
        )
        self._zero = FieldP(0, self)
        self._one = FieldP(1, self)

    def zero(self) -> FieldP:
        return self._zero

    def one(self) -> FieldP:
        return self._one

    def get(self, value: Any) -> FieldP:
        if isinstance(value, FieldP):
            if value.factory is self:
                return value
            return FieldP(value.value, self)
        if isinstance(value, int):
            return FieldP(int(value), self)
        if isinstance(value, str):
            s = value.strip()
            suffix = f"m{self.p}"
            if s.endswith(suffix):
                s = s[:-len(suffix)]
            try:
                return FieldP(int(s), self)
            except ValueError:
                raise InvalidOperationError(
                    f"'{value}' is not a valid element of F_{self.p}"
                ) from None
        if isinstance(value, float) and value.is_integer():
            return FieldP(int(value), self)
        raise InvalidOperationError(
            f"cannot convert {value!r} of type {type(value).__name__} "
            f"into an element of F_{self.p}"
        )

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> FieldP:
        generator = get_rng(rng)
        if self.p < 2 ** 63:
            return FieldP(int(generator.integers(0, self.p)), self)
        # Draw enough random bits to cover p, then reduce.
        n_bytes = (self.p.bit_length() + 7) // 8 + 8
        raw = int.from_bytes(generator.bytes(n_bytes), 'big')
        return FieldP(raw, self)

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> FieldP:
        return self.random_value(rng=rng)

    def __reduce__(self):
        return (field_p_factory, (self.p,))

    def __repr__(self) -> str:
        return f"FieldPFactory(p={self.p})"


@lru_cache(maxsize=None, typed=True)
def field_p_factory(p: int) -> FieldPFactory:
    """
    Return the factory for F_p.

    Raises:
        ValidationError: If p is not a prime
    """
    if isinstance(p, bool) or not isinstance(p, int):
        raise ValidationError(f"p must be an int, got {type(p).__name__}")
    if not is_prime(p):
        raise ValidationError(f"{p} is not a prime")
    return FieldPFactory(p)


def _element(p: int, value: int) -> FieldP:
    return field_p_factory(p).get(value)
