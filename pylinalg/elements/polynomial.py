"""
Polynomials in one variable over any ring of PyLinAlg elements.

A polynomial is stored sparsely as a mapping exponent -> non-zero
coefficient. Polynomials over a field form a Euclidean ring, which is
what characteristic and minimal polynomials of matrices need.

There is one PolynomialFactory per base factory, obtained from
``polynomial_factory(base)``; polynomials over different base rings
cannot be combined.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping

import numpy as np

from pylinalg.core.exceptions import (
    DivisionByZeroError,
    InvalidOperationError,
)
from pylinalg.elements.base import (
    RingElement,
    RingElementFactory,
    TypeProperties,
)

# Coefficients matching this are printed without parentheses.
_SIMPLE_NUMBER = re.compile(r'\d+\.?\d*([eE][+-]\d+)?|\d+/\d+')


class Polynomial(RingElement):
    """
    Immutable polynomial sum(c_k * x^k).

    Create polynomials through their factory:

        >>> P = polynomial_factory(RATIONAL)
        >>> x = P.x()
        >>> p = x * x - 1
        >>> str(p)
        '-1+x^2'
    """

    __slots__ = ('_coefficients', '_factory')

    def __init__(self, coefficients: Mapping[int, RingElement],
                 factory: PolynomialFactory):
        self._factory = factory
        self._coefficients = {
            k: c for k, c in sorted(coefficients.items()) if not c.is_zero()
        }

    @property
    def factory(self) -> PolynomialFactory:
        return self._factory

    @property
    def base_factory(self) -> RingElementFactory:
        return self._factory.base_factory

    @property
    def coefficients(self) -> dict[int, RingElement]:
        """Copy of the exponent -> coefficient mapping (non-zero only)."""
        return dict(self._coefficients)

    @property
    def degree(self) -> int:
        """Highest exponent; 0 for constants including the zero polynomial."""
        return max(self._coefficients, default=0)

    @property
    def leading_coefficient(self) -> RingElement:
        if not self._coefficients:
            return self.base_factory.zero()
        return self._coefficients[self.degree]

    def coefficient(self, exponent: int) -> RingElement:
        return self._coefficients.get(exponent, self.base_factory.zero())

    def _other(self, other: RingElement) -> Polynomial:
        if isinstance(other, Polynomial):
            if other._factory is not self._factory:
                raise InvalidOperationError(
                    f"cannot combine polynomials over different rings: "
                    f"{self} and {other}"
                )
            return other
        # Scalars of the base ring act as constant polynomials.
        return self._factory.get(other)

    def _make(self, coefficients: Mapping[int, RingElement]) -> Polynomial:
        return Polynomial(coefficients, self._factory)

    # --- ring operations ---

    def add(self, other: RingElement) -> Polynomial:
        o = self._other(other)
        result = dict(self._coefficients)
        for k, c in o._coefficients.items():
            result[k] = result[k].add(c) if k in result else c
        return self._make(result)

    def subtract(self, other: RingElement) -> Polynomial:
        return self.add(self._other(other).negate())

    def multiply(self, other: RingElement) -> Polynomial:
        o = self._other(other)
        result: dict[int, RingElement] = {}
        for i, a in self._coefficients.items():
            for j, b in o._coefficients.items():
                term = a.multiply(b)
                k = i + j
                result[k] = result[k].add(term) if k in result else term
        return self._make(result)

    def negate(self) -> Polynomial:
        return self._make(
            {k: c.negate() for k, c in self._coefficients.items()}
        )

    def is_zero(self) -> bool:
        return not self._coefficients

    def is_one(self) -> bool:
        return (
            len(self._coefficients) == 1
            and 0 in self._coefficients
            and self._coefficients[0].is_one()
        )

    def abs(self) -> Polynomial:
        raise InvalidOperationError(
            "the absolute value of a polynomial is not a polynomial"
        )

    def norm(self) -> Polynomial:
        """The degree as a constant polynomial (the Euclidean norm)."""
        return self._factory.get(self.base_factory.get(self.degree))

    def compare_to(self, other: RingElement) -> int:
        """Order by degree, then by coefficients from the highest power down."""
        o = self._other(other)
        if self.degree != o.degree:
            return (self.degree > o.degree) - (self.degree < o.degree)
        for k in range(self.degree, -1, -1):
            c = self.coefficient(k).compare_to(o.coefficient(k))
            if c != 0:
                return c
        return 0

    # --- division ---

    def euclidean_division(
        self,
        divisor: Polynomial,
    ) -> tuple[Polynomial, Polynomial]:
        """
        Long division: return (quotient, remainder) with
        self = quotient * divisor + remainder and deg(remainder) < deg(divisor)
        (or remainder zero).

        The leading coefficient of the divisor must be invertible.

        Raises:
            DivisionByZeroError: If divisor is the zero polynomial
        """
        d = self._other(divisor)
        if d.is_zero():
            raise DivisionByZeroError(
                "zero polynomial cannot be used as divisor"
            )
        quotient: dict[int, RingElement] = {}
        remainder = self
        lead = d.leading_coefficient
        while not remainder.is_zero() and remainder.degree >= d.degree:
            shift = remainder.degree - d.degree
            factor = remainder.leading_coefficient.divide(lead)
            quotient[shift] = factor
            remainder = remainder.subtract(
                d._shift_scale(shift, factor)
            )
        return self._make(quotient), remainder

    def _shift_scale(self, shift: int, factor: RingElement) -> Polynomial:
        return self._make(
            {k + shift: c.multiply(factor)
             for k, c in self._coefficients.items()}
        )

    def divide(self, other: RingElement) -> Polynomial:
        """
        Exact division by a polynomial or a scalar of the base ring.

        Raises:
            InvalidOperationError: If a polynomial division leaves a remainder
        """
        if not isinstance(other, Polynomial):
            return self.divide_scalar(other)
        quotient, remainder = self.euclidean_division(other)
        if not remainder.is_zero():
            raise InvalidOperationError(
                f"{self} cannot be divided by {other} without a remainder; "
                f"use euclidean_division() instead"
            )
        return quotient

    def divide_scalar(self, scalar: RingElement) -> Polynomial:
        return self._make(
            {k: c.divide(scalar) for k, c in self._coefficients.items()}
        )

    def invert(self) -> Polynomial:
        if self.degree > 0:
            raise InvalidOperationError(
                f"the inverse of {self} is not a polynomial"
            )
        return self._factory.get(self.leading_coefficient.invert())

    def monic(self) -> Polynomial:
        """Divide by the leading coefficient."""
        if self.is_zero():
            return self
        return self.divide_scalar(self.leading_coefficient)

    def gcd(self, other: Polynomial) -> Polynomial:
        """Greatest common divisor, made monic (zero if both are zero)."""
        a, b = self, self._other(other)
        if b.gt(a):
            a, b = b, a
        while not b.is_zero():
            a, b = b, a.euclidean_division(b)[1]
        return a.monic()

    def square_free_part(self) -> Polynomial:
        """
        Product of the distinct irreducible factors, made monic.

        For a characteristic polynomial this is used as the minimal
        polynomial of the matrix. In characteristic zero it is
        p / gcd(p, p'). Over F_q a factor whose multiplicity is a multiple
        of q drops out of p'; those factors are left over in gcd(p, p')
        as a q-th power g(x^q) = g(x)^q, and g is reduced recursively.

        Raises:
            InvalidOperationError: If p' is zero for a non-constant p of
                characteristic zero
        """
        if self.degree <= 1:
            return self.monic()
        derivative = self.differentiate()
        if derivative.is_zero():
            return self._qth_root().square_free_part()
        common = self.gcd(derivative)
        part = self.euclidean_division(common)[0]
        if self._factory.type_properties.characteristic == 0:
            return part.monic()
        # strip the factors of part; what is left has multiplicities
        # divisible by q
        while True:
            shared = common.gcd(part)
            if shared.is_one():
                break
            common = common.euclidean_division(shared)[0]
        if common.degree == 0:
            return part.monic()
        return part.multiply(common._qth_root().square_free_part()).monic()

    def _qth_root(self) -> Polynomial:
        """g with g(x^q) = self, for q the characteristic of a prime field."""
        q = self._factory.type_properties.characteristic
        if q == 0:
            raise InvalidOperationError(
                f"{self} has a zero derivative but the base ring has "
                f"characteristic zero"
            )
        # c^q = c in F_q, so the coefficients stay as they are
        return self._make(
            {k // q: c for k, c in self._coefficients.items()}
        )

    # --- calculus and evaluation ---

    def differentiate(self) -> Polynomial:
        base = self.base_factory
        return self._make(
            {k - 1: c.multiply(base.get(k))
             for k, c in self._coefficients.items() if k != 0}
        )

    def integrate(self) -> Polynomial:
        """Antiderivative with zero constant term; needs a field as base."""
        base = self.base_factory
        return self._make(
            {k + 1: c.multiply(base.get(k + 1).invert())
             for k, c in self._coefficients.items()}
        )

    def evaluate(self, x: Any) -> RingElement:
        """Value at x by Horner's scheme."""
        base = self.base_factory
        point = x if isinstance(x, RingElement) else base.get(x)
        result = base.zero()
        for k in range(self.degree, -1, -1):
            result = result.multiply(point).add(self.coefficient(k))
        return result

    __call__ = evaluate

    # --- Python protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return (other._factory is self._factory
                and other._coefficients == self._coefficients)

    def __hash__(self) -> int:
        return hash(tuple(self._coefficients.items()))

    def __str__(self) -> str:
        terms = []
        for k, c in self._coefficients.items():
            if k == 0:
                terms.append(str(c))
                continue
            power = 'x' if k == 1 else f'x^{k}'
            if c.is_one():
                terms.append(power)
                continue
            text = str(c)
            if not _SIMPLE_NUMBER.fullmatch(text):
                text = f'({text})'
            terms.append(f'{text}*{power}')
        return '+'.join(terms) if terms else '0'

    def __reduce__(self):
        return (Polynomial, (self._coefficients, self._factory))


class PolynomialFactory(RingElementFactory):
    """
    Factory for polynomials over one base ring.

    Use ``polynomial_factory(base)`` rather than instantiating directly.
    """

    def __init__(self, base_factory: RingElementFactory):
        self.base_factory = base_factory
        self.type_properties = TypeProperties(
            is_exact=base_factory.type_properties.is_exact,
            is_discrete=False,
            has_negative_values=False,
            characteristic=base_factory.type_properties.characteristic,
        )
        self._zero = Polynomial({}, self)
        self._one = Polynomial({0: base_factory.one()}, self)

    def zero(self) -> Polynomial:
        return self._zero

    def one(self) -> Polynomial:
        return self._one

    def x(self) -> Polynomial:
        """The polynomial x."""
        return Polynomial({1: self.base_factory.one()}, self)

    def monomial(self, coefficient: Any, exponent: int) -> Polynomial:
        return Polynomial({exponent: self.base_factory.get(coefficient)}, self)

    def get(self, value: Any) -> Polynomial:
        """
        Convert ``value`` into a polynomial.

        Accepts polynomials over the same base, mappings exponent ->
        coefficient, sequences of coefficients in ascending order and
        anything the base factory accepts (giving a constant).
        """
        if isinstance(value, Polynomial):
            if value.factory is not self:
                raise InvalidOperationError(
                    f"{value} is a polynomial over a different ring"
                )
            return value
        if isinstance(value, Mapping):
            return Polynomial(
                {int(k): self.base_factory.get(c) for k, c in value.items()},
                self,
            )
        if isinstance(value, (list, tuple)):
            return self.from_coefficients(value)
        return Polynomial({0: self.base_factory.get(value)}, self)

    def from_coefficients(self, coefficients: Iterable[Any]) -> Polynomial:
        """Build c0 + c1*x + c2*x^2 + ... from [c0, c1, c2, ...]."""
        return Polynomial(
            {k: self.base_factory.get(c) for k, c in enumerate(coefficients)},
            self,
        )

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> Polynomial:
        """A random constant polynomial."""
        return self.get(self.base_factory.random_value(minimum, maximum, rng))

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> Polynomial:
        return self.get(self.base_factory.gaussian_random_value(rng))

    def __reduce__(self):
        return (polynomial_factory, (self.base_factory,))

    def __repr__(self) -> str:
        return f"PolynomialFactory({self.base_factory!r})"


@lru_cache(maxsize=None)
def polynomial_factory(base_factory: RingElementFactory) -> PolynomialFactory:
    """Return the factory for polynomials over ``base_factory``."""
    return PolynomialFactory(base_factory)
