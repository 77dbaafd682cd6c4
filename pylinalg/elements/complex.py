"""
Complex numbers with rational real and imaginary parts.

Arithmetic is exact. Because the field has no ordering compatible with
its arithmetic, ``abs()`` and ``norm()`` return the squared modulus
re^2 + im^2 as a (real) Complex, which is enough for pivot selection,
and ``compare_to`` orders lexicographically by real then imaginary part.
"""

from __future__ import annotations

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
from pylinalg.elements.rational import FACTORY as RATIONAL, Rational


class Complex(FieldElement):

    __slots__ = ('_re', '_im')

    def __init__(self, re: Rational | int = 0, im: Rational | int = 0):
        self._re = RATIONAL.get(re)
        self._im = RATIONAL.get(im)

    @property
    def factory(self) -> ComplexFactory:
        return FACTORY

    @property
    def real(self) -> Rational:
        return self._re

    @property
    def imag(self) -> Rational:
        return self._im

    def add(self, other: RingElement) -> Complex:
        o = _complex_of(other)
        return Complex(self._re.add(o._re), self._im.add(o._im))

    def subtract(self, other: RingElement) -> Complex:
        o = _complex_of(other)
        return Complex(self._re.subtract(o._re), self._im.subtract(o._im))

    def multiply(self, other: RingElement) -> Complex:
        o = _complex_of(other)
        return Complex(
            self._re.multiply(o._re).subtract(self._im.multiply(o._im)),
            self._re.multiply(o._im).add(self._im.multiply(o._re)),
        )

    def negate(self) -> Complex:
        return Complex(self._re.negate(), self._im.negate())

    def conjugate(self) -> Complex:
        return Complex(self._re, self._im.negate())

    def invert(self) -> Complex:
        if self.is_zero():
            raise DivisionByZeroError("Tried to invert zero.")
        n = self._squared_modulus()
        return Complex(self._re.divide(n), self._im.negate().divide(n))

    def _squared_modulus(self) -> Rational:
        return self._re.square().add(self._im.square())

    def is_zero(self) -> bool:
        return self._re.is_zero() and self._im.is_zero()

    def is_one(self) -> bool:
        return self._re.is_one() and self._im.is_zero()

    def is_real(self) -> bool:
        return self._im.is_zero()

    def abs(self) -> Complex:
        """Squared modulus re^2 + im^2 as a real Complex."""
        return Complex(self._squared_modulus())

    def norm(self) -> Complex:
        return self.abs()

    def compare_to(self, other: RingElement) -> int:
        """
        Lexicographic order: real parts first, then imaginary parts.

        This is not the order by modulus, so min, max and sort on complex
        vectors pick by real part: 2 > 1+5i although |1+5i| > |2|.
        Compare abs() values to order by magnitude.
        """
        o = _complex_of(other)
        c = self._re.compare_to(o._re)
        return c if c != 0 else self._im.compare_to(o._im)

    def __complex__(self) -> complex:
        return complex(float(self._re), float(self._im))

    def __hash__(self) -> int:
        return hash((self._re, self._im))

    def __str__(self) -> str:
        if self._im.is_zero():
            return str(self._re)
        im = self._im.abs()
        if im.is_one():
            im_text = 'i'
        elif im.denominator == 1:
            im_text = f'{im}i'
        else:
            im_text = f'({im})i'
        negative = self._im.lt(RATIONAL.zero())
        if self._re.is_zero():
            return f'-{im_text}' if negative else im_text
        return f"{self._re}{'-' if negative else '+'}{im_text}"

    def __reduce__(self):
        return (Complex, (self._re, self._im))


def _complex_of(other: RingElement) -> Complex:
    if not isinstance(other, Complex):
        raise InvalidOperationError(
            f"cannot combine a Complex with {type(other).__name__} {other}"
        )
    return other


class ComplexFactory(RingElementFactory):
    """
    Creates Complex numbers.

    Accepts Python complex numbers, real numbers and Rationals (imaginary
    part zero), and strings in the str() format, e.g. "1+2i", "-i",
    "1/2-(3/4)i".
    """

    type_properties = TypeProperties(is_exact=True)

    def __init__(self) -> None:
        self._zero = Complex(0, 0)
        self._one = Complex(1, 0)
        self._m_one = Complex(-1, 0)
        self.i = Complex(0, 1)

    def zero(self) -> Complex:
        return self._zero

    def one(self) -> Complex:
        return self._one

    def m_one(self) -> Complex:
        return self._m_one

    def get(self, value: Any) -> Complex:
        if isinstance(value, Complex):
            return value
        if isinstance(value, complex):
            return Complex(RATIONAL.get(value.real), RATIONAL.get(value.imag))
        if isinstance(value, (int, float, Fraction, Rational)):
            return Complex(RATIONAL.get(value))
        if isinstance(value, str):
            return self._parse(value)
        if isinstance(value, RingElement) and hasattr(value, '__float__'):
            return Complex(RATIONAL.get(float(value)))
        raise InvalidOperationError(
            f"cannot convert {value!r} of type {type(value).__name__} "
            f"into a Complex"
        )

    def _parse(self, text: str) -> Complex:
        s = text.replace(' ', '')
        if not s:
            raise InvalidOperationError(f"'{text}' is not a complex number")
        if not s.endswith('i'):
            return Complex(RATIONAL.get(s))
        body = s[:-1].rstrip('*')
        # Split at the last top-level sign that is not an exponent sign.
        split, depth = 0, 0
        for k, ch in enumerate(body):
            if ch == '(':
                depth += 1
            elif ch == ')':
                depth -= 1
            elif (ch in '+-' and k > 0 and depth == 0
                  and body[k - 1] not in 'eE'):
                split = k
        real_text, imag_text = body[:split], body[split:]
        negative = imag_text.startswith('-')
        if imag_text[:1] in ('+', '-'):
            imag_text = imag_text[1:]
        coefficient = imag_text.strip('()')
        im_part = RATIONAL.get(coefficient) if coefficient else RATIONAL.one()
        if negative:
            im_part = im_part.negate()
        re_part = RATIONAL.get(real_text) if real_text else RATIONAL.zero()
        return Complex(re_part, im_part)

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> Complex:
        """Real and imaginary parts uniform in [0, 1)."""
        generator = get_rng(rng)
        return Complex(
            RATIONAL.random_value(rng=generator),
            RATIONAL.random_value(rng=generator),
        )

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> Complex:
        generator = get_rng(rng)
        return Complex(
            RATIONAL.gaussian_random_value(rng=generator),
            RATIONAL.gaussian_random_value(rng=generator),
        )

    def __reduce__(self):
        return (_factory, ())


def _factory() -> ComplexFactory:
    return FACTORY


FACTORY = ComplexFactory()
