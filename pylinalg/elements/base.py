"""
Abstract ring and field elements and their factories.

Every scalar type in PyLinAlg (Rational, F2, FieldP, DoubleWrapper,
DecimalWrapper, Complex, Polynomial) derives from RingElement and is
created through a RingElementFactory. Vectors and matrices only ever talk
to elements through this interface, which is what makes the linear
algebra generic over the field.

Design decisions:
    - Named methods (add, multiply, ...) are the primitive operations;
      Python operators delegate to them
    - Plain Python numbers are coerced through the left operand's factory,
      so ``r + 1`` works for any element type
    - Elements are immutable and hashable
    - Random values come from a numpy Generator so that noise matrices
      are reproducible under a seed
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, TYPE_CHECKING

import numpy as np

from pylinalg.core.exceptions import (
    DivisionByZeroError,
    InvalidOperationError,
)

if TYPE_CHECKING:
    from pylinalg.matrix import Matrix
    from pylinalg.vector import Vector


# Values a factory is able to coerce next to elements of its own type.
_NUMBER_TYPES = (int, float, Fraction)

_rng: np.random.Generator = np.random.default_rng()


def set_random_seed(seed: int | None) -> None:
    """Reseed the generator used by all factories' random values."""
    global _rng
    _rng = np.random.default_rng(seed)


def get_rng(rng: np.random.Generator | None = None) -> np.random.Generator:
    """Return ``rng`` if given, else the shared module generator."""
    return rng if rng is not None else _rng


@dataclass(frozen=True)
class TypeProperties:
    """
    Static properties of an element type.

    Attributes:
        is_exact: Arithmetic is free of rounding errors
        is_discrete: The set of values is discrete (finite fields)
        has_negative_values: An ordering with negative values exists
        characteristic: Characteristic of the field, 0 for fields of
            characteristic zero
    """
    is_exact: bool
    is_discrete: bool = False
    has_negative_values: bool = True
    characteristic: int = 0


class RingElement(ABC):
    """
    Element of a commutative ring with one.

    Subclasses implement add, multiply, negate, compare_to, factory,
    __hash__ and __str__. Rings that are fields should derive from
    FieldElement instead and implement invert.
    """

    __slots__ = ()

    # --- primitives ---

    @property
    @abstractmethod
    def factory(self) -> RingElementFactory:
        """The factory that created this element."""

    @abstractmethod
    def add(self, other: RingElement) -> RingElement:
        ...

    @abstractmethod
    def multiply(self, other: RingElement) -> RingElement:
        ...

    @abstractmethod
    def negate(self) -> RingElement:
        ...

    @abstractmethod
    def compare_to(self, other: RingElement) -> int:
        """Return -1, 0 or 1. Only called with elements of the same type."""

    @abstractmethod
    def __hash__(self) -> int:
        ...

    # --- derived operations ---

    def subtract(self, other: RingElement) -> RingElement:
        return self.add(other.negate())

    def divide(self, other: RingElement) -> RingElement:
        raise InvalidOperationError(
            f"Elements of type {type(self).__name__} cannot be divided"
        )

    def invert(self) -> RingElement:
        raise InvalidOperationError(
            f"Elements of type {type(self).__name__} cannot be inverted"
        )

    def is_zero(self) -> bool:
        return self == self.factory.zero()

    def is_one(self) -> bool:
        return self == self.factory.one()

    def abs(self) -> RingElement:
        """Absolute value with respect to the type's ordering."""
        return self.negate() if self.lt(self.factory.zero()) else self

    def norm(self) -> RingElement:
        """Value used to pick pivots; defaults to abs()."""
        return self.abs()

    def square(self) -> RingElement:
        return self.multiply(self)

    def apply(self, fun: Callable[[RingElement], RingElement]) -> RingElement:
        return fun(self)

    # --- comparison ---

    def _check_comparable(self, other: Any) -> None:
        if type(self) is not type(other):
            raise InvalidOperationError(
                f"cannot compare {self} of type {type(self).__name__} "
                f"with {other} of type {type(other).__name__}"
            )

    def lt(self, other: RingElement) -> bool:
        self._check_comparable(other)
        return self.compare_to(other) < 0

    def le(self, other: RingElement) -> bool:
        self._check_comparable(other)
        return self.compare_to(other) <= 0

    def gt(self, other: RingElement) -> bool:
        self._check_comparable(other)
        return self.compare_to(other) > 0

    def ge(self, other: RingElement) -> bool:
        self._check_comparable(other)
        return self.compare_to(other) >= 0

    # --- Python protocol ---

    def _coerce(self, other: Any) -> RingElement | None:
        if isinstance(other, RingElement):
            return other
        if isinstance(other, _NUMBER_TYPES) and not isinstance(other, bool):
            return self.factory.get(other)
        return None

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.compare_to(other) == 0

    def __add__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else self.add(o)

    def __radd__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else o.add(self)

    def __sub__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else self.subtract(o)

    def __rsub__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else o.subtract(self)

    def __mul__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else self.multiply(o)

    def __rmul__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else o.multiply(self)

    def __truediv__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else self.divide(o)

    def __rtruediv__(self, other: Any) -> RingElement:
        o = self._coerce(other)
        return NotImplemented if o is None else o.divide(self)

    def __neg__(self) -> RingElement:
        return self.negate()

    def __abs__(self) -> RingElement:
        return self.abs()

    def __lt__(self, other: Any) -> bool:
        o = self._coerce(other)
        return NotImplemented if o is None else self.lt(o)

    def __le__(self, other: Any) -> bool:
        o = self._coerce(other)
        return NotImplemented if o is None else self.le(o)

    def __gt__(self, other: Any) -> bool:
        o = self._coerce(other)
        return NotImplemented if o is None else self.gt(o)

    def __ge__(self, other: Any) -> bool:
        o = self._coerce(other)
        return NotImplemented if o is None else self.ge(o)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class FieldElement(RingElement):
    """Element of a field: every non-zero element is invertible."""

    __slots__ = ()

    @abstractmethod
    def invert(self) -> FieldElement:
        """Multiplicative inverse; raises DivisionByZeroError for zero."""

    def divide(self, other: RingElement) -> RingElement:
        if other.is_zero():
            raise DivisionByZeroError(f"Tried to divide {self} by {other}.")
        return self.multiply(other.invert())


class RingElementFactory(ABC):
    """
    Creates elements of one ring.

    Subclasses implement zero, one and get. Factories are singletons per
    ring (per prime for F_p, per base ring for polynomials), so identity
    comparison of factories is how mixed-type arithmetic is detected.
    """

    type_properties: TypeProperties = TypeProperties(is_exact=False)

    @abstractmethod
    def zero(self) -> RingElement:
        ...

    @abstractmethod
    def one(self) -> RingElement:
        ...

    def m_one(self) -> RingElement:
        """Minus one."""
        return self.one().negate()

    @abstractmethod
    def get(self, value: Any) -> RingElement:
        """
        Convert ``value`` into an element of this ring.

        Accepted inputs depend on the ring; every factory accepts ints,
        strings in the element's own str() format and its own elements.

        Raises:
            InvalidOperationError: If value cannot be represented
        """

    def random_value(
        self,
        minimum: RingElement | None = None,
        maximum: RingElement | None = None,
        rng: np.random.Generator | None = None,
    ) -> RingElement:
        raise InvalidOperationError(
            f"{type(self).__name__} does not support random values"
        )

    def gaussian_random_value(
        self,
        rng: np.random.Generator | None = None,
    ) -> RingElement:
        raise InvalidOperationError(
            f"{type(self).__name__} does not support gaussian random values"
        )

    def convert_vector(self, vector: Vector) -> Vector:
        """Convert every entry of ``vector`` into this ring."""
        from pylinalg.vector import Vector
        return Vector([self.get(e) for e in vector], factory=self)

    def convert_matrix(self, matrix: Matrix) -> Matrix:
        """Convert every entry of ``matrix`` into this ring."""
        from pylinalg.matrix import Matrix
        return Matrix(
            [[self.get(e) for e in row] for row in matrix.to_lists()],
            factory=self,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
