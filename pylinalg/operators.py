"""
Element-wise operators, comparators and reductions.

Vectors and matrices apply these entry by entry. Operators are plain
callables so user functions can be passed wherever one is expected:

    >>> m.apply(operators.square)
    >>> v.compare(w, operators.lt)      # 1 where v[i] < w[i], else 0
    >>> operators.max_reduction(v)

Logical operators treat zero as false and any other value as true, and
return the factory's one() or zero().
"""

from __future__ import annotations

from typing import Callable, Iterable

from pylinalg.core.exceptions import ValidationError
from pylinalg.elements.base import RingElement

DyadicOperator = Callable[[RingElement, RingElement], RingElement]
MonadicOperator = Callable[[RingElement], RingElement]
Comparator = Callable[[RingElement, RingElement], bool]
Reduction = Callable[[Iterable[RingElement]], RingElement]


def _truth(x: RingElement, value: bool) -> RingElement:
    return x.factory.one() if value else x.factory.zero()


# ═══════════════════════════════════════════════════════════════════════════
# Dyadic operators
# ═══════════════════════════════════════════════════════════════════════════

def add(x: RingElement, y: RingElement) -> RingElement:
    return x.add(y)


def subtract(x: RingElement, y: RingElement) -> RingElement:
    return x.subtract(y)


def multiply(x: RingElement, y: RingElement) -> RingElement:
    return x.multiply(y)


def divide(x: RingElement, y: RingElement) -> RingElement:
    return x.divide(y)


def and_(x: RingElement, y: RingElement) -> RingElement:
    return _truth(x, not x.is_zero() and not y.is_zero())


def or_(x: RingElement, y: RingElement) -> RingElement:
    return _truth(x, not x.is_zero() or not y.is_zero())


# ═══════════════════════════════════════════════════════════════════════════
# Monadic operators
# ═══════════════════════════════════════════════════════════════════════════

def abs_(x: RingElement) -> RingElement:
    return x.abs()


def negate(x: RingElement) -> RingElement:
    return x.negate()


def square(x: RingElement) -> RingElement:
    return x.multiply(x)


def not_(x: RingElement) -> RingElement:
    return _truth(x, x.is_zero())


# ═══════════════════════════════════════════════════════════════════════════
# Comparators
# ═══════════════════════════════════════════════════════════════════════════

def lt(a: RingElement, b: RingElement) -> bool:
    return a.lt(b)


def le(a: RingElement, b: RingElement) -> bool:
    return a.le(b)


def gt(a: RingElement, b: RingElement) -> bool:
    return a.gt(b)


def ge(a: RingElement, b: RingElement) -> bool:
    return a.ge(b)


def eq(a: RingElement, b: RingElement) -> bool:
    return a == b


def ne(a: RingElement, b: RingElement) -> bool:
    return not a == b


# ═══════════════════════════════════════════════════════════════════════════
# Reductions
# ═══════════════════════════════════════════════════════════════════════════

def _first(elements: Iterable[RingElement], name: str):
    iterator = iter(elements)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValidationError(f"{name}: nothing to reduce") from None
    return first, iterator


def sum_reduction(elements: Iterable[RingElement]) -> RingElement:
    result, rest = _first(elements, 'sum')
    for e in rest:
        result = result.add(e)
    return result


def min_reduction(elements: Iterable[RingElement]) -> RingElement:
    """Smallest element; the first one wins among equals."""
    result, rest = _first(elements, 'min')
    for e in rest:
        if result.gt(e):
            result = e
    return result


def max_reduction(elements: Iterable[RingElement]) -> RingElement:
    """Largest element; the first one wins among equals."""
    result, rest = _first(elements, 'max')
    for e in rest:
        if result.lt(e):
            result = e
    return result
