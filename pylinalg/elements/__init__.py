"""
Scalar element types.

Each module exposes its element class and a ``FACTORY`` singleton (or a
cached factory function for parameterised rings).
"""

from pylinalg.elements.base import (
    FieldElement,
    RingElement,
    RingElementFactory,
    TypeProperties,
    set_random_seed,
)
from pylinalg.elements.complex import Complex, FACTORY as COMPLEX
from pylinalg.elements.decimalwrapper import (
    DecimalWrapper,
    FACTORY as DECIMAL,
    set_precision,
)
from pylinalg.elements.doublewrapper import DoubleWrapper, FACTORY as DOUBLE
from pylinalg.elements.f2 import F2, FACTORY as F2_FACTORY
from pylinalg.elements.field_p import FieldP, field_p_factory, is_prime
from pylinalg.elements.polynomial import Polynomial, polynomial_factory
from pylinalg.elements.rational import Rational, FACTORY as RATIONAL

__all__ = [
    'RingElement',
    'FieldElement',
    'RingElementFactory',
    'TypeProperties',
    'set_random_seed',
    'Rational',
    'RATIONAL',
    'F2',
    'F2_FACTORY',
    'FieldP',
    'field_p_factory',
    'is_prime',
    'DoubleWrapper',
    'DOUBLE',
    'DecimalWrapper',
    'DECIMAL',
    'set_precision',
    'Complex',
    'COMPLEX',
    'Polynomial',
    'polynomial_factory',
]
