"""
PyLinAlg: exact linear algebra over arbitrary fields for Python.

Vectors and matrices hold elements of any ring (rationals, prime fields,
complex numbers over the rationals, polynomials, floats) and compute
without rounding wherever the element type allows it.

Submodules:
    elements: Scalar element types and their factories
    linsys: Linear equation systems
    eigen: Eigenvalues of real matrices
    latex: LaTeX output
    site: Project homepage (Flask)
"""

__version__ = "0.1.0"

from pylinalg.elements import (
    COMPLEX,
    DECIMAL,
    DOUBLE,
    F2_FACTORY,
    RATIONAL,
    field_p_factory,
    polynomial_factory,
    set_random_seed,
)
from pylinalg.diagonal import DiagonalMatrix
from pylinalg.factory import LinAlgFactory
from pylinalg.matrix import Matrix
from pylinalg.subspace import AffineLinearSubspace, LinearSubspace
from pylinalg.vector import Vector
from pylinalg import eigen
from pylinalg import linsys

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "DiagonalMatrix",
    "LinAlgFactory",
    "AffineLinearSubspace",
    "LinearSubspace",
    "RATIONAL",
    "F2_FACTORY",
    "DOUBLE",
    "DECIMAL",
    "COMPLEX",
    "field_p_factory",
    "polynomial_factory",
    "set_random_seed",
    "eigen",
    "linsys",
]
