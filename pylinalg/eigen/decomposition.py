"""
Eigenvalues of real matrices.

The matrix is converted to float64 and handed to LAPACK (scipy.linalg.eigvals,
i.e. geev: balancing, reduction to Hessenberg form and the shifted QR
algorithm). The results come back as exact Complex numbers holding the
rational value of each float.

Design decisions:
    - Only element types with a faithful float value are accepted
      (DoubleWrapper, Rational, DecimalWrapper)
    - Imaginary parts within FP64 tolerance of zero are set to zero, so
      real eigenvalues come back as real Complex numbers
    - Eigenvalues are sorted by real part, then imaginary part
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import linalg

from pylinalg.core.compute.tolerances import FP64
from pylinalg.core.exceptions import InvalidOperationError
from pylinalg.core.validation import check_square
from pylinalg.elements.complex import FACTORY as COMPLEX
from pylinalg.elements.decimalwrapper import DecimalWrapper
from pylinalg.elements.doublewrapper import DoubleWrapper
from pylinalg.elements.rational import Rational
from pylinalg.vector import Vector

if TYPE_CHECKING:
    from pylinalg.matrix import Matrix

_REAL_TYPES = (DoubleWrapper, Rational, DecimalWrapper)


def eigenvalues(matrix: Matrix) -> Vector:
    """
    Eigenvalues of a square real matrix, with multiplicity.

    Returns:
        Vector of Complex, sorted by real then imaginary part

    Raises:
        DimensionError: If the matrix is not square
        InvalidOperationError: If the elements are not real numbers
    """
    check_square(matrix.shape, 'eigenvalues')
    sample = matrix.factory.zero()
    if not isinstance(sample, _REAL_TYPES):
        raise InvalidOperationError(
            f"eigenvalues: needs real entries, got "
            f"{type(sample).__name__}"
        )

    values = linalg.eigvals(matrix.to_numpy(), check_finite=True)
    cleaned = [_clean(complex(v)) for v in values]
    cleaned.sort(key=lambda z: (z.real, z.imag))
    return Vector._from_list([COMPLEX.get(z) for z in cleaned], COMPLEX)


def _clean(z: complex) -> complex:
    if FP64.is_close(z.imag, 0.0) or abs(z.imag) <= FP64.rtol * abs(z.real):
        return complex(z.real, 0.0)
    return z


def as_numpy(values: Vector) -> np.ndarray:
    """Complex eigenvalue vector as a numpy complex array."""
    return np.array([complex(v) for v in values], dtype=np.complex128)
