"""
Determinants of square matrices.

Three methods, chosen by the element type:

    - gaussian_method: fields. Eliminates column by column, picking the
      row whose first entry has the largest norm as pivot.
    - bareiss_method: rings with exact division (polynomials). Fraction
      free elimination; every division is exact.
    - laplace_method: any commutative ring. Cofactor expansion along the
      first column, exponential in the size of the matrix.

``determinant`` dispatches to the right one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylinalg.core.validation import check_square
from pylinalg.elements.base import FieldElement, RingElement

if TYPE_CHECKING:
    from pylinalg.matrix import Matrix


def determinant(matrix: Matrix) -> RingElement:
    """
    Determinant of a square matrix.

    Raises:
        DimensionError: If the matrix is not square
    """
    check_square(matrix.shape, 'det')
    sample = matrix[0, 0]
    if isinstance(sample, FieldElement):
        return gaussian_method(matrix)
    if type(sample).divide is not RingElement.divide:
        return bareiss_method(matrix)
    return laplace_method(matrix)


def gaussian_method(matrix: Matrix) -> RingElement:
    """Gaussian elimination with largest-norm pivots; needs a field."""
    check_square(matrix.shape, 'det')
    factory = matrix.factory
    zero = factory.zero()
    m = matrix.to_lists()
    result = factory.one()

    while len(m) > 1:
        pivot_row = 0
        best = m[0][0].norm()
        for r in range(1, len(m)):
            candidate = m[r][0].norm()
            if candidate.gt(best):
                best, pivot_row = candidate, r
        if best.is_zero():
            return zero
        pivot = m[pivot_row]
        for r, row in enumerate(m):
            if r == pivot_row or row[0].is_zero():
                continue
            factor = row[0].divide(pivot[0])
            m[r] = [row[0]] + [
                row[c].subtract(pivot[c].multiply(factor))
                for c in range(1, len(row))
            ]
        # Expanding along the (now cleared) first column.
        result = result.multiply(pivot[0])
        if pivot_row % 2 == 1:
            result = result.negate()
        m = [row[1:] for r, row in enumerate(m) if r != pivot_row]

    return result.multiply(m[0][0])


def bareiss_method(matrix: Matrix) -> RingElement:
    """Fraction free elimination; needs exact division in the ring."""
    check_square(matrix.shape, 'det')
    factory = matrix.factory
    m = matrix.to_lists()
    n = len(m)
    negate = False
    previous = factory.one()

    for k in range(n - 1):
        if m[k][k].is_zero():
            swap = next((i for i in range(k + 1, n) if not m[i][k].is_zero()),
                        None)
            if swap is None:
                return factory.zero()
            m[k], m[swap] = m[swap], m[k]
            negate = not negate
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                m[i][j] = (
                    m[i][j].multiply(m[k][k])
                    .subtract(m[i][k].multiply(m[k][j]))
                    .divide(previous)
                )
        previous = m[k][k]

    result = m[n - 1][n - 1]
    return result.negate() if negate else result


def laplace_method(matrix: Matrix) -> RingElement:
    """Cofactor expansion along the first column."""
    check_square(matrix.shape, 'det')
    return _laplace(matrix.to_lists(), matrix.factory)


def _laplace(m: list[list[RingElement]], factory) -> RingElement:
    n = len(m)
    if n == 1:
        return m[0][0]
    if n == 2:
        return m[0][0].multiply(m[1][1]).subtract(m[0][1].multiply(m[1][0]))
    result = factory.zero()
    for i in range(n):
        if m[i][0].is_zero():
            continue
        minor = [row[1:] for r, row in enumerate(m) if r != i]
        term = m[i][0].multiply(_laplace(minor, factory))
        result = result.subtract(term) if i % 2 else result.add(term)
    return result
