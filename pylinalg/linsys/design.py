"""
Linear system design.

A design is the validated, immutable description of ``A x = b``. It
knows which ring the system lives in and its shape; it knows nothing
about how the system is going to be solved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from pylinalg.core.exceptions import InvalidOperationError
from pylinalg.core.validation import check_same_length
from pylinalg.elements.base import RingElementFactory
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    The system ``a x = b``.

    Construction:
        LinearSystemDesign.from_matrix(a, b)        # Matrix and Vector
        LinearSystemDesign.from_matrix(a, [1, 2])   # b converted to a's ring

    The matrix and vector are copied, so later changes to the caller's
    objects do not affect the design.
    """
    _a: Matrix
    _b: Vector

    @classmethod
    def from_matrix(cls, a: Matrix, b: Vector | Sequence[Any]) -> LinearSystemDesign:
        """
        Build a design from the coefficient matrix and right-hand side.

        Raises:
            DimensionError: If len(b) differs from the number of rows of a
            InvalidOperationError: If a and b live in different rings
        """
        if not isinstance(b, Vector):
            b = Vector(b, a.factory)
        check_same_length(a.rows, len(b), 'LinearSystemDesign')
        if b.factory is not a.factory:
            raise InvalidOperationError(
                f"matrix over {a.factory!r} but right-hand side over "
                f"{b.factory!r}"
            )
        return cls(_a=a.copy(), _b=b.copy())

    @property
    def a(self) -> Matrix:
        """Coefficient matrix (n_equations x n_unknowns)."""
        return self._a

    @property
    def b(self) -> Vector:
        """Right-hand side (n_equations,)."""
        return self._b

    @property
    def factory(self) -> RingElementFactory:
        return self._a.factory

    @property
    def n_equations(self) -> int:
        return self._a.rows

    @property
    def n_unknowns(self) -> int:
        return self._a.cols

    def is_homogeneous(self) -> bool:
        return self._b.is_zero()
