"""
Convenience constructors for vectors and matrices over one ring.

    >>> f = LinAlgFactory(RATIONAL)
    >>> f.identity(3)
    >>> f.build_matrix([[1, 2], [3, 4]])
    >>> f.uniform_noise(4, 4, rng=np.random.default_rng(0))

The shape arguments follow one convention throughout: ``(rows, cols)``
gives a Matrix, a single ``length`` gives a Vector.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from pylinalg.core.validation import check_non_empty
from pylinalg.diagonal import DiagonalMatrix
from pylinalg.elements.base import RingElement, RingElementFactory, get_rng
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector


class LinAlgFactory:
    """Builds vectors and matrices whose entries come from ``factory``."""

    def __init__(self, factory: RingElementFactory):
        self.factory = factory

    def _build(
        self,
        rows: int,
        cols: int | None,
        make: Callable[[], RingElement],
    ) -> Matrix | Vector:
        check_non_empty(rows, 'rows' if cols is not None else 'length')
        if cols is None:
            return Vector._from_list([make() for _ in range(rows)],
                                     self.factory)
        check_non_empty(cols, 'cols')
        return Matrix._from_rows(
            [[make() for _ in range(cols)] for _ in range(rows)],
            self.factory,
        )

    def zeros(self, rows: int, cols: int | None = None) -> Matrix | Vector:
        zero = self.factory.zero()
        return self._build(rows, cols, lambda: zero)

    def ones(self, rows: int, cols: int | None = None) -> Matrix | Vector:
        one = self.factory.one()
        return self._build(rows, cols, lambda: one)

    def identity(self, size: int) -> Matrix:
        check_non_empty(size, 'size')
        one, zero = self.factory.one(), self.factory.zero()
        return Matrix._from_rows(
            [[one if i == j else zero for j in range(size)]
             for i in range(size)],
            self.factory,
        )

    def diagonal(self, values: Sequence[Any]) -> DiagonalMatrix:
        """Diagonal matrix with ``values`` on the diagonal."""
        return DiagonalMatrix(values, self.factory)

    def uniform_noise(
        self,
        rows: int,
        cols: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> Matrix | Vector:
        """Entries from the factory's random_value (uniform in [0, 1))."""
        generator = get_rng(rng)
        return self._build(
            rows, cols, lambda: self.factory.random_value(rng=generator)
        )

    def gaussian_noise(
        self,
        rows: int,
        cols: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> Matrix | Vector:
        """Entries from the factory's gaussian_random_value."""
        generator = get_rng(rng)
        return self._build(
            rows, cols, lambda: self.factory.gaussian_random_value(generator)
        )

    def build_matrix(self, values: Sequence[Sequence[Any]] | np.ndarray) -> Matrix:
        """Matrix from nested sequences or a 2-d numpy array."""
        if isinstance(values, np.ndarray):
            values = values.tolist()
        return Matrix(values, self.factory)

    def build_vector(self, values: Sequence[Any] | np.ndarray) -> Vector:
        """Vector from a sequence or a 1-d numpy array."""
        if isinstance(values, np.ndarray):
            values = values.tolist()
        return Vector(values, self.factory)
