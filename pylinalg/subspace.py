"""
Affine and linear subspaces.

An affine subspace is ``v + span(g1, ..., gk)``. Solution sets of linear
systems are returned in this form (see linsys). A subspace without an
inhomogeneous part is the empty set, which is what an inconsistent
system solves to.

The generating system is kept as given until ``normalize()`` replaces it
by the non-zero rows of its row echelon form.
"""

from __future__ import annotations

from typing import Iterable

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_same_length
from pylinalg.elements.base import RingElementFactory
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector


class AffineLinearSubspace:
    """
    The set ``inhomogeneous_part + span(generating_system)``.

    Args:
        inhomogeneous_part: A point of the subspace, or None for the
            empty set
        generating_system: Vectors spanning the direction space

    Raises:
        DimensionError: If the vectors have different lengths
    """

    def __init__(
        self,
        inhomogeneous_part: Vector | None,
        generating_system: Iterable[Vector] = (),
    ):
        self._inhomogeneous_part = inhomogeneous_part
        self._generating_system = tuple(generating_system)
        if inhomogeneous_part is None and self._generating_system:
            raise ValidationError(
                "a non-empty generating system needs an inhomogeneous part"
            )
        if inhomogeneous_part is not None:
            for g in self._generating_system:
                check_same_length(
                    len(inhomogeneous_part), len(g), 'AffineLinearSubspace'
                )

    @property
    def inhomogeneous_part(self) -> Vector | None:
        return self._inhomogeneous_part

    @property
    def generating_system(self) -> tuple[Vector, ...]:
        return self._generating_system

    def is_empty(self) -> bool:
        return self._inhomogeneous_part is None

    @property
    def dimension(self) -> int:
        """Dimension of the direction space; -1 for the empty set."""
        if self.is_empty():
            return -1
        return _span_rank(self._generating_system)

    def contains(self, vector: Vector) -> bool:
        """Whether ``vector`` lies in this subspace."""
        if self.is_empty():
            return False
        check_same_length(len(self._inhomogeneous_part), len(vector),
                          'contains')
        return _in_span(vector.subtract(self._inhomogeneous_part),
                        self._generating_system)

    def normalize(self) -> AffineLinearSubspace:
        """
        Equivalent subspace whose generating system is in row echelon form.

        Zero generators are dropped. When the inhomogeneous part lies in
        the span, the result is a LinearSubspace.
        """
        if self.is_empty():
            return self
        generators = _echelon_basis(self._generating_system)
        v = self._inhomogeneous_part
        if isinstance(self, LinearSubspace) or _in_span(v, generators):
            return LinearSubspace(generators, len(v), v.factory)
        return AffineLinearSubspace(v, generators)

    def __eq__(self, other: object) -> bool:
        """Equality as sets of vectors."""
        if not isinstance(other, AffineLinearSubspace):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        if len(self._inhomogeneous_part) != len(other._inhomogeneous_part):
            return False
        rank = _span_rank(self._generating_system)
        if rank != _span_rank(other._generating_system):
            return False
        combined = self._generating_system + other._generating_system
        return (_span_rank(combined) == rank
                and other.contains(self._inhomogeneous_part))

    __hash__ = None

    def _span_text(self) -> str:
        return '< { ' + ', '.join(str(g) for g in self._generating_system) \
            + ' } >'

    def __str__(self) -> str:
        if self.is_empty():
            return '{ }'
        return f"{self._inhomogeneous_part} + {self._span_text()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


class LinearSubspace(AffineLinearSubspace):
    """
    The span of a generating system (a subspace through the origin).

    Args:
        generating_system: Spanning vectors
        length: Length of the vectors; needed only when the generating
            system is empty (the trivial subspace {0})
        factory: Element factory; needed only with ``length``

    Without generators, length or factory this is the empty set.
    """

    def __init__(
        self,
        generating_system: Iterable[Vector] = (),
        length: int | None = None,
        factory: RingElementFactory | None = None,
    ):
        generators = tuple(generating_system)
        if generators:
            first = generators[0]
            zero = Vector._from_list(
                [first.factory.zero()] * len(first), first.factory
            )
        elif length is not None and factory is not None:
            zero = Vector._from_list([factory.zero()] * length, factory)
        else:
            zero = None
        super().__init__(zero, generators)

    def __str__(self) -> str:
        if self.is_empty():
            return '{ }'
        return self._span_text()


def _span_rank(vectors: tuple[Vector, ...]) -> int:
    if not vectors:
        return 0
    return Matrix(vectors).rank()


def _in_span(vector: Vector, generators: tuple[Vector, ...]) -> bool:
    if vector.is_zero():
        return True
    if not generators:
        return False
    return _span_rank(generators + (vector,)) == _span_rank(generators)


def _echelon_basis(vectors: tuple[Vector, ...]) -> tuple[Vector, ...]:
    if not vectors:
        return ()
    echelon = Matrix(vectors).gauss_elim()
    return tuple(
        echelon.row(i) for i in range(echelon.rows)
        if not echelon.is_zero_row(i)
    )
