"""
Diagonal matrices.

A DiagonalMatrix stores only its diagonal, so its storage is linear in
the size. It is a Matrix, so every Matrix operation accepts it; generic
operations see dense rows built on demand and return plain matrices.

Design decisions:
    - Operations that keep a matrix diagonal (sums and products of
      diagonal matrices, scaling, negation, inverse, powers, transpose)
      return DiagonalMatrix and take linear time
    - Products with dense matrices scale rows (D @ A) or columns (A @ D)
    - Writing a non-zero value off the diagonal raises
      InvalidOperationError; in-place operations are accepted only when
      the result is diagonal again
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from pylinalg import operators
from pylinalg.core.exceptions import (
    InvalidOperationError,
    SingularMatrixError,
)
from pylinalg.core.validation import (
    check_index,
    check_multipliable,
    check_non_empty,
    check_same_length,
)
from pylinalg.elements.base import RingElement, RingElementFactory
from pylinalg.elements.polynomial import Polynomial, polynomial_factory
from pylinalg.matrix import _SCALAR_TYPES, Matrix
from pylinalg.vector import Vector


class DiagonalMatrix(Matrix):
    """
    Square matrix with zeros off the diagonal.

        >>> d = DiagonalMatrix([1, 2, 3], RATIONAL)
        >>> str(d.det())
        '6'

    Args:
        diagonal: Diagonal entries from the top left to the bottom right
        factory: Factory used to convert raw values; inferred from the
            first entry when omitted
    """

    __slots__ = ('_diagonal',)

    def __init__(
        self,
        diagonal: Iterable[Any],
        factory: RingElementFactory | None = None,
    ):
        values = list(diagonal)
        check_non_empty(len(values), 'DiagonalMatrix diagonal')
        if factory is None:
            first = values[0]
            if not isinstance(first, RingElement):
                raise InvalidOperationError(
                    f"cannot infer the element type of {first!r}; "
                    f"pass a factory"
                )
            self._factory = first.factory
            convert = self._convert
        else:
            self._factory = factory
            convert = factory.get
        self._diagonal = [convert(v) for v in values]

    @classmethod
    def scalar(
        cls,
        size: int,
        value: Any,
        factory: RingElementFactory | None = None,
    ) -> DiagonalMatrix:
        """size x size matrix with ``value`` on every diagonal position."""
        check_non_empty(size, 'size')
        return cls([value] * size, factory)

    @classmethod
    def _from_diagonal(cls, diagonal: list[RingElement],
                       factory: RingElementFactory) -> DiagonalMatrix:
        d = cls.__new__(cls)
        d._diagonal = diagonal
        d._factory = factory
        return d

    def _new_diagonal(self, diagonal: list[RingElement]) -> DiagonalMatrix:
        return DiagonalMatrix._from_diagonal(diagonal, self._factory)

    @property
    def _rows(self) -> list[list[RingElement]]:
        zero = self._factory.zero()
        n = len(self._diagonal)
        return [
            [d if i == j else zero for j in range(n)]
            for i, d in enumerate(self._diagonal)
        ]

    def _line(self, i: int) -> list[RingElement]:
        entries = [self._factory.zero()] * len(self._diagonal)
        entries[i] = self._diagonal[i]
        return entries

    def _check_off_diagonal(self, i: int, j: int, element: RingElement,
                            operation: str) -> None:
        if i != j and not element.is_zero():
            raise InvalidOperationError(
                f"{operation}: entry ({i}, {j}) of a diagonal matrix must "
                f"stay zero, got {element}"
            )

    @staticmethod
    def _require_diagonal(m: Matrix, operation: str) -> list[RingElement]:
        if isinstance(m, DiagonalMatrix):
            return list(m._diagonal)
        rows = m.to_lists()
        for i, r in enumerate(rows):
            for j, e in enumerate(r):
                if i != j and not e.is_zero():
                    raise InvalidOperationError(
                        f"{operation}: the result is not diagonal "
                        f"(entry ({i}, {j}) is {e})"
                    )
        return [rows[i][i] for i in range(len(rows))]

    # ═══════════════════════════════════════════════════════════════════════
    # Shape and access
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def rows(self) -> int:
        return len(self._diagonal)

    @property
    def cols(self) -> int:
        return len(self._diagonal)

    @property
    def shape(self) -> tuple[int, int]:
        n = len(self._diagonal)
        return n, n

    @property
    def diagonal(self) -> Vector:
        """Copy of the diagonal entries."""
        return Vector._from_list(list(self._diagonal), self._factory)

    def set_diagonal(self, i: int, value: Any) -> None:
        i = check_index(i, len(self._diagonal), 'diagonal')
        self._diagonal[i] = self._convert(value)

    def __getitem__(self, key: tuple[int, int]) -> RingElement:
        i, j = self._index(key)
        return self._diagonal[i] if i == j else self._factory.zero()

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = self._index(key)
        element = self._convert(value)
        self._check_off_diagonal(i, j, element, 'setitem')
        if i == j:
            self._diagonal[i] = element

    def row(self, i: int) -> Vector:
        i = check_index(i, self.rows, 'row')
        return Vector._from_list(self._line(i), self._factory)

    def col(self, j: int) -> Vector:
        j = check_index(j, self.cols, 'col')
        return Vector._from_list(self._line(j), self._factory)

    def _set_line(self, i: int, value: Vector | Any, operation: str) -> None:
        n = len(self._diagonal)
        if isinstance(value, Vector):
            check_same_length(n, len(value), operation)
            entries = [self._convert(e) for e in value]
        else:
            entries = [self._convert(value)] * n
        for j, e in enumerate(entries):
            self._check_off_diagonal(i, j, e, operation)
        self._diagonal[i] = entries[i]

    def set_row(self, i: int, value: Vector | Any) -> None:
        """Replace row i; entries off the diagonal must be zero."""
        self._set_line(check_index(i, self.rows, 'row'), value, 'set_row')

    def set_col(self, j: int, value: Vector | Any) -> None:
        """Replace column j; entries off the diagonal must be zero."""
        self._set_line(check_index(j, self.cols, 'col'), value, 'set_col')

    def set_all(self, value: Any) -> None:
        element = self._convert(value)
        if len(self._diagonal) > 1:
            self._check_off_diagonal(0, 1, element, 'set_all')
        self._diagonal = [element] * len(self._diagonal)

    def _check_swap(self, i: int, k: int, operation: str) -> None:
        if i != k and not (self._diagonal[i].is_zero()
                           and self._diagonal[k].is_zero()):
            raise InvalidOperationError(
                f"{operation}: swapping {i} and {k} would put non-zero "
                f"entries off the diagonal"
            )

    def swap_rows(self, i: int, k: int) -> None:
        i = check_index(i, self.rows, 'row')
        k = check_index(k, self.rows, 'row')
        self._check_swap(i, k, 'swap_rows')

    def swap_cols(self, j: int, k: int) -> None:
        j = check_index(j, self.cols, 'col')
        k = check_index(k, self.cols, 'col')
        self._check_swap(j, k, 'swap_cols')

    def copy(self) -> DiagonalMatrix:
        return self._new_diagonal(list(self._diagonal))

    def to_matrix(self) -> Matrix:
        """Dense copy."""
        return Matrix._from_rows(self._rows, self._factory)

    # ═══════════════════════════════════════════════════════════════════════
    # Arithmetic
    # ═══════════════════════════════════════════════════════════════════════

    def apply_replace(
        self,
        fun_or_other: Any,
        fun: Callable[[RingElement, RingElement], Any] | None = None,
    ) -> None:
        result = self.apply(fun_or_other, fun)
        self._diagonal = self._require_diagonal(result, 'apply_replace')

    def _combine(self, other: DiagonalMatrix, operation: str,
                 fun: Callable[[RingElement, RingElement], RingElement]
                 ) -> DiagonalMatrix:
        self._check_other(other, operation)
        return self._new_diagonal(
            [fun(a, b) for a, b in zip(self._diagonal, other._diagonal)]
        )

    def add(self, other: Any) -> Matrix:
        if isinstance(other, DiagonalMatrix):
            return self._combine(other, 'add', operators.add)
        return super().add(other)

    def subtract(self, other: Any) -> Matrix:
        if isinstance(other, DiagonalMatrix):
            return self._combine(other, 'subtract', operators.subtract)
        return super().subtract(other)

    def multiply(
        self,
        other: Any,
        method: str | None = None,
    ) -> Matrix | Vector:
        """
        Product with a diagonal matrix (diagonal), a dense matrix (rows
        scaled by the diagonal), a vector, or a scalar (diagonal).
        ``method`` is ignored.
        """
        if isinstance(other, DiagonalMatrix):
            return self._combine(other, 'multiply', operators.multiply)
        if isinstance(other, Matrix):
            check_multipliable(self.shape, other.shape)
            return Matrix._from_rows(
                [[d.multiply(e) for e in r]
                 for d, r in zip(self._diagonal, other.to_lists())],
                self._factory,
            )
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        scalar = self._convert(other)
        return self._new_diagonal([d.multiply(scalar) for d in self._diagonal])

    def multiply_vector(self, vector: Vector) -> Vector:
        check_multipliable(self.shape, (len(vector), 1))
        return Vector._from_list(
            [d.multiply(e) for d, e in zip(self._diagonal, vector)],
            self._factory,
        )

    def multiply_replace(self, other: Any) -> None:
        """Replace by the product with a matrix or a scalar."""
        if isinstance(other, Vector):
            raise InvalidOperationError(
                "multiply_replace: the product with a vector is not a matrix"
            )
        self._diagonal = self._require_diagonal(
            self.multiply(other), 'multiply_replace'
        )

    def divide(self, scalar: Any) -> Matrix:
        if isinstance(scalar, Matrix):
            return super().divide(scalar)
        s = self._convert(scalar)
        return self._new_diagonal([d.divide(s) for d in self._diagonal])

    def negate(self) -> DiagonalMatrix:
        return self._new_diagonal([d.negate() for d in self._diagonal])

    def transpose(self) -> DiagonalMatrix:
        return self.copy()

    def hermitian(self) -> DiagonalMatrix:
        if hasattr(self._diagonal[0], 'conjugate'):
            return self._new_diagonal(
                [d.conjugate() for d in self._diagonal]
            )
        return self.copy()

    def trace(self) -> RingElement:
        return operators.sum_reduction(self._diagonal)

    def _identity(self) -> DiagonalMatrix:
        return self._new_diagonal([self._factory.one()] * self.rows)

    # ═══════════════════════════════════════════════════════════════════════
    # Elimination
    # ═══════════════════════════════════════════════════════════════════════

    def is_zero_row(self, i: int) -> bool:
        return self._diagonal[check_index(i, self.rows, 'row')].is_zero()

    def is_zero_col(self, j: int) -> bool:
        return self._diagonal[check_index(j, self.cols, 'col')].is_zero()

    def rank(self) -> int:
        """Number of non-zero diagonal entries."""
        return sum(1 for d in self._diagonal if not d.is_zero())

    def det(self) -> RingElement:
        """Product of the diagonal entries."""
        result = self._factory.one()
        for d in self._diagonal:
            result = result.multiply(d)
        return result

    def inverse(self) -> DiagonalMatrix:
        """
        Entry-wise inverse of the diagonal.

        Raises:
            SingularMatrixError: If a diagonal entry is zero
        """
        n = self.rows
        rank = self.rank()
        if rank < n:
            raise SingularMatrixError(
                f"matrix is singular: rank {rank} < {n}",
                matrix_name='diagonal matrix',
                rank=rank,
                expected_rank=n,
            )
        return self._new_diagonal([d.invert() for d in self._diagonal])

    def is_identity(self) -> bool:
        return all(d.is_one() for d in self._diagonal)

    def characteristic_polynomial(self) -> Polynomial:
        """Product of (x - d) over the diagonal entries."""
        poly = polynomial_factory(self._factory)
        x = poly.x()
        result = poly.one()
        for d in self._diagonal:
            result = result.multiply(x.subtract(poly.get(d)))
        return result

    # ═══════════════════════════════════════════════════════════════════════
    # Python protocol
    # ═══════════════════════════════════════════════════════════════════════

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, (Matrix, Vector)):
            return self.multiply(other)
        return NotImplemented

    def __rmatmul__(self, other: Any) -> Matrix:
        """A @ D scales the columns of A."""
        if not isinstance(other, Matrix):
            return NotImplemented
        check_multipliable(other.shape, self.shape)
        return Matrix._from_rows(
            [[e.multiply(d) for e, d in zip(r, self._diagonal)]
             for r in other.to_lists()],
            self._factory,
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DiagonalMatrix):
            return (self._factory is other._factory
                    and self._diagonal == other._diagonal)
        return super().__eq__(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"DiagonalMatrix({self.rows}x{self.cols}, {self._factory!r})"

    def __reduce__(self):
        return (DiagonalMatrix, (self._diagonal, self._factory))
