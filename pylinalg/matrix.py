"""
Matrices over an arbitrary ring.

A Matrix is a mutable rectangular array of elements from one factory,
indexed from 0 as ``m[i, j]``. Arithmetic returns new matrices; the
``*_replace`` variants modify in place.

Elimination (gauss_elim, gauss_jordan, rank, inverse) needs a field.
The determinant works over any commutative ring (see determinant).
"""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Callable, Iterable, Iterator

import numpy as np

from pylinalg import determinant as _determinant
from pylinalg import multiplication
from pylinalg import operators
from pylinalg.core.exceptions import (
    DimensionError,
    InvalidOperationError,
    SingularMatrixError,
)
from pylinalg.core.validation import (
    check_index,
    check_multipliable,
    check_non_empty,
    check_same_length,
    check_same_shape,
    check_square,
)
from pylinalg.elements.base import RingElement, RingElementFactory
from pylinalg.elements.polynomial import Polynomial, polynomial_factory
from pylinalg.vector import Vector

_SCALAR_TYPES = (RingElement, int, float, str, Fraction)

# Default search limit of Matrix.order()
ORDER_LIMIT = 10_000


class Matrix:
    """
    Rectangular matrix of ring elements.

    Args:
        rows: Nested sequences (or Vectors), one per row; entries are
            elements, or raw values when ``factory`` is given
        factory: Factory used to convert raw values; inferred from the
            first entry when omitted

    Raises:
        DimensionError: If there are no rows, no columns, or the rows
            have different lengths
        InvalidOperationError: If entries come from different factories
    """

    __slots__ = ('_rows', '_factory')
    __hash__ = None  # mutable

    def __init__(
        self,
        rows: Iterable[Iterable[Any]],
        factory: RingElementFactory | None = None,
    ):
        values = [list(r) for r in rows]
        check_non_empty(len(values), 'Matrix rows')
        check_non_empty(len(values[0]), 'Matrix columns')
        for r in values[1:]:
            check_same_length(len(values[0]), len(r), 'Matrix rows')
        if factory is None:
            first = values[0][0]
            if not isinstance(first, RingElement):
                raise InvalidOperationError(
                    f"cannot infer the element type of {first!r}; "
                    f"pass a factory"
                )
            factory = first.factory
            convert = self._convert
        else:
            convert = factory.get
        self._factory = factory
        self._rows = [[convert(v) for v in r] for r in values]

    @classmethod
    def _from_rows(cls, rows: list[list[RingElement]],
                   factory: RingElementFactory) -> Matrix:
        m = cls.__new__(cls)
        m._rows = rows
        m._factory = factory
        return m

    def _convert(self, value: Any) -> RingElement:
        if isinstance(value, RingElement):
            if value.factory is not self._factory:
                raise InvalidOperationError(
                    f"{value} ({type(value).__name__}) does not belong to "
                    f"{self._factory!r}"
                )
            return value
        return self._factory.get(value)

    def _new(self, rows: list[list[RingElement]]) -> Matrix:
        return Matrix._from_rows(rows, self._factory)

    def _check_other(self, other: Matrix, operation: str) -> None:
        check_same_shape(self.shape, other.shape, operation)
        if other._factory is not self._factory:
            raise InvalidOperationError(
                f"{operation}: matrices over different rings "
                f"({self._factory!r} and {other._factory!r})"
            )

    # ═══════════════════════════════════════════════════════════════════════
    # Shape and access
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def factory(self) -> RingElementFactory:
        return self._factory

    @property
    def rows(self) -> int:
        return len(self._rows)

    @property
    def cols(self) -> int:
        return len(self._rows[0])

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0])

    def is_square(self) -> bool:
        return self.rows == self.cols

    def _index(self, key: tuple[int, int]) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise InvalidOperationError(
                f"matrix index must be a (row, col) pair, got {key!r}"
            )
        return (check_index(key[0], self.rows, 'row'),
                check_index(key[1], self.cols, 'col'))

    def __getitem__(self, key: tuple[int, int]) -> RingElement:
        i, j = self._index(key)
        return self._rows[i][j]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        i, j = self._index(key)
        self._rows[i][j] = self._convert(value)

    def __iter__(self) -> Iterator[Vector]:
        """Iterate over the rows as vectors."""
        for i in range(self.rows):
            yield self.row(i)

    def to_lists(self) -> list[list[RingElement]]:
        """Copy of the entries as a list of rows."""
        return [list(r) for r in self._rows]

    def to_numpy(self, dtype: Any = float) -> np.ndarray:
        """
        Entries as a numpy array.

        Raises:
            InvalidOperationError: If entries cannot be converted to dtype
        """
        is_complex = np.issubdtype(np.dtype(dtype), np.complexfloating)
        convert = complex if is_complex else float
        try:
            return np.array(
                [[convert(e) for e in r] for r in self._rows], dtype=dtype
            )
        except TypeError:
            raise InvalidOperationError(
                f"entries of type {type(self._rows[0][0]).__name__} cannot "
                f"be converted to {np.dtype(dtype).name}"
            ) from None

    def row(self, i: int) -> Vector:
        return Vector._from_list(
            list(self._rows[check_index(i, self.rows, 'row')]), self._factory
        )

    def col(self, j: int) -> Vector:
        j = check_index(j, self.cols, 'col')
        return Vector._from_list([r[j] for r in self._rows], self._factory)

    def set_row(self, i: int, value: Vector | Any) -> None:
        """Replace row i by a vector, or set all its entries to a scalar."""
        i = check_index(i, self.rows, 'row')
        if isinstance(value, Vector):
            check_same_length(self.cols, len(value), 'set_row')
            self._rows[i] = [self._convert(e) for e in value]
        else:
            self._rows[i] = [self._convert(value)] * self.cols

    def set_col(self, j: int, value: Vector | Any) -> None:
        """Replace column j by a vector, or set all its entries to a scalar."""
        j = check_index(j, self.cols, 'col')
        if isinstance(value, Vector):
            check_same_length(self.rows, len(value), 'set_col')
            for r, e in zip(self._rows, value):
                r[j] = self._convert(e)
        else:
            element = self._convert(value)
            for r in self._rows:
                r[j] = element

    def set_all(self, value: Any) -> None:
        element = self._convert(value)
        self._rows = [[element] * self.cols for _ in range(self.rows)]

    def without_row(self, i: int) -> Matrix:
        i = check_index(i, self.rows, 'row')
        if self.rows == 1:
            raise DimensionError("cannot remove the only row of a matrix")
        return self._new([list(r) for k, r in enumerate(self._rows) if k != i])

    def without_col(self, j: int) -> Matrix:
        j = check_index(j, self.cols, 'col')
        if self.cols == 1:
            raise DimensionError("cannot remove the only column of a matrix")
        return self._new([r[:j] + r[j + 1:] for r in self._rows])

    def insert_row(self, i: int, vector: Vector) -> Matrix:
        """Copy with ``vector`` inserted before row i; i == rows appends."""
        i = check_index(i, self.rows + 1, 'row')
        check_same_length(self.cols, len(vector), 'insert_row')
        rows = self.to_lists()
        rows.insert(i, [self._convert(e) for e in vector])
        return self._new(rows)

    def insert_col(self, j: int, vector: Vector) -> Matrix:
        """New matrix with ``vector`` inserted before column j."""
        j = check_index(j, self.cols + 1, 'col')
        check_same_length(self.rows, len(vector), 'insert_col')
        return self._new([
            r[:j] + [self._convert(e)] + r[j:]
            for r, e in zip(self._rows, vector)
        ])

    def submatrix(self, i0: int, i1: int, j0: int, j1: int) -> Matrix:
        """Rows i0..i1 and columns j0..j1, bounds inclusive."""
        i0 = check_index(i0, self.rows, 'i0')
        i1 = check_index(i1, self.rows, 'i1')
        j0 = check_index(j0, self.cols, 'j0')
        j1 = check_index(j1, self.cols, 'j1')
        if i1 < i0 or j1 < j0:
            raise DimensionError(
                f"empty submatrix: rows {i0}..{i1}, cols {j0}..{j1}"
            )
        return self._new([r[j0:j1 + 1] for r in self._rows[i0:i1 + 1]])

    def swap_rows(self, i: int, k: int) -> None:
        i = check_index(i, self.rows, 'row')
        k = check_index(k, self.rows, 'row')
        self._rows[i], self._rows[k] = self._rows[k], self._rows[i]

    def swap_cols(self, j: int, k: int) -> None:
        j = check_index(j, self.cols, 'col')
        k = check_index(k, self.cols, 'col')
        for r in self._rows:
            r[j], r[k] = r[k], r[j]

    def copy(self) -> Matrix:
        return self._new(self.to_lists())

    def to_vector(self) -> Vector:
        """
        The single row of a one-row matrix.

        Raises:
            DimensionError: If the matrix has more than one row
        """
        if self.rows != 1:
            raise DimensionError(
                f"cannot convert a matrix with {self.rows} rows to a vector",
                actual=self.rows,
                expected=1,
            )
        return self.row(0)

    # ═══════════════════════════════════════════════════════════════════════
    # Element-wise application
    # ═══════════════════════════════════════════════════════════════════════

    def apply(
        self,
        fun_or_other: Any,
        fun: Callable[[RingElement, RingElement], Any] | None = None,
    ) -> Matrix:
        """
        Apply an operator entry by entry.

        ``m.apply(f)`` maps a monadic operator. ``m.apply(n, f)`` combines
        with a matrix ``n`` (entry by entry) or a scalar ``n`` (with every
        entry) through a dyadic operator.
        """
        if fun is None:
            return self._new([[fun_or_other(e) for e in r] for r in self._rows])
        other = fun_or_other
        if isinstance(other, Matrix):
            self._check_other(other, 'apply')
            return self._new([
                [fun(a, b) for a, b in zip(ra, rb)]
                for ra, rb in zip(self._rows, other._rows)
            ])
        scalar = self._convert(other)
        return self._new([[fun(a, scalar) for a in r] for r in self._rows])

    def apply_replace(
        self,
        fun_or_other: Any,
        fun: Callable[[RingElement, RingElement], Any] | None = None,
    ) -> None:
        self._rows = self.apply(fun_or_other, fun)._rows

    def compare(self, other: Any, comparator: operators.Comparator) -> Matrix:
        one, zero = self._factory.one(), self._factory.zero()
        return self.apply(other, lambda a, b: one if comparator(a, b) else zero)

    def and_(self, other: Any) -> Matrix:
        return self.apply(other, operators.and_)

    def or_(self, other: Any) -> Matrix:
        return self.apply(other, operators.or_)

    def not_(self) -> Matrix:
        return self.apply(operators.not_)

    def lt(self, other: Any) -> Matrix:
        return self.compare(other, operators.lt)

    def le(self, other: Any) -> Matrix:
        return self.compare(other, operators.le)

    def gt(self, other: Any) -> Matrix:
        return self.compare(other, operators.gt)

    def ge(self, other: Any) -> Matrix:
        return self.compare(other, operators.ge)

    def eq(self, other: Any) -> Matrix:
        return self.compare(other, operators.eq)

    def ne(self, other: Any) -> Matrix:
        return self.compare(other, operators.ne)

    # ═══════════════════════════════════════════════════════════════════════
    # Arithmetic
    # ═══════════════════════════════════════════════════════════════════════

    def add(self, other: Any) -> Matrix:
        return self.apply(other, operators.add)

    def subtract(self, other: Any) -> Matrix:
        return self.apply(other, operators.subtract)

    def multiply(
        self,
        other: Any,
        method: str | None = None,
    ) -> Matrix | Vector:
        """
        Matrix product with a Matrix, matrix-vector product with a Vector,
        or multiplication of every entry by a scalar.

        ``method`` selects the algorithm for matrix products (see
        multiplication); the module default is used when omitted.
        """
        if isinstance(other, Matrix):
            return multiplication.multiply(self, other, method)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        return self.apply(other, operators.multiply)

    def multiply_vector(self, vector: Vector) -> Vector:
        check_multipliable(self.shape, (len(vector), 1))
        return Vector._from_list(
            [self.row(i).dot(vector) for i in range(self.rows)],
            self._factory,
        )

    def array_multiply(self, other: Matrix) -> Matrix:
        """Entry-wise product."""
        return self.apply(other, operators.multiply)

    def divide(self, scalar: Any) -> Matrix:
        return self.apply(scalar, operators.divide)

    def negate(self) -> Matrix:
        return self.apply(operators.negate)

    def add_replace(self, other: Any) -> None:
        self.apply_replace(other, operators.add)

    def subtract_replace(self, other: Any) -> None:
        self.apply_replace(other, operators.subtract)

    def multiply_replace(self, other: Any) -> None:
        """Replace by the matrix product with a Matrix, or scale by a scalar."""
        if isinstance(other, Matrix):
            self._rows = self.multiply(other)._rows
        else:
            self.apply_replace(other, operators.multiply)

    def divide_replace(self, other: Any) -> None:
        """Divide entry-wise by a Matrix, or every entry by a scalar."""
        self.apply_replace(other, operators.divide)

    def transpose(self) -> Matrix:
        return self._new([list(c) for c in zip(*self._rows)])

    def hermitian(self) -> Matrix:
        """Conjugate transpose; the plain transpose for real element types."""
        t = self.transpose()
        if hasattr(self._rows[0][0], 'conjugate'):
            return t.apply(lambda e: e.conjugate())
        return t

    def trace(self) -> RingElement:
        check_square(self.shape, 'trace')
        return operators.sum_reduction(
            self._rows[i][i] for i in range(self.rows)
        )

    def power(self, n: int) -> Matrix:
        """A^n by repeated squaring; negative n uses the inverse."""
        check_square(self.shape, 'power')
        base = self if n >= 0 else self.inverse()
        result = self._identity()
        n = abs(n)
        while n:
            if n & 1:
                result = result.multiply(base)
            n >>= 1
            if n:
                base = base.multiply(base)
        return result

    def _identity(self) -> Matrix:
        one, zero = self._factory.one(), self._factory.zero()
        return self._new([
            [one if i == j else zero for j in range(self.rows)]
            for i in range(self.rows)
        ])

    # ═══════════════════════════════════════════════════════════════════════
    # Reductions
    # ═══════════════════════════════════════════════════════════════════════

    def _entries(self) -> Iterator[RingElement]:
        for r in self._rows:
            yield from r

    def reduce(self, reduction: operators.Reduction) -> RingElement:
        return reduction(self._entries())

    def sum(self) -> RingElement:
        return operators.sum_reduction(self._entries())

    def mean(self) -> RingElement:
        return self.sum().divide(self._factory.get(self.rows * self.cols))

    def min(self) -> RingElement:
        return operators.min_reduction(self._entries())

    def max(self) -> RingElement:
        return operators.max_reduction(self._entries())

    def sum_rows(self) -> Vector:
        """Sum of all rows (a vector of length cols)."""
        total = self.row(0)
        for i in range(1, self.rows):
            total.add_replace(self.row(i))
        return total

    def sum_cols(self) -> Vector:
        """Sum of all columns (a vector of length rows)."""
        return self.transpose().sum_rows()

    def mean_rows(self) -> Vector:
        return self.sum_rows().divide(self._factory.get(self.rows))

    def mean_cols(self) -> Vector:
        return self.sum_cols().divide(self._factory.get(self.cols))

    # ═══════════════════════════════════════════════════════════════════════
    # Elimination
    # ═══════════════════════════════════════════════════════════════════════

    def _find_pivot(self, rows: list[list[RingElement]], row: int,
                    col: int) -> bool:
        """Bring a non-zero entry of column col to position row, if any."""
        if not rows[row][col].is_zero():
            return True
        for candidate in range(row + 1, len(rows)):
            if not rows[candidate][col].is_zero():
                rows[row], rows[candidate] = rows[candidate], rows[row]
                return True
        return False

    def gauss_elim(self) -> Matrix:
        """
        Row echelon form by Gaussian elimination.

        Pivots are the first non-zero entries found below the current row;
        rows are swapped as needed. Needs a field.
        """
        m = self.to_lists()
        n_rows, n_cols = self.shape
        row = 0
        for col in range(n_cols):
            if row >= n_rows:
                break
            if not self._find_pivot(m, row, col):
                continue
            pivot = m[row]
            inverse = pivot[col].invert()
            for j in range(row + 1, n_rows):
                factor = m[j][col].multiply(inverse)
                if factor.is_zero():
                    continue
                m[j] = m[j][:col] + [
                    m[j][k].subtract(factor.multiply(pivot[k]))
                    for k in range(col, n_cols)
                ]
            row += 1
        return self._new(m)

    def gauss_jordan(self) -> Matrix:
        """
        Reduced row echelon form by Gauss-Jordan elimination.

        Each pivot is scaled to one and its column cleared above and below.
        Needs a field.
        """
        m = self.to_lists()
        n_rows, n_cols = self.shape
        row = 0
        for col in range(n_cols):
            if row >= n_rows:
                break
            if not self._find_pivot(m, row, col):
                continue
            inverse = m[row][col].invert()
            m[row] = m[row][:col] + [e.multiply(inverse) for e in m[row][col:]]
            pivot = m[row]
            for j in range(n_rows):
                factor = m[j][col]
                if j == row or factor.is_zero():
                    continue
                m[j] = m[j][:col] + [
                    m[j][k].subtract(pivot[k].multiply(factor))
                    for k in range(col, n_cols)
                ]
            row += 1
        return self._new(m)

    def is_zero_row(self, i: int) -> bool:
        i = check_index(i, self.rows, 'row')
        return all(e.is_zero() for e in self._rows[i])

    def is_zero_col(self, j: int) -> bool:
        j = check_index(j, self.cols, 'col')
        return all(r[j].is_zero() for r in self._rows)

    def rank(self) -> int:
        """Number of non-zero rows of the row echelon form."""
        echelon = self.gauss_elim()
        rank = echelon.rows
        while rank > 0 and echelon.is_zero_row(rank - 1):
            rank -= 1
        return rank

    def det(self) -> RingElement:
        """
        Determinant (see pylinalg.determinant).

        Raises:
            DimensionError: If the matrix is not square
        """
        return _determinant.determinant(self)

    def inverse(self) -> Matrix:
        """
        Inverse by Gauss-Jordan elimination of [A | I].

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix has no inverse
        """
        check_square(self.shape, 'inverse')
        n = self.rows
        identity = self._identity()
        augmented = self._new([
            r + i for r, i in zip(self.to_lists(), identity.to_lists())
        ]).gauss_jordan()
        left = augmented.submatrix(0, n - 1, 0, n - 1)
        if not left.is_identity():
            rank = left.rank()
            raise SingularMatrixError(
                f"matrix is singular: rank {rank} < {n}",
                matrix_name='matrix',
                rank=rank,
                expected_rank=n,
            )
        return augmented.submatrix(0, n - 1, n, 2 * n - 1)

    def is_identity(self) -> bool:
        check_square(self.shape, 'is_identity')
        return all(
            e.is_one() if i == j else e.is_zero()
            for i, r in enumerate(self._rows)
            for j, e in enumerate(r)
        )

    def order(self, maximum: int | None = None) -> int:
        """
        Smallest k >= 1 with A^k = I.

        Returns -1 if A is not invertible over the integers (rank below
        the size, or determinant other than 1 or -1), -2 if no such k
        exists up to ``maximum`` (default ORDER_LIMIT). Unimodular
        matrices of infinite order, such as [[1, 1], [0, 1]] over the
        rationals, always end with -2.
        """
        check_square(self.shape, 'order')
        if maximum is None:
            maximum = ORDER_LIMIT
        if self.rank() != self.cols:
            return -1
        d = self.det()
        if not (d.is_one() or d == self._factory.m_one()):
            return -1
        power = self
        k = 1
        while not power.is_identity():
            if k >= maximum:
                return -2
            power = power.multiply(self)
            k += 1
        return k

    # ═══════════════════════════════════════════════════════════════════════
    # Polynomials and eigenvalues
    # ═══════════════════════════════════════════════════════════════════════

    def characteristic_polynomial(self) -> Polynomial:
        """det(x*I - A) over the polynomial ring of the element type."""
        check_square(self.shape, 'characteristic_polynomial')
        poly = polynomial_factory(self._factory)
        x = poly.x()
        zero = poly.zero()
        n = self.rows
        entries = [
            [(x if i == j else zero).subtract(poly.get(self._rows[i][j]))
             for j in range(n)]
            for i in range(n)
        ]
        return Matrix._from_rows(entries, poly).det()

    def minimal_polynomial(self) -> Polynomial:
        """Square-free part of the characteristic polynomial."""
        return self.characteristic_polynomial().square_free_part()

    def eig(self) -> Vector:
        """Eigenvalues as a vector of Complex (see pylinalg.eigen)."""
        from pylinalg.eigen import eigenvalues
        return eigenvalues(self)

    # ═══════════════════════════════════════════════════════════════════════
    # Python protocol
    # ═══════════════════════════════════════════════════════════════════════

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, (Matrix,) + _SCALAR_TYPES):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, (Matrix,) + _SCALAR_TYPES):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Matrix:
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.negate().add(other)

    def __mul__(self, other: Any) -> Matrix:
        """Scalar multiplication; use @ for matrix products."""
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.apply(other, operators.multiply)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Matrix:
        if not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return self.divide(other)

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return multiplication.multiply(self, other)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        return NotImplemented

    def __pow__(self, n: int) -> Matrix:
        if not isinstance(n, int):
            return NotImplemented
        return self.power(n)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._factory is other._factory
            and all(a == b for ra, rb in zip(self._rows, other._rows)
                    for a, b in zip(ra, rb))
        )

    def __str__(self) -> str:
        lines = [','.join(str(e) for e in r) for r in self._rows]
        return '[' + '\n '.join(lines) + ']'

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, {self._factory!r})"

    def __reduce__(self):
        return (Matrix, (self._rows, self._factory))
