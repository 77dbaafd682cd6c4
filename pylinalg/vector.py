"""
Vectors over an arbitrary ring.

A Vector is a mutable, fixed-length sequence of elements from one factory.
Arithmetic returns new vectors; the ``*_replace`` variants modify in
place. Element-wise comparison and logic methods return vectors of
one()/zero(), while the Python comparison operators compare vectors
lexicographically so that vectors can be sorted.
"""

from __future__ import annotations

from fractions import Fraction
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, TYPE_CHECKING

from pylinalg import operators
from pylinalg.core.exceptions import (
    DimensionError,
    InvalidOperationError,
)
from pylinalg.core.validation import (
    check_index,
    check_non_empty,
    check_same_length,
)
from pylinalg.elements.base import RingElement, RingElementFactory

if TYPE_CHECKING:
    from pylinalg.matrix import Matrix


class Vector:
    """
    Fixed-length vector of ring elements.

    Args:
        entries: Elements, or raw values when ``factory`` is given
        factory: Factory used to convert raw values; inferred from the
            first entry when omitted

    Raises:
        DimensionError: If entries is empty
        InvalidOperationError: If entries come from different factories
            or cannot be converted
    """

    __slots__ = ('_entries', '_factory')
    __hash__ = None  # mutable

    def __init__(
        self,
        entries: Iterable[Any],
        factory: RingElementFactory | None = None,
    ):
        values = list(entries)
        check_non_empty(len(values), 'Vector')
        if factory is None:
            first = values[0]
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
        self._entries = [convert(v) for v in values]

    @classmethod
    def _from_list(cls, entries: list[RingElement],
                   factory: RingElementFactory) -> Vector:
        v = cls.__new__(cls)
        v._entries = entries
        v._factory = factory
        return v

    def _convert(self, value: Any) -> RingElement:
        if isinstance(value, RingElement):
            if value.factory is not self._factory:
                raise InvalidOperationError(
                    f"{value} ({type(value).__name__}) does not belong to "
                    f"{self._factory!r}"
                )
            return value
        return self._factory.get(value)

    def _new(self, entries: list[RingElement]) -> Vector:
        return Vector._from_list(entries, self._factory)

    def _check_other(self, other: Vector, operation: str) -> None:
        check_same_length(len(self), len(other), operation)
        if other._factory is not self._factory:
            raise InvalidOperationError(
                f"{operation}: vectors over different rings "
                f"({self._factory!r} and {other._factory!r})"
            )

    # --- sequence protocol ---

    @property
    def factory(self) -> RingElementFactory:
        return self._factory

    def __len__(self) -> int:
        return len(self._entries)

    def length(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RingElement]:
        return iter(self._entries)

    def __getitem__(self, index: int | slice) -> RingElement | Vector:
        if isinstance(index, slice):
            return Vector(self._entries[index], self._factory)
        return self._entries[check_index(index, len(self), 'Vector')]

    def __setitem__(self, index: int, value: Any) -> None:
        self._entries[check_index(index, len(self), 'Vector')] = \
            self._convert(value)

    def to_list(self) -> list[RingElement]:
        return list(self._entries)

    def copy(self) -> Vector:
        return self._new(list(self._entries))

    def set(self, other: Vector) -> None:
        """Overwrite all entries with those of ``other``."""
        self._check_other(other, 'set')
        self._entries[:] = other._entries

    def set_all(self, value: Any) -> None:
        element = self._convert(value)
        self._entries = [element] * len(self)

    def swap_entries(self, i: int, j: int) -> None:
        i = check_index(i, len(self), 'swap_entries')
        j = check_index(j, len(self), 'swap_entries')
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]

    # --- generic application ---

    def apply(
        self,
        fun_or_other: Any,
        fun: Callable[[RingElement, RingElement], Any] | None = None,
    ) -> Vector:
        """
        Apply an operator entry by entry.

        ``v.apply(f)`` maps a monadic operator. ``v.apply(w, f)`` combines
        with a vector ``w`` (entry by entry) or a scalar ``w`` (with every
        entry) through a dyadic operator.
        """
        if fun is None:
            return self._new([fun_or_other(e) for e in self._entries])
        other = fun_or_other
        if isinstance(other, Vector):
            self._check_other(other, 'apply')
            return self._new(
                [fun(a, b) for a, b in zip(self._entries, other._entries)]
            )
        scalar = self._convert(other)
        return self._new([fun(a, scalar) for a in self._entries])

    def apply_replace(
        self,
        fun_or_other: Any,
        fun: Callable[[RingElement, RingElement], Any] | None = None,
    ) -> None:
        self._entries = self.apply(fun_or_other, fun)._entries

    def compare(self, other: Any, comparator: operators.Comparator) -> Vector:
        """one() where ``comparator(self[i], other[i])`` holds, else zero()."""
        one, zero = self._factory.one(), self._factory.zero()
        return self.apply(other, lambda a, b: one if comparator(a, b) else zero)

    # --- arithmetic ---

    def add(self, other: Any) -> Vector:
        return self.apply(other, operators.add)

    def subtract(self, other: Any) -> Vector:
        return self.apply(other, operators.subtract)

    def multiply(self, scalar: Any) -> Vector:
        """Multiply every entry by a scalar."""
        if isinstance(scalar, Vector):
            raise InvalidOperationError(
                "use dot() for the scalar product and array_multiply() for "
                "the entry-wise product of two vectors"
            )
        return self.apply(scalar, operators.multiply)

    def array_multiply(self, other: Vector) -> Vector:
        """Entry-wise product."""
        return self.apply(other, operators.multiply)

    def divide(self, scalar: Any) -> Vector:
        return self.apply(scalar, operators.divide)

    def negate(self) -> Vector:
        return self._new([e.negate() for e in self._entries])

    def add_replace(self, other: Any) -> None:
        self.apply_replace(other, operators.add)

    def subtract_replace(self, other: Any) -> None:
        self.apply_replace(other, operators.subtract)

    def multiply_replace(self, other: Any) -> None:
        """Multiply in place by a scalar, or entry-wise by a vector."""
        self.apply_replace(other, operators.multiply)

    def divide_replace(self, scalar: Any) -> None:
        self.apply_replace(scalar, operators.divide)

    def dot(self, other: Vector) -> RingElement:
        """Scalar product sum(self[i] * other[i])."""
        self._check_other(other, 'dot')
        return operators.sum_reduction(
            a.multiply(b) for a, b in zip(self._entries, other._entries)
        )

    def multiply_matrix(self, matrix: Matrix) -> Vector:
        """Row vector times matrix."""
        if len(self) != matrix.rows:
            raise DimensionError(
                f"Tried to multiply a vector of length {len(self)} and a "
                f"matrix with {matrix.rows} rows",
                actual=matrix.rows,
                expected=len(self),
            )
        return self._new(
            [self.dot(matrix.col(j)) for j in range(matrix.cols)]
        )

    def cross(self, other: Vector) -> Vector:
        """
        Cross product of two vectors of length 3.

        Raises:
            DimensionError: If either vector does not have length 3
        """
        if len(self) != 3 or len(other) != 3:
            raise DimensionError(
                f"cross product needs vectors of length 3, got "
                f"{len(self)} and {len(other)}",
                actual=(len(self), len(other)),
                expected=3,
            )
        self._check_other(other, 'cross')
        a, b = self._entries, other._entries
        return self._new([
            a[1].multiply(b[2]).subtract(a[2].multiply(b[1])),
            a[2].multiply(b[0]).subtract(a[0].multiply(b[2])),
            a[0].multiply(b[1]).subtract(a[1].multiply(b[0])),
        ])

    def outer(self, other: Vector) -> Matrix:
        """The len(self) x len(other) matrix self[i] * other[j]."""
        from pylinalg.matrix import Matrix
        return Matrix._from_rows(
            [[a.multiply(b) for b in other._entries] for a in self._entries],
            self._factory,
        )

    # --- norms and distances ---

    def l1_norm(self) -> RingElement:
        return self.apply(operators.abs_).sum()

    def l2_norm(self) -> RingElement:
        """
        Euclidean norm.

        Raises:
            InvalidOperationError: If the element type has no sqrt()
        """
        total = self.apply(operators.square).sum()
        sqrt = getattr(total, 'sqrt', None)
        if sqrt is None:
            raise InvalidOperationError(
                f"l2_norm cannot be calculated for {type(total).__name__}: "
                f"no square root"
            )
        return sqrt()

    def squared_distance(self, other: Vector) -> RingElement:
        return self.subtract(other).apply(operators.square).sum()

    def distance(self, other: Vector) -> RingElement:
        return self.subtract(other).l2_norm()

    def manhattan_distance(self, other: Vector) -> RingElement:
        return self.subtract(other).l1_norm()

    def cosine(self, other: Vector) -> RingElement:
        self._check_other(other, 'cosine')
        return self.dot(other).divide(self.l2_norm()).divide(other.l2_norm())

    # --- element-wise logic and comparison ---

    def and_(self, other: Any) -> Vector:
        return self.apply(other, operators.and_)

    def or_(self, other: Any) -> Vector:
        return self.apply(other, operators.or_)

    def not_(self) -> Vector:
        return self.apply(operators.not_)

    def lt(self, other: Any) -> Vector:
        return self.compare(other, operators.lt)

    def le(self, other: Any) -> Vector:
        return self.compare(other, operators.le)

    def gt(self, other: Any) -> Vector:
        return self.compare(other, operators.gt)

    def ge(self, other: Any) -> Vector:
        return self.compare(other, operators.ge)

    def eq(self, other: Any) -> Vector:
        return self.compare(other, operators.eq)

    def ne(self, other: Any) -> Vector:
        return self.compare(other, operators.ne)

    # --- reductions ---

    def reduce(self, reduction: operators.Reduction) -> RingElement:
        return reduction(self._entries)

    def sum(self) -> RingElement:
        return operators.sum_reduction(self._entries)

    def min(self) -> RingElement:
        return operators.min_reduction(self._entries)

    def max(self) -> RingElement:
        return operators.max_reduction(self._entries)

    def mean(self) -> RingElement:
        return self.sum().divide(self._factory.get(len(self)))

    def element_product(self) -> RingElement:
        product = self._factory.one()
        for e in self._entries:
            product = product.multiply(e)
        return product

    def find(self, value: Any) -> list[int]:
        """Indices of the entries equal to ``value``."""
        target = self._convert(value)
        return [i for i, e in enumerate(self._entries) if e == target]

    def sort(self) -> Vector:
        """Sorted copy (ascending by the element type's order)."""
        return self._new(
            sorted(self._entries, key=cmp_to_key(lambda a, b: a.compare_to(b)))
        )

    def is_zero(self) -> bool:
        return all(e.is_zero() for e in self._entries)

    def compare_to(self, other: Vector) -> int:
        """
        Lexicographic comparison.

        Raises:
            InvalidOperationError: If the lengths differ
        """
        if len(other) != len(self):
            raise InvalidOperationError(
                "comparison of vectors with distinct lengths is not permitted"
            )
        for a, b in zip(self._entries, other._entries):
            c = a.compare_to(b)
            if c != 0:
                return c
        return 0

    # --- conversion ---

    def to_matrix(self) -> Matrix:
        """The vector as a single-column matrix."""
        from pylinalg.matrix import Matrix
        return Matrix._from_rows([[e] for e in self._entries], self._factory)

    def repmat(self, m: int) -> Matrix:
        """An m x len(self) matrix whose rows are all this vector."""
        from pylinalg.matrix import Matrix
        check_non_empty(m, 'repmat')
        return Matrix._from_rows(
            [list(self._entries) for _ in range(m)], self._factory
        )

    # --- Python operators ---

    def _operand(self, other: Any) -> Any:
        if isinstance(other, (Vector, RingElement, int, float, str, Fraction)):
            return other
        return None

    def __add__(self, other: Any) -> Vector:
        return NotImplemented if self._operand(other) is None \
            else self.add(other)

    def __radd__(self, other: Any) -> Vector:
        return NotImplemented if self._operand(other) is None \
            else self.add(other)

    def __sub__(self, other: Any) -> Vector:
        return NotImplemented if self._operand(other) is None \
            else self.subtract(other)

    def __rsub__(self, other: Any) -> Vector:
        return NotImplemented if self._operand(other) is None \
            else self.negate().add(other)

    def __mul__(self, other: Any) -> Vector:
        if isinstance(other, Vector) or self._operand(other) is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Vector:
        if isinstance(other, Vector) or self._operand(other) is None:
            return NotImplemented
        return self.divide(other)

    def __matmul__(self, other: Any) -> RingElement | Vector:
        from pylinalg.matrix import Matrix
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, Matrix):
            return self.multiply_matrix(other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return self.negate()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            len(self) == len(other)
            and self._factory is other._factory
            and all(a == b for a, b in zip(self._entries, other._entries))
        )

    def __lt__(self, other: Vector) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Vector) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Vector) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Vector) -> bool:
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return '(' + ', '.join(str(e) for e in self._entries) + ')'

    def __repr__(self) -> str:
        return f"Vector({self})"

    def __reduce__(self):
        return (Vector, (self._entries, self._factory))
