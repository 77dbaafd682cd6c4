"""
Input validation utilities for PyLinAlg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
    - Shapes are passed as plain tuples so vectors, matrices and
      augmented systems share the same checks
"""

from pylinalg.core.exceptions import DimensionError, ValidationError


def check_index(index: int, length: int, name: str) -> int:
    """
    Verify a 0-based index lies in [0, length) and return it.

    Negative indices count from the end, as for Python sequences.

    Raises:
        ValidationError: If index is not an int
        DimensionError: If index is out of range
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError(
            f"{name}: index must be an int, got {type(index).__name__}"
        )
    if index < 0:
        index += length
    if not 0 <= index < length:
        raise DimensionError(
            f"{name}: index out of range, expected 0 <= index < {length}, "
            f"got {index}",
            actual=index,
            expected=length,
        )
    return index


def check_non_empty(length: int, name: str) -> None:
    """
    Verify a length is positive.

    Raises:
        DimensionError: If length is zero
    """
    if length < 1:
        raise DimensionError(f"{name}: must not be empty", actual=length)


def check_same_length(length_a: int, length_b: int, operation: str) -> None:
    """
    Verify two vectors have the same length.

    Raises:
        DimensionError: If lengths differ
    """
    if length_a != length_b:
        raise DimensionError(
            f"{operation}: vector lengths differ ({length_a} vs {length_b})",
            actual=length_b,
            expected=length_a,
        )


def check_same_shape(
    shape_a: tuple[int, int],
    shape_b: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrices have the same shape.

    Raises:
        DimensionError: If shapes differ
    """
    if shape_a != shape_b:
        raise DimensionError(
            f"{operation}: matrix shapes differ "
            f"({shape_a[0]}x{shape_a[1]} vs {shape_b[0]}x{shape_b[1]})",
            actual=shape_b,
            expected=shape_a,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            actual=shape,
        )


def check_multipliable(
    shape_a: tuple[int, int],
    shape_b: tuple[int, int],
) -> None:
    """
    Verify cols(a) == rows(b).

    Raises:
        DimensionError: If the inner dimensions differ
    """
    if shape_a[1] != shape_b[0]:
        raise DimensionError(
            f"Tried to multiply a matrix with {shape_a[1]} columns and a "
            f"matrix with {shape_b[0]} rows",
            actual=shape_b[0],
            expected=shape_a[1],
        )
