"""
Exception hierarchy for PyLinAlg.

All exceptions inherit from PyLinAlgError to allow catching any
library-specific error. Module-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinAlgError(Exception):
    """Base exception for all PyLinAlg errors."""
    pass


class ValidationError(PyLinAlgError):
    """
    Input validation failed.

    Raised when user-provided inputs (values, strings, primes, indices)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Shapes of vectors or matrices are incorrect or inconsistent.

    Attributes:
        actual: The offending shape or length, if known
        expected: The shape or length that was required, if known
    """

    def __init__(
        self,
        message: str,
        actual: tuple[int, ...] | int | None = None,
        expected: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class InvalidOperationError(PyLinAlgError):
    """
    The operation is not defined for the given operands.

    Raised e.g. when inverting an element of a ring that is not a field,
    comparing elements of different types, mixing elements of different
    prime fields, or parsing a string that does not denote an element.
    """
    pass


class NumericalError(PyLinAlgError):
    """
    Computation failed.

    Base class for errors arising from the arithmetic itself.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """
    Division by (or inversion of) a zero element.

    Also a ZeroDivisionError, so code written against plain Python
    numbers keeps working.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an operation requires invertibility but the matrix
    is rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Rank, if computed
        expected_rank: Rank that would have been needed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank


class LatexError(PyLinAlgError):
    """LaTeX output was used out of sequence (e.g. unbalanced equations)."""
    pass
