"""
Core infrastructure for PyLinAlg.

Shared abstractions and utilities used by the element types, the
vector/matrix layer and the solvers.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Index and shape validators
    compute: Timing and floating point tolerances
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinAlgError,
    ValidationError,
    DimensionError,
    InvalidOperationError,
    NumericalError,
    DivisionByZeroError,
    SingularMatrixError,
    LatexError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinAlgError",
    "ValidationError",
    "DimensionError",
    "InvalidOperationError",
    "NumericalError",
    "DivisionByZeroError",
    "SingularMatrixError",
    "LatexError",
]
