"""
Generic result container for PyLinAlg solvers.

The Result class is the envelope that solver results use (see linsys).
It carries timing, the backend that produced the answer and any
non-fatal warnings alongside a module-specific payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (rank, free variables, consistency)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The module-specific payload type

    Attributes:
        params: Module-specific payload (solution vector, subspace, ...)
        info: Structured metadata (method, rank, consistency)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinearSystemParams(solution=x, subspace=None),
        ...     info={'method': 'gauss_jordan', 'rank': 3, 'consistent': True},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='exact_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
