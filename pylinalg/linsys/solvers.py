"""
Solver dispatch for linear systems.

This module provides solve(), solution_space() and is_solvable() (public
API) and backend selection.
"""

from __future__ import annotations

from typing import Any, Literal, Sequence

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.protocols import Backend
from pylinalg.linsys.backends.exact import ExactGaussJordanBackend
from pylinalg.linsys.design import LinearSystemDesign
from pylinalg.linsys.solution import LinearSystemSolution
from pylinalg.matrix import Matrix
from pylinalg.subspace import AffineLinearSubspace
from pylinalg.vector import Vector

# Type alias for backend selection
BackendChoice = Literal['auto', 'exact', 'numeric']


def solve(
    a: Matrix,
    b: Vector | Sequence[Any],
    *,
    backend: BackendChoice = 'auto',
) -> LinearSystemSolution:
    """
    Solve the linear system ``a x = b``.

    Args:
        a: Coefficient matrix over a field
        b: Right-hand side; raw values are converted to a's ring
        backend: Computational backend to use:
            - 'auto': exact Gauss-Jordan elimination
            - 'exact': Gauss-Jordan elimination in the system's ring
            - 'numeric': SciPy least squares (DoubleWrapper only)

    Returns:
        LinearSystemSolution with a particular solution (None if the
        system is inconsistent) and the full solution set

    Raises:
        DimensionError: If len(b) differs from the number of rows of a
        InvalidOperationError: If the backend cannot handle the ring
        ValidationError: If the backend name is unknown

    Example:
        >>> a = Matrix([[1, 2], [3, 4]], RATIONAL)
        >>> solve(a, [5, 6]).solution
        (-4, 9/2)
    """
    design = LinearSystemDesign.from_matrix(a, b)
    backend_impl = _get_backend(backend, design)
    result = backend_impl.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def solution_space(
    a: Matrix,
    b: Vector | Sequence[Any],
    *,
    backend: BackendChoice = 'auto',
) -> AffineLinearSubspace:
    """
    All solutions of ``a x = b``.

    A LinearSubspace for homogeneous systems, the empty LinearSubspace
    for inconsistent ones.
    """
    return solve(a, b, backend=backend).subspace


def is_solvable(
    a: Matrix,
    b: Vector | Sequence[Any],
    *,
    backend: BackendChoice = 'auto',
) -> bool:
    return solve(a, b, backend=backend).consistent


def _get_backend(choice: BackendChoice, design: LinearSystemDesign) -> Backend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'exact'):
        return ExactGaussJordanBackend()

    elif choice == 'numeric':
        from pylinalg.linsys.backends.numeric import NumericLstsqBackend
        return NumericLstsqBackend()

    else:
        raise ValidationError(f"Unknown backend: {choice!r}")
