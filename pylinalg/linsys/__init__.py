"""
Linear equation systems.

Public API:
    solve(a, b, ...) -> LinearSystemSolution
    solution_space(a, b, ...) -> AffineLinearSubspace
    is_solvable(a, b, ...) -> bool

solve() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinalg.linsys import solve
    >>> result = solve(a, b)
    >>> print(result.solution)
    >>> print(result.summary())
"""

from pylinalg.linsys.design import LinearSystemDesign
from pylinalg.linsys.solution import LinearSystemParams, LinearSystemSolution
from pylinalg.linsys.solvers import is_solvable, solution_space, solve

__all__ = [
    "solve",
    "solution_space",
    "is_solvable",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "LinearSystemParams",
]
