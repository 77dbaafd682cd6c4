"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinalg.core.result import Result
from pylinalg.subspace import AffineLinearSubspace
from pylinalg.vector import Vector

if TYPE_CHECKING:
    from pylinalg.linsys.design import LinearSystemDesign


@dataclass(frozen=True)
class LinearSystemParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends. ``solution`` is None
    and ``subspace`` is empty when the system is inconsistent.
    """
    solution: Vector | None
    subspace: AffineLinearSubspace
    rank: int
    n_free: int


@dataclass
class LinearSystemSolution:
    """
    User-facing result of solving ``a x = b``.

    Wraps the backend Result and the design it was computed from.
    """
    _result: Result[LinearSystemParams]
    _design: 'LinearSystemDesign'

    @property
    def solution(self) -> Vector | None:
        """One particular solution, or None if there is none."""
        return self._result.params.solution

    @property
    def subspace(self) -> AffineLinearSubspace:
        """The full solution set."""
        return self._result.params.subspace

    @property
    def consistent(self) -> bool:
        return self._result.params.solution is not None

    @property
    def unique(self) -> bool:
        return self.consistent and self._result.params.n_free == 0

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def n_free(self) -> int:
        """Number of free unknowns (dimension of the solution set)."""
        return self._result.params.n_free

    @property
    def design(self) -> 'LinearSystemDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short human readable report."""
        d = self._design
        lines = [
            f"Linear system: {d.n_equations} equations, "
            f"{d.n_unknowns} unknowns over {type(d.factory).__name__}",
            f"Backend: {self.backend_name}",
            f"Rank: {self.rank}",
        ]
        if not self.consistent:
            lines.append("No solution (inconsistent system)")
        elif self.unique:
            lines.append(f"Unique solution: {self.solution}")
        else:
            lines.append(f"Solution set ({self.n_free} free): {self.subspace}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return (f"LinearSystemSolution(consistent={self.consistent}, "
                f"rank={self.rank}, n_free={self.n_free}, "
                f"backend={self.backend_name!r})")
