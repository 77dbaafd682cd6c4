"""
Exact backend for linear systems.

Gauss-Jordan elimination of the augmented matrix [A | b] in the ring of
the system. Works over every field element type and never rounds; with
DoubleWrapper it is ordinary floating point elimination without any
tolerance on the pivots.
"""

from __future__ import annotations

from typing import Any

from pylinalg.core.compute.timing import Timer
from pylinalg.core.exceptions import InvalidOperationError
from pylinalg.core.result import Result
from pylinalg.elements.base import FieldElement
from pylinalg.linsys.design import LinearSystemDesign
from pylinalg.linsys.solution import LinearSystemParams
from pylinalg.matrix import Matrix
from pylinalg.subspace import AffineLinearSubspace, LinearSubspace
from pylinalg.vector import Vector


class ExactGaussJordanBackend:
    """
    Backend using Gauss-Jordan elimination in the system's own ring.

    Implements the Backend protocol for LinearSystemDesign ->
    LinearSystemParams.
    """

    @property
    def name(self) -> str:
        return 'exact_gauss_jordan'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve by reduction to reduced row echelon form.

        Algorithm:
            1. Reduce [A | b] with Gauss-Jordan elimination
            2. The system is inconsistent iff some row is zero in A but
               not in b
            3. Pivot unknowns take the reduced right-hand side, free
               unknowns are zero (particular solution)
            4. Each free unknown f contributes the generator with -1 at f
               and the reduced column f at the pivot unknowns

        Raises:
            InvalidOperationError: If the elements are not from a field
        """
        factory = design.factory
        if not isinstance(factory.zero(), FieldElement):
            raise InvalidOperationError(
                f"{self.name}: needs a field, got elements of "
                f"{type(factory.zero()).__name__}"
            )

        timer = Timer()
        timer.start()

        n = design.n_unknowns
        with timer.section('elimination'):
            augmented = Matrix._from_rows(
                [r + [b] for r, b in zip(design.a.to_lists(), design.b)],
                factory,
            )
            reduced = augmented.gauss_jordan().to_lists()

        with timer.section('extraction'):
            pivots: list[int] = []
            consistent = True
            for row in reduced:
                lead = next(
                    (j for j in range(n) if not row[j].is_zero()), None
                )
                if lead is None:
                    if not row[n].is_zero():
                        consistent = False
                    continue
                pivots.append(lead)

            rank = len(pivots)
            free = [j for j in range(n) if j not in pivots]

            if consistent:
                zero = factory.zero()
                particular = [zero] * n
                for r, p in enumerate(pivots):
                    particular[p] = reduced[r][n]
                generators = []
                for f in free:
                    g = [zero] * n
                    g[f] = factory.m_one()
                    for r, p in enumerate(pivots):
                        g[p] = reduced[r][f]
                    generators.append(Vector._from_list(g, factory))
                solution = Vector._from_list(particular, factory)
                if solution.is_zero():
                    subspace = LinearSubspace(generators, n, factory)
                else:
                    subspace = AffineLinearSubspace(solution, generators)
            else:
                solution = None
                subspace = LinearSubspace()

        timer.stop()

        params = LinearSystemParams(
            solution=solution,
            subspace=subspace,
            rank=rank,
            n_free=len(free) if consistent else 0,
        )

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'rank': rank,
            'n_free': params.n_free,
            'consistent': consistent,
            'pivot_columns': tuple(pivots),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
