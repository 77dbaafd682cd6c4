"""
Numeric backend for linear systems.

Least squares through LAPACK (scipy.linalg.lstsq, SVD based gelsd) for
systems over DoubleWrapper. The least squares minimiser is accepted as a
solution only if its residual is negligible; the null space comes from
the same SVD via scipy.linalg.null_space.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from scipy import linalg

from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.tolerances import CONDITION_THRESHOLD, select_tolerance
from pylinalg.core.exceptions import InvalidOperationError
from pylinalg.core.result import Result
from pylinalg.elements.doublewrapper import DoubleWrapper, FACTORY as DOUBLE
from pylinalg.linsys.design import LinearSystemDesign
from pylinalg.linsys.solution import LinearSystemParams
from pylinalg.subspace import AffineLinearSubspace, LinearSubspace
from pylinalg.vector import Vector


def _to_vector(values: np.ndarray) -> Vector:
    return Vector._from_list([DoubleWrapper(float(v)) for v in values], DOUBLE)


class NumericLstsqBackend:
    """
    Backend using SciPy's SVD based least squares solver.

    Implements the Backend protocol for LinearSystemDesign ->
    LinearSystemParams. Only DoubleWrapper systems are accepted.
    """

    @property
    def name(self) -> str:
        return 'numeric_lstsq'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve via least squares and check the residual.

        Algorithm:
            1. x = argmin ||A x - b|| (minimum norm) and the singular values
            2. Condition number from the non-zero singular values selects
               the tolerance tier
            3. Consistent iff ||A x - b|| <= atol + rtol * ||b||
            4. Generators: orthonormal basis of the null space of A

        Raises:
            InvalidOperationError: If the system is not over DoubleWrapper
        """
        if design.factory is not DOUBLE:
            raise InvalidOperationError(
                f"{self.name}: only DoubleWrapper systems are supported, "
                f"got {type(design.factory.zero()).__name__}"
            )

        timer = Timer()
        timer.start()

        a = design.a.to_numpy()
        b = np.array([float(e) for e in design.b], dtype=np.float64)

        with timer.section('lstsq'):
            x, _, rank, singular_values = linalg.lstsq(a, b)
            rank = int(rank)

        with timer.section('diagnostics'):
            if rank == 0:
                condition = np.inf
            else:
                condition = float(singular_values[0]
                                  / singular_values[rank - 1])
            tol = select_tolerance(condition)
            residual = float(np.linalg.norm(a @ x - b))
            consistent = residual <= tol.atol + tol.rtol * float(
                np.linalg.norm(b)
            )

        warning_messages: list[str] = []
        if rank > 0 and condition > CONDITION_THRESHOLD:
            msg = (f"ill-conditioned system (condition number {condition:.3g}); "
                   f"the solution may be inaccurate")
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            warning_messages.append(msg)

        n = design.n_unknowns
        with timer.section('null_space'):
            if consistent:
                basis = linalg.null_space(a)
                generators = [_to_vector(basis[:, k])
                              for k in range(basis.shape[1])]
                solution = _to_vector(x)
                if design.is_homogeneous():
                    subspace = LinearSubspace(generators, n, DOUBLE)
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
            n_free=n - rank if consistent else 0,
        )

        info: dict[str, Any] = {
            'method': 'lstsq',
            'rank': rank,
            'n_free': params.n_free,
            'consistent': consistent,
            'residual_norm': residual,
            'condition_number': condition,
            'tolerance': tol.name,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warning_messages),
        )
