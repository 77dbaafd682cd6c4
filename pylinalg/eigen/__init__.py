"""
Eigenvalues of real matrices.

Public API:
    eigenvalues(matrix) -> Vector of Complex
    as_numpy(values) -> numpy complex array
"""

from pylinalg.eigen.decomposition import as_numpy, eigenvalues

__all__ = [
    "eigenvalues",
    "as_numpy",
]
