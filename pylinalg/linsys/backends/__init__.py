"""
Linear system backends.

Available backends:
    ExactGaussJordanBackend: Gauss-Jordan elimination over any field
    NumericLstsqBackend: SciPy least squares for DoubleWrapper systems
"""

from pylinalg.linsys.backends.exact import ExactGaussJordanBackend
from pylinalg.linsys.backends.numeric import NumericLstsqBackend

__all__ = [
    "ExactGaussJordanBackend",
    "NumericLstsqBackend",
]
