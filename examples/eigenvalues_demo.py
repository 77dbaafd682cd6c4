"""
Eigenvalues of real matrices, which may be complex.

    python examples/eigenvalues_demo.py
"""

from pylinalg import DOUBLE, DiagonalMatrix, Matrix


def main():
    diagonal = DiagonalMatrix([1.0, 2.0, 3.0], DOUBLE)
    print(f"Diagonal matrix:\n{diagonal}")
    # the eigenvalues of a diagonal matrix are its diagonal entries
    print(f"All eigenvalues: {diagonal.eig()}")

    m = Matrix([[1.0, -1.0], [1.0, 1.0]], DOUBLE)
    print(f"New matrix:\n{m}")
    print(f"All eigenvalues: {m.eig()}")


if __name__ == "__main__":
    main()
