"""
Determinant and inverse of a matrix of complex numbers, computed without
rounding.

    python examples/matrix_operations_demo.py
"""

from pylinalg import COMPLEX, Matrix


def main():
    c1 = COMPLEX.get(complex(1.0, 0.0))
    c2 = COMPLEX.get(complex(0.0, 1.0))

    m = Matrix([[c1, c2], [c2, c1 + c2]])
    print(f"Matrix m:\n{m}")
    print(f"Determinant of m: {m.det()}")
    print(f"Rank of m: {m.rank()}")
    print(f"Inverse of m:\n{m.inverse()}")


if __name__ == "__main__":
    main()
