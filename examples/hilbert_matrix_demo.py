"""
Solve H x = (1, ..., 1) for Hilbert matrices H of growing dimension,
once with floats and once exactly, and print the squared distance
between the two solutions. The error of the floating point solution
grows exponentially with the dimension.

    python examples/hilbert_matrix_demo.py [max_dimension]
"""

import sys

from pylinalg import DOUBLE, RATIONAL, LinAlgFactory, Matrix, Vector
from pylinalg.linsys import solve


def hilbert_matrix(dimension, factory):
    one = factory.one()
    return Matrix(
        [[one / factory.get(row + col + 1) for col in range(dimension)]
         for row in range(dimension)],
        factory,
    )


def main(max_dimension=20):
    for dimension in range(1, max_dimension + 1):
        approx = solve(hilbert_matrix(dimension, DOUBLE),
                       LinAlgFactory(DOUBLE).ones(dimension)).solution
        exact = solve(hilbert_matrix(dimension, RATIONAL),
                      LinAlgFactory(RATIONAL).ones(dimension)).solution
        error = exact.squared_distance(Vector(list(approx), RATIONAL))
        print(f"dimension = {dimension} -> error = {float(error)}")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 20)
