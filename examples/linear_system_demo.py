"""
A particular solution and the solution space of an underdetermined
system over the rationals.

    python examples/linear_system_demo.py
"""

from pylinalg import RATIONAL, Matrix, Vector
from pylinalg.linsys import solution_space, solve


def main():
    r1 = RATIONAL.get(0.1)
    r2 = RATIONAL.get(1.2)
    r3 = RATIONAL.get('1/9')
    r4 = RATIONAL.get(1)
    r5 = r2 + r3
    r6 = r1 * r4

    a = Matrix([[r1, r2, r3], [r4, r5, r6]])
    b = Vector([r1, r2])

    result = solve(a, b)
    print(f"A =\n{a}")
    print(f"b = {b}")
    print(f"x = {result.solution}")
    print(f"all solutions: {solution_space(a, b)}")
    print(result.summary())


if __name__ == "__main__":
    main()
