"""
Over the finite field F7, vectors can be orthogonal to each other (and to
themselves) although they are linearly dependent.

    python examples/field_p_demo.py
"""

from pylinalg import Matrix, Vector, field_p_factory


def main():
    f7 = field_p_factory(7)

    u = Vector([1, 1, 5], f7)
    v = Vector([1, 3, 2], f7)
    w = Vector([6, 4, 5], f7)

    matrix = Matrix([u, v, w])
    print(matrix)
    print(f"Rank: {matrix.rank()}")

    print(f" < {u}, {v} > = {u.dot(v)}")
    print(f" < {u}, {w} > = {u.dot(w)}")
    print(f" < {v}, {w} > = {v.dot(w)}")


if __name__ == "__main__":
    main()
