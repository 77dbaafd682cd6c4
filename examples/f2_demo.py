"""
Elements of the two-element field F2 and matrices over it.

    python examples/f2_demo.py
"""

from pylinalg import F2_FACTORY, LinAlgFactory, Matrix


def elements():
    print("=========== Elements ============")
    a = F2_FACTORY.get(1)
    b = F2_FACTORY.get(0)
    c = F2_FACTORY.get(711)
    print(f"The integer 1 becomes {a}")
    print(f"The integer 0 becomes {b}")
    print(f"The integer 711 becomes {c}")
    print(f"{a}+{b}={a + b}")
    print(f"{a}+{a}={a + a}")
    print(f"{a}*{a}={a * a}")
    print(f"inverse({a})={a.invert()}")


def matrices():
    print("=========== Matrices ============")
    m1 = LinAlgFactory(F2_FACTORY).identity(3)
    print(f"m1=\n{m1}")

    m2 = Matrix([[0, 0, 0], [0, 0, 0], [0, 0, 0]], F2_FACTORY)
    m2.set_all(F2_FACTORY.one())
    print(f"m2=\n{m2}")

    m2.subtract_replace(m1)
    print(f"set m2 = m2-m1:\nm2=\n{m2}")
    print(f"det(m2)={m2.det()}")

    m2[0, 2] = F2_FACTORY.zero()
    print(f"set m2[0,2] = 0:\nm2=\n{m2}")
    print(f"det(m2)={m2.det()}")


def main():
    elements()
    matrices()


if __name__ == "__main__":
    main()
