"""
Matrix multiplication algorithms.

All algorithms return the same product; they differ in the number of
element multiplications, which matters for expensive exact elements
(large rationals, polynomials).

    simple              row-by-column scalar products
    school              the classic triple loop (default)
    strassen_original   Strassen 1969: 7 multiplications, 18 additions
    strassen_winograd   Winograd's variant: 7 multiplications, 15 additions
    strassen_bodrato    Bodrato 2008: 7 multiplications, 15 additions,
                        with a cheaper schedule for squaring (a @ a)

The Strassen family pads both operands with zeros to a common power of
two square, recurses on quadrants until the blocks are no larger than
the truncation point, multiplies those blocks with the school method and
crops the result back to shape.
"""

from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from pylinalg.core.exceptions import ValidationError
from pylinalg.core.validation import check_multipliable
from pylinalg.elements.base import RingElement, RingElementFactory

if TYPE_CHECKING:
    from pylinalg.matrix import Matrix

Block = list[list[RingElement]]

STRASSEN_TRUNCATION_POINT = 48

DEFAULT_METHOD = 'school'


def set_truncation_point(n: int) -> None:
    """Set the block size below which the Strassen family uses school."""
    global STRASSEN_TRUNCATION_POINT
    if n < 1:
        raise ValidationError(f"truncation point must be positive, got {n}")
    STRASSEN_TRUNCATION_POINT = n


def set_default_method(name: str) -> None:
    """Select the algorithm used by Matrix.multiply and the @ operator."""
    global DEFAULT_METHOD
    if name not in METHODS:
        raise ValidationError(
            f"unknown multiplication method {name!r}; "
            f"choose one of {sorted(METHODS)}"
        )
    DEFAULT_METHOD = name


def multiply(a: Matrix, b: Matrix, method: str | None = None) -> Matrix:
    """Multiply with the named (or the default) method."""
    name = DEFAULT_METHOD if method is None else method
    if name not in METHODS:
        raise ValidationError(
            f"unknown multiplication method {name!r}; "
            f"choose one of {sorted(METHODS)}"
        )
    return METHODS[name](a, b)


# ═══════════════════════════════════════════════════════════════════════════
# Classic algorithms
# ═══════════════════════════════════════════════════════════════════════════

def simple(a: Matrix, b: Matrix) -> Matrix:
    """Entry (i, j) is the scalar product of row i of a and column j of b."""
    from pylinalg.matrix import Matrix
    check_multipliable(a.shape, b.shape)
    columns = [b.col(j) for j in range(b.cols)]
    return Matrix._from_rows(
        [[a.row(i).dot(c) for c in columns] for i in range(a.rows)],
        a.factory,
    )


def school(a: Matrix, b: Matrix) -> Matrix:
    from pylinalg.matrix import Matrix
    check_multipliable(a.shape, b.shape)
    return Matrix._from_rows(
        _school(a.to_lists(), b.to_lists(), a.factory), a.factory
    )


def _school(a: Block, b: Block, factory: RingElementFactory) -> Block:
    inner = len(b)
    cols = len(b[0])
    result = []
    for row in a:
        out = []
        for j in range(cols):
            total = factory.zero()
            for k in range(inner):
                total = total.add(row[k].multiply(b[k][j]))
            out.append(total)
        result.append(out)
    return result


# ═══════════════════════════════════════════════════════════════════════════
# Strassen family
# ═══════════════════════════════════════════════════════════════════════════

def strassen_original(a: Matrix, b: Matrix) -> Matrix:
    return _strassen(a, b, _original_step)


def strassen_winograd(a: Matrix, b: Matrix) -> Matrix:
    return _strassen(a, b, _winograd_step)


def strassen_bodrato(a: Matrix, b: Matrix) -> Matrix:
    return _strassen(a, b, _bodrato_step)


Step = Callable[[Block, Block, RingElementFactory], Block]


def _strassen(a: Matrix, b: Matrix, step: Step) -> Matrix:
    from pylinalg.matrix import Matrix
    check_multipliable(a.shape, b.shape)
    factory = a.factory
    rows, cols = a.rows, b.cols
    largest = max(a.rows, a.cols, b.cols)
    if largest <= STRASSEN_TRUNCATION_POINT:
        return school(a, b)

    n = 1
    while n < largest:
        n *= 2
    squaring = a is b
    pa = _pad(a.to_lists(), n, factory)
    pb = pa if squaring else _pad(b.to_lists(), n, factory)
    product = _recurse(pa, pb, factory, step)
    return Matrix._from_rows([row[:cols] for row in product[:rows]], factory)


def _recurse(a: Block, b: Block, factory: RingElementFactory,
             step: Step) -> Block:
    if len(a) <= STRASSEN_TRUNCATION_POINT:
        return _school(a, b, factory)
    return step(a, b, factory)


def _pad(m: Block, n: int, factory: RingElementFactory) -> Block:
    zero = factory.zero()
    padded = [row + [zero] * (n - len(row)) for row in m]
    padded.extend([zero] * n for _ in range(n - len(m)))
    return padded


def _split(m: Block) -> tuple[Block, Block, Block, Block]:
    h = len(m) // 2
    return (
        [row[:h] for row in m[:h]],
        [row[h:] for row in m[:h]],
        [row[:h] for row in m[h:]],
        [row[h:] for row in m[h:]],
    )


def _join(c11: Block, c12: Block, c21: Block, c22: Block) -> Block:
    return ([r1 + r2 for r1, r2 in zip(c11, c12)]
            + [r1 + r2 for r1, r2 in zip(c21, c22)])


def _add(x: Block, y: Block) -> Block:
    return [[p.add(q) for p, q in zip(rx, ry)] for rx, ry in zip(x, y)]


def _sub(x: Block, y: Block) -> Block:
    return [[p.subtract(q) for p, q in zip(rx, ry)] for rx, ry in zip(x, y)]


def _original_step(a: Block, b: Block, factory: RingElementFactory) -> Block:
    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)

    def mul(x: Block, y: Block) -> Block:
        return _recurse(x, y, factory, _original_step)

    p1 = mul(_add(a11, a22), _add(b11, b22))
    p2 = mul(_add(a21, a22), b11)
    p3 = mul(a11, _sub(b12, b22))
    p4 = mul(a22, _sub(b21, b11))
    p5 = mul(_add(a11, a12), b22)
    p6 = mul(_sub(a21, a11), _add(b11, b12))
    p7 = mul(_sub(a12, a22), _add(b21, b22))

    return _join(
        _add(_sub(_add(p1, p4), p5), p7),
        _add(p3, p5),
        _add(p2, p4),
        _add(_sub(_add(p1, p3), p2), p6),
    )


def _winograd_step(a: Block, b: Block, factory: RingElementFactory) -> Block:
    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)

    def mul(x: Block, y: Block) -> Block:
        return _recurse(x, y, factory, _winograd_step)

    s1 = _add(a21, a22)
    s2 = _sub(s1, a11)
    s3 = _sub(a11, a21)
    s4 = _sub(a12, s2)
    t1 = _sub(b12, b11)
    t2 = _sub(b22, t1)
    t3 = _sub(b22, b12)
    t4 = _sub(t2, b21)

    p1 = mul(a11, b11)
    p2 = mul(a12, b21)
    p3 = mul(s4, b22)
    p4 = mul(a22, t4)
    p5 = mul(s1, t1)
    p6 = mul(s2, t2)
    p7 = mul(s3, t3)

    u2 = _add(p1, p6)
    u3 = _add(u2, p7)
    u4 = _add(u2, p5)
    return _join(
        _add(p1, p2),
        _add(u4, p3),
        _sub(u3, p4),
        _add(u3, p5),
    )


def _bodrato_step(a: Block, b: Block, factory: RingElementFactory) -> Block:
    a11, a12, a21, a22 = _split(a)
    squaring = a is b

    def mul(x: Block, y: Block) -> Block:
        return _recurse(x, y, factory, _bodrato_step)

    s1 = _add(a22, a12)
    s2 = _sub(a22, a21)
    s3 = _add(s2, a12)
    s4 = _sub(s3, a11)

    if squaring:
        p1 = mul(s1, s1)
        p2 = mul(s2, s2)
        p3 = mul(s3, s3)
        p4 = mul(a11, a11)
        p5 = mul(a12, a21)
        p6 = mul(s4, a12)
        p7 = mul(a21, s4)
    else:
        b11, b12, b21, b22 = _split(b)
        t1 = _add(b22, b12)
        t2 = _sub(b22, b21)
        t3 = _add(t2, b12)
        t4 = _sub(t3, b11)
        p1 = mul(s1, t1)
        p2 = mul(s2, t2)
        p3 = mul(s3, t3)
        p4 = mul(a11, b11)
        p5 = mul(a12, b21)
        p6 = mul(s4, b12)
        p7 = mul(a21, t4)

    u1 = _add(p3, p5)
    u2 = _sub(p1, u1)
    u3 = _sub(u1, p2)
    return _join(
        _add(p4, p5),
        _sub(u3, p6),
        _sub(u2, p7),
        _add(p2, u2),
    )


METHODS: dict[str, Callable[[Matrix, Matrix], Matrix]] = {
    'simple': simple,
    'school': school,
    'strassen_original': strassen_original,
    'strassen_winograd': strassen_winograd,
    'strassen_bodrato': strassen_bodrato,
}
