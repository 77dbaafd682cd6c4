"""
LaTeX output for elements, vectors and matrices.

    >>> out = io.StringIO()
    >>> with LatexWriter(out) as tex:
    ...     tex.start_equation(EQUATION)
    ...     tex.write('A = ')
    ...     tex.write(matrix)
    ...     tex.end_equation()

Matrices are written as ``pmatrix`` environments, vectors as column
vectors (``pmatrix``) or, after ``vectors_as_rows = True``, as
parenthesised rows. Rationals become ``\\frac{p}{q}``; other elements
are written with str().

Math content written while no equation is open is wrapped in an inline
``$...$`` equation. Strings are copied verbatim.
"""

from __future__ import annotations

from typing import Any, Iterable, TextIO

from pylinalg.core.exceptions import LatexError
from pylinalg.elements.base import RingElement
from pylinalg.elements.complex import Complex
from pylinalg.elements.rational import Rational
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector

IN_TEXT = 'inline'
EQUATION_STAR = 'equation*'
EQUATION = 'equation'
EQNARRAY = 'eqnarray'

SEPARATOR_COMMA = ', '
SEPARATOR_SPACE = '\\ '

_START = {
    IN_TEXT: '$',
    EQUATION_STAR: '\\begin{equation*}\n',
    EQUATION: '\\begin{equation}\n',
    EQNARRAY: '\\begin{eqnarray}\n',
}
_END = {
    IN_TEXT: '$',
    EQUATION_STAR: '\\end{equation*}',
    EQUATION: '\\end{equation}',
    EQNARRAY: '\\end{eqnarray}',
}


def element_to_latex(element: RingElement) -> str:
    if isinstance(element, Rational):
        return _rational(element)
    if isinstance(element, Complex):
        return _complex(element)
    return str(element)


def _rational(r: Rational) -> str:
    if r.denominator == 1:
        return str(r.numerator)
    sign = '-' if r.numerator < 0 else ''
    return f"{sign}\\frac{{{abs(r.numerator)}}}{{{r.denominator}}}"


def _complex(z: Complex) -> str:
    re, im = z.real, z.imag
    if im.is_zero():
        return _rational(re)
    if im.is_one():
        imag = 'i'
    elif im == im.factory.m_one():
        imag = '-i'
    else:
        imag = _rational(im) + 'i'
    if re.is_zero():
        return imag
    sign = '' if imag.startswith('-') else '+'
    return f"{_rational(re)}{sign}{imag}"


class LatexWriter:
    """
    Writes LaTeX markup to a text stream.

    Args:
        stream: Any object with a ``write(str)`` method
        row_separator: Separator between entries of row vectors and sets

    Equations cannot be nested; closing the writer closes an open
    equation.
    """

    def __init__(self, stream: TextIO, row_separator: str = SEPARATOR_COMMA):
        self._stream = stream
        self._kind: str | None = None
        self.row_separator = row_separator
        self.vectors_as_rows = False

    def is_equation_started(self) -> bool:
        return self._kind is not None

    def start_equation(self, kind: str = IN_TEXT) -> None:
        """
        Open an equation environment.

        Raises:
            LatexError: If an equation is already open, or kind is unknown
        """
        if self._kind is not None:
            raise LatexError(
                f"cannot open a {kind} equation inside a {self._kind} one"
            )
        if kind not in _START:
            raise LatexError(
                f"unknown equation kind {kind!r}; "
                f"choose one of {sorted(_START)}"
            )
        self._stream.write(_START[kind])
        self._kind = kind

    def end_equation(self) -> None:
        """
        Close the open equation environment.

        Raises:
            LatexError: If no equation is open
        """
        if self._kind is None:
            raise LatexError("no equation started")
        if self._kind != IN_TEXT:
            self._stream.write('\n')
        self._stream.write(_END[self._kind] + '\n')
        self._kind = None

    def write(self, obj: Any) -> None:
        """
        Write a string, element, vector, matrix or iterable of elements.

        Iterables other than vectors are written as sets.
        """
        if isinstance(obj, str):
            self._stream.write(obj)
            return
        text = self._math(obj)
        if self._kind is None:
            self.start_equation(IN_TEXT)
            self._stream.write(text)
            self.end_equation()
        else:
            self._stream.write(text)

    def _math(self, obj: Any) -> str:
        if isinstance(obj, Matrix):
            return self._matrix(obj)
        if isinstance(obj, Vector):
            return self._vector(obj)
        if isinstance(obj, RingElement):
            return element_to_latex(obj)
        if isinstance(obj, Iterable):
            return self._set(obj)
        raise LatexError(
            f"cannot write {obj!r} of type {type(obj).__name__} as LaTeX"
        )

    def _matrix(self, m: Matrix) -> str:
        rows = [' & '.join(element_to_latex(e) for e in r)
                for r in m.to_lists()]
        return ('\\begin{pmatrix}\n' + ' \\\\\n'.join(rows)
                + '\n\\end{pmatrix}')

    def _vector(self, v: Vector) -> str:
        entries = [element_to_latex(e) for e in v]
        if self.vectors_as_rows:
            return '\\left(' + self.row_separator.join(entries) + '\\right)'
        return '\\begin{pmatrix}' + ' \\\\ '.join(entries) + '\\end{pmatrix}'

    def _set(self, items: Iterable[Any]) -> str:
        parts = []
        for item in items:
            if isinstance(item, Matrix):
                parts.append(self._matrix(item))
            elif isinstance(item, Vector):
                parts.append(self._vector(item))
            elif isinstance(item, RingElement):
                parts.append(element_to_latex(item))
            else:
                parts.append(str(item))
        return '\\left\\{' + self.row_separator.join(parts) + '\\right\\}'

    def close(self) -> None:
        if self._kind is not None:
            self.end_equation()

    def __enter__(self) -> LatexWriter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
