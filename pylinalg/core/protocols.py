"""
Core protocols for PyLinAlg.

These define structural interfaces that solver backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that a backend does not need to inherit from anything in this package.

Element types, by contrast, share real behaviour and therefore use an
ABC (see pylinalg.elements.base).
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a design (an immutable description of
    the problem) and produce a Result with a module-specific payload.

    Backends are stateless; all configuration is passed via the design
    or at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{kind}_{algorithm}'
        Examples: 'exact_gauss_jordan', 'numeric_lstsq'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            InvalidOperationError: If the design's element type is not
                supported by this backend
            ValidationError: If design is invalid for this backend
        """
        ...
