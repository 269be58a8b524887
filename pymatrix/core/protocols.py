"""
Core protocols for PyMatrix.

These define structural interfaces for element types and decomposition
backends. We use Protocol (structural typing) rather than ABC (nominal
typing) so that plain Python and NumPy scalars satisfy them as-is.

Design Principles:
    - Minimal contracts: prescribe only what an operation actually uses
    - Tiered: RealField extends Ring, mirroring core.capabilities
"""

from typing import Protocol, TypeVar, Any, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.core.result import Result

P = TypeVar('P')  # Parameter payload type
M = TypeVar('M')  # Input matrix type


class Ring(Protocol):
    """
    Element type with addition, subtraction and multiplication.

    Satisfied by int, float, complex and the NumPy numeric scalars.
    Enough for elementwise arithmetic, comparison and matrix multiply.
    """

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...

    def __abs__(self) -> Any: ...


class RealField(Ring, Protocol):
    """
    Ordered field element with division.

    Required by scalar division, the transcendental maps and QR.
    sqrt/log/trig come from NumPy ufuncs over the element dtype.
    """

    def __truediv__(self, other: Any, /) -> Any: ...

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


@runtime_checkable
class DecompositionBackend(Protocol[M, P]):
    """
    Protocol for decomposition backends.

    Each backend takes a matrix and produces a parameter payload wrapped
    in a Result. Backends are stateless apart from construction-time
    options, which makes them easy to test and swap.

    Type Parameters:
        M: The matrix type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'householder_qr', 'lapack_qr'
        """
        ...

    def solve(self, matrix: M) -> 'Result[P]':
        """
        Execute the decomposition.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the matrix is invalid for this backend
        """
        ...
