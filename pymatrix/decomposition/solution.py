"""
QR solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from pymatrix.core.compute.tolerances import APPROX_EPS
from pymatrix.core.result import Result
from pymatrix.matrix.comparator import equals_approx
from pymatrix.matrix.constructors import eye
from pymatrix.matrix.multiply import multiply
from pymatrix.matrix.storage import Matrix


@dataclass(frozen=True)
class QRParams:
    """
    Parameter payload for a QR decomposition.

    Attributes:
        Q: Orthogonal factor (n x n)
        R: Upper triangular factor (n x m)
        diagonal: Diagonal of R, one entry per reflected column
        rank: Numerical rank estimated from |diagonal|
    """
    Q: Matrix
    R: Matrix
    diagonal: tuple[float, ...]
    rank: int


@dataclass
class QRSolution:
    """
    User-facing QR results.

    Wraps the backend Result. Unpacks as a pair:

        >>> Q, R = qr(a)
    """
    _result: Result[QRParams]

    @property
    def Q(self) -> Matrix:
        return self._result.params.Q

    @property
    def R(self) -> Matrix:
        return self._result.params.R

    @property
    def diagonal(self) -> tuple[float, ...]:
        return self._result.params.diagonal

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def is_full_rank(self) -> bool:
        n, m = self.R.shape
        return self.rank == min(n, m)

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[Matrix]:
        yield self.Q
        yield self.R

    def reconstruct(self) -> Matrix:
        """Q @ R, which approximates the decomposed matrix."""
        return multiply(self.Q, self.R)

    def is_orthogonal(self, eps: float = APPROX_EPS) -> bool:
        """Whether Qᵗ Q matches the identity within `eps`."""
        n = self.Q.rows
        return equals_approx(multiply(self.Q.transpose(), self.Q), eye(n), eps)

    def summary(self) -> str:
        n, m = self.R.shape
        lines = [
            f"QR decomposition ({self.backend_name})",
            f"  shape:  {n} x {m}",
            f"  rank:   {self.rank} of {min(n, m)}",
        ]
        if self.timing is not None:
            lines.append(f"  time:   {self.timing['total_seconds']:.6f}s")
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)
