"""
Householder QR backend.

Triangularizes a working copy of A column by column with Householder
reflections, then rebuilds Q from the stored reflection vectors. This is
the reference algorithm of the package; it performs no pivoting.
"""

from typing import Any

import numpy as np

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import QR_DEGENERACY_ATOL
from pymatrix.core.exceptions import NumericDegeneracyError
from pymatrix.core.result import Result
from pymatrix.core.validation import check_tolerance
from pymatrix.decomposition._common import numerical_rank, rank_warnings
from pymatrix.decomposition.solution import QRParams
from pymatrix.matrix.storage import Matrix


class HouseholderQRBackend:
    """
    QR decomposition by Householder reflections.

    Implements the DecompositionBackend protocol for Matrix -> QRParams.

    Args:
        degeneracy_tol: Normalization factors at or below this absolute
            value abort the decomposition with NumericDegeneracyError.
    """

    def __init__(self, degeneracy_tol: float = QR_DEGENERACY_ATOL):
        check_tolerance(degeneracy_tol, 'degeneracy_tol')
        self._degeneracy_tol = degeneracy_tol

    @property
    def name(self) -> str:
        return 'householder_qr'

    def solve(self, matrix: Matrix) -> Result[QRParams]:
        """
        Factor `matrix` (n x m) as Q (n x n) times R (n x m).

        Algorithm, for each column j < min(n, m):
            1. s = ||A[j:, j]||
            2. d[j] = -s if A[j, j] > 0 else s  (opposite sign of the pivot)
            3. fak = sqrt(s * (s + |A[j, j]|))
            4. A[j, j] -= d[j]; A[j:, j] /= fak, giving w with ||w||² = 2
            5. A[j:, i] -= w * (w · A[j:, i]) for every trailing column i
        R takes its diagonal from d and its strict upper triangle from A.
        Q is the transpose of the product of the reflectors (I - w wᵗ).

        Raises:
            NumericDegeneracyError: If fak <= degeneracy_tol for some column
        """
        timer = Timer()
        timer.start()

        A = matrix.to_numpy()
        n, m = A.shape
        steps = min(n, m)
        d = np.zeros(steps, dtype=A.dtype)

        with timer.section('reflect'):
            for j in range(steps):
                s = np.sqrt(np.dot(A[j:, j], A[j:, j]))
                d[j] = -s if A[j, j] > 0 else s

                fak = np.sqrt(s * (s + abs(A[j, j])))
                # `not >` also rejects NaN
                if not fak > self._degeneracy_tol:
                    raise NumericDegeneracyError(
                        f"Householder normalization factor for column {j} is "
                        f"{float(fak):.3g} (threshold {self._degeneracy_tol:.3g}); "
                        f"the trailing segment of column {j} vanishes.",
                        column=j,
                        factor=float(fak),
                        threshold=self._degeneracy_tol,
                    )

                A[j, j] -= d[j]
                A[j:, j] /= fak

                for i in range(j + 1, m):
                    proj = np.dot(A[j:, j], A[j:, i])
                    A[j:, i] -= A[j:, j] * proj

        with timer.section('reconstruct'):
            R = np.zeros((n, m), dtype=A.dtype)
            identity = np.eye(n, dtype=A.dtype)
            Qt = identity.copy()
            for i in range(steps):
                R[i, i] = d[i]
                R[i, i + 1:] = A[i, i + 1:]

                w = np.zeros(n, dtype=A.dtype)
                w[i:] = A[i:, i]
                Qt = (identity - np.outer(w, w)) @ Qt

        rank = numerical_rank(d, (n, m))
        messages = rank_warnings(rank, (n, m))

        timer.stop()

        params = QRParams(
            Q=Matrix.from_numpy(Qt).transpose(),
            R=Matrix.from_numpy(R),
            diagonal=tuple(float(x) for x in d),
            rank=rank,
        )

        info: dict[str, Any] = {
            'method': 'householder',
            'rank': rank,
            'degeneracy_tol': self._degeneracy_tol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=messages,
        )
