"""
LAPACK reference backend for QR.

Delegates to scipy.linalg.qr (Householder QR in LAPACK geqrf/orgqr) and
wraps the factors in the same payload as the pure Householder backend.
Useful for cross-checking; it does not raise on degenerate columns.
"""

from typing import Any

import numpy as np
from scipy.linalg import qr as scipy_qr

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.decomposition._common import numerical_rank, rank_warnings
from pymatrix.decomposition.solution import QRParams
from pymatrix.matrix.storage import Matrix


class LapackQRBackend:
    """
    QR decomposition using LAPACK (via SciPy).

    Implements the DecompositionBackend protocol for Matrix -> QRParams.
    Produces the complete factorization: Q is n x n and R is n x m.
    """

    @property
    def name(self) -> str:
        return 'lapack_qr'

    def solve(self, matrix: Matrix) -> Result[QRParams]:
        timer = Timer()
        timer.start()

        X = matrix.to_numpy()
        n, m = X.shape

        with timer.section('factor'):
            Q, R = scipy_qr(X, mode='full')

        diagonal = np.diag(R)[:min(n, m)]
        rank = numerical_rank(diagonal, (n, m))
        messages = rank_warnings(rank, (n, m))

        timer.stop()

        params = QRParams(
            Q=Matrix.from_numpy(Q),
            R=Matrix.from_numpy(R),
            diagonal=tuple(float(x) for x in diagonal),
            rank=rank,
        )

        info: dict[str, Any] = {
            'method': 'lapack',
            'rank': rank,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=messages,
        )
