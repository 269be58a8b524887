"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Comparison and QR tolerance constants
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    ABSOLUTE,
    RELATIVE,
    APPROX_EPS,
    QR_DEGENERACY_ATOL,
    rank_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "ABSOLUTE",
    "RELATIVE",
    "APPROX_EPS",
    "QR_DEGENERACY_ATOL",
    "rank_tolerance",
]
