"""
Generic result container for PyMatrix decompositions.

The Result class provides a standardized envelope that every backend
returns. This enables shared tooling for timing, warnings and
reproducibility while each decomposition defines its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, tolerances)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

from pymatrix._version import __version__

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result."""
    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The decomposition-specific parameter payload type

    Attributes:
        params: Decomposition payload (factors, rank, ...)
        info: Structured metadata (method, tolerances, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=QRParams(Q=q, R=r, diagonal=(3.0, 2.0), rank=2),
        ...     info={'method': 'householder', 'rank': 2},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='householder_qr'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
