"""
Element capability tiers for PyMatrix.

This module is the SINGLE SOURCE OF TRUTH for capability tier names.
Import from here, never use raw strings.

Two tiers exist:
    ring:       zero, add, subtract, multiply, abs. Integers, reals, complex.
    real_field: adds division, ordering, sqrt and the transcendental
                functions. Real floating point only.

Usage:
    from pymatrix.core.capabilities import TIER_REAL_FIELD, require_tier

    require_tier(matrix.dtype, TIER_REAL_FIELD, 'qr')
"""

import numpy as np

from pymatrix.core.exceptions import CapabilityError

# Additive/multiplicative structure only
TIER_RING = 'ring'

# Ordered field with transcendental functions
TIER_REAL_FIELD = 'real_field'

ALL_TIERS = frozenset({
    TIER_RING,
    TIER_REAL_FIELD,
})


def element_tiers(dtype: np.dtype | type) -> frozenset[str]:
    """
    Capability tiers satisfied by an element dtype.

    Args:
        dtype: NumPy dtype or scalar type

    Returns:
        Frozenset of tier names (empty for non-numeric dtypes)
    """
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.floating):
        return frozenset({TIER_RING, TIER_REAL_FIELD})
    if np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.complexfloating):
        return frozenset({TIER_RING})
    return frozenset()


def supports(dtype: np.dtype | type, tier: str) -> bool:
    """Check whether `dtype` satisfies capability `tier`. Unknown tiers return False."""
    return tier in element_tiers(dtype)


def require_tier(dtype: np.dtype | type, tier: str, operation: str) -> None:
    """
    Fail unless `dtype` satisfies capability `tier`.

    Args:
        dtype: Element dtype of the operand
        tier: Required tier name
        operation: Operation name for error messages

    Raises:
        ValueError: If `tier` is not a known tier name
        CapabilityError: If the dtype lacks the tier
    """
    if tier not in ALL_TIERS:
        raise ValueError(f"Unknown capability tier: {tier!r}")
    if not supports(dtype, tier):
        raise CapabilityError(
            f"{operation}: element type {np.dtype(dtype)} does not provide "
            f"the '{tier}' capabilities",
            dtype=np.dtype(dtype),
            required_tier=tier,
        )


__all__ = [
    'TIER_RING',
    'TIER_REAL_FIELD',
    'ALL_TIERS',
    'element_tiers',
    'supports',
    'require_tier',
]
