"""Precondition helpers.

Contract violations raise immediately so the defect surfaces at the call
site instead of propagating as a bad value.
"""

from __future__ import annotations

import math
from typing import Any

from .errors import PreconditionError


def is_finite_coordinate(x: Any, y: Any) -> bool:
    """Check that both coordinate components are finite real numbers.

    Examples:
        >>> is_finite_coordinate(1, 2.5)
        True
        >>> is_finite_coordinate(float('nan'), 0)
        False
    """
    try:
        return math.isfinite(x) and math.isfinite(y)
    except TypeError:
        return False


def require_min_points(points, minimum: int = 2, what: str = "linestring") -> None:
    """Raise :class:`PreconditionError` if ``points`` has too few entries."""
    if len(points) < minimum:
        raise PreconditionError(
            f"{what} needs at least {minimum} points, got {len(points)}"
        )


__all__ = [
    'is_finite_coordinate',
    'require_min_points',
]
