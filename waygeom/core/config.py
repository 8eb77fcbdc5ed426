"""Configuration for the segmentation engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import PreconditionError

# Cuts closer than this fraction of ``max_length`` to an edge end snap to it.
DEFAULT_REL_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SegmentizeConfig:
    """Settings for :func:`waygeom.segmentize.segmentize`.

    Attributes:
        max_length: Maximum length of each output piece, strictly positive
        rel_tolerance: Threshold tolerance relative to ``max_length``

    Raises:
        PreconditionError: If either value is not a finite, valid number
    """

    max_length: float
    rel_tolerance: float = DEFAULT_REL_TOLERANCE

    def __post_init__(self) -> None:
        if not _is_finite_number(self.max_length) or self.max_length <= 0:
            raise PreconditionError(
                f"max_length must be a finite number > 0, got {self.max_length!r}"
            )
        if not _is_finite_number(self.rel_tolerance) or not 0 <= self.rel_tolerance < 1:
            raise PreconditionError(
                f"rel_tolerance must be in [0, 1), got {self.rel_tolerance!r}"
            )

    @property
    def tolerance(self) -> float:
        """Absolute tolerance in the units of ``max_length``."""
        return self.max_length * self.rel_tolerance


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)  # type: ignore[arg-type]
    except TypeError:
        return False


__all__ = [
    'DEFAULT_REL_TOLERANCE',
    'SegmentizeConfig',
]
