"""Exception and warning hierarchy for waygeom.

Data-dependent failures (a way whose nodes cannot all be located) are not
exceptions: they produce the null geometry. The exceptions below signal
contract violations in the calling code and are not meant to be caught as
part of normal control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class WaygeomError(Exception):
    """Base exception for waygeom."""
    pass


class PreconditionError(WaygeomError, ValueError):
    """Raised when an operation is called with arguments outside its contract.

    Examples: a non-positive ``max_length`` or a line with fewer than two
    points handed to the segmentation engine.
    """
    pass


class GeometryTypeError(WaygeomError, TypeError):
    """Raised when a geometry value is accessed as the wrong shape."""
    pass


@dataclass(eq=False)
class ConstructionWarning(UserWarning):
    """Describes a way that could not be turned into a linestring.

    Attributes:
        way_id: Identifier of the offending way (None if the input had none)
        reason: Human readable cause
        index: Position of the way in the batch
    """

    way_id: Optional[int]
    reason: str
    index: Optional[int] = None

    def __str__(self) -> str:
        where = f"way {self.way_id}" if self.way_id is not None else "way"
        if self.index is not None:
            where = f"{where} (#{self.index})"
        return f"{where}: {self.reason}"


__all__ = [
    'WaygeomError',
    'PreconditionError',
    'GeometryTypeError',
    'ConstructionWarning',
]
