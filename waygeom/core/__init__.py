"""Core types and utilities for waygeom.

This module provides the shape tag enum, exceptions, configuration and the
numeric helpers used throughout the library.
"""

from .types import GeometryType

from .errors import (
    WaygeomError,
    PreconditionError,
    GeometryTypeError,
    ConstructionWarning,
)

from .config import (
    DEFAULT_REL_TOLERANCE,
    SegmentizeConfig,
)

__all__ = [
    # Shape tags
    'GeometryType',

    # Exceptions and warnings
    'WaygeomError',
    'PreconditionError',
    'GeometryTypeError',
    'ConstructionWarning',

    # Configuration
    'DEFAULT_REL_TOLERANCE',
    'SegmentizeConfig',
]
