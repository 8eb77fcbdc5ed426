"""Type definitions for waygeom geometry values.

This module defines the closed set of shape tags a geometry value can carry.
"""

from enum import Enum


class GeometryType(Enum):
    """Tag of a :class:`~waygeom.geometry.Geometry` value.

    The enum value is the exact, stable label reported by
    :func:`~waygeom.geometry.geometry_type`.

    Attributes:
        NULL: No geometry (construction failed or nothing to represent)
        POINT: A single 2D point
        LINESTRING: An ordered polyline
        MULTILINESTRING: An ordered collection of polylines

    Examples:
        >>> from waygeom import Geometry, GeometryType
        >>> Geometry().geometry_kind is GeometryType.NULL
        True
        >>> GeometryType.LINESTRING.value
        'LINESTRING'
    """
    NULL = 'NULL'
    POINT = 'POINT'
    LINESTRING = 'LINESTRING'
    MULTILINESTRING = 'MULTILINESTRING'

    @property
    def label(self) -> str:
        return self.value


__all__ = [
    'GeometryType',
]
