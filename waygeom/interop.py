"""Conversion between waygeom values and Shapely geometries.

Output consumers that already speak Shapely (writers, spatial indexes,
plotting) can take segmentation results through :func:`to_shapely`; the
reverse direction lets Shapely-produced lines enter the engine.
"""

from __future__ import annotations

from typing import Optional

from shapely.geometry import LineString, MultiLineString
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.base import BaseGeometry

from .core.errors import GeometryTypeError, PreconditionError
from .core.types import GeometryType
from .geometry import Geometry, Linestring, Multilinestring, Point


def _shapely_line(line: Linestring) -> LineString:
    if not line:
        return LineString()
    if len(line) < 2:
        raise PreconditionError(
            f"cannot convert a linestring with {len(line)} point to Shapely"
        )
    return LineString(line.coords)


def to_shapely(geom: Geometry) -> Optional[BaseGeometry]:
    """Convert a geometry value into the matching Shapely geometry.

    An empty linestring becomes an empty ``LineString``; empty members of a
    multilinestring are left out.

    Args:
        geom: Geometry value

    Returns:
        Shapely ``Point``, ``LineString`` or ``MultiLineString``; None for
        the null geometry

    Raises:
        PreconditionError: If a line holds exactly one point

    Examples:
        >>> to_shapely(Geometry(Linestring([(0, 0), (3, 4)]))).length
        5.0
    """
    kind = geom.geometry_kind
    if kind is GeometryType.NULL:
        return None
    if kind is GeometryType.POINT:
        point = geom.get(Point)
        return ShapelyPoint(point.x, point.y)
    if kind is GeometryType.LINESTRING:
        return _shapely_line(geom.get(Linestring))
    if kind is GeometryType.MULTILINESTRING:
        lines = [_shapely_line(line) for line in geom.get(Multilinestring)]
        # Shapely rejects empty parts.
        return MultiLineString([line for line in lines if not line.is_empty])
    raise GeometryTypeError(f"no Shapely equivalent for {kind.value}")


def _xy_pairs(coords):
    return [(c[0], c[1]) for c in coords]


def from_shapely(shape: Optional[BaseGeometry]) -> Geometry:
    """Convert a Shapely geometry into a geometry value.

    Z values are dropped. ``None`` and empty shapes give the null geometry.

    Raises:
        GeometryTypeError: For shapes other than points and (multi)lines
    """
    if shape is None or shape.is_empty:
        return Geometry()
    if isinstance(shape, ShapelyPoint):
        return Geometry(Point(shape.x, shape.y))
    if isinstance(shape, LineString):
        return Geometry(Linestring(_xy_pairs(shape.coords)))
    if isinstance(shape, MultiLineString):
        return Geometry(Multilinestring(
            Linestring(_xy_pairs(line.coords)) for line in shape.geoms
        ))
    raise GeometryTypeError(f"unsupported Shapely geometry: {shape.geom_type}")


__all__ = [
    "to_shapely",
    "from_shapely",
]
