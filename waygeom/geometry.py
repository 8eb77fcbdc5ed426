"""Geometry value model.

A :class:`Geometry` is a closed tagged union holding exactly one of: nothing
(the null geometry), a :class:`Point`, a :class:`Linestring` or a
:class:`Multilinestring`. Payloads are immutable, so a geometry value can be
shared freely between callers.

The module level functions (:func:`num_geometries`, :func:`area`,
:func:`geometry_type`, :func:`centroid`, :func:`length`, :func:`reverse`,
:func:`geometry_n`) dispatch on the active tag through tables that must cover
every :class:`~waygeom.core.types.GeometryType`; a table missing a tag is
rejected when this module is imported.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Type, Union

import numpy as np

from .core.errors import GeometryTypeError
from .core.geometry_utils import (
    as_vertex_array,
    polyline_length,
    weighted_edge_centroid,
)
from .core.types import GeometryType


@dataclass(frozen=True)
class Point:
    """A 2D coordinate in the plane.

    Coordinates are stored as Python floats. Points support vector
    arithmetic (``p + q``, ``p - q``, ``p * s``) and iterate as ``(x, y)``.

    Examples:
        >>> Point(0, 0).interpolate(Point(1, 0), 0.4)
        Point(x=0.4, y=0.0)
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def interpolate(self, other: Point, frac: float) -> Point:
        """Point at ``frac`` of the way from this point to ``other``.

        ``frac == 0`` and ``frac == 1`` return this point and ``other``
        exactly.
        """
        if frac == 0.0:
            return self
        if frac == 1.0:
            return other
        return self + (other - self) * frac


PointLike = Union[Point, Sequence]


def _to_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


class Linestring(Sequence):
    """Immutable ordered sequence of points forming a polyline.

    Any number of points is accepted; a linestring is only *valid* with two
    or more. Consecutive duplicate points are kept as given.

    Args:
        points: Points or ``(x, y)`` pairs in order along the line

    Examples:
        >>> line = Linestring([(17, 42), (-3, 22)])
        >>> len(line), line[0].x, line[1].y
        (2, 17.0, 22.0)
    """

    __slots__ = ('_points',)

    def __init__(self, points: Iterable[PointLike] = ()) -> None:
        self._points = tuple(_to_point(p) for p in points)

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Linestring(self._points[index])
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Linestring):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        return hash(('Linestring', self._points))

    def __repr__(self) -> str:
        coords = ', '.join(f'({p.x!r}, {p.y!r})' for p in self._points)
        return f'Linestring([{coords}])'

    @property
    def points(self) -> tuple:
        return self._points

    @property
    def coords(self) -> np.ndarray:
        """Vertices as a fresh ``(N, 2)`` float array."""
        return as_vertex_array(self._points)

    @property
    def is_valid(self) -> bool:
        return len(self._points) >= 2

    def num_geometries(self) -> int:
        return 1

    def length(self) -> float:
        return polyline_length(self.coords)

    def reversed(self) -> Linestring:
        return Linestring(self._points[::-1])


class Multilinestring(Sequence):
    """Immutable ordered collection of linestrings.

    Args:
        lines: Linestrings (or point sequences convertible to them)

    Examples:
        >>> ml = Multilinestring([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
        >>> ml.num_geometries()
        2
    """

    __slots__ = ('_lines',)

    def __init__(self, lines: Iterable[Union[Linestring, Iterable[PointLike]]] = ()) -> None:
        self._lines = tuple(
            line if isinstance(line, Linestring) else Linestring(line)
            for line in lines
        )

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Multilinestring(self._lines[index])
        return self._lines[index]

    def __iter__(self) -> Iterator[Linestring]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multilinestring):
            return NotImplemented
        return self._lines == other._lines

    def __hash__(self) -> int:
        return hash(('Multilinestring', self._lines))

    def __repr__(self) -> str:
        return f'Multilinestring({list(self._lines)!r})'

    @property
    def lines(self) -> tuple:
        return self._lines

    def num_geometries(self) -> int:
        return len(self._lines)

    def length(self) -> float:
        return float(sum(line.length() for line in self._lines))


Payload = Union[Point, Linestring, Multilinestring]

_PAYLOAD_KINDS: Dict[type, GeometryType] = {
    Point: GeometryType.POINT,
    Linestring: GeometryType.LINESTRING,
    Multilinestring: GeometryType.MULTILINESTRING,
}


class Geometry:
    """Tagged geometry value: null, point, linestring or multilinestring.

    ``Geometry()`` is the null geometry. Otherwise the tag is inferred from
    the payload class. Use the ``is_*`` queries before calling :meth:`get`;
    asking for the wrong shape raises :class:`GeometryTypeError`.

    Examples:
        >>> g = Geometry(Linestring([(1, 1), (2, 2)]))
        >>> g.is_linestring, g.is_null
        (True, False)
        >>> Geometry().is_null
        True
    """

    __slots__ = ('_kind', '_payload')

    def __init__(self, payload: Optional[Payload] = None) -> None:
        if payload is None:
            self._kind = GeometryType.NULL
        else:
            kind = _PAYLOAD_KINDS.get(type(payload))
            if kind is None:
                raise GeometryTypeError(
                    f"unsupported geometry payload: {type(payload).__name__}"
                )
            self._kind = kind
        self._payload = payload

    @property
    def geometry_kind(self) -> GeometryType:
        return self._kind

    @property
    def is_null(self) -> bool:
        return self._kind is GeometryType.NULL

    @property
    def is_point(self) -> bool:
        return self._kind is GeometryType.POINT

    @property
    def is_linestring(self) -> bool:
        return self._kind is GeometryType.LINESTRING

    @property
    def is_multilinestring(self) -> bool:
        return self._kind is GeometryType.MULTILINESTRING

    def get(self, cls: Optional[Type[Payload]] = None) -> Payload:
        """Return the payload, optionally checking its shape.

        Args:
            cls: Expected payload class (``Point``, ``Linestring`` or
                ``Multilinestring``)

        Raises:
            GeometryTypeError: If the geometry is null or not of shape ``cls``
        """
        if self._payload is None:
            raise GeometryTypeError("null geometry has no payload")
        if cls is not None and type(self._payload) is not cls:
            raise GeometryTypeError(
                f"expected {cls.__name__}, geometry is {self._kind.value}"
            )
        return self._payload

    def copy(self) -> Geometry:
        return Geometry(self._payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return self._kind is other._kind and self._payload == other._payload

    def __hash__(self) -> int:
        return hash((self._kind, self._payload))

    def __repr__(self) -> str:
        if self._payload is None:
            return 'Geometry()'
        return f'Geometry({self._payload!r})'


# ============================================================================
# Shape dispatch
# ============================================================================

Handler = Callable[..., Any]


def _dispatch_table(name: str, handlers: Dict[GeometryType, Handler]) -> Dict[GeometryType, Handler]:
    missing = [kind.value for kind in GeometryType if kind not in handlers]
    if missing:
        raise TypeError(f"{name} does not handle geometry types: {', '.join(missing)}")
    return handlers


def _dispatch(table: Dict[GeometryType, Handler], geom: Geometry, *args: Any) -> Any:
    return table[geom.geometry_kind](geom._payload, *args)


def _point_geometry(vertex: Union[Point, np.ndarray]) -> Geometry:
    return Geometry(Point(float(vertex[0]), float(vertex[1])))


def _line_centroid(line: Linestring) -> Geometry:
    if not line:
        return Geometry()
    center = weighted_edge_centroid([line.coords])
    if center is None:
        return Geometry(line[0])
    return _point_geometry(center)


def _multiline_centroid(lines: Multilinestring) -> Geometry:
    members = [line for line in lines if line]
    if not members:
        return Geometry()
    center = weighted_edge_centroid(line.coords for line in members)
    if center is None:
        return Geometry(members[0][0])
    return _point_geometry(center)


def _single_geometry_n(payload: Payload, n: int) -> Geometry:
    return Geometry(payload) if n == 1 else Geometry()


def _multiline_geometry_n(lines: Multilinestring, n: int) -> Geometry:
    if 1 <= n <= len(lines):
        return Geometry(lines[n - 1])
    return Geometry()


_NUM_GEOMETRIES = _dispatch_table('num_geometries', {
    GeometryType.NULL: lambda _: 0,
    GeometryType.POINT: lambda _: 1,
    GeometryType.LINESTRING: lambda line: line.num_geometries(),
    GeometryType.MULTILINESTRING: lambda lines: lines.num_geometries(),
})

_AREA = _dispatch_table('area', {
    GeometryType.NULL: lambda _: 0.0,
    GeometryType.POINT: lambda _: 0.0,
    GeometryType.LINESTRING: lambda _: 0.0,
    GeometryType.MULTILINESTRING: lambda _: 0.0,
})

_CENTROID = _dispatch_table('centroid', {
    GeometryType.NULL: lambda _: Geometry(),
    GeometryType.POINT: Geometry,
    GeometryType.LINESTRING: _line_centroid,
    GeometryType.MULTILINESTRING: _multiline_centroid,
})

_LENGTH = _dispatch_table('length', {
    GeometryType.NULL: lambda _: 0.0,
    GeometryType.POINT: lambda _: 0.0,
    GeometryType.LINESTRING: lambda line: line.length(),
    GeometryType.MULTILINESTRING: lambda lines: lines.length(),
})

_REVERSE = _dispatch_table('reverse', {
    GeometryType.NULL: lambda _: Geometry(),
    GeometryType.POINT: Geometry,
    GeometryType.LINESTRING: lambda line: Geometry(line.reversed()),
    GeometryType.MULTILINESTRING: lambda lines: Geometry(
        Multilinestring(line.reversed() for line in lines)
    ),
})

_GEOMETRY_N = _dispatch_table('geometry_n', {
    GeometryType.NULL: lambda _, n: Geometry(),
    GeometryType.POINT: _single_geometry_n,
    GeometryType.LINESTRING: _single_geometry_n,
    GeometryType.MULTILINESTRING: _multiline_geometry_n,
})


def num_geometries(geom: Geometry) -> int:
    """Number of sub-geometries: 0 for null, 1 for a point or linestring,
    the member count for a multilinestring."""
    return _dispatch(_NUM_GEOMETRIES, geom)


def area(geom: Geometry) -> float:
    """Area of ``geom``; always 0.0 for the line and point shapes modelled here."""
    return _dispatch(_AREA, geom)


def geometry_type(geom: Geometry) -> str:
    """Shape label, e.g. ``'LINESTRING'``.

    Examples:
        >>> geometry_type(Geometry(Point(1, 2)))
        'POINT'
    """
    return geom.geometry_kind.label


def centroid(geom: Geometry) -> Geometry:
    """Length-weighted centroid of ``geom`` as a point geometry.

    For lines every edge contributes its midpoint weighted by its length;
    a multilinestring is weighted over all member edges together. A line
    with zero total length degenerates to its first point. The centroid of
    the null geometry (or of an empty line) is the null geometry.

    Args:
        geom: Input geometry

    Returns:
        Point geometry, or the null geometry

    Examples:
        >>> centroid(Geometry(Linestring([(1, 1), (2, 2)])))
        Geometry(Point(x=1.5, y=1.5))
    """
    return _dispatch(_CENTROID, geom)


def length(geom: Geometry) -> float:
    """Total arc length; 0.0 for points and the null geometry."""
    return _dispatch(_LENGTH, geom)


def reverse(geom: Geometry) -> Geometry:
    """Reverse vertex order of every line, keeping multilinestring member order."""
    return _dispatch(_REVERSE, geom)


def geometry_n(geom: Geometry, n: int) -> Geometry:
    """Return the ``n``-th sub-geometry (1-based), or null if out of range."""
    return _dispatch(_GEOMETRY_N, geom, n)


__all__ = [
    'Point',
    'Linestring',
    'Multilinestring',
    'Geometry',
    'num_geometries',
    'area',
    'geometry_type',
    'centroid',
    'length',
    'reverse',
    'geometry_n',
]
