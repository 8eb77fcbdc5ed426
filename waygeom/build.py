"""Linear-feature builder.

Turns ways (ordered node references) into linestring geometries. Node
coordinates are resolved either from the locations carried on the node
references or from an external location source; construction is
all-or-nothing and failure is reported as the null geometry, never as an
exception.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from .core.errors import ConstructionWarning
from .core.validation_utils import is_finite_coordinate
from .geometry import Geometry, Linestring, Point

Location = Union[Point, Tuple[float, float]]


class LocationSource(Protocol):
    """Anything that maps a node id to a location; a ``dict`` qualifies."""

    def get(self, ref: int) -> Optional[Location]:
        ...


@dataclass(frozen=True)
class NodeRef:
    """Reference to a node, optionally carrying its resolved location.

    Attributes:
        ref: Node id
        location: Resolved coordinate, or None if not (yet) located
    """

    ref: int
    location: Optional[Location] = None


@dataclass(frozen=True)
class Way:
    """Ordered line feature referencing nodes by id.

    Attributes:
        id: Way id
        nodes: Node references in line order
    """

    id: Optional[int]
    nodes: Tuple[NodeRef, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'nodes', tuple(self.nodes))


WayLike = Union[Way, Iterable[NodeRef]]


def _way_nodes(way: WayLike) -> Sequence[NodeRef]:
    if isinstance(way, Way):
        return way.nodes
    return tuple(way)


def _resolve(node: NodeRef, locations: Optional[LocationSource]) -> Optional[Point]:
    """Return the node's coordinate, or None if it cannot be resolved."""
    location = locations.get(node.ref) if locations is not None else node.location
    if location is None:
        return None
    x, y = location
    if not is_finite_coordinate(x, y):
        return None
    return location if isinstance(location, Point) else Point(x, y)


def create_point(node: NodeRef, locations: Optional[LocationSource] = None) -> Geometry:
    """Build a point geometry from a node.

    Args:
        node: Node reference
        locations: Optional location source overriding ``node.location``

    Returns:
        Point geometry, or the null geometry if the node has no location
    """
    point = _resolve(node, locations)
    return Geometry(point) if point is not None else Geometry()


def _collect_points(
    nodes: Sequence[NodeRef],
    locations: Optional[LocationSource],
) -> Tuple[Optional[List[Point]], str]:
    points: List[Point] = []
    for node in nodes:
        point = _resolve(node, locations)
        if point is None:
            return None, f"node {node.ref} has no location"
        points.append(point)

    if len(points) < 2:
        return None, f"need at least 2 nodes, got {len(points)}"

    return points, ""


def create_linestring(way: WayLike, locations: Optional[LocationSource] = None) -> Geometry:
    """Build a linestring from the nodes of a way.

    Every node must resolve to a coordinate; a single unresolved node makes
    the whole way fail. Points are kept in node order, including consecutive
    duplicates. Fewer than two nodes cannot form a line.

    Args:
        way: A :class:`Way` or any iterable of :class:`NodeRef`
        locations: Optional location source; when given it is consulted for
            every node instead of ``NodeRef.location``

    Returns:
        Linestring geometry, or the null geometry if construction failed

    Examples:
        >>> way = Way(20, [NodeRef(1, (1, 1)), NodeRef(2, (2, 2))])
        >>> create_linestring(way).is_linestring
        True
        >>> create_linestring(Way(20, [NodeRef(1), NodeRef(2)])).is_null
        True
    """
    points, _ = _collect_points(_way_nodes(way), locations)
    if points is None:
        return Geometry()
    return Geometry(Linestring(points))


def create_linestrings(
    ways: Iterable[WayLike],
    locations: Optional[LocationSource] = None,
    warn: bool = True,
) -> Tuple[List[Geometry], List[Optional[ConstructionWarning]]]:
    """Apply :func:`create_linestring` to many ways.

    Args:
        ways: Ways to build
        locations: Optional location source shared by all ways
        warn: Emit a ``UserWarning`` for every way that could not be built

    Returns:
        Tuple of (geometries, warnings). Both lists are aligned with ``ways``;
        a warning entry is None where construction succeeded.
    """
    geometries: List[Geometry] = []
    warnings_list: List[Optional[ConstructionWarning]] = []

    for index, way in enumerate(ways):
        points, reason = _collect_points(_way_nodes(way), locations)
        if points is not None:
            geometries.append(Geometry(Linestring(points)))
            warnings_list.append(None)
            continue

        warning = ConstructionWarning(
            way_id=way.id if isinstance(way, Way) else None,
            reason=reason,
            index=index,
        )
        geometries.append(Geometry())
        warnings_list.append(warning)
        if warn:
            warnings.warn(str(warning), UserWarning, stacklevel=2)

    return geometries, warnings_list


__all__ = [
    'Location',
    'LocationSource',
    'NodeRef',
    'Way',
    'create_point',
    'create_linestring',
    'create_linestrings',
]
