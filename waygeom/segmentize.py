"""Arc-length segmentation of linear geometries.

:func:`segmentize` re-nodes a linestring (or every member of a
multilinestring) into consecutive pieces no longer than a maximum length.
New vertices are interpolated on the original edges; where a cut falls on an
existing vertex that vertex is reused, so no zero-length pieces appear.

Cutting a line of length 4 with ``max_length = 1``::

    (0,0)---------------(2,0)-------(3,0)-------(4,0)
    (0,0)-(1,0) | (1,0)-(2,0) | (2,0)-(3,0) | (3,0)-(4,0)

``(1,0)`` is interpolated, ``(2,0)`` and ``(3,0)`` are reused vertices.
"""

from __future__ import annotations

from typing import List, Optional

from .core.config import SegmentizeConfig
from .core.errors import GeometryTypeError, PreconditionError
from .core.geometry_utils import edge_lengths
from .core.types import GeometryType
from .core.validation_utils import require_min_points
from .geometry import Geometry, Linestring, Multilinestring, Point


def _split_linestring(line: Linestring, config: SegmentizeConfig) -> List[Linestring]:
    """Cut ``line`` into pieces of at most ``config.max_length``.

    Args:
        line: Polyline with at least two points
        config: Segmentation settings

    Returns:
        Pieces in order along the line; consecutive pieces share their
        boundary point
    """
    require_min_points(line)

    max_length = config.max_length
    tol = config.tolerance
    deltas = edge_lengths(line.coords)

    pieces: List[Linestring] = []
    piece: List[Point] = [line[0]]
    dist = 0.0  # length of ``piece`` so far

    for prev, this_pt, delta in zip(line, line[1:], deltas):
        delta = float(delta)
        cut: Optional[Point] = None
        k = 1

        # Cut only while more than ``tol`` of the edge is left beyond the cut.
        while dist + delta - k * max_length > tol:
            offset = k * max_length - dist
            if offset <= tol:
                # Piece is already full at the edge start.
                cut = prev
            else:
                cut = prev.interpolate(this_pt, offset / delta)
                piece.append(cut)
            pieces.append(Linestring(piece))
            piece = [cut]
            k += 1

        if cut is not None:
            dist = cut.distance(this_pt)
        else:
            dist += delta
        piece.append(this_pt)

    if len(piece) > 1:
        pieces.append(Linestring(piece))

    return pieces


def segmentize(
    geom: Geometry,
    max_length: Optional[float] = None,
    config: Optional[SegmentizeConfig] = None,
) -> Geometry:
    """Split linear geometry into pieces no longer than ``max_length``.

    Each line is walked from its start; whenever the piece being built reaches
    ``max_length`` a vertex is interpolated on the current edge, the piece is
    closed there and the next piece starts at the same point. Lines no longer
    than ``max_length`` come back unchanged as a single member. Members of a
    multilinestring are segmented independently, each starting from zero.

    Args:
        geom: Linestring or multilinestring geometry
        max_length: Maximum piece length, strictly positive
        config: Full settings (alternative to ``max_length``)

    Returns:
        Multilinestring geometry, even when nothing was split

    Raises:
        PreconditionError: If ``max_length`` is not a finite number > 0 or a
            line has fewer than two points
        GeometryTypeError: If ``geom`` is not a linestring or multilinestring

    Examples:
        >>> line = Geometry(Linestring([(0, 0), (1, 0)]))
        >>> result = segmentize(line, 0.5)
        >>> [list(member) for member in result.get(Multilinestring)]
        [[Point(x=0.0, y=0.0), Point(x=0.5, y=0.0)], [Point(x=0.5, y=0.0), Point(x=1.0, y=0.0)]]
    """
    if config is None:
        config = SegmentizeConfig(max_length=max_length)
    elif max_length is not None and max_length != config.max_length:
        raise PreconditionError("max_length disagrees with config.max_length")

    if geom.geometry_kind is GeometryType.LINESTRING:
        lines = [geom.get(Linestring)]
    elif geom.geometry_kind is GeometryType.MULTILINESTRING:
        lines = list(geom.get(Multilinestring))
    else:
        raise GeometryTypeError(
            f"segmentize needs a LINESTRING or MULTILINESTRING, got {geom.geometry_kind.value}"
        )

    pieces: List[Linestring] = []
    for line in lines:
        pieces.extend(_split_linestring(line, config))

    return Geometry(Multilinestring(pieces))


__all__ = [
    'segmentize',
]
