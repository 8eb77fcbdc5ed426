"""Shared measurement helpers for waygeom geometries.

Callers that post-process segmentation output (storage backends with a
segment-length limit, renderers) only need a handful of scalar metrics.
Centralizing them here keeps that logic out of the algorithms.
"""

from __future__ import annotations

from typing import Dict, Union

from .geometry import (
    Geometry,
    Linestring,
    Multilinestring,
    area,
    geometry_type,
    length,
    num_geometries,
)


def _num_points(geom: Geometry) -> int:
    if geom.is_null:
        return 0
    if geom.is_point:
        return 1
    if geom.is_linestring:
        return len(geom.get(Linestring))
    return sum(len(line) for line in geom.get(Multilinestring))


def measure_geometry(geom: Geometry) -> Dict[str, Union[str, bool, int, float]]:
    """Return core metrics for ``geom``."""
    return {
        "geometry_type": geometry_type(geom),
        "is_null": geom.is_null,
        "num_geometries": num_geometries(geom),
        "num_points": _num_points(geom),
        "length": length(geom),
        "area": area(geom),
    }


def max_member_length(geom: Geometry) -> float:
    """Length of the longest line in ``geom``; 0.0 for non-linear shapes."""
    if geom.is_linestring:
        return geom.get(Linestring).length()
    if geom.is_multilinestring:
        return max((line.length() for line in geom.get(Multilinestring)), default=0.0)
    return 0.0


__all__ = [
    "measure_geometry",
    "max_member_length",
]
