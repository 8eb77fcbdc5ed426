"""Vertex-array helpers shared by the geometry value model and its algorithms.

All functions work on ``(N, 2)`` float numpy arrays of planar coordinates.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np


def as_vertex_array(coords: Iterable) -> np.ndarray:
    """Convert coordinate pairs into an ``(N, 2)`` float array.

    Args:
        coords: Iterable of ``(x, y)`` pairs (Points are iterable as pairs)

    Returns:
        Array of shape ``(N, 2)``; ``(0, 2)`` for empty input

    Examples:
        >>> as_vertex_array([(0, 0), (1, 2)]).shape
        (2, 2)
    """
    vertices = np.array([tuple(c) for c in coords], dtype=float)
    if vertices.size == 0:
        return np.empty((0, 2), dtype=float)
    return vertices.reshape(-1, 2)


def edge_lengths(vertices: np.ndarray) -> np.ndarray:
    """Return the Euclidean length of every edge of a polyline.

    Args:
        vertices: Polyline vertices (Nx2)

    Returns:
        Array of ``N - 1`` edge lengths (empty if fewer than 2 vertices)

    Examples:
        >>> edge_lengths(np.array([[0, 0], [3, 4], [3, 4]])).tolist()
        [5.0, 0.0]
    """
    if len(vertices) < 2:
        return np.empty(0, dtype=float)
    deltas = np.diff(vertices, axis=0)
    return np.hypot(deltas[:, 0], deltas[:, 1])


def polyline_length(vertices: np.ndarray) -> float:
    """Total arc length of a polyline."""
    return float(np.sum(edge_lengths(vertices)))


def edge_midpoints(vertices: np.ndarray) -> np.ndarray:
    if len(vertices) < 2:
        return np.empty((0, 2), dtype=float)
    return (vertices[:-1] + vertices[1:]) / 2.0


def weighted_edge_centroid(polylines: Iterable[np.ndarray]) -> Optional[np.ndarray]:
    """Length-weighted centroid over the edges of one or more polylines.

    Every edge contributes its midpoint weighted by its length, so a long
    member pulls the centroid more than a short one.

    Args:
        polylines: Vertex arrays (each Nx2)

    Returns:
        Centroid as a length-2 array, or None when the total length is zero

    Examples:
        >>> weighted_edge_centroid([np.array([[1.0, 1.0], [2.0, 2.0]])]).tolist()
        [1.5, 1.5]
    """
    mids = []
    lengths = []
    for vertices in polylines:
        mids.append(edge_midpoints(vertices))
        lengths.append(edge_lengths(vertices))

    if not lengths:
        return None

    all_lengths = np.concatenate(lengths)
    total = float(np.sum(all_lengths))
    if total <= 0.0:
        return None

    # Normalizing first keeps a single edge's midpoint exact.
    weights = all_lengths / total
    return np.sum(np.concatenate(mids) * weights[:, np.newaxis], axis=0)


__all__ = [
    'as_vertex_array',
    'edge_lengths',
    'polyline_length',
    'edge_midpoints',
    'weighted_edge_centroid',
]
