"""Shared fixtures for the waygeom test suite."""

import re

import pytest

from waygeom import NodeRef, Way

_NODE_RE = re.compile(r"^n(-?\d+)(?:x(-?[\d.]+)y(-?[\d.]+))?$")


def parse_way(way_id, nodes):
    """Build a :class:`Way` from compact node notation.

    ``"n1x1y1,n2x2y2"`` gives two located nodes; ``"n1,n2"`` gives two
    nodes without locations.
    """
    refs = []
    for token in filter(None, nodes.split(",")):
        match = _NODE_RE.match(token.strip())
        if match is None:
            raise ValueError(f"bad node token: {token!r}")
        ref, x, y = match.groups()
        location = (float(x), float(y)) if x is not None else None
        refs.append(NodeRef(int(ref), location))
    return Way(way_id, refs)


@pytest.fixture
def make_way():
    return parse_way
