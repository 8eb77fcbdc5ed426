"""Tests for the geometry value model and its shape-dispatched functions."""

import pytest

from waygeom import (
    Geometry,
    GeometryType,
    GeometryTypeError,
    Linestring,
    Multilinestring,
    Point,
    area,
    centroid,
    geometry_n,
    geometry_type,
    length,
    num_geometries,
    reverse,
)
from waygeom.geometry import _dispatch_table


class TestPoint:
    """Tests for the Point value type."""

    def test_coordinates_are_floats(self):
        """Test that integer coordinates are stored as floats."""
        p = Point(17, 42)
        assert isinstance(p.x, float)
        assert p == Point(17.0, 42.0)

    def test_arithmetic(self):
        """Test point subtraction, addition and scaling."""
        a = Point(1, 2)
        b = Point(4, 6)
        assert b - a == Point(3, 4)
        assert a + b == Point(5, 8)
        assert a * 2 == Point(2, 4)
        assert 2 * a == Point(2, 4)

    def test_distance(self):
        """Test Euclidean distance."""
        assert Point(0, 0).distance(Point(3, 4)) == 5.0

    def test_interpolate_endpoints_exact(self):
        """Test that fractions 0 and 1 return the endpoints themselves."""
        a = Point(0.1, 0.7)
        b = Point(0.3, 1.9)
        assert a.interpolate(b, 0.0) is a
        assert a.interpolate(b, 1.0) is b

    def test_interpolate_midway(self):
        """Test interpolating halfway along an edge."""
        assert Point(0, 0).interpolate(Point(1, 2), 0.5) == Point(0.5, 1.0)

    def test_immutable(self):
        """Test that coordinates cannot be reassigned."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_iterates_as_pair(self):
        """Test unpacking a point into x and y."""
        x, y = Point(3, 4)
        assert (x, y) == (3.0, 4.0)


class TestLinestring:
    """Tests for the Linestring container."""

    def test_empty(self):
        """Test that an empty linestring is allowed but not valid."""
        line = Linestring()
        assert len(line) == 0
        assert not line.is_valid

    def test_build_and_iterate(self):
        """Test building a linestring and iterating its points."""
        line = Linestring([(17, 42), (-3, 22)])
        assert len(line) == 2

        it = iter(line)
        assert next(it).x == 17
        assert next(it).y == 22
        with pytest.raises(StopIteration):
            next(it)

        assert line.num_geometries() == 1

    def test_keeps_consecutive_duplicates(self):
        """Test that duplicate points are kept and add zero length."""
        line = Linestring([(0, 0), (0, 0), (1, 1)])
        assert len(line) == 3
        assert line.length() == pytest.approx(2 ** 0.5)

    def test_structural_equality(self):
        """Test point-by-point equality."""
        assert Linestring([(1, 1), (2, 2)]) == Linestring([Point(1, 1), Point(2, 2)])
        assert Linestring([(1, 1), (2, 2)]) != Linestring([(2, 2), (1, 1)])

    def test_slice_returns_linestring(self):
        """Test that slicing gives a linestring."""
        line = Linestring([(0, 0), (1, 0), (2, 0)])
        assert line[1:] == Linestring([(1, 0), (2, 0)])

    def test_coords_array(self):
        """Test the numpy coordinate view."""
        coords = Linestring([(0, 0), (1, 2)]).coords
        assert coords.shape == (2, 2)
        assert coords[1].tolist() == [1.0, 2.0]

    def test_length(self):
        """Test the length of a multi-edge line."""
        assert Linestring([(0, 0), (3, 4), (3, 5)]).length() == pytest.approx(6.0)


class TestMultilinestring:
    """Tests for the Multilinestring container."""

    def test_members(self):
        """Test building from point sequences and linestrings."""
        ml = Multilinestring([[(0, 0), (1, 0)], Linestring([(1, 0), (2, 0)])])
        assert ml.num_geometries() == 2
        assert ml[1] == Linestring([(1, 0), (2, 0)])

    def test_equality_is_member_by_member(self):
        """Test that member order matters for equality."""
        a = Multilinestring([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
        b = Multilinestring([[(0, 0), (1, 0)], [(1, 0), (2, 0)]])
        c = Multilinestring([[(1, 0), (2, 0)], [(0, 0), (1, 0)]])
        assert a == b
        assert a != c

    def test_length_sums_members(self):
        """Test that the length is the sum of member lengths."""
        ml = Multilinestring([[(0, 0), (1, 0)], [(5, 5), (5, 7)]])
        assert ml.length() == pytest.approx(3.0)


class TestGeometry:
    """Tests for the tagged geometry value."""

    def test_null(self):
        """Test the null geometry tag queries."""
        g = Geometry()
        assert g.is_null
        assert not g.is_point
        assert not g.is_linestring
        assert not g.is_multilinestring
        assert g.geometry_kind is GeometryType.NULL

    def test_tag_follows_payload(self):
        """Test that the tag is inferred from the payload."""
        assert Geometry(Point(1, 2)).is_point
        assert Geometry(Linestring([(0, 0), (1, 1)])).is_linestring
        assert Geometry(Multilinestring()).is_multilinestring

    def test_get_payload(self):
        """Test accessing the payload with and without a shape check."""
        line = Linestring([(0, 0), (1, 1)])
        g = Geometry(line)
        assert g.get(Linestring) == line
        assert g.get() == line

    def test_get_wrong_shape_raises(self):
        """Test that asking for the wrong shape raises."""
        g = Geometry(Linestring([(0, 0), (1, 1)]))
        with pytest.raises(GeometryTypeError):
            g.get(Multilinestring)

    def test_get_on_null_raises(self):
        """Test that the null geometry has no payload."""
        with pytest.raises(GeometryTypeError):
            Geometry().get()

    def test_unsupported_payload_raises(self):
        """Test that a non-geometry payload is rejected."""
        with pytest.raises(GeometryTypeError):
            Geometry([(0, 0), (1, 1)])

    def test_equality(self):
        """Test equality requires the same tag and equal payloads."""
        line = Linestring([(1, 1), (2, 2)])
        assert Geometry(line) == Geometry(Linestring([(1, 1), (2, 2)]))
        assert Geometry() == Geometry()
        assert Geometry(line) != Geometry(Multilinestring([line]))
        assert Geometry(Point(1, 1)) != Geometry()

    def test_copy_is_equal(self):
        """Test that a copy is equal and hashes the same."""
        g = Geometry(Linestring([(1, 1), (2, 2)]))
        assert g.copy() == g
        assert hash(g.copy()) == hash(g)


class TestLineGeometry:
    """Shape functions on a simple linestring."""

    def test_line_geometry(self):
        """Test count, area, label and centroid of a two-point line."""
        geom = Geometry(Linestring([(1, 1), (2, 2)]))

        assert num_geometries(geom) == 1
        assert area(geom) == pytest.approx(0.0)
        assert geometry_type(geom) == "LINESTRING"
        assert centroid(geom) == Geometry(Point(1.5, 1.5))

    def test_centroid_is_length_weighted(self):
        """Test that a short wiggle does not pull the centroid to it."""
        geom = Geometry(Linestring([(0, 0), (0, 1), (0, 0), (10, 0)]))
        result = centroid(geom).get(Point)
        assert result.x == pytest.approx(50 / 12)
        assert result.y == pytest.approx(1 / 12)

    def test_zero_length_centroid(self):
        """Test that a zero-length line has its point as centroid."""
        geom = Geometry(Linestring([(3, 4), (3, 4), (3, 4)]))
        assert centroid(geom) == Geometry(Point(3, 4))

    def test_empty_line_centroid_is_null(self):
        """Test that an empty line has no centroid."""
        assert centroid(Geometry(Linestring())).is_null

    def test_length(self):
        """Test the length of a single edge."""
        assert length(Geometry(Linestring([(0, 0), (3, 4)]))) == 5.0

    def test_reverse(self):
        """Test reversing vertex order."""
        geom = Geometry(Linestring([(0, 0), (1, 0), (1, 1)]))
        assert reverse(geom) == Geometry(Linestring([(1, 1), (1, 0), (0, 0)]))


class TestOtherShapes:
    """Shape functions on null, point and multilinestring values."""

    def test_null(self):
        """Test neutral results on the null geometry."""
        geom = Geometry()
        assert num_geometries(geom) == 0
        assert area(geom) == 0.0
        assert geometry_type(geom) == "NULL"
        assert centroid(geom).is_null
        assert length(geom) == 0.0
        assert reverse(geom).is_null

    def test_point(self):
        """Test shape functions on a point."""
        geom = Geometry(Point(3, 7))
        assert num_geometries(geom) == 1
        assert area(geom) == 0.0
        assert geometry_type(geom) == "POINT"
        assert centroid(geom) == geom
        assert length(geom) == 0.0

    def test_multilinestring(self):
        """Test count, area, label and length of a multilinestring."""
        geom = Geometry(Multilinestring([
            [(0, 0), (1, 0)],
            [(1, 0), (2, 0)],
            [(2, 0), (3, 0)],
        ]))
        assert num_geometries(geom) == 3
        assert area(geom) == 0.0
        assert geometry_type(geom) == "MULTILINESTRING"
        assert length(geom) == pytest.approx(3.0)

    def test_multilinestring_centroid_weights_all_edges(self):
        """Test that the centroid weighs all member edges, not member centroids."""
        geom = Geometry(Multilinestring([
            [(0, 0), (2, 0)],
            [(10, 0), (11, 0)],
        ]))
        result = centroid(geom).get(Point)
        # Average of member centroids would be 5.75.
        assert result.x == pytest.approx((1.0 * 2 + 10.5 * 1) / 3)
        assert result.y == pytest.approx(0.0)

    def test_multilinestring_zero_length_centroid(self):
        """Test that a zero-length multilinestring uses its first point."""
        geom = Geometry(Multilinestring([[(2, 2), (2, 2)], [(5, 5), (5, 5)]]))
        assert centroid(geom) == Geometry(Point(2, 2))

    def test_empty_multilinestring_centroid_is_null(self):
        """Test that an empty multilinestring has no centroid."""
        assert centroid(Geometry(Multilinestring())).is_null

    def test_reverse_multilinestring_keeps_member_order(self):
        """Test that reverse flips members but keeps their order."""
        geom = Geometry(Multilinestring([[(0, 0), (1, 0)], [(5, 0), (6, 0)]]))
        expected = Geometry(Multilinestring([[(1, 0), (0, 0)], [(6, 0), (5, 0)]]))
        assert reverse(geom) == expected


class TestGeometryN:
    """Tests for 1-based sub-geometry access."""

    def test_multilinestring_members(self):
        """Test in-range and out-of-range member access."""
        first = Linestring([(0, 0), (1, 0)])
        second = Linestring([(1, 0), (2, 0)])
        geom = Geometry(Multilinestring([first, second]))

        assert geometry_n(geom, 1) == Geometry(first)
        assert geometry_n(geom, 2) == Geometry(second)
        assert geometry_n(geom, 0).is_null
        assert geometry_n(geom, 3).is_null

    def test_single_shapes(self):
        """Test that single shapes only have a first sub-geometry."""
        line = Geometry(Linestring([(0, 0), (1, 0)]))
        assert geometry_n(line, 1) == line
        assert geometry_n(line, 2).is_null
        assert geometry_n(Geometry(), 1).is_null


class TestDispatchTables:
    """Dispatch tables must cover every geometry type."""

    def test_complete_table_accepted(self):
        """Test that a table covering every type is accepted."""
        table = {kind: (lambda _: kind) for kind in GeometryType}
        assert _dispatch_table("test", table) is table

    def test_missing_type_rejected(self):
        """Test that a table missing a type is rejected."""
        table = {
            GeometryType.NULL: lambda _: 0,
            GeometryType.POINT: lambda _: 1,
            GeometryType.LINESTRING: lambda _: 1,
        }
        with pytest.raises(TypeError, match="MULTILINESTRING"):
            _dispatch_table("test", table)
