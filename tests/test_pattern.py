"""Tests for the arc layouts and the pattern catalog."""

import math
import unittest

import pytest
from shapely.geometry import LineString, Polygon as ShapelyPolygon

from truchet.config import GridCoordinate
from truchet.geometry import hexagon_vertices, polygons_of
from truchet.pattern import (
    ARC_PATTERNS, CIRCLED_TRIAD_TABLE, FILL_PATTERNS, MODULO_X, MODULO_Y,
    Band, Disc, Ring, arc_geometry, table_lookup,
)

R = 10.0
W = 1.2
Q = 64   # fine circles keep the crossing positions within a few µm


def _segments(geom):
    parts = getattr(geom, "geoms", [geom])
    return [g for g in parts if isinstance(g, LineString) and g.length > 1e-6]


def _crossings(shape, vertices, edge):
    """Positions (0..1 along the edge) where *shape* crosses edge *edge*."""
    a, b = vertices[edge], vertices[(edge + 1) % 6]
    line = LineString([a, b])
    return sorted(line.project(seg.interpolate(0.5, normalized=True), normalized=True)
                  for seg in _segments(shape.intersection(line)))


@pytest.mark.parametrize("pattern", ARC_PATTERNS)
@pytest.mark.parametrize("steps", range(6))
def test_stripes_cross_every_edge_at_thirds(pattern, steps):
    """Any two tiles join whatever their layout or rotation."""
    v = hexagon_vertices(R)
    shape = arc_geometry(pattern, v, W).rotated(steps).arc_shape(Q)
    for edge in range(6):
        got = _crossings(shape, v, edge)
        assert got == pytest.approx([1 / 3, 2 / 3], abs=2e-3), (
            f"layout {pattern} rot {steps} edge {edge}: {got}"
        )


@pytest.mark.parametrize("pattern", ARC_PATTERNS)
def test_stripe_width(pattern):
    v = hexagon_vertices(R)
    shape = arc_geometry(pattern, v, W).arc_shape(Q)
    a, b = v[0], v[1]
    for seg in _segments(shape.intersection(LineString([a, b]))):
        # crossings are perpendicular to the edge
        assert seg.length == pytest.approx(W, abs=0.02)


@pytest.mark.parametrize("pattern", ARC_PATTERNS)
def test_rotation_closes_after_six_steps(pattern):
    v = hexagon_vertices(R)
    geo = arc_geometry(pattern, v, W)
    base = geo.arc_shape(16)
    for steps in range(6):
        back = geo.rotated(steps).rotated(6 - steps).arc_shape(16)
        assert base.symmetric_difference(back).area < 1e-6


@pytest.mark.parametrize("pattern", sorted(FILL_PATTERNS))
def test_fills_stay_clear_of_stripes(pattern):
    v = hexagon_vertices(R)
    hexagon = ShapelyPolygon(v)
    geo = arc_geometry(pattern, v, W)
    fill = geo.fill_shape(Q)
    assert fill is not None
    assert fill.intersection(geo.arc_shape(Q)).area < 1e-6
    assert polygons_of(fill.intersection(hexagon)), f"layout {pattern} has no fill in the cell"


@pytest.mark.parametrize("pattern", [1, 2])
def test_stripe_only_layouts_have_no_fill(pattern):
    geo = arc_geometry(pattern, hexagon_vertices(R), W)
    assert geo.fills == ()
    assert geo.fill_shape() is None


def test_unknown_layout():
    with pytest.raises(ValueError, match="unknown arc pattern"):
        arc_geometry(7, hexagon_vertices(R), W)
    with pytest.raises(ValueError):
        arc_geometry(1, hexagon_vertices(R)[:5], W)


class TestPrimitives(unittest.TestCase):

    def test_ring_area(self):
        ring = Ring((0.0, 0.0), 5.0, 1.0).shape(64)
        expected = math.pi * (5.5 ** 2 - 4.5 ** 2)
        self.assertLess(abs(ring.area - expected) / expected, 0.01)

    def test_ring_wider_than_radius_is_a_disc(self):
        shape = Ring((0.0, 0.0), 0.4, 1.0).shape(32)
        self.assertEqual(len(shape.interiors), 0)

    def test_band_has_flat_ends(self):
        band = Band((0.0, 0.0), (10.0, 0.0), 2.0).shape()
        self.assertAlmostEqual(band.area, 20.0)
        for got, want in zip(band.bounds, (0.0, -1.0, 10.0, 1.0)):
            self.assertAlmostEqual(got, want)

    def test_rotation_moves_centres(self):
        disc = Disc((1.0, 0.0), 0.5).rotated(90)
        self.assertAlmostEqual(disc.center[0], 0.0)
        self.assertAlmostEqual(disc.center[1], 1.0)
        self.assertEqual(disc.radius, 0.5)


class TestCircledTriad(unittest.TestCase):

    def test_table_is_periodic(self):
        self.assertEqual(table_lookup(GridCoordinate(4, 0)), table_lookup(GridCoordinate(0, 0)))
        self.assertEqual(table_lookup(GridCoordinate(6, 6)), table_lookup(GridCoordinate(2, 2)))

    def test_entries(self):
        entry = table_lookup(GridCoordinate(1, 2))
        self.assertEqual((entry.arc, entry.rotation), (3, 0))
        entry = table_lookup(GridCoordinate(0, 0))
        self.assertEqual((entry.arc, entry.rotation), (1, 1))

    def test_missing_offset_means_no_cell(self):
        self.assertIsNone(table_lookup(GridCoordinate(0, 1)))
        self.assertIsNone(table_lookup(GridCoordinate(5, 3)))

    def test_offsets_within_period(self):
        for (ox, oy), entry in CIRCLED_TRIAD_TABLE.items():
            self.assertEqual(entry.offset, (ox, oy))
            self.assertTrue(0 <= ox < MODULO_X and 0 <= oy < MODULO_Y)
            self.assertIn(entry.arc, ARC_PATTERNS)
