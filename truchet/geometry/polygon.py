"""
Polygon geometry utilities.

All coordinates in mm, origin at the cell centre, X to the right, Y up.
Pure-Python helpers for outlines plus thin Shapely wrappers for the
operations the CSG writer needs pre-computed (insets, clipping).
"""

from __future__ import annotations

import logging
import math

from shapely.geometry import GeometryCollection, MultiPolygon, Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

log = logging.getLogger(__name__)

Vertex = tuple[float, float]
Outline = list[Vertex]


# ── core primitives ─────────────────────────────────────────────────


def polygon_area(outline: Outline) -> float:
    """Signed area via shoelace formula (positive = CCW)."""
    n = len(outline)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = outline[i]
        x1, y1 = outline[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2.0


def rotate_point(p: Vertex, angle_deg: float) -> Vertex:
    """Rotate *p* about the origin by *angle_deg* (CCW)."""
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    return (p[0] * c - p[1] * s, p[0] * s + p[1] * c)


def midpoint(a: Vertex, b: Vertex) -> Vertex:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def lerp(a: Vertex, b: Vertex, t: float) -> Vertex:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def line_intersection(
    a1: Vertex, a2: Vertex, b1: Vertex, b2: Vertex
) -> Vertex | None:
    """Intersection of lines (a1→a2) and (b1→b2), or None if parallel."""
    dx1, dy1 = a2[0] - a1[0], a2[1] - a1[1]
    dx2, dy2 = b2[0] - b1[0], b2[1] - b1[1]
    denom = dx1 * dy2 - dy1 * dx2
    if abs(denom) < 1e-12:
        return None
    t = ((b1[0] - a1[0]) * dy2 - (b1[1] - a1[1]) * dx2) / denom
    return (a1[0] + t * dx1, a1[1] + t * dy1)


# ── Shapely helpers ─────────────────────────────────────────────────


def polygons_of(geom: BaseGeometry | None) -> list[ShapelyPolygon]:
    """Flatten a Shapely result into its non-empty polygon parts.

    Boolean operations can return points or line slivers where shapes
    only touch; those carry no area and are dropped.
    """
    if geom is None or geom.is_empty:
        return []
    if isinstance(geom, ShapelyPolygon):
        return [geom] if geom.area > 1e-9 else []
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        out: list[ShapelyPolygon] = []
        for g in geom.geoms:
            out.extend(polygons_of(g))
        return out
    return []


def inset_outline(outline: Outline, inset: float) -> ShapelyPolygon | None:
    """Shrink *outline* inward by *inset* mm using Shapely.

    Returns ``None`` if the inset collapses the polygon entirely.
    """
    poly = ShapelyPolygon(outline)
    if inset <= 0:
        return poly
    shrunk = poly.buffer(-inset, join_style="mitre", mitre_limit=5.0)
    parts = polygons_of(shrunk)
    if not parts:
        log.warning("Inset of %.3f mm collapses a %d-vertex outline", inset, len(outline))
        return None
    # buffer() can return a MultiPolygon; take the largest piece
    return max(parts, key=lambda g: g.area)


def exterior_points(poly: ShapelyPolygon) -> Outline:
    """Exterior ring without the closing duplicate."""
    return list(poly.exterior.coords)[:-1]
