"""
Arc layouts — the six decorative Truchet motifs as 2-D primitives.

Every layout is built from three kinds of stripe:

* **vertex ring pairs** — two concentric rings around a hexagon vertex,
  radii ``r/2 ± r/6``; they join the two edges meeting at that vertex.
* **projected ring pairs** — rings around a *projected point*, the place
  where the extended edges on either side of an edge meet (the centre of
  the neighbouring cell across that edge).  Radii ``3r/2 ± r/6``; they join
  the two edges flanking that edge.
* **band pairs** — two parallel straight stripes joining opposite edges,
  ``±r/6`` from the line through both edge midpoints.

Every edge is crossed at both of its one-third points by exactly one
stripe each, so any two tiles join seamlessly whatever their layout or
rotation.  Primitives are returned unclipped; the cell renderer intersects
them with the outline.

Layouts (edges named by their end vertices)::

    1  vertex pairs A, C, E
    2  vertex pairs A, D        + bands BC → EF
    3  projected pairs AB, BC + vertex pair E   fill: channels between each pair
    4  projected pairs BC, EF   + bands BC → EF   fill: caps inside the inner rings
    5  vertex pairs A, C, E                 fill: discs inside the inner rings
    6  projected pairs AB, DE   + bands AB → DE   fill: channel between the bands
"""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import LineString, Point
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from truchet.geometry.hexagon import A, C, D, E, edge_midpoints
from truchet.geometry.polygon import Vertex, lerp, line_intersection, rotate_point

# Edge indices: edge i runs from vertex i to vertex i+1.
AB, BC, CD, DE, EF, FA = range(6)


# ── Primitives ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Ring:
    """Annulus of *width* centred on a circle of *radius* around *center*."""

    center: Vertex
    radius: float
    width: float

    def shape(self, quad_segs: int = 16) -> BaseGeometry:
        outer = Point(self.center).buffer(self.radius + self.width / 2, quad_segs=quad_segs)
        inner_r = self.radius - self.width / 2
        if inner_r <= 0:
            return outer
        return outer.difference(Point(self.center).buffer(inner_r, quad_segs=quad_segs))

    def rotated(self, angle_deg: float) -> "Ring":
        return Ring(rotate_point(self.center, angle_deg), self.radius, self.width)


@dataclass(frozen=True)
class Disc:
    center: Vertex
    radius: float

    def shape(self, quad_segs: int = 16) -> BaseGeometry:
        return Point(self.center).buffer(self.radius, quad_segs=quad_segs)

    def rotated(self, angle_deg: float) -> "Disc":
        return Disc(rotate_point(self.center, angle_deg), self.radius)


@dataclass(frozen=True)
class Band:
    """Straight stripe of *width* along the segment start → end."""

    start: Vertex
    end: Vertex
    width: float

    def shape(self, quad_segs: int = 16) -> BaseGeometry:
        return LineString([self.start, self.end]).buffer(self.width / 2, cap_style="flat")

    def rotated(self, angle_deg: float) -> "Band":
        return Band(
            rotate_point(self.start, angle_deg),
            rotate_point(self.end, angle_deg),
            self.width,
        )


Primitive = Ring | Disc | Band


@dataclass(frozen=True)
class ArcGeometry:
    """The stripes (and optional fill regions) of one arc layout."""

    pattern: int
    arcs: tuple[Primitive, ...]
    fills: tuple[Primitive, ...] = ()

    def arc_shape(self, quad_segs: int = 16) -> BaseGeometry:
        return unary_union([p.shape(quad_segs) for p in self.arcs])

    def fill_shape(self, quad_segs: int = 16) -> BaseGeometry | None:
        """Fill regions with the stripes removed, or ``None`` if there are none."""
        if not self.fills:
            return None
        raw = unary_union([p.shape(quad_segs) for p in self.fills])
        return raw.difference(self.arc_shape(quad_segs))

    def rotated(self, steps: int) -> "ArcGeometry":
        """Rotate every primitive about the cell origin by ``steps × 60°``."""
        angle = 60.0 * (steps % 6)
        if angle == 0:
            return self
        return ArcGeometry(
            self.pattern,
            tuple(p.rotated(angle) for p in self.arcs),
            tuple(p.rotated(angle) for p in self.fills),
        )


# ── Derived points ──────────────────────────────────────────────────


def projected_points(vertices: tuple[Vertex, ...]) -> tuple[Vertex, ...]:
    """Projected point of every edge.

    For edge i the edges on either side (i-1 and i+1) are extended until
    they meet outside the hexagon.  For a regular hexagon of radius r that
    point is ``r·√3`` from the centre, straight out from the edge midpoint.
    """
    n = len(vertices)
    out: list[Vertex] = []
    for i in range(n):
        p = line_intersection(
            vertices[(i - 1) % n], vertices[i],
            vertices[(i + 1) % n], vertices[(i + 2) % n],
        )
        if p is None:
            raise ValueError(f"edges adjacent to edge {i} are parallel")
        out.append(p)
    return tuple(out)


def _radius_of(vertices: tuple[Vertex, ...]) -> float:
    x, y = vertices[0]
    return (x * x + y * y) ** 0.5


# ── Stripe builders ─────────────────────────────────────────────────


def _vertex_pair(v: Vertex, r: float, w: float) -> tuple[Ring, Ring]:
    return (Ring(v, r / 2 - r / 6, w), Ring(v, r / 2 + r / 6, w))


def _projected_pair(p: Vertex, r: float, w: float) -> tuple[Ring, Ring]:
    return (Ring(p, 1.5 * r - r / 6, w), Ring(p, 1.5 * r + r / 6, w))


def _extend(a: Vertex, b: Vertex, by: float) -> tuple[Vertex, Vertex]:
    """Lengthen segment a→b by *by* at both ends."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    length = (dx * dx + dy * dy) ** 0.5
    ux, uy = dx / length * by, dy / length * by
    return (a[0] - ux, a[1] - uy), (b[0] + ux, b[1] + uy)


def _band_pair(
    vertices: tuple[Vertex, ...], edge: int, w: float,
) -> tuple[Band, Band]:
    """Two stripes from the one-third points of *edge* to the opposite edge."""
    n = len(vertices)
    v0, v1 = vertices[edge], vertices[(edge + 1) % n]
    o0, o1 = vertices[(edge + 3) % n], vertices[(edge + 4) % n]
    # The opposite edge runs the other way, so 1/3 pairs with 2/3.
    first = _extend(lerp(v0, v1, 1 / 3), lerp(o0, o1, 2 / 3), w)
    second = _extend(lerp(v0, v1, 2 / 3), lerp(o0, o1, 1 / 3), w)
    return (Band(*first, w), Band(*second, w))


def _band_channel(
    vertices: tuple[Vertex, ...], edge: int, r: float, w: float,
) -> Band:
    mids = edge_midpoints(vertices)
    start, end = mids[edge], mids[(edge + 3) % len(mids)]
    return Band(*_extend(start, end, w), r / 3 - w)


# ── Public API ──────────────────────────────────────────────────────


def arc_geometry(
    pattern: int,
    vertices: tuple[Vertex, ...],
    arc_width: float,
) -> ArcGeometry:
    """Stripes and fills of arc layout *pattern* for a hexagon.

    Parameters
    ----------
    pattern : int
        Arc layout, 1..6.
    vertices : tuple of (x, y)
        The six canonical vertices A..F of the unrotated cell.
    arc_width : float
        Stripe width in mm; must be below ``r/3`` for the pair to stay
        separate (checked by config validation).
    """
    if len(vertices) != 6:
        raise ValueError(f"expected 6 hexagon vertices, got {len(vertices)}")
    r = _radius_of(vertices)
    w = arc_width
    proj = projected_points(vertices)

    if pattern == 1:
        arcs = (*_vertex_pair(vertices[A], r, w),
                *_vertex_pair(vertices[C], r, w),
                *_vertex_pair(vertices[E], r, w))
        return ArcGeometry(1, arcs)

    if pattern == 2:
        arcs = (*_vertex_pair(vertices[A], r, w),
                *_vertex_pair(vertices[D], r, w),
                *_band_pair(vertices, BC, w))
        return ArcGeometry(2, arcs)

    if pattern == 3:
        arcs = (*_projected_pair(proj[AB], r, w),
                *_projected_pair(proj[BC], r, w),
                *_vertex_pair(vertices[E], r, w))
        fills = (Ring(proj[AB], 1.5 * r, r / 3 - w),
                 Ring(proj[BC], 1.5 * r, r / 3 - w),
                 Ring(vertices[E], r / 2, r / 3 - w))
        return ArcGeometry(3, arcs, fills)

    if pattern == 4:
        arcs = (*_projected_pair(proj[BC], r, w),
                *_projected_pair(proj[EF], r, w),
                *_band_pair(vertices, BC, w))
        fills = tuple(Disc(proj[e], 1.5 * r - r / 6 - w / 2) for e in (BC, EF))
        return ArcGeometry(4, arcs, fills)

    if pattern == 5:
        arcs = (*_vertex_pair(vertices[A], r, w),
                *_vertex_pair(vertices[C], r, w),
                *_vertex_pair(vertices[E], r, w))
        fills = tuple(Disc(vertices[v], r / 3 - w / 2) for v in (A, C, E))
        return ArcGeometry(5, arcs, fills)

    if pattern == 6:
        arcs = (*_projected_pair(proj[AB], r, w),
                *_projected_pair(proj[DE], r, w),
                *_band_pair(vertices, AB, w))
        fills = (_band_channel(vertices, AB, r, w),)
        return ArcGeometry(6, arcs, fills)

    raise ValueError(f"unknown arc pattern {pattern} (expected 1..6)")
