"""
Hexagon outlines — the full cell and its boundary-trimmed variants.

Flat-topped hexagon, vertices A..F counter-clockwise at 0°, 60°, …, 300°::

           C ──── B
          /        \\
         D    o     A
          \\        /
           E ──── F

Partial variants keep a subset of the vertices.  The four corner variants
cut a half hexagon horizontally through its centre; the cut introduces a
synthesized vertex at ``r·sin30°`` from the centre on the x axis.
"""

from __future__ import annotations

import math
from enum import Enum

from .polygon import Outline, Vertex, midpoint

SIN30 = math.sin(math.radians(30))

# Vertex indices
A, B, C, D, E, F = range(6)


class HexagonVariant(Enum):
    FULL = "full"
    LEFT_HALF = "left_half"
    RIGHT_HALF = "right_half"
    TOP_HALF = "top_half"
    BOTTOM_HALF = "bottom_half"
    BOTTOM_LEFT_CORNER = "bottom_left_corner"
    BOTTOM_RIGHT_CORNER = "bottom_right_corner"
    TOP_LEFT_CORNER = "top_left_corner"
    TOP_RIGHT_CORNER = "top_right_corner"


# CCW vertex order per variant; ints index A..F, strings mark the cut vertex
_VARIANT_VERTICES: dict[HexagonVariant, tuple] = {
    HexagonVariant.FULL: (A, B, C, D, E, F),
    HexagonVariant.LEFT_HALF: (C, D, E),
    HexagonVariant.RIGHT_HALF: (F, A, B),
    HexagonVariant.TOP_HALF: (A, B, C, D),
    HexagonVariant.BOTTOM_HALF: (D, E, F, A),
    # upper part of RIGHT_HALF, bottom edge, left side
    HexagonVariant.BOTTOM_LEFT_CORNER: ("cut+", A, B),
    # upper part of LEFT_HALF, bottom edge, right side
    HexagonVariant.BOTTOM_RIGHT_CORNER: (C, D, "cut-"),
    # lower part of RIGHT_HALF, top edge, left side
    HexagonVariant.TOP_LEFT_CORNER: (F, A, "cut+"),
    # lower part of LEFT_HALF, top edge, right side
    HexagonVariant.TOP_RIGHT_CORNER: (D, E, "cut-"),
}

CORNER_VARIANTS = frozenset({
    HexagonVariant.BOTTOM_LEFT_CORNER, HexagonVariant.BOTTOM_RIGHT_CORNER,
    HexagonVariant.TOP_LEFT_CORNER, HexagonVariant.TOP_RIGHT_CORNER,
})


def hexagon_vertices(radius: float) -> tuple[Vertex, ...]:
    """The six canonical vertices A..F at distance *radius* from the origin."""
    if radius <= 0:
        raise ValueError(f"radius must be > 0, got {radius}")
    return tuple(
        (radius * math.cos(math.radians(60 * i)),
         radius * math.sin(math.radians(60 * i)))
        for i in range(6)
    )


def variant_outline(variant: HexagonVariant, radius: float) -> Outline:
    """CCW outline polygon for *variant*, centred on the cell origin."""
    verts = hexagon_vertices(radius)
    out: Outline = []
    for key in _VARIANT_VERTICES[variant]:
        if key == "cut+":
            out.append((radius * SIN30, 0.0))
        elif key == "cut-":
            out.append((-radius * SIN30, 0.0))
        else:
            out.append(verts[key])
    return out


def edge_midpoints(vertices: tuple[Vertex, ...]) -> tuple[Vertex, ...]:
    """Midpoint of edge i (vertex i → vertex i+1), for i in A..F."""
    n = len(vertices)
    return tuple(midpoint(vertices[i], vertices[(i + 1) % n]) for i in range(n))
