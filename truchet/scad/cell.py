"""
Cell geometry — one hexagon tile as a CSG subtree.

Cross-section of an interior cell (bottom to top)::

    0 – (h − e)       base tile, full outline             tile extruder
    (h − e) – h       base tile, inset outline            tile extruder
                      inset ring around it                edge extruder
                      coordinate label cut into the base  edge extruder
    h – (h + a)       arc stripes                         arc extruder
                      fill regions (layouts 3–6)          fill extruder

with h = hex_height, e = edge_height, a = arc_height.  Without an edge
extruder and without labels the base is one plain extrusion.  Each
decoration channel set to 0 is left out on its own; fills keep their
stripe-shaped gaps when the arcs are off.

The cell is composed around its own origin, rotated as a whole, then
moved to its grid position.
"""

from __future__ import annotations

import logging

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.affinity import translate as shapely_translate

from truchet.config.models import GridCoordinate, RenderConfig
from truchet.geometry.hexagon import HexagonVariant, hexagon_vertices, variant_outline
from truchet.geometry.polygon import inset_outline
from truchet.layout.borders import BorderCell
from truchet.layout.grid import cell_position
from truchet.pattern.arcs import arc_geometry
from truchet.pattern.catalog import ARC_NONE, FILL_PATTERNS, table_lookup

from .tree import Node, Region, Text, Extrude, Translate, Rotate, Union, Difference, Material, lift

log = logging.getLogger(__name__)


def _quad_segs(config: RenderConfig) -> int:
    return max(4, config.segments // 4)


def placed_outline(
    variant: HexagonVariant, coord: GridCoordinate, config: RenderConfig,
) -> ShapelyPolygon:
    """Footprint of a cell at its grid position (rotation does not change it)."""
    px, py = cell_position(coord.x, coord.y, config)
    return shapely_translate(ShapelyPolygon(variant_outline(variant, config.radius)), px, py)


def _place(node: Node, coord: GridCoordinate, rotation: int, config: RenderConfig) -> Node:
    steps = rotation % 6
    if steps:
        node = Rotate(60.0 * steps, node)
    px, py = cell_position(coord.x, coord.y, config)
    return Translate((px, py, 0.0), node)


def _base_and_edge(
    outline: list, coord: GridCoordinate, config: RenderConfig,
) -> list[Node]:
    """Base tile, plus the inlaid edge ring and label when configured."""
    h = config.hex_height
    full = Region.from_outline(outline)
    use_edge = config.edge_extruder != 0
    if not use_edge and not config.labels:
        return [Material(config.tile_extruder, Extrude(full, h), "tile")]

    e = config.edge_height
    top_region = full
    ring_region = None
    if use_edge:
        inset = inset_outline(outline, config.edge_width)
        if inset is not None:
            top_region = Region.from_shapely(inset)
            ring_region = Region.from_shapely(ShapelyPolygon(outline).difference(inset))

    top: Node = lift(h - e, Extrude(top_region, e))
    label: Node | None = None
    if config.labels:
        label = lift(h - e, Extrude(Text(str(coord), config.label_size), e))
        top = Difference(top, (label,))

    parts: list[Node] = [
        Material(config.tile_extruder, Union((Extrude(full, h - e), top)), "tile"),
    ]
    if ring_region is not None:
        parts.append(Material(config.edge_extruder, lift(h - e, Extrude(ring_region, e)), "edge"))
    if label is not None:
        parts.append(Material(config.edge_extruder or config.tile_extruder, label, "label"))
    return parts


def _decoration(outline: list, arc: int, config: RenderConfig) -> list[Node]:
    """Arc stripes and fills clipped to *outline*, stacked on the base."""
    if arc == ARC_NONE:
        return []
    q = _quad_segs(config)
    clip = ShapelyPolygon(outline)
    geo = arc_geometry(arc, hexagon_vertices(config.radius), config.arc_width)
    parts: list[Node] = []

    arcs = None
    if config.arc_extruder != 0:
        arcs = Region.from_shapely(geo.arc_shape(q).intersection(clip))
    if arcs is not None:
        parts.append(Material(
            config.arc_extruder,
            lift(config.hex_height, Extrude(arcs, config.arc_height)),
            f"arc {arc}",
        ))

    if arc in FILL_PATTERNS and config.fill_extruder != 0:
        fill = Region.from_shapely(geo.fill_shape(q).intersection(clip))
        if fill is not None:
            parts.append(Material(
                config.fill_extruder,
                lift(config.hex_height, Extrude(fill, config.arc_height)),
                f"fill {arc}",
            ))
        else:
            log.debug("Arc layout %d leaves no fill area", arc)
    return parts


def render_cell(
    variant: HexagonVariant,
    config: RenderConfig,
    arc: int,
    rotation: int,
    coord: GridCoordinate,
) -> Node | None:
    """Render one decorated cell.

    Returns ``None`` when the mode is table-driven and the table has no
    entry for *coord* (no hexagon at this cell).
    """
    if config.mode.table_driven and table_lookup(coord) is None:
        return None
    outline = variant_outline(variant, config.radius)
    parts = _base_and_edge(outline, coord, config) + _decoration(outline, arc, config)
    log.debug("Cell %s: %s arc=%d rot=%d", coord, variant.value, arc, rotation)
    return _place(Union(tuple(parts)), coord, rotation, config)


def render_border_cell(cell: BorderCell, config: RenderConfig) -> Node:
    """Plain base tile for a border/corner piece: no arcs, edge or label."""
    outline = variant_outline(cell.variant, config.radius)
    body = Material(
        config.tile_extruder,
        Extrude(Region.from_outline(outline), config.hex_height),
        f"{cell.side} border",
    )
    return _place(body, cell.coord, 0, config)
