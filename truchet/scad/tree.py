"""
CSG tree — immutable description of the solid handed to the CAD kernel.

Only the primitives the kernel needs are modelled: 2-D regions (polygons
with holes, pre-computed with Shapely), text, linear extrusion, rigid
transforms, union/difference, and a material tag that assigns a subtree
to one extruder.  ``writer.to_scad`` serializes a tree to OpenSCAD.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shapely.geometry.base import BaseGeometry

from truchet.geometry.polygon import Outline, polygons_of, exterior_points


# ── 2-D ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Region:
    """One or more polygons, each an exterior ring plus hole rings."""

    polygons: tuple[tuple[tuple, tuple], ...]   # ((exterior, (hole, ...)), ...)

    @classmethod
    def from_outline(cls, outline: Outline) -> "Region":
        return cls(((tuple(outline), ()),))

    @classmethod
    def from_shapely(cls, geom: BaseGeometry | None) -> "Region | None":
        """Convert a Shapely result; ``None`` when nothing with area is left."""
        polys = polygons_of(geom)
        if not polys:
            return None
        return cls(tuple(
            (
                tuple(exterior_points(p)),
                tuple(tuple(list(h.coords)[:-1]) for h in p.interiors),
            )
            for p in polys
        ))


@dataclass(frozen=True)
class Text:
    text: str
    size: float
    halign: str = "center"
    valign: str = "center"


# ── 3-D ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Extrude:
    child: Region | Text
    height: float


@dataclass(frozen=True)
class Translate:
    offset: tuple[float, float, float]
    child: "Node"


@dataclass(frozen=True)
class Rotate:
    """Rotation about the Z axis, in degrees."""

    angle: float
    child: "Node"


@dataclass(frozen=True)
class Union:
    children: tuple["Node", ...]


@dataclass(frozen=True)
class Difference:
    base: "Node"
    cuts: tuple["Node", ...]


@dataclass(frozen=True)
class Material:
    """Assigns *child* to extruder *channel*."""

    channel: int
    child: "Node"
    label: str = ""


Node = Extrude | Translate | Rotate | Union | Difference | Material


def lift(z: float, node: Node) -> Node:
    """Translate *node* up by *z*; no-op for ``z == 0``."""
    if z == 0:
        return node
    return Translate((0.0, 0.0, z), node)


# ── Tree queries ────────────────────────────────────────────────────


def select_channel(node: Node, channel: int) -> Node | None:
    """Keep only the subtrees tagged with *channel*.

    Untagged solids belong to no channel and are dropped.  Cuts of a
    ``Difference`` are kept whole since they only remove material.
    """
    if isinstance(node, Material):
        return node if node.channel == channel else None
    if isinstance(node, Union):
        kept = tuple(k for k in (select_channel(c, channel) for c in node.children) if k is not None)
        return Union(kept) if kept else None
    if isinstance(node, (Translate, Rotate)):
        child = select_channel(node.child, channel)
        return replace(node, child=child) if child is not None else None
    if isinstance(node, Difference):
        base = select_channel(node.base, channel)
        return Difference(base, node.cuts) if base is not None else None
    return None


def channels_used(node: Node) -> set[int]:
    """All material channels that appear in the tree."""
    if isinstance(node, Material):
        return {node.channel} | channels_used(node.child)
    if isinstance(node, Union):
        out: set[int] = set()
        for c in node.children:
            out |= channels_used(c)
        return out
    if isinstance(node, (Translate, Rotate)):
        return channels_used(node.child)
    if isinstance(node, Difference):
        return channels_used(node.base)
    return set()
