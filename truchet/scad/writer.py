"""
OpenSCAD writer — serialize a CSG tree to ``.scad`` source.

Output stays within ``polygon`` + ``linear_extrude`` + transforms and
booleans; every inset and clip has already been computed in Python, so
OpenSCAD never has to run ``offset()`` or intersect curved solids.
"""

from __future__ import annotations

from .tree import (
    Node, Region, Text, Extrude, Translate, Rotate, Union, Difference, Material,
)

# Preview colours per extruder; channels beyond the table cycle through it.
PALETTE = ("white", "black", "orange", "steelblue", "crimson")

_IND = "    "


def _fmt_pts(pts) -> str:
    """Format vertices for an OpenSCAD ``polygon()`` call."""
    return ", ".join(f"[{x:.3f}, {y:.3f}]" for x, y in pts)


def channel_color(channel: int) -> str:
    return PALETTE[(channel - 1) % len(PALETTE)]


def _region_lines(region: Region, indent: str) -> list[str]:
    # One polygon() with multi-path syntax: exteriors and holes share one
    # point list, each ring is a path into it.
    all_pts: list[tuple[float, float]] = []
    paths: list[list[int]] = []
    for exterior, holes in region.polygons:
        for ring in (exterior, *holes):
            start = len(all_pts)
            all_pts.extend(ring)
            paths.append(list(range(start, start + len(ring))))
    if len(paths) == 1:
        return [f"{indent}polygon(points = [{_fmt_pts(all_pts)}]);"]
    paths_str = ", ".join("[" + ", ".join(str(i) for i in p) + "]" for p in paths)
    return [f"{indent}polygon(points = [{_fmt_pts(all_pts)}], paths = [{paths_str}]);"]


def _text_lines(text: Text, indent: str) -> list[str]:
    escaped = text.text.replace("\\", "\\\\").replace('"', '\\"')
    return [
        f'{indent}text("{escaped}", size = {text.size:.3f}, '
        f'halign = "{text.halign}", valign = "{text.valign}");'
    ]


def _node_lines(node, indent: str) -> list[str]:
    if isinstance(node, Region):
        return _region_lines(node, indent)
    if isinstance(node, Text):
        return _text_lines(node, indent)
    if isinstance(node, Extrude):
        return [f"{indent}linear_extrude(height = {node.height:.3f})",
                *_node_lines(node.child, indent + _IND)]
    if isinstance(node, Translate):
        x, y, z = node.offset
        return [f"{indent}translate([{x:.3f}, {y:.3f}, {z:.3f}])",
                *_node_lines(node.child, indent + _IND)]
    if isinstance(node, Rotate):
        return [f"{indent}rotate([0, 0, {node.angle:.3f}])",
                *_node_lines(node.child, indent + _IND)]
    if isinstance(node, Union):
        lines = [f"{indent}union() {{"]
        for child in node.children:
            lines += _node_lines(child, indent + _IND)
        lines.append(f"{indent}}}")
        return lines
    if isinstance(node, Difference):
        lines = [f"{indent}difference() {{"]
        lines += _node_lines(node.base, indent + _IND)
        for cut in node.cuts:
            lines += _node_lines(cut, indent + _IND)
        lines.append(f"{indent}}}")
        return lines
    if isinstance(node, Material):
        tag = f"extruder {node.channel}"
        if node.label:
            tag += f" ({node.label})"
        return [f"{indent}// {tag}",
                f'{indent}color("{channel_color(node.channel)}")',
                *_node_lines(node.child, indent + _IND)]
    raise TypeError(f"Unsupported CSG node {type(node).__name__}")


def to_scad(
    node: Node | None,
    header: list[str] | None = None,
    segments: int = 64,
) -> str:
    """Serialize *node* to an OpenSCAD program.

    *header* lines are emitted as ``//`` comments.  An empty tree (e.g. a
    channel with no geometry) still yields a valid, empty program.
    """
    lines = [f"// {h}" for h in (header or [])]
    lines += [f"$fn = {segments};", ""]
    if node is not None:
        lines += _node_lines(node, "")
    return "\n".join(lines) + "\n"
