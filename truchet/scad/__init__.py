"""OpenSCAD generation — CSG tree, per-cell geometry, panel assembly and export.

Submodules:
  tree      Immutable CSG nodes, material tags and channel selection.
  writer    Serialization of a tree to ``.scad`` source.
  cell      One decorated hexagon (base, edge ring, label, arcs, fills).
  panel     The whole mat: interior, borders, header, file output.
  compiler  Wrapper around the ``openscad`` CLI for STL export.
"""

from .tree import (
    Region, Text, Extrude, Translate, Rotate, Union, Difference, Material,
    lift, select_channel, channels_used,
)
from .writer import to_scad, channel_color
from .cell import render_cell, render_border_cell, placed_outline
from .panel import (
    Panel, PanelOutput,
    render_panel, panel_footprints, panel_frame, panel_to_scad, write_panel,
)
from .compiler import find_openscad, check_scad, compile_scad

__all__ = [
    # Tree
    "Region", "Text", "Extrude", "Translate", "Rotate", "Union", "Difference", "Material",
    "lift", "select_channel", "channels_used",
    # Writer
    "to_scad", "channel_color",
    # Cells
    "render_cell", "render_border_cell", "placed_outline",
    # Panel
    "Panel", "PanelOutput",
    "render_panel", "panel_footprints", "panel_frame", "panel_to_scad", "write_panel",
    # Compiler
    "find_openscad", "check_scad", "compile_scad",
]
