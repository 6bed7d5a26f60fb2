"""
Panel assembly — the whole mat as one CSG tree, and its export.

This is the single entry point the CLI calls.  It:

1. Lays out the interior grid (one batch of pattern draws)
2. Renders every interior cell
3. Renders the border/corner pieces the mat asks for
4. Optionally keeps a single material channel
5. Writes the ``.scad`` file and, on request, compiles it to STL
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from shapely.geometry import Polygon as ShapelyPolygon, box as shapely_box

from truchet.config.models import RenderConfig
from truchet.config.serialization import config_to_dict
from truchet.geometry.hexagon import HexagonVariant
from truchet.layout.borders import BorderCell, border_cells
from truchet.layout.grid import GridLayout, layout_grid

from .cell import placed_outline, render_border_cell, render_cell
from .compiler import compile_scad
from .tree import Node, Union, channels_used, select_channel
from .writer import to_scad

log = logging.getLogger(__name__)


@dataclass
class Panel:
    """A rendered mat."""

    config: RenderConfig
    layout: GridLayout
    borders: list[BorderCell]
    tree: Node | None
    channel: int | None = None

    @property
    def channels(self) -> list[int]:
        return sorted(channels_used(self.tree)) if self.tree is not None else []


@dataclass
class PanelOutput:
    """Files produced by ``write_panel``."""

    success: bool
    message: str
    scad_path: Path | None = None
    stl_path: Path | None = None
    stages: list[str] = field(default_factory=list)


def render_panel(config: RenderConfig, channel: int | None = None) -> Panel:
    """Render every interior and border cell of the mat.

    When *channel* is given only geometry tagged with that extruder is
    kept (one mesh per material); the tree is ``None`` if nothing is.
    """
    layout = layout_grid(config)
    borders = border_cells(config, layout.absent)

    parts: list[Node] = []
    for cell in layout.cells:
        node = render_cell(HexagonVariant.FULL, config, cell.arc, cell.rotation, cell.coord)
        if node is not None:
            parts.append(node)
    parts += [render_border_cell(b, config) for b in borders]

    tree: Node | None = Union(tuple(parts)) if parts else None
    if tree is not None and channel is not None:
        tree = select_channel(tree, channel)
        if tree is None:
            log.warning("Extruder %d has no geometry in mat %s", channel, config.mat.name)

    return Panel(config, layout, borders, tree, channel)


def panel_footprints(panel: Panel) -> dict[str, list[ShapelyPolygon]]:
    """Placed 2-D outlines of every emitted cell, keyed by role."""
    cfg = panel.config
    return {
        "interior": [placed_outline(HexagonVariant.FULL, c.coord, cfg) for c in panel.layout.cells],
        "border": [placed_outline(b.variant, b.coord, cfg) for b in panel.borders],
    }


def panel_frame(config: RenderConfig) -> ShapelyPolygon:
    """Rectangle the closed panel should fill (exact for ``gap == 0``)."""
    xmax = (config.count_x - 1) * config.column_spacing + config.radius
    ymax = (config.last_row + 2) * config.row_spacing
    return shapely_box(-config.radius, -config.row_spacing, xmax, ymax)


def output_name(config: RenderConfig, channel: int | None = None) -> str:
    name = f"mat_{config.mat.name}"
    if channel is not None:
        name += f"_ch{channel}"
    return name


def panel_to_scad(panel: Panel) -> str:
    cfg = panel.config
    header = [
        f"Truchet mat {cfg.mat.name}: {cfg.count_x}x{cfg.count_y} cells, "
        f"mode {cfg.mode.value}, seed {cfg.seed}",
        f"Cells: {len(panel.layout.cells)} interior, {len(panel.borders)} border, "
        f"{len(panel.layout.absent)} absent",
    ]
    if panel.channel is not None:
        header.append(f"Extruder {panel.channel} only")
    header.append("config: " + json.dumps(config_to_dict(cfg), sort_keys=True))
    return to_scad(panel.tree, header=header, segments=cfg.segments)


def write_panel(
    config: RenderConfig,
    out_dir: Path,
    *,
    channel: int | None = None,
    stl: bool = False,
) -> PanelOutput:
    """Render the mat and write ``mat_<name>[_ch<n>].scad`` into *out_dir*.

    With *stl* the file is also compiled through the OpenSCAD CLI; a
    missing or failing binary is reported in the result, not raised.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stages: list[str] = []

    panel = render_panel(config, channel)
    stages.append("render")

    scad_path = out_dir / f"{output_name(config, channel)}.scad"
    scad_path.write_text(panel_to_scad(panel), encoding="utf-8")
    stages.append("scad")
    log.info("Wrote %s", scad_path)

    if not stl:
        return PanelOutput(True, "OK", scad_path=scad_path, stages=stages)

    if panel.tree is None:
        # OpenSCAD refuses to export an empty top-level object
        return PanelOutput(
            False, f"Extruder {channel} has no geometry; STL skipped",
            scad_path=scad_path, stages=stages,
        )

    ok, message, stl_path = compile_scad(scad_path)
    if not ok:
        log.warning("STL export failed for %s: %s", scad_path.name, message)
        return PanelOutput(False, message, scad_path=scad_path, stages=stages)
    stages.append("stl")
    log.info("Wrote %s", stl_path)
    return PanelOutput(True, message, scad_path=scad_path, stl_path=stl_path, stages=stages)
