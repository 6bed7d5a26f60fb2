"""
Border/corner layout — trimmed hexagons that square off the panel edges.

Panel frame (gap = 0)::

    x from -r                   to (count_x - 1)·1.5r + r
    y from -row_spacing         to (last_row + 2)·row_spacing

Top and bottom
    Unshifted columns leave a notch above their top cell, filled by a
    ``BOTTOM_HALF`` one cell step up.  Shifted columns leave a notch below
    their bottom cell, filled by a ``TOP_HALF`` one cell step down.

Sides
    Column -1 carries ``RIGHT_HALF`` pieces, column ``count_x`` carries
    ``LEFT_HALF`` pieces.  Which end of a side column needs a cut depends on
    its own parity: a shifted side column overhangs the bottom edge (cut
    corner variant at ``y = -2``, plain half at ``last_row``), an unshifted
    one overhangs the top edge (plain half at ``y = 0``, cut corner variant
    at ``last_row + 2``).

The piece at either end of a side column is the corner piece.  With the
corner flag set it takes the variant above.  Without it, a set border flag
still places a plain half there, which overhangs the frame at the cut end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from truchet.config.models import GridCoordinate, RenderConfig
from truchet.geometry.hexagon import HexagonVariant as HV

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BorderCell:
    """A boundary piece, the side it closes and the interior cell it belongs to."""

    coord: GridCoordinate
    variant: HV
    side: str           # left/right/top/bottom or a corner name
    anchor: GridCoordinate


@dataclass(frozen=True)
class _SideSpec:
    column: int
    anchor_x: int
    half: HV
    bottom_cut: HV
    top_cut: HV
    border: bool
    bottom_corner: bool
    top_corner: bool
    side: str


def _side_cells(config: RenderConfig, spec: _SideSpec) -> list[BorderCell]:
    ylast = config.last_row
    shifted = config.column_parity(spec.column) == 1
    c = spec.column

    def anchor(y: int) -> GridCoordinate:
        return GridCoordinate(spec.anchor_x, min(max(y, 0), ylast))

    def end_piece(coord: GridCoordinate, cut: HV, corner: bool, name: str) -> list[BorderCell]:
        if corner:
            return [BorderCell(coord, cut, name, anchor(coord.y))]
        if spec.border:
            return [BorderCell(coord, spec.half, spec.side, anchor(coord.y))]
        return []

    if shifted:
        bottom = (GridCoordinate(c, -2), spec.bottom_cut)
        middle = range(0, ylast - 1, 2)
        top = (GridCoordinate(c, ylast), spec.half)
    else:
        bottom = (GridCoordinate(c, 0), spec.half)
        middle = range(2, ylast + 1, 2)
        top = (GridCoordinate(c, ylast + 2), spec.top_cut)

    cells = end_piece(*bottom, spec.bottom_corner, f"bottom_{spec.side}")
    if spec.border:
        for y in middle:
            cells.append(BorderCell(GridCoordinate(c, y), spec.half, spec.side, anchor(y)))
    cells += end_piece(*top, spec.top_corner, f"top_{spec.side}")
    return cells


def border_cells(
    config: RenderConfig,
    absent: frozenset[GridCoordinate] = frozenset(),
) -> list[BorderCell]:
    """Every border and corner piece the active mat asks for.

    Pieces whose anchor cell is in *absent* are dropped along with it.
    """
    mat = config.mat
    ylast = config.last_row
    xlast = config.count_x - 1
    cells: list[BorderCell] = []

    # ── Top / bottom: membership on the first and last cell row ──
    for x in range(config.count_x):
        if config.column_parity(x) == 0:
            if mat.top_border:
                cells.append(BorderCell(
                    GridCoordinate(x, ylast + 2), HV.BOTTOM_HALF, "top",
                    GridCoordinate(x, ylast),
                ))
        elif mat.bottom_border:
            cells.append(BorderCell(
                GridCoordinate(x, -2), HV.TOP_HALF, "bottom",
                GridCoordinate(x, 0),
            ))

    # ── Sides: one column outside x = 0 and x = count_x - 1 ──
    cells += _side_cells(config, _SideSpec(
        column=-1, anchor_x=0, half=HV.RIGHT_HALF,
        bottom_cut=HV.BOTTOM_LEFT_CORNER, top_cut=HV.TOP_LEFT_CORNER,
        border=mat.left_border,
        bottom_corner=mat.bottom_left_corner, top_corner=mat.top_left_corner,
        side="left",
    ))
    cells += _side_cells(config, _SideSpec(
        column=xlast + 1, anchor_x=xlast, half=HV.LEFT_HALF,
        bottom_cut=HV.BOTTOM_RIGHT_CORNER, top_cut=HV.TOP_RIGHT_CORNER,
        border=mat.right_border,
        bottom_corner=mat.bottom_right_corner, top_corner=mat.top_right_corner,
        side="right",
    ))

    if absent:
        kept = [c for c in cells if c.anchor not in absent]
        if len(kept) != len(cells):
            log.debug("Dropped %d border pieces next to absent cells", len(cells) - len(kept))
        cells = kept

    log.info("Placed %d border/corner pieces for mat %s", len(cells), mat.name)
    return cells
