"""Grid layout engine — per-cell pattern assignment and staggered placement."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from truchet.config.models import GridCoordinate, RenderConfig
from truchet.pattern.catalog import admissible_range, table_lookup

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellAssignment:
    """Arc layout and rotation chosen for one interior cell."""

    coord: GridCoordinate
    arc: int
    rotation: int   # multiples of 60°


@dataclass(frozen=True)
class GridLayout:
    """Every interior cell, split into placed and absent ones."""

    cells: tuple[CellAssignment, ...]
    absent: frozenset[GridCoordinate]


def interior_coords(config: RenderConfig) -> list[GridCoordinate]:
    """Interior cells in row-major order (Y outer, X inner, Y stepping by 2)."""
    return [
        GridCoordinate(x, y)
        for y in range(0, config.count_y, 2)
        for x in range(config.count_x)
    ]


def draw_patterns(config: RenderConfig) -> tuple[int, ...]:
    """Draw ``count_x × count_y`` arc indices from the configured seed.

    One batch per invocation, row-major, so index ``y * count_x + x`` is
    the draw for cell (x, y).  Reproducible for a fixed
    (seed, count, min, max).
    """
    lo, hi = admissible_range(config.mode)
    rng = random.Random(config.seed)
    return tuple(rng.randint(lo, hi) for _ in range(config.count_x * config.count_y))


def rotation_steps(coord: GridCoordinate, config: RenderConfig) -> int:
    """Uniform rotation rule: ``(x · factor · y) mod rotate_mod``, 0 when off."""
    if not config.rotate:
        return 0
    return (coord.x * config.rotate_factor * coord.y) % config.rotate_mod


def assign_cell(
    coord: GridCoordinate,
    config: RenderConfig,
    draws: tuple[int, ...],
) -> CellAssignment | None:
    """Pattern and rotation for *coord*; ``None`` when the cell is absent."""
    if config.mode.table_driven:
        entry = table_lookup(coord)
        if entry is None:
            return None
        return CellAssignment(coord, entry.arc, entry.rotation)
    arc = draws[coord.y * config.count_x + coord.x]
    return CellAssignment(coord, arc, rotation_steps(coord, config))


def layout_grid(config: RenderConfig) -> GridLayout:
    """Assign a pattern to every interior cell.

    The random batch is drawn once up front, before any cell is visited.
    """
    draws = draw_patterns(config)
    cells: list[CellAssignment] = []
    absent: set[GridCoordinate] = set()
    for coord in interior_coords(config):
        cell = assign_cell(coord, config, draws)
        if cell is None:
            absent.add(coord)
            continue
        cells.append(cell)
    log.info(
        "Laid out %d cells (%d absent) for mode %s",
        len(cells), len(absent), config.mode.value,
    )
    return GridLayout(tuple(cells), frozenset(absent))


def cell_position(x: int, y: int, config: RenderConfig) -> tuple[float, float]:
    """Cartesian centre of grid cell (x, y).

    Columns are ``1.5·(r+g)`` apart; shifted columns sit one row spacing
    ``(r+g)/2·√3`` higher than their neighbours.  Only even *y* are cell
    rows, so each step of 2 in *y* spans one full hexagon height.
    """
    px = x * config.column_spacing
    py = (y + config.column_parity(x)) * config.row_spacing
    return (px, py)
