"""Configuration dataclasses — mats, truchet modes and the merged render record."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class ConfigError(Exception):
    """Raised when a configuration cannot be resolved into a RenderConfig."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))


class TruchetMode(Enum):
    """Closed set of tiling modes.

    The numeric modes pin every cell to one arc layout, the ranged modes
    draw uniformly from a span of layouts and ``CIRCLED_TRIAD`` reads
    arc + rotation from a fixed periodic table.
    """

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    ONE_TWO = "1-2"
    THREE_TO_SIX = "3-4-5-6"
    CIRCLED_TRIAD = "CircledTriad"

    @classmethod
    def parse(cls, value: "str | TruchetMode") -> "TruchetMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            known = ", ".join(m.value for m in cls)
            raise ConfigError([f"Unknown truchet mode '{value}' (expected one of: {known})"])

    @property
    def table_driven(self) -> bool:
        return self is TruchetMode.CIRCLED_TRIAD


@dataclass(frozen=True)
class GridCoordinate:
    """Logical column/row of a hexagon cell."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class MatPreset:
    """Border/corner treatment of one panel in a mosaic."""

    name: str
    start_column_parity: bool = False
    left_border: bool = False
    right_border: bool = False
    top_border: bool = False
    bottom_border: bool = False
    bottom_left_corner: bool = False
    top_left_corner: bool = False
    bottom_right_corner: bool = False
    top_right_corner: bool = False


@dataclass(frozen=True)
class RenderConfig:
    """Fully merged, immutable parameter record.

    All distances are in millimetres.  Extruder fields select a material
    channel; ``0`` disables that element.
    """

    mat: MatPreset
    count_x: int = 8
    count_y: int = 10
    radius: float = 10.0
    gap: float = 0.0

    hex_height: float = 1.2
    arc_height: float = 0.6
    arc_width: float = 1.2
    edge_height: float = 0.4
    edge_width: float = 0.8
    label_size: float = 2.5

    seed: int = 42
    mode: TruchetMode = TruchetMode.ONE_TWO
    rotate: bool = False
    rotate_factor: int = 1
    rotate_mod: int = 6

    tile_extruder: int = 1
    arc_extruder: int = 2
    fill_extruder: int = 3
    edge_extruder: int = 4

    labels: bool = False
    segments: int = 64

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def pitch(self) -> float:
        """Radius plus gap — the unit the grid spacing is built from."""
        return self.radius + self.gap

    @property
    def column_spacing(self) -> float:
        return 1.5 * self.pitch

    @property
    def row_spacing(self) -> float:
        """Vertical step between a column and its staggered neighbour."""
        return self.pitch / 2 * math.sqrt(3)

    @property
    def last_row(self) -> int:
        """Largest even row index inside the grid."""
        return (self.count_y - 1) - ((self.count_y - 1) % 2)

    @property
    def apothem(self) -> float:
        return self.radius * math.sqrt(3) / 2

    def column_parity(self, x: int) -> int:
        """1 when column *x* is shifted up by one row spacing."""
        return (x + int(self.mat.start_column_parity)) % 2

    @property
    def extruders(self) -> list[int]:
        """Material channels actually in use, ascending."""
        used = {self.tile_extruder, self.arc_extruder,
                self.fill_extruder, self.edge_extruder}
        used.discard(0)
        return sorted(used)
