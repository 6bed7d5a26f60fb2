"""Pattern catalog — admissible arc ranges per mode and the CircledTriad table."""

from __future__ import annotations

from dataclasses import dataclass

from truchet.config.models import GridCoordinate, TruchetMode

ARC_NONE = 0
ARC_PATTERNS = (1, 2, 3, 4, 5, 6)

# Arc layouts 3..6 define fill regions; 1 and 2 are stripes only.
FILL_PATTERNS = frozenset({3, 4, 5, 6})


@dataclass(frozen=True)
class TableEntry:
    """Arc layout and rotation for one offset of a periodic pattern table."""

    offset: tuple[int, int]
    arc: int
    rotation: int


# ── CircledTriad ────────────────────────────────────────────────────
#
# Cells (x, y), (x+1, y) and (x, y+2) with x even share vertex B of the
# first cell.  Layout 1 rotated by one step puts a ring pair on B, D and F
# of every cell, so each triad closes a full circle around its shared
# vertex.  Two triads per period; the remaining two offsets carry layout 3
# to break up the repetition.
#
# Rows only take even y, so these eight entries cover every offset a real
# grid reaches and no CircledTriad cell is ever absent.  Offsets left out of
# the table render nothing and drop their border pieces.

MODULO_X = 4
MODULO_Y = 4

CIRCLED_TRIAD_TABLE: dict[tuple[int, int], TableEntry] = {
    e.offset: e
    for e in (
        TableEntry((0, 0), 1, 1),
        TableEntry((1, 0), 1, 1),
        TableEntry((0, 2), 1, 1),
        TableEntry((2, 2), 1, 1),
        TableEntry((3, 2), 1, 1),
        TableEntry((2, 0), 1, 1),
        TableEntry((1, 2), 3, 0),
        TableEntry((3, 0), 3, 1),
    )
}

_RANGES: dict[TruchetMode, tuple[int, int]] = {
    TruchetMode.ONE: (1, 1),
    TruchetMode.TWO: (2, 2),
    TruchetMode.THREE: (3, 3),
    TruchetMode.FOUR: (4, 4),
    TruchetMode.FIVE: (5, 5),
    TruchetMode.SIX: (6, 6),
    TruchetMode.ONE_TWO: (1, 2),
    TruchetMode.THREE_TO_SIX: (3, 6),
    TruchetMode.CIRCLED_TRIAD: (
        min(e.arc for e in CIRCLED_TRIAD_TABLE.values()),
        max(e.arc for e in CIRCLED_TRIAD_TABLE.values()),
    ),
}


def admissible_range(mode: TruchetMode | str) -> tuple[int, int]:
    """Inclusive (min, max) arc index for *mode*.

    Raises ``ConfigError`` for an unknown mode string.
    """
    return _RANGES[TruchetMode.parse(mode)]


def table_lookup(coord: GridCoordinate) -> TableEntry | None:
    """CircledTriad entry for *coord*, or ``None`` when the offset is absent.

    An absent offset means no hexagon is placed at that cell.
    """
    return CIRCLED_TRIAD_TABLE.get((coord.x % MODULO_X, coord.y % MODULO_Y))
