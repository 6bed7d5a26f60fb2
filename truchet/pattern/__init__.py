"""Pattern catalog — arc layouts and per-mode pattern selection.

Submodules:
  catalog   Admissible arc ranges per mode and the CircledTriad table.
  arcs      The six arc layouts as Ring / Disc / Band primitives.
"""

from .catalog import (
    ARC_NONE, ARC_PATTERNS, FILL_PATTERNS, TableEntry,
    CIRCLED_TRIAD_TABLE, MODULO_X, MODULO_Y,
    admissible_range, table_lookup,
)
from .arcs import ArcGeometry, Ring, Disc, Band, arc_geometry, projected_points

__all__ = [
    # Catalog
    "ARC_NONE", "ARC_PATTERNS", "FILL_PATTERNS", "TableEntry",
    "CIRCLED_TRIAD_TABLE", "MODULO_X", "MODULO_Y",
    "admissible_range", "table_lookup",
    # Arcs
    "ArcGeometry", "Ring", "Disc", "Band", "arc_geometry", "projected_points",
]
