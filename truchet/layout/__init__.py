"""Layout — where cells go and which pattern each one carries.

Submodules:
  grid      Pattern assignment (seeded batch / table) and staggered placement.
  borders   Boundary-trimmed pieces around the perimeter, gated by the mat.
"""

from .grid import (
    CellAssignment, GridLayout,
    interior_coords, draw_patterns, rotation_steps, assign_cell,
    layout_grid, cell_position,
)
from .borders import BorderCell, border_cells

__all__ = [
    # Grid
    "CellAssignment", "GridLayout",
    "interior_coords", "draw_patterns", "rotation_steps", "assign_cell",
    "layout_grid", "cell_position",
    # Borders
    "BorderCell", "border_cells",
]
