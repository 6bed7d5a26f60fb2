"""RenderConfig validation — geometric and range checks."""

from __future__ import annotations

import math

from .models import GridCoordinate, RenderConfig

# Approximate glyph advance of the default OpenSCAD font, per unit of text size.
LABEL_ADVANCE = 0.7


def validate_config(cfg: RenderConfig) -> list[str]:
    """Validate a RenderConfig. Returns error messages (empty = valid)."""
    errors: list[str] = []

    # ── Grid ──
    if cfg.count_x < 1:
        errors.append(f"count_x must be ≥ 1 (got {cfg.count_x})")
    if cfg.count_y < 1:
        errors.append(f"count_y must be ≥ 1 (got {cfg.count_y})")
    if cfg.radius <= 0:
        errors.append(f"radius must be > 0 (got {cfg.radius})")
        # every check below is relative to the radius
        return errors
    if cfg.gap < 0:
        errors.append(f"gap must be ≥ 0 (got {cfg.gap})")

    # ── Heights ──
    for name in ("hex_height", "arc_height"):
        if getattr(cfg, name) <= 0:
            errors.append(f"{name} must be > 0 (got {getattr(cfg, name)})")

    # ── Decoration must fit inside the hexagon ──
    # Ring pairs sit r/3 apart, so a band wider than that merges them.
    max_arc = cfg.radius / 3
    if not 0 < cfg.arc_width < max_arc:
        errors.append(
            f"arc_width {cfg.arc_width:.3f} must be in (0, {max_arc:.3f}) "
            f"for radius {cfg.radius:.3f}"
        )

    uses_edge_slot = cfg.edge_extruder != 0 or cfg.labels
    if uses_edge_slot:
        if cfg.edge_height <= 0 or cfg.edge_height >= cfg.hex_height:
            errors.append(
                f"edge_height {cfg.edge_height:.3f} must be in "
                f"(0, hex_height={cfg.hex_height:.3f})"
            )
    if cfg.edge_extruder != 0:
        if not 0 < cfg.edge_width < cfg.apothem:
            errors.append(
                f"edge_width {cfg.edge_width:.3f} must be in "
                f"(0, {cfg.apothem:.3f}); the inset would collapse the tile"
            )
    if cfg.labels and cfg.label_size <= 0:
        errors.append(f"label_size must be > 0 (got {cfg.label_size})")
    elif cfg.labels:
        # Rough box of the widest label, centred in the inset outline.
        longest = str(GridCoordinate(cfg.count_x - 1, cfg.last_row))
        width = len(longest) * LABEL_ADVANCE * cfg.label_size
        inner = cfg.apothem - (cfg.edge_width if cfg.edge_extruder != 0 else 0.0)
        if math.hypot(width / 2, cfg.label_size / 2) > inner:
            errors.append(
                f"label_size {cfg.label_size:.3f} is too large: label '{longest}' "
                f"does not fit inside the {inner:.3f} inset apothem"
            )

    # ── Rotation ──
    if cfg.rotate_mod < 1:
        errors.append(f"rotate_mod must be ≥ 1 (got {cfg.rotate_mod})")

    # ── Material channels ──
    if cfg.tile_extruder < 1:
        errors.append(f"tile_extruder must be ≥ 1 (got {cfg.tile_extruder})")
    for name in ("arc_extruder", "fill_extruder", "edge_extruder"):
        if getattr(cfg, name) < 0:
            errors.append(f"{name} must be ≥ 0 (got {getattr(cfg, name)})")

    if cfg.segments < 3:
        errors.append(f"segments must be ≥ 3 (got {cfg.segments})")

    return errors
