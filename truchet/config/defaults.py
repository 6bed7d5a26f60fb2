"""
Default parameters — single source of truth for the base mat settings.

Loads ``defaults.json`` (next to this module) once and exposes typed accessors.
"""

from __future__ import annotations
import json
from pathlib import Path
from functools import lru_cache


_CONFIG_PATH = Path(__file__).resolve().parent / "defaults.json"


@lru_cache(maxsize=1)
def _load() -> dict:
    return json.loads(_CONFIG_PATH.read_text(encoding="utf-8"))


class _Defaults:
    """Typed accessor for the packaged defaults."""

    # ── raw section accessors ───────────────────────────────────────
    @property
    def grid(self) -> dict:
        return _load()["grid"]

    @property
    def tile(self) -> dict:
        return _load()["tile"]

    @property
    def pattern(self) -> dict:
        return _load()["pattern"]

    @property
    def extruders(self) -> dict:
        return _load()["extruders"]

    @property
    def manual_mat(self) -> dict:
        return _load()["manual_mat"]

    # ── grid ────────────────────────────────────────────────────────
    @property
    def count_x(self) -> int:
        return _load()["grid"]["count_x"]

    @property
    def count_y(self) -> int:
        return _load()["grid"]["count_y"]

    @property
    def radius(self) -> float:
        return _load()["grid"]["radius_mm"]

    @property
    def gap(self) -> float:
        return _load()["grid"]["gap_mm"]

    # ── tile ────────────────────────────────────────────────────────
    @property
    def hex_height(self) -> float:
        return _load()["tile"]["hex_height_mm"]

    @property
    def arc_height(self) -> float:
        return _load()["tile"]["arc_height_mm"]

    @property
    def arc_width(self) -> float:
        return _load()["tile"]["arc_width_mm"]

    @property
    def edge_height(self) -> float:
        return _load()["tile"]["edge_height_mm"]

    @property
    def edge_width(self) -> float:
        return _load()["tile"]["edge_width_mm"]

    @property
    def label_size(self) -> float:
        return _load()["tile"]["label_size_mm"]

    # ── render ──────────────────────────────────────────────────────
    @property
    def labels(self) -> bool:
        return _load()["render"]["labels"]

    @property
    def segments(self) -> int:
        return _load()["render"]["segments"]

    @property
    def mat(self) -> str:
        return _load()["render"]["mat"]

    # ── flat view ───────────────────────────────────────────────────
    def base_params(self) -> dict:
        """Flatten the JSON sections into ``RenderConfig`` field names."""
        p = self.pattern
        ex = self.extruders
        return {
            "count_x": self.count_x,
            "count_y": self.count_y,
            "radius": self.radius,
            "gap": self.gap,
            "hex_height": self.hex_height,
            "arc_height": self.arc_height,
            "arc_width": self.arc_width,
            "edge_height": self.edge_height,
            "edge_width": self.edge_width,
            "label_size": self.label_size,
            "seed": p["seed"],
            "mode": p["mode"],
            "rotate": p["rotate"],
            "rotate_factor": p["rotate_factor"],
            "rotate_mod": p["rotate_mod"],
            "tile_extruder": ex["tile"],
            "arc_extruder": ex["arc"],
            "fill_extruder": ex["fill"],
            "edge_extruder": ex["edge"],
            "labels": self.labels,
            "segments": self.segments,
        }


defaults = _Defaults()
