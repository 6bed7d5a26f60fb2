"""Configuration — defaults, mat presets, resolution, validation and serialization."""

from .models import (
    ConfigError, TruchetMode, GridCoordinate, MatPreset, RenderConfig,
)
from .mats import MATS, MANUAL, MAT_NAMES
from .resolver import resolve_config, lookup_mat
from .validation import validate_config
from .serialization import config_to_dict, config_from_dict

__all__ = [
    # Models
    "ConfigError", "TruchetMode", "GridCoordinate", "MatPreset", "RenderConfig",
    # Presets
    "MATS", "MANUAL", "MAT_NAMES",
    # Resolution / Validation / Serialization
    "resolve_config", "lookup_mat", "validate_config",
    "config_to_dict", "config_from_dict",
]
