"""Configuration resolver — merge defaults, overrides and a mat into one RenderConfig."""

from __future__ import annotations

import logging

from .defaults import defaults
from .mats import MATS, MANUAL, MAT_NAMES, manual_mat, _FLAG_FIELDS
from .models import ConfigError, MatPreset, RenderConfig, TruchetMode
from .validation import validate_config

log = logging.getLogger(__name__)

_INT_FIELDS = {
    "count_x", "count_y", "seed", "rotate_factor", "rotate_mod",
    "tile_extruder", "arc_extruder", "fill_extruder", "edge_extruder",
    "segments",
}
_FLOAT_FIELDS = {
    "radius", "gap", "hex_height", "arc_height", "arc_width",
    "edge_height", "edge_width", "label_size",
}
_BOOL_FIELDS = {"rotate", "labels"}
_KNOWN_FIELDS = _INT_FIELDS | _FLOAT_FIELDS | _BOOL_FIELDS | {"mode"}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _to_bool(key: str, value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        raise ValueError(f"'{key}' expects a boolean, got '{value}'")
    return bool(value)


def _coerce(key: str, value):
    """Convert a raw override (JSON value or CLI string) to the field type."""
    if key in _BOOL_FIELDS:
        return _to_bool(key, value)
    if key in _INT_FIELDS:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"'{key}' expects an integer, got {value}")
        return int(value)
    if key in _FLOAT_FIELDS:
        return float(value)
    return value


def lookup_mat(name: str, manual: dict | None = None) -> MatPreset:
    """Return the preset called *name*; ``Manual`` builds one from flags."""
    if name == MANUAL:
        flags = dict(defaults.manual_mat)
        if manual:
            unknown = sorted(set(manual) - set(_FLAG_FIELDS))
            if unknown:
                raise ConfigError([f"Unknown manual mat flag '{k}'" for k in unknown])
            errors: list[str] = []
            for key, value in manual.items():
                try:
                    flags[key] = _to_bool(key, value)
                except ValueError as e:
                    errors.append(str(e))
            if errors:
                raise ConfigError(errors)
        return manual_mat(flags)
    if name not in MATS:
        raise ConfigError([
            f"Unknown mat '{name}' (expected one of: {', '.join(MAT_NAMES)})"
        ])
    if manual:
        log.warning("Manual mat flags ignored for preset mat '%s'", name)
    return MATS[name]


def resolve_config(
    overrides: dict | None = None,
    mat: str | None = None,
    manual: dict | None = None,
) -> RenderConfig:
    """Build the immutable RenderConfig for one invocation.

    Parameters
    ----------
    overrides : dict, optional
        ``RenderConfig`` field names mapped to values.  Strings are accepted
        for every field (CLI ``--set key=value``).
    mat : str, optional
        One of the preset names or ``"Manual"``.  Defaults to the packaged
        default mat.
    manual : dict, optional
        Border/corner flags for the ``Manual`` mat.

    Raises
    ------
    ConfigError
        On any unknown key, bad value, unknown mat/mode or geometric
        inconsistency.  No partial result is produced.
    """
    params = defaults.base_params()
    errors: list[str] = []

    for key, value in (overrides or {}).items():
        if key not in _KNOWN_FIELDS:
            errors.append(f"Unknown option '{key}'")
            continue
        try:
            params[key] = _coerce(key, value)
        except (TypeError, ValueError) as e:
            errors.append(f"Bad value for '{key}': {e}")

    try:
        params["mode"] = TruchetMode.parse(params["mode"])
    except ConfigError as e:
        errors.extend(e.errors)

    try:
        preset = lookup_mat(mat or defaults.mat, manual)
    except ConfigError as e:
        errors.extend(e.errors)
        preset = None

    if errors:
        raise ConfigError(errors)

    config = RenderConfig(mat=preset, **params)
    problems = validate_config(config)
    if problems:
        raise ConfigError(problems)

    log.info(
        "Resolved config: mat=%s mode=%s grid=%dx%d r=%.2f seed=%d",
        preset.name, config.mode.value, config.count_x, config.count_y,
        config.radius, config.seed,
    )
    return config
