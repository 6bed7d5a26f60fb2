"""RenderConfig serialization — JSON-safe dicts for provenance headers."""

from __future__ import annotations

from dataclasses import fields

from .mats import mat_to_dict, MANUAL
from .models import ConfigError, RenderConfig
from .resolver import resolve_config


def config_to_dict(cfg: RenderConfig) -> dict:
    """Serialize a RenderConfig to a JSON-compatible dict."""
    out: dict = {}
    for f in fields(cfg):
        value = getattr(cfg, f.name)
        if f.name == "mat":
            value = mat_to_dict(value)
        elif f.name == "mode":
            value = value.value
        out[f.name] = value
    return out


def config_from_dict(data: dict) -> RenderConfig:
    """Rebuild a RenderConfig from ``config_to_dict`` output.

    The dump goes through ``resolve_config``, so an unknown mat, mode or
    option and any out-of-range value raise ``ConfigError``.  Preset mats
    are looked up by name so that a stale dump cannot silently redefine a
    built-in preset.
    """
    params = dict(data)
    mat_data = dict(params.pop("mat", None) or {})
    name = mat_data.pop("name", None)
    if name is None:
        raise ConfigError(["Config dump has no mat name"])
    manual = mat_data if name == MANUAL else None
    return resolve_config(params, mat=name, manual=manual)
