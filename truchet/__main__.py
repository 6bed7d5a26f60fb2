"""
Truchet mats — entry point.

Usage:
    python -m truchet render --mat A --out build
    python -m truchet render --mat Manual --manual top_border=false --set seed=7
    python -m truchet render --mat B --split --stl
    python -m truchet mats
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from truchet.config import MATS, MAT_NAMES, ConfigError, resolve_config
from truchet.config.defaults import defaults
from truchet.scad import write_panel


def _parse_pairs(items: list[str] | None, option: str) -> dict[str, str]:
    """Turn ``["key=value", ...]`` into a dict; values stay strings."""
    out: dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ConfigError([f"{option} expects key=value, got '{item}'"])
        out[key.strip()] = value.strip()
    return out


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="truchet",
        description="Hexagonal Truchet mats → OpenSCAD (one mesh per extruder)",
    )
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="More logging (-v info, -vv debug)")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("render", help="Render one mat panel to .scad (and optionally STL)")
    r.add_argument("--mat", default=defaults.mat, choices=MAT_NAMES,
                   help=f"Mat preset (default {defaults.mat})")
    r.add_argument("--out", default="build", help="Output directory")
    g = r.add_mutually_exclusive_group()
    g.add_argument("--channel", type=int, default=None,
                   help="Keep only the geometry of this extruder")
    g.add_argument("--split", action="store_true",
                   help="Write one file per extruder in use")
    r.add_argument("--stl", action="store_true", help="Also compile to STL via openscad")
    r.add_argument("--set", dest="overrides", action="append", metavar="KEY=VALUE",
                   help="Override a parameter (repeatable)")
    r.add_argument("--manual", action="append", metavar="FLAG=BOOL",
                   help="Border/corner flag for --mat Manual (repeatable)")

    sub.add_parser("mats", help="List the mat presets")

    return p


def _cmd_render(args) -> int:
    config = resolve_config(
        _parse_pairs(args.overrides, "--set"),
        mat=args.mat,
        manual=_parse_pairs(args.manual, "--manual") or None,
    )
    out_dir = Path(args.out).resolve()
    channels = config.extruders if args.split else [args.channel]

    status = 0
    for channel in channels:
        result = write_panel(config, out_dir, channel=channel, stl=args.stl)
        for path in (result.scad_path, result.stl_path):
            if path is not None:
                print(f"wrote {path}")
        if not result.success:
            print(f"error: {result.message}", file=sys.stderr)
            status = 1
    return status


def _cmd_mats() -> int:
    for name, mat in MATS.items():
        sides = [s for s in ("left", "right", "top", "bottom") if getattr(mat, f"{s}_border")]
        corners = [
            c for c in ("bottom_left", "top_left", "bottom_right", "top_right")
            if getattr(mat, f"{c}_corner")
        ]
        shift = " shifted" if mat.start_column_parity else ""
        print(f"{name}{shift}: borders={','.join(sides) or '-'} "
              f"corners={','.join(corners) or '-'}")
    print("Manual: flags from --manual (defaults in defaults.json)")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "render":
            return _cmd_render(args)
        if args.cmd == "mats":
            return _cmd_mats()
    except ConfigError as e:
        for err in e.errors:
            print(f"error: {err}", file=sys.stderr)
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
