"""Tests for configuration resolution, mat presets and validation."""

import json
import math
import unittest

import pytest

from truchet.config import (
    MATS, MANUAL, MAT_NAMES, ConfigError, GridCoordinate, TruchetMode,
    config_from_dict, config_to_dict, lookup_mat, resolve_config, validate_config,
)
from truchet.config.defaults import defaults
from truchet.pattern.catalog import admissible_range


def test_defaults_resolve_to_mat_a():
    cfg = resolve_config()
    assert cfg.mat.name == "A"
    assert (cfg.count_x, cfg.count_y) == (defaults.count_x, defaults.count_y)
    assert cfg.mode is TruchetMode.ONE_TWO
    assert cfg.radius == pytest.approx(defaults.radius)


def test_string_overrides_are_coerced():
    cfg = resolve_config({
        "count_x": "3", "radius": "12.5", "rotate": "yes",
        "labels": "off", "mode": "3-4-5-6",
    })
    assert cfg.count_x == 3
    assert cfg.radius == 12.5
    assert cfg.rotate is True
    assert cfg.labels is False
    assert cfg.mode is TruchetMode.THREE_TO_SIX


def test_errors_are_collected_together():
    with pytest.raises(ConfigError) as exc:
        resolve_config({"bogus": 1, "count_x": "many", "mode": "7"}, mat="Z")
    text = " | ".join(exc.value.errors)
    assert "Unknown option 'bogus'" in text
    assert "count_x" in text
    assert "Unknown truchet mode '7'" in text
    assert "Unknown mat 'Z'" in text


def test_non_integer_float_rejected_for_int_field():
    with pytest.raises(ConfigError, match="count_y"):
        resolve_config({"count_y": 2.5})


def test_mode_parse():
    assert TruchetMode.parse("CircledTriad") is TruchetMode.CIRCLED_TRIAD
    assert TruchetMode.parse(TruchetMode.FOUR) is TruchetMode.FOUR
    assert TruchetMode.CIRCLED_TRIAD.table_driven
    assert not TruchetMode.ONE_TWO.table_driven
    with pytest.raises(ConfigError):
        TruchetMode.parse("1-3")


@pytest.mark.parametrize("mode, expected", [
    ("1", (1, 1)),
    ("4", (4, 4)),
    ("6", (6, 6)),
    ("1-2", (1, 2)),
    ("3-4-5-6", (3, 6)),
    ("CircledTriad", (1, 3)),
])
def test_admissible_range(mode, expected):
    assert admissible_range(mode) == expected


def test_admissible_range_unknown_mode():
    with pytest.raises(ConfigError):
        admissible_range("9")


def test_grid_coordinate_label():
    assert str(GridCoordinate(3, 4)) == "3,4"


class TestMats(unittest.TestCase):

    def test_every_preset_is_listed(self):
        self.assertEqual(MAT_NAMES[-1], MANUAL)
        self.assertEqual(set(MAT_NAMES[:-1]), set(MATS))
        self.assertEqual(len(MATS), 14)

    def test_standalone_mat_closes_everything(self):
        a = MATS["A"]
        self.assertTrue(all([
            a.left_border, a.right_border, a.top_border, a.bottom_border,
            a.bottom_left_corner, a.top_left_corner,
            a.bottom_right_corner, a.top_right_corner,
        ]))
        self.assertFalse(a.start_column_parity)

    def test_mosaic_centre_is_open(self):
        f = MATS["F"]
        self.assertTrue(f.start_column_parity)
        self.assertFalse(any([f.left_border, f.right_border, f.top_border, f.bottom_border]))

    def test_manual_uses_packaged_flags(self):
        mat = lookup_mat(MANUAL)
        for key, value in defaults.manual_mat.items():
            self.assertEqual(getattr(mat, key), value, key)

    def test_manual_flags_override(self):
        mat = lookup_mat(MANUAL, {"top_border": False, "start_column_parity": True})
        self.assertFalse(mat.top_border)
        self.assertTrue(mat.start_column_parity)
        self.assertTrue(mat.left_border)

    def test_manual_string_flags(self):
        cfg = resolve_config(mat=MANUAL, manual={"bottom_border": "false"})
        self.assertFalse(cfg.mat.bottom_border)

    def test_manual_unknown_flag(self):
        with self.assertRaises(ConfigError) as ctx:
            lookup_mat(MANUAL, {"middle_border": True})
        self.assertIn("middle_border", ctx.exception.errors[0])

    def test_manual_flags_ignored_for_presets(self):
        with self.assertLogs("truchet.config.resolver", level="WARNING"):
            mat = lookup_mat("B", {"top_border": False})
        self.assertIs(mat, MATS["B"])


class TestValidation(unittest.TestCase):

    def test_default_config_is_valid(self):
        self.assertEqual(validate_config(resolve_config()), [])

    def test_arc_width_must_leave_pairs_apart(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_config({"radius": 9, "arc_width": 3})
        self.assertTrue(any("arc_width" in e for e in ctx.exception.errors))

    def test_radius_must_be_positive(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_config({"radius": 0})
        self.assertEqual(len(ctx.exception.errors), 1)

    def test_edge_height_below_tile(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_config({"edge_height": 1.2, "hex_height": 1.2})
        self.assertIn("edge_height", ctx.exception.errors[0])

    def test_edge_checks_skipped_without_edge_or_labels(self):
        cfg = resolve_config({"edge_extruder": 0, "labels": False, "edge_height": 5})
        self.assertEqual(cfg.edge_extruder, 0)

    def test_label_must_fit_inside_edge_ring(self):
        small = {"radius": 3, "arc_width": 0.5, "edge_width": 0.5,
                 "count_x": 12, "count_y": 12, "labels": True}
        with self.assertRaises(ConfigError) as ctx:
            resolve_config(small)
        self.assertTrue(any("'11,10'" in e for e in ctx.exception.errors))
        cfg = resolve_config({**small, "label_size": 0.6})
        self.assertEqual(cfg.label_size, 0.6)

    def test_label_fit_ignored_without_labels(self):
        cfg = resolve_config({"radius": 3, "arc_width": 0.5, "edge_width": 0.5, "labels": False})
        self.assertEqual(cfg.radius, 3.0)

    def test_edge_width_inside_apothem(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_config({"radius": 4, "arc_width": 1, "edge_width": 3.5})
        self.assertTrue(any("edge_width" in e for e in ctx.exception.errors))

    def test_negative_counts_and_extruders(self):
        with self.assertRaises(ConfigError) as ctx:
            resolve_config({"count_x": 0, "tile_extruder": 0, "arc_extruder": -1})
        errs = " ".join(ctx.exception.errors)
        for key in ("count_x", "tile_extruder", "arc_extruder"):
            self.assertIn(key, errs)


class TestDerived(unittest.TestCase):

    def test_spacing(self):
        cfg = resolve_config({"radius": 10, "gap": 1})
        self.assertAlmostEqual(cfg.column_spacing, 16.5)
        self.assertAlmostEqual(cfg.row_spacing, 5.5 * math.sqrt(3))
        self.assertAlmostEqual(cfg.apothem, 5 * math.sqrt(3))

    def test_last_row(self):
        for count_y, last in [(1, 0), (2, 0), (4, 2), (5, 4), (10, 8)]:
            cfg = resolve_config({"count_y": count_y})
            self.assertEqual(cfg.last_row, last, count_y)

    def test_column_parity_follows_mat(self):
        plain = resolve_config(mat="A")
        shifted = resolve_config(mat="F")
        self.assertEqual([plain.column_parity(x) for x in range(4)], [0, 1, 0, 1])
        self.assertEqual([shifted.column_parity(x) for x in range(4)], [1, 0, 1, 0])
        self.assertEqual(plain.column_parity(-1), 1)

    def test_extruders_in_use(self):
        cfg = resolve_config({"fill_extruder": 0, "edge_extruder": 2})
        self.assertEqual(cfg.extruders, [1, 2])


def test_config_dict_is_json_safe_and_restorable():
    cfg = resolve_config({"seed": 7, "mode": "CircledTriad"}, mat="C")
    data = json.loads(json.dumps(config_to_dict(cfg)))
    assert data["mat"]["name"] == "C"
    assert data["mode"] == "CircledTriad"
    assert config_from_dict(data) == cfg


def test_manual_config_restorable():
    cfg = resolve_config(mat=MANUAL, manual={"left_border": False})
    assert config_from_dict(config_to_dict(cfg)) == cfg


def test_restoring_unknown_mat_raises_config_error():
    data = config_to_dict(resolve_config(mat="C"))
    data["mat"]["name"] = "Q"
    with pytest.raises(ConfigError, match="Unknown mat 'Q'"):
        config_from_dict(data)


def test_restoring_invalid_dump_is_validated():
    data = config_to_dict(resolve_config())
    data["radius"] = -1.0
    with pytest.raises(ConfigError, match="radius"):
        config_from_dict(data)
    data = config_to_dict(resolve_config())
    data["colour"] = "red"
    with pytest.raises(ConfigError, match="Unknown option 'colour'"):
        config_from_dict(data)
