"""Built-in mat presets.

A mosaic is assembled from panels laid out in a 3×3 block (``B``..``J``),
a horizontal strip (``K`` / ``L``), a vertical strip (``M`` / ``N``) or a
single stand-alone panel (``A``).  Each preset closes exactly the sides
that end up on the outside of the assembled mosaic.

Panels in the middle column start on a shifted column so that their
stagger continues the left neighbour's (for odd ``count_x``).
"""

from __future__ import annotations

from .models import MatPreset

MANUAL = "Manual"

_ALL_CORNERS = dict(
    bottom_left_corner=True, top_left_corner=True,
    bottom_right_corner=True, top_right_corner=True,
)

MATS: dict[str, MatPreset] = {
    m.name: m
    for m in (
        # stand-alone
        MatPreset("A", left_border=True, right_border=True,
                  top_border=True, bottom_border=True, **_ALL_CORNERS),
        # 3×3 block, row by row from the top
        MatPreset("B", left_border=True, top_border=True, top_left_corner=True),
        MatPreset("C", start_column_parity=True, top_border=True),
        MatPreset("D", right_border=True, top_border=True, top_right_corner=True),
        MatPreset("E", left_border=True),
        MatPreset("F", start_column_parity=True),
        MatPreset("G", right_border=True),
        MatPreset("H", left_border=True, bottom_border=True, bottom_left_corner=True),
        MatPreset("I", start_column_parity=True, bottom_border=True),
        MatPreset("J", right_border=True, bottom_border=True, bottom_right_corner=True),
        # horizontal strip ends
        MatPreset("K", left_border=True, top_border=True, bottom_border=True,
                  top_left_corner=True, bottom_left_corner=True),
        MatPreset("L", right_border=True, top_border=True, bottom_border=True,
                  top_right_corner=True, bottom_right_corner=True),
        # vertical strip ends
        MatPreset("M", left_border=True, right_border=True, top_border=True,
                  top_left_corner=True, top_right_corner=True),
        MatPreset("N", left_border=True, right_border=True, bottom_border=True,
                  bottom_left_corner=True, bottom_right_corner=True),
    )
}

MAT_NAMES = tuple(MATS) + (MANUAL,)

_FLAG_FIELDS = (
    "start_column_parity",
    "left_border", "right_border", "top_border", "bottom_border",
    "bottom_left_corner", "top_left_corner",
    "bottom_right_corner", "top_right_corner",
)


def manual_mat(flags: dict) -> MatPreset:
    """Build the ``Manual`` preset from explicit boolean flags.

    Missing flags default to ``False``; unknown keys are rejected by the
    caller (``resolve_config``) before this point.
    """
    return MatPreset(MANUAL, **{k: bool(flags.get(k, False)) for k in _FLAG_FIELDS})


def mat_to_dict(mat: MatPreset) -> dict:
    out: dict = {"name": mat.name}
    for k in _FLAG_FIELDS:
        out[k] = getattr(mat, k)
    return out
