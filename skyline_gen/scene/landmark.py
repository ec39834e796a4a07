# skyline_gen/scene/landmark.py
"""
Ground line and the central landmark tower.

The tower is a stack of centered tiers, each narrower than the one below,
separated by seam rules as wide as the wider of the two tiers. A spire
rises from the top tier. A wide podium and two wing blocks sit at its foot.
"""

from __future__ import annotations

import logging

from ..buildings.composer import MAST, PEAK, SEAM, left_from_center
from ..canvas import Canvas


def draw_ground(cv: Canvas, conf: dict) -> None:
    ground = conf.get("ground", {})
    if not ground.get("enabled", True):
        return
    row = cv.H - int(ground.get("offset", 3))
    cv.hline(row, 0, cv.W - 1, ground.get("char", "_"))


def draw_landmark(cv: Canvas, conf: dict, base_row: int, center: int | None = None) -> int:
    """Draw the landmark and return the row of its spire peak."""
    lm = conf.get("landmark", {})
    if center is None:
        center = cv.W // 2

    widths = [int(w) for w in lm.get("tier_widths", [])]
    heights = [int(h) for h in lm.get("tier_heights", [])]
    if len(widths) != len(heights):
        raise ValueError(
            f"landmark tier_widths and tier_heights differ in length ({len(widths)} vs {len(heights)})"
        )

    row_top = _draw_tiers(cv, widths, heights, base_row, center)

    spire = int(lm.get("spire_length", 22))
    peak_row = row_top - spire - 1
    if spire > 0:
        cv.vline(row_top - spire, row_top - 1, center, MAST)
    cv.set(peak_row, center, PEAK)

    podium = lm.get("podium") or {}
    p_w, p_h = int(podium.get("width", 0)), int(podium.get("height", 0))
    p_left = left_from_center(center, p_w)
    cv.rect(base_row - p_h, p_left, p_h, p_w, "#", windows=True)

    for wing in lm.get("wings", []):
        w, h = int(wing["width"]), int(wing["height"])
        anchor = p_left + p_w if wing.get("side", "left") == "right" else p_left
        cv.rect(base_row - h, anchor + int(wing.get("dx", 0)), h, w, "#", windows=True)

    logging.debug("landmark: %d tiers at column %d, peak row %d", len(widths), center, peak_row)
    return peak_row


def _draw_tiers(cv: Canvas, widths: list[int], heights: list[int], base_row: int, center: int) -> int:
    row_top = base_row
    for i, (w, h) in enumerate(zip(widths, heights)):
        left = left_from_center(center, w)
        row_top -= h
        cv.rect(row_top, left, h, w, "#", windows=True)
        if i + 1 < len(widths):
            row_top -= 1
            seam_w = max(w, widths[i + 1])
            seam_left = left_from_center(center, seam_w)
            cv.hline(row_top, seam_left, seam_left + seam_w - 1, SEAM)
    return row_top
