# skyline_gen/buildings/composer.py
"""
Building composer.

Every building is drawn as up to four stacked layers, bottom to top:

    shaft    -> the main windowed block sitting on ``base_row``
    setback  -> an optional narrower block above a seam line
    crown    -> an optional cap on the setback (or on the shaft)
    antenna  -> optional masts with a ``^`` peak on top of the crown

Seams are ``-`` rules between the shaft and the block above it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..canvas import Canvas

SEAM = "-"
MAST = "|"
PEAK = "^"

# shafts this wide or wider get vertical ribs
RIB_MIN_WIDTH = 14
EDGE_MARGIN_LEFT = 2
EDGE_MARGIN_RIGHT = 3


@dataclass(frozen=True, slots=True)
class BuildingSpec:
    shaft_w: int
    shaft_h: int
    step_w: int = 0
    step_h: int = 0
    crown: bool = True
    antenna: bool = False

    @property
    def has_setback(self) -> bool:
        return self.step_w > 0 and self.step_h > 0

    def draw(self, cv: Canvas, base_row: int, center: int) -> None:
        add_building(cv, base_row, center, self.shaft_w, self.shaft_h,
                     self.step_w, self.step_h, self.crown, self.antenna)


def left_from_center(center: int, w: int) -> int:
    return center - (w - 1) // 2


def clamp_center(width: int, center: int, shaft_w: int) -> int:
    """Keep a shaft 2 columns off the left edge and 3 off the right edge.

    The right bound is applied last, so it wins on canvases too narrow for
    both margins.
    """
    min_c = EDGE_MARGIN_LEFT + shaft_w // 2
    max_c = width - EDGE_MARGIN_RIGHT - shaft_w // 2
    if center < min_c:
        center = min_c
    if center > max_c:
        center = max_c
    return center


def add_building(cv: Canvas, base_row: int, center: int, shaft_w: int, shaft_h: int,
                 step_w: int = 0, step_h: int = 0, crown: bool = True, antenna: bool = False) -> None:
    center = clamp_center(cv.W, center, shaft_w)

    left = center - shaft_w // 2
    top = base_row - shaft_h
    cv.rect(top, left, shaft_h, shaft_w, "#", windows=True, ribs=shaft_w >= RIB_MIN_WIDTH)

    if step_w > 0 and step_h > 0:
        step_left = left + (shaft_w - step_w) // 2
        seam_row = top - 1
        cv.hline(seam_row, left, left + shaft_w - 1, SEAM)
        step_top = seam_row - step_h
        cv.rect(step_top, step_left, step_h, step_w, "#", windows=True)
        if crown and step_w > 6:
            c_w, c_h = step_w - 4, max(2, step_h // 2)
            c_left = step_left + (step_w - c_w) // 2
            c_top = step_top - c_h
            cv.rect(c_top, c_left, c_h, c_w, "#", windows=True)
            if antenna:
                base = c_top - 1
                _mast(cv, base, c_left + c_w // 3, 4)
                _mast(cv, base, c_left + 2 * c_w // 3, 6)
    elif crown:
        c_w, c_h = max(6, shaft_w - 6), max(2, shaft_h // 8)
        c_left = left + (shaft_w - c_w) // 2
        c_top = top - c_h - 1
        cv.hline(top - 1, left, left + shaft_w - 1, SEAM)
        cv.rect(c_top, c_left, c_h, c_w, "#", windows=True)
        if antenna:
            _mast(cv, c_top - 1, c_left + c_w // 2, 5)


def _mast(cv: Canvas, base: int, col: int, length: int) -> None:
    """Draw a mast of ``length`` rows ending at ``base`` with a peak on top."""
    cv.vline(base - length + 1, base, col, MAST)
    cv.set(base - length, col, PEAK)
