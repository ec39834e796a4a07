# skyline_gen/buildings/catalog.py
"""
Named building presets.

Each preset is a plain function ``(canvas, base_row, center) -> None``.
Single-block presets are described as a ``BuildingSpec``; compound presets
stack or line up several composer calls at fixed offsets.

PRESETS keeps insertion order, which is also the index order used when a
placement pass picks a preset at random.
"""

from __future__ import annotations

import random
from typing import Callable, Sequence

from ..canvas import Canvas
from .composer import BuildingSpec, add_building

Preset = Callable[[Canvas, int, int], None]


def _single(spec: BuildingSpec) -> Preset:
    def draw(cv: Canvas, base_row: int, c: int) -> None:
        spec.draw(cv, base_row, c)
    draw.spec = spec
    return draw


tiny_box = _single(BuildingSpec(6, 8))
small_ribbed = _single(BuildingSpec(10, 14))
medium_crown = _single(BuildingSpec(12, 18))
medium_step_antenna = _single(BuildingSpec(12, 16, 8, 4, crown=True, antenna=True))
wide_block = _single(BuildingSpec(24, 10))
wide_step = _single(BuildingSpec(26, 12, 16, 3))
tall_slim = _single(BuildingSpec(6, 32))
tall_ribbed = _single(BuildingSpec(14, 28))
crown_only = _single(BuildingSpec(12, 14))
antenna_only = _single(BuildingSpec(8, 16, crown=False, antenna=True))
needle = _single(BuildingSpec(6, 26, antenna=True))
low_rise = _single(BuildingSpec(16, 6, crown=False))
mid_rise = _single(BuildingSpec(14, 12))
high_rise = _single(BuildingSpec(12, 20, antenna=True))


def double_step(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 18, 18, 12, 4)
    add_building(cv, base_row - 22, c, 12, 10, 8, 3)


def ziggurat3(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 20, 12)
    add_building(cv, base_row - 13, c, 14, 9)
    add_building(cv, base_row - 23, c, 8, 7, antenna=True)


def ziggurat4(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 28, 10)
    add_building(cv, base_row - 11, c, 22, 8)
    add_building(cv, base_row - 20, c, 16, 7)
    add_building(cv, base_row - 28, c, 10, 6, antenna=True)


def pyramid(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 16, 10)
    add_building(cv, base_row - 11, c, 12, 8)
    add_building(cv, base_row - 20, c, 8, 6, antenna=True)


def l_left(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 14, 18)
    add_building(cv, base_row, c - 7, 8, 10)


def l_right(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 14, 18)
    add_building(cv, base_row, c + 7, 8, 10)


def campus(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c - 10, 12, 8)
    add_building(cv, base_row, c, 16, 8)
    add_building(cv, base_row, c + 10, 12, 8)


def glass_tower(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 10, 22)
    # horizontal window bands across the face, every third row
    for i in range(2, 20, 3):
        cv.hline(base_row - i, c - 4, c + 4, ".")


def industrial(cv: Canvas, base_row: int, c: int) -> None:
    add_building(cv, base_row, c, 20, 8, crown=False)
    add_building(cv, base_row - 9, c - 5, 8, 6, crown=False)
    add_building(cv, base_row - 9, c + 5, 8, 6, crown=False)
    # pipes with smoke caps
    for x in (c - 2, c + 2):
        cv.vline(base_row - 18, base_row - 9, x, "|")
        cv.set(base_row - 19, x, "o")


PRESETS: dict[str, Preset] = {
    "tiny_box": tiny_box,
    "small_ribbed": small_ribbed,
    "medium_crown": medium_crown,
    "medium_step_antenna": medium_step_antenna,
    "wide_block": wide_block,
    "wide_step": wide_step,
    "tall_slim": tall_slim,
    "tall_ribbed": tall_ribbed,
    "double_step": double_step,
    "ziggurat3": ziggurat3,
    "ziggurat4": ziggurat4,
    "crown_only": crown_only,
    "antenna_only": antenna_only,
    "pyramid": pyramid,
    "l_left": l_left,
    "l_right": l_right,
    "needle": needle,
    "campus": campus,
    "glass_tower": glass_tower,
    "industrial": industrial,
    "low_rise": low_rise,
    "mid_rise": mid_rise,
    "high_rise": high_rise,
}

PRESET_NAMES: tuple[str, ...] = tuple(PRESETS)


def get_preset(name: str) -> Preset:
    key = (name or "").strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return PRESETS[key]
    except KeyError:
        raise ValueError(
            f"Unknown building preset {name!r}; expected one of: {', '.join(PRESET_NAMES)}"
        ) from None


def random_preset(rng: random.Random, pool: Sequence[str] | None = None) -> str:
    """Pick a preset name uniformly by index, from ``pool`` or the full catalog."""
    names = pool or PRESET_NAMES
    return names[rng.randrange(len(names))]


def build(cv: Canvas, name: str, base_row: int, c: int) -> None:
    get_preset(name)(cv, base_row, c)
