"""
Building composer and the named preset catalog.
"""

from .composer import BuildingSpec, add_building, clamp_center, left_from_center
from .catalog import PRESET_NAMES, PRESETS, get_preset, random_preset

__all__ = [
    "BuildingSpec",
    "PRESETS",
    "PRESET_NAMES",
    "add_building",
    "clamp_center",
    "get_preset",
    "left_from_center",
    "random_preset",
]
