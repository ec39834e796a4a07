# skyline_gen/config.py
import copy
import json


def default_config() -> dict:
    return {
        "seed": 12345,
        "output_dir": "output",
        "canvas": {
            "height": 100,
            "width": 200,
            "fill": " ",
        },
        # rows are counted up from the bottom edge of the canvas
        "ground": {
            "enabled": True,
            "offset": 3,
            "char": "_",
        },
        "base_offset": 4,
        "landmark": {
            "enabled": True,
            # widest tier first; a seam sits between consecutive tiers
            "tier_widths": [64, 54, 46, 38, 30, 24, 20, 16, 12, 9, 6, 4],
            "tier_heights": [10, 10, 9, 9, 8, 7, 6, 6, 5, 4, 4, 4],
            "spire_length": 22,
            "podium": {"width": 80, "height": 6},
            # wings hug the podium ends: dx is relative to the podium's left edge
            # (negative) or right edge (positive)
            "wings": [
                {"dx": -12, "width": 14, "height": 8},
                {"dx": -2, "width": 14, "height": 9, "side": "right"},
            ],
        },
        "background": {
            "enabled": True,
            "ranks": [
                {"name": "left", "start": 5, "stop": 90, "spacing_min": 8, "spacing_max": 19, "break_after": 85},
                {"name": "right", "start": 115, "stop": 195, "spacing_min": 8, "spacing_max": 19},
            ],
        },
        # drawn in order on the base row, after the random ranks
        "fixed": [
            ["low_rise", 2], ["small_ribbed", 8], ["medium_crown", 15], ["tall_slim", 22],
            ["wide_block", 30], ["industrial", 40], ["pyramid", 50], ["ziggurat3", 60],
            ["double_step", 70], ["campus", 80],
            ["glass_tower", 92], ["high_rise", 98], ["mid_rise", 104],
            ["mid_rise", 108], ["high_rise", 112], ["glass_tower", 118],
            ["campus", 125], ["double_step", 135], ["ziggurat3", 145], ["pyramid", 155],
            ["industrial", 165], ["wide_block", 175], ["tall_slim", 185], ["medium_crown", 192],
            ["small_ribbed", 198], ["low_rise", 198],
        ],
        "foreground": {
            "enabled": True,
            "rows": [
                {
                    "name": "front",
                    "lift": 2,
                    "start": 10,
                    "stop": 190,
                    "gap": [80, 120],
                    "spacing_min": 12,
                    "spacing_max": 26,
                    "presets": ["low_rise", "small_ribbed", "medium_crown"],
                },
                {
                    "name": "very_front",
                    "lift": 1,
                    "start": 15,
                    "stop": 185,
                    "gap": [75, 125],
                    "spacing_min": 8,
                    "spacing_max": 17,
                    "presets": ["low_rise"],
                },
            ],
        },
        "export": {
            "text_file": "skyline.txt",
            "preview_png": "preview.png",
            # pixel size of one character cell in the preview
            "cell_w": 6,
            "cell_h": 11,
            "preview_max_dim": 2048,
        },
    }


def merge_config(base: dict, override: dict) -> dict:
    """Return ``base`` updated with ``override``; nested dicts merge, everything else replaces."""
    out = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = merge_config(out[key], value)
        else:
            out[key] = copy.deepcopy(value)
    return out


def load_config(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return merge_config(default_config(), json.load(f))


def save_config(conf: dict, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(conf, f, indent=2)
