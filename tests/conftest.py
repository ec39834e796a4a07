import pytest

from skyline_gen import config as cfg
from skyline_gen.canvas import Canvas


@pytest.fixture
def blank_canvas() -> Canvas:
    return Canvas(100, 200)


@pytest.fixture
def default_conf() -> dict:
    return cfg.default_config()


@pytest.fixture
def small_conf() -> dict:
    """A narrow canvas with only the ground line and one foreground row."""
    return cfg.merge_config(
        cfg.default_config(),
        {
            "canvas": {"height": 40, "width": 60},
            "landmark": {"enabled": False},
            "background": {"enabled": False},
            "fixed": [],
            "foreground": {
                "rows": [
                    {"name": "only", "lift": 0, "start": 5, "stop": 55, "gap": [25, 35],
                     "spacing_min": 6, "spacing_max": 10, "presets": ["tiny_box", "low_rise"]},
                ],
            },
        },
    )
