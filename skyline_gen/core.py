# skyline_gen/core.py
import logging

from . import config as cfg
from .buildings import catalog
from .canvas import Canvas
from .export import writer
from .scene import landmark, passes
from .utils import seeds as seed_utils


def new_canvas(conf: dict) -> Canvas:
    canvas_conf = conf.get("canvas", {})
    return Canvas(
        int(canvas_conf.get("height", 100)),
        int(canvas_conf.get("width", 200)),
        canvas_conf.get("fill", " "),
    )


def base_row_for(conf: dict, cv: Canvas) -> int:
    return cv.H - int(conf.get("base_offset", 4))


def render(conf: dict | None = None) -> Canvas:
    """Draw the full skyline described by ``conf`` and return the canvas.

    Pass order matters: later passes overwrite earlier ones where they
    overlap, so the foreground rows end up in front. Keys missing from
    ``conf`` fall back to ``default_config()``.
    """
    conf = cfg.merge_config(cfg.default_config(), conf or {})
    seed = int(conf.get("seed", 0))
    cv = new_canvas(conf)
    base_row = base_row_for(conf, cv)

    landmark.draw_ground(cv, conf)
    if conf.get("landmark", {}).get("enabled", True):
        landmark.draw_landmark(cv, conf, base_row)

    if conf.get("background", {}).get("enabled", True):
        for i, rank in enumerate(conf.get("background", {}).get("ranks", [])):
            rng = seed_utils.rng_for(seed, f"background:{rank.get('name', i)}")
            passes.background_rank(cv, rank, base_row, rng)

    fixed = conf.get("fixed") or []
    passes.fixed_placements(cv, fixed, base_row)

    if conf.get("foreground", {}).get("enabled", True):
        for i, row in enumerate(conf.get("foreground", {}).get("rows", [])):
            rng = seed_utils.rng_for(seed, f"foreground:{row.get('name', i)}")
            passes.foreground_row(cv, row, base_row, rng)

    logging.info("Rendered %dx%d skyline (seed %d)", cv.W, cv.H, seed)
    return cv


def render_preset(conf: dict, name: str) -> Canvas:
    """Draw a single preset centered on an otherwise blank canvas with ground."""
    conf = cfg.merge_config(cfg.default_config(), conf or {})
    cv = new_canvas(conf)
    landmark.draw_ground(cv, conf)
    catalog.build(cv, name, base_row_for(conf, cv), cv.W // 2)
    return cv


def generate_from_config(conf: dict) -> Canvas:
    cv = render(conf)
    writer.save_all(conf, cv)
    return cv
