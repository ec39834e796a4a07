from .landmark import draw_ground, draw_landmark
from .passes import background_rank, fixed_placements, foreground_row

__all__ = [
    "background_rank",
    "draw_ground",
    "draw_landmark",
    "fixed_placements",
    "foreground_row",
]
