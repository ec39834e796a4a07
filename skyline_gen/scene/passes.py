# skyline_gen/scene/passes.py
"""
Placement passes.

background  -> random presets marched left to right across each rank
fixed       -> a hand-placed list of presets on the base row
foreground  -> lower rows of small buildings in front, leaving a gap
               around the landmark

Random passes take an explicit random.Random so a seed reproduces the
layout exactly.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Mapping, Sequence

from ..buildings import catalog
from ..canvas import Canvas


def background_rank(cv: Canvas, rank: Mapping, base_row: int, rng: random.Random) -> list[tuple[str, int]]:
    """Fill one rank with random presets; returns the (preset, column) pairs drawn."""
    pool = rank.get("presets")
    pos = int(rank.get("start", 0))
    stop = int(rank.get("stop", cv.W))
    break_after = rank.get("break_after")
    lo, hi = _spacing(rank)

    placed: list[tuple[str, int]] = []
    while pos < stop:
        name = catalog.random_preset(rng, pool)
        catalog.build(cv, name, base_row, pos)
        placed.append((name, pos))
        pos += rng.randint(lo, hi)
        if break_after is not None and pos > int(break_after):
            break
    logging.debug("background rank %s: %d buildings", rank.get("name", "?"), len(placed))
    return placed


def fixed_placements(cv: Canvas, placements: Iterable[Sequence], base_row: int) -> list[tuple[str, int]]:
    placed: list[tuple[str, int]] = []
    for name, col in placements:
        catalog.build(cv, name, base_row, int(col))
        placed.append((name, int(col)))
    return placed


def foreground_row(cv: Canvas, row: Mapping, base_row: int, rng: random.Random) -> list[tuple[str, int]]:
    """Line a foreground row with small presets, skipping the gap columns.

    The row sits ``lift`` rows above the base row. Spacing is drawn for every
    step, inside the gap too.
    """
    pool = row.get("presets") or ["low_rise"]
    row_base = base_row - int(row.get("lift", 0))
    pos = int(row.get("start", 0))
    stop = int(row.get("stop", cv.W))
    gap = row.get("gap")
    lo, hi = _spacing(row)

    placed: list[tuple[str, int]] = []
    while pos < stop:
        if not _in_gap(pos, gap):
            name = catalog.random_preset(rng, pool) if len(pool) > 1 else pool[0]
            catalog.build(cv, name, row_base, pos)
            placed.append((name, pos))
        pos += rng.randint(lo, hi)
    logging.debug("foreground row %s: %d buildings", row.get("name", "?"), len(placed))
    return placed


def _in_gap(pos: int, gap: Sequence[int] | None) -> bool:
    if not gap:
        return False
    g0, g1 = int(gap[0]), int(gap[1])
    return min(g0, g1) <= pos <= max(g0, g1)


def _spacing(section: Mapping) -> tuple[int, int]:
    lo = int(section.get("spacing_min", 8))
    hi = int(section.get("spacing_max", lo))
    if hi < lo:
        lo, hi = hi, lo
    # a zero step would never advance
    return max(1, lo), max(1, hi)
