# skyline_gen/canvas.py
"""
Character canvas.

A fixed-size grid of single characters backed by a numpy array. Every write
is clipped: coordinates outside the grid are dropped, never wrapped, so
callers can draw shapes that hang off any edge. Drawing characters must be
exactly one character long; anything else is ignored like an off-canvas
write, so every row stays exactly W wide.
"""

from __future__ import annotations

import sys
from typing import TextIO

import numpy as np

BORDER_H = "="
BORDER_V = "|"
WINDOW = "."
RIB = "|"


class Canvas:
    def __init__(self, height: int, width: int, fill: str = " "):
        if height < 0 or width < 0:
            raise ValueError(f"Canvas size must be non-negative, got {height}x{width}")
        if not isinstance(fill, str) or len(fill) != 1:
            raise ValueError(f"Canvas fill must be a single character, got {fill!r}")
        self.H = int(height)
        self.W = int(width)
        self.fill = fill
        self.g = np.full((self.H, self.W), fill, dtype="<U1")

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.H and 0 <= c < self.W

    def get(self, r: int, c: int) -> str | None:
        if not self.in_bounds(r, c):
            return None
        return str(self.g[r, c])

    def set(self, r: int, c: int, ch: str) -> None:
        # explicit check: numpy would wrap negative indices
        if self.in_bounds(r, c) and _is_glyph(ch):
            self.g[r, c] = ch

    def hline(self, r: int, c1: int, c2: int, ch: str = "-") -> None:
        if c1 > c2:
            c1, c2 = c2, c1
        if not 0 <= r < self.H or not _is_glyph(ch):
            return
        lo, hi = max(c1, 0), min(c2, self.W - 1)
        if lo <= hi:
            self.g[r, lo:hi + 1] = ch

    def vline(self, r1: int, r2: int, c: int, ch: str = "|") -> None:
        if r1 > r2:
            r1, r2 = r2, r1
        if not 0 <= c < self.W or not _is_glyph(ch):
            return
        lo, hi = max(r1, 0), min(r2, self.H - 1)
        if lo <= hi:
            self.g[lo:hi + 1, c] = ch

    def rect(self, top: int, left: int, h: int, w: int, fill: str = "#",
             windows: bool = False, ribs: bool = False) -> None:
        """Draw a bordered block with an optional window grid or ribs.

        Pattern order is fill, windows, ribs, then the border: ``=`` on the
        top and bottom rows, ``|`` on the side columns (so corners are ``|``).
        Only the part of the block that lands on the canvas is built, so the
        cost follows the visible area, not the requested size.
        """
        if h <= 0 or w <= 0 or not _is_glyph(fill):
            return
        r0, r1 = max(top, 0), min(top + h, self.H)
        c0, c1 = max(left, 0), min(left + w, self.W)
        if r0 >= r1 or c0 >= c1:
            return
        # block-local row and column indices of the visible window
        i = np.arange(r0, r1)[:, None] - top
        j = np.arange(c0, c1)[None, :] - left
        win = np.full((r1 - r0, c1 - c0), fill, dtype="<U1")
        if windows:
            win = np.where((i % 2 == 0) & (j % 3 == 1), WINDOW, win)
        if ribs:
            win = np.where(j % 6 == 0, RIB, win)
        win = np.where((i == 0) | (i == h - 1), BORDER_H, win)
        win = np.where((j == 0) | (j == w - 1), BORDER_V, win)
        self.g[r0:r1, c0:c1] = win

    def to_lines(self) -> list[str]:
        return ["".join(row) for row in self.g]

    def to_text(self) -> str:
        return "".join(line + "\n" for line in self.to_lines())

    def print(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(self.to_text())


def _is_glyph(ch) -> bool:
    return isinstance(ch, str) and len(ch) == 1
