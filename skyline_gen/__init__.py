"""
Procedural ASCII skyline generator.

    from skyline_gen import render
    render().print()
"""

from .canvas import Canvas
from .core import render, render_preset

__all__ = ["Canvas", "render", "render_preset"]
__version__ = "0.1.0"
