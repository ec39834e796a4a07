"""Entry point so `python -m skyline_gen` prints a skyline."""
from __future__ import annotations

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
