"""
Command-line entry point.

Usage:
    python -m skyline_gen [--seed N] [--config conf.json] [--output skyline.txt] [--preview skyline.png]

With no arguments the default skyline is printed to stdout. Log messages go
to stderr so the output can be piped or redirected as-is.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from . import config as cfg
from . import core
from .buildings import catalog
from .export import writer


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyline-gen",
        description="Render a procedural ASCII skyline.",
    )
    parser.add_argument("--config", type=str, help="Optional config JSON path, merged over the defaults.")
    parser.add_argument("--seed", type=int, help="Master seed (overrides the config value).")
    parser.add_argument("--output", type=str, help="Write the skyline to this text file instead of stdout.")
    parser.add_argument("--preview", type=str, help="Also save a PNG preview to this path.")
    parser.add_argument(
        "--preset",
        type=str,
        help="Render only this building preset, centered on a blank canvas.",
    )
    parser.add_argument("--list-presets", action="store_true", help="List preset names and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pass details to stderr.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    if args.list_presets:
        for name in catalog.PRESET_NAMES:
            sys.stdout.write(name + "\n")
        return 0

    try:
        conf = cfg.load_config(args.config) if args.config else cfg.default_config()
    except FileNotFoundError:
        parser.error(f"config file not found: {args.config}")
    except json.JSONDecodeError as exc:
        parser.error(f"config file {args.config} is not valid JSON: {exc}")
    if args.seed is not None:
        conf["seed"] = args.seed

    try:
        cv = core.render_preset(conf, args.preset) if args.preset else core.render(conf)
    except ValueError as exc:
        parser.error(str(exc))

    if args.output:
        path = writer.write_text(cv, args.output)
        logging.info("Skyline written to %s", path)
    else:
        cv.print(sys.stdout)

    if args.preview:
        path = writer.save_preview(cv, args.preview, conf.get("export", {}))
        logging.info("Preview saved to %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
