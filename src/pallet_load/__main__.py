from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib import metadata
from typing import List, Optional

from .catalog import CUSTOM_KEY, custom_pallet, get_pallet, pallet_choices
from .config import load_settings
from .errors import InvalidDimension
from .models import BoxSpec, LoadConstraints
from .planner import compute_load
from .report import format_summary, summarize
from .units import parse_float

logger = logging.getLogger("pallet_load")


def _get_app_version() -> str:
    try:
        return metadata.version("pallet-load")
    except metadata.PackageNotFoundError:
        return "dev"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pallet-load",
        description="Compute how many identical boxes fit on a pallet.",
    )
    parser.add_argument("--version", action="version", version=_get_app_version())
    parser.add_argument("--length", type=parse_float, help="box length (cm)")
    parser.add_argument("--width", type=parse_float, help="box width (cm)")
    parser.add_argument("--height", type=parse_float, help="box height (cm)")
    parser.add_argument("--weight", type=parse_float, help="box weight (kg)")
    parser.add_argument("--pallet", choices=pallet_choices(), help="pallet type")
    parser.add_argument("--pallet-width", type=parse_float, help="custom pallet width (cm)")
    parser.add_argument("--pallet-length", type=parse_float, help="custom pallet length (cm)")
    parser.add_argument("--max-height", type=parse_float, help="max stack height (cm)")
    parser.add_argument("--settings", help="YAML file with default inputs")
    parser.add_argument("--json", action="store_true", help="print JSON instead of text")
    parser.add_argument("--plot", metavar="PATH", help="save a top-down image of one layer")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _pick(value, fallback):
    return fallback if value is None else value


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.settings)
    except (OSError, ValueError) as e:
        logger.error("Cannot read settings: %s", e)
        return 2

    box = BoxSpec(
        length=_pick(args.length, settings["box_length"]),
        width=_pick(args.width, settings["box_width"]),
        height=_pick(args.height, settings["box_height"]),
        weight=_pick(args.weight, settings["box_weight"]),
    )
    custom_dims = args.pallet_width is not None or args.pallet_length is not None
    if args.pallet is None and custom_dims:
        pallet_key = CUSTOM_KEY
    else:
        pallet_key = _pick(args.pallet, settings["pallet"])
    if custom_dims and pallet_key != CUSTOM_KEY:
        logger.warning(
            "--pallet-width/--pallet-length ignored for pallet %r", pallet_key
        )
    if pallet_key == CUSTOM_KEY:
        pallet = custom_pallet(
            _pick(args.pallet_width, settings["pallet_width"]),
            _pick(args.pallet_length, settings["pallet_length"]),
        )
    else:
        try:
            pallet = get_pallet(pallet_key)
        except ValueError as e:
            logger.error("%s", e)
            return 2
    constraints = LoadConstraints(
        max_stack_height=_pick(args.max_height, settings["max_stack_height"])
    )

    try:
        result = compute_load(box, pallet, constraints)
    except InvalidDimension as e:
        logger.error("Invalid input: %s", e)
        return 2

    summary = summarize(result, box, pallet, constraints)
    if args.json:
        print(json.dumps(summary, ensure_ascii=False, indent=2))
    else:
        print(format_summary(summary))

    if args.plot:
        from .render import save_top_down

        save_top_down(
            args.plot,
            result,
            box,
            pallet,
            canvas_size=(settings["canvas_width"], settings["canvas_height"]),
            padding=settings["canvas_padding"],
        )
        logger.info("Saved layer diagram to %s", args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
