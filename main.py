"""Entry point: load a CSV menu, adjust it, print the kitchen report."""

import argparse
import logging
import sys

from KitchenOPS.config import DEFAULT_DISHES_PATH, load_config, setup_logging
from KitchenOPS.console_style import red
from KitchenOPS.core.loader import RecordParseError, load_kitchen
from KitchenOPS.domain.types import DietaryRequest
from KitchenOPS.ui.affichage import print_kitchen_report, print_kitchen_summary, print_menu

logger = logging.getLogger(__name__)

DIETARY_FLAGS = ("vegetarian", "vegan", "gluten_free", "nut_free", "low_sodium", "low_sugar")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="KitchenOPS: bistro kitchen report")
    parser.add_argument(
        "dishes_file",
        nargs="?",
        default=str(DEFAULT_DISHES_PATH),
        help="Path of the dishes CSV (default: bundled sample menu)",
    )
    parser.add_argument("--config", type=str, help="Path of a kitchen_config.json")
    for flag in DIETARY_FLAGS:
        parser.add_argument(
            f"--{flag.replace('_', '-')}",
            dest=flag,
            action="store_true",
            help=f"Apply the {flag.replace('_', ' ')} accommodation to every dish",
        )
    parser.add_argument(
        "--release-below",
        type=int,
        metavar="MINUTES",
        help="Release every dish prepared in less than MINUTES",
    )
    parser.add_argument(
        "--release-cuisine",
        type=str,
        metavar="CUISINE",
        help="Release every dish of the given cuisine (e.g. ITALIAN)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed records instead of aborting the load",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(red(f"❌ Config error: {e}"))
        return 1
    setup_logging(logging.DEBUG if args.verbose else config.logging_level)

    strict = False if args.lenient else config.strict_loading
    logger.info(f"Loading menu from {args.dishes_file}")
    try:
        kitchen = load_kitchen(args.dishes_file, strict=strict, config=config)
    except RecordParseError as e:
        print(red(f"❌ Load aborted: {e}"))
        return 1

    print_menu(kitchen, "Before adjustment")

    request = DietaryRequest(**{flag: getattr(args, flag) for flag in DIETARY_FLAGS})
    if request.any():
        kitchen.dietary_adjustment(request)
        print_menu(kitchen, "After adjustment")

    if args.release_below is not None:
        released = kitchen.release_dishes_below_prep_time(args.release_below)
        print(f"Released {released} dishes below {args.release_below} minutes")
    if args.release_cuisine:
        released = kitchen.release_dishes_of_cuisine_type(args.release_cuisine)
        print(f"Released {released} {args.release_cuisine} dishes")

    print_kitchen_summary(kitchen)
    print_kitchen_report(kitchen)
    return 0


if __name__ == "__main__":
    sys.exit(run())
