"""
Command-line interface for altdisks
"""

import argparse
import logging
import sys

from altdisks.algorithms import ALGORITHMS, get_algorithm
from altdisks.config import LOG_LEVELS, load_config
from altdisks.disks import DiskState
from altdisks.exceptions import AltDisksError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        description="altdisks - Sort a row of alternating light and dark disks"
    )

    parser.add_argument(
        "light_count",
        nargs="?",
        type=int,
        help="Number of light disks; the row holds twice as many disks",
        default=None,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        action="append",
        choices=sorted(ALGORITHMS),
        help="Algorithm to run (repeatable; default: all configured algorithms)",
        default=None,
    )

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--row",
        "-r",
        help="Starting layout to sort instead of the alternating one, e.g. 'L D L D'",
        default=None,
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject input rows that are not in alternating layout",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only print swap counts, not the rendered rows",
    )

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=list(LOG_LEVELS),
        default=None,
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        config = load_config(args.config)

        # Apply command-line overrides
        if args.light_count is not None:
            config.light_count = args.light_count
        if args.algorithm:
            config.algorithms = args.algorithm
        if args.row:
            config.row = args.row
        if args.strict:
            config.strict = True
        if args.quiet:
            config.show_rows = False
        if args.log_level:
            config.log_level = args.log_level

        logging.getLogger().setLevel(config.numeric_log_level)

        if config.row:
            before = DiskState.parse(config.row)
        else:
            before = DiskState(config.light_count)
        all_sorted = True
        for name in config.algorithms:
            result = get_algorithm(name)(before, strict=config.strict)
            print(f"{name}: {result.after.total_count()} disks, {result.swap_count} swaps")
            if config.show_rows:
                print(f"  before: {before.render()}")
                print(f"  after:  {result.after.render()}")
            if not result.after.is_sorted():
                logger.error(f"{name} did not produce a sorted row")
                all_sorted = False

        return 0 if all_sorted else 1

    except (AltDisksError, ValueError) as e:
        print(f"Error: {e!s}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
