"""Command line entry point: ``identicon SEED [-o DIR]``."""

import argparse
import logging
import sys
from typing import List, Optional

from identicon.pipeline import main as generate
from identicon.writer import display_path

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate a symmetric 5x5 identicon PNG from a string.",
    )
    parser.add_argument("seed", help="identity string; the image is written to '<seed>.png'")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="directory to write into (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit status (0 ok, 1 write failure)."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        path = generate(args.seed, args.output_dir)
    except OSError as e:
        logger.error("Could not write identicon for %r: %s", args.seed, e)
        return 1

    print(display_path(path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
