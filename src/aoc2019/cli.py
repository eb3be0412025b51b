"""
Command-line entry point: ``aoc2019 DAY [ARGS...]``.

Prints the answer to part A and, when the day has one, part B.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import AocException
from .registry import get_available_days, get_solution

logger = logging.getLogger(__name__)


def pad_newlines(answer: str) -> str:
    """Indent continuation lines so multi-line answers line up after 'A: '."""
    return "\n   ".join(answer.splitlines())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2019", description="Advent of Code 2019 solutions")
    parser.add_argument(
        "day",
        type=int,
        help=f"Puzzle day. Available: {', '.join(map(str, get_available_days()))}"
    )
    parser.add_argument(
        "args",
        nargs="*",
        help="Day-specific arguments, usually the path to the puzzle input"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        solution = get_solution(args.day)
        logger.debug("Running day %d with %s", args.day, args.args)
        answer_a, answer_b = solution.main(args.args)
    except (AocException, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"A: {pad_newlines(str(answer_a))}")
    if answer_b is not None:
        print(f"B: {pad_newlines(str(answer_b))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
