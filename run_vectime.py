#!/usr/bin/env python3
# run_vectime.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Command-line interface for clock queries, collection scans and page splits

import sys
import argparse
from typing import List, Optional

from index import DEFAULT_MIN_FILL_FRACTION, IndexEntry, OperatorClassError, Strategy, VectorClockOps, scan
from model.exceptions import ClockFormatError
from model.ordering import compare
from parser import ParseError, evaluate, parse_clock
from utils.clock_reader import ClockFileError, load_clocks
from utils.logger import configure_logging, get_logger


def run_eval(args: argparse.Namespace) -> int:
    result = evaluate(args.expression)
    get_logger().query_result(args.expression, result)
    print(result)
    return 0


def run_compare(args: argparse.Namespace) -> int:
    left = parse_clock(args.left)
    right = parse_clock(args.right)
    print(compare(left, right))
    return 0


def run_scan(args: argparse.Namespace) -> int:
    """Print the ids of clocks in a file that satisfy a strategy against a query."""
    logger = get_logger()
    strategy = Strategy.from_name(args.strategy)
    query = parse_clock(args.query)
    clocks = load_clocks(args.file)

    matches = scan(clocks, query, strategy.value)
    logger.info(f"{len(matches)} of {len(clocks)} clocks are {strategy} relative to {query}")
    for label in matches:
        print(label)
    return 0


def run_split(args: argparse.Namespace) -> int:
    """Split the clocks of a file as an overflowing index page would be split."""
    logger = get_logger()
    clocks = load_clocks(args.file)
    if len(clocks) < 2:
        raise ValueError(f"Need at least 2 clocks to split, found {len(clocks)}")

    ops = VectorClockOps(min_fill_fraction=args.min_fill)
    result = ops.pick_split([IndexEntry(clock) for _, clock in clocks])
    logger.info(f"Split {len(clocks)} clocks into {len(result.left)} + {len(result.right)}")

    print(f"left  {result.left_union}: {' '.join(clocks[i][0] for i in result.left)}")
    print(f"right {result.right_union}: {' '.join(clocks[i][0] for i in result.right)}")
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Vectime vector clock causal queries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_vectime.py eval "{A:1, B:2} || {A:3}"
  python run_vectime.py eval "increment({A:1}, B, 2) @> {A:1}"
  python run_vectime.py compare "{A:1, B:2}" "{A:2, B:1}"
  python run_vectime.py scan clocks.csv --strategy less --query "{A:5, B:5}"
  python run_vectime.py split clocks.csv --min-fill 0.3

Clock file format:
  id,vc
  c1,A:1;B:2
  c2,A:3
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    eval_cmd = commands.add_parser("eval", help="Evaluate a clock query")
    eval_cmd.add_argument("expression", help="Query, e.g. '{A:1} || {B:2} ~ {A:2}'")
    eval_cmd.set_defaults(handler=run_eval)

    compare_cmd = commands.add_parser("compare", help="Print the ordering of two clocks")
    compare_cmd.add_argument("left", help="Clock literal")
    compare_cmd.add_argument("right", help="Clock literal")
    compare_cmd.set_defaults(handler=run_compare)

    scan_cmd = commands.add_parser("scan", help="List clocks matching a strategy")
    scan_cmd.add_argument("file", help="Path to CSV clock file")
    scan_cmd.add_argument(
        "--strategy",
        required=True,
        choices=[str(s) for s in Strategy],
        help="Relation of each stored clock to the query",
    )
    scan_cmd.add_argument("--query", required=True, help="Clock literal to compare against")
    scan_cmd.set_defaults(handler=run_scan)

    split_cmd = commands.add_parser("split", help="Partition clocks like an index page split")
    split_cmd.add_argument("file", help="Path to CSV clock file")
    split_cmd.add_argument(
        "--min-fill",
        type=float,
        default=DEFAULT_MIN_FILL_FRACTION,
        help="Minimum fraction of entries per side (default: %(default)s)",
    )
    split_cmd.set_defaults(handler=run_split)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the vectime command line.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        return args.handler(args)

    except ClockFileError as e:
        logger.error(f"Clock file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Query parsing error: {e}")
        return 2

    except (ClockFormatError, ValueError) as e:
        logger.error(f"Invalid clock value: {e}")
        return 3

    except OperatorClassError as e:
        logger.error(f"Operator class error: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 5


if __name__ == "__main__":
    sys.exit(main())
