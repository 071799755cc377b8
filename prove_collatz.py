#!/usr/bin/env python3
"""
Demonstrate the Collatz conjecture below 2**log2max by building every
sequence in reverse from 1.

Usage:
    python prove_collatz.py                    # ceiling 2**30, recursive
    python prove_collatz.py 20 -v              # dump covered ranges + summary
    python prove_collatz.py 24 -i --overflow grow
    python prove_collatz.py 16 -s --plot figures/coverage_16.png
"""

import argparse
import sys

from collatz_coverage import (DEFAULT_CEILING, WORKQUEUE_SIZE, Explorer,
                              WorkQueueOverflow)
from tools.progress import ProgressLine, Timer


def build_parser():
    parser = argparse.ArgumentParser(
        description="Prove reachability of 1 for every integer below "
                    "2**log2max by exploring the Collatz tree in reverse.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("log2max", nargs="?", type=int,
                        default=DEFAULT_CEILING.bit_length() - 1,
                        help="Explore values below 2**log2max, 3..63 (default: 30)")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Trace every tree operation on stderr (implies -v timing)")
    store = parser.add_mutually_exclusive_group()
    store.add_argument("-i", "--iterative", action="store_true",
                       help="Use the breadth-first work queue")
    store.add_argument("-s", "--stack", action="store_true",
                       help="Use an explicit stack instead of native recursion")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print the covered ranges and a summary")
    parser.add_argument("--queue-bits", type=int,
                        default=WORKQUEUE_SIZE.bit_length() - 1,
                        help="Work queue capacity is 2**queue_bits (default: 20)")
    parser.add_argument("--overflow", default="drop",
                        choices=["drop", "fail", "grow"],
                        help="What a full work queue does (default: drop)")
    parser.add_argument("--plot", metavar="PATH",
                        help="Save a coverage figure to PATH")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not 3 <= args.log2max <= 63:
        print("Error: log2max must be between 3 and 63", file=sys.stderr)
        return 1
    if not 0 <= args.queue_bits <= 32:
        print("Error: queue-bits must be between 0 and 32", file=sys.stderr)
        return 1

    if args.iterative:
        strategy = "iterative"
    elif args.stack:
        strategy = "stack"
    else:
        strategy = "recursive"

    verbose = args.verbose or args.debug
    trace = None
    if args.debug:
        def trace(msg):
            print(msg, file=sys.stderr)

    ceiling = 1 << args.log2max
    if verbose:
        print(f"stop at {ceiling}", file=sys.stderr)

    explorer = Explorer(ceiling, strategy,
                        queue_capacity=1 << args.queue_bits,
                        overflow=args.overflow,
                        progress=ProgressLine(),
                        trace=trace)
    try:
        with Timer("done", enabled=verbose):
            result = explorer.run()
    except WorkQueueOverflow as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(result.range_set.format_ranges())
        print(result.stats.summary(), file=sys.stderr)

    if args.plot:
        from tools.coverage_figure import plot_coverage
        path = plot_coverage(result, args.plot)
        print(f"Figure saved: {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
