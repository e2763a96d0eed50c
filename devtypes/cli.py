"""
devtypes Command-Line Interface (CLI)

Exposes the OrderedMap benchmark and a short walkthrough via subcommands.

Usage examples:
    python -m devtypes.cli demo
    python -m devtypes.cli bench --path ordered_map_bench.csv --base-input 100 --rounds 8
    python -m devtypes.cli bench --path lookups.csv --op lookup --op has_key
"""

import argparse
import logging
import sys

from . import bench
from .datastructures import KeyNotFoundError, OrderedMap


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------

def cmd_bench(args):
    """Run the benchmark and write the CSV report."""
    rows = bench.run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        operations=args.op,
    )
    print(f"Benchmark completed. {rows} rows saved to {args.path}")


def cmd_demo(args):
    """Print an upsert/update/pop walkthrough."""
    m = OrderedMap()
    m.upsert("a", 1)
    m.upsert("b", 2)
    m.upsert("a", 3)
    print(f"after upserts: size={m.size()} keys={m.keys().to_py()} vals={m.vals().to_py()}")
    print(f"pop('a') -> {m.pop('a')}, keys={m.keys().to_py()}")
    try:
        m.lookup("z")
    except KeyNotFoundError as e:
        print(f"lookup('z') failed: {e}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m devtypes.cli", description="devtypes tools")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("bench", help="Benchmark OrderedMap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--rounds", type=int, default=8)
    s.add_argument("--iterations", type=int, default=5)
    s.add_argument("--op", action="append", choices=sorted(bench.OPERATIONS),
                   help="Operation to run (repeatable); default all")
    s.set_defaults(func=cmd_bench)

    s = sub.add_parser("demo", help="Show insertion-order semantics")
    s.set_defaults(func=cmd_demo)

    return p


# -------------------------------------------------------------------
# Entrypoint
# -------------------------------------------------------------------
def main(argv=None):
    """Parse arguments and dispatch to the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
