"""
Command-line driver for the baroclinic cyclogenesis model.

Usage examples:
  python -m cli
  python -m cli --surface 5 --upper -8 --latitudes 30 45 60 --hours 24
  python -m cli --latitudes 50 --hours 48 --validate

Prints one table per latitude on stdout; log records go to stderr.

Exit status:
  0  tables printed (and, with --validate, every check passed)
  1  --validate was given and at least one consistency check failed
  2  invalid input (out-of-range anomaly or latitude, repeated latitude,
     negative --hours)
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from common.logging_config import get_logger, log_to
from scenario_simulation.latitude_sweep import DEFAULT_LATITUDES, run_latitude_sweep
from validation.physics_tests import PhysicsConsistencyChecker

logger = get_logger(__name__)

TABLE_HEADER = "Hour |  Vertical velocity |     Relative vorticity | Latitude"
TABLE_RULE = "-----|--------------------|------------------------|---------"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cyclogenesis",
        description="Closed-form simulation of baroclinic cyclogenesis",
    )
    p.add_argument("--surface", type=float, default=5.0,
                   help="surface (warm) temperature anomaly in K (default: 5.0)")
    p.add_argument("--upper", type=float, default=-8.0,
                   help="upper-level (cold) temperature anomaly in K (default: -8.0)")
    p.add_argument("--latitudes", type=float, nargs="+", default=list(DEFAULT_LATITUDES),
                   help="latitudes in degrees North (default: 30 45 60)")
    p.add_argument("--hours", type=int, default=24,
                   help="forecast window in hours (default: 24)")
    p.add_argument("--validate", action="store_true",
                   help="run physics consistency checks on each table")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.hours < 0:
        print(f"error: --hours must be non-negative, got {args.hours}", file=sys.stderr)
        return 2

    with log_to(sys.stderr, getattr(logging, args.log_level)):
        return _run(args)


def _run(args: argparse.Namespace) -> int:
    try:
        sweep = run_latitude_sweep(args.surface, args.upper, args.latitudes, args.hours)
    except ValueError as e:
        # MeteoError for out-of-range inputs, ValueError for repeated latitudes
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("BAROCLINIC CYCLOGENESIS SIMULATION")
    print("==================================")

    checker = PhysicsConsistencyChecker()
    failed = False
    for latitude, results in sweep.items():
        print(f"\nSimulation at {latitude:g}°N:")
        print(TABLE_HEADER)
        print(TABLE_RULE)
        for result in results:
            print(result.to_string_formatted())

        if args.validate:
            for check in checker.check_all(results):
                status = "PASS" if check.passed else "FAIL"
                print(f"  [{status}] {check.message}")
                failed = failed or not check.passed

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
