"""
zsw - ZuSi schlechtes Wetter

Make the trains of a Zusi timetable directory behave as in bad weather:
reduced acceleration, delayed entry into the network and longer dwell times.

Usage:
    zsw modify DIRECTORY -m 0.8 --delay-probability 0.3 --ambient-mean 2
    zsw reset DIRECTORY
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from zsw.acceleration import DEFAULT_FRICTION, DEFAULT_LOC_NEEDED_FRICTION, DEFAULT_MU_NEEDED_FRICTION
from zsw.batch import create_backup, modify_directory, restore_backup
from zsw.config import DEFAULT_EXTENSION, ConfigError, WeatherConfig
from zsw.delay import DEFAULT_AMBIENT_DEVIATION, DEFAULT_AMPLITUDE, DEFAULT_LAMBDA
from zsw.departures import DEFAULT_FACTOR, DEFAULT_MAX_DELAY_MINUTES
from zsw.errors import ZswError


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zsw", description="Modify the behaviour of all trains in a timetable directory.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step")
    parser.add_argument("--log-file", type=Path, help="Also write the log to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    modify = sub.add_parser("modify", aliases=["m"], help="Modify acceleration and timing of all trains")
    modify.add_argument("directory", type=Path)
    modify.add_argument("-m", "--multiplier", type=float, help="Global acceleration multiplier")
    modify.add_argument("--friction", type=float, default=DEFAULT_FRICTION, help="Available coefficient of friction")
    modify.add_argument("--loc-needed-friction", type=float, default=DEFAULT_LOC_NEEDED_FRICTION,
                        help="Friction a locomotive needs for full acceleration")
    modify.add_argument("--mu-needed-friction", type=float, default=DEFAULT_MU_NEEDED_FRICTION,
                        help="Friction a multiple unit needs for full acceleration")
    modify.add_argument("--delay-probability", type=float, help="Probability of a burst entry delay")
    modify.add_argument("--delay-amplitude", type=float, default=DEFAULT_AMPLITUDE, help="Burst delay amplitude (minutes)")
    modify.add_argument("--delay-lambda", type=float, default=DEFAULT_LAMBDA, help="Burst delay exponent")
    modify.add_argument("--ambient-mean", type=float, help="Mean of the normally distributed entry delay (minutes)")
    modify.add_argument("--ambient-deviation", type=float, default=DEFAULT_AMBIENT_DEVIATION,
                        help="Standard deviation of the ambient delay (minutes)")
    modify.add_argument("--deny-early", action="store_true", help="Never move a train's entry earlier")
    modify.add_argument("--departures-delay-factor", type=float, default=DEFAULT_FACTOR,
                        help="Factor applied to dwell times and added to each departure")
    modify.add_argument("--departures-max-delay", type=float, default=DEFAULT_MAX_DELAY_MINUTES,
                        help="Maximum extra dwell time per stop (minutes)")
    modify.add_argument("-n", "--no-copy", action="store_true", help="Do not create the _zsw folder used for resetting")
    modify.add_argument("--seed", type=int, help="Seed for reproducible runs")
    modify.add_argument("--extension", default=DEFAULT_EXTENSION, help="Suffix of train files")
    modify.set_defaults(func=run_modify)

    reset = sub.add_parser("reset", aliases=["r"], help="Restore the directory from its _zsw backup")
    reset.add_argument("directory", type=Path)
    reset.set_defaults(func=run_reset)

    return parser


def run_modify(args: argparse.Namespace) -> int:
    config = WeatherConfig.from_args(args)
    try:
        config.validate()
    except (ConfigError, ZswError) as exc:
        logging.error("invalid configuration: %s", exc)
        return 1

    try:
        if not args.no_copy:
            create_backup(args.directory)
        report = modify_directory(args.directory, config, np.random.default_rng(config.seed))
    except OSError as exc:
        logging.error("directory operation failed: %s", exc)
        return 1

    logging.info("modified %d file(s), %d failure(s)", len(report.modified), len(report.failures))
    return 0


def run_reset(args: argparse.Namespace) -> int:
    try:
        restore_backup(args.directory)
    except (ZswError, OSError) as exc:
        logging.error("reset failed: %s", exc)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
