"""Command line entry point.

Usage::

    compiler-sim [options] [root_path [file_size [num_subfolders [files_per_subfolder]]]]

Progress goes to stdout through the ``compsim`` logger, errors and tracebacks
to stderr. The process exits with status 0 after parameter or filesystem
errors; they are reported, not signalled.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from ._config import (
    DEFAULT_FILE_SIZE,
    DEFAULT_FILES_PER_SUBFOLDER,
    DEFAULT_NUM_SUBFOLDERS,
    DEFAULT_ROOT_PATH,
    RunConfig,
)
from ._exceptions import ParameterError, SimulatorIOError
from ._runner import run_benchmark
from ._stats import print_report

logger = logging.getLogger("compsim")

USAGE = "%(prog)s [options] [root_path [file_size [num_subfolders [files_per_subfolder]]]]"


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(level: int) -> None:
    logger.setLevel(level)
    logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_BelowWarning())
    stdout_handler.setFormatter(logging.Formatter("%(message)s"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compiler-sim",
        usage=USAGE,
        description="Measure directory and file create/read/delete latency.",
    )
    parser.add_argument(
        "params",
        nargs="*",
        metavar="PARAM",
        help="root_path, file_size, num_subfolders, files_per_subfolder (all optional)",
    )
    parser.add_argument(
        "--no-cleanup",
        action="store_true",
        help="Keep the generated folders instead of deleting them",
    )
    parser.add_argument(
        "--strict-writes",
        action="store_true",
        help="Abort the run on the first failed file write",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for file contents")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def print_usage(parser: argparse.ArgumentParser) -> None:
    print(parser.format_usage().rstrip())
    print("All parameters are optional with the following defaults:")
    print(f"  root_path: Current directory ({DEFAULT_ROOT_PATH})")
    print(f"  file_size: {DEFAULT_FILE_SIZE} bytes")
    print(f"  num_subfolders: {DEFAULT_NUM_SUBFOLDERS}")
    print(f"  files_per_subfolder: {DEFAULT_FILES_PER_SUBFOLDER}")


def print_banner(config: RunConfig) -> None:
    print("Compiler Simulator")
    print("------------------")
    print("Using parameters:")
    print(f"  Folder path: {config.root_path}")
    print(f"  File size: {config.file_size} bytes")
    print(f"  Number of subfolders: {config.num_subfolders}")
    print(f"  Number of files per subfolder: {config.files_per_subfolder}")
    print(f"  Cleanup: {'yes' if config.cleanup else 'no'}")
    print()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    configure_logging(level)

    try:
        config = RunConfig.from_positional(
            args.params,
            cleanup=not args.no_cleanup,
            strict_writes=args.strict_writes,
            seed=args.seed,
        )
    except ParameterError as exc:
        print(f"Error parsing numeric arguments: {exc}", file=sys.stderr)
        print_usage(parser)
        return 0

    print_banner(config)
    logger.debug("Resolved configuration: %s", config)

    try:
        result = run_benchmark(config)
    except SimulatorIOError:
        logger.exception("Error during compiler simulation")
        return 0
    except Exception:
        logger.exception("Error running compiler simulator")
        return 0

    print_report(result.samples.categories())
    if result.failed_writes:
        logger.warning(
            "%d of %d file writes failed", len(result.failed_writes), config.total_files
        )
    return 0
