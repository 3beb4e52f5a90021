"""Command line entry point for kernelview."""

import argparse
import logging
import os
import sys

from kernelview.collector import collect
from kernelview.models import Mode
from kernelview.report import render, theme_for

LOG_LEVEL_ENV = "KERNELVIEW_LOG_LEVEL"

DESCRIPTION = """\
KernelView displays system information.
Default mode performs a comprehensive scan (slower).
Fast mode (-f, --fast) provides essential info instantly by skipping slower checks.
"""


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="kernelview",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--fast",
        action="store_true",
        help="Skip slower checks (CPU usage, packages, languages, temperature, open ports).",
    )
    return parser.parse_args(argv)


def configure_logging() -> None:
    """Send log records to stderr at the level named by KERNELVIEW_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the kernelview command."""
    args = parse_arguments(argv)
    configure_logging()

    mode = Mode.from_flag(args.fast)
    snapshot = collect(mode)
    render(snapshot, theme_for(mode))
    return 0


if __name__ == "__main__":
    sys.exit(main())
