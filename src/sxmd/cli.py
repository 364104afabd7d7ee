"""Command-line entry point.

Usage:
    sxmd <file-to-convert>
    sxmd --cpuprofile convert.prof <file-to-convert>

Reads the whole file, converts it, and writes the result to stdout.
Exit status is 1 for a wrong argument count or an unreadable file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sxmd import convert
from sxmd.config import ConvertConfig
from sxmd.errors import InputReadError
from sxmd.profiling import cpu_profile
from sxmd.utils.logger import ROOT_LOGGER_NAME, get_logger

logger = get_logger(__name__)


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Rewrite LaTeX embedded in Markdown as HTML comments.",
    )
    parser.add_argument("paths", nargs="*", metavar="FILE", help="document to convert")
    parser.add_argument(
        "--cpuprofile",
        metavar="PATH",
        default="",
        help="write a cProfile profile of the run to PATH",
    )
    parser.add_argument(
        "--legacy-terminators",
        action="store_true",
        help="close unterminated HTML comments with a fabricated '-->'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return parser


def read_input(path: str) -> bytes:
    """Read the input document.

    Raises:
        InputReadError: The file is missing or cannot be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputReadError(path, e.strerror) from e


def main(argv: list[str] | None = None) -> int:
    prog = Path(sys.argv[0]).name
    if not prog or prog == "__main__.py":
        prog = "sxmd"
    args = build_parser(prog).parse_args(argv)

    if len(args.paths) != 1:
        print(f"Usage: {prog} <file-to-convert>")
        return 1

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
            stream=sys.stderr,
        )
        # basicConfig is a no-op when the root logger already has handlers
        get_logger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)

    path = args.paths[0]
    config = ConvertConfig(legacy_terminators=args.legacy_terminators)

    # No profile is written for a file that cannot be read
    try:
        content = read_input(path)
    except InputReadError as e:
        logger.debug("read failed for %s: %s", e.path, e.reason)
        print(e)
        return 1

    with cpu_profile(args.cpuprofile or None):
        result = convert(content, config=config)

    sys.stdout.flush()
    sys.stdout.buffer.write(result)
    sys.stdout.buffer.flush()
    return 0
