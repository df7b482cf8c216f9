"""cusip-tool — bulk-validate candidate CUSIPs, one per line.

Reads the named files (or stdin) and parses every line. Useful for
checking a file of purported CUSIPs for malformed entries, or for
confirming that a known-good file is accepted in full.

Exit status: 0 if every line parsed, 1 if any was rejected, 2 for a
usage or configuration error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from contextlib import closing
from dataclasses import dataclass, replace
from typing import TextIO, final

from cusip.core.errors import CUSIPError
from cusip.core.identifiers import CUSIP
from cusip.core.result import Err, Ok
from cusip.infra.config import LOG_LEVELS, ToolConfig, configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2


@final
@dataclass(frozen=True, slots=True)
class Rejection:
    """One input line that failed to parse."""

    line_number: int  # 1-based
    raw: str
    error: CUSIPError


@final
@dataclass(frozen=True, slots=True)
class BulkReport:
    valid: int = 0
    rejections: tuple[Rejection, ...] = ()
    stopped_early: bool = False

    @property
    def invalid(self) -> int:
        return len(self.rejections)

    @property
    def ok(self) -> bool:
        return not self.rejections


def check_lines(lines: Iterable[str], config: ToolConfig) -> BulkReport:
    """Parse each line (trailing newline removed) and tally the outcome."""
    parse = CUSIP.parse_loose if config.loose else CUSIP.parse
    valid = 0
    rejections: list[Rejection] = []
    for line_number, line in enumerate(lines, start=1):
        raw = line.rstrip("\r\n")
        if config.skip_blank and not raw.strip():
            continue
        match parse(raw):
            case Ok(_):
                valid += 1
            case Err(e):
                logger.warning("line %d: %r rejected [%s] %s", line_number, raw, e.code, e)
                rejections.append(Rejection(line_number=line_number, raw=raw, error=e))
                if config.fail_fast:
                    return BulkReport(valid=valid, rejections=tuple(rejections), stopped_early=True)
    return BulkReport(valid=valid, rejections=tuple(rejections))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cusip-tool",
        description="Validate candidate CUSIPs read one per line from files or stdin.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Input files (default: stdin)")
    parser.add_argument(
        "--loose",
        action="store_true",
        default=None,
        help="Accept lowercase letters and surrounding whitespace",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=None,
        help="Stop at the first rejected line",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging threshold (default: WARNING)",
    )
    return parser


def _read_lines(files: Sequence[str], stdin: TextIO) -> Iterator[str]:
    if not files:
        yield from stdin
        return
    for path in files:
        if path == "-":
            yield from stdin
            continue
        with open(path, encoding="utf-8") as fh:
            yield from fh


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)

    match ToolConfig.from_env(os.environ):
        case Ok(config):
            pass
        case Err(e):
            print(f"cusip-tool: {e}", file=sys.stderr)
            return EXIT_USAGE

    # Command-line flags win over the environment.
    if args.loose is not None:
        config = replace(config, loose=True)
    if args.fail_fast is not None:
        config = replace(config, fail_fast=True)
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level)
    configure_logging(config)

    # closing() shuts the open file when fail_fast stops before end of input.
    try:
        with closing(_read_lines(args.files, stdin if stdin is not None else sys.stdin)) as lines:
            report = check_lines(lines, config)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot read input: %s", exc)
        return EXIT_USAGE

    logger.info(
        "%d valid, %d rejected%s",
        report.valid,
        report.invalid,
        " (stopped at first rejection)" if report.stopped_early else "",
    )
    return EXIT_OK if report.ok else EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
