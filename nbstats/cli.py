"""
Command-line entry point.

Usage:
  nbstats [filename] [--json] [--strict] [--table-out CSV] [-v]

Without a filename the numbers are read from stdin; on an interactive
console end the input with ^Z (or ^D). Rejected tokens are reported on
stderr and the run continues; malformed input, an empty dataset or an I/O
failure end the run with a non-zero exit code.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import NBSTATS_LOG_LEVEL, get_setting

from .errors import MalformedTokenError, NBStatsError, RejectedTokenWarning, StreamIOError, UsageError
from .pipeline import Report, analyze_stream
from .report import BANNER, JsonRenderer, TextRenderer
from .tokenizer import CTRL_Z

logger = logging.getLogger("nbstats")

USAGE = "Usage: nbstats [filename]"
PROMPT = "Enter white-space separated real numbers. Terminate input with ^Z (or ^D)"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _ArgumentParser(prog="nbstats", description="Descriptive statistics and Newcomb-Benford analysis of a list of numbers")
    ap.add_argument("files", nargs="*", metavar="filename", help="File of white-space separated numbers (default: stdin)")
    ap.add_argument("--json", action="store_true", help="Print the report as JSON instead of text")
    ap.add_argument("--strict", action="store_true", help="Treat any rejected token as fatal")
    ap.add_argument("--table-out", metavar="CSV", help="Also write the leading-digit frequency table to CSV")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    return ap


def configure_logging(verbosity: int = 0) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        name = (get_setting("NBSTATS_LOG_LEVEL", NBSTATS_LOG_LEVEL) or "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr, force=True)


def _run(args: argparse.Namespace) -> Report:
    if not args.files:
        interactive = sys.stdin.isatty()
        if interactive and not args.json:
            print(PROMPT)
        return analyze_stream(sys.stdin.buffer, eof_marker=CTRL_Z if interactive else None, strict=args.strict)

    path = args.files[0]
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise StreamIOError(f"error <{path}> {exc.strerror or exc}") from exc
    with fh:
        return analyze_stream(fh, strict=args.strict)


def _write_table(report: Report, path: str) -> None:
    try:
        report.table.to_frame().to_csv(path, index=False)
    except OSError as exc:
        raise StreamIOError(f"cannot write <{path}> {exc.strerror or exc}") from exc
    logger.info("frequency table written to %s", path)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    try:
        args = ap.parse_args(argv)
        if len(args.files) > 1:
            raise UsageError(f"too many command-line arguments ({len(args.files) + 1})")
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return exc.exit_code

    configure_logging(args.verbose)
    if not args.json:
        print(BANNER)
        print("=" * 48)

    try:
        report = _run(args)
        if args.table_out:
            _write_table(report, args.table_out)
    except RejectedTokenWarning as w:
        logger.error("%s (strict mode)", w)
        return MalformedTokenError.exit_code
    except NBStatsError as exc:
        logger.error("%s", exc)
        return exc.exit_code

    renderer = JsonRenderer() if args.json else TextRenderer()
    sys.stdout.write(renderer.render(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
