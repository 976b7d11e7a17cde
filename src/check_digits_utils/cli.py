"""Command-line interface for calculating and checking check digits.

Usage:
  check-digits calc -m ean 9638-507
  echo -e "9638-5074\\n12345678" | check-digits check -m ean --json
  check-digits list -l

The single-purpose commands ``calc-check-digits``, ``check-check-digits`` and
``list-check-digits-methods`` are shortcuts for the subcommands above.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import ConfigError, Settings, load_settings
from .core import calculate_batch, check_batch, list_method_rows
from .methods import UnknownMethodError, get_known_method_ids
from .summary import render_calc_lines, render_check_lines, render_method_table

logger = logging.getLogger(__name__)

EXIT_USAGE = 2


class UsageError(Exception):
    """Raised for missing arguments that argparse cannot detect by itself."""


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Output results as JSON")
    common.add_argument(
        "--config", type=Path, default=None, help="Path to a JSON settings file"
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return common


def _add_number_args(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-m",
        "--method",
        type=str.lower,
        choices=get_known_method_ids(),
        default=None,
        help="Check-digit method (see the 'list' command)",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="number",
        help=f"{help_text}; read from standard input, one per line, when omitted",
    )


def build_parser() -> argparse.ArgumentParser:
    common = _common_parser()
    parser = argparse.ArgumentParser(
        prog="check-digits",
        description="Utilities related to check digits",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser(
        "calc",
        parents=[common],
        help="Calculate check digit(s) of number(s)",
        description=(
            "Given a number without the check digit(s), e.g. the first 12 digits "
            "of an EAN-13, generate/complete the check digits."
        ),
    )
    _add_number_args(calc, "Numbers without the check digit(s)")

    check = sub.add_parser(
        "check",
        parents=[common],
        help="Check the check digit(s) of numbers",
        description=(
            "Check the check digit(s) of each number. The exit code is non-zero "
            "only when all numbers are invalid; use --json to see individual results."
        ),
    )
    _add_number_args(check, "Numbers including their check digit(s)")
    check.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=None,
        help="Don't output per-number messages to stdout",
    )

    listing = sub.add_parser(
        "list", parents=[common], help="List supported check-digit methods"
    )
    listing.add_argument(
        "-l", "--detail", action="store_true", help="Include method summaries"
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_numbers(numbers: list[str], stdin: TextIO) -> list[str]:
    """Return positional numbers, or non-blank lines of ``stdin`` when none were given."""
    if numbers:
        return numbers
    if stdin.isatty():
        raise UsageError("No numbers given (pass them as arguments or via stdin)")
    return [line.strip() for line in stdin if line.strip()]


def _resolve_method(args: argparse.Namespace, settings: Settings) -> str:
    method = args.method or settings.default_method
    if not method:
        raise UsageError("A method is required (-m/--method or 'default_method' setting)")
    return method


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2))


def _run_calc(args: argparse.Namespace, settings: Settings, use_json: bool) -> int:
    method = _resolve_method(args, settings)
    batch = calculate_batch(method, read_numbers(args.numbers, sys.stdin))

    if use_json:
        _print_json(batch.to_dict())
    else:
        out, err = render_calc_lines(batch)
        for line in out:
            print(line)
        for line in err:
            print(line, file=sys.stderr)
    return batch.exit_code


def _run_check(args: argparse.Namespace, settings: Settings, use_json: bool) -> int:
    method = _resolve_method(args, settings)
    quiet = settings.quiet if args.quiet is None else args.quiet
    batch = check_batch(method, read_numbers(args.numbers, sys.stdin))

    if use_json:
        _print_json(batch.to_dict())
    elif not quiet:
        for line in render_check_lines(batch):
            print(line)
    return batch.exit_code


def _run_list(args: argparse.Namespace, use_json: bool) -> int:
    rows = list_method_rows(detail=args.detail)
    if use_json:
        _print_json(rows)
    elif args.detail:
        sys.stdout.write(render_method_table(rows))
    else:
        for method_id in rows:
            print(method_id)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = load_settings(args.config)
        logger.debug("Using settings %s", settings)
        use_json = args.json or settings.json_output
        if args.command == "calc":
            return _run_calc(args, settings, use_json)
        if args.command == "check":
            return _run_check(args, settings, use_json)
        return _run_list(args, use_json)
    except (ConfigError, UnknownMethodError, UsageError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_USAGE


def calc_main(argv: list[str] | None = None) -> int:
    return main(["calc", *(sys.argv[1:] if argv is None else argv)])


def check_main(argv: list[str] | None = None) -> int:
    return main(["check", *(sys.argv[1:] if argv is None else argv)])


def list_main(argv: list[str] | None = None) -> int:
    return main(["list", *(sys.argv[1:] if argv is None else argv)])


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
