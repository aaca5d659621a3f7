"""CLI entry point — ``locker [FLAKE_LOCK]``."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from pydantic import ValidationError

from locker import __version__
from locker.config import Settings
from locker.constants import ExitCode, OutputFormat
from locker.errors import ErrorKind, LockerError
from locker.export.json_export import export_json
from locker.export.text import format_text_report
from locker.logging_config import setup_logging
from locker.services.lint_service import LintResult, lint_lock


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"locker {__version__}")
        return ExitCode.OK

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return ExitCode.FAILURE

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    lock_path = (
        args.flake_lock
        if args.flake_lock is not None
        else settings.lock_path
    )
    fmt = OutputFormat(args.format or settings.output_format)

    try:
        result = lint_lock(lock_path)
    except LockerError as exc:
        print(_error_line(exc), file=sys.stderr)
        return exc.exit_code

    _report(result, fmt)
    if result.has_duplicates:
        return ExitCode.FAILURE
    return ExitCode.OK


class _ArgumentParser(argparse.ArgumentParser):
    """Reports usage errors with the same exit status as lint failures."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(
            ExitCode.FAILURE, f"{self.prog}: error: {message}\n"
        )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _ArgumentParser(
        prog="locker",
        description="locker - a tool to lint your flake.lock file",
    )
    parser.add_argument(
        "flake_lock",
        nargs="?",
        default=None,
        help="Path to the lock file (default: flake.lock)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    return parser


def _report(result: LintResult, fmt: OutputFormat) -> None:
    """Write the lint result to stdout/stderr."""
    if fmt == OutputFormat.JSON:
        print(export_json(result))
        return

    report = format_text_report(result)
    for line in report.stdout:
        print(line)
    for line in report.stderr:
        print(line, file=sys.stderr)


def _error_line(exc: LockerError) -> str:
    if exc.kind is ErrorKind.UNSUPPORTED_VERSION:
        return str(exc)
    return f"Error: {exc}"


if __name__ == "__main__":
    sys.exit(main())
