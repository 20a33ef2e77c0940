"""CLI entrypoint for repolint."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .checkers import CHECKER_NAMES
from .config import ConfigError
from .linter import Linter
from .logging import configure_logging

EXIT_CLEAN = 0
EXIT_WARNINGS = 1
EXIT_ERRORS = 2


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repolint",
        description="Check a repository for common documentation and hygiene problems.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the repository root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only log errors.",
    )
    parser.add_argument(
        "--checkers",
        type=_split_names,
        default=None,
        help="Comma-separated list of checkers to run (defaults to all).",
    )
    parser.add_argument(
        "--list-checkers",
        action="store_true",
        help="Print the available checkers and exit.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for repolint."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_checkers:
        for name in CHECKER_NAMES:
            print(name)
        return EXIT_CLEAN

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    linter = Linter(enabled=args.checkers)
    try:
        report = linter.run(args.path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(EXIT_ERRORS, f"{exc}\n")
    except (ConfigError, ValueError) as exc:
        parser.exit(EXIT_ERRORS, f"repolint: {exc}\n")

    for warning in report.warnings:
        print(warning)
    for error in report.errors:
        print(f"repolint: {error}", file=sys.stderr)

    if report.errors:
        return EXIT_ERRORS
    if report.warnings:
        return EXIT_WARNINGS
    return EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
