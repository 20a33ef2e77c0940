"""Logging utilities for repolint commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "repolint"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the repolint hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send repolint logs to stderr, and optionally to ``log_file`` at DEBUG.

    Warnings produced by checkers go to stdout, so console logging stays at
    WARNING unless ``verbose`` is set.
    """
    console_level = _console_level(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    fmt = "[repolint] %(levelname)s %(message)s"
    if verbose:
        fmt = "[repolint] %(levelname)s %(name)s: %(message)s"
    console.setFormatter(logging.Formatter(fmt))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
