"""Checker implementations and the fixed checker registry."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Set

from ..config import RepoLintConfig
from .acronyms import AcronymChecker
from .base import Checker, CheckerBase, PathReplacer, is_documentation_file
from .copyright import SloppyCopyrightChecker
from .external import ExternalToolChecker, ToolError, ToolResult, ToolRunner, run_tool
from .links import BrokenLinkChecker, parse_liche_output
from .misspell import MisspellChecker
from .typos import VarTypoChecker
from .unwanted import UnwantedFileChecker

CheckerFactory = Callable[[RepoLintConfig, Optional[ToolRunner]], Checker]


def _misspell(config: RepoLintConfig, runner: ToolRunner | None) -> Checker:
    return MisspellChecker(config.tools.misspell, runner)


def _broken_links(config: RepoLintConfig, runner: ToolRunner | None) -> Checker:
    return BrokenLinkChecker(
        config.tools.liche,
        runner,
        timeout=config.links.timeout,
        exclude=config.links.exclude,
    )


_BUILTIN_FACTORIES: Dict[str, CheckerFactory] = {
    MisspellChecker.name: _misspell,
    BrokenLinkChecker.name: _broken_links,
    UnwantedFileChecker.name: lambda config, runner: UnwantedFileChecker(),
    SloppyCopyrightChecker.name: lambda config, runner: SloppyCopyrightChecker(),
    AcronymChecker.name: lambda config, runner: AcronymChecker(),
    VarTypoChecker.name: lambda config, runner: VarTypoChecker(),
}

CHECKER_NAMES: Sequence[str] = tuple(_BUILTIN_FACTORIES)


def build_checkers(
    enabled: Sequence[str] | None = None,
    *,
    config: RepoLintConfig | None = None,
    runner: ToolRunner | None = None,
) -> List[Checker]:
    """Return checker instances in registry order, honoring optional enabled names."""

    if config is None:
        config = RepoLintConfig(root=Path.cwd())

    enabled_set: Set[str] | None = None
    if enabled:
        enabled_set = {name.strip().lower() for name in enabled if name.strip()}
        unknown = enabled_set.difference(CHECKER_NAMES)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown checkers requested: {missing}")

    checkers: List[Checker] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        checkers.append(factory(config, runner))
    return checkers


__all__ = [
    "AcronymChecker",
    "BrokenLinkChecker",
    "CHECKER_NAMES",
    "Checker",
    "CheckerBase",
    "ExternalToolChecker",
    "MisspellChecker",
    "PathReplacer",
    "SloppyCopyrightChecker",
    "ToolError",
    "ToolResult",
    "ToolRunner",
    "UnwantedFileChecker",
    "VarTypoChecker",
    "build_checkers",
    "is_documentation_file",
    "parse_liche_output",
    "run_tool",
]
