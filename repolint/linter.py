"""Pipeline that drives every checker over a repository's files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from .checkers import Checker, ToolError, ToolRunner, build_checkers
from .config import RepoLintConfig, load_config
from .logging import get_logger
from .models import RepoFile
from .repo_scanner import RepoScanner
from .workspace import Workspace

Materializer = Callable[[Sequence[RepoFile]], None]


@dataclass
class LintReport:
    """Warnings produced by one lint run plus any tool failures."""

    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings and not self.errors


class Linter:
    """Runs the reset / push / check cycle for each checker in turn."""

    def __init__(
        self,
        checkers: Optional[Iterable[Checker]] = None,
        scanner: RepoScanner | None = None,
        *,
        enabled: Sequence[str] | None = None,
        runner: ToolRunner | None = None,
    ) -> None:
        self._checker_overrides = list(checkers) if checkers is not None else None
        self.scanner = scanner or RepoScanner()
        self.enabled = list(enabled) if enabled else None
        self._runner = runner
        self.logger = get_logger("linter")

    def run(self, path: str) -> LintReport:
        """Scan the repository at ``path`` and run every selected checker."""
        repo_path = Path(path).expanduser().resolve()
        self.logger.info("Linting %s", repo_path)
        manifest = self.scanner.scan(str(repo_path))
        config = load_config(repo_path)
        checkers = self._select_checkers(config)
        self.logger.debug("Selected %d checkers", len(checkers))

        with Workspace(manifest.root) as workspace:
            files = workspace.files(manifest)
            return self.check(files, checkers, workspace.materialize)

    def check(
        self,
        files: Sequence[RepoFile],
        checkers: Sequence[Checker],
        materialize: Materializer,
    ) -> LintReport:
        """Offer ``files`` to each checker and collect their warnings."""
        report = LintReport()
        for checker in checkers:
            name = checker.name or checker.__class__.__name__
            checker.reset()
            for file in files:
                checker.push_file(file)
            materialize([file for file in files if _is_required(file)])
            try:
                warnings = checker.check_files()
            except ToolError as exc:
                self.logger.error("Checker %s failed: %s", name, exc)
                report.errors.append(f"{name}: {exc}")
                continue
            self.logger.debug("Checker %s produced %d warnings", name, len(warnings))
            report.warnings.extend(warnings)
        return report

    def _select_checkers(self, config: RepoLintConfig) -> List[Checker]:
        if self._checker_overrides is not None:
            return list(self._checker_overrides)
        enabled = self.enabled or config.checkers.enabled or None
        return build_checkers(enabled, config=config, runner=self._runner)


def _is_required(file: RepoFile) -> bool:
    return file.require.local_copy or file.require.contents


__all__ = ["LintReport", "Linter"]
