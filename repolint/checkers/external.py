"""Helpers for checkers that shell out to external analysis tools."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..logging import get_logger
from ..models import RepoFile
from .base import CheckerBase, is_documentation_file


@dataclass(frozen=True)
class ToolResult:
    """Exit status and combined stdout/stderr of a tool invocation."""

    returncode: int
    output: str


class ToolError(RuntimeError):
    """Raised when an external tool cannot be launched at all."""


ToolRunner = Callable[[Sequence[str]], ToolResult]


def run_tool(args: Sequence[str]) -> ToolResult:
    """Run ``args`` to completion and capture its merged output."""
    argv = list(args)
    try:
        completed = subprocess.run(
            argv,
            check=False,
            text=True,
            errors="replace",
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except FileNotFoundError as exc:
        raise ToolError(f"Unable to locate '{argv[0]}'. Install it or configure its path.") from exc
    except OSError as exc:
        raise ToolError(f"Unable to run '{argv[0]}': {exc}") from exc
    return ToolResult(returncode=completed.returncode, output=completed.stdout or "")


class ExternalToolChecker(CheckerBase):
    """Accepts documentation files and runs an external tool against local copies."""

    def __init__(self, executable: str, runner: ToolRunner | None = None) -> None:
        super().__init__()
        self.executable = executable
        self._runner = runner or run_tool
        self.logger = get_logger(f"checkers.{self.name}")

    def push_file(self, file: RepoFile) -> None:
        if is_documentation_file(file.base_name):
            file.require.local_copy = True
            self._accept_file(file)

    def tool_arguments(self) -> List[str]:
        """Arguments placed between the executable and the file list."""
        return []

    def _run(self) -> ToolResult:
        args = [self.executable, *self.tool_arguments(), *self.temp_filenames()]
        self.logger.debug("Running %s on %d files", self.executable, len(self._files))
        result = self._runner(args)
        self.logger.debug("%s exited with status %d", self.executable, result.returncode)
        return result
