"""Misspelling detection through the ``misspell`` tool."""

from __future__ import annotations

from typing import List

from ..config import DEFAULT_MISSPELL
from .external import ExternalToolChecker, ToolRunner


class MisspellChecker(ExternalToolChecker):
    """Reports commonly misspelled English words in documentation files."""

    name = "misspell"

    def __init__(self, executable: str = DEFAULT_MISSPELL, runner: ToolRunner | None = None) -> None:
        super().__init__(executable, runner)

    def tool_arguments(self) -> List[str]:
        return ["-error", "true"]

    def check_files(self) -> List[str]:
        if not self._files:
            return []
        result = self._run()
        if result.returncode == 0:
            return []
        replacer = self.filename_replacer()
        return [replacer.replace(line) for line in result.output.split("\n") if line]
