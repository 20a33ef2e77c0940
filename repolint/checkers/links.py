"""Broken link detection through the ``liche`` tool."""

from __future__ import annotations

from typing import List, Sequence

from ..config import DEFAULT_LICHE, DEFAULT_LINK_EXCLUDE, DEFAULT_LINK_TIMEOUT
from .base import PathReplacer
from .external import ExternalToolChecker, ToolRunner

_IGNORED_DETAILS = (
    # File lookups are meaningless without a real clone of the repository.
    "no such file",
    "root directory is not specified",
)


class BrokenLinkChecker(ExternalToolChecker):
    """Reports unreachable URLs referenced from documentation files."""

    name = "broken-links"

    def __init__(
        self,
        executable: str = DEFAULT_LICHE,
        runner: ToolRunner | None = None,
        *,
        timeout: int = DEFAULT_LINK_TIMEOUT,
        exclude: str = DEFAULT_LINK_EXCLUDE,
    ) -> None:
        super().__init__(executable, runner)
        self.timeout = timeout
        self.exclude = exclude

    def tool_arguments(self) -> List[str]:
        return ["-t", str(self.timeout), "-x", self.exclude]

    def check_files(self) -> List[str]:
        if not self._files:
            return []
        result = self._run()
        if result.returncode == 0:
            return []
        return parse_liche_output(result.output.split("\n"), self.filename_replacer())


def parse_liche_output(lines: Sequence[str], replacer: PathReplacer) -> List[str]:
    """Turn liche's filename / indented-error report into warning lines.

    A line without a leading tab names the file being reported on. A tabbed
    line holding ``ERROR`` carries the URL, and the line after it carries the
    error detail.
    """
    warnings: List[str] = []
    filename = ""
    index = 0
    while index < len(lines):
        line = lines[index]
        index += 1
        if not line:
            continue
        if not line.startswith("\t"):
            filename = replacer.replace(line)
            continue
        if "ERROR" not in line:
            continue
        if index >= len(lines):
            break
        url = line.lstrip("\t ERO")
        detail = lines[index].strip()
        index += 1
        if not detail:
            # Output ended right after the ERROR line.
            break
        if detail == "Timeout":
            # Timeouts are mostly flakiness, not dead links.
            continue
        if any(marker in detail for marker in _IGNORED_DETAILS):
            continue
        warnings.append(f"{filename}: {url}: {detail}")
    return warnings
