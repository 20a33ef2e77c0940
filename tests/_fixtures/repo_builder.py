"""Helper utilities for constructing temporary repositories in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path, PurePosixPath
from typing import List, Mapping, Optional, Sequence

from repolint.checkers import ToolResult
from repolint.models import RepoFile


def make_file(orig_path: str, contents: Optional[str] = None, *, temp_root: str = "/tmp/rl-1234") -> RepoFile:
    """Build a ``RepoFile`` the way the workspace would, without touching disk."""
    return RepoFile(
        temp_path=f"{temp_root}/{orig_path}",
        orig_path=orig_path,
        base_name=PurePosixPath(orig_path).name,
        contents=contents,
    )


class FakeRunner:
    """Records tool invocations and replays a canned result."""

    def __init__(self, output: str = "", returncode: int = 1) -> None:
        self.result = ToolResult(returncode=returncode, output=output)
        self.calls: List[List[str]] = []

    def __call__(self, args: Sequence[str]) -> ToolResult:
        self.calls.append(list(args))
        return self.result


class RepoBuilder:
    """Utility for writing files into a throwaway repository."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the repository."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self) -> Path:
        """Return the repository root path."""
        return self.root


__all__ = ["FakeRunner", "RepoBuilder", "make_file"]
