"""Temporary workspace that materializes repository files for checkers."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional

from .logging import get_logger
from .models import RepoFile, RepoManifest


class Workspace:
    """Owns a temporary directory holding local copies of repository files.

    Files are created lazily: ``files`` only assigns temp paths, and
    ``materialize`` copies or loads whatever the requirement flags ask for.
    """

    def __init__(self, root: str, *, prefix: str = "repolint-") -> None:
        self.root = Path(root)
        self._prefix = prefix
        self._tempdir: Optional[tempfile.TemporaryDirectory[str]] = None
        self.logger = get_logger("workspace")

    def __enter__(self) -> "Workspace":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def path(self) -> Path:
        if self._tempdir is None:
            raise RuntimeError("Workspace is not open")
        return Path(self._tempdir.name)

    def open(self) -> None:
        if self._tempdir is None:
            self._tempdir = tempfile.TemporaryDirectory(prefix=self._prefix)

    def close(self) -> None:
        if self._tempdir is not None:
            self._tempdir.cleanup()
            self._tempdir = None

    def files(self, manifest: RepoManifest) -> List[RepoFile]:
        """Build one ``RepoFile`` per manifest path with a unique temp path."""
        base = self.path
        result: List[RepoFile] = []
        for rel_path in manifest.paths:
            posix = PurePosixPath(rel_path)
            temp_path = base.joinpath(*posix.parts)
            result.append(
                RepoFile(
                    temp_path=str(temp_path),
                    orig_path=rel_path,
                    base_name=posix.name,
                )
            )
        return result

    def materialize(self, files: Iterable[RepoFile]) -> None:
        """Copy or load every file according to its requirement flags."""
        for file in files:
            source = self.root.joinpath(*PurePosixPath(file.orig_path).parts)
            if file.require.local_copy:
                target = Path(file.temp_path)
                if not target.exists():
                    target.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copyfile(source, target)
                    self.logger.debug("Copied %s", file.orig_path)
            if file.require.contents and file.contents is None:
                file.contents = source.read_text(encoding="utf-8", errors="replace")
                self.logger.debug("Loaded contents of %s", file.orig_path)
