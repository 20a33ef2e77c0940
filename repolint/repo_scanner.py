"""Repository scanning and manifest building utilities."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, NamedTuple

from .config import CONFIG_FILENAME, ConfigError, load_config
from .logging import get_logger
from .models import RepoManifest

# Editor and OS junk files are deliberately not excluded here: the
# unwanted-file checker has to see them.
_SKIPPED_DIRS = frozenset(
    {".git", ".hg", ".svn", ".venv", "node_modules", "__pycache__", ".pytest_cache", ".mypy_cache"}
)

logger = get_logger("scanner")


class _Exclusion(NamedTuple):
    glob: str
    negated: bool
    dirs_only: bool
    rooted: bool


class PathFilter:
    """Decides which repository paths are hidden from checkers.

    Understands the subset of gitignore syntax repolint needs: ``!`` negation,
    a trailing ``/`` for directories, and patterns containing ``/`` matching
    from the repository root. Later patterns win.
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._exclusions: List[_Exclusion] = []
        for pattern in patterns:
            self.add(pattern)

    def add(self, pattern: str) -> None:
        text = pattern.strip()
        if not text or text.startswith("#"):
            return
        negated = text.startswith("!")
        text = text.lstrip("!")
        dirs_only = text.endswith("/")
        text = text.rstrip("/")
        rooted = "/" in text
        text = text.lstrip("/")
        if text:
            self._exclusions.append(_Exclusion(text, negated, dirs_only, rooted))

    def excludes(self, rel_path: str, is_dir: bool) -> bool:
        verdict = False
        for exclusion in self._exclusions:
            if exclusion.dirs_only and not is_dir:
                continue
            if exclusion.rooted:
                hit = fnmatchcase(rel_path, exclusion.glob)
            else:
                hit = any(fnmatchcase(part, exclusion.glob) for part in rel_path.split("/"))
            if hit:
                verdict = not exclusion.negated
        return verdict

    def __len__(self) -> int:
        return len(self._exclusions)


def load_path_filter(root: Path) -> PathFilter:
    """Collect exclusions from ``.gitignore`` and ``exclude_paths`` in the config."""
    path_filter = PathFilter()
    gitignore = root / ".gitignore"
    if gitignore.is_file():
        for line in gitignore.read_text(encoding="utf-8").splitlines():
            path_filter.add(line)
    try:
        config = load_config(root / CONFIG_FILENAME)
    except ConfigError as exc:
        logger.warning("Ignoring exclude_paths from %s: %s", CONFIG_FILENAME, exc)
    else:
        for pattern in config.exclude_paths:
            path_filter.add(pattern)
    return path_filter


def _walk(root: Path, path_filter: PathFilter) -> Iterator[str]:
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else f"{rel_dir}/"
        dirnames[:] = sorted(
            name
            for name in dirnames
            if name not in _SKIPPED_DIRS and not path_filter.excludes(prefix + name, True)
        )
        for filename in sorted(filenames):
            rel_path = prefix + filename
            if not path_filter.excludes(rel_path, False) and (root / rel_path).is_file():
                yield rel_path


class RepoScanner:
    """Walks a local checkout to list the files offered to checkers."""

    def scan(self, root: str) -> RepoManifest:
        """Return a manifest of repository-relative file paths."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Repository path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Repository path is not a directory: {root}")

        path_filter = load_path_filter(root_path)
        paths = list(_walk(root_path, path_filter))
        logger.debug(
            "Scanned %d files under %s (%d exclusions)", len(paths), root_path, len(path_filter)
        )
        return RepoManifest(root=str(root_path), paths=paths)
