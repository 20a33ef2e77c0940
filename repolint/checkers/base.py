"""Checker contract and shared helpers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from ..models import RepoFile

_DOC_FILE_PATTERN = re.compile(r"(?:README|CONTRIBUTING|TODO)")


def is_documentation_file(filename: str) -> bool:
    """Return True for README*, CONTRIBUTING* and TODO* base names."""
    return _DOC_FILE_PATTERN.match(filename) is not None


class PathReplacer:
    """Maps temporary file paths to original repository paths and back."""

    def __init__(self, files: Sequence[RepoFile]) -> None:
        self._to_orig: Dict[str, str] = {}
        self._to_temp: Dict[str, str] = {}
        for file in files:
            self._to_orig.setdefault(file.temp_path, file.orig_path)
            self._to_temp.setdefault(file.orig_path, file.temp_path)
        self._forward = _alternation(self._to_orig)
        self._backward = _alternation(self._to_temp)

    def original_for(self, temp_path: str) -> Optional[str]:
        return self._to_orig.get(temp_path)

    def temp_for(self, orig_path: str) -> Optional[str]:
        return self._to_temp.get(orig_path)

    def replace(self, text: str) -> str:
        """Substitute every temp path occurring in ``text`` with its original path."""
        if self._forward is None:
            return text
        return self._forward.sub(lambda match: self._to_orig[match.group(0)], text)

    def restore(self, text: str) -> str:
        """Substitute every original path occurring in ``text`` with its temp path."""
        if self._backward is None:
            return text
        return self._backward.sub(lambda match: self._to_temp[match.group(0)], text)

    def __len__(self) -> int:
        return len(self._to_orig)


def _alternation(table: Dict[str, str]) -> Optional[re.Pattern[str]]:
    keys = [key for key in table if key]
    if not keys:
        return None
    # Longest first so a path never matches as a prefix of a longer one.
    keys.sort(key=len, reverse=True)
    return re.compile("|".join(re.escape(key) for key in keys))


class Checker(ABC):
    """Contract for checkers that inspect repository files and emit warnings."""

    name: str = ""

    @abstractmethod
    def reset(self) -> None:
        """Forget every accepted file."""

    @abstractmethod
    def push_file(self, file: RepoFile) -> None:
        """Offer a candidate file; the checker decides whether to accept it."""

    @abstractmethod
    def check_files(self) -> List[str]:
        """Return one warning line per finding, using original paths."""


class CheckerBase(Checker):
    """Accepted-file bookkeeping shared by every concrete checker."""

    def __init__(self) -> None:
        self._files: List[RepoFile] = []
        self._replacer: Optional[PathReplacer] = None

    @property
    def files(self) -> List[RepoFile]:
        return list(self._files)

    def reset(self) -> None:
        self._files.clear()
        self._replacer = None

    def push_file(self, file: RepoFile) -> None:
        self._accept_file(file)

    def _accept_file(self, file: RepoFile) -> None:
        self._files.append(file)
        self._replacer = None

    def temp_filenames(self) -> List[str]:
        return [file.temp_path for file in self._files]

    def filename_replacer(self) -> PathReplacer:
        if self._replacer is None:
            self._replacer = PathReplacer(self._files)
        return self._replacer

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(files={len(self._files)})"
