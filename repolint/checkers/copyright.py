"""Detection of license templates whose copyright line was never filled in."""

from __future__ import annotations

import re
from typing import List

from ..models import RepoFile
from .base import CheckerBase

_ROOT_LICENSE_FILES = frozenset({"LICENSE", "LICENSE.md", "LICENSE.txt"})


class SloppyCopyrightChecker(CheckerBase):
    """Flags root license files still carrying ``year, fullname`` placeholders."""

    name = "sloppy-copyright"

    def __init__(self) -> None:
        super().__init__()
        alternatives = [
            r"copyright year,?\s*fullname",
            r"copyright \(c\)\s*year,?\s*fullname",
            r"copyright ©\s*year,?\s*fullname",
        ]
        self.copyright_pattern = re.compile("|".join(alternatives), re.IGNORECASE)

    def push_file(self, file: RepoFile) -> None:
        # Only root-level license files.
        if file.orig_path in _ROOT_LICENSE_FILES:
            file.require.contents = True
            self._accept_file(file)

    def check_files(self) -> List[str]:
        warnings: List[str] = []
        for file in self._files:
            if self.copyright_pattern.search(file.contents or ""):
                warnings.append(f"{file.orig_path}: license contains sloppy copyright")
        return warnings
