"""Detection of editor and OS junk files committed by accident."""

from __future__ import annotations

import re
from typing import Dict, List

from .base import CheckerBase


class UnwantedFileChecker(CheckerBase):
    """Flags files that should never be part of a repository."""

    name = "unwanted-files"

    def __init__(self) -> None:
        super().__init__()
        self.patterns: Dict[str, re.Pattern[str]] = {
            # foo.txt.swp
            "Vim swap": re.compile(r".*\.swp"),
            # #foo.txt#
            "Emacs autosave": re.compile(r"#.*#"),
            # foo.txt~
            "Emacs backup": re.compile(r".*~"),
            # .#foo.txt
            "Emacs lock file": re.compile(r"\.#.*"),
            "Mac OS sys file": re.compile(r"\.DS_STORE"),
            "Windows sys file": re.compile(r"Thumbs\.db"),
        }

    def check_files(self) -> List[str]:
        warnings: List[str] = []
        for file in self._files:
            for kind, pattern in self.patterns.items():
                if pattern.fullmatch(file.base_name):
                    warnings.append(f"remove {kind} file: {file.orig_path}")
        return warnings
