"""Detection of acronyms written in lowercase."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping

from ..models import RepoFile
from .base import CheckerBase, is_documentation_file

_ACRONYMS = {
    "gnu": "GNU",
    "sql": "SQL",
    "dsl": "DSL",
    "ansi": "ANSI",
    "bios": "BIOS",
    "cgi": "CGI",
    "ssa": "SSA",
    "dpi": "DPI",
    "gui": "GUI",
    "oop": "OOP",
}


class AcronymChecker(CheckerBase):
    """Suggests the canonical spelling of lowercase acronyms in documentation."""

    name = "acronyms"

    def __init__(self) -> None:
        super().__init__()
        self.acronyms: Mapping[str, str] = MappingProxyType(dict(_ACRONYMS))
        words = "|".join(re.escape(word) for word in sorted(self.acronyms, key=len, reverse=True))
        # Whole words only: bounded by line edges or ASCII whitespace on both sides.
        self.acronym_pattern = re.compile(
            rf"(?:^|(?<=[\t\n\f\r ]))(?:{words})(?=[\t\n\f\r ]|$)", re.ASCII
        )

    def push_file(self, file: RepoFile) -> None:
        if is_documentation_file(file.base_name):
            file.require.contents = True
            self._accept_file(file)

    def check_files(self) -> List[str]:
        warnings: List[str] = []
        for file in self._files:
            for lineno, line in enumerate((file.contents or "").split("\n"), start=1):
                for match in self.acronym_pattern.finditer(line):
                    word = match.group(0)
                    warnings.append(
                        f"{file.orig_path}:{lineno}: replace {word} with {self.acronyms[word]}"
                    )
        return warnings
