"""Detection of misspelled environment variable references."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, List, Mapping

from ..models import RepoFile
from .base import CheckerBase, is_documentation_file

_VARIABLE_TYPOS = {
    "PAHT": "PATH",
    "HOEM": "HOME",
    "GOPAHT": "GOPATH",
    "JAAV_HOME": "JAVA_HOME",
    "JAVA_HOEM": "JAVA_HOME",
    "JAVE_HOME": "JAVA_HOME",
    "CLASSPAHT": "CLASSPATH",
    "CLASPATH": "CLASSPATH",
}


class VarTypoChecker(CheckerBase):
    """Flags ``$VAR`` and ``${VAR}`` references that look like typos."""

    name = "var-typos"

    def __init__(self) -> None:
        super().__init__()
        corrections: Dict[str, str] = {}
        parts: List[str] = []
        for typo, corrected in _VARIABLE_TYPOS.items():
            parts.append(rf"\${re.escape(typo)}\b")
            corrections[f"${typo}"] = corrected
            parts.append(rf"\$\{{{re.escape(typo)}\}}")
            corrections[f"${{{typo}}}"] = corrected
        self.corrections: Mapping[str, str] = MappingProxyType(corrections)
        self.variable_pattern = re.compile("|".join(parts), re.ASCII)

    def push_file(self, file: RepoFile) -> None:
        if is_documentation_file(file.base_name):
            file.require.contents = True
            self._accept_file(file)

    def check_files(self) -> List[str]:
        warnings: List[str] = []
        for file in self._files:
            for lineno, line in enumerate((file.contents or "").split("\n"), start=1):
                for match in self.variable_pattern.finditer(line):
                    text = match.group(0)
                    warnings.append(
                        f"{file.orig_path}:{lineno}: {text} could be a misspelling of "
                        f"{self.corrections[text]}"
                    )
        return warnings
