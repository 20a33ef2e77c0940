"""Core data models shared across repolint components."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FileRequirements:
    """Tells the file provider what a checker needs materialized."""

    local_copy: bool = False
    contents: bool = False


@dataclass
class RepoFile:
    """A repository file as seen by checkers."""

    temp_path: str
    orig_path: str
    base_name: str
    contents: Optional[str] = None
    require: FileRequirements = field(default_factory=FileRequirements)


@dataclass
class RepoManifest:
    """Normalized view of the repository for the lint pipeline."""

    root: str
    paths: List[str]
