"""Configuration loading for repolint (.repolint.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".repolint.yml"

DEFAULT_MISSPELL = "misspell"
DEFAULT_LICHE = "liche"
DEFAULT_LINK_TIMEOUT = 30
# Release/download URLs, local hosts and the reserved example domain only
# produce false positives when checked from a sandbox.
DEFAULT_LINK_EXCLUDE = r"/release|/download|localhost|127\.[01]\.[01]\.[01]|example\.com"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ToolsConfig:
    """Executables used by the external-tool checkers."""

    misspell: str = DEFAULT_MISSPELL
    liche: str = DEFAULT_LICHE


@dataclass
class LinksConfig:
    """Broken-link checker settings."""

    timeout: int = DEFAULT_LINK_TIMEOUT
    exclude: str = DEFAULT_LINK_EXCLUDE


@dataclass
class CheckersConfig:
    """Checker enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class RepoLintConfig:
    """Represents the settings defined in .repolint.yml."""

    root: Path
    checkers: CheckersConfig = field(default_factory=CheckersConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    links: LinksConfig = field(default_factory=LinksConfig)
    exclude_paths: List[str] = field(default_factory=list)


def load_config(config_path: Path) -> RepoLintConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RepoLintConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    checkers = CheckersConfig()
    checkers_data = _as_dict(data.get("checkers"))
    if checkers_data:
        checkers.enabled = _as_str_list(checkers_data.get("enabled"))

    tools = ToolsConfig()
    tools_data = _as_dict(data.get("tools"))
    if tools_data:
        tools.misspell = _as_str(tools_data.get("misspell")) or DEFAULT_MISSPELL
        tools.liche = _as_str(tools_data.get("liche")) or DEFAULT_LICHE

    links = LinksConfig()
    links_data = _as_dict(data.get("links"))
    if links_data:
        timeout = _as_int(links_data.get("timeout"))
        if timeout is not None:
            if timeout <= 0:
                raise ConfigError("links.timeout must be a positive integer")
            links.timeout = timeout
        links.exclude = _as_str(links_data.get("exclude")) or DEFAULT_LINK_EXCLUDE

    return RepoLintConfig(
        root=root,
        checkers=checkers,
        tools=tools,
        links=links,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
