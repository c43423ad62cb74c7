"""Reading and writing the ``.jitt.yaml`` project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE = ".jitt.yaml"


class ConfigError(Exception):
    """Raised when the configuration cannot be read, parsed or written."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


@dataclass
class JiraConfig:
    """Jira-specific settings."""

    project: str = ""


@dataclass
class Config:
    """The whole application configuration."""

    jira: JiraConfig = field(default_factory=JiraConfig)


class _Dumper(yaml.SafeDumper):
    """YAML dumper that writes empty strings as ``""``."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.Node:
    style = '"' if data == "" else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_Dumper.add_representer(str, _represent_str)


def _lower_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in value.items()}
    return value


def _read_raw() -> dict[str, Any]:
    """Read and parse the config file into a mapping with lower-case keys."""
    path = Path(CONFIG_FILE)
    if not path.exists():
        raise ConfigNotFoundError("config file not found")
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"error reading config file: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            "error reading config file: top level of the document is not a mapping"
        )
    return _lower_keys(data)


def _write_raw(data: dict[str, Any]) -> None:
    text = yaml.dump(data, Dumper=_Dumper, default_flow_style=False, sort_keys=False)
    try:
        Path(CONFIG_FILE).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"error writing config file: {exc}") from exc


def _as_string(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (dict, list)):
        raise ConfigError(f"error unmarshaling config: '{name}' expected a string")
    return str(value)


def load() -> Config:
    """Load the configuration from ``.jitt.yaml`` in the current directory."""
    data = _read_raw()
    jira = data.get("jira")
    if jira is None:
        jira = {}
    if not isinstance(jira, dict):
        raise ConfigError("error unmarshaling config: 'jira' expected a map")
    project = _as_string(jira.get("project"), "jira.project")
    return Config(jira=JiraConfig(project=project))


def exists() -> bool:
    """Return whether ``.jitt.yaml`` exists in the current directory."""
    return Path(CONFIG_FILE).exists()


def create(project: str) -> None:
    """Write a new ``.jitt.yaml`` holding the given project."""
    _write_raw({"jira": {"project": project}})


def update(key: str, value: str) -> None:
    """Set a dotted key in the existing config file and write it back."""
    if not exists():
        raise ConfigError("config file not found - run 'jitt init' first")
    data = _read_raw()
    *parents, leaf = key.lower().split(".")
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[leaf] = value
    _write_raw(data)