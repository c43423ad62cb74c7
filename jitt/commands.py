"""The ``init``, ``config`` and ``doctor`` commands.

Each handler prints its output and returns the process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from jitt import config
from jitt.config import ConfigError


def has_config_file() -> bool:
    """Return whether ``.jitt.yaml`` exists in the current directory."""
    return config.exists()


def is_git_repo() -> bool:
    """Return whether the current directory is inside a Git working tree."""
    try:
        cwd = Path.cwd()
    except OSError:
        return False
    return any((directory / ".git").exists() for directory in (cwd, *cwd.parents))


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def handle_init(args: Sequence[str]) -> int:
    """Create ``.jitt.yaml``, optionally with a project name."""
    if not is_git_repo():
        _error("Not inside a Git repo. Config not created")
        return 1
    if has_config_file():
        _error(".jitt.yaml already exists — not overwriting.")
        return 1

    project = args[0] if args else ""
    try:
        config.create(project)
    except ConfigError as exc:
        _error(f"Error creating .jitt.yaml: {exc}")
        return 1

    print(".jitt.yaml created")
    return 0


def handle_config(args: Sequence[str]) -> int:
    """Show or change configuration values."""
    if not is_git_repo():
        _error("Not inside a Git repo.")
        return 1
    if not has_config_file():
        _error(".jitt.yaml file not found - run 'jitt init' first")
        return 1

    if not args:
        try:
            cfg = config.load()
        except ConfigError as exc:
            _error(f"Error loading config: {exc}")
            return 1
        print("Current configuration:")
        print(f"  jira.project = {cfg.jira.project}")
        return 0

    key, *rest = args
    if key != "project":
        _error(f"Unknown config key: {key}")
        _error("Available keys: project")
        return 1

    if not rest:
        try:
            cfg = config.load()
        except ConfigError as exc:
            _error(f"Error loading config: {exc}")
            return 1
        if cfg.jira.project:
            print(f"jira.project = {cfg.jira.project}")
        else:
            print("No project configured")
        return 0

    new_project = rest[0]
    try:
        config.update("jira.project", new_project)
    except ConfigError as exc:
        _error(f"Error updating config: {exc}")
        return 1
    print(f"Set jira.project = {new_project}")
    return 0


def handle_doctor(args: Sequence[str]) -> int:
    """Check the project setup and report problems."""
    issues: list[str] = []
    warnings: list[str] = []

    if is_git_repo():
        print("✅ Git repository found")
    else:
        issues.append("❌ Not inside a Git repository")

    if not has_config_file():
        issues.append("❌ .jitt.yaml file not found")
    else:
        print("✅ .jitt.yaml file exists")
        try:
            cfg = config.load()
        except ConfigError as exc:
            issues.append(f"❌ Error loading .jitt.yaml: {exc}")
        else:
            if cfg.jira.project:
                print(f"✅ Project configured: {cfg.jira.project}")
            else:
                warnings.append("⚠️  No project configured in .jitt.yaml")

    for warning in warnings:
        print(warning)

    if issues:
        print()
        for issue in issues:
            print(issue)
        print()
        print("Run 'jitt init' to set up your project.")
        return 1

    print()
    if warnings:
        print("✨ Setup is functional but could be improved.")
    else:
        print("🎉 Everything looks good!")
    return 0