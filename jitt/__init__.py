"""Jira + Git + Tiny Tooling: per-repository Jira project configuration."""

__version__ = "0.1.0"
__all__ = ["cli", "commands", "config"]