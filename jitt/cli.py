"""Command-line entry point for jitt."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence

from jitt.commands import handle_config, handle_doctor, handle_init

_USAGE = """\
jitt - Jira + Git + Tiny Tooling

Usage: jitt <command> [arguments]

Commands:
  init [project]    Initialize .jitt.yaml configuration file
  config [key] [value]  Get or set configuration values
  doctor            Check project setup and configuration
  help              Show this help message

Examples:
  jitt init         # Create .jitt.yaml file with empty project
  jitt init ABC     # Create .jitt.yaml file with project=ABC
  jitt config       # Show all configuration
  jitt config project       # Show current project
  jitt config project XYZ   # Set project to XYZ
  jitt doctor       # Check if setup is correct"""

_COMMANDS = {
    "init": handle_init,
    "config": handle_config,
    "doctor": handle_doctor,
}


def print_usage() -> None:
    """Print the usage message to standard output."""
    print(_USAGE)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return its exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_usage()
        return 1

    command, *rest = args
    if command in ("help", "--help", "-h"):
        print_usage()
        return 0

    handler = _COMMANDS.get(command)
    if handler is None:
        quoted = json.dumps(command, ensure_ascii=False)
        print(f"jitt: unknown command {quoted}\n", file=sys.stderr)
        print_usage()
        return 1
    return handler(rest)


if __name__ == "__main__":
    sys.exit(main())