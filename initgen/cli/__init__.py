"""
cli — command-line interface for initgen.

Entry points
────────────
  python -m initgen.cli.main
  initgen                    (via pyproject.toml [project.scripts])

Subcommands: actions | apply
"""

from initgen.cli.main import build_parser, cmd_actions, cmd_apply, main

__all__ = ["build_parser", "cmd_actions", "cmd_apply", "main"]
