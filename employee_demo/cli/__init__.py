"""
cli — command-line interface for employee-demo.

Entry points
────────────
  python -m employee_demo   (via employee_demo/__main__.py)
  employee-demo             (via pyproject.toml [project.scripts])

Subcommands: list | add | statuses | gui
"""

from employee_demo.cli.main import build_parser, cmd_add, cmd_list, cmd_statuses, main

__all__ = ["build_parser", "cmd_add", "cmd_list", "cmd_statuses", "main"]
