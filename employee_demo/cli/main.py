"""
CLI entry point for employee-demo.

Usage
─────
  # List every employee, or filter (all given filters must match)
  python -m employee_demo list
  python -m employee_demo list --name An --status Active

  # Add an employee (saved to employees.json before exiting)
  python -m employee_demo add --id 7 --name "Dana Scott" --status Active

  # Show the status picker values
  python -m employee_demo statuses

  # Open the desktop window
  python -m employee_demo gui

Each invocation loads the store once and, for ``add``, saves it once.
Subcommands are implemented as standalone functions (cmd_list, cmd_add,
cmd_statuses) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from employee_demo.config import DATA_DIR_ENV, DEFAULT_DATA_DIR, StoreConfig
from employee_demo.exceptions import LoadError, SaveError, ValidationError
from employee_demo.store.employee_store import EmployeeStore
from employee_demo.store.models import STATUSES, Criteria, Employee, Status
from employee_demo.store.validation import validate

__all__ = ["build_parser", "cmd_list", "cmd_add", "cmd_statuses", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: list | add | statuses | gui
    """
    parser = argparse.ArgumentParser(
        prog="employee-demo",
        description="Employee list manager (CSV import, JSON persistence)",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        dest="data_dir",
        metavar="DIR",
        help=f"Directory holding employees.csv / employees.json "
             f"(default: ${DATA_DIR_ENV} or {DEFAULT_DATA_DIR})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── list ──────────────────────────────────────────────────────────────
    lst = sub.add_parser("list", help="List employees, optionally filtered")
    lst.add_argument(
        "--id",
        type=int,
        default=None,
        metavar="ID",
        help="Only the employee(s) with this id (ignored if <= 0)",
    )
    lst.add_argument(
        "--name",
        default="",
        metavar="TEXT",
        help="Name substring to match (case-sensitive)",
    )
    lst.add_argument(
        "--status",
        choices=list(STATUSES),
        default=Status.BOTH.value,
        help="Active, Inactive or Both (default: Both)",
    )

    # ── add ───────────────────────────────────────────────────────────────
    add = sub.add_parser("add", help="Add an employee and save")
    add.add_argument(
        "--id",
        required=True,
        type=int,
        metavar="ID",
        help="Positive employee id",
    )
    add.add_argument(
        "--name",
        required=True,
        metavar="NAME",
        help="Employee name",
    )
    add.add_argument(
        "--status",
        required=True,
        choices=[Status.ACTIVE.value, Status.INACTIVE.value],
        help="Active or Inactive",
    )

    # ── statuses / gui ────────────────────────────────────────────────────
    sub.add_parser("statuses", help="Print the status picker values")
    sub.add_parser("gui", help="Open the desktop window")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _format_row(employee: Employee) -> str:
    state = Status.ACTIVE.value if employee.is_active else Status.INACTIVE.value
    return f"[{employee.id:>6}]  {employee.name:<30} {state}"


# ── Command implementations ───────────────────────────────────────────────────


def cmd_list(store: EmployeeStore, criteria: Optional[Criteria] = None) -> list[Employee]:
    """Print the employees matching *criteria* (all when None) to stdout."""
    employees = store.list_filtered(criteria) if criteria else store.list_all()
    if not employees:
        print("0 employees found.")
        return employees
    for employee in employees:
        print(_format_row(employee))
    return employees


def cmd_add(store: EmployeeStore, employee_id: int, name: str, status: str) -> Employee:
    """
    Validate the fields, append the employee and save the store.

    Raises:
        ValidationError: on bad input; the store is left unchanged.
        SaveError:       if writing employees.json fails.
    """
    employee = validate(employee_id, name, status)
    store.add(employee)
    store.save()
    print(f"Employee was added: {_format_row(employee)}")
    return employee


def cmd_statuses() -> None:
    """Print the status picker values, one per line."""
    for status in EmployeeStore.statuses():
        print(status)


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    config = StoreConfig.from_args(ns.data_dir)

    if ns.subcommand == "statuses":
        cmd_statuses()
        return 0

    if ns.subcommand == "gui":
        # Imported lazily so the text commands never load Qt.
        from employee_demo.gui.app import run_gui
        return run_gui(config)

    store = EmployeeStore(config)
    try:
        store.load()
    except LoadError as exc:
        logger.debug("load failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if ns.subcommand == "list":
        criteria = Criteria(
            id=ns.id,
            name_contains=ns.name,
            status=Status(ns.status),
        )
        cmd_list(store=store, criteria=criteria)
        return 0

    if ns.subcommand == "add":
        try:
            cmd_add(store=store, employee_id=ns.id, name=ns.name, status=ns.status)
        except (ValidationError, SaveError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
