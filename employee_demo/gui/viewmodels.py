"""
GUI ViewModels — pure-Python state containers for the employee window.

No Qt imports here; every class is testable without a display.
Qt widgets copy their field text into these objects and render what they
expose.  None of them touches the EmployeeStore; MainWindow does.

Public API
──────────
EmployeeListViewModel — displayed rows + find-form fields
AddEmployeeViewModel  — add-form fields → validated Employee
"""

import logging
from typing import Optional

from employee_demo.store.models import STATUSES, Criteria, Employee, Status
from employee_demo.store.query import find
from employee_demo.store.validation import parse_id_text, validate

__all__ = ["EmployeeListViewModel", "AddEmployeeViewModel"]

logger = logging.getLogger(__name__)


# ── EmployeeListViewModel ──────────────────────────────────────────────────────

class EmployeeListViewModel:
    """
    Manages the employee list view and the find form.

    Attributes
    ──────────
    employees      — full list (set by load)
    displayed      — rows currently shown (all, or the last find result)
    find_id_text   — raw text of the ID field; empty = any id
    find_name_text — substring to match (case-sensitive); empty = any name
    find_status    — one of STATUSES; "Both" = any status
    """

    def __init__(self) -> None:
        self.employees:      list[Employee] = []
        self.displayed:      list[Employee] = []
        self.find_id_text:   str             = ""
        self.find_name_text: str             = ""
        self.find_status:    str             = Status.BOTH.value
        self.statuses:       list[str]       = list(STATUSES)

    def load(self, employees: list[Employee]) -> None:
        """Replace the employee list and show every row."""
        self.employees = list(employees)
        self.show_all()

    def show_all(self) -> None:
        self.displayed = list(self.employees)

    def criteria(self) -> Criteria:
        """
        Build filter criteria from the find form.

        Raises:
            ValidationError: if the ID field holds something other than a
                             whole number.
        """
        try:
            status: Optional[Status] = Status(self.find_status)
        except ValueError:
            status = None
        return Criteria(
            id=parse_id_text(self.find_id_text, default=0),
            name_contains=self.find_name_text or "",
            status=status,
        )

    def apply_find(self) -> list[Employee]:
        """Filter employees by the find form and display the result."""
        self.displayed = find(self.employees, self.criteria())
        logger.debug("Find matched %d of %d employees", len(self.displayed), len(self.employees))
        return self.displayed


# ── AddEmployeeViewModel ───────────────────────────────────────────────────────

class AddEmployeeViewModel:
    """
    Holds the add-employee form.  Any status other than "Active" (including
    "Both") yields an inactive employee.

    Attributes
    ──────────
    id_text   — raw text of the ID field
    name_text — employee name
    status    — selected status, or None until the user picks one
    """

    def __init__(self) -> None:
        self.id_text:   str           = ""
        self.name_text: str           = ""
        self.status:    Optional[str] = None
        self.statuses:  list[str]     = list(STATUSES)

    def build(self) -> Employee:
        """
        Validate the form and return the Employee it describes.

        Raises:
            ValidationError: naming the first violated rule.
        """
        employee_id = parse_id_text(self.id_text, default=-1)
        return validate(employee_id, self.name_text, self.status)

    def clear(self) -> None:
        self.id_text = ""
        self.name_text = ""
        self.status = None
