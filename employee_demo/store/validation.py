"""
Input validation shared by every front end.

The GUI forms and the CLI both go through validate() before calling
EmployeeStore.add(); the store itself performs no checks.
"""

import re
from typing import Optional

from employee_demo.exceptions import ValidationError
from employee_demo.store.models import Employee, Status

__all__ = ["validate", "parse_id_text"]

_ID_TEXT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_id_text(text: Optional[str], default: int) -> int:
    """
    Convert raw id field text to an int.

    Empty input yields *default*; anything that is not a whole number raises
    ValidationError.
    """
    if not text:
        return default
    if not _ID_TEXT_RE.match(text):
        raise ValidationError("The ID must be a whole number.")
    return int(text)


def validate(employee_id: Optional[int], name: Optional[str], status: Optional[str]) -> Employee:
    """
    Check add-form input and build the Employee it describes.

    Rules are checked in order and the first violation is raised:
      1. id must be > 0
      2. name must be non-empty
      3. a status must be selected

    Only the "Active" status produces an active employee.

    Raises:
        ValidationError: naming the violated rule.
    """
    if employee_id is None or employee_id <= 0:
        raise ValidationError("The ID cannot be 0 or negative.")
    if not name:
        raise ValidationError("The name cannot be empty.")
    if not status:
        raise ValidationError("The status must be selected.")
    return Employee(id=employee_id, name=name, is_active=status == Status.ACTIVE.value)
