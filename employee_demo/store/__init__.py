"""
store — employee record store: model, codecs, filter and persistence.

Public API
──────────
Employee       — immutable employee record
Status         — status picker values (Both / Active / Inactive)
Criteria       — optional filter constraints
EmployeeStore  — in-memory list with load / save / add / query
find           — filter an employee list by Criteria
validate       — check add-form input and build an Employee
"""

from employee_demo.store.models import STATUSES, Criteria, Employee, Status
from employee_demo.store.query import find
from employee_demo.store.validation import parse_id_text, validate
from employee_demo.store.employee_store import EmployeeStore

__all__ = [
    "Employee",
    "Status",
    "STATUSES",
    "Criteria",
    "EmployeeStore",
    "find",
    "validate",
    "parse_id_text",
]
