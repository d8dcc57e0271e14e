"""Filter query over an employee list."""

from typing import Iterable

from employee_demo.store.models import Criteria, Employee, Status

__all__ = ["find"]


def find(employees: Iterable[Employee], criteria: Criteria) -> list[Employee]:
    """
    Return the employees matching every supplied criterion, in input order.

    With no supplied criteria every employee is returned.  Name matching is
    a case-sensitive substring test.
    """
    match_id = criteria.id is not None and criteria.id > 0
    match_name = len(criteria.name_contains) > 0
    match_status = criteria.status in (Status.ACTIVE, Status.INACTIVE)
    want_active = criteria.status == Status.ACTIVE

    found: list[Employee] = []
    for employee in employees:
        if match_id and employee.id != criteria.id:
            continue
        if match_name and criteria.name_contains not in employee.name:
            continue
        if match_status and employee.is_active != want_active:
            continue
        found.append(employee)
    return found
