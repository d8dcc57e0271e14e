"""Data models for the store module."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = ["Employee", "Status", "STATUSES", "Criteria"]


@dataclass(frozen=True)
class Employee:
    """
    One employee entry.

    Fields
    ──────
    id        — positive integer; duplicates are tolerated
    name      — non-empty display name, stored verbatim
    is_active — employment status flag
    """
    id:        int
    name:      str
    is_active: bool

    def __str__(self) -> str:
        state = "active" if self.is_active else "inactive"
        return f"Employee(id={self.id}, name={self.name!r}, {state})"


class Status(str, Enum):
    BOTH     = "Both"
    ACTIVE   = "Active"
    INACTIVE = "Inactive"


# Picker order shown by every front end
STATUSES: tuple[str, ...] = tuple(s.value for s in Status)


@dataclass(frozen=True)
class Criteria:
    """
    Optional constraints for a filter query.

    A criterion only takes part in matching when it is "supplied":
      id            — supplied when > 0
      name_contains — supplied when non-empty
      status        — supplied when ACTIVE or INACTIVE (BOTH / None match all)
    """
    id:            Optional[int]    = None
    name_contains: str              = ""
    status:        Optional[Status] = Status.BOTH
