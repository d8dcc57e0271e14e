"""
EmployeeStore — in-memory employee list with file load / save.

Usage::

    store = EmployeeStore(StoreConfig(data_dir="~/.employee-demo"))

    # Startup: read employees.json, or employees.csv before the first save
    store.load()

    # Render
    rows = store.list_filtered(Criteria(name_contains="An", status=Status.ACTIVE))

    # Add (input already checked by validate())
    store.add(validate(7, "Dana", "Active"))

    # Shutdown: always writes employees.json
    store.save()

The store is a plain value owned by whoever starts the application (GUI or
CLI).  It never persists incrementally; load() runs once at startup and
save() once at shutdown.
"""

import logging
from typing import Iterator

from employee_demo.config import StoreConfig
from employee_demo.exceptions import FormatError, LoadError, SaveError
from employee_demo.store.codec import DataFormat, decode, encode
from employee_demo.store.models import STATUSES, Criteria, Employee
from employee_demo.store.query import find
from employee_demo.store.sources import SourceKind, select_source

__all__ = ["EmployeeStore"]

logger = logging.getLogger(__name__)


class EmployeeStore:
    """
    Authoritative, ordered list of Employee records.

    Insertion order is the only ordering.  Duplicate ids are allowed.
    """

    def __init__(self, config: StoreConfig) -> None:
        self._config = config
        self._employees: list[Employee] = []

    @property
    def config(self) -> StoreConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    # ── Persistence ───────────────────────────────────────────────────────

    def load(self) -> None:
        """
        Replace the in-memory list with the contents of the data files.

        The JSON document takes precedence; the CSV file is the first-run
        fallback.  A broken JSON document is reported, never bypassed in
        favour of the CSV file.  On failure the list is left empty.

        Raises:
            LoadError: no source file exists, it cannot be read, or it fails
                       to decode.
        """
        self._employees = []

        source = select_source(self._config.json_path, self._config.csv_path)
        if source.kind == SourceKind.NONE_FOUND:
            raise LoadError(
                f"No employee data found: neither {self._config.json_path} "
                f"nor {self._config.csv_path} exists"
            )

        logger.info("Loading employees from %s (%s)", source.path, source.format.value)
        try:
            # utf-8-sig drops a leading BOM (Excel, Notepad)
            text = source.path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise LoadError(f"Cannot read {source.path}: {exc}") from exc

        try:
            employees = decode(text, source.format)
        except FormatError as exc:
            raise LoadError(f"Unable to decode {source.path}: {exc}") from exc

        self._employees = employees
        logger.info("Loaded %d employees", len(employees))

    def save(self) -> None:
        """
        Write the full list to the JSON document, overwriting it.

        Raises:
            SaveError: on any I/O failure.
        """
        path = self._config.json_path
        encoded = encode(self._employees, DataFormat.JSON)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(encoded, encoding="utf-8")
        except OSError as exc:
            raise SaveError(f"Cannot write {path}: {exc}") from exc
        logger.info("Saved %d employees to %s", len(self._employees), path)

    # ── Mutation ──────────────────────────────────────────────────────────

    def add(self, employee: Employee) -> None:
        """Append *employee*.  No uniqueness or range check is made here."""
        self._employees.append(employee)
        logger.debug("Added %s", employee)

    def add_record(self, employee_id: int, name: str, is_active: bool) -> Employee:
        """Build an Employee from pre-validated fields, append and return it."""
        employee = Employee(id=employee_id, name=name, is_active=is_active)
        self.add(employee)
        return employee

    # ── Queries ───────────────────────────────────────────────────────────

    def list_all(self) -> list[Employee]:
        """Return a copy of every employee, in insertion order."""
        return list(self._employees)

    def list_filtered(self, criteria: Criteria) -> list[Employee]:
        """Return employees matching *criteria* (see query.find)."""
        return find(self._employees, criteria)

    @staticmethod
    def statuses() -> tuple[str, ...]:
        """Static status picker values: Both, Active, Inactive."""
        return STATUSES
