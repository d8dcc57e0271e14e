"""
Codec — converts employee lists to and from their on-disk text forms.

Two asymmetric encodings:
  • CSV  — legacy import format, read-only.  One record per line,
           ``id,name,is_active``, no header, no quoting.  A comma inside a
           name shifts the columns; this format cannot represent such names.
  • JSON — persistence format, read/write.  One array of
           ``{"Id": int, "Name": str, "IsActive": bool}`` objects.

Any malformed input aborts the whole decode with FormatError; bad lines are
never skipped.
"""

import json
import logging
import re
from enum import Enum
from typing import Iterable

from employee_demo.exceptions import FormatError
from employee_demo.store.models import Employee

__all__ = ["DataFormat", "decode", "decode_csv", "decode_json", "encode", "encode_json"]

logger = logging.getLogger(__name__)


class DataFormat(str, Enum):
    CSV  = "csv"
    JSON = "json"


# JSON field names; encode and decode must agree
_KEY_ID        = "Id"
_KEY_NAME      = "Name"
_KEY_IS_ACTIVE = "IsActive"
_JSON_KEYS = frozenset({_KEY_ID, _KEY_NAME, _KEY_IS_ACTIVE})

_CSV_COLUMNS = 3
_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


# ── CSV (read-only) ───────────────────────────────────────────────────────────

def _parse_int(token: str) -> int:
    if not _INT_RE.match(token):
        raise ValueError(f"{token!r} is not an integer")
    return int(token)


def _parse_bool(token: str) -> bool:
    value = token.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"{token!r} is not a boolean (expected true/false)")


def decode_csv(text: str) -> list[Employee]:
    """
    Decode header-less ``id,name,is_active`` lines.

    Columns past the third are ignored.  Blank lines count as data and fail.

    Raises:
        FormatError: on the first line that cannot be decoded.
    """
    employees: list[Employee] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        columns = line.split(",")
        if len(columns) < _CSV_COLUMNS:
            raise FormatError(
                f"CSV line {lineno}: expected {_CSV_COLUMNS} columns, "
                f"got {len(columns)}: {line!r}"
            )
        try:
            employee_id = _parse_int(columns[0])
            is_active = _parse_bool(columns[2])
        except ValueError as exc:
            raise FormatError(f"CSV line {lineno}: {exc}") from exc
        employees.append(Employee(id=employee_id, name=columns[1], is_active=is_active))

    logger.debug("Decoded %d employees from CSV", len(employees))
    return employees


# ── JSON (read/write) ─────────────────────────────────────────────────────────

def _employee_from_dict(index: int, item: object) -> Employee:
    if not isinstance(item, dict):
        raise FormatError(f"JSON item {index}: expected an object, got {type(item).__name__}")

    keys = set(item)
    if keys != _JSON_KEYS:
        missing = sorted(_JSON_KEYS - keys)
        extra = sorted(keys - _JSON_KEYS)
        raise FormatError(f"JSON item {index}: missing keys {missing}, unexpected keys {extra}")

    employee_id = item[_KEY_ID]
    name = item[_KEY_NAME]
    is_active = item[_KEY_IS_ACTIVE]
    # bool is a subclass of int in Python
    if not isinstance(employee_id, int) or isinstance(employee_id, bool):
        raise FormatError(f"JSON item {index}: {_KEY_ID} must be an integer")
    if not isinstance(name, str):
        raise FormatError(f"JSON item {index}: {_KEY_NAME} must be a string")
    if not isinstance(is_active, bool):
        raise FormatError(f"JSON item {index}: {_KEY_IS_ACTIVE} must be a boolean")

    return Employee(id=employee_id, name=name, is_active=is_active)


def decode_json(text: str) -> list[Employee]:
    """
    Decode a JSON array of employee objects written by encode_json().

    Raises:
        FormatError: invalid JSON, non-array root, or an element whose shape
                     does not match exactly.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise FormatError(f"JSON root must be an array, got {type(data).__name__}")

    employees = [_employee_from_dict(i, item) for i, item in enumerate(data)]
    logger.debug("Decoded %d employees from JSON", len(employees))
    return employees


def encode_json(employees: Iterable[Employee]) -> str:
    """Serialise *employees* (in order) to a JSON array."""
    payload = [
        {_KEY_ID: e.id, _KEY_NAME: e.name, _KEY_IS_ACTIVE: e.is_active}
        for e in employees
    ]
    return json.dumps(payload)


# ── Dispatch ──────────────────────────────────────────────────────────────────

def decode(text: str, fmt: DataFormat) -> list[Employee]:
    """Decode *text* in the given format."""
    if fmt == DataFormat.JSON:
        return decode_json(text)
    if fmt == DataFormat.CSV:
        return decode_csv(text)
    raise FormatError(f"Unsupported format: {fmt!r}")


def encode(employees: Iterable[Employee], fmt: DataFormat = DataFormat.JSON) -> str:
    """Encode *employees*; only JSON is ever written."""
    if fmt != DataFormat.JSON:
        raise FormatError(f"Encoding is only supported for JSON, not {fmt!r}")
    return encode_json(employees)
