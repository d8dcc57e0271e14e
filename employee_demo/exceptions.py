"""
Project-wide custom exception hierarchy.
All modules raise subclasses of EmployeeDemoError — never bare Exception.
"""

__all__ = [
    "EmployeeDemoError",
    "FormatError",
    "StoreError",
    "LoadError",
    "SaveError",
    "ValidationError",
]


class EmployeeDemoError(Exception):
    """Root exception for all employee-demo errors."""


# ── Codec ─────────────────────────────────────────────────────────────────────

class FormatError(EmployeeDemoError):
    """Raised when a CSV line or a JSON document cannot be decoded."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(EmployeeDemoError):
    """Base class for employee store I/O errors."""


class LoadError(StoreError):
    """Raised when no source file is readable or its contents fail to decode."""


class SaveError(StoreError):
    """Raised when writing the JSON document fails (permissions, disk full)."""


# ── Validation ────────────────────────────────────────────────────────────────

class ValidationError(EmployeeDemoError):
    """Raised when user-supplied id / name / status input breaks a rule."""
