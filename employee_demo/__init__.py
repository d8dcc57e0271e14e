"""employee-demo — employee list manager with CSV import and JSON persistence."""

__version__ = "0.1.0"
