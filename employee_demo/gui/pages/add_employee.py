"""
AddEmployeePage — right half of the employee window.

Collects ID, name and status for a new employee.  The status picker starts
with nothing selected so that the "must be selected" rule can fire.

Layout
──────
  ┌──────────────────────────────┐
  │ Add Employee ─────────────── │
  │ ID:     [______]             │
  │ Name:   [________________]   │
  │ Status: [      ▾]            │
  │                      [Add]   │
  └──────────────────────────────┘
"""

import logging

from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from employee_demo.gui.viewmodels import AddEmployeeViewModel

__all__ = ["AddEmployeePage"]

logger = logging.getLogger(__name__)


class AddEmployeePage(QWidget):
    """Add-employee form.  MainWindow connects the Add button."""

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = AddEmployeeViewModel()
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        group = QGroupBox("Add Employee")
        form = QFormLayout(group)

        self._id_edit = QLineEdit()
        self._id_edit.textChanged.connect(lambda t: setattr(self._vm, "id_text", t))
        form.addRow("ID:", self._id_edit)

        self._name_edit = QLineEdit()
        self._name_edit.textChanged.connect(lambda t: setattr(self._vm, "name_text", t))
        form.addRow("Name:", self._name_edit)

        self._status_combo = QComboBox()
        self._status_combo.addItems(self._vm.statuses)
        self._status_combo.setCurrentIndex(-1)
        self._status_combo.currentTextChanged.connect(self._on_status_changed)
        form.addRow("Status:", self._status_combo)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._add_btn = QPushButton("Add")
        btn_row.addWidget(self._add_btn)
        form.addRow(btn_row)

        layout.addWidget(group)
        layout.addStretch()

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_status_changed(self, text: str) -> None:
        self._vm.status = text or None

    # ── Public API ─────────────────────────────────────────────────────────

    def build_employee(self):
        """
        Return the Employee described by the form.

        Raises:
            ValidationError: naming the first violated rule.
        """
        return self._vm.build()

    def clear_form(self) -> None:
        """Empty every field and deselect the status, ready for the next entry."""
        self._vm.clear()
        self._id_edit.clear()
        self._name_edit.clear()
        self._status_combo.setCurrentIndex(-1)
