"""
EmployeeListPage — left half of the employee window.

Shows the employee table and the find form.  "Find" filters by every
filled-in field (AND); "Show All" clears the filter.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ ┌──────────────────────────────────────┐│
  │ │ ID │ Name            │ Active        ││
  │ │  1 │ Anna Smith      │ Yes           ││
  │ │  … │ …               │ …             ││
  │ └──────────────────────────────────────┘│
  │ Find ─────────────────────────────────── │
  │ ID: [____]  Name: [_________]           │
  │ Status: [Both ▾]     [Find] [Show All]  │
  └─────────────────────────────────────────┘
"""

import logging

from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from employee_demo.gui.viewmodels import EmployeeListViewModel

__all__ = ["EmployeeListPage"]

logger = logging.getLogger(__name__)

# Column indices
_COL_ID     = 0
_COL_NAME   = 1
_COL_ACTIVE = 2
_HEADERS = ["ID", "Name", "Active"]


class EmployeeListPage(QWidget):
    """Employee table plus the find form.  MainWindow wires the buttons."""

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = EmployeeListViewModel()
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        # Employee table
        self._table = QTableWidget(0, len(_HEADERS))
        self._table.setHorizontalHeaderLabels(_HEADERS)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self._table)

        # Find form
        group = QGroupBox("Find Employees")
        form = QFormLayout(group)

        self._id_edit = QLineEdit()
        self._id_edit.setPlaceholderText("any")
        self._id_edit.textChanged.connect(lambda t: setattr(self._vm, "find_id_text", t))
        form.addRow("ID:", self._id_edit)

        self._name_edit = QLineEdit()
        self._name_edit.setPlaceholderText("name contains…")
        self._name_edit.textChanged.connect(lambda t: setattr(self._vm, "find_name_text", t))
        form.addRow("Name:", self._name_edit)

        self._status_combo = QComboBox()
        self._status_combo.addItems(self._vm.statuses)
        self._status_combo.currentTextChanged.connect(
            lambda t: setattr(self._vm, "find_status", t)
        )
        form.addRow("Status:", self._status_combo)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._find_btn     = QPushButton("Find")
        self._show_all_btn = QPushButton("Show All")
        btn_row.addWidget(self._find_btn)
        btn_row.addWidget(self._show_all_btn)
        form.addRow(btn_row)

        layout.addWidget(group)

    # ── Internal helpers ───────────────────────────────────────────────────

    def _refresh_table(self) -> None:
        rows = self._vm.displayed
        self._table.setRowCount(len(rows))
        for row, emp in enumerate(rows):
            self._table.setItem(row, _COL_ID,     QTableWidgetItem(str(emp.id)))
            self._table.setItem(row, _COL_NAME,   QTableWidgetItem(emp.name))
            self._table.setItem(row, _COL_ACTIVE,
                                QTableWidgetItem("Yes" if emp.is_active else "No"))

    # ── Public API ─────────────────────────────────────────────────────────

    def load_employees(self, employees) -> None:
        """Populate the table with *employees* (list[Employee]), unfiltered."""
        self._vm.load(employees)
        self._refresh_table()

    def apply_find(self) -> None:
        """
        Filter the table by the find form.

        Raises:
            ValidationError: if the ID field is not a whole number.
        """
        self._vm.apply_find()
        self._refresh_table()

    def show_all(self) -> None:
        self._vm.show_all()
        self._refresh_table()

    def row_count(self) -> int:
        return self._table.rowCount()
