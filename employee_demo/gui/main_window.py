"""
MainWindow — top-level employee window.

Hosts two pages side by side:
  left   EmployeeListPage  — employee table + find form
  right  AddEmployeePage   — add-employee form

The window owns no data of its own: it is handed the EmployeeStore by its
creator, calls store.load() from start() and store.save() from shutdown().
shutdown() runs once, when the window closes.
"""

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QWidget,
)

from employee_demo.exceptions import LoadError, SaveError, ValidationError
from employee_demo.gui.pages.add_employee import AddEmployeePage
from employee_demo.gui.pages.employee_list import EmployeeListPage
from employee_demo.store.employee_store import EmployeeStore

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Root window: lays out the pages and routes their buttons to the store."""

    def __init__(self, store: EmployeeStore, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Employees")
        self.resize(760, 480)

        self._store = store
        self._read_only = False
        self._shut_down = False

        self._build_ui()
        self._connect_actions()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)

        self._page_list = EmployeeListPage()
        self._page_add  = AddEmployeePage()
        layout.addWidget(self._page_list, stretch=3)
        layout.addWidget(self._page_add,  stretch=2)

        self.setCentralWidget(central)

    def _connect_actions(self) -> None:
        self._page_list._find_btn.clicked.connect(self._on_find_clicked)
        self._page_list._show_all_btn.clicked.connect(self._page_list.show_all)
        self._page_add._add_btn.clicked.connect(self._on_add_clicked)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_find_clicked(self) -> None:
        try:
            self._page_list.apply_find()
        except ValidationError as exc:
            self._notify("Ooops!", str(exc))

    def _on_add_clicked(self) -> None:
        try:
            employee = self._page_add.build_employee()
        except ValidationError as exc:
            self._notify("Ooops!", str(exc))
            return

        if self._read_only:
            self._notify("Error", "Employee data could not be loaded; new employees cannot be saved.")
            return

        self._store.add(employee)
        self._notify("Success!", "Employee was added.")
        self._page_add.clear_form()
        self._page_list.load_employees(self._store.list_all())

    def _notify(self, title: str, message: str) -> None:
        """Blocking information dialog."""
        QMessageBox.information(self, title, message)

    # ── Lifecycle ──────────────────────────────────────────────────────────

    def start(self) -> None:
        """Load the store and show every employee; report a failed load."""
        try:
            self._store.load()
        except LoadError as exc:
            logger.error("Employee load failed: %s", exc)
            # an unreadable employees.json must not be overwritten on shutdown
            self._read_only = self._store.config.json_path.exists()
            self._notify("Error", str(exc))
        self._page_list.load_employees(self._store.list_all())

    def shutdown(self) -> None:
        """
        Save the store.  Runs at most once.

        Skipped when start() could not read an existing JSON document, so that
        it is not replaced by an empty list.  A missing document or a broken
        CSV import is not protected: the session starts empty and is saved.
        """
        if self._shut_down:
            return
        self._shut_down = True

        if self._read_only:
            logger.warning("Startup load of %s failed; not saving employees",
                           self._store.config.json_path)
            return
        try:
            self._store.save()
        except SaveError as exc:
            logger.exception("Employee save failed")
            self._notify("Error", str(exc))

    def closeEvent(self, event) -> None:  # noqa: N802 (Qt override)
        self.shutdown()
        super().closeEvent(event)
