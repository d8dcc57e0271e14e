"""
run_gui — desktop entry point.

Owns the EmployeeStore for the lifetime of the Qt event loop: one load when
the window starts, one save when it closes.
"""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from employee_demo.config import StoreConfig
from employee_demo.gui.main_window import MainWindow
from employee_demo.store.employee_store import EmployeeStore

__all__ = ["run_gui"]

logger = logging.getLogger(__name__)


def run_gui(config: Optional[StoreConfig] = None, argv: Optional[list[str]] = None) -> int:
    """Show the employee window and block until it is closed.  Returns the Qt exit code."""
    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)

    store = EmployeeStore(config or StoreConfig())
    window = MainWindow(store)
    window.start()
    window.show()

    logger.info("Employee window shown (data dir: %s)", store.config.data_dir)
    return app.exec()
