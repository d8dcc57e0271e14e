"""
gui — PyQt6 front-end for employee-demo.

Public API
──────────
MainWindow  — top-level employee window
run_gui     — create the store, show the window, run the event loop
viewmodels  — pure-Python form and list state
pages       — the list/find and add panels
"""

from employee_demo.gui.main_window import MainWindow
from employee_demo.gui.app import run_gui
from employee_demo.gui import viewmodels

__all__ = ["MainWindow", "run_gui", "viewmodels"]
