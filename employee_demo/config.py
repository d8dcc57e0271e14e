"""
Runtime configuration — where the employee files live.

The data directory defaults to ``$EMPLOYEE_DEMO_DATA_DIR`` and falls back to
``~/.employee-demo``.  The CLI ``--data-dir`` flag overrides both.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

__all__ = ["StoreConfig", "DATA_DIR_ENV", "DEFAULT_DATA_DIR"]

DATA_DIR_ENV = "EMPLOYEE_DEMO_DATA_DIR"
DEFAULT_DATA_DIR = "~/.employee-demo"


def _default_data_dir() -> Path:
    return Path(os.environ.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR).expanduser()


@dataclass
class StoreConfig:
    """File locations used by EmployeeStore."""
    data_dir:  Path = field(default_factory=_default_data_dir)
    csv_name:  str  = "employees.csv"
    json_name: str  = "employees.json"

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir).expanduser()

    @classmethod
    def from_args(cls, data_dir: Optional[str] = None) -> "StoreConfig":
        """Build a config, preferring an explicit *data_dir* over the environment."""
        if data_dir:
            return cls(data_dir=Path(data_dir))
        return cls()

    @property
    def csv_path(self) -> Path:
        return self.data_dir / self.csv_name

    @property
    def json_path(self) -> Path:
        return self.data_dir / self.json_name
