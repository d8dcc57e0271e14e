"""Source selection — decides which file load() reads."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from employee_demo.store.codec import DataFormat

__all__ = ["SourceKind", "Source", "select_source"]


class SourceKind(str, Enum):
    STRUCTURED = "structured"   # JSON document
    DELIMITED  = "delimited"    # legacy CSV
    NONE_FOUND = "none_found"


@dataclass(frozen=True)
class Source:
    kind: SourceKind
    path: Optional[Path] = None

    @property
    def format(self) -> Optional[DataFormat]:
        if self.kind == SourceKind.STRUCTURED:
            return DataFormat.JSON
        if self.kind == SourceKind.DELIMITED:
            return DataFormat.CSV
        return None


def select_source(json_path: Path, csv_path: Path) -> Source:
    """
    Pick the load source by file existence.

    The JSON document always wins when present; the CSV file is only read
    before the first save has produced one.
    """
    if json_path.is_file():
        return Source(SourceKind.STRUCTURED, json_path)
    if csv_path.is_file():
        return Source(SourceKind.DELIMITED, csv_path)
    return Source(SourceKind.NONE_FOUND)
