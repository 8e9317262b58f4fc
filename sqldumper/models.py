"""
Data models for SQL Dumper.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class TableRecord:
    """One table's creation statement and serialized rows."""
    name: str
    create_statement: str
    serialized_values: str = ""


@dataclass
class Document:
    """Everything needed to render one dump."""
    dump_format_version: str
    server_version: str = ""
    tables: list[TableRecord] = field(default_factory=list)
    completion_timestamp: Optional[str] = None
    include_data: bool = False

    def add_table(self, record: TableRecord) -> None:
        self.tables.append(record)

    def complete(self, timestamp: str) -> None:
        """Mark the document as fully populated."""
        self.completion_timestamp = timestamp

    @property
    def is_complete(self) -> bool:
        return self.completion_timestamp is not None


@dataclass
class DumpResult:
    """Outcome of a single dump.

    The path is always set, even on failure, and may point to a missing or
    incomplete file. Check ``success`` before trusting it.
    """
    path: Path
    error: Optional[Exception] = None
    tables_dumped: int = 0

    @property
    def success(self) -> bool:
        return self.error is None
