"""
Table descriptor building for SQL Dumper.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .exceptions import DumpIntegrityError, TableNameMismatchError
from .models import TableRecord
from .serializer import RowSerializer, quote_identifier


@dataclass(frozen=True)
class CreateStatementProbe:
    """Reads one known shape of a SHOW CREATE TABLE result row."""
    label: str
    column_count: int
    name_index: int = 0
    statement_index: int = 1

    def match(self, row: tuple) -> Optional[tuple[str, str]]:
        """Return (table name, create statement) if the row has this shape."""
        if len(row) != self.column_count:
            return None
        name = row[self.name_index]
        statement = row[self.statement_index]
        if name is None or statement is None:
            return None
        return str(name), str(statement)


# Tried in order, first match wins
CREATE_STATEMENT_PROBES = (
    CreateStatementProbe('with-charset', column_count=4),
    CreateStatementProbe('basic', column_count=2),
)


class TableBuilder:
    """Builds a TableRecord for a single table."""

    def __init__(
        self,
        executor,
        include_data: bool = False,
        serializer: Optional[RowSerializer] = None,
        probes: tuple[CreateStatementProbe, ...] = CREATE_STATEMENT_PROBES
    ):
        self.executor = executor
        self.include_data = include_data
        self.serializer = serializer or RowSerializer(executor)
        self.probes = probes

    def build(self, table: str) -> TableRecord:
        """
        Fetch the creation statement and, if enabled, the rows of a table.

        Raises:
            TableNameMismatchError: The server described a different table.
            DumpIntegrityError: The SHOW CREATE TABLE result had no usable row.
        """
        create_statement = self.get_create_statement(table)

        values = ""
        if self.include_data:
            values = self.serializer.serialize(table)

        return TableRecord(
            name=table,
            create_statement=create_statement,
            serialized_values=values
        )

    def get_create_statement(self, table: str) -> str:
        """Get the CREATE statement, checking the echoed table name."""
        results = self.executor.execute_query(f"SHOW CREATE TABLE {quote_identifier(table)}")
        if not results:
            raise DumpIntegrityError(f"SHOW CREATE TABLE returned no rows for '{table}'")

        row = results[0]
        for probe in self.probes:
            matched = probe.match(row)
            if matched is None:
                continue

            returned_name, statement = matched
            logging.debug(f"Table '{table}' matched {probe.label} create statement form")
            if returned_name != table:
                raise TableNameMismatchError(table, returned_name)
            return statement

        raise DumpIntegrityError(
            f"Unexpected SHOW CREATE TABLE result for '{table}': {len(row)} column(s)"
        )
