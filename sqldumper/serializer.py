"""
Row serialization for SQL Dumper.

Turns the rows of a table into the comma separated list of value tuples
that follows ``INSERT INTO ... VALUES``.
"""

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional

from .exceptions import NoColumnsError

NULL_LITERAL = 'null'

# MySQL string literal escapes
_LITERAL_ESCAPES = str.maketrans({
    '\\': '\\\\',
    "'": "\\'",
    '\0': '\\0',
    '\n': '\\n',
    '\r': '\\r',
    '\x1a': '\\Z',
})


def quote_literal(text: str) -> str:
    """Wrap text in single quotes, escaping it for a MySQL string literal."""
    return f"'{text.translate(_LITERAL_ESCAPES)}'"


def quote_identifier(name: str) -> str:
    """Backtick-quote a table or column name."""
    escaped = name.replace('`', '``')
    return f"`{escaped}`"


def _format_timedelta(value: timedelta) -> str:
    # MySQL TIME columns come back as timedelta and may exceed 24h or be negative
    sign = '-' if value < timedelta(0) else ''
    value = abs(value)
    hours, remainder = divmod(value.days * 86400 + value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    text = f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    if value.microseconds:
        text += f".{value.microseconds:06d}"
    return text


class RowSerializer:
    """Serializes the rows of a table into SQL value tuples."""

    def __init__(self, executor):
        self.executor = executor

        # Text conversion per driver type; everything else goes through str()
        self._type_formatters: dict[type, Callable[[Any], str]] = {
            bool: lambda v: '1' if v else '0',
            int: str,
            float: repr,
            Decimal: str,
            str: lambda v: v,
            datetime: lambda v: v.isoformat(sep=' '),
            date: lambda v: v.isoformat(),
            time: lambda v: v.isoformat(),
            timedelta: _format_timedelta,
            set: lambda v: ','.join(sorted(v)),
        }

    def serialize(self, table: str) -> str:
        """Return every row of ``table`` as ``(..),(..)``, or '' when empty."""
        cursor = self.executor.get_cursor()
        try:
            cursor.execute(f"SELECT * FROM {quote_identifier(table)}")
            columns = cursor.description or []
            if not columns:
                raise NoColumnsError(table)

            tuples = self.format_rows(cursor, len(columns))
        finally:
            cursor.close()

        logging.debug(f"Serialized {len(tuples)} row(s) from '{table}'")
        return ','.join(tuples)

    def format_rows(self, rows: Iterable[tuple], column_count: int) -> list[str]:
        """Format each row as a parenthesized tuple of literals."""
        tuples = []
        for row in rows:
            if len(row) != column_count:
                raise ValueError(
                    f"Row has {len(row)} value(s), expected {column_count}"
                )
            tuples.append(f"({','.join(self.format_value(val) for val in row)})")
        return tuples

    def format_value(self, value: Any) -> str:
        """Format a single value as a SQL literal."""
        if value is None:
            return NULL_LITERAL

        if isinstance(value, (bytes, bytearray)):
            text = self._decode_bytes(value)
            if text is None:
                return f"X'{bytes(value).hex()}'"
            return quote_literal(text)

        formatter = self._type_formatters.get(type(value))
        text = formatter(value) if formatter else str(value)
        return quote_literal(text)

    @staticmethod
    def _decode_bytes(value: bytes) -> Optional[str]:
        try:
            return bytes(value).decode('utf-8')
        except UnicodeDecodeError:
            return None
