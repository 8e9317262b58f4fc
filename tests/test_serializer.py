"""
Unit tests for serializer.py
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from unittest import mock

import pytest

from sqldumper.exceptions import NoColumnsError
from sqldumper.serializer import RowSerializer, quote_identifier, quote_literal


def make_executor(columns, rows):
    """Create an executor whose cursor returns the given columns and rows."""
    cursor = mock.MagicMock()
    cursor.description = [(name, 253, None, None, None, None, 1, 0) for name in columns]
    cursor.__iter__ = mock.MagicMock(return_value=iter(rows))

    executor = mock.MagicMock()
    executor.get_cursor.return_value = cursor
    return executor, cursor


class TestQuoteLiteral:
    """Tests for quote_literal function."""

    def test_plain_text(self):
        assert quote_literal("hello") == "'hello'"

    def test_empty_string(self):
        assert quote_literal("") == "''"

    def test_single_quote(self):
        assert quote_literal("O'Brien") == "'O\\'Brien'"

    def test_backslash(self):
        assert quote_literal("C:\\temp") == "'C:\\\\temp'"

    def test_control_characters(self):
        assert quote_literal("a\nb\rc") == "'a\\nb\\rc'"
        assert quote_literal("nul\0") == "'nul\\0'"
        assert quote_literal("eof\x1a") == "'eof\\Z'"

    def test_injection_stays_inside_literal(self):
        """Test a quote cannot terminate the literal early."""
        result = quote_literal("x'); DROP TABLE users; --")
        assert result == "'x\\'); DROP TABLE users; --'"


class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    def test_plain_name(self):
        assert quote_identifier("users") == "`users`"

    def test_special_characters(self):
        assert quote_identifier("order items") == "`order items`"

    def test_embedded_backtick(self):
        assert quote_identifier("we`ird") == "`we``ird`"


class TestFormatValue:
    """Tests for RowSerializer.format_value."""

    @pytest.fixture
    def serializer(self):
        return RowSerializer(mock.MagicMock())

    def test_null(self, serializer):
        assert serializer.format_value(None) == "null"

    def test_string(self, serializer):
        assert serializer.format_value("alice") == "'alice'"

    def test_int_is_quoted(self, serializer):
        assert serializer.format_value(42) == "'42'"

    def test_float(self, serializer):
        assert serializer.format_value(3.14159) == "'3.14159'"

    def test_decimal(self, serializer):
        assert serializer.format_value(Decimal("10.50")) == "'10.50'"

    def test_bool(self, serializer):
        assert serializer.format_value(True) == "'1'"
        assert serializer.format_value(False) == "'0'"

    def test_datetime(self, serializer):
        dt = datetime(2024, 1, 15, 10, 30, 45)
        assert serializer.format_value(dt) == "'2024-01-15 10:30:45'"

    def test_datetime_microseconds(self, serializer):
        dt = datetime(2024, 1, 15, 10, 30, 45, 120000)
        assert serializer.format_value(dt) == "'2024-01-15 10:30:45.120000'"

    def test_date(self, serializer):
        assert serializer.format_value(date(2024, 1, 15)) == "'2024-01-15'"

    def test_time(self, serializer):
        assert serializer.format_value(time(8, 5, 0)) == "'08:05:00'"

    def test_timedelta(self, serializer):
        assert serializer.format_value(timedelta(hours=8, minutes=5)) == "'08:05:00'"

    def test_timedelta_over_a_day(self, serializer):
        assert serializer.format_value(timedelta(days=1, hours=2)) == "'26:00:00'"

    def test_negative_timedelta(self, serializer):
        assert serializer.format_value(timedelta(hours=-1, minutes=-30)) == "'-01:30:00'"

    def test_set(self, serializer):
        assert serializer.format_value({"b", "a"}) == "'a,b'"

    def test_utf8_bytes(self, serializer):
        assert serializer.format_value(b"caf\xc3\xa9") == "'café'"

    def test_bytearray(self, serializer):
        assert serializer.format_value(bytearray(b"it's")) == "'it\\'s'"

    def test_binary_bytes(self, serializer):
        assert serializer.format_value(b"\x00\xff\xab") == "X'00ffab'"

    def test_string_escaped(self, serializer):
        assert serializer.format_value("it's") == "'it\\'s'"


class TestSerialize:
    """Tests for RowSerializer.serialize."""

    def test_rows(self):
        executor, cursor = make_executor(
            ["id", "name"], [(1, "alice"), (2, None)]
        )
        result = RowSerializer(executor).serialize("users")

        assert result == "('1','alice'),('2',null)"
        cursor.execute.assert_called_once_with("SELECT * FROM `users`")
        cursor.close.assert_called_once()

    def test_no_rows(self):
        """Test an empty table serializes to an empty string."""
        executor, cursor = make_executor(["id"], [])
        assert RowSerializer(executor).serialize("users") == ""

    def test_no_columns(self):
        """Test zero columns is an error, distinct from zero rows."""
        executor, cursor = make_executor([], [])

        with pytest.raises(NoColumnsError) as exc_info:
            RowSerializer(executor).serialize("users")
        assert exc_info.value.table == "users"
        cursor.close.assert_called_once()

    def test_no_description(self):
        executor, cursor = make_executor(["id"], [])
        cursor.description = None

        with pytest.raises(NoColumnsError):
            RowSerializer(executor).serialize("users")

    def test_shape(self):
        """Test N rows by C columns give N groups of C literals."""
        rows = [(i, f"name{i}", None) for i in range(5)]
        executor, cursor = make_executor(["id", "name", "note"], rows)

        result = RowSerializer(executor).serialize("users")
        groups = result[1:-1].split("),(")

        assert len(groups) == 5
        assert all(len(group.split(",")) == 3 for group in groups)
        assert not result.startswith(",")
        assert not result.endswith(",")

    def test_keeps_server_order(self):
        executor, cursor = make_executor(["id"], [(3,), (1,), (2,)])
        assert RowSerializer(executor).serialize("users") == "('3'),('1'),('2')"

    def test_stable_output(self):
        """Test serializing an unchanged table twice gives the same text."""
        rows = [(1, "alice", datetime(2024, 1, 15)), (2, "it's", None)]
        first, _ = make_executor(["id", "name", "created_at"], rows)
        second, _ = make_executor(["id", "name", "created_at"], rows)

        assert RowSerializer(first).serialize("users") == RowSerializer(second).serialize("users")

    def test_cursor_error_propagates(self):
        from mysql.connector import Error as MySQLError
        executor, cursor = make_executor(["id"], [])
        cursor.execute.side_effect = MySQLError("Table 'shop.users' doesn't exist")

        with pytest.raises(MySQLError):
            RowSerializer(executor).serialize("users")
        cursor.close.assert_called_once()


class TestFormatRows:
    """Tests for RowSerializer.format_rows."""

    def test_row_width_mismatch(self):
        serializer = RowSerializer(mock.MagicMock())
        with pytest.raises(ValueError):
            serializer.format_rows([(1, 2)], column_count=3)
