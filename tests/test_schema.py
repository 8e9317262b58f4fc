"""
Unit tests for schema.py
"""

from unittest import mock

import pytest
from mysql.connector import Error as MySQLError

from sqldumper.schema import get_server_version, get_tables


class TestGetTables:
    """Tests for get_tables function."""

    def test_returns_server_order(self):
        """Test tables come back in the order the server lists them."""
        executor = mock.MagicMock()
        executor.execute_query.return_value = [("users",), ("orders",), ("accounts",)]

        assert get_tables(executor) == ["users", "orders", "accounts"]
        executor.execute_query.assert_called_once_with("SHOW TABLES")

    def test_empty_database(self):
        executor = mock.MagicMock()
        executor.execute_query.return_value = []

        assert get_tables(executor) == []

    def test_error_propagates(self):
        """Test executor errors are not wrapped."""
        executor = mock.MagicMock()
        error = MySQLError("No database selected")
        executor.execute_query.side_effect = error

        with pytest.raises(MySQLError) as exc_info:
            get_tables(executor)
        assert exc_info.value is error
        assert executor.execute_query.call_count == 1


class TestGetServerVersion:
    """Tests for get_server_version function."""

    def test_version(self):
        executor = mock.MagicMock()
        executor.execute_query.return_value = [("8.0.36",)]

        assert get_server_version(executor) == "8.0.36"
        executor.execute_query.assert_called_once_with("SELECT version()")

    def test_null_version(self):
        executor = mock.MagicMock()
        executor.execute_query.return_value = [(None,)]

        assert get_server_version(executor) == ""

    def test_no_rows(self):
        executor = mock.MagicMock()
        executor.execute_query.return_value = []

        assert get_server_version(executor) == ""
