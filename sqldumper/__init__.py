"""
SQL Dumper
==========
Dumps a MySQL database into a single replayable .sql file:
- Table structure in server listing order
- Optional row data, one INSERT per table
- Timestamped file names, never overwriting an existing dump
"""

from .assembler import render, select_template
from .config import ConfigLoader
from .connection import DatabaseConnection
from .dumper import Dumper
from .exceptions import (
    AssemblyError,
    DumpError,
    DumperClosedError,
    DumpIntegrityError,
    DuplicateDumpError,
    InvalidDirectoryError,
    NoColumnsError,
    TableNameMismatchError,
)
from .main import main
from .models import Document, DumpResult, TableRecord
from .schema import get_server_version, get_tables
from .serializer import RowSerializer, quote_identifier, quote_literal
from .table_builder import CREATE_STATEMENT_PROBES, CreateStatementProbe, TableBuilder
from .utils import print_dry_run_info, setup_logging

__version__ = "1.0.0"

__all__ = [
    # Main entry point
    "main",
    # Core classes
    "ConfigLoader",
    "DatabaseConnection",
    "Dumper",
    "RowSerializer",
    "TableBuilder",
    "CreateStatementProbe",
    "CREATE_STATEMENT_PROBES",
    # Models
    "Document",
    "DumpResult",
    "TableRecord",
    # Errors
    "AssemblyError",
    "DumpError",
    "DumperClosedError",
    "DumpIntegrityError",
    "DuplicateDumpError",
    "InvalidDirectoryError",
    "NoColumnsError",
    "TableNameMismatchError",
    # Functions
    "get_server_version",
    "get_tables",
    "quote_identifier",
    "quote_literal",
    "render",
    "select_template",
    # Utilities
    "print_dry_run_info",
    "setup_logging",
]
