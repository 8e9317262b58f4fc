"""
Dump orchestration for SQL Dumper.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Union

from .assembler import DUMP_FORMAT_VERSION, render
from .exceptions import DumperClosedError, DuplicateDumpError, InvalidDirectoryError
from .models import Document, DumpResult
from .schema import get_server_version, get_tables
from .table_builder import TableBuilder


class Dumper:
    """Writes one timestamped .sql dump per call to dump()."""

    DEFAULT_NAME_FORMAT = '%Y%m%d_%H%M%S'
    EXTENSION = 'sql'
    COMPLETION_FORMAT = '%Y-%m-%d %H:%M:%S'

    def __init__(
        self,
        executor,
        directory: Union[str, Path],
        name_format: str = DEFAULT_NAME_FORMAT,
        include_data: bool = True
    ):
        """
        Args:
            executor: Open query executor (see DatabaseConnection). Owned by
                the caller until close() is called.
            directory: Existing directory the dumps are written to.
            name_format: strftime pattern used to name each dump file.
            include_data: If True, dump row data as well as table structure.

        Raises:
            InvalidDirectoryError: ``directory`` does not exist or is not a directory.
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise InvalidDirectoryError(f"Invalid directory: '{directory}'")

        self.executor = executor
        self.directory = directory
        self.name_format = name_format
        self.include_data = include_data
        self._closed = False

    def __enter__(self) -> "Dumper":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if not self._closed:
            self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise DumperClosedError("Dumper is closed")

    def resolve_path(self) -> Path:
        """Path of the dump file for the current time."""
        name = datetime.now().strftime(self.name_format)
        return self.directory / f"{name}.{self.EXTENSION}"

    def dump(self) -> DumpResult:
        """
        Dump the database to a new file.

        Returns:
            DumpResult with the file path. On failure ``error`` is set and the
            file, if it was created, must not be trusted.

        Raises:
            DumperClosedError: The dumper was closed.
        """
        self._ensure_open()

        path = self.resolve_path()
        if path.exists():
            error = DuplicateDumpError(f"Dump '{path.stem}' already exists")
            logging.error(str(error))
            return DumpResult(path=path, error=error)

        logging.info(f"Dumping to '{path}' (include_data={self.include_data})")

        try:
            with open(path, 'x', encoding='utf-8') as sink:
                document = self._build_document()
                sink.write(render(document))
        except Exception as e:
            logging.error(f"Error writing dump '{path}': {e}")
            return DumpResult(path=path, error=e)

        logging.info(f"Dump complete: {len(document.tables)} table(s) written to '{path}'")
        return DumpResult(path=path, tables_dumped=len(document.tables))

    def _build_document(self) -> Document:
        """Collect the server version and every table into a Document."""
        document = Document(
            dump_format_version=DUMP_FORMAT_VERSION,
            include_data=self.include_data
        )
        document.server_version = get_server_version(self.executor)
        logging.debug(f"Server version: {document.server_version}")

        tables = get_tables(self.executor)
        logging.info(f"Dumping {len(tables)} table(s)")

        builder = TableBuilder(self.executor, include_data=self.include_data)
        for table in tables:
            document.add_table(builder.build(table))
            logging.info(f"  ✓ {table}")

        document.complete(datetime.now().strftime(self.COMPLETION_FORMAT))
        return document

    def close(self) -> None:
        """Close the executor. The dumper cannot be used afterwards."""
        self._ensure_open()
        try:
            self.executor.close()
        finally:
            self._closed = True
            self.executor = None
            logging.debug("Dumper closed")
