"""
Error types raised while producing a dump.

Errors coming from the database driver are never wrapped; they reach the
caller exactly as the executor raised them.
"""


class DumpError(Exception):
    """Base class for all dumper errors."""


class InvalidDirectoryError(DumpError):
    """The destination directory is missing or is not a directory."""


class DuplicateDumpError(DumpError):
    """A dump with the same name already exists."""


class DumpIntegrityError(DumpError):
    """The server returned something the dumper cannot trust."""


class TableNameMismatchError(DumpIntegrityError):
    """SHOW CREATE TABLE echoed a different table than the one requested."""

    def __init__(self, requested: str, returned: str):
        self.requested = requested
        self.returned = returned
        super().__init__(
            f"Requested table '{requested}' but server returned '{returned}'"
        )


class NoColumnsError(DumpIntegrityError):
    """A table was reported with zero columns."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"No columns in table '{table}'")


class AssemblyError(DumpError):
    """The dump document could not be rendered."""


class DumperClosedError(DumpError):
    """The dumper was used after close()."""
