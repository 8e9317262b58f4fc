"""
Dump document rendering for SQL Dumper.

A document is rendered by one of two variants, picked by its
``include_data`` flag:

- schema only: header, one structure block per table, footer
- schema and data: header, per table a structure block followed by its
  lock/insert/unlock block, footer
"""

from typing import Callable

from .exceptions import AssemblyError
from .models import Document, TableRecord
from .serializer import quote_identifier

TOOL_NAME = 'sqldumper'
DUMP_FORMAT_VERSION = '1.0.0'


def render_header(document: Document) -> str:
    return (
        f"-- {TOOL_NAME} SQL Dump {document.dump_format_version}\n"
        f"--\n"
        f"-- ------------------------------------------------------\n"
        f"-- Server version  {document.server_version}\n"
    )


def render_table_structure(table: TableRecord) -> str:
    name = quote_identifier(table.name)
    return (
        f"\n--\n"
        f"-- Table structure for table {name}\n"
        f"--\n"
        f"DROP TABLE IF EXISTS {name};\n"
        f"{table.create_statement};\n"
    )


def render_table_data(table: TableRecord) -> str:
    name = quote_identifier(table.name)
    block = (
        f"\n--\n"
        f"-- Dumping data for table {name}\n"
        f"--\n"
        f"LOCK TABLES {name} WRITE;\n"
    )
    if table.serialized_values:
        block += f"INSERT INTO {name} VALUES {table.serialized_values};\n"
    block += "UNLOCK TABLES;\n"
    return block


def render_footer(document: Document) -> str:
    return f"\n-- Dump completed on {document.completion_timestamp}\n"


def render_schema_only(document: Document) -> str:
    """Render table definitions without data."""
    parts = [render_header(document)]
    parts.extend(render_table_structure(table) for table in document.tables)
    parts.append(render_footer(document))
    return ''.join(parts)


def render_with_data(document: Document) -> str:
    """Render table definitions, each followed by its data."""
    parts = [render_header(document)]
    for table in document.tables:
        parts.append(render_table_structure(table))
        parts.append(render_table_data(table))
    parts.append(render_footer(document))
    return ''.join(parts)


TEMPLATES: dict[bool, Callable[[Document], str]] = {
    False: render_schema_only,
    True: render_with_data,
}


def select_template(include_data: bool) -> Callable[[Document], str]:
    """Pick the rendering variant for a document."""
    return TEMPLATES[bool(include_data)]


def render(document: Document) -> str:
    """
    Render a complete document to text.

    Raises:
        AssemblyError: The document is not complete or could not be rendered.
    """
    if not document.is_complete:
        raise AssemblyError("Cannot render a dump that has no completion time")

    template = select_template(document.include_data)
    try:
        return template(document)
    except (AttributeError, TypeError, ValueError) as e:
        raise AssemblyError(f"Failed to render dump: {e}") from e
