"""
Schema discovery for SQL Dumper.
"""

import logging


def get_tables(executor) -> list[str]:
    """Get list of all tables in the current database, in server order."""
    results = executor.execute_query("SHOW TABLES")
    tables = [row[0] for row in results]
    logging.debug(f"Found {len(tables)} table(s)")
    return tables


def get_server_version(executor) -> str:
    """Get the server version string."""
    results = executor.execute_query("SELECT version()")
    if not results or results[0][0] is None:
        return ""
    return str(results[0][0])
