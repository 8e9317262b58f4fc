"""
Utility functions for SQL Dumper.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from .dumper import Dumper


def setup_logging(log_settings: dict[str, Any]) -> None:
    """Setup logging configuration."""
    log_level = getattr(logging, log_settings.get('level', 'INFO').upper())
    log_file = log_settings.get('file')

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def print_dry_run_info(
    connection_settings: dict[str, Any],
    output_settings: dict[str, Any]
) -> None:
    """Print information about what would be dumped in dry-run mode."""
    host = connection_settings.get('host')
    port = connection_settings.get('port', 3306)
    database = connection_settings.get('database') or 'N/A'
    logging.info(f"Would dump database: {database} from {host}:{port}")

    directory = Path(output_settings.get('directory', './dumps'))
    name_format = output_settings.get('name_format', Dumper.DEFAULT_NAME_FORMAT)
    name = datetime.now().strftime(name_format)
    logging.info(f"  File: {directory / f'{name}.{Dumper.EXTENSION}'}")

    if not directory.is_dir():
        logging.warning(f"  Directory '{directory}' does not exist")

    if output_settings.get('include_data', True):
        logging.info("  - All tables (structure and data)")
    else:
        logging.info("  - All tables (structure only)")
