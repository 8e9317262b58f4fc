#!/usr/bin/env python3
"""
SQL Dumper - CLI Entry Point
============================
Dumps a MySQL database into a single timestamped .sql file containing:
- Table structure (DROP TABLE / CREATE TABLE)
- Optionally, table data (LOCK TABLES / INSERT / UNLOCK TABLES)
"""

import argparse
import logging
import sys

import yaml
from mysql.connector import Error as MySQLError

from .config import ConfigLoader
from .connection import DatabaseConnection
from .dumper import Dumper
from .exceptions import DumpError
from .utils import print_dry_run_info, setup_logging


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='SQL Dumper - MySQL schema and data backup tool'
    )
    parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show what would be dumped without actually dumping'
    )
    parser.add_argument(
        '--no-data',
        action='store_true',
        help='Dump table structure only'
    )

    args = parser.parse_args()

    # Load configuration
    try:
        config = ConfigLoader(args.config)
        connection_settings = config.get_connection_settings()
    except FileNotFoundError:
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Setup logging
    log_settings = config.get_logging_settings()
    if args.verbose:
        log_settings['level'] = 'DEBUG'
    setup_logging(log_settings)

    output_settings = config.get_output_settings()
    if args.no_data:
        output_settings['include_data'] = False

    if args.dry_run:
        logging.info("DRY RUN MODE - No data will be dumped")
        print_dry_run_info(connection_settings, output_settings)
        sys.exit(0)

    try:
        with DatabaseConnection.from_settings(connection_settings) as connection:
            with Dumper(
                connection,
                directory=output_settings.get('directory', './dumps'),
                name_format=output_settings.get('name_format', Dumper.DEFAULT_NAME_FORMAT),
                include_data=output_settings.get('include_data', True)
            ) as dumper:
                result = dumper.dump()
    except (DumpError, MySQLError) as e:
        logging.error(f"Fatal error: {e}")
        sys.exit(1)

    logging.info("=" * 50)
    if not result.success:
        logging.error(f"DUMP FAILED: {result.error}")
        sys.exit(1)

    logging.info("DUMP COMPLETE")
    logging.info(f"Tables: {result.tables_dumped}")
    logging.info(f"File: {result.path}")


if __name__ == '__main__':
    main()
