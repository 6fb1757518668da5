#!/usr/bin/env python
# ============================================================================
# DDL GENERATION SCRIPT
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# PURPOSE: Print DDL and the flattened field model for a schema file
# USAGE:
#   python scripts/generate_ddl.py schemas/blog.yaml                  # MySQL DDL
#   python scripts/generate_ddl.py schemas/blog.yaml -d postgresql    # PostgreSQL DDL
#   python scripts/generate_ddl.py schemas/blog.yaml --fields         # Also list fields
# ============================================================================

import sys
import os
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from __version__ import __version__
from core.config import get_defaults
from core.contracts import DialectName
from core.logging import configure_logging, get_logger, ComponentType
from services import GenerationService, SchemaService

logger = get_logger("scripts.generate_ddl", ComponentType.CLI)


def print_fields(artifacts) -> None:
    """Print the flattened field model of one table."""
    print(f"-- fields of {artifacts.table_name}")
    for fo in artifacts.field_operations:
        f = fo.field
        ops = ", ".join(spec.operation.value for spec in fo.operations) or "-"
        print(f"--   {f.name}: {f.python_type} [{f.origin.value} {f.column_name}] ops: {ops}")
    if artifacts.capabilities:
        print(f"--   capabilities: {', '.join(c.value for c in artifacts.capabilities)}")
    if artifacts.imports:
        print(f"--   imports: {'; '.join(artifacts.imports)}")
    pk = artifacts.primary_key
    print(f"--   primary key: {pk.columns or '-'} (capture: {pk.capture.value})")


def main(argv=None) -> int:
    defaults = get_defaults().generator

    parser = argparse.ArgumentParser(
        description="Generate SQL DDL and field models from a schema file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_ddl.py schemas/blog.yaml
  python scripts/generate_ddl.py schemas/blog.yaml --dialect postgresql
  python scripts/generate_ddl.py schemas/blog.yaml --fields --verbose

Environment Variables:
  SCHEMA_DIALECT        Default dialect (default: mysql)
  FK_PREFIX             Prefix of derived foreign key columns (default: fk)
  LOG_LEVEL             Log level (default: INFO)
  LOG_FORMAT            Set to "json" for structured logs
        """
    )
    parser.add_argument(
        "schema",
        help="Path to a schema YAML file"
    )
    parser.add_argument(
        "--dialect", "-d",
        choices=[d.value for d in DialectName],
        default=defaults.dialect,
        help="Target SQL dialect"
    )
    parser.add_argument(
        "--table", "-t",
        action="append",
        dest="tables",
        help="Only generate this table (repeatable)"
    )
    parser.add_argument(
        "--fields",
        action="store_true",
        help="Also print the flattened field model of each table"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=defaults.json_logs,
        help="Emit structured JSON logs"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    args = parser.parse_args(argv)

    configure_logging(
        level="DEBUG" if args.verbose else defaults.log_level,
        json_output=args.json_logs,
    )

    try:
        database = SchemaService().load_file(args.schema)
    except (OSError, ValueError) as e:
        logger.error(f"Unable to load schema: {e}")
        return 1

    # SCHEMA_DIALECT feeds the --dialect default, which argparse doesn't check
    try:
        service = GenerationService(database, dialect=args.dialect)
    except ValueError as e:
        logger.error(str(e))
        return 1

    try:
        result = service.generate(args.tables)
    except KeyError as e:
        logger.error(str(e))
        return 1

    for artifacts in result.artifacts.values():
        if args.fields:
            print_fields(artifacts)
        for statement in artifacts.statements:
            print(statement)
        print()

    if not result.success:
        for table_name, error in result.errors.items():
            print(f"-- FAILED {table_name}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
