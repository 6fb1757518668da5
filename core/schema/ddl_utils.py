# ============================================================================
# CLAUDE CONTEXT - DDL UTILITIES
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - DRY utilities for SQL DDL generation
# PURPOSE: Per-dialect type tables, quoting and sizing helpers
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: MYSQL_TYPES, POSTGRESQL_TYPES, quote_identifier, quote_literal,
#          join_identifiers, size_suffix
# ============================================================================
"""
DDL Utilities - Shared SQL Generation Patterns.

Type tables are read-only mappings from abstract Datatype to the
dialect's type keyword. A datatype missing from a table is unsupported
by that dialect.

Usage:
    from core.schema.ddl_utils import MYSQL_TYPES, quote_identifier

    MYSQL_TYPES[Datatype.INTEGER]        # "INT"
    quote_identifier("users", "`")       # "`users`"
"""

from types import MappingProxyType
from typing import Iterable

from core.contracts import Datatype


# ============================================================================
# TYPE TABLES
# ============================================================================

MYSQL_TYPES = MappingProxyType({
    # Numeric
    Datatype.INTEGER: "INT",
    Datatype.TINYINT: "TINYINT",
    Datatype.SMALLINT: "SMALLINT",
    Datatype.MEDIUMINT: "MEDIUMINT",
    Datatype.BIGINT: "BIGINT",
    Datatype.DECIMAL: "DECIMAL",
    Datatype.FLOAT: "FLOAT",
    Datatype.DOUBLE: "DOUBLE",

    # String
    Datatype.CHAR: "CHAR",
    Datatype.VARCHAR: "VARCHAR",
    Datatype.TEXT: "TEXT",
    Datatype.TINYTEXT: "TINYTEXT",
    Datatype.MEDIUMTEXT: "MEDIUMTEXT",
    Datatype.LONGTEXT: "LONGTEXT",

    # Binary
    Datatype.BINARY: "BINARY",
    Datatype.VARBINARY: "VARBINARY",
    Datatype.BLOB: "BLOB",
    Datatype.TINYBLOB: "TINYBLOB",
    Datatype.MEDIUMBLOB: "MEDIUMBLOB",
    Datatype.LONGBLOB: "LONGBLOB",

    # Temporal
    Datatype.DATE: "DATE",
    Datatype.TIME: "TIME",
    Datatype.DATETIME: "DATETIME",
    Datatype.TIMESTAMP: "TIMESTAMP",
    Datatype.YEAR: "YEAR",

    # Unclassified (no BOOLEAN: MySQL only has the TINYINT(1) alias)
    Datatype.JSON: "JSON",
})

POSTGRESQL_TYPES = MappingProxyType({
    # Numeric
    Datatype.INTEGER: "INTEGER",
    Datatype.SMALLINT: "SMALLINT",
    Datatype.BIGINT: "BIGINT",
    Datatype.DECIMAL: "NUMERIC",
    Datatype.FLOAT: "REAL",
    Datatype.DOUBLE: "DOUBLE PRECISION",

    # String
    Datatype.CHAR: "CHAR",
    Datatype.VARCHAR: "VARCHAR",
    Datatype.TEXT: "TEXT",

    # Binary
    Datatype.BINARY: "BYTEA",
    Datatype.VARBINARY: "BYTEA",
    Datatype.BLOB: "BYTEA",

    # Temporal
    Datatype.DATE: "DATE",
    Datatype.TIME: "TIME",
    Datatype.DATETIME: "TIMESTAMP",
    Datatype.TIMESTAMP: "TIMESTAMPTZ",

    # Unclassified
    Datatype.BOOLEAN: "BOOLEAN",
    Datatype.JSON: "JSONB",
})


# ============================================================================
# QUOTING
# ============================================================================

def quote_identifier(name: str, quote: str) -> str:
    """Quote an identifier, doubling any embedded quote character."""
    return f"{quote}{name.replace(quote, quote * 2)}{quote}"


def quote_literal(value: str, quote: str) -> str:
    """Quote a string literal, doubling any embedded quote character."""
    return f"{quote}{value.replace(quote, quote * 2)}{quote}"


def join_identifiers(names: Iterable[str], quote: str) -> str:
    """Comma-join quoted identifiers, keeping their order."""
    return ", ".join(quote_identifier(n, quote) for n in names)


# ============================================================================
# SIZING
# ============================================================================

def size_suffix(scale: int, precision: int) -> str:
    """
    Size suffix for a type token.

    (scale, precision) when precision is set, (scale) when only scale is
    set, nothing otherwise.
    """
    if precision:
        return f"({scale}, {precision})"
    if scale:
        return f"({scale})"
    return ""


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "MYSQL_TYPES",
    "POSTGRESQL_TYPES",
    "quote_identifier",
    "quote_literal",
    "join_identifiers",
    "size_suffix",
]
