# ============================================================================
# CLAUDE CONTEXT - GENERATION ERRORS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Foundation - Domain exceptions
# PURPOSE: Errors that abort generation for a single table
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: SchemaGenerationError, InvalidDatatypeError, UnsupportedDatatypeError,
#          MissingForeignTableError, ColumnCountMismatchError, InvalidColumnNameError
# ============================================================================
"""
Generation Errors

Every error here means the schema is inconsistent for the affected table.
None are retried or recovered internally; the caller decides whether to
continue with the remaining tables.
"""

from typing import Optional


class SchemaGenerationError(Exception):
    """Base exception for schema generation errors."""

    def __init__(self, message: str, table: Optional[str] = None):
        self.table = table
        super().__init__(message)


def _location(table: Optional[str], column: Optional[str]) -> str:
    if table and column:
        return f" (column {table}.{column})"
    if column:
        return f" (column {column})"
    if table:
        return f" (table {table})"
    return ""


class InvalidDatatypeError(SchemaGenerationError):
    """Raised when the undefined datatype is used where a concrete one is required."""

    def __init__(
        self,
        datatype,
        dialect: str,
        table: Optional[str] = None,
        column: Optional[str] = None,
    ):
        self.datatype = datatype
        self.dialect = dialect
        self.column = column
        super().__init__(
            f"invalid datatype {getattr(datatype, 'name', datatype)} for dialect {dialect}{_location(table, column)}",
            table=table,
        )


class UnsupportedDatatypeError(SchemaGenerationError):
    """Raised when a dialect has no mapping for a recognized datatype."""

    def __init__(
        self,
        datatype,
        dialect: str,
        table: Optional[str] = None,
        column: Optional[str] = None,
    ):
        self.datatype = datatype
        self.dialect = dialect
        self.column = column
        name = getattr(datatype, "value", datatype)
        super().__init__(
            f"unsupported datatype {name} for dialect {dialect}{_location(table, column)}",
            table=table,
        )


class MissingForeignTableError(SchemaGenerationError):
    """Raised when a has-one reference names a table absent from the database."""

    def __init__(self, table: str, foreign_table: str):
        self.foreign_table = foreign_table
        super().__init__(
            f"unable to resolve references for table {table}, missing foreign table {foreign_table}",
            table=table,
        )


class ColumnCountMismatchError(SchemaGenerationError):
    """
    Raised when explicit foreign key column names don't match the target primary key.

    `table` is the table that holds the foreign key columns.
    """

    def __init__(self, table: Optional[str], foreign_table: str, expected: int, actual: int):
        self.foreign_table = foreign_table
        self.expected = expected
        self.actual = actual
        holder = f"table {table}" if table else "reference"
        super().__init__(
            f"{actual} foreign key column name(s) declared for {holder} toward {foreign_table}, "
            f"but {foreign_table} has {expected} primary key column(s)",
            table=table,
        )


class InvalidColumnNameError(SchemaGenerationError):
    """Raised when a derived foreign key column name is empty or too long."""

    def __init__(self, table: Optional[str], column: str, max_length: int):
        self.column = column
        self.max_length = max_length
        super().__init__(
            f"foreign key column name {column!r} must be 1 to {max_length} characters"
            f"{_location(table, None)}",
            table=table,
        )


__all__ = [
    "SchemaGenerationError",
    "InvalidDatatypeError",
    "UnsupportedDatatypeError",
    "MissingForeignTableError",
    "ColumnCountMismatchError",
    "InvalidColumnNameError",
]
