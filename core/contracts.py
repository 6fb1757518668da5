# ============================================================================
# CLAUDE CONTEXT - BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Foundation - Core enums and datatype classification
# PURPOSE: Define datatypes, categories, dialects and field origins
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Datatype, Category, DialectName, FieldOrigin
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the schema generator.

These enums cross every boundary:
- Schema files (YAML values)
- DDL synthesis (type tables are keyed by Datatype)
- Field model / operation catalog (driven by Category)
"""

from enum import Enum


# ============================================================================
# CATEGORIES
# ============================================================================

class Category(str, Enum):
    """
    Datatype categories.

    Category membership drives SIGNED/UNSIGNED emission, default quoting
    and the legal comparison operations for a column.
    """
    NUMERIC = "numeric"
    STRING = "string"
    BINARY = "binary"
    TEMPORAL = "temporal"
    UNCLASSIFIED = "unclassified"


# ============================================================================
# DATATYPES
# ============================================================================

class Datatype(str, Enum):
    """
    Abstract column datatypes.

    INVALID is the distinguished zero value: a column that never had a
    datatype assigned. Every other member belongs to exactly one category.
    """
    INVALID = ""

    # Numeric
    INTEGER = "integer"
    TINYINT = "tinyint"
    SMALLINT = "smallint"
    MEDIUMINT = "mediumint"
    BIGINT = "bigint"
    DECIMAL = "decimal"
    FLOAT = "float"
    DOUBLE = "double"

    # String
    CHAR = "char"
    VARCHAR = "varchar"
    TEXT = "text"
    TINYTEXT = "tinytext"
    MEDIUMTEXT = "mediumtext"
    LONGTEXT = "longtext"

    # Binary
    BINARY = "binary"
    VARBINARY = "varbinary"
    BLOB = "blob"
    TINYBLOB = "tinyblob"
    MEDIUMBLOB = "mediumblob"
    LONGBLOB = "longblob"

    # Temporal
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    YEAR = "year"

    # Unclassified
    BOOLEAN = "boolean"
    JSON = "json"

    @property
    def category(self) -> Category:
        """Category of this datatype (UNCLASSIFIED when none applies)."""
        return _CATEGORIES.get(self, Category.UNCLASSIFIED)

    def is_valid(self) -> bool:
        return self is not Datatype.INVALID

    def is_numeric(self) -> bool:
        return self.category == Category.NUMERIC

    def is_string(self) -> bool:
        return self.category == Category.STRING

    def is_binary(self) -> bool:
        return self.category == Category.BINARY

    def is_time(self) -> bool:
        return self.category == Category.TEMPORAL


_CATEGORIES = {
    Datatype.INTEGER: Category.NUMERIC,
    Datatype.TINYINT: Category.NUMERIC,
    Datatype.SMALLINT: Category.NUMERIC,
    Datatype.MEDIUMINT: Category.NUMERIC,
    Datatype.BIGINT: Category.NUMERIC,
    Datatype.DECIMAL: Category.NUMERIC,
    Datatype.FLOAT: Category.NUMERIC,
    Datatype.DOUBLE: Category.NUMERIC,
    Datatype.CHAR: Category.STRING,
    Datatype.VARCHAR: Category.STRING,
    Datatype.TEXT: Category.STRING,
    Datatype.TINYTEXT: Category.STRING,
    Datatype.MEDIUMTEXT: Category.STRING,
    Datatype.LONGTEXT: Category.STRING,
    Datatype.BINARY: Category.BINARY,
    Datatype.VARBINARY: Category.BINARY,
    Datatype.BLOB: Category.BINARY,
    Datatype.TINYBLOB: Category.BINARY,
    Datatype.MEDIUMBLOB: Category.BINARY,
    Datatype.LONGBLOB: Category.BINARY,
    Datatype.DATE: Category.TEMPORAL,
    Datatype.TIME: Category.TEMPORAL,
    Datatype.DATETIME: Category.TEMPORAL,
    Datatype.TIMESTAMP: Category.TEMPORAL,
    Datatype.YEAR: Category.TEMPORAL,
}


# ============================================================================
# DIALECTS
# ============================================================================

class DialectName(str, Enum):
    """Built-in SQL dialects. The set is closed."""
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"


# ============================================================================
# FIELD ORIGINS
# ============================================================================

class FieldOrigin(str, Enum):
    """Where a flattened field came from."""
    OWN = "own"                  # Declared column of the table itself
    HAS_ONE = "has_one"          # Primary key of a table this one references
    HAS_MANY = "has_many"        # Primary key of a table referencing this one


__all__ = [
    "Category",
    "Datatype",
    "DialectName",
    "FieldOrigin",
]
