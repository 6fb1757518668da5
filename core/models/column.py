# ============================================================================
# CLAUDE CONTEXT - COLUMN MODEL
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Table column
# PURPOSE: Column definition with datatype, flags, default and sizing
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Column, to_exported_name
# DEPENDENCIES: pydantic
# ============================================================================
"""
Column Model

A Column is one declared column of a table. Besides the SQL-facing
attributes it knows the Python type a generated entity field uses.
"""

import re
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from core.contracts import Category, Datatype


_WORD_SPLIT = re.compile(r"[_\-\s]+")


def to_exported_name(name: str) -> str:
    """
    Convert a schema name into an exported (PascalCase) identifier.

    "column" -> "Column", "user_posts" -> "UserPosts".
    """
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SPLIT.split(name) if part)


# Python types used for generated fields
_PYTHON_TYPES = {
    Datatype.INTEGER: "int",
    Datatype.TINYINT: "int",
    Datatype.SMALLINT: "int",
    Datatype.MEDIUMINT: "int",
    Datatype.BIGINT: "int",
    Datatype.DECIMAL: "Decimal",
    Datatype.FLOAT: "float",
    Datatype.DOUBLE: "float",
    Datatype.CHAR: "str",
    Datatype.VARCHAR: "str",
    Datatype.TEXT: "str",
    Datatype.TINYTEXT: "str",
    Datatype.MEDIUMTEXT: "str",
    Datatype.LONGTEXT: "str",
    Datatype.BINARY: "bytes",
    Datatype.VARBINARY: "bytes",
    Datatype.BLOB: "bytes",
    Datatype.TINYBLOB: "bytes",
    Datatype.MEDIUMBLOB: "bytes",
    Datatype.LONGBLOB: "bytes",
    Datatype.DATE: "date",
    Datatype.TIME: "time",
    Datatype.DATETIME: "datetime",
    Datatype.TIMESTAMP: "datetime",
    Datatype.YEAR: "int",
    Datatype.BOOLEAN: "bool",
    Datatype.JSON: "Any",
}

_TYPE_IMPORTS = {
    "Decimal": "from decimal import Decimal",
    "date": "from datetime import date",
    "time": "from datetime import time",
    "datetime": "from datetime import datetime",
    "Any": "from typing import Any",
}

OPTIONAL_IMPORT = "from typing import Optional"

# Longest identifier accepted for tables, columns and indexes (MySQL limit)
MAX_IDENTIFIER_LENGTH = 64


class Column(BaseModel):
    """
    Definition of a single table column.

    Immutable once loaded. `default` is the literal SQL default as text;
    None means no default was declared.
    """
    name: str = Field(..., min_length=1, max_length=MAX_IDENTIFIER_LENGTH)
    display_name: Optional[str] = Field(
        default=None,
        description="Overrides `name` when deriving exported identifiers"
    )
    datatype: Datatype = Field(default=Datatype.INVALID)

    # Flags
    nullable: bool = False
    unsigned: bool = False
    primary_key: bool = False
    auto_increment: bool = False

    default: Optional[str] = None
    scale: int = Field(default=0, ge=0)
    precision: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @field_validator("datatype", mode="before")
    @classmethod
    def normalize_datatype(cls, v):
        """Accept datatype names in any case ("INTEGER", "Integer")."""
        if isinstance(v, str) and not isinstance(v, Datatype):
            return v.strip().lower()
        return v

    @field_validator("default", mode="before")
    @classmethod
    def stringify_default(cls, v):
        """YAML turns `default: 1` into an int; defaults are always kept as text."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "1" if v else "0"
        return str(v)

    @model_validator(mode="after")
    def check_auto_increment(self) -> "Column":
        if self.auto_increment and not self.primary_key:
            raise ValueError(f"Column '{self.name}' is auto_increment but not a primary key")
        return self

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    @property
    def category(self) -> Category:
        return self.datatype.category

    @property
    def exported_name(self) -> str:
        """Exported identifier: display_name if set, else name, in PascalCase."""
        return to_exported_name(self.display_name or self.name)

    # =========================================================================
    # PYTHON TYPES
    # =========================================================================

    @property
    def base_python_type(self) -> str:
        """Python type of a value in this column, ignoring nullability."""
        return _PYTHON_TYPES.get(self.datatype, "Any")

    @property
    def python_type(self) -> str:
        """Python type annotation for a generated field."""
        if self.nullable:
            return f"Optional[{self.base_python_type}]"
        return self.base_python_type

    @property
    def required_import(self) -> str:
        """Import line the base Python type needs, or "" for builtins."""
        return _TYPE_IMPORTS.get(self.base_python_type, "")

    def required_imports(self) -> List[str]:
        """All import lines a generated field for this column needs."""
        imports = []
        if self.required_import:
            imports.append(self.required_import)
        if self.nullable:
            imports.append(OPTIONAL_IMPORT)
        return imports


__all__ = ["Column", "to_exported_name", "OPTIONAL_IMPORT", "MAX_IDENTIFIER_LENGTH"]
