# ============================================================================
# CLAUDE CONTEXT - REFERENCE MODEL
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Foreign key relationship
# PURPOSE: Declared has-one / has-many relationship toward another table
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Reference
# DEPENDENCIES: pydantic
# ============================================================================
"""
Reference Model

A Reference is declared on a table and points at another table by name.

    has_one:  the declaring table owns the foreign key columns
    has_many: the target table is the one holding the foreign key; the
              declaring table is discovered as its "one" side

Exactly one direction is set per declaration.
"""

from typing import TYPE_CHECKING, List, Optional
from pydantic import BaseModel, Field, model_validator

from core.config import NamingDefaults, get_defaults
from core.errors import ColumnCountMismatchError, InvalidColumnNameError
from core.models.column import MAX_IDENTIFIER_LENGTH

if TYPE_CHECKING:
    from core.models.table import Table


class Reference(BaseModel):
    """Relationship from the declaring table toward `table_name`."""
    table_name: str = Field(..., min_length=1, max_length=64)
    has_one: bool = False
    has_many: bool = False
    column_names: Optional[List[str]] = Field(
        default=None,
        description="Explicit foreign key column names, one per target primary key column"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_direction(self) -> "Reference":
        if self.has_one == self.has_many:
            raise ValueError(
                f"Reference to '{self.table_name}' must set exactly one of has_one / has_many"
            )
        return self

    def column_names_for(
        self,
        foreign_table: "Table",
        naming: Optional[NamingDefaults] = None,
        table_name: Optional[str] = None,
    ) -> List[str]:
        """
        Physical foreign key column names toward `foreign_table`.

        Explicit column_names win; otherwise one conventional name per
        primary key column of the target, in primary key order.

        Args:
            foreign_table: The referenced table
            naming: Naming conventions (global defaults when omitted)
            table_name: Declaring table, for error reporting

        Raises:
            ColumnCountMismatchError: explicit names don't match the target's
                primary key column count
            InvalidColumnNameError: a resulting name is empty or longer than
                MAX_IDENTIFIER_LENGTH
        """
        pk_names = foreign_table.pk_column_names()
        if self.column_names is not None:
            if len(self.column_names) != len(pk_names):
                raise ColumnCountMismatchError(
                    table_name, foreign_table.name, len(pk_names), len(self.column_names)
                )
            names = list(self.column_names)
        else:
            naming = naming or get_defaults().naming
            names = [naming.foreign_key_column(foreign_table.name, name) for name in pk_names]

        for name in names:
            if not 0 < len(name) <= MAX_IDENTIFIER_LENGTH:
                raise InvalidColumnNameError(table_name, name, MAX_IDENTIFIER_LENGTH)
        return names


__all__ = ["Reference"]
