# ============================================================================
# CLAUDE CONTEXT - DATABASE MODEL
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Whole schema
# PURPOSE: Ordered, name-addressable collection of tables
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Database
# DEPENDENCIES: pydantic
# ============================================================================
"""
Database Model

The root of the schema model. Built once (from a schema file or in code)
and read-only for the rest of a generation run. Table order is the
database order used wherever derived output iterates over all tables.

Duplicate table names are not detected here; lookups return the first
table with a given name.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from core.models.table import Table


class Database(BaseModel):
    """Complete schema definition."""
    name: str = Field(default="default", max_length=64)
    description: Optional[str] = None
    tables: List[Table] = Field(default_factory=list)

    model_config = {"frozen": True}

    def get_table(self, name: str) -> Optional[Table]:
        """Get a table by name, or None."""
        for table in self.tables:
            if table.name == name:
                return table
        return None

    def get_table_or_raise(self, name: str) -> Table:
        """
        Get a table by name, raising if not found.

        Raises:
            KeyError if table not found
        """
        table = self.get_table(name)
        if table is None:
            raise KeyError(f"Table '{name}' not found in database '{self.name}'")
        return table

    def table_names(self) -> List[str]:
        return [t.name for t in self.tables]


__all__ = ["Database"]
