# ============================================================================
# CLAUDE CONTEXT - TABLE MODEL
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Table definition
# PURPOSE: Ordered columns plus indexes and references of one table
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Table
# DEPENDENCIES: pydantic
# ============================================================================
"""
Table Model

Column declaration order is significant: it is preserved in generated
DDL and in flattened field lists.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from core.models.column import Column, to_exported_name
from core.models.index import Index
from core.models.reference import Reference


class Table(BaseModel):
    """
    Definition of a single table.

    Immutable once loaded.
    """
    name: str = Field(..., min_length=1, max_length=64)
    display_name: Optional[str] = None
    columns: List[Column] = Field(default_factory=list)
    indexes: List[Index] = Field(default_factory=list)
    references: List[Reference] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("columns")
    @classmethod
    def check_unique_columns(cls, v: List[Column]) -> List[Column]:
        seen = set()
        for column in v:
            if column.name in seen:
                raise ValueError(f"Duplicate column name: {column.name}")
            seen.add(column.name)
        return v

    @property
    def exported_name(self) -> str:
        return to_exported_name(self.display_name or self.name)

    def get_column(self, name: str) -> Optional[Column]:
        """Get a column by name, or None."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def pk_columns(self) -> List[Column]:
        """Primary key columns in declaration order."""
        return [c for c in self.columns if c.primary_key]

    def pk_column_names(self) -> List[str]:
        return [c.name for c in self.pk_columns()]

    def auto_increment_columns(self) -> List[Column]:
        return [c for c in self.columns if c.primary_key and c.auto_increment]

    def has_one_references(self) -> List[Reference]:
        return [r for r in self.references if r.has_one]

    def has_many_references(self) -> List[Reference]:
        return [r for r in self.references if r.has_many]


__all__ = ["Table"]
