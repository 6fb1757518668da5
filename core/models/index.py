# ============================================================================
# CLAUDE CONTEXT - INDEX MODEL
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core model - Table index
# PURPOSE: Ordered (optionally unique) index over table columns
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: Index
# DEPENDENCIES: pydantic
# ============================================================================
"""
Index Model

Column order is significant: it is the column order of a composite index.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator


class Index(BaseModel):
    """A named index over one or more columns."""
    name: str = Field(..., min_length=1, max_length=64)
    columns: List[str] = Field(..., min_length=1)
    unique: bool = False

    model_config = {"frozen": True}

    @field_validator("columns", mode="before")
    @classmethod
    def handle_string_input(cls, v):
        """Allow single string as shorthand for single-item list."""
        if isinstance(v, str):
            return [v]
        return v


__all__ = ["Index"]
