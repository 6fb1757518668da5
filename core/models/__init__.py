# ============================================================================
# CLAUDE CONTEXT - MODELS MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Model exports
# PURPOSE: Central export point for all schema models
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Pydantic models describing a relational schema. The models are the
single input of every generator: DDL synthesis, reference resolution and
the operation catalog all read them and never write them.
"""

from core.models.column import Column, to_exported_name
from core.models.index import Index
from core.models.reference import Reference
from core.models.table import Table
from core.models.database import Database

__all__ = [
    "Column",
    "Index",
    "Reference",
    "Table",
    "Database",
    "to_exported_name",
]
