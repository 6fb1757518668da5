# ============================================================================
# CLAUDE CONTEXT - CORE MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core module initialization
# PURPOSE: Export core contracts, models, errors and DDL synthesizers
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.contracts import Category, Datatype, DialectName, FieldOrigin
from core.errors import (
    SchemaGenerationError,
    InvalidDatatypeError,
    UnsupportedDatatypeError,
    MissingForeignTableError,
    ColumnCountMismatchError,
    InvalidColumnNameError,
)
from core.models import Column, Index, Reference, Table, Database
from core.schema import DDLSynthesizer, get_synthesizer

__all__ = [
    # Enums
    "Category",
    "Datatype",
    "DialectName",
    "FieldOrigin",
    # Errors
    "SchemaGenerationError",
    "InvalidDatatypeError",
    "UnsupportedDatatypeError",
    "MissingForeignTableError",
    "ColumnCountMismatchError",
    "InvalidColumnNameError",
    # Models
    "Column",
    "Index",
    "Reference",
    "Table",
    "Database",
    # Schema
    "DDLSynthesizer",
    "get_synthesizer",
]
