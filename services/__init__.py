# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Generation logic layer
# PURPOSE: Schema loading, reference resolution, operation catalog, generation
# CREATED: 19 OCT 2026
# ============================================================================
"""
Services Module

Generation logic on top of the schema models.

Usage:
    from services import SchemaService, GenerationService

    database = SchemaService("schemas").get_or_raise("blog")
    result = GenerationService(database, dialect="mysql").generate()
"""

from .schema_service import SchemaService
from .reference_resolver import FlattenedField, ReferenceResolver
from .query_catalog import (
    Operation,
    OperationSpec,
    ValueRule,
    Capability,
    build_operations,
    operations_for_field,
    required_capabilities,
)
from .generation_service import (
    CaptureStrategy,
    PrimaryKeySummary,
    FieldOperations,
    TableArtifacts,
    GenerationResult,
    GenerationService,
)

__all__ = [
    "SchemaService",
    "FlattenedField",
    "ReferenceResolver",
    "Operation",
    "OperationSpec",
    "ValueRule",
    "Capability",
    "build_operations",
    "operations_for_field",
    "required_capabilities",
    "CaptureStrategy",
    "PrimaryKeySummary",
    "FieldOperations",
    "TableArtifacts",
    "GenerationResult",
    "GenerationService",
]
