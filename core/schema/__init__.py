# ============================================================================
# CLAUDE CONTEXT - SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - DDL synthesis from schema models
# PURPOSE: Dialect-specific SQL DDL rendering
# LAST_REVIEWED: 19 OCT 2026
# ============================================================================

from core.schema.ddl_utils import (
    MYSQL_TYPES,
    POSTGRESQL_TYPES,
    quote_identifier,
    quote_literal,
    join_identifiers,
    size_suffix,
)
from core.schema.sql_generator import (
    DDLSynthesizer,
    MySQLSynthesizer,
    PostgreSQLSynthesizer,
    SYNTHESIZERS,
    get_synthesizer,
)

__all__ = [
    # Synthesizers
    "DDLSynthesizer",
    "MySQLSynthesizer",
    "PostgreSQLSynthesizer",
    "SYNTHESIZERS",
    "get_synthesizer",
    # Utilities
    "MYSQL_TYPES",
    "POSTGRESQL_TYPES",
    "quote_identifier",
    "quote_literal",
    "join_identifiers",
    "size_suffix",
]
