# ============================================================================
# GENERATION SERVICE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Service - Per-table generation driver
# PURPOSE: Run DDL synthesis, reference resolution and the operation catalog
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Service

Drives the generators over a database, one table at a time. A table's
artifacts are all-or-nothing: any SchemaGenerationError discards that
table's output, is recorded against the table, and generation carries on
with the next table.

Artifacts per table:
    - CREATE TABLE statement
    - ADD COLUMN statements for foreign key columns
    - index statements
    - flattened fields and their legal operations
    - capabilities and imports the emitted code needs
    - primary key summary (how an insert captures its key)

Usage:
    service = GenerationService(database, dialect="mysql")
    result = service.generate()
    for name, artifacts in result.artifacts.items():
        print("\\n".join(artifacts.statements))
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from core.config import NamingDefaults, get_defaults
from core.contracts import DialectName
from core.errors import SchemaGenerationError
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import Database, Table
from core.schema import DDLSynthesizer, get_synthesizer
from services.query_catalog import (
    Capability,
    OperationSpec,
    operations_for_field,
    required_capabilities,
)
from services.reference_resolver import FlattenedField, ReferenceResolver

logger = get_logger(__name__, ComponentType.GENERATOR)


# ============================================================================
# RESULTS
# ============================================================================

class CaptureStrategy(str, Enum):
    """How generated insert code learns the primary key of a new row."""
    NONE = "none"                        # Table has no primary key
    AUTO_INCREMENT = "auto_increment"    # Single auto-increment key, read back after insert
    ASSIGNED = "assigned"                # Single key supplied by the caller
    COMPOSITE = "composite"              # Multi-column key


@dataclass(frozen=True)
class PrimaryKeySummary:
    """Primary key facts the emitter needs to pick a capture strategy."""
    columns: List[str]
    auto_increment_columns: List[str]

    @property
    def count(self) -> int:
        return len(self.columns)

    @property
    def capture(self) -> CaptureStrategy:
        if not self.columns:
            return CaptureStrategy.NONE
        if len(self.columns) > 1:
            return CaptureStrategy.COMPOSITE
        if self.auto_increment_columns:
            return CaptureStrategy.AUTO_INCREMENT
        return CaptureStrategy.ASSIGNED

    @classmethod
    def for_table(cls, table: Table) -> "PrimaryKeySummary":
        return cls(
            columns=table.pk_column_names(),
            auto_increment_columns=[c.name for c in table.auto_increment_columns()],
        )


@dataclass(frozen=True)
class FieldOperations:
    """A flattened field with its legal operations."""
    field: FlattenedField
    operations: List[OperationSpec]


@dataclass
class TableArtifacts:
    """Everything generated for one table."""
    table_name: str
    create_table: str
    foreign_key_columns: List[str] = field(default_factory=list)
    indexes: List[str] = field(default_factory=list)
    fields: List[FlattenedField] = field(default_factory=list)
    field_operations: List[FieldOperations] = field(default_factory=list)
    capabilities: List[Capability] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    primary_key: Optional[PrimaryKeySummary] = None

    @property
    def statements(self) -> List[str]:
        """DDL statements in execution order."""
        return [self.create_table] + self.foreign_key_columns + self.indexes


@dataclass
class GenerationResult:
    """
    Result of a generation run.

    Collects all table errors rather than stopping on the first.
    """
    dialect: str
    artifacts: Dict[str, TableArtifacts] = field(default_factory=dict)
    errors: Dict[str, SchemaGenerationError] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def statements(self) -> List[str]:
        """All DDL statements of successfully generated tables, in table order."""
        return [s for artifacts in self.artifacts.values() for s in artifacts.statements]


# ============================================================================
# SERVICE
# ============================================================================

class GenerationService:
    """Runs the generators over the tables of one database."""

    def __init__(
        self,
        database: Database,
        dialect: Union[DialectName, str, None] = None,
        naming: Optional[NamingDefaults] = None,
    ):
        """
        Initialize the generation service.

        Args:
            database: Schema to generate from
            dialect: Target dialect (configured default when omitted)
            naming: Naming conventions (global defaults when omitted)
        """
        defaults = get_defaults()
        self.database = database
        self.naming = naming or defaults.naming
        self.synthesizer: DDLSynthesizer = get_synthesizer(
            dialect or defaults.generator.dialect, naming=self.naming
        )
        self.resolver = ReferenceResolver(database, naming=self.naming)

    @property
    def dialect(self) -> str:
        return self.synthesizer.dialect.value

    def generate_table(self, table: Table) -> TableArtifacts:
        """
        Generate all artifacts for one table.

        Raises:
            SchemaGenerationError subclasses; nothing is returned for a failed table
        """
        with log_context(table=table.name, dialect=self.dialect):
            self.synthesizer.validate_table(table.name, table)

            fields = self.resolver.resolve(table)
            fk_columns = [(f.column_name, f.as_column()) for f in fields if f.is_reference]
            for column_name, column in fk_columns:
                self.synthesizer.validate_column(table.name, column_name, column)

            field_operations = [FieldOperations(f, operations_for_field(f)) for f in fields]

            imports = set()
            for f in fields:
                imports.update(f.as_column().required_imports())

            artifacts = TableArtifacts(
                table_name=table.name,
                create_table=self.synthesizer.create_table(table.name, table),
                foreign_key_columns=[
                    self.synthesizer.add_column(table.name, name, column)
                    for name, column in fk_columns
                ],
                indexes=[
                    self.synthesizer.add_index(table.name, index.name, index)
                    for index in table.indexes
                ],
                fields=fields,
                field_operations=field_operations,
                capabilities=required_capabilities(
                    spec for fo in field_operations for spec in fo.operations
                ),
                imports=sorted(imports),
                primary_key=PrimaryKeySummary.for_table(table),
            )

            log_checkpoint(
                "table_generated",
                data={"statements": len(artifacts.statements), "fields": len(fields)},
            )
            return artifacts

    def generate(self, table_names: Optional[List[str]] = None) -> GenerationResult:
        """
        Generate artifacts for every table (or the named ones), in database order.

        Failed tables are recorded in `errors`; the rest still generate.

        Raises:
            KeyError if a requested table name is not in the database
        """
        if table_names is None:
            tables = list(self.database.tables)
        else:
            tables = [self.database.get_table_or_raise(name) for name in table_names]

        result = GenerationResult(dialect=self.dialect)

        with log_context(schema=self.database.name, dialect=self.dialect):
            for table in tables:
                try:
                    result.artifacts[table.name] = self.generate_table(table)
                except SchemaGenerationError as e:
                    logger.warning(f"Skipping table {table.name}: {e}")
                    result.errors[table.name] = e

            logger.info(
                f"Generated {len(result.artifacts)} of {len(tables)} tables",
                extra={"failed": sorted(result.errors)},
            )

        return result


__all__ = [
    "CaptureStrategy",
    "PrimaryKeySummary",
    "FieldOperations",
    "TableArtifacts",
    "GenerationResult",
    "GenerationService",
]
