# ============================================================================
# REFERENCE RESOLVER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Service - Relationship expansion
# PURPOSE: Flatten has-one and inverse has-many references into field lists
# CREATED: 19 OCT 2026
# ============================================================================
"""
Reference Resolver

Expands declared relationships into flattened field descriptors for
entity, query and repository generation.

Field order for a table:
    1. own columns, declaration order
    2. has-one fields: reference declaration order, then target PK order
    3. has-many fields: database table order, then referencing PK order

Has-many back edges are discovered once, when the resolver is built, by
scanning every table for has-many references. The resulting index
(target table name -> referencing tables) is read-only afterwards, so a
resolver can be shared across threads resolving different tables.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from core.config import NamingDefaults, get_defaults
from core.contracts import Datatype, FieldOrigin
from core.errors import MissingForeignTableError
from core.logging import ComponentType, get_logger, log_context
from core.models import Column, Database, Reference, Table

logger = get_logger(__name__, ComponentType.RESOLVER)


@dataclass(frozen=True)
class FlattenedField:
    """
    One field of a table's flattened field model.

    `name` is the exported identifier used by generated code;
    `column_name` is the physical column it reads and writes.
    """
    name: str
    column_name: str
    datatype: Datatype
    python_type: str
    nullable: bool
    origin: FieldOrigin
    source_table: str
    source_column: str
    primary_key: bool = False
    auto_increment: bool = False
    unsigned: bool = False
    scale: int = 0
    precision: int = 0

    @classmethod
    def own(cls, table: Table, column: Column) -> "FlattenedField":
        return cls(
            name=column.exported_name,
            column_name=column.name,
            datatype=column.datatype,
            python_type=column.python_type,
            nullable=column.nullable,
            origin=FieldOrigin.OWN,
            source_table=table.name,
            source_column=column.name,
            primary_key=column.primary_key,
            auto_increment=column.auto_increment,
            unsigned=column.unsigned,
            scale=column.scale,
            precision=column.precision,
        )

    @classmethod
    def related(
        cls,
        origin: FieldOrigin,
        related_table: Table,
        pk_column: Column,
        column_name: str,
    ) -> "FlattenedField":
        """Field carrying a primary key column of a related table."""
        return cls(
            name=related_table.exported_name + pk_column.exported_name,
            column_name=column_name,
            datatype=pk_column.datatype,
            python_type=pk_column.python_type,
            nullable=pk_column.nullable,
            origin=origin,
            source_table=related_table.name,
            source_column=pk_column.name,
            unsigned=pk_column.unsigned,
            scale=pk_column.scale,
            precision=pk_column.precision,
        )

    @property
    def is_reference(self) -> bool:
        return self.origin != FieldOrigin.OWN

    def as_column(self) -> Column:
        """Physical column definition for this field (never a primary key)."""
        return Column(
            name=self.column_name,
            datatype=self.datatype,
            nullable=self.nullable,
            unsigned=self.unsigned,
            scale=self.scale,
            precision=self.precision,
        )


class ReferenceResolver:
    """
    Resolves references of tables within one database.

    Read-only over the Database; every call is independent.
    """

    def __init__(self, database: Database, naming: Optional[NamingDefaults] = None):
        """
        Initialize the resolver and index has-many back edges.

        Args:
            database: Schema to resolve against
            naming: Naming conventions (global defaults when omitted)
        """
        self.database = database
        self.naming = naming or get_defaults().naming
        self._has_many_index = self._build_has_many_index(database)

    @staticmethod
    def _build_has_many_index(
        database: Database,
    ) -> Mapping[str, Tuple[Tuple[Table, Reference], ...]]:
        index: Dict[str, List[Tuple[Table, Reference]]] = {}
        for table in database.tables:
            for reference in table.has_many_references():
                index.setdefault(reference.table_name, []).append((table, reference))
        return MappingProxyType({name: tuple(refs) for name, refs in index.items()})

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def referencing_tables(self, table_name: str) -> List[Table]:
        """Tables declaring a has-many reference toward `table_name`, in database order."""
        return [table for table, _ in self._has_many_index.get(table_name, ())]

    def foreign_table(self, table: Table, reference: Reference) -> Table:
        """
        Target table of a reference.

        Raises:
            MissingForeignTableError if the target is not in the database
        """
        foreign = self.database.get_table(reference.table_name)
        if foreign is None:
            raise MissingForeignTableError(table.name, reference.table_name)
        return foreign

    # =========================================================================
    # RESOLUTION
    # =========================================================================

    def has_one_fields(self, table: Table) -> List[FlattenedField]:
        """Fields for the primary keys of every table this one has one of."""
        fields = []
        for reference in table.has_one_references():
            foreign = self.foreign_table(table, reference)
            column_names = reference.column_names_for(
                foreign, naming=self.naming, table_name=table.name
            )
            for column_name, pk_column in zip(column_names, foreign.pk_columns()):
                fields.append(
                    FlattenedField.related(FieldOrigin.HAS_ONE, foreign, pk_column, column_name)
                )
        return fields

    def has_many_fields(self, table: Table) -> List[FlattenedField]:
        """
        Fields for the primary keys of every table declaring it has many of this one.

        The referencing table is the "one" side; this table holds its key.
        """
        fields = []
        for owner, reference in self._has_many_index.get(table.name, ()):
            column_names = reference.column_names_for(
                owner, naming=self.naming, table_name=table.name
            )
            for column_name, pk_column in zip(column_names, owner.pk_columns()):
                fields.append(
                    FlattenedField.related(FieldOrigin.HAS_MANY, owner, pk_column, column_name)
                )
        return fields

    def resolve(self, table: Table) -> List[FlattenedField]:
        """
        Flattened field list of a table.

        All-or-nothing: any resolution error propagates and no partial
        list is returned.

        Raises:
            MissingForeignTableError: a has-one target is missing
            ColumnCountMismatchError: explicit column names don't fit a target PK
            InvalidColumnNameError: a foreign key column name is empty or too long
        """
        with log_context(table=table.name):
            fields = [FlattenedField.own(table, column) for column in table.columns]
            has_one = self.has_one_fields(table)
            has_many = self.has_many_fields(table)

            logger.debug(
                f"Resolved {len(fields) + len(has_one) + len(has_many)} fields for {table.name}",
                extra={"own": len(fields), "has_one": len(has_one), "has_many": len(has_many)},
            )
            return fields + has_one + has_many

    def foreign_key_columns(self, table: Table) -> List[Tuple[str, Column]]:
        """
        Physical foreign key columns a table needs, as (name, column) pairs.

        Same order as the reference fields of `resolve`.
        """
        return [
            (field.column_name, field.as_column())
            for field in self.resolve(table)
            if field.is_reference
        ]


__all__ = ["FlattenedField", "ReferenceResolver"]
