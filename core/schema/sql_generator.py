# ============================================================================
# CLAUDE CONTEXT - DIALECT DDL SYNTHESIZER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - DDL generation from schema models
# PURPOSE: Render CREATE TABLE / ADD COLUMN / ADD INDEX per SQL dialect
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: DDLSynthesizer, MySQLSynthesizer, PostgreSQLSynthesizer, get_synthesizer
# DEPENDENCIES: core.models, core.schema.ddl_utils
# ============================================================================
"""
Schema Model to SQL DDL Synthesizer.

One synthesizer class per built-in dialect. The shared base assembles
statements; a dialect contributes its type table, quoting characters and
a few tokens. Output strings are exact: migration writers consume them
verbatim, so whitespace and punctuation are part of the contract.

Column clause order:
    name, type(size), SIGNED|UNSIGNED, DEFAULT ..., NULL|NOT NULL, AUTO_INCREMENT

Usage:
    synthesizer = get_synthesizer("mysql")
    synthesizer.create_table("users", table)
    synthesizer.add_index("users", "by_email", index)
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Dict, Mapping, Optional, Type, Union

from core.config import NamingDefaults, get_defaults
from core.contracts import Category, Datatype, DialectName
from core.errors import InvalidDatatypeError, SchemaGenerationError, UnsupportedDatatypeError
from core.logging import ComponentType, get_logger, log_context
from core.models import Column, Index, Table
from core.schema.ddl_utils import (
    MYSQL_TYPES,
    POSTGRESQL_TYPES,
    join_identifiers,
    quote_identifier,
    quote_literal,
    size_suffix,
)

logger = get_logger(__name__, ComponentType.SYNTHESIZER)


class DDLSynthesizer(ABC):
    """
    Base class for dialect DDL synthesizers.

    Stateless apart from naming configuration; safe to share between
    tables and threads.
    """

    dialect: ClassVar[DialectName]
    type_map: ClassVar[Mapping[Datatype, str]]

    identifier_quote: ClassVar[str] = "`"
    string_quote: ClassVar[str] = '"'
    emit_signedness: ClassVar[bool] = True
    auto_increment_token: ClassVar[str] = "AUTO_INCREMENT"

    def __init__(self, naming: Optional[NamingDefaults] = None):
        self.naming = naming or get_defaults().naming

    # =========================================================================
    # TYPE MAPPING
    # =========================================================================

    def type_string(self, datatype: Union[Datatype, str, None]) -> str:
        """
        Map an abstract datatype to this dialect's type keyword.

        Raises:
            InvalidDatatypeError: datatype is the undefined value (or not a datatype)
            UnsupportedDatatypeError: this dialect has no mapping for it
        """
        if not isinstance(datatype, Datatype):
            try:
                datatype = Datatype(datatype)
            except ValueError:
                raise InvalidDatatypeError(datatype, self.dialect.value)

        if datatype is Datatype.INVALID:
            raise InvalidDatatypeError(datatype, self.dialect.value)

        token = self.type_map.get(datatype)
        if token is None:
            raise UnsupportedDatatypeError(datatype, self.dialect.value)
        return token

    def validate_table(self, table_name: str, table: Table) -> None:
        """
        Check that every column of a table has a type in this dialect.

        Raises the first type error found, annotated with table and column.
        """
        for column in table.columns:
            self.validate_column(table_name, column.name, column)

    def validate_column(self, table_name: str, column_name: str, column: Column) -> None:
        """Check that a column has a type in this dialect."""
        with log_context(table=table_name, column=column_name):
            try:
                self.type_string(column.datatype)
            except (InvalidDatatypeError, UnsupportedDatatypeError) as e:
                logger.debug(f"Rejected column type: {e}")
                raise type(e)(
                    column.datatype, self.dialect.value, table=table_name, column=column_name
                ) from e

    # =========================================================================
    # COLUMN CLAUSE
    # =========================================================================

    def quote(self, name: str) -> str:
        return quote_identifier(name, self.identifier_quote)

    def render_default(self, column: Column) -> Optional[str]:
        """DEFAULT clause for a column, or None when it has none."""
        if column.default is not None:
            if column.category == Category.STRING:
                return f"DEFAULT {quote_literal(column.default, self.string_quote)}"
            return f"DEFAULT {column.default}"
        if column.nullable:
            return "DEFAULT NULL"
        return None

    def generate_column(self, column_name: str, column: Column) -> str:
        """
        Render one column clause.

        An unmapped datatype contributes an empty type token; the size
        suffix and the remaining tokens still render.
        """
        parts = [self.quote(column_name)]

        try:
            token = self.type_string(column.datatype)
        except SchemaGenerationError:
            token = ""
        type_part = token + size_suffix(column.scale, column.precision)
        if type_part:
            parts.append(type_part)

        if self.emit_signedness and column.category == Category.NUMERIC:
            parts.append("UNSIGNED" if column.unsigned else "SIGNED")

        default = self.render_default(column)
        if default:
            parts.append(default)

        parts.append("NULL" if column.nullable else "NOT NULL")

        if column.primary_key and column.auto_increment:
            parts.append(self.auto_increment_token)

        return " ".join(parts)

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def create_table(self, table_name: str, table: Table) -> str:
        """
        Render CREATE TABLE for a table.

        Columns keep declaration order. The PRIMARY KEY line follows the
        last column clause on its own line without a separating comma.
        """
        indent = self.naming.indent
        body = ",\n".join(
            f"{indent}{self.generate_column(c.name, c)}" for c in table.columns
        )

        pk_names = table.pk_column_names()
        if pk_names:
            body += f"\n{indent}PRIMARY KEY ({join_identifiers(pk_names, self.identifier_quote)})"

        logger.debug(
            f"Rendered CREATE TABLE {table_name}",
            extra={"columns": len(table.columns), "primary_key": pk_names},
        )
        return f"CREATE TABLE {self.quote(table_name)} (\n{body}\n);"

    def add_column(self, table_name: str, column_name: str, column: Column) -> str:
        """Render ALTER TABLE ... ADD COLUMN."""
        return (
            f"ALTER TABLE {self.quote(table_name)} "
            f"ADD COLUMN {self.generate_column(column_name, column)};"
        )

    @abstractmethod
    def add_index(self, table_name: str, index_name: str, index: Index) -> str:
        """Render the statement adding an index to a table."""


# ============================================================================
# DIALECTS
# ============================================================================

class MySQLSynthesizer(DDLSynthesizer):
    """MySQL / MariaDB."""

    dialect = DialectName.MYSQL
    type_map = MYSQL_TYPES

    def add_index(self, table_name: str, index_name: str, index: Index) -> str:
        unique = "UNIQUE " if index.unique else ""
        return (
            f"ALTER TABLE {self.quote(table_name)} ADD {unique}INDEX {self.quote(index_name)} "
            f"({join_identifiers(index.columns, self.identifier_quote)});"
        )


class PostgreSQLSynthesizer(DDLSynthesizer):
    """
    PostgreSQL.

    No SIGNED/UNSIGNED tokens, identity columns instead of AUTO_INCREMENT,
    and indexes are created with CREATE INDEX rather than ALTER TABLE.
    """

    dialect = DialectName.POSTGRESQL
    type_map = POSTGRESQL_TYPES

    identifier_quote = '"'
    string_quote = "'"
    emit_signedness = False
    auto_increment_token = "GENERATED BY DEFAULT AS IDENTITY"

    def add_index(self, table_name: str, index_name: str, index: Index) -> str:
        unique = "UNIQUE " if index.unique else ""
        return (
            f"CREATE {unique}INDEX {self.quote(index_name)} ON {self.quote(table_name)} "
            f"({join_identifiers(index.columns, self.identifier_quote)});"
        )


# ============================================================================
# REGISTRY
# ============================================================================

SYNTHESIZERS: Dict[DialectName, Type[DDLSynthesizer]] = {
    DialectName.MYSQL: MySQLSynthesizer,
    DialectName.POSTGRESQL: PostgreSQLSynthesizer,
}


def get_synthesizer(
    dialect: Union[DialectName, str],
    naming: Optional[NamingDefaults] = None,
) -> DDLSynthesizer:
    """
    Get the synthesizer for a built-in dialect.

    Raises:
        ValueError if the dialect is not built in
    """
    try:
        name = DialectName(dialect)
    except ValueError:
        supported = ", ".join(d.value for d in DialectName)
        raise ValueError(f"Unknown dialect: {dialect!r} (supported: {supported})")
    return SYNTHESIZERS[name](naming=naming)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "DDLSynthesizer",
    "MySQLSynthesizer",
    "PostgreSQLSynthesizer",
    "SYNTHESIZERS",
    "get_synthesizer",
]
