# ============================================================================
# GENERATION SERVICE TESTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Tests - End-to-end table generation
# PURPOSE: Verify per-table artifacts, error isolation and key capture
# CREATED: 19 OCT 2026
# ============================================================================
"""
Generation Service Tests

Runs the full pipeline (DDL, references, operations) over small
databases and the example blog schema.

Run with:
    pytest tests/test_generation_service.py -v
"""

from pathlib import Path

import pytest

from core.contracts import Datatype, FieldOrigin
from core.errors import (
    ColumnCountMismatchError,
    InvalidColumnNameError,
    MissingForeignTableError,
    UnsupportedDatatypeError,
)
from core.models import Column, Database, Reference, Table
from services.generation_service import CaptureStrategy, GenerationService, PrimaryKeySummary
from services.query_catalog import Capability, Operation
from services.schema_service import SchemaService

EXAMPLE_SCHEMAS = Path(__file__).parent.parent / "schemas"


@pytest.fixture
def blog():
    return SchemaService(EXAMPLE_SCHEMAS).load_file(EXAMPLE_SCHEMAS / "blog.yaml")


# ============================================================================
# EXAMPLE SCHEMA
# ============================================================================


class TestBlogSchema:
    def test_all_tables_generate(self, blog):
        result = GenerationService(blog, dialect="mysql").generate()
        assert result.success
        assert list(result.artifacts) == ["users", "posts", "tags"]

    def test_users_create_table(self, blog):
        artifacts = GenerationService(blog, dialect="mysql").generate_table(blog.get_table("users"))
        assert artifacts.create_table == (
            "CREATE TABLE `users` (\n"
            "    `id` INT UNSIGNED NOT NULL AUTO_INCREMENT,\n"
            "    `email` VARCHAR(255) NOT NULL,\n"
            "    `display_name` VARCHAR(64) DEFAULT NULL NULL,\n"
            "    `created_at` DATETIME DEFAULT CURRENT_TIMESTAMP NOT NULL\n"
            "    PRIMARY KEY (`id`)\n);"
        )
        assert artifacts.indexes == [
            "ALTER TABLE `users` ADD UNIQUE INDEX `users_by_email` (`email`);"
        ]
        assert artifacts.foreign_key_columns == []

    def test_posts_foreign_key_columns(self, blog):
        artifacts = GenerationService(blog, dialect="mysql").generate_table(blog.get_table("posts"))
        assert artifacts.foreign_key_columns == [
            "ALTER TABLE `posts` ADD COLUMN `fk_users_id` INT UNSIGNED NOT NULL;",
            "ALTER TABLE `posts` ADD COLUMN `tagged_post_id` INT UNSIGNED NOT NULL;",
            "ALTER TABLE `posts` ADD COLUMN `tagged_label` VARCHAR(32) NOT NULL;",
        ]
        assert artifacts.statements[0] == artifacts.create_table
        assert len(artifacts.statements) == 5

    def test_posts_fields(self, blog):
        artifacts = GenerationService(blog, dialect="mysql").generate_table(blog.get_table("posts"))
        assert [f.name for f in artifacts.fields] == [
            "Id", "Title", "Body", "Rating", "PublishedAt",
            "UsersId", "TagsPostId", "TagsLabel",
        ]
        assert [f.origin for f in artifacts.fields[-3:]] == [
            FieldOrigin.HAS_ONE, FieldOrigin.HAS_MANY, FieldOrigin.HAS_MANY,
        ]

    def test_posts_imports_and_capabilities(self, blog):
        artifacts = GenerationService(blog, dialect="mysql").generate_table(blog.get_table("posts"))
        assert artifacts.imports == [
            "from datetime import datetime",
            "from decimal import Decimal",
            "from typing import Optional",
        ]
        assert artifacts.capabilities == [
            Capability.STRING_FORMATTING,
            Capability.TEMPORAL_COMPARISON,
        ]

    def test_field_operations(self, blog):
        artifacts = GenerationService(blog, dialect="mysql").generate_table(blog.get_table("users"))
        by_name = {fo.field.name: fo.operations for fo in artifacts.field_operations}
        assert len(by_name["Id"]) == 6
        assert len(by_name["Email"]) == 8
        assert len(by_name["DisplayName"]) == 10
        assert by_name["CreatedAt"][2].operation == Operation.BEFORE

    def test_postgresql(self, blog):
        result = GenerationService(blog, dialect="postgresql").generate()
        assert result.success
        users = result.artifacts["users"]
        assert users.create_table.startswith('CREATE TABLE "users" (\n    "id" INTEGER NOT NULL GENERATED BY DEFAULT AS IDENTITY,')
        assert users.indexes == ['CREATE UNIQUE INDEX "users_by_email" ON "users" ("email");']

    def test_statements_in_table_order(self, blog):
        result = GenerationService(blog, dialect="mysql").generate()
        creates = [s for s in result.statements if s.startswith("CREATE TABLE")]
        assert [s.split("`")[1] for s in creates] == ["users", "posts", "tags"]

    def test_selected_tables(self, blog):
        result = GenerationService(blog, dialect="mysql").generate(["tags"])
        assert list(result.artifacts) == ["tags"]

    def test_unknown_table(self, blog):
        with pytest.raises(KeyError):
            GenerationService(blog, dialect="mysql").generate(["comments"])


# ============================================================================
# ERROR ISOLATION
# ============================================================================


class TestErrorIsolation:
    def _database(self):
        return Database(name="mixed", tables=[
            Table(name="good", columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)]),
            Table(name="flags", columns=[Column(name="on", datatype=Datatype.BOOLEAN)]),
            Table(
                name="orphan",
                columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)],
                references=[Reference(table_name="ghost", has_one=True)],
            ),
            Table(name="untyped", columns=[Column(name="c")]),
        ])

    def test_failed_tables_recorded(self):
        result = GenerationService(self._database(), dialect="mysql").generate()
        assert not result.success
        assert list(result.artifacts) == ["good"]
        assert isinstance(result.errors["flags"], UnsupportedDatatypeError)
        assert isinstance(result.errors["orphan"], MissingForeignTableError)
        assert result.errors["untyped"].column == "c"

    def test_dialect_dependent_failure(self):
        result = GenerationService(self._database(), dialect="postgresql").generate()
        assert "flags" in result.artifacts
        assert "flags" not in result.errors

    def test_generate_table_raises(self):
        db = self._database()
        with pytest.raises(UnsupportedDatatypeError):
            GenerationService(db, dialect="mysql").generate_table(db.get_table("flags"))

    def test_unsupported_foreign_key_type_fails_table(self):
        db = Database(tables=[
            Table(name="flags", columns=[Column(name="on", datatype=Datatype.BOOLEAN, primary_key=True)]),
            Table(
                name="t",
                columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)],
                references=[Reference(table_name="flags", has_one=True)],
            ),
        ])
        result = GenerationService(db, dialect="mysql").generate(["t"])
        assert result.errors["t"].column == "fk_flags_on"

    def test_long_conventional_foreign_key_name_fails_table(self):
        target = "t" * 62
        db = Database(tables=[
            Table(name=target, columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)]),
            Table(
                name="child",
                columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)],
                references=[Reference(table_name=target, has_one=True)],
            ),
            Table(name="ok", columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)]),
        ])
        result = GenerationService(db, dialect="mysql").generate()
        assert "ok" in result.artifacts
        assert target in result.artifacts
        error = result.errors["child"]
        assert isinstance(error, InvalidColumnNameError)
        assert error.table == "child"
        assert error.column == f"fk_{target}_id"

    def test_long_explicit_foreign_key_name_fails_table(self):
        db = Database(tables=[
            Table(name="users", columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)]),
            Table(
                name="child",
                columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)],
                references=[Reference(table_name="users", has_one=True, column_names=["x" * 70])],
            ),
            Table(name="ok", columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)]),
        ])
        result = GenerationService(db, dialect="mysql").generate()
        assert list(result.artifacts) == ["users", "ok"]
        assert isinstance(result.errors["child"], InvalidColumnNameError)
        assert "child" in str(result.errors["child"])

    def test_has_many_mismatch_recorded_under_holding_table(self):
        db = Database(tables=[
            Table(
                name="tags",
                columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)],
                references=[Reference(table_name="posts", has_many=True, column_names=["a", "b"])],
            ),
            Table(name="posts", columns=[Column(name="id", datatype=Datatype.INTEGER, primary_key=True)]),
        ])
        result = GenerationService(db, dialect="mysql").generate()
        assert list(result.artifacts) == ["tags"]
        error = result.errors["posts"]
        assert isinstance(error, ColumnCountMismatchError)
        assert error.table == "posts"
        assert error.foreign_table == "tags"

    def test_unknown_dialect(self):
        with pytest.raises(ValueError):
            GenerationService(Database(), dialect="sqlite")


# ============================================================================
# PRIMARY KEY CAPTURE
# ============================================================================


class TestPrimaryKeySummary:
    def test_none(self):
        summary = PrimaryKeySummary.for_table(Table(name="t", columns=[Column(name="a")]))
        assert summary.count == 0
        assert summary.capture == CaptureStrategy.NONE

    def test_auto_increment(self):
        table = Table(name="t", columns=[
            Column(name="id", datatype=Datatype.INTEGER, primary_key=True, auto_increment=True),
        ])
        assert PrimaryKeySummary.for_table(table).capture == CaptureStrategy.AUTO_INCREMENT

    def test_assigned(self):
        table = Table(name="t", columns=[Column(name="code", datatype=Datatype.CHAR, primary_key=True)])
        assert PrimaryKeySummary.for_table(table).capture == CaptureStrategy.ASSIGNED

    def test_composite(self, blog):
        summary = PrimaryKeySummary.for_table(blog.get_table("tags"))
        assert summary.columns == ["post_id", "label"]
        assert summary.count == 2
        assert summary.capture == CaptureStrategy.COMPOSITE
