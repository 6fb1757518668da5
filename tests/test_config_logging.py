# ============================================================================
# CONFIGURATION AND LOGGING TESTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Tests - Ambient configuration and structured logging
# PURPOSE: Verify environment overrides, log context and formatters
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration and Logging Tests

Run with:
    pytest tests/test_config_logging.py -v
"""

import dataclasses
import io
import json
import logging

import pytest

from core.config import GeneratorDefaults, NamingDefaults, get_defaults, reset_defaults
from core.contracts import Datatype
from core.errors import UnsupportedDatatypeError
from core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    configure_logging,
    get_current_context,
    get_logger,
    log_checkpoint,
    log_context,
)
from core.models import Column
from core.schema import get_synthesizer
from services.schema_service import SchemaService


@pytest.fixture(autouse=True)
def fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================================
# CONFIGURATION
# ============================================================================


class TestNamingDefaults:
    def test_foreign_key_column(self):
        assert NamingDefaults().foreign_key_column("users", "id") == "fk_users_id"

    def test_prefix_from_env(self, monkeypatch):
        monkeypatch.setenv("FK_PREFIX", "ref")
        assert NamingDefaults.from_env().foreign_key_column("users", "id") == "ref_users_id"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            NamingDefaults().foreign_key_prefix = "x"


class TestGeneratorDefaults:
    def test_defaults(self, monkeypatch):
        for var in ("SCHEMA_DIALECT", "SCHEMAS_DIR", "LOG_LEVEL", "LOG_FORMAT"):
            monkeypatch.delenv(var, raising=False)
        defaults = GeneratorDefaults.from_env()
        assert defaults.dialect == "mysql"
        assert defaults.schemas_dir == "schemas"
        assert defaults.log_level == "INFO"
        assert defaults.json_logs is False

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SCHEMA_DIALECT", "postgresql")
        monkeypatch.setenv("SCHEMAS_DIR", "/srv/schemas")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        defaults = GeneratorDefaults.from_env()
        assert defaults.dialect == "postgresql"
        assert defaults.schemas_dir == "/srv/schemas"
        assert defaults.json_logs is True

    def test_global_instance_cached(self, monkeypatch):
        monkeypatch.setenv("SCHEMA_DIALECT", "postgresql")
        first = get_defaults()
        monkeypatch.setenv("SCHEMA_DIALECT", "mysql")
        assert get_defaults() is first
        assert first.generator.dialect == "postgresql"
        reset_defaults()
        assert get_defaults().generator.dialect == "mysql"


# ============================================================================
# LOG CONTEXT
# ============================================================================


class TestLogContext:
    def test_empty_outside_context(self):
        assert get_current_context().to_dict() == {}

    def test_nested_contexts_merge(self):
        with log_context(schema="blog", dialect="mysql"):
            with log_context(table="users"):
                context = get_current_context().to_dict()
                assert context == {"schema": "blog", "dialect": "mysql", "table": "users"}
            assert get_current_context().table is None
        assert get_current_context().schema is None

    def test_none_keeps_outer_value(self):
        with log_context(table="users"):
            with log_context(table=None, column="id"):
                assert get_current_context().table == "users"

    def test_unknown_field(self):
        with pytest.raises(TypeError, match="run_id"):
            with log_context(run_id="abc"):
                pass
        assert get_current_context().to_dict() == {}

    def test_context_popped_on_error(self):
        with pytest.raises(RuntimeError):
            with log_context(table="t"):
                raise RuntimeError("boom")
        assert get_current_context().table is None


# ============================================================================
# FORMATTERS
# ============================================================================


class TestFormatters:
    def _emit(self, formatter, message, component=ComponentType.GENERATOR, **extra):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        base = logging.getLogger("tests.formatters")
        base.handlers[:] = [handler]
        base.propagate = False
        base.setLevel(logging.DEBUG)
        try:
            get_logger("tests.formatters", component).info(message, extra=extra)
        finally:
            base.handlers[:] = []
            base.propagate = True
        return stream.getvalue()

    def test_structured(self):
        with log_context(table="users", dialect="mysql"):
            line = self._emit(StructuredFormatter(), "rendered", columns=3)
        data = json.loads(line)
        assert data["message"] == "rendered"
        assert data["level"] == "INFO"
        assert data["context"] == {"table": "users", "dialect": "mysql", "component": "generator"}
        assert data["data"] == {"columns": 3}

    def test_structured_without_data(self):
        line = self._emit(StructuredFormatter(), "idle", component=None)
        data = json.loads(line)
        assert "context" not in data
        assert "data" not in data

    def test_human(self):
        with log_context(table="users", column="id", dialect="mysql"):
            line = self._emit(HumanFormatter(), "rendered")
        assert "[dialect=mysql, table=users, column=id]" in line
        assert "tests.formatters" in line
        assert line.rstrip().endswith(": rendered")

    def test_human_with_data(self):
        line = self._emit(HumanFormatter(), "rendered", columns=3)
        assert line.rstrip().endswith("rendered {'columns': 3}")

    def test_configure_logging(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("warning", json_output=True, stream=stream)
        assert restore_root_logger.level == logging.WARNING
        logging.getLogger("tests.configured").warning("careful")
        assert json.loads(stream.getvalue())["message"] == "careful"

    def test_checkpoint(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("INFO", json_output=True, stream=stream)
        with log_context(schema="blog", table="users"):
            log_checkpoint("table_generated", data={"statements": 2})
        data = json.loads(stream.getvalue())
        assert data["message"] == "CHECKPOINT: table_generated"
        assert data["context"] == {"schema": "blog", "table": "users"}
        assert data["data"] == {"checkpoint": "table_generated", "statements": 2}


# ============================================================================
# COMPONENT WIRING
# ============================================================================


class TestComponentLogging:
    def _capture(self):
        stream = io.StringIO()
        configure_logging("DEBUG", json_output=True, stream=stream)
        return stream

    def test_rejected_column_logged_by_synthesizer(self, restore_root_logger):
        stream = self._capture()
        synthesizer = get_synthesizer("mysql")
        with pytest.raises(UnsupportedDatatypeError):
            synthesizer.validate_column("flags", "on", Column(name="on", datatype=Datatype.BOOLEAN))
        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        rejected = [r for r in records if r["message"].startswith("Rejected column type")]
        assert len(rejected) == 1
        assert rejected[0]["context"] == {
            "table": "flags", "column": "on", "component": "synthesizer",
        }

    def test_schema_loaded_checkpoint(self, restore_root_logger, tmp_path):
        stream = self._capture()
        path = tmp_path / "shop.yaml"
        path.write_text("tables:\n  - name: items\n    columns:\n      - {name: id, datatype: integer}\n")
        SchemaService(tmp_path).load_file(path)
        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        loaded = [r for r in records if r["message"] == "CHECKPOINT: schema_loaded"]
        assert loaded[0]["context"] == {"schema": "shop"}
        assert loaded[0]["data"] == {"checkpoint": "schema_loaded", "path": str(path), "tables": 1}
