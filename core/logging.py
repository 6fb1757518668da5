# ============================================================================
# STRUCTURED LOGGING
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Structured logging with context
# PURPOSE: Consistent, queryable logging across all components
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging

JSON or human-readable logging for the schema generator.

Every record logged through a ContextLogger carries:
    context - the component plus the schema / table / column / dialect
              being worked on (see log_context)
    data    - the keyword fields passed as `extra=` at the call site

Usage:
    from core.logging import get_logger, log_context, ComponentType

    logger = get_logger(__name__, ComponentType.GENERATOR)

    with log_context(table="users", dialect="mysql"):
        logger.info("Rendering table", extra={"column_count": 5})
"""

import json
import logging
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

from core.config import get_defaults


class ComponentType(str, Enum):
    """Generator components, reported as `context.component`."""
    LOADER = "loader"
    RESOLVER = "resolver"
    SYNTHESIZER = "synthesizer"
    GENERATOR = "generator"
    CLI = "cli"


# ============================================================================
# CONTEXT
# ============================================================================

@dataclass(frozen=True)
class LogContext:
    """What the current thread is generating. Unset fields are omitted."""
    schema: Optional[str] = None
    table: Optional[str] = None
    column: Optional[str] = None
    dialect: Optional[str] = None

    def merged(self, **values) -> "LogContext":
        """
        Copy with `values` layered on top.

        Raises:
            TypeError for a field LogContext doesn't have
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(f"Unknown log context field(s): {', '.join(unknown)}")
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    def to_dict(self) -> Dict[str, str]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


_EMPTY_CONTEXT = LogContext()
_local = threading.local()


def get_current_context() -> LogContext:
    """Logging context of the calling thread."""
    return getattr(_local, "context", _EMPTY_CONTEXT)


@contextmanager
def log_context(**values):
    """
    Layer context fields over the current ones for the duration of a block.

    Example:
        with log_context(schema="blog"):
            with log_context(table="users"):
                logger.info("...")      # context: schema=blog, table=users
    """
    previous = get_current_context()
    _local.context = previous.merged(**values)
    try:
        yield _local.context
    finally:
        _local.context = previous


# ============================================================================
# LOGGER ADAPTER
# ============================================================================

class ContextLogger(logging.LoggerAdapter):
    """
    Logger adapter stamping each record with its component and context.

    Context is captured when the call is made, so records handled later
    (or by another thread) still describe the table they were logged for.
    """

    def __init__(self, logger: logging.Logger, component: Optional[ComponentType] = None):
        super().__init__(logger, {})
        self.component = component

    def process(self, msg, kwargs):
        context = get_current_context().to_dict()
        if self.component is not None:
            context["component"] = self.component.value
        kwargs["extra"] = {
            "context": context,
            "data": dict(kwargs.get("extra") or {}),
        }
        return msg, kwargs


def get_logger(name: str, component: Optional[ComponentType] = None) -> ContextLogger:
    """Context-aware logger for a module."""
    return ContextLogger(logging.getLogger(name), component)


# ============================================================================
# FORMATTERS
# ============================================================================

def _record_context(record: logging.LogRecord) -> Dict[str, Any]:
    # Records from plain loggers carry no captured context
    context = getattr(record, "context", None)
    if context is None:
        return get_current_context().to_dict()
    return context


def _utc(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, timezone.utc)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": _utc(record).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _record_context(record)
        if context:
            payload["context"] = context
        data = getattr(record, "data", None)
        if data:
            payload["data"] = data
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """
    Single-line records for terminals:

        2026-10-19 12:00:00 WARNING  services.generation_service [dialect=mysql, table=flags]: ...
    """

    TAGS = ("dialect", "table", "column")

    def format(self, record: logging.LogRecord) -> str:
        context = _record_context(record)
        tags = ", ".join(f"{key}={context[key]}" for key in self.TAGS if key in context)

        line = f"{_utc(record):%Y-%m-%d %H:%M:%S} {record.levelname:<8} {record.name}"
        if tags:
            line += f" [{tags}]"
        line += f": {record.getMessage()}"

        data = getattr(record, "data", None)
        if data:
            line += f" {data}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    level: Union[str, int] = "INFO",
    json_output: bool = False,
    stream=None,
) -> None:
    """
    Route all logging to one stream handler on the root logger.

    Args:
        level: Log level name or number
        json_output: JSON records (also enabled by LOG_FORMAT=json)
        stream: Output stream; stderr by default so DDL on stdout stays clean
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_output or get_defaults().generator.json_logs:
        formatter = StructuredFormatter()
    else:
        formatter = HumanFormatter()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


# ============================================================================
# CHECKPOINT LOGGING
# ============================================================================

_checkpoint_logger = get_logger("checkpoint")


def log_checkpoint(
    name: str,
    data: Optional[Dict[str, Any]] = None,
    logger: Optional[ContextLogger] = None,
) -> None:
    """
    Log a named checkpoint ("schema_loaded", "table_generated").

    The current context (schema, table, dialect) is attached like on any
    other record; `data` lands next to the checkpoint name.
    """
    (logger or _checkpoint_logger).info(
        f"CHECKPOINT: {name}",
        extra={"checkpoint": name, **(data or {})},
    )


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "ComponentType",
    "LogContext",
    "StructuredFormatter",
    "HumanFormatter",
    "ContextLogger",
    "get_logger",
    "configure_logging",
    "log_context",
    "get_current_context",
    "log_checkpoint",
]
