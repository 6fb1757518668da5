# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for naming conventions and generation runs
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides defaults for naming conventions and generation runs.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Loaded once per process, never mutated afterwards
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from core.contracts import DialectName


@dataclass(frozen=True)
class NamingDefaults:
    """
    Naming conventions for derived schema elements.

    Foreign key columns without explicit names are called
    <prefix>_<target table>_<target pk column>.
    """
    foreign_key_prefix: str = "fk"

    # Indentation of column clauses inside CREATE TABLE
    indent: str = "    "

    def foreign_key_column(self, table_name: str, column_name: str) -> str:
        """Conventional name of a foreign key column."""
        return f"{self.foreign_key_prefix}_{table_name}_{column_name}"

    @classmethod
    def from_env(cls) -> "NamingDefaults":
        """Create from environment variables."""
        return cls(
            foreign_key_prefix=os.getenv("FK_PREFIX", "fk"),
        )


@dataclass(frozen=True)
class GeneratorDefaults:
    """
    Defaults for a generation run.
    """
    dialect: str = DialectName.MYSQL.value
    schemas_dir: str = "schemas"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "GeneratorDefaults":
        """Create from environment variables."""
        return cls(
            dialect=os.getenv("SCHEMA_DIALECT", DialectName.MYSQL.value),
            schemas_dir=os.getenv("SCHEMAS_DIR", "schemas"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            json_logs=os.getenv("LOG_FORMAT", "").lower() == "json",
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    naming: NamingDefaults = field(default_factory=NamingDefaults)
    generator: GeneratorDefaults = field(default_factory=GeneratorDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            naming=NamingDefaults.from_env(),
            generator=GeneratorDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "NamingDefaults",
    "GeneratorDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
