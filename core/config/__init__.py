# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the schema generator.
"""

from core.config.defaults import (
    NamingDefaults,
    GeneratorDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "NamingDefaults",
    "GeneratorDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
