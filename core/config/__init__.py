# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for pgspell.
"""

from core.config.defaults import (
    GenerateDefaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "GenerateDefaults",
    "get_defaults",
    "reset_defaults",
]
