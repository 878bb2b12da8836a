# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for definition loading and script output
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides sensible defaults for generating a DDL script.
These can be overridden via environment variables or CLI flags.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _default_workers() -> int:
    return os.cpu_count() or 1


@dataclass(frozen=True)
class GenerateDefaults:
    """
    Defaults for one generation run.

    Controls where definitions are read from and where the script goes.
    """
    path_in: str = "./definitions"
    path_out: str = "."
    output_file: str = "struct.sql"
    recursive: bool = True

    # Parallel document parsing, bounded by available CPUs
    max_workers: int = field(default_factory=_default_workers)

    # Emit DROP SCHEMA ... CASCADE before each CREATE SCHEMA (data loss!)
    destructive: bool = False

    header: str = "--Auto generated"

    @property
    def output_path(self) -> str:
        return os.path.join(self.path_out, self.output_file)

    def with_overrides(self, **overrides) -> "GenerateDefaults":
        """Copy with non-None overrides applied (CLI flags win over env)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> "GenerateDefaults":
        """Create from environment variables."""
        return cls(
            path_in=os.getenv("PGSPELL_PATH_IN", "./definitions"),
            path_out=os.getenv("PGSPELL_PATH_OUT", "."),
            output_file=os.getenv("PGSPELL_OUTPUT_FILE", "struct.sql"),
            recursive=_env_bool("PGSPELL_RECURSIVE", True),
            max_workers=int(os.getenv("PGSPELL_MAX_WORKERS", _default_workers())),
            destructive=_env_bool("PGSPELL_DESTRUCTIVE", False),
            header=os.getenv("PGSPELL_HEADER", "--Auto generated"),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

_defaults: Optional[GenerateDefaults] = None


def get_defaults() -> GenerateDefaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = GenerateDefaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "GenerateDefaults",
    "get_defaults",
    "reset_defaults",
]
