# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Foundation - Core enums, type references and errors
# PURPOSE: Define object kinds, column type classification and domain errors
# CREATED: 18 OCT 2026
# EXPORTS: SqlObjectKind, TypeRef, TYPE_REFERENCE_SIGIL, PgSpellError and subclasses
# DEPENDENCIES: enum, dataclasses
# ============================================================================
"""
Base contracts for pgspell.

These are shared by every layer:
- Models (column type classification at load time)
- Registry and walker (reference resolution, cycle reporting)
- Renderer (object kinds)
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple


# Leading character marking a column type as a reference to a declared type.
TYPE_REFERENCE_SIGIL = "$"


# ============================================================================
# OBJECT KINDS
# ============================================================================

class SqlObjectKind(str, Enum):
    """
    Kinds of objects the renderer can emit.

    Emission order within a generated script:
        SCHEMA -> ENUM -> COMPOSITE -> TABLE
    """
    ENUM = "enum"
    COMPOSITE = "composite"
    TABLE = "table"
    SCHEMA = "schema"

    def has_columns(self) -> bool:
        """Check if objects of this kind declare columns (and so dependencies)."""
        return self in (SqlObjectKind.COMPOSITE, SqlObjectKind.TABLE)


# ============================================================================
# COLUMN TYPE CLASSIFICATION
# ============================================================================

@dataclass(frozen=True)
class TypeRef:
    """
    Classified column type.

    A raw type string starting with the sigil is a reference to a declared
    enum, composite or table by qualified name. Anything else is literal DDL.
    `text` never contains the sigil and is what gets rendered.
    """
    text: str
    is_reference: bool = False

    @classmethod
    def parse(cls, raw: str) -> "TypeRef":
        """Classify a raw column type string."""
        if raw.startswith(TYPE_REFERENCE_SIGIL):
            return cls(text=raw[len(TYPE_REFERENCE_SIGIL):], is_reference=True)
        return cls(text=raw, is_reference=False)

    def __str__(self) -> str:
        return self.text


# ============================================================================
# ERRORS
# ============================================================================

class PgSpellError(Exception):
    """Base class for all pgspell domain errors."""


class DuplicateDefinitionError(PgSpellError):
    """Two definitions share a qualified name within the same category."""

    def __init__(self, duplicates: Sequence[Tuple[str, str]]):
        self.duplicates: List[Tuple[str, str]] = list(duplicates)
        listing = ", ".join(f"{category} {name}" for category, name in self.duplicates)
        super().__init__(f"Duplicate definitions: {listing}")


class CycleDetectedError(PgSpellError):
    """A column type reference chain loops back onto itself."""

    def __init__(self, cycle: Sequence[str]):
        self.cycle: List[str] = list(cycle)
        super().__init__(f"Dependency cycle detected: {' -> '.join(self.cycle)}")


class UnsupportedDefinitionError(PgSpellError, TypeError):
    """A value that is not an enum, composite, table or schema name was wrapped."""


class DefinitionLoadError(PgSpellError):
    """Loading definition documents failed; carries every collected failure."""

    def __init__(self, errors: Sequence):
        self.errors = list(errors)
        super().__init__(f"Failed to load definitions ({len(self.errors)} error(s))")


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "TYPE_REFERENCE_SIGIL",
    "SqlObjectKind",
    "TypeRef",
    "PgSpellError",
    "DuplicateDefinitionError",
    "CycleDetectedError",
    "UnsupportedDefinitionError",
    "DefinitionLoadError",
]
