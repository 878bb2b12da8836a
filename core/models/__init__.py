# ============================================================================
# MODELS MODULE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Model exports
# PURPOSE: Central export point for all Pydantic models
# CREATED: 18 OCT 2026
# ============================================================================
"""
Models Module - Central Export Point

Pydantic models for declarative schema documents. The models are both the
parsed representation and the structural contract: a document that fails
model validation never reaches the registry.
"""

from core.models.definitions import (
    ColumnDefinition,
    TableOptions,
    EnumDefinition,
    CompositeDefinition,
    TableDefinition,
    DefinitionCollection,
    DEFAULT_SCHEMA,
)

__all__ = [
    "ColumnDefinition",
    "TableOptions",
    "EnumDefinition",
    "CompositeDefinition",
    "TableDefinition",
    "DefinitionCollection",
    "DEFAULT_SCHEMA",
]
