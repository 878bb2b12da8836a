# ============================================================================
# CORE MODULE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core module initialization
# PURPOSE: Export contracts, definition models and the SQL renderer
# CREATED: 18 OCT 2026
# ============================================================================

from core.contracts import (
    SqlObjectKind,
    TypeRef,
    PgSpellError,
    DuplicateDefinitionError,
    CycleDetectedError,
    UnsupportedDefinitionError,
    DefinitionLoadError,
)
from core.models import (
    ColumnDefinition,
    TableOptions,
    EnumDefinition,
    CompositeDefinition,
    TableDefinition,
    DefinitionCollection,
)
from core.schema import SqlObject

__all__ = [
    # Contracts
    "SqlObjectKind",
    "TypeRef",
    # Errors
    "PgSpellError",
    "DuplicateDefinitionError",
    "CycleDetectedError",
    "UnsupportedDefinitionError",
    "DefinitionLoadError",
    # Models
    "ColumnDefinition",
    "TableOptions",
    "EnumDefinition",
    "CompositeDefinition",
    "TableDefinition",
    "DefinitionCollection",
    # Schema
    "SqlObject",
]
