# ============================================================================
# DEFINITION REGISTRY
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Name-keyed index of loaded definitions
# PURPOSE: Merge validated collections, infer schemas, resolve type references
# CREATED: 18 OCT 2026
# ============================================================================
"""
Definition Registry

Holds every enum, composite and table loaded in one load cycle, keyed by
qualified name (`schema.name`), plus the distinct set of schema names
observed on those definitions.

Single-writer discipline: the registry is not locked. Populate it from one
thread (merge is atomic per call), then read it freely while building.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from core.contracts import DuplicateDefinitionError, TypeRef
from core.logging import ComponentType, get_logger
from core.models import (
    CompositeDefinition,
    DefinitionCollection,
    EnumDefinition,
    TableDefinition,
)
from core.schema import SqlObject

logger = get_logger(__name__, ComponentType.REGISTRY)


class DefinitionRegistry:
    """Registry of enums, composites and tables for one load cycle."""

    def __init__(self):
        self._enums: Dict[str, EnumDefinition] = {}
        self._composites: Dict[str, CompositeDefinition] = {}
        self._tables: Dict[str, TableDefinition] = {}
        self._schemas: List[str] = []

    # =========================================================================
    # MUTATION
    # =========================================================================

    def clear(self) -> None:
        """Drop all definitions so the registry can be reloaded."""
        self._enums.clear()
        self._composites.clear()
        self._tables.clear()
        self._schemas.clear()

    def merge(self, collections: Iterable[DefinitionCollection]) -> None:
        """
        Merge validated collections into the registry.

        All collections are staged first. If any qualified name is declared
        twice within a category (in the batch or against what is already
        registered) nothing is merged.

        Raises:
            DuplicateDefinitionError: listing every duplicate found
        """
        enums = dict(self._enums)
        composites = dict(self._composites)
        tables = dict(self._tables)
        duplicates: List[Tuple[str, str]] = []

        for collection in collections:
            self._stage("enum", collection.enums, enums, duplicates)
            self._stage("composite", collection.composites, composites, duplicates)
            self._stage("table", collection.tables, tables, duplicates)

        if duplicates:
            raise DuplicateDefinitionError(duplicates)

        self._enums = enums
        self._composites = composites
        self._tables = tables
        self._schemas = self._infer_schemas()

        logger.info(
            f"Registry holds {len(self._enums)} enums, {len(self._composites)} composites, "
            f"{len(self._tables)} tables in {len(self._schemas)} schemas"
        )

    @staticmethod
    def _stage(category: str, definitions, target: Dict, duplicates: List[Tuple[str, str]]) -> None:
        for definition in definitions:
            name = definition.qualified_name
            if name in target:
                duplicates.append((category, name))
                continue
            target[name] = definition

    def _infer_schemas(self) -> List[str]:
        """Distinct schema names in first-seen order: enums, composites, tables."""
        seen: Dict[str, None] = {}
        for mapping in (self._enums, self._composites, self._tables):
            for definition in mapping.values():
                seen.setdefault(definition.schema_name, None)
        return list(seen)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    @property
    def enums(self) -> Dict[str, EnumDefinition]:
        return dict(self._enums)

    @property
    def composites(self) -> Dict[str, CompositeDefinition]:
        return dict(self._composites)

    @property
    def tables(self) -> Dict[str, TableDefinition]:
        return dict(self._tables)

    @property
    def schemas(self) -> List[str]:
        return list(self._schemas)

    def get_enum(self, qualified_name: str) -> Optional[EnumDefinition]:
        return self._enums.get(qualified_name)

    def get_composite(self, qualified_name: str) -> Optional[CompositeDefinition]:
        return self._composites.get(qualified_name)

    def get_table(self, qualified_name: str) -> Optional[TableDefinition]:
        return self._tables.get(qualified_name)

    def resolve(self, type_ref: TypeRef, include_tables: bool = False) -> Optional[SqlObject]:
        """
        Resolve a column type to the definition it references.

        Lookup order is enums, composites, then tables (table columns only).
        Literal types never resolve.
        """
        if not type_ref.is_reference:
            return None

        name = type_ref.text
        enum = self._enums.get(name)
        if enum is not None:
            return SqlObject.for_enum(enum)
        composite = self._composites.get(name)
        if composite is not None:
            return SqlObject.for_composite(composite)
        if include_tables:
            table = self._tables.get(name)
            if table is not None:
                return SqlObject.for_table(table)
        return None

    def is_empty(self) -> bool:
        return not (self._enums or self._composites or self._tables)

    def __len__(self) -> int:
        return len(self._enums) + len(self._composites) + len(self._tables)


__all__ = ["DefinitionRegistry"]
