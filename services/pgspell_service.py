# ============================================================================
# PGSPELL SERVICE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Build orchestration
# PURPOSE: Load definitions and build ordered, deduplicated SQL objects
# CREATED: 18 OCT 2026
# ============================================================================
"""
PgSpell Service

Owns one DefinitionRegistry and builds ordered sequences of SqlObjects
from it. Each build:

    1. filters the relevant registry mapping by an optional name predicate
    2. optionally expands every selected object through the walker
    3. concatenates the per-object sequences in selection order
    4. reverses the concatenated sequence (dependencies before dependents)
    5. keeps the first occurrence of each (kind, qualified name)

Schema and enum builds skip steps 2 and 4.

Rendered in order, the result never references an object before it is
created (for acyclic definitions).

Usage:
    service = PgSpellService()
    if service.load_definitions("./definitions"):
        for obj in service.build_table_sql(with_dependencies=True):
            print(obj.render_create_statement())
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from core.contracts import DuplicateDefinitionError
from core.logging import ComponentType, get_logger
from core.models import DefinitionCollection
from core.schema import SqlObject
from services.definition_loader import load_collections
from services.definition_registry import DefinitionRegistry
from services.dependency_walker import DependencyWalker

logger = get_logger(__name__, ComponentType.SERVICE)

NameFilter = Callable[[str], bool]


def _select(names: Iterable[str], name_filter: Optional[NameFilter]) -> List[str]:
    return [name for name in names if name_filter is None or name_filter(name)]


def _distinct(objects: Iterable[SqlObject]) -> Tuple[SqlObject, ...]:
    """Keep the first occurrence of each object; kinds do not shadow each other."""
    seen = set()
    result = []
    for obj in objects:
        key = (obj.kind, obj.qualified_name)
        if key in seen:
            continue
        seen.add(key)
        result.append(obj)
    return tuple(result)


class PgSpellService:
    """Service for loading definitions and building SQL objects."""

    def __init__(self, registry: Optional[DefinitionRegistry] = None, max_workers: Optional[int] = None):
        """
        Args:
            registry: Registry to build from (a fresh one by default)
            max_workers: Parallel document parse limit for load_definitions
        """
        self.registry = registry if registry is not None else DefinitionRegistry()
        self.walker = DependencyWalker(self.registry)
        self.max_workers = max_workers

    # =========================================================================
    # LOADING
    # =========================================================================

    def clear_definitions(self) -> None:
        """Empty the registry, permitting a reload."""
        self.registry.clear()

    def merge_collections(self, collections: Iterable[DefinitionCollection]) -> None:
        """
        Merge already-validated collections into the registry.

        Raises:
            DuplicateDefinitionError: nothing is merged in that case
        """
        self.registry.merge(collections)

    def load_definitions(self, source_dir: Union[str, Path], recursive: bool = True) -> bool:
        """
        Load, validate and merge every definition document under source_dir.

        The registry is only touched when every document loaded cleanly.

        Returns:
            True on success, False if any document failed or names collide
        """
        if not source_dir:
            raise ValueError("source_dir is required")

        result = load_collections(source_dir, recursive=recursive, max_workers=self.max_workers)
        if not result.success:
            return False

        try:
            self.merge_collections(result.collections)
        except DuplicateDefinitionError as e:
            for category, name in e.duplicates:
                logger.error(f"Duplicate {category} definition: {name}")
            return False
        return True

    # =========================================================================
    # BUILDING
    # =========================================================================

    def build_schema_sql(self, name_filter: Optional[NameFilter] = None) -> Tuple[SqlObject, ...]:
        """CREATE SCHEMA objects for every inferred schema."""
        objects = [SqlObject.for_schema(s) for s in _select(self.registry.schemas, name_filter)]
        return _distinct(objects)

    def build_enum_sql(self, name_filter: Optional[NameFilter] = None) -> Tuple[SqlObject, ...]:
        """Enum objects; enums have no dependencies."""
        enums = self.registry.enums
        objects = [SqlObject.for_enum(enums[n]) for n in _select(enums, name_filter)]
        return _distinct(objects)

    def build_composite_sql(
        self,
        name_filter: Optional[NameFilter] = None,
        with_dependencies: bool = False,
    ) -> Tuple[SqlObject, ...]:
        """Composite objects, optionally preceded by what they reference."""
        composites = self.registry.composites
        roots = [SqlObject.for_composite(composites[n]) for n in _select(composites, name_filter)]
        return self._expand(roots, with_dependencies)

    def build_table_sql(
        self,
        name_filter: Optional[NameFilter] = None,
        with_dependencies: bool = False,
    ) -> Tuple[SqlObject, ...]:
        """Table objects, optionally preceded by what they reference."""
        tables = self.registry.tables
        roots = [SqlObject.for_table(tables[n]) for n in _select(tables, name_filter)]
        return self._expand(roots, with_dependencies)

    def _expand(self, roots: List[SqlObject], with_dependencies: bool) -> Tuple[SqlObject, ...]:
        objects: List[SqlObject] = []
        for root in roots:
            if with_dependencies:
                objects.extend(self.walker.walk(root))
            else:
                objects.append(root)
        # Walks are root-first; reversed, every dependency precedes its dependents
        return _distinct(reversed(objects))


__all__ = ["PgSpellService", "NameFilter"]
