# ============================================================================
# DEPENDENCY WALKER
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Transitive dependency discovery
# PURPOSE: Walk column type references depth-first from a root definition
# CREATED: 18 OCT 2026
# ============================================================================
"""
Dependency Walker

Produces a root object followed by everything it transitively references
through column types. Traversal is depth-first on an explicit stack:

    - A popped node is yielded immediately (pre-order)
    - Composite/table nodes push their resolved column dependencies in
      declaration order, so the LAST column's dependency is visited first
    - Enums are terminal

Shared dependencies are yielded once per path that reaches them. Callers
reverse the walk and keep the first occurrence of each name to get a
dependency-safe order.

Each stack entry carries the chain of objects from the root, so a
reference back into its own chain raises CycleDetectedError instead of
walking forever.
"""

from typing import Iterator, List, Tuple

from core.contracts import CycleDetectedError, SqlObjectKind, UnsupportedDefinitionError
from core.logging import ComponentType, get_logger
from core.schema import SqlObject
from services.definition_registry import DefinitionRegistry

logger = get_logger(__name__, ComponentType.WALKER)

_ChainKey = Tuple[SqlObjectKind, str]


class DependencyWalker:
    """Depth-first walker over a DefinitionRegistry."""

    def __init__(self, registry: DefinitionRegistry):
        self.registry = registry

    def dependencies(self, obj: SqlObject) -> List[SqlObject]:
        """
        Direct dependencies of an object, in column declaration order.

        Composite attributes may reference enums and composites; table
        columns may additionally reference tables.
        """
        if not obj.kind.has_columns():
            return []

        include_tables = obj.kind == SqlObjectKind.TABLE
        result = []
        for column in obj.definition.columns:
            type_ref = column.type_ref
            if not type_ref.is_reference:
                continue
            resolved = self.registry.resolve(type_ref, include_tables=include_tables)
            if resolved is None:
                logger.debug(
                    f"{obj.qualified_name}.{column.name}: reference '{type_ref.text}' "
                    f"not registered, rendering as literal type"
                )
                continue
            result.append(resolved)
        return result

    def walk(self, root: SqlObject) -> Iterator[SqlObject]:
        """
        Yield `root`, then its transitive dependencies depth-first.

        Raises:
            UnsupportedDefinitionError: if `root` is a schema
            CycleDetectedError: if a reference chain loops
        """
        if root.kind == SqlObjectKind.SCHEMA:
            raise UnsupportedDefinitionError("Schemas have no dependencies to walk")

        stack: List[Tuple[SqlObject, Tuple[_ChainKey, ...]]] = [
            (root, ((root.kind, root.qualified_name),))
        ]

        while stack:
            node, chain = stack.pop()
            yield node

            for dependency in self.dependencies(node):
                key = (dependency.kind, dependency.qualified_name)
                if key in chain:
                    start = chain.index(key)
                    cycle = [name for _, name in chain[start:]] + [dependency.qualified_name]
                    raise CycleDetectedError(cycle)
                stack.append((dependency, chain + (key,)))


__all__ = ["DependencyWalker"]
