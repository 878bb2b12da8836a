# ============================================================================
# SQL OBJECT
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Renderable wrapper over one definition
# PURPOSE: Bind a definition to its kind and qualified name, render its DDL
# CREATED: 18 OCT 2026
# EXPORTS: SqlObject
# DEPENDENCIES: core.models, core.schema.ddl_utils
# ============================================================================
"""
SqlObject - one renderable DDL unit.

An SqlObject wraps exactly one of:
    - EnumDefinition       (kind ENUM)
    - CompositeDefinition  (kind COMPOSITE)
    - TableDefinition      (kind TABLE)
    - schema name string   (kind SCHEMA)

Objects are immutable and rendering is a pure function of the wrapped
definition, so rendering twice yields identical text.

Usage:
    obj = SqlObject.for_enum(color)
    print(obj.render_create_statement())
"""

from dataclasses import dataclass
from typing import List, Union

from core.contracts import SqlObjectKind, UnsupportedDefinitionError
from core.models import (
    ColumnDefinition,
    CompositeDefinition,
    EnumDefinition,
    TableDefinition,
)
from core.schema.ddl_utils import (
    CommentBuilder,
    SchemaUtils,
    TableBuilder,
    TypeBuilder,
)

Definition = Union[EnumDefinition, CompositeDefinition, TableDefinition, str]


@dataclass(frozen=True, eq=False)
class SqlObject:
    """Tagged wrapper: `kind` says which definition type `definition` holds."""
    kind: SqlObjectKind
    qualified_name: str
    definition: Definition

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def for_enum(cls, definition: EnumDefinition) -> "SqlObject":
        return cls(SqlObjectKind.ENUM, definition.qualified_name, definition)

    @classmethod
    def for_composite(cls, definition: CompositeDefinition) -> "SqlObject":
        return cls(SqlObjectKind.COMPOSITE, definition.qualified_name, definition)

    @classmethod
    def for_table(cls, definition: TableDefinition) -> "SqlObject":
        return cls(SqlObjectKind.TABLE, definition.qualified_name, definition)

    @classmethod
    def for_schema(cls, schema: str) -> "SqlObject":
        return cls(SqlObjectKind.SCHEMA, schema, schema)

    @classmethod
    def from_definition(cls, definition: Definition) -> "SqlObject":
        """
        Wrap any supported definition.

        Raises:
            UnsupportedDefinitionError: for anything else
        """
        if isinstance(definition, EnumDefinition):
            return cls.for_enum(definition)
        if isinstance(definition, CompositeDefinition):
            return cls.for_composite(definition)
        if isinstance(definition, TableDefinition):
            return cls.for_table(definition)
        if isinstance(definition, str):
            return cls.for_schema(definition)
        raise UnsupportedDefinitionError(
            f"Cannot wrap {type(definition).__name__} as a SQL object"
        )

    # =========================================================================
    # RENDERING
    # =========================================================================

    def render_create_statement(self) -> str:
        """Render the CREATE statement block (plus COMMENT statements)."""
        if self.kind == SqlObjectKind.ENUM:
            return self._render_enum(self.definition)
        if self.kind == SqlObjectKind.COMPOSITE:
            return self._render_composite(self.definition)
        if self.kind == SqlObjectKind.TABLE:
            return self._render_table(self.definition)
        if self.kind == SqlObjectKind.SCHEMA:
            return SchemaUtils.create_schema(self.qualified_name)
        raise UnsupportedDefinitionError(f"Unknown object kind: {self.kind}")

    def render_drop_statement(self) -> str:
        """Destructive DROP statement; only schemas are dropped (CASCADE)."""
        if self.kind != SqlObjectKind.SCHEMA:
            raise UnsupportedDefinitionError(f"DROP is only rendered for schemas, not {self.kind.value}")
        return SchemaUtils.drop_schema(self.qualified_name)

    def _render_enum(self, enum: EnumDefinition) -> str:
        return (
            TypeBuilder.enum(self.qualified_name, enum.items)
            + CommentBuilder.on_type(self.qualified_name, enum.comment)
        )

    def _render_composite(self, composite: CompositeDefinition) -> str:
        # Composite attributes cannot carry constraints
        attributes = [f"{c.name} {c.sql_type}" for c in composite.columns]
        return (
            TypeBuilder.composite(self.qualified_name, attributes)
            + CommentBuilder.on_type(self.qualified_name, composite.comment)
            + self._render_column_comments(composite.columns)
        )

    def _render_table(self, table: TableDefinition) -> str:
        columns = [
            TableBuilder.column(c.name, c.sql_type, identity=c.is_identity(), nullable=c.nullable)
            for c in table.columns
        ]
        return (
            TableBuilder.create(self.qualified_name, columns, unlogged=table.options.unlogged)
            + CommentBuilder.on_table(self.qualified_name, table.comment)
            + self._render_column_comments(table.columns)
        )

    def _render_column_comments(self, columns: List[ColumnDefinition]) -> str:
        return "".join(
            CommentBuilder.on_column(self.qualified_name, c.name, c.comment)
            for c in columns
            if c.comment
        )

    def __repr__(self) -> str:
        return f"SqlObject({self.kind.value}, {self.qualified_name})"


__all__ = ["SqlObject"]
