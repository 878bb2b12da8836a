# ============================================================================
# DEFINITION MODELS
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core model - Declarative schema definitions
# PURPOSE: Define enums, composites, tables and columns loaded from YAML
# CREATED: 18 OCT 2026
# EXPORTS: ColumnDefinition, TableOptions, EnumDefinition, CompositeDefinition,
#          TableDefinition, DefinitionCollection
# DEPENDENCIES: pydantic
# ============================================================================
"""
Definition Models

A DefinitionCollection is the parsed form of one YAML document:

    enums:
      - schema: public
        name: color
        comment: Basic colors
        items: [red, green]
    composites:
      - name: money
        columns:
          - {name: amount, type: "numeric(12,2)"}
          - {name: currency, type: text}
    tables:
      - schema: sales
        name: orders
        options: {unlogged: false}
        columns:
          - {name: id, type: bigint}
          - {name: total, type: $public.money}
          - {name: color, type: $public.color, nullable: false}

Column types starting with `$` reference another definition by qualified
name. The classification is done once, when the column is constructed.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from core.contracts import TypeRef

NAME_PATTERN = r"^[A-Za-z0-9_]+$"
DEFAULT_SCHEMA = "public"


class ColumnDefinition(BaseModel):
    """A column of a table or an attribute of a composite type."""
    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., description="Data type, may include array specifiers or a $reference")
    name: str = Field(..., pattern=NAME_PATTERN)
    nullable: bool = True
    comment: str = ""
    identity: bool = Field(
        default=False,
        description="Render as 'generated always as identity primary key'"
    )

    _type_ref: TypeRef = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._type_ref = TypeRef.parse(self.type)

    @property
    def type_ref(self) -> TypeRef:
        """Column type classified as reference or literal."""
        return self._type_ref

    @property
    def sql_type(self) -> str:
        """Type text as it appears in DDL (sigil stripped)."""
        return self._type_ref.text

    def is_identity(self) -> bool:
        """Identity by explicit flag or by the `id` naming convention."""
        return self.identity or self.name == "id"


class TableOptions(BaseModel):
    """Table storage options."""
    model_config = ConfigDict(extra="forbid")

    unlogged: bool = Field(
        default=False,
        description="Create as UNLOGGED (not written to the WAL, truncated after a crash)"
    )


class _SchemaObject(BaseModel):
    """Fields shared by every schema-qualified definition."""
    # `schema` shadows a BaseModel attribute, hence the alias
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_: str = Field(default=DEFAULT_SCHEMA, alias="schema", pattern=NAME_PATTERN)
    name: str = Field(..., pattern=NAME_PATTERN)
    comment: str = ""

    @property
    def schema_name(self) -> str:
        return self.schema_

    @property
    def qualified_name(self) -> str:
        """`schema.name` - unique within the definition's category."""
        return f"{self.schema_}.{self.name}"


class EnumDefinition(_SchemaObject):
    """An enumerated type: ordered list of labels."""
    items: List[str] = Field(..., min_length=1)


class CompositeDefinition(_SchemaObject):
    """A composite (row) type."""
    columns: List[ColumnDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_no_identity(self) -> "CompositeDefinition":
        flagged = [c.name for c in self.columns if c.identity]
        if flagged:
            raise ValueError(
                f"Composite {self.qualified_name} cannot have identity columns: {flagged}"
            )
        return self


class TableDefinition(_SchemaObject):
    """A table with at most one identity primary key column."""
    options: TableOptions = Field(default_factory=TableOptions)
    columns: List[ColumnDefinition] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_single_identity(self) -> "TableDefinition":
        identity = [c.name for c in self.columns if c.is_identity()]
        if len(identity) > 1:
            raise ValueError(
                f"Table {self.qualified_name} has multiple identity columns: {identity}"
            )
        return self

    @property
    def identity_column(self) -> Optional[ColumnDefinition]:
        for column in self.columns:
            if column.is_identity():
                return column
        return None


class DefinitionCollection(BaseModel):
    """All definitions declared in one source document."""
    model_config = ConfigDict(extra="forbid")

    tables: List[TableDefinition] = Field(default_factory=list)
    composites: List[CompositeDefinition] = Field(default_factory=list)
    enums: List[EnumDefinition] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def drop_null_sections(cls, data: Any) -> Any:
        """Allow `tables:` with no value as shorthand for an empty list."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def is_empty(self) -> bool:
        return not (self.tables or self.composites or self.enums)


__all__ = [
    "NAME_PATTERN",
    "DEFAULT_SCHEMA",
    "ColumnDefinition",
    "TableOptions",
    "EnumDefinition",
    "CompositeDefinition",
    "TableDefinition",
    "DefinitionCollection",
]
