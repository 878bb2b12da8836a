# ============================================================================
# DEFINITION REGISTRY TESTS
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Tests - Registry merge, schema inference and resolution
# PURPOSE: Verify name-keyed indexing and atomic duplicate handling
# CREATED: 18 OCT 2026
# ============================================================================
"""
Definition Registry Tests

Tests:
1. Merging collections indexes by qualified name
2. Schema names are inferred, distinct, first-seen ordered
3. Duplicates are reported collectively and nothing is merged
4. clear() permits a reload
5. resolve() priority: enums, composites, then tables (table columns only)

Run with:
    pytest tests/test_definition_registry.py -v
"""

import pytest

from core.contracts import DuplicateDefinitionError, SqlObjectKind, TypeRef
from core.models import (
    ColumnDefinition,
    CompositeDefinition,
    DefinitionCollection,
    EnumDefinition,
    TableDefinition,
)
from services.definition_registry import DefinitionRegistry


# ============================================================================
# FIXTURES
# ============================================================================

def make_table(name, schema="public", columns=None):
    columns = columns or [ColumnDefinition(name="id", type="int")]
    return TableDefinition(schema=schema, name=name, columns=columns)


@pytest.fixture
def registry():
    return DefinitionRegistry()


@pytest.fixture
def mixed_collection():
    return DefinitionCollection(
        enums=[EnumDefinition(name="color", items=["red", "green"])],
        composites=[CompositeDefinition(schema="public", name="money")],
        tables=[make_table("orders", schema="sales")],
    )


# ============================================================================
# MERGE
# ============================================================================

class TestMerge:
    def test_indexes_by_qualified_name(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        assert list(registry.enums) == ["public.color"]
        assert list(registry.composites) == ["public.money"]
        assert list(registry.tables) == ["sales.orders"]
        assert len(registry) == 3

    def test_multiple_collections(self, registry):
        registry.merge([
            DefinitionCollection(tables=[make_table("a")]),
            DefinitionCollection(tables=[make_table("b")]),
        ])
        assert list(registry.tables) == ["public.a", "public.b"]

    def test_same_name_different_category_allowed(self, registry):
        registry.merge([
            DefinitionCollection(
                enums=[EnumDefinition(name="thing", items=["x"])],
                tables=[make_table("thing")],
            )
        ])
        assert registry.get_enum("public.thing") is not None
        assert registry.get_table("public.thing") is not None

    def test_same_name_different_schema_allowed(self, registry):
        registry.merge([DefinitionCollection(tables=[make_table("t"), make_table("t", schema="other")])])
        assert set(registry.tables) == {"public.t", "other.t"}

    def test_mappings_are_copies(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        registry.tables.clear()
        assert len(registry.tables) == 1


class TestSchemaInference:
    def test_distinct_schema_set(self, registry):
        registry.merge([
            DefinitionCollection(
                tables=[make_table("orders", schema="sales")],
                composites=[CompositeDefinition(schema="public", name="money")],
            )
        ])
        assert set(registry.schemas) == {"sales", "public"}

    def test_order_independent(self, registry):
        registry.merge([
            DefinitionCollection(composites=[CompositeDefinition(schema="public", name="money")]),
            DefinitionCollection(tables=[make_table("orders", schema="sales")]),
        ])
        other = DefinitionRegistry()
        other.merge([
            DefinitionCollection(tables=[make_table("orders", schema="sales")]),
            DefinitionCollection(composites=[CompositeDefinition(schema="public", name="money")]),
        ])
        assert set(registry.schemas) == set(other.schemas) == {"sales", "public"}

    def test_first_seen_order_enums_composites_tables(self, registry):
        registry.merge([
            DefinitionCollection(
                tables=[make_table("t", schema="c")],
                composites=[CompositeDefinition(schema="b", name="x")],
                enums=[EnumDefinition(schema="a", name="e", items=["1"]), EnumDefinition(schema="b", name="f", items=["1"])],
            )
        ])
        assert registry.schemas == ["a", "b", "c"]

    def test_recomputed_after_second_merge(self, registry):
        registry.merge([DefinitionCollection(tables=[make_table("t")])])
        registry.merge([DefinitionCollection(tables=[make_table("u", schema="extra")])])
        assert registry.schemas == ["public", "extra"]


class TestDuplicates:
    def test_duplicate_within_batch(self, registry):
        with pytest.raises(DuplicateDefinitionError) as exc_info:
            registry.merge([
                DefinitionCollection(tables=[make_table("orders")]),
                DefinitionCollection(tables=[make_table("orders")]),
            ])
        assert exc_info.value.duplicates == [("table", "public.orders")]

    def test_duplicates_reported_collectively(self, registry):
        doc = DefinitionCollection(
            enums=[EnumDefinition(name="e", items=["x"])],
            tables=[make_table("t")],
        )
        with pytest.raises(DuplicateDefinitionError) as exc_info:
            registry.merge([doc, doc])
        assert sorted(exc_info.value.duplicates) == [("enum", "public.e"), ("table", "public.t")]

    def test_nothing_merged_on_duplicate(self, registry):
        with pytest.raises(DuplicateDefinitionError):
            registry.merge([
                DefinitionCollection(enums=[EnumDefinition(name="ok", items=["x"])]),
                DefinitionCollection(tables=[make_table("dup"), make_table("dup")]),
            ])
        assert registry.is_empty()
        assert registry.schemas == []

    def test_duplicate_against_existing(self, registry):
        registry.merge([DefinitionCollection(tables=[make_table("orders")])])
        with pytest.raises(DuplicateDefinitionError):
            registry.merge([DefinitionCollection(tables=[make_table("orders"), make_table("new")])])
        assert list(registry.tables) == ["public.orders"]


class TestClear:
    def test_clear_then_reload(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        registry.clear()
        assert registry.is_empty()
        assert registry.schemas == []

        registry.merge([mixed_collection])
        assert len(registry) == 3


# ============================================================================
# RESOLUTION
# ============================================================================

class TestResolve:
    def test_literal_never_resolves(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        assert registry.resolve(TypeRef.parse("public.color")) is None

    def test_enum(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        obj = registry.resolve(TypeRef.parse("$public.color"))
        assert obj.kind == SqlObjectKind.ENUM
        assert obj.qualified_name == "public.color"

    def test_composite(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        assert registry.resolve(TypeRef.parse("$public.money")).kind == SqlObjectKind.COMPOSITE

    def test_tables_only_when_allowed(self, registry, mixed_collection):
        registry.merge([mixed_collection])
        ref = TypeRef.parse("$sales.orders")
        assert registry.resolve(ref) is None
        assert registry.resolve(ref, include_tables=True).kind == SqlObjectKind.TABLE

    def test_enum_wins_over_composite_and_table(self, registry):
        registry.merge([
            DefinitionCollection(
                enums=[EnumDefinition(name="thing", items=["x"])],
                composites=[CompositeDefinition(name="thing")],
                tables=[make_table("thing")],
            )
        ])
        obj = registry.resolve(TypeRef.parse("$public.thing"), include_tables=True)
        assert obj.kind == SqlObjectKind.ENUM

    def test_unregistered(self, registry):
        assert registry.resolve(TypeRef.parse("$public.missing"), include_tables=True) is None
