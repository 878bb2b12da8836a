# ============================================================================
# DEFINITION LOADER TESTS
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Tests - YAML discovery, parsing and validation
# PURPOSE: Verify file discovery and per-file error collection
# CREATED: 18 OCT 2026
# ============================================================================
"""
Definition Loader Tests

Tests:
1. Discovery: *.yaml and *.yml, sorted, recursive or not
2. Empty documents yield empty collections
3. Broken files are collected, not raised, with validation details
4. A missing directory raises NotADirectoryError

Run with:
    pytest tests/test_definition_loader.py -v
"""

import textwrap

import pytest

from services.definition_loader import DefinitionLoader, LoadResult, load_collections


# ============================================================================
# FIXTURES
# ============================================================================

def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(text), encoding="utf-8")


@pytest.fixture
def defs_dir(tmp_path):
    write(tmp_path / "b_types.yml", """
        enums:
          - name: color
            items: [red, green]
    """)
    write(tmp_path / "a_tables.yaml", """
        tables:
          - name: labels
            comment: Labels
            columns:
              - name: id
                type: int
              - name: color
                type: $public.color
    """)
    write(tmp_path / "nested" / "money.yaml", """
        composites:
          - schema: sales
            name: money
            columns:
              - {name: amount, type: "numeric(12,2)"}
    """)
    write(tmp_path / "README.txt", "not a definition\n")
    return tmp_path


# ============================================================================
# DISCOVERY
# ============================================================================

class TestDiscover:
    def test_recursive_sorted(self, defs_dir):
        files = DefinitionLoader(defs_dir).discover()
        assert [p.relative_to(defs_dir).as_posix() for p in files] == [
            "a_tables.yaml", "b_types.yml", "nested/money.yaml",
        ]

    def test_non_recursive(self, defs_dir):
        files = DefinitionLoader(defs_dir, recursive=False).discover()
        assert [p.name for p in files] == ["a_tables.yaml", "b_types.yml"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotADirectoryError):
            DefinitionLoader(tmp_path / "missing").discover()

    def test_file_is_not_a_directory(self, defs_dir):
        with pytest.raises(NotADirectoryError):
            DefinitionLoader(defs_dir / "a_tables.yaml").load()


# ============================================================================
# LOADING
# ============================================================================

class TestLoad:
    def test_collections_in_file_order(self, defs_dir):
        result = DefinitionLoader(defs_dir, max_workers=2).load()
        assert result.success
        assert len(result.collections) == 3
        assert result.collections[0].tables[0].name == "labels"
        assert result.collections[1].enums[0].items == ["red", "green"]
        assert result.collections[2].composites[0].qualified_name == "sales.money"

    def test_empty_directory(self, tmp_path):
        result = DefinitionLoader(tmp_path).load()
        assert result.success
        assert result.files == []
        assert result.collections == []

    def test_empty_document(self, tmp_path):
        write(tmp_path / "empty.yaml", "")
        result = DefinitionLoader(tmp_path).load()
        assert result.success
        assert result.collections[0].is_empty()

    def test_convenience_function(self, defs_dir):
        result = load_collections(defs_dir, recursive=False)
        assert isinstance(result, LoadResult)
        assert len(result.collections) == 2


class TestLoadErrors:
    def test_invalid_yaml_collected(self, tmp_path):
        write(tmp_path / "good.yaml", "enums: [{name: a, items: [x]}]\n")
        write(tmp_path / "broken.yaml", "enums: [unclosed\n")
        result = DefinitionLoader(tmp_path).load()
        assert not result.success
        assert len(result.collections) == 1
        assert [e.path for e in result.errors] == ["broken.yaml"]
        assert "YAML parse error" in result.errors[0].message

    def test_validation_details(self, tmp_path):
        write(tmp_path / "bad.yaml", """
            tables:
              - name: t
                columns:
                  - {name: "bad name", type: int}
        """)
        result = DefinitionLoader(tmp_path).load()
        error = result.errors[0]
        assert error.path == "bad.yaml"
        assert "validation error" in error.message
        assert any(d["loc"].startswith("tables.0.columns.0.name") for d in error.details)

    def test_every_broken_file_reported(self, tmp_path):
        write(tmp_path / "one.yaml", "tables: [{name: t}]\n")
        write(tmp_path / "two.yaml", "views: []\n")
        result = DefinitionLoader(tmp_path).load()
        assert sorted(e.path for e in result.errors) == ["one.yaml", "two.yaml"]
        assert result.to_dict()["success"] is False

    def test_non_mapping_document(self, tmp_path):
        write(tmp_path / "list.yaml", "- just\n- a list\n")
        result = DefinitionLoader(tmp_path).load()
        assert "must be a mapping" in result.errors[0].message

    def test_fail_fast_stops_successful_load(self, tmp_path):
        write(tmp_path / "a_bad.yaml", "tables: [{name: t}]\n")
        for i in range(5):
            write(tmp_path / f"z_{i}.yaml", f"enums: [{{name: e{i}, items: [x]}}]\n")
        result = DefinitionLoader(tmp_path, max_workers=1, fail_fast=True).load()
        assert not result.success
        assert len(result.errors) == 1
        assert len(result.collections) + result.cancelled == 5
