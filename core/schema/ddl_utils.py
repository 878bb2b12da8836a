# ============================================================================
# DDL UTILITIES
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - DRY utilities for SQL DDL text generation
# PURPOSE: Literal quoting plus type, table, comment and schema builders
# CREATED: 18 OCT 2026
# EXPORTS: quote_literal, TypeBuilder, TableBuilder, CommentBuilder, SchemaUtils
# DEPENDENCIES: none
# ============================================================================
"""
DDL Utilities - Shared SQL Generation Patterns.

All methods return plain strings laid out the way the generated script
should read (one column per line, tab indented). Identifiers are emitted
unquoted: names are restricted to [A-Za-z0-9_] by the definition models.

Usage:
    from core.schema.ddl_utils import CommentBuilder, SchemaUtils

    CommentBuilder.on_type("public.color", "Basic colors")
    # COMMENT ON TYPE public.color IS 'Basic colors';
"""

from typing import List, Sequence

IDENTITY_CLAUSE = "generated always as identity primary key"
NOT_NULL_CLAUSE = "not null"


def quote_literal(value: str) -> str:
    """Quote a string as a SQL literal, doubling embedded single quotes."""
    return "'" + value.replace("'", "''") + "'"


def _column_block(lines: Sequence[str]) -> str:
    """Tab-indented, comma-separated lines with no trailing comma."""
    return ",\n".join(f"\t{line}" for line in lines)


# ============================================================================
# TYPE BUILDER
# ============================================================================

class TypeBuilder:
    """
    Builder for CREATE TYPE statements.
    """

    @staticmethod
    def enum(qualified_name: str, items: Sequence[str]) -> str:
        """CREATE TYPE ... AS ENUM with labels in declared order."""
        labels = ",".join(quote_literal(item) for item in items)
        return f"CREATE TYPE {qualified_name} AS ENUM\n\t({labels});\n"

    @staticmethod
    def composite(qualified_name: str, attributes: Sequence[str]) -> str:
        """CREATE TYPE ... AS (...) from pre-rendered `name type` attributes."""
        body = _column_block(attributes)
        if body:
            body += "\n"
        return f"CREATE TYPE {qualified_name} AS\n(\n{body});\n"


# ============================================================================
# TABLE BUILDER
# ============================================================================

class TableBuilder:
    """
    Builder for CREATE TABLE statements.
    """

    @staticmethod
    def column(name: str, sql_type: str, identity: bool = False, nullable: bool = True) -> str:
        """Render one column line (without indentation or separator)."""
        parts = [name, sql_type]
        if identity:
            parts.append(IDENTITY_CLAUSE)
        elif not nullable:
            parts.append(NOT_NULL_CLAUSE)
        return " ".join(parts)

    @staticmethod
    def create(qualified_name: str, columns: Sequence[str], unlogged: bool = False) -> str:
        """CREATE [UNLOGGED] TABLE IF NOT EXISTS ... from rendered column lines."""
        keyword = "CREATE UNLOGGED TABLE" if unlogged else "CREATE TABLE"
        return f"{keyword} IF NOT EXISTS {qualified_name}\n(\n{_column_block(columns)}\n);\n"


# ============================================================================
# COMMENT BUILDER
# ============================================================================

class CommentBuilder:
    """
    Builder for PostgreSQL COMMENT statements.
    """

    @staticmethod
    def on_type(qualified_name: str, comment: str) -> str:
        return f"COMMENT ON TYPE {qualified_name} IS {quote_literal(comment)};\n"

    @staticmethod
    def on_table(qualified_name: str, comment: str) -> str:
        return f"COMMENT ON TABLE {qualified_name} IS {quote_literal(comment)};\n"

    @staticmethod
    def on_column(qualified_name: str, column: str, comment: str) -> str:
        """Works for table columns and composite type attributes alike."""
        return f"COMMENT ON COLUMN {qualified_name}.{column} IS {quote_literal(comment)};\n"


# ============================================================================
# SCHEMA UTILITIES
# ============================================================================

class SchemaUtils:
    """
    Utility methods for schema-level DDL operations.
    """

    @staticmethod
    def create_schema(schema: str) -> str:
        return f"CREATE SCHEMA IF NOT EXISTS {schema};"

    @staticmethod
    def drop_schema(schema: str) -> str:
        """
        DROP SCHEMA ... CASCADE.

        WARNING: This destroys ALL objects in the schema!
        Only use for development rebuild.
        """
        return f"DROP SCHEMA IF EXISTS {schema} CASCADE;"


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "IDENTITY_CLAUSE",
    "NOT_NULL_CLAUSE",
    "quote_literal",
    "TypeBuilder",
    "TableBuilder",
    "CommentBuilder",
    "SchemaUtils",
]
