# ============================================================================
# SCHEMA MODULE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - DDL rendering
# PURPOSE: Render PostgreSQL DDL for enums, composites, tables and schemas
# CREATED: 18 OCT 2026
# ============================================================================

from core.schema.ddl_utils import (
    TypeBuilder,
    TableBuilder,
    CommentBuilder,
    SchemaUtils,
    quote_literal,
)
from core.schema.sql_object import SqlObject

__all__ = [
    # Renderable wrapper
    "SqlObject",
    # Utilities
    "TypeBuilder",
    "TableBuilder",
    "CommentBuilder",
    "SchemaUtils",
    "quote_literal",
]
