# ============================================================================
# SERVICES MODULE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Business logic layer
# PURPOSE: Definition loading, registry, dependency walking and generation
# CREATED: 18 OCT 2026
# ============================================================================
"""
Services Module

Business logic for pgspell.
Services coordinate between the loader, the registry and the renderer.

Usage:
    from services import PgSpellService

    service = PgSpellService()
    service.load_definitions("./definitions")
    tables = service.build_table_sql(with_dependencies=True)
"""

from .definition_registry import DefinitionRegistry
from .dependency_walker import DependencyWalker
from .definition_loader import DefinitionLoader, LoadResult, FileError
from .pgspell_service import PgSpellService
from .generation_service import GenerationService, GenerationResult, render_script

__all__ = [
    "DefinitionRegistry",
    "DependencyWalker",
    "DefinitionLoader",
    "LoadResult",
    "FileError",
    "PgSpellService",
    "GenerationService",
    "GenerationResult",
    "render_script",
]
