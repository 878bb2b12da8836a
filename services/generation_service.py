# ============================================================================
# GENERATION SERVICE
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Script generation orchestrator
# PURPOSE: Load definitions, build every section and write one DDL script
# CREATED: 18 OCT 2026
# ============================================================================
"""
Generation Service

Produces the complete DDL script for a definitions directory:

1. Schema creation (optionally preceded by DROP SCHEMA ... CASCADE)
2. Enum types
3. Composite types (with dependencies)
4. Tables (with dependencies)

An object already emitted by an earlier section is not repeated.

Usage:
    from core.config import get_defaults
    from services.generation_service import GenerationService

    result = GenerationService(get_defaults()).run()
    if not result.success:
        print(result.errors)
"""

import fnmatch
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from core.config import GenerateDefaults
from core.contracts import (
    CycleDetectedError,
    DefinitionLoadError,
    DuplicateDefinitionError,
    SqlObjectKind,
)
from core.logging import ComponentType, get_logger, log_context
from core.schema import SqlObject
from services.definition_loader import DefinitionLoader
from services.pgspell_service import NameFilter, PgSpellService

logger = get_logger(__name__, ComponentType.SERVICE)


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass
class GenerationResult:
    """Complete result of one generation run."""
    success: bool
    object_count: int = 0
    output_path: Optional[str] = None
    sql: str = ""
    errors: List[str] = field(default_factory=list)
    sections: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "object_count": self.object_count,
            "output_path": self.output_path,
            "sections": self.sections,
            "errors": self.errors,
        }


# ============================================================================
# HELPERS
# ============================================================================

def render_script(statements: Iterable[str], header: Optional[str] = "--Auto generated") -> str:
    """
    Join rendered statements with a blank line, under an optional header.

    Args:
        statements: Rendered statement blocks, in emission order
        header: Single comment line placed first (None for no header)
    """
    blocks = [s.rstrip("\n") for s in statements]
    parts = [header] if header else []
    parts.extend(blocks)
    return "\n\n".join(parts) + "\n"


def glob_filter(patterns: Sequence[str]) -> Optional[NameFilter]:
    """Name filter matching any of the fnmatch patterns (None if no patterns)."""
    if not patterns:
        return None
    return lambda name: any(fnmatch.fnmatchcase(name, p) for p in patterns)


# ============================================================================
# SERVICE
# ============================================================================

class GenerationService:
    """Generates the DDL script described by GenerateDefaults."""

    def __init__(
        self,
        settings: GenerateDefaults,
        name_filter: Optional[NameFilter] = None,
        service: Optional[PgSpellService] = None,
    ):
        """
        Args:
            settings: Input/output locations and generation options
            name_filter: Applied to enums, composites and tables (not schemas)
            service: Build service to use (a fresh one by default)
        """
        self.settings = settings
        self.name_filter = name_filter
        self.service = service or PgSpellService(max_workers=settings.max_workers)

    def load(self) -> None:
        """
        Reload the registry from settings.path_in.

        Raises:
            DefinitionLoadError: with every file error collected
            DuplicateDefinitionError: when names collide across documents
        """
        self.service.clear_definitions()
        loader = DefinitionLoader(
            self.settings.path_in,
            recursive=self.settings.recursive,
            max_workers=self.settings.max_workers,
        )
        result = loader.load()
        if not result.success:
            raise DefinitionLoadError(result.errors)
        self.service.merge_collections(result.collections)

    def build(self) -> Tuple[List[str], Dict[str, int]]:
        """
        Render every section in emission order.

        Returns:
            (statements, per-section object counts)
        """
        emitted: Set[Tuple[SqlObjectKind, str]] = set()
        statements: List[str] = []
        sections: Dict[str, int] = {}

        def emit(section: str, objects: Iterable[SqlObject]) -> None:
            count = 0
            for obj in objects:
                key = (obj.kind, obj.qualified_name)
                if key in emitted:
                    continue
                emitted.add(key)
                with log_context(object_name=obj.qualified_name, object_kind=obj.kind.value):
                    if obj.kind == SqlObjectKind.SCHEMA and self.settings.destructive:
                        statements.append(obj.render_drop_statement())
                    statements.append(obj.render_create_statement())
                    logger.debug("Rendered object")
                count += 1
            sections[section] = count

        emit("schemas", self.service.build_schema_sql())
        emit("enums", self.service.build_enum_sql(self.name_filter))
        emit("composites", self.service.build_composite_sql(self.name_filter, with_dependencies=True))
        emit("tables", self.service.build_table_sql(self.name_filter, with_dependencies=True))
        return statements, sections

    def write(self, sql: str) -> str:
        """Write the script to settings.output_path, creating directories."""
        path = self.settings.output_path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(sql)
        return path

    def run(self, dry_run: bool = False) -> GenerationResult:
        """
        Load, build, render and (unless dry_run) write the script.

        Failures are reported on the result, never raised.
        """
        with log_context(operation="generate"):
            logger.info(f"Generating DDL from {self.settings.path_in}")
            try:
                self.load()
                statements, sections = self.build()
            except DefinitionLoadError as e:
                return GenerationResult(success=False, errors=[str(err) for err in e.errors])
            except DuplicateDefinitionError as e:
                errors = [f"Duplicate {category} definition: {name}" for category, name in e.duplicates]
                for error in errors:
                    logger.error(error)
                return GenerationResult(success=False, errors=errors)
            except CycleDetectedError as e:
                logger.error(str(e))
                return GenerationResult(success=False, errors=[str(e)])
            except NotADirectoryError as e:
                logger.error(str(e))
                return GenerationResult(success=False, errors=[str(e)])

            object_count = sum(sections.values())
            sql = render_script(statements, header=self.settings.header)
            result = GenerationResult(
                success=True,
                object_count=object_count,
                sql=sql,
                sections=sections,
            )

            if dry_run:
                logger.info(f"[DRY RUN] Rendered {object_count} objects")
                return result

            try:
                result.output_path = self.write(sql)
            except OSError as e:
                error = f"Cannot write {self.settings.output_path}: {e}"
                logger.error(error)
                result.success = False
                result.errors.append(error)
                return result
            logger.info(f"Wrote {object_count} objects to {result.output_path}")
            return result


__all__ = [
    "GenerationResult",
    "GenerationService",
    "render_script",
    "glob_filter",
]
