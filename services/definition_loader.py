# ============================================================================
# DEFINITION LOADER
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# STATUS: Core - Definition document loading
# PURPOSE: Discover, parse and validate YAML definition documents
# CREATED: 18 OCT 2026
# ============================================================================
"""
Definition Loader

Finds YAML definition documents under a directory, parses them with
PyYAML and validates each one into a DefinitionCollection.

Documents are processed in parallel (bounded by CPU count). Every failure
is collected rather than raised, so one run reports all broken files.
Results come back in file order, fully materialized, ready for a single
registry merge.
"""

import os
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from core.logging import ComponentType, get_logger, log_context
from core.models import DefinitionCollection

logger = get_logger(__name__, ComponentType.LOADER)

YAML_PATTERNS = ("*.yaml", "*.yml")


# ============================================================================
# DATA CLASSES
# ============================================================================

@dataclass
class FileError:
    """Failure to load one document."""
    path: str
    message: str
    details: List[Dict[str, Any]] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class LoadResult:
    """Outcome of loading a directory of documents."""
    files: List[str] = field(default_factory=list)
    collections: List[DefinitionCollection] = field(default_factory=list)
    errors: List[FileError] = field(default_factory=list)
    cancelled: int = 0

    @property
    def success(self) -> bool:
        return not self.errors and self.cancelled == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "files": len(self.files),
            "collections": len(self.collections),
            "cancelled": self.cancelled,
            "errors": [str(e) for e in self.errors],
        }


# ============================================================================
# LOADER
# ============================================================================

class DefinitionLoader:
    """Loads DefinitionCollections from a directory of YAML documents."""

    def __init__(
        self,
        source_dir: Union[str, Path],
        recursive: bool = True,
        max_workers: Optional[int] = None,
        fail_fast: bool = False,
    ):
        """
        Args:
            source_dir: Directory containing definition documents
            recursive: Also search subdirectories
            max_workers: Parallel parse limit (defaults to CPU count)
            fail_fast: Cancel files not yet started after the first failure
        """
        self.source_dir = Path(source_dir)
        self.recursive = recursive
        self.max_workers = max_workers or os.cpu_count() or 1
        self.fail_fast = fail_fast

    def discover(self) -> List[Path]:
        """
        List definition documents, sorted for deterministic output.

        Raises:
            NotADirectoryError: if source_dir is not a directory
        """
        if not self.source_dir.is_dir():
            raise NotADirectoryError(f"Not a directory: {self.source_dir}")

        found = set()
        for pattern in YAML_PATTERNS:
            matches = self.source_dir.rglob(pattern) if self.recursive else self.source_dir.glob(pattern)
            found.update(p for p in matches if p.is_file())
        return sorted(found)

    def load(self) -> LoadResult:
        """Parse and validate every discovered document."""
        files = self.discover()
        result = LoadResult(files=[self._relative(p) for p in files])

        if not files:
            logger.info(f"No YAML definition files found in {self.source_dir}")
            return result

        logger.info(f"Found {len(files)} YAML definition file(s) in {self.source_dir}")

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures: List[Future] = [executor.submit(self.load_file, path) for path in files]

            for path, future in zip(files, futures):
                if future.cancelled():
                    result.cancelled += 1
                    continue
                try:
                    result.collections.append(future.result())
                except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
                    error = self._to_file_error(path, e)
                    logger.error(str(error))
                    for detail in error.details:
                        logger.error(f"  {detail['loc']}: {detail['msg']}")
                    result.errors.append(error)
                    if self.fail_fast:
                        for pending in futures:
                            pending.cancel()

        if result.cancelled:
            logger.warning(f"Cancelled {result.cancelled} file(s) after first failure")
        if result.errors:
            logger.error(f"There are processing errors in {len(result.errors)} file(s)")
        else:
            logger.info("All files have been processed")
        return result

    def load_file(self, path: Path) -> DefinitionCollection:
        """
        Parse and validate one document.

        Raises:
            yaml.YAMLError, pydantic.ValidationError, ValueError, OSError
        """
        relative = self._relative(path)
        with log_context(source_file=relative, operation="load"):
            logger.info(f"Processing {relative}")
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

            if data is None:
                return DefinitionCollection()
            if not isinstance(data, dict):
                raise ValueError(f"Top-level document must be a mapping, got {type(data).__name__}")

            collection = DefinitionCollection.model_validate(data)
            logger.debug(
                f"{relative}: {len(collection.enums)} enums, "
                f"{len(collection.composites)} composites, {len(collection.tables)} tables"
            )
            return collection

    def _relative(self, path: Path) -> str:
        try:
            return str(path.relative_to(self.source_dir))
        except ValueError:
            return str(path)

    def _to_file_error(self, path: Path, error: Exception) -> FileError:
        relative = self._relative(path)
        if isinstance(error, ValidationError):
            details = [
                {
                    "loc": ".".join(str(part) for part in d.get("loc", ())),
                    "msg": d.get("msg", ""),
                    "type": d.get("type", ""),
                }
                for d in error.errors()
            ]
            return FileError(relative, f"{error.error_count()} validation error(s)", details)
        if isinstance(error, yaml.YAMLError):
            return FileError(relative, f"YAML parse error: {error}")
        return FileError(relative, str(error))


def load_collections(
    source_dir: Union[str, Path],
    recursive: bool = True,
    max_workers: Optional[int] = None,
) -> LoadResult:
    """
    Convenience function to load a directory of definitions.

    Returns:
        LoadResult with collections and any errors
    """
    return DefinitionLoader(source_dir, recursive=recursive, max_workers=max_workers).load()


__all__ = [
    "FileError",
    "LoadResult",
    "DefinitionLoader",
    "load_collections",
]
