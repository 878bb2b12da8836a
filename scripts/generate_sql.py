#!/usr/bin/env python
# ============================================================================
# SQL GENERATION SCRIPT
# ============================================================================
# EPOCH: 1 - DDL GENERATION
# PURPOSE: Generate a PostgreSQL DDL script from YAML definition documents
# USAGE:
#   python scripts/generate_sql.py --dry-run            # Print SQL to stdout
#   python scripts/generate_sql.py                      # Write struct.sql
#   python scripts/generate_sql.py --filter 'sales.*'   # Only matching objects
# ============================================================================

import sys
import os
import argparse
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from __version__ import __version__
from core.config import get_defaults
from core.logging import ComponentType, configure_logging, get_logger
from services.generation_service import GenerationService, glob_filter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate PostgreSQL DDL from YAML schema definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_sql.py --dry-run                  # Preview DDL
  python scripts/generate_sql.py --path-in defs --path-out build
  python scripts/generate_sql.py --filter 'sales.*' --filter 'public.color'

Environment Variables:
  PGSPELL_PATH_IN       Definitions directory (default: ./definitions)
  PGSPELL_PATH_OUT      Output directory (default: .)
  PGSPELL_OUTPUT_FILE   Output file name (default: struct.sql)
  PGSPELL_RECURSIVE     Search subdirectories (default: true)
  PGSPELL_MAX_WORKERS   Parallel parse limit (default: CPU count)
  PGSPELL_DESTRUCTIVE   Emit DROP SCHEMA ... CASCADE (default: false)
  LOG_LEVEL             Log level (default: INFO)
  LOG_FORMAT            'json' for structured logs
        """
    )
    parser.add_argument("--path-in", type=str, help="Directory containing YAML definitions")
    parser.add_argument("--path-out", type=str, help="Directory for the generated script")
    parser.add_argument("--output-file", type=str, help="Generated script file name")
    parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Only read definitions directly inside --path-in"
    )
    parser.add_argument(
        "--filter",
        action="append",
        default=[],
        metavar="GLOB",
        help="Only emit enums/composites/tables whose qualified name matches (repeatable)"
    )
    parser.add_argument(
        "--destructive",
        action="store_true",
        help="Drop each schema (CASCADE) before creating it"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print DDL to stdout without writing"
    )
    parser.add_argument("--json-logs", action="store_true", help="JSON-formatted logs")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument("--version", action="version", version=f"pgspell {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logs go to stderr so a dry run can be piped
    configure_logging(
        level="DEBUG" if args.verbose else os.environ.get("LOG_LEVEL", "INFO"),
        json_output=args.json_logs,
        stream=sys.stderr,
    )
    logger = get_logger("pgspell.cli", ComponentType.CLI)

    settings = get_defaults().with_overrides(
        path_in=args.path_in,
        path_out=args.path_out,
        output_file=args.output_file,
        recursive=False if args.no_recursive else None,
        destructive=True if args.destructive else None,
    )

    logger.info(f"pgspell {__version__}: {settings.path_in} -> {settings.output_path}")

    service = GenerationService(settings, name_filter=glob_filter(args.filter))
    result = service.run(dry_run=args.dry_run)

    if not result.success:
        logger.error("Generation failed!")
        for error in result.errors:
            logger.error(f"   - {error}")
        return 1

    if args.dry_run:
        sys.stdout.write(result.sql)
    else:
        logger.info(f"Generated {result.object_count} objects: {result.sections}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
