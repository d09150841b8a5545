"""Drop database schemas.

Usage:
    braindiff-drop analytics [other_schema ...]
    braindiff-drop --owned
    python -m braindiff.scripts.drop analytics

Each schema is dropped with ``DROP SCHEMA IF EXISTS ... CASCADE``. A failure
on one schema does not stop the others; the exit status is 1 if any drop
failed, 0 otherwise.
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Awaitable, Callable, Sequence

from sqlalchemy.sql.base import Executable

from braindiff.infrastructure.database.connection import (
    close_database,
    drop_schema_statement,
    execute_statement,
)
from braindiff.shared.config import settings
from braindiff.shared.logging import get_logger
from braindiff.shared.result import Errors

logger = get_logger(__name__)

StatementExecutor = Callable[[Executable], Awaitable[object]]


async def drop_schemas(
    schema_names: Sequence[str],
    executor: StatementExecutor | None = None,
) -> int:
    """Drop each named schema and report per-schema status.

    Args:
        schema_names: Schemas to drop; blank names are skipped
        executor: Runs one statement; defaults to the configured engine

    Returns:
        Process exit code
    """
    if not schema_names:
        logger.info("No schemas specified to drop.")
        return 0

    run = executor or execute_statement
    success = True

    for schema_name in schema_names:
        if not schema_name.strip():
            logger.warning("Skipping empty schema name.")
            continue

        result = await Errors.try_(run(drop_schema_statement(schema_name)))
        if result.is_failure():
            logger.error(
                "Error dropping schema",
                schema=schema_name,
                error=str(result.error),
            )
            success = False
        else:
            logger.info("Successfully dropped schema", schema=schema_name)

    if success:
        logger.info("All specified schemas dropped successfully.")
        return 0

    logger.error("Some schemas failed to drop.")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="braindiff-drop",
        description="Drop PostgreSQL schemas (CASCADE).",
    )
    parser.add_argument("schemas", nargs="*", help="Schema names to drop")
    parser.add_argument(
        "--owned",
        action="store_true",
        help="Also drop every schema listed in DATABASE_SCHEMA_FILTER",
    )
    return parser


async def run(schema_names: Sequence[str]) -> int:
    """Drop schemas and release the connection pool."""
    try:
        return await drop_schemas(schema_names)
    finally:
        await close_database()


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the drop script."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    schema_names = list(args.schemas)
    if args.owned:
        schema_names += [s for s in settings.database_schema_filter if s not in schema_names]
    sys.exit(asyncio.run(run(schema_names)))


if __name__ == "__main__":
    main()
