"""Repository base class.

Every query goes through the Result boundary: a failing ``execute`` is
re-raised as a WrappedError that names what the repository was doing.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Result as SQLResult
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.base import Executable

from braindiff.shared.result import Errors


class SqlRepository:
    """Base for SQLAlchemy-backed repositories."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with session.

        Args:
            session: AsyncSession instance
        """
        self._session = session

    async def _execute(self, stmt: Executable, context: str, **details: Any) -> SQLResult:
        """Execute a statement, wrapping database failures with context.

        Args:
            stmt: Statement to execute
            context: What the caller was doing, e.g. "load state CA"
            details: Extra key/values appended to the context message

        Returns:
            SQLAlchemy result

        Raises:
            WrappedError: If the database call failed
        """
        result = await Errors.try_(self._session.execute(stmt))
        if result.is_failure():
            if details:
                rendered = ", ".join(f"{k}={v}" for k, v in details.items())
                context = f"{context} ({rendered})"
            raise Errors.wrap(result.error, context)
        return result.value
