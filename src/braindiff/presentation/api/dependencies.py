"""FastAPI dependencies."""
from __future__ import annotations

from typing import AsyncIterator

from braindiff.infrastructure.repositories.unit_of_work import UnitOfWork


async def get_uow() -> AsyncIterator[UnitOfWork]:
    """Provide a Unit of Work scoped to one request."""
    async with UnitOfWork() as uow:
        yield uow
