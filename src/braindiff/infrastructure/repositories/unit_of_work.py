"""Unit of Work Implementation.

Shares one database session across the analytics repositories.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from braindiff.infrastructure.database.connection import get_session_factory


if TYPE_CHECKING:
    from braindiff.infrastructure.repositories.geography_repository import (
        DistrictRepository,
        SchoolRepository,
        StateRepository,
    )
    from braindiff.infrastructure.repositories.metrics_repository import (
        EnrollmentRepository,
        ProficiencyRepository,
        SatRepository,
    )


class UnitOfWork:
    """Unit of Work pattern implementation.

    Usage:
        async with UnitOfWork() as uow:
            state = await uow.states.get_by_code(State.CA)
            rows = await uow.proficiency.for_state(State.CA)

    On exception, the transaction is automatically rolled back.
    """

    def __init__(self, session: AsyncSession | None = None) -> None:
        """Initialize Unit of Work.

        Args:
            session: Optional existing session (for testing)
        """
        self._session = session
        self._owns_session = session is None

        # Lazy-loaded repositories
        self._states: StateRepository | None = None
        self._districts: DistrictRepository | None = None
        self._schools: SchoolRepository | None = None
        self._proficiency: ProficiencyRepository | None = None
        self._sat: SatRepository | None = None
        self._enrollment: EnrollmentRepository | None = None

    async def __aenter__(self) -> "UnitOfWork":
        """Enter async context, create session if needed."""
        if self._owns_session:
            factory = get_session_factory()
            self._session = factory()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context, rollback on exception."""
        if exc_type is not None:
            await self.rollback()

        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        """Get the current session."""
        if self._session is None:
            raise RuntimeError("UnitOfWork not entered. Use 'async with UnitOfWork() as uow:'")
        return self._session

    @property
    def states(self) -> "StateRepository":
        """Get state repository."""
        if self._states is None:
            from braindiff.infrastructure.repositories.geography_repository import (
                StateRepository,
            )
            self._states = StateRepository(self.session)
        return self._states

    @property
    def districts(self) -> "DistrictRepository":
        """Get district repository."""
        if self._districts is None:
            from braindiff.infrastructure.repositories.geography_repository import (
                DistrictRepository,
            )
            self._districts = DistrictRepository(self.session)
        return self._districts

    @property
    def schools(self) -> "SchoolRepository":
        """Get school repository."""
        if self._schools is None:
            from braindiff.infrastructure.repositories.geography_repository import (
                SchoolRepository,
            )
            self._schools = SchoolRepository(self.session)
        return self._schools

    @property
    def proficiency(self) -> "ProficiencyRepository":
        """Get proficiency repository."""
        if self._proficiency is None:
            from braindiff.infrastructure.repositories.metrics_repository import (
                ProficiencyRepository,
            )
            self._proficiency = ProficiencyRepository(self.session)
        return self._proficiency

    @property
    def sat(self) -> "SatRepository":
        """Get SAT repository."""
        if self._sat is None:
            from braindiff.infrastructure.repositories.metrics_repository import (
                SatRepository,
            )
            self._sat = SatRepository(self.session)
        return self._sat

    @property
    def enrollment(self) -> "EnrollmentRepository":
        """Get enrollment repository."""
        if self._enrollment is None:
            from braindiff.infrastructure.repositories.metrics_repository import (
                EnrollmentRepository,
            )
            self._enrollment = EnrollmentRepository(self.session)
        return self._enrollment

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self.session.rollback()
