"""Geography Repositories.

States, districts and schools.
"""
from __future__ import annotations

from sqlalchemy import select

from braindiff.domain import (
    Address,
    District,
    EntityNotFoundError,
    School,
    State,
    StateInfo,
    YesNo,
)
from braindiff.infrastructure.database.models import (
    GRADE_OFFERED_COLUMNS,
    DistrictORM,
    SchoolORM,
    StateORM,
)
from braindiff.infrastructure.repositories.base import SqlRepository


class StateRepository(SqlRepository):
    """Read access to the states reference table."""

    async def get_by_code(self, state: State) -> StateInfo:
        """Get a state by postal code.

        Args:
            state: Postal code

        Returns:
            StateInfo

        Raises:
            EntityNotFoundError: If the state has no row
        """
        stmt = select(StateORM).where(StateORM.state == state)
        result = await self._execute(stmt, "failed to load state", state=state.value)
        orm = result.scalar_one_or_none()

        if orm is None:
            raise EntityNotFoundError("State", state.value)

        return self._to_domain(orm)

    async def list_all(self) -> list[StateInfo]:
        """List all states ordered by name."""
        stmt = select(StateORM).order_by(StateORM.state_name.asc())
        result = await self._execute(stmt, "failed to list states")
        return [self._to_domain(orm) for orm in result.scalars().all()]

    @staticmethod
    def _to_domain(orm: StateORM) -> StateInfo:
        return StateInfo(
            state=orm.state,
            name=orm.state_name,
            fips_code=orm.fips_code,
            school_count=orm.school_count,
            district_count=orm.district_count,
        )


class DistrictRepository(SqlRepository):
    """Read access to school districts."""

    async def get_by_id(self, nces_district_id: str) -> District:
        """Get a district by NCES ID.

        Raises:
            EntityNotFoundError: If the district does not exist
        """
        stmt = select(DistrictORM).where(DistrictORM.nces_district_id == nces_district_id)
        result = await self._execute(
            stmt, "failed to load district", nces_district_id=nces_district_id
        )
        orm = result.scalar_one_or_none()

        if orm is None:
            raise EntityNotFoundError("District", nces_district_id)

        return self._to_domain(orm)

    async def find_by_state(
        self,
        state: State,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> list[District]:
        """List districts of a state ordered by name."""
        stmt = (
            select(DistrictORM)
            .where(DistrictORM.state == state)
            .order_by(DistrictORM.district_name.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt, "failed to list districts", state=state.value)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    @staticmethod
    def _to_domain(orm: DistrictORM) -> District:
        return District(
            nces_district_id=orm.nces_district_id,
            name=orm.district_name,
            state=orm.state,
            st_lea_id=orm.st_lea_id,
            school_count=orm.school_count,
        )


class SchoolRepository(SqlRepository):
    """Read access to schools."""

    async def get_by_id(self, nces_school_id: str) -> School:
        """Get a school by NCES ID.

        Raises:
            EntityNotFoundError: If the school does not exist
        """
        stmt = select(SchoolORM).where(SchoolORM.nces_school_id == nces_school_id)
        result = await self._execute(
            stmt, "failed to load school", nces_school_id=nces_school_id
        )
        orm = result.scalar_one_or_none()

        if orm is None:
            raise EntityNotFoundError("School", nces_school_id)

        return self._to_domain(orm)

    async def find_by_district(
        self,
        nces_district_id: str,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> list[School]:
        """List schools of a district ordered by name."""
        stmt = (
            select(SchoolORM)
            .where(SchoolORM.nces_district_id == nces_district_id)
            .order_by(SchoolORM.school_name.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(
            stmt, "failed to list schools", nces_district_id=nces_district_id
        )
        return [self._to_domain(orm) for orm in result.scalars().all()]

    @staticmethod
    def _to_domain(orm: SchoolORM) -> School:
        grades = [
            grade
            for column, grade in GRADE_OFFERED_COLUMNS.items()
            if getattr(orm, column) == YesNo.YES
        ]
        return School(
            nces_school_id=orm.nces_school_id,
            name=orm.school_name,
            nces_district_id=orm.nces_district_id,
            state=orm.state,
            level=orm.school_level,
            school_type=orm.school_type,
            location=Address(
                street1=orm.location_street1,
                city=orm.location_city,
                zip=orm.location_zip,
            ),
            mailing=Address(
                street1=orm.mailing_street1,
                city=orm.mailing_city,
                zip=orm.mailing_zip,
                state=orm.mailing_state,
                street2=orm.mailing_street2,
                street3=orm.mailing_street3,
                zip4=orm.mailing_zip4,
            ),
            phone=orm.phone,
            latitude=orm.latitude,
            longitude=orm.longitude,
            charter_status=orm.charter_status,
            status=orm.status,
            website=orm.website,
            grades_offered=grades,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )
