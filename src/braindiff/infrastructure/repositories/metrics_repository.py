"""Metric Repositories.

Proficiency, SAT, enrollment and student count reads.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select

from braindiff.domain import (
    AcademicSubject,
    CountLevel,
    Enrollment,
    EntityNotFoundError,
    Grade,
    Proficiency,
    SatImprovement,
    SatPerformance,
    SchoolYear,
    State,
    StudentCount,
    Subgroup,
)
from braindiff.infrastructure.database.models import (
    DistrictProficiencyORM,
    DistrictStudentCountORM,
    NationalProficiencyORM,
    NationalStudentCountORM,
    SchoolEnrollmentORM,
    SchoolProficiencyORM,
    SchoolStudentCountORM,
    StateProficiencyORM,
    StateSatImprovementORM,
    StateSatPerformanceORM,
    StateStudentCountORM,
)
from braindiff.infrastructure.repositories.base import SqlRepository


class ProficiencyRepository(SqlRepository):
    """Proficiency ranges at national, state, district and school level."""

    async def national(
        self,
        *,
        year: SchoolYear | None = None,
        subject: AcademicSubject | None = None,
        grade: Grade | None = None,
        subgroup: Subgroup | None = None,
    ) -> list[Proficiency]:
        """National benchmarks, optionally filtered."""
        stmt = self._filtered(
            select(NationalProficiencyORM),
            NationalProficiencyORM, year, subject, grade, subgroup,
        )
        result = await self._execute(stmt, "failed to load national proficiency")
        return [self._to_domain(orm, None) for orm in result.scalars().all()]

    async def for_state(
        self,
        state: State,
        *,
        year: SchoolYear | None = None,
        subject: AcademicSubject | None = None,
        grade: Grade | None = None,
        subgroup: Subgroup | None = None,
    ) -> list[Proficiency]:
        """Proficiency of one state."""
        stmt = self._filtered(
            select(StateProficiencyORM).where(StateProficiencyORM.state == state),
            StateProficiencyORM, year, subject, grade, subgroup,
        )
        result = await self._execute(
            stmt, "failed to load state proficiency", state=state.value
        )
        return [self._to_domain(orm, orm.state.value) for orm in result.scalars().all()]

    async def for_district(
        self,
        nces_district_id: str,
        *,
        year: SchoolYear | None = None,
        subject: AcademicSubject | None = None,
        grade: Grade | None = None,
        subgroup: Subgroup | None = None,
    ) -> list[Proficiency]:
        """Proficiency of one district."""
        stmt = self._filtered(
            select(DistrictProficiencyORM).where(
                DistrictProficiencyORM.nces_district_id == nces_district_id
            ),
            DistrictProficiencyORM, year, subject, grade, subgroup,
        )
        result = await self._execute(
            stmt, "failed to load district proficiency", nces_district_id=nces_district_id
        )
        return [
            self._to_domain(orm, orm.nces_district_id) for orm in result.scalars().all()
        ]

    async def for_school(
        self,
        nces_school_id: str,
        *,
        year: SchoolYear | None = None,
        subject: AcademicSubject | None = None,
        grade: Grade | None = None,
        subgroup: Subgroup | None = None,
    ) -> list[Proficiency]:
        """Proficiency of one school."""
        stmt = self._filtered(
            select(SchoolProficiencyORM).where(
                SchoolProficiencyORM.nces_school_id == nces_school_id
            ),
            SchoolProficiencyORM, year, subject, grade, subgroup,
        )
        result = await self._execute(
            stmt, "failed to load school proficiency", nces_school_id=nces_school_id
        )
        return [
            self._to_domain(orm, orm.nces_school_id) for orm in result.scalars().all()
        ]

    @staticmethod
    def _filtered(
        stmt: Select,
        model: Any,
        year: SchoolYear | None,
        subject: AcademicSubject | None,
        grade: Grade | None,
        subgroup: Subgroup | None,
    ) -> Select:
        if year is not None:
            stmt = stmt.where(model.year == year)
        if subject is not None:
            stmt = stmt.where(model.academic_subject == subject)
        if grade is not None:
            stmt = stmt.where(model.grade == grade)
        if subgroup is not None:
            stmt = stmt.where(model.subgroup == subgroup)
        return stmt.order_by(model.year, model.academic_subject, model.grade, model.subgroup)

    @staticmethod
    def _to_domain(orm: Any, entity_id: str | None) -> Proficiency:
        return Proficiency(
            year=orm.year,
            subject=orm.academic_subject,
            grade=orm.grade,
            subgroup=orm.subgroup,
            lower_percent=orm.lower_percent,
            upper_percent=orm.upper_percent,
            denominator=orm.denominator,
            entity_id=entity_id,
        )


class SatRepository(SqlRepository):
    """State SAT results."""

    async def performance_for_state(self, state: State) -> list[SatPerformance]:
        """SAT averages of a state for every year and grade."""
        stmt = (
            select(StateSatPerformanceORM)
            .where(StateSatPerformanceORM.state == state)
            .order_by(StateSatPerformanceORM.year, StateSatPerformanceORM.grade)
        )
        result = await self._execute(stmt, "failed to load SAT performance", state=state.value)
        return [
            SatPerformance(
                year=orm.year,
                state=orm.state,
                grade=orm.grade,
                avg_erw=orm.avg_sat_erw,
                avg_math=orm.avg_sat_math,
                avg_total=orm.avg_sat_total,
                met_both_benchmarks=orm.met_both_benchmarks,
            )
            for orm in result.scalars().all()
        ]

    async def improvement_for_state(self, state: State) -> list[SatImprovement]:
        """Year-over-year SAT total changes of a state."""
        stmt = (
            select(StateSatImprovementORM)
            .where(StateSatImprovementORM.state == state)
            .order_by(StateSatImprovementORM.base_year, StateSatImprovementORM.grade)
        )
        result = await self._execute(stmt, "failed to load SAT improvement", state=state.value)
        return [
            SatImprovement(
                base_year=orm.base_year,
                comparison_year=orm.comparison_year,
                state=orm.state,
                grade=orm.grade,
                total_change=orm.sat_total_change,
            )
            for orm in result.scalars().all()
        ]


# Level -> (model, key column name)
_COUNT_TABLES: dict[CountLevel, tuple[Any, str | None]] = {
    CountLevel.NATIONAL: (NationalStudentCountORM, None),
    CountLevel.STATE: (StateStudentCountORM, "state"),
    CountLevel.DISTRICT: (DistrictStudentCountORM, "nces_district_id"),
    CountLevel.SCHOOL: (SchoolStudentCountORM, "nces_school_id"),
}


class EnrollmentRepository(SqlRepository):
    """School enrollments and student totals."""

    async def enrollments_for_school(
        self,
        nces_school_id: str,
        *,
        year: SchoolYear | None = None,
        grade: Grade | None = None,
    ) -> list[Enrollment]:
        """Enrollment breakdown of a school."""
        stmt = select(SchoolEnrollmentORM).where(
            SchoolEnrollmentORM.nces_school_id == nces_school_id
        )
        if year is not None:
            stmt = stmt.where(SchoolEnrollmentORM.year == year)
        if grade is not None:
            stmt = stmt.where(SchoolEnrollmentORM.grade == grade)
        stmt = stmt.order_by(
            SchoolEnrollmentORM.year,
            SchoolEnrollmentORM.grade,
            SchoolEnrollmentORM.race,
            SchoolEnrollmentORM.sex,
        )

        result = await self._execute(
            stmt, "failed to load enrollments", nces_school_id=nces_school_id
        )
        return [
            Enrollment(
                year=orm.year,
                nces_school_id=orm.nces_school_id,
                grade=orm.grade,
                race=orm.race,
                sex=orm.sex,
                student_count=orm.student_count,
            )
            for orm in result.scalars().all()
        ]

    async def student_count(
        self,
        level: CountLevel,
        year: SchoolYear,
        key: str | None = None,
    ) -> StudentCount:
        """Total students at a level for a year.

        Args:
            level: Aggregation level
            year: School year
            key: State code, district ID or school ID; ignored for national

        Raises:
            ValueError: If a non-national level is queried without a key
            EntityNotFoundError: If no count is recorded
        """
        model, key_column = _COUNT_TABLES[level]
        stmt = select(model).where(model.year == year)
        if key_column is not None:
            if not key:
                raise ValueError(f"A key is required for {level.value} student counts")
            value: Any = State(key) if level == CountLevel.STATE else key
            stmt = stmt.where(getattr(model, key_column) == value)
        else:
            key = None

        result = await self._execute(
            stmt,
            "failed to load student count",
            level=level.value,
            year=year.value,
        )
        orm = result.scalar_one_or_none()

        if orm is None:
            raise EntityNotFoundError(
                "StudentCount",
                f"{level.value}/{key}/{year.value}" if key else f"{level.value}/{year.value}",
            )

        return StudentCount(level=level, year=year, student_count=orm.student_count, key=key)
