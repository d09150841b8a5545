"""Metric API Routes.

Proficiency, SAT and student counts for the analytics pane.
"""
from fastapi import APIRouter, Depends

from braindiff.domain import (
    AcademicSubject,
    CountLevel,
    Grade,
    SchoolYear,
    State,
    Subgroup,
)
from braindiff.infrastructure.repositories.unit_of_work import UnitOfWork
from braindiff.presentation.api.dependencies import get_uow
from braindiff.presentation.api.schemas import (
    EnrollmentResponse,
    ProficiencyResponse,
    SatImprovementResponse,
    SatPerformanceResponse,
    StateSatResponse,
    StudentCountResponse,
)

router = APIRouter()


@router.get("/proficiency/national")
async def national_proficiency(
    year: SchoolYear | None = None,
    subject: AcademicSubject | None = None,
    grade: Grade | None = None,
    subgroup: Subgroup | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> list[ProficiencyResponse]:
    """National proficiency benchmarks."""
    rows = await uow.proficiency.national(
        year=year, subject=subject, grade=grade, subgroup=subgroup
    )
    return [ProficiencyResponse.model_validate(r) for r in rows]


@router.get("/proficiency/states/{state}")
async def state_proficiency(
    state: State,
    year: SchoolYear | None = None,
    subject: AcademicSubject | None = None,
    grade: Grade | None = None,
    subgroup: Subgroup | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> list[ProficiencyResponse]:
    """Proficiency of one state."""
    rows = await uow.proficiency.for_state(
        state, year=year, subject=subject, grade=grade, subgroup=subgroup
    )
    return [ProficiencyResponse.model_validate(r) for r in rows]


@router.get("/proficiency/districts/{district_id}")
async def district_proficiency(
    district_id: str,
    year: SchoolYear | None = None,
    subject: AcademicSubject | None = None,
    grade: Grade | None = None,
    subgroup: Subgroup | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> list[ProficiencyResponse]:
    """Proficiency of one district."""
    rows = await uow.proficiency.for_district(
        district_id, year=year, subject=subject, grade=grade, subgroup=subgroup
    )
    return [ProficiencyResponse.model_validate(r) for r in rows]


@router.get("/proficiency/schools/{school_id}")
async def school_proficiency(
    school_id: str,
    year: SchoolYear | None = None,
    subject: AcademicSubject | None = None,
    grade: Grade | None = None,
    subgroup: Subgroup | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> list[ProficiencyResponse]:
    """Proficiency of one school."""
    rows = await uow.proficiency.for_school(
        school_id, year=year, subject=subject, grade=grade, subgroup=subgroup
    )
    return [ProficiencyResponse.model_validate(r) for r in rows]


@router.get("/sat/states/{state}")
async def state_sat(state: State, uow: UnitOfWork = Depends(get_uow)) -> StateSatResponse:
    """SAT performance and improvement of one state."""
    performance = await uow.sat.performance_for_state(state)
    improvement = await uow.sat.improvement_for_state(state)
    return StateSatResponse(
        state=state,
        performance=[SatPerformanceResponse.model_validate(p) for p in performance],
        improvement=[SatImprovementResponse.model_validate(i) for i in improvement],
    )


@router.get("/counts/national/{year}")
async def national_count(
    year: SchoolYear,
    uow: UnitOfWork = Depends(get_uow),
) -> StudentCountResponse:
    """National student total."""
    count = await uow.enrollment.student_count(CountLevel.NATIONAL, year)
    return StudentCountResponse.model_validate(count)


@router.get("/counts/{level}/{key}/{year}")
async def student_count(
    level: CountLevel,
    key: str,
    year: SchoolYear,
    uow: UnitOfWork = Depends(get_uow),
) -> StudentCountResponse:
    """Student total of a state, district or school."""
    count = await uow.enrollment.student_count(level, year, key)
    return StudentCountResponse.model_validate(count)


@router.get("/schools/{school_id}/enrollments")
async def school_enrollments(
    school_id: str,
    year: SchoolYear | None = None,
    grade: Grade | None = None,
    uow: UnitOfWork = Depends(get_uow),
) -> list[EnrollmentResponse]:
    """Enrollment breakdown of one school."""
    rows = await uow.enrollment.enrollments_for_school(school_id, year=year, grade=grade)
    return [EnrollmentResponse.model_validate(r) for r in rows]
