"""API response schemas."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from braindiff.domain import (
    AcademicSubject,
    CollegeBoardYear,
    CountLevel,
    Grade,
    Race,
    SatGrade,
    SchoolLevel,
    SchoolType,
    SchoolYear,
    Sex,
    State,
    Subgroup,
    YesNo,
)


class DomainSchema(BaseModel):
    """Base schema built from domain dataclasses."""

    model_config = ConfigDict(from_attributes=True)


class StateResponse(DomainSchema):
    """State reference row."""

    state: State
    name: str
    fips_code: str
    school_count: int
    district_count: int


class DistrictResponse(DomainSchema):
    """District row."""

    nces_district_id: str
    name: str
    state: State
    st_lea_id: str
    school_count: int


class AddressResponse(DomainSchema):
    """Postal address."""

    street1: str
    city: str
    zip: str
    state: str | None = None
    street2: str | None = None
    street3: str | None = None
    zip4: str | None = None


class SchoolResponse(DomainSchema):
    """School detail for the map pin panel."""

    nces_school_id: str
    name: str
    nces_district_id: str
    state: State
    level: SchoolLevel
    school_type: SchoolType
    location: AddressResponse
    mailing: AddressResponse
    phone: str
    website: str | None = None
    latitude: Decimal
    longitude: Decimal
    charter_status: YesNo
    status: int
    grades_offered: list[Grade]
    updated_at: datetime | None = None


class ProficiencyResponse(DomainSchema):
    """One proficiency range."""

    year: SchoolYear
    subject: AcademicSubject
    grade: Grade
    subgroup: Subgroup
    lower_percent: int
    upper_percent: int
    denominator: int
    entity_id: str | None = None


class SatPerformanceResponse(DomainSchema):
    """SAT averages."""

    year: CollegeBoardYear
    grade: SatGrade
    avg_erw: Decimal | None = None
    avg_math: Decimal | None = None
    avg_total: Decimal | None = None
    met_both_benchmarks: Decimal | None = None


class SatImprovementResponse(DomainSchema):
    """SAT total change."""

    base_year: SchoolYear
    comparison_year: SchoolYear
    grade: SatGrade
    total_change: Decimal


class StateSatResponse(BaseModel):
    """SAT results of one state."""

    state: State
    performance: list[SatPerformanceResponse]
    improvement: list[SatImprovementResponse]


class EnrollmentResponse(DomainSchema):
    """Enrollment row."""

    year: SchoolYear
    nces_school_id: str
    grade: Grade
    race: Race
    sex: Sex
    student_count: int


class StudentCountResponse(DomainSchema):
    """Student total."""

    level: CountLevel
    year: SchoolYear
    student_count: int
    key: str | None = None
