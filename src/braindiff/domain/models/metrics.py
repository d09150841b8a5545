"""Metric Domain Entities.

Proficiency ranges, SAT results, enrollments and student counts.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from braindiff.domain.enums import (
    AcademicSubject,
    CollegeBoardYear,
    CountLevel,
    Grade,
    Race,
    SatGrade,
    SchoolYear,
    Sex,
    State,
    Subgroup,
)
from braindiff.domain.exceptions import InvalidProficiencyRangeError, ValidationError


@dataclass
class Proficiency:
    """Proficiency figure for one entity, year, subject, grade and subgroup.

    Source data publishes proficiency as a percentage range rather than a
    point value (privacy suppression), so both bounds are kept.

    Attributes:
        year: School year
        subject: Academic subject
        grade: Grade
        subgroup: Demographic subgroup
        lower_percent: Lower bound of the proficient share (0-100)
        upper_percent: Upper bound of the proficient share (0-100)
        denominator: Number of students assessed
        entity_id: State code, district ID or school ID; None for national rows
    """

    year: SchoolYear
    subject: AcademicSubject
    grade: Grade
    subgroup: Subgroup
    lower_percent: int
    upper_percent: int
    denominator: int
    entity_id: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.lower_percent <= self.upper_percent <= 100:
            raise InvalidProficiencyRangeError(self.lower_percent, self.upper_percent)
        if self.denominator < 0:
            raise ValidationError("denominator", "Must be non-negative", self.denominator)

    @property
    def midpoint(self) -> float:
        """Center of the proficiency range."""
        return (self.lower_percent + self.upper_percent) / 2

    @property
    def is_exact(self) -> bool:
        """Check if the range collapses to a single value."""
        return self.lower_percent == self.upper_percent


@dataclass
class SatPerformance:
    """Average SAT results of a state for one year and grade."""

    year: CollegeBoardYear
    state: State
    grade: SatGrade
    avg_erw: Decimal | None = None
    avg_math: Decimal | None = None
    avg_total: Decimal | None = None
    met_both_benchmarks: Decimal | None = None


@dataclass
class SatImprovement:
    """Change in average SAT total between two school years."""

    base_year: SchoolYear
    comparison_year: SchoolYear
    state: State
    grade: SatGrade
    total_change: Decimal

    def __post_init__(self) -> None:
        if self.base_year.value >= self.comparison_year.value:
            raise ValidationError(
                "base_year",
                "Base year must precede comparison year",
                (self.base_year.value, self.comparison_year.value),
            )


@dataclass
class Enrollment:
    """Enrolled students of a school by grade, race and sex."""

    year: SchoolYear
    nces_school_id: str
    grade: Grade
    race: Race
    sex: Sex
    student_count: int

    def __post_init__(self) -> None:
        if self.student_count < 0:
            raise ValidationError("student_count", "Must be non-negative", self.student_count)


@dataclass
class StudentCount:
    """Total students at one aggregation level for a year."""

    level: CountLevel
    year: SchoolYear
    student_count: int
    key: str | None = None
