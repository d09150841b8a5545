"""Domain Layer.

Entities, enumerations and exceptions of the analytics dashboard.
This layer has NO external dependencies (no SQLAlchemy, no frameworks).
"""
from __future__ import annotations

from braindiff.domain.enums import (
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
from braindiff.domain.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvalidProficiencyRangeError,
    ValidationError,
)
from braindiff.domain.models import (
    Address,
    District,
    Enrollment,
    Proficiency,
    SatImprovement,
    SatPerformance,
    School,
    StateInfo,
    StudentCount,
)

__all__ = [
    # Enums
    "AcademicSubject",
    "CollegeBoardYear",
    "CountLevel",
    "Grade",
    "Race",
    "SatGrade",
    "SchoolLevel",
    "SchoolType",
    "SchoolYear",
    "Sex",
    "State",
    "Subgroup",
    "YesNo",
    # Exceptions
    "DomainError",
    "EntityNotFoundError",
    "InvalidProficiencyRangeError",
    "ValidationError",
    # Models
    "Address",
    "District",
    "Enrollment",
    "Proficiency",
    "SatImprovement",
    "SatPerformance",
    "School",
    "StateInfo",
    "StudentCount",
]
