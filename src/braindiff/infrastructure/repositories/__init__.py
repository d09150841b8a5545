"""Repository Implementations.

SQLAlchemy-based read access to the analytics schema.
"""
from __future__ import annotations

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
from braindiff.infrastructure.repositories.unit_of_work import UnitOfWork

__all__ = [
    "StateRepository",
    "DistrictRepository",
    "SchoolRepository",
    "ProficiencyRepository",
    "SatRepository",
    "EnrollmentRepository",
    "UnitOfWork",
]
