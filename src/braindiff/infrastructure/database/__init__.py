"""Database Infrastructure.

SQLAlchemy ORM models and connection management.
"""
from __future__ import annotations

from braindiff.infrastructure.database.connection import (
    close_database,
    drop_schema_statement,
    execute_statement,
    get_engine,
    get_session_factory,
    init_database,
)
from braindiff.infrastructure.database.models import (
    ANALYTICS_SCHEMA,
    Base,
    DistrictORM,
    DistrictProficiencyORM,
    DistrictStudentCountORM,
    NationalProficiencyORM,
    NationalStudentCountORM,
    SchoolEnrollmentORM,
    SchoolORM,
    SchoolProficiencyORM,
    SchoolStudentCountORM,
    StateORM,
    StateProficiencyORM,
    StateSatImprovementORM,
    StateSatPerformanceORM,
    StateStudentCountORM,
)

__all__ = [
    # Connection
    "get_engine",
    "get_session_factory",
    "init_database",
    "close_database",
    "drop_schema_statement",
    "execute_statement",
    # Models
    "ANALYTICS_SCHEMA",
    "Base",
    "StateORM",
    "DistrictORM",
    "SchoolORM",
    "NationalProficiencyORM",
    "StateProficiencyORM",
    "DistrictProficiencyORM",
    "SchoolProficiencyORM",
    "StateSatPerformanceORM",
    "StateSatImprovementORM",
    "SchoolEnrollmentORM",
    "NationalStudentCountORM",
    "StateStudentCountORM",
    "DistrictStudentCountORM",
    "SchoolStudentCountORM",
]
