"""Domain Models.

Core domain entities of the analytics dashboard.
"""
from __future__ import annotations

from braindiff.domain.models.geography import (
    Address,
    District,
    School,
    StateInfo,
)
from braindiff.domain.models.metrics import (
    Enrollment,
    Proficiency,
    SatImprovement,
    SatPerformance,
    StudentCount,
)

__all__ = [
    # Geography
    "Address",
    "District",
    "School",
    "StateInfo",
    # Metrics
    "Enrollment",
    "Proficiency",
    "SatImprovement",
    "SatPerformance",
    "StudentCount",
]
