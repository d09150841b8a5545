"""Geography Domain Entities.

States, districts and schools: the hierarchy the dashboard map drills into.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from braindiff.domain.enums import Grade, SchoolLevel, SchoolType, State, YesNo


@dataclass
class StateInfo:
    """U.S. state reference row.

    Attributes:
        state: Postal code
        name: Full state name
        fips_code: Census FIPS code
        school_count: Number of schools in the state
        district_count: Number of districts in the state
    """

    state: State
    name: str
    fips_code: str
    school_count: int
    district_count: int


@dataclass
class District:
    """School district (LEA) identified by its NCES ID."""

    nces_district_id: str
    name: str
    state: State
    st_lea_id: str
    school_count: int


@dataclass
class Address:
    """Postal address."""

    street1: str
    city: str
    zip: str
    state: str | None = None
    street2: str | None = None
    street3: str | None = None
    zip4: str | None = None


@dataclass
class School:
    """School Domain Entity.

    Attributes:
        nces_school_id: NCES school ID
        name: School name
        nces_district_id: Parent district
        state: State postal code
        latitude: Map pin latitude
        longitude: Map pin longitude
        grades_offered: Grades the school reports as offered
    """

    nces_school_id: str
    name: str
    nces_district_id: str
    state: State
    level: SchoolLevel
    school_type: SchoolType
    location: Address
    mailing: Address
    phone: str
    latitude: Decimal
    longitude: Decimal
    charter_status: YesNo
    status: int
    website: str | None = None
    grades_offered: list[Grade] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_charter(self) -> bool:
        """Check if the school reports charter status."""
        return self.charter_status == YesNo.YES

    def offers(self, grade: Grade) -> bool:
        """Check if the school offers a grade."""
        return grade in self.grades_offered
