"""Tests for domain entities and exceptions."""
from __future__ import annotations

from decimal import Decimal

import pytest

from braindiff.domain import (
    AcademicSubject,
    Address,
    EntityNotFoundError,
    Enrollment,
    Grade,
    InvalidProficiencyRangeError,
    Proficiency,
    Race,
    SatGrade,
    SatImprovement,
    School,
    SchoolLevel,
    SchoolType,
    SchoolYear,
    Sex,
    State,
    Subgroup,
    ValidationError,
    YesNo,
)


def _proficiency(lower: int, upper: int, denominator: int = 120) -> Proficiency:
    return Proficiency(
        year=SchoolYear.Y2021_2022,
        subject=AcademicSubject.MATHEMATICS,
        grade=Grade.GRADE_4,
        subgroup=Subgroup.ALL_STUDENTS,
        lower_percent=lower,
        upper_percent=upper,
        denominator=denominator,
    )


class TestProficiency:
    """Tests for Proficiency."""

    def test_valid_range(self) -> None:
        """Test range helpers."""
        prof = _proficiency(40, 50)
        assert prof.midpoint == 45
        assert not prof.is_exact
        assert _proficiency(30, 30).is_exact

    @pytest.mark.parametrize(
        "lower,upper",
        [
            (60, 50),
            (-1, 10),
            (90, 101),
        ],
    )
    def test_invalid_range(self, lower: int, upper: int) -> None:
        """Test that out-of-order or out-of-bounds ranges are rejected."""
        with pytest.raises(InvalidProficiencyRangeError):
            _proficiency(lower, upper)

    def test_negative_denominator(self) -> None:
        """Test that a negative denominator is rejected."""
        with pytest.raises(ValidationError, match="denominator"):
            _proficiency(10, 20, denominator=-5)


class TestSatImprovement:
    """Tests for SatImprovement."""

    def test_base_year_must_precede(self) -> None:
        """Test year ordering."""
        with pytest.raises(ValidationError, match="base_year"):
            SatImprovement(
                base_year=SchoolYear.Y2021_2022,
                comparison_year=SchoolYear.Y2020_2021,
                state=State.TX,
                grade=SatGrade.GRADE_11,
                total_change=Decimal("4.5"),
            )


class TestEnrollment:
    """Tests for Enrollment."""

    def test_negative_count(self) -> None:
        """Test that negative counts are rejected."""
        with pytest.raises(ValidationError):
            Enrollment(
                year=SchoolYear.Y2020_2021,
                nces_school_id="010000500870",
                grade=Grade.GRADE_1,
                race=Race.ASIAN,
                sex=Sex.FEMALE,
                student_count=-1,
            )


class TestSchool:
    """Tests for School."""

    def test_grade_offering_helpers(self) -> None:
        """Test charter and grade helpers."""
        address = Address(street1="1 Main St", city="Albertville", zip="35950")
        school = School(
            nces_school_id="010000500870",
            name="Albertville Middle School",
            nces_district_id="0100005",
            state=State.AL,
            level=SchoolLevel.MIDDLE,
            school_type=SchoolType.REGULAR,
            location=address,
            mailing=address,
            phone="(256)878-2341",
            latitude=Decimal("34.26"),
            longitude=Decimal("-86.21"),
            charter_status=YesNo.NO,
            status=1,
            grades_offered=[Grade.GRADE_7, Grade.GRADE_8],
        )
        assert not school.is_charter
        assert school.offers(Grade.GRADE_7)
        assert not school.offers(Grade.GRADE_9)


class TestEnums:
    """Tests for database label mapping."""

    def test_labels_match_database(self) -> None:
        """Test a few labels that are not valid identifiers."""
        assert SchoolYear("2020-2021") is SchoolYear.Y2020_2021
        assert AcademicSubject("Reading/Language Arts") is AcademicSubject.READING_LANGUAGE_ARTS
        assert len(State) == 53


class TestExceptions:
    """Tests for domain exceptions."""

    def test_not_found_message(self) -> None:
        """Test message formatting."""
        error = EntityNotFoundError("District", "0100005")
        assert str(error) == "District not found: 0100005"
        assert error.entity_type == "District"

    def test_validation_error_details(self) -> None:
        """Test details rendering."""
        error = ValidationError("student_count", "Must be non-negative", -1)
        assert error.field == "student_count"
        assert "Must be non-negative" in str(error)
        assert "'value': -1" in str(error)
