"""SQLAlchemy ORM Models.

Declarative mapping of the PostgreSQL ``analytics`` schema.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    PrimaryKeyConstraint,
    Text,
    UniqueConstraint,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)
from sqlalchemy.sql import func

from braindiff.domain.enums import (
    AcademicSubject,
    CollegeBoardYear,
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

ANALYTICS_SCHEMA = "analytics"


# =============================================================================
# Base Class
# =============================================================================


class Base(DeclarativeBase):
    """SQLAlchemy declarative base bound to the analytics schema."""

    metadata = MetaData(schema=ANALYTICS_SCHEMA)


# =============================================================================
# Enum Types (matching PostgreSQL enums)
# =============================================================================


def _pg_enum(enum_cls: type[Enum], name: str) -> SAEnum:
    # Store member values ("2020-2021"), not member names
    return SAEnum(
        enum_cls,
        name=name,
        schema=ANALYTICS_SCHEMA,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


school_year_enum = _pg_enum(SchoolYear, "school_year_enum")
college_board_year_enum = _pg_enum(CollegeBoardYear, "college_board_year_enum")
state_enum = _pg_enum(State, "state_enum")
academic_subject_enum = _pg_enum(AcademicSubject, "academic_subject_enum")
school_level_enum = _pg_enum(SchoolLevel, "school_level_enum")
grade_enum = _pg_enum(Grade, "grade_enum")
subgroup_enum = _pg_enum(Subgroup, "subgroup_enum")
yes_no_enum = _pg_enum(YesNo, "yes_no_enum")
school_type_enum = _pg_enum(SchoolType, "school_type_enum")
sat_grade_enum = _pg_enum(SatGrade, "sat_grade_enum")
race_enum = _pg_enum(Race, "race_enum")
sex_enum = _pg_enum(Sex, "sex_enum")


# =============================================================================
# Mixins
# =============================================================================


class TimestampMixin:
    """created_at / updated_at bookkeeping columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ProficiencyMixin(TimestampMixin):
    """Columns shared by every proficiency table."""

    year: Mapped[SchoolYear] = mapped_column(school_year_enum, nullable=False)
    academic_subject: Mapped[AcademicSubject] = mapped_column(
        academic_subject_enum, nullable=False
    )
    grade: Mapped[Grade] = mapped_column(grade_enum, nullable=False)
    subgroup: Mapped[Subgroup] = mapped_column(subgroup_enum, nullable=False)
    lower_percent: Mapped[int] = mapped_column(Integer, nullable=False)
    upper_percent: Mapped[int] = mapped_column(Integer, nullable=False)
    denominator: Mapped[int] = mapped_column(Integer, nullable=False)


def _proficiency_checks() -> tuple[CheckConstraint, ...]:
    return (
        CheckConstraint("lower_percent <= upper_percent", name="lower_upper_check"),
        CheckConstraint(
            "lower_percent >= 0 AND lower_percent <= 100",
            name="lower_percent_range",
        ),
        CheckConstraint(
            "upper_percent >= 0 AND upper_percent <= 100",
            name="upper_percent_range",
        ),
        CheckConstraint("denominator >= 0", name="denominator_non_negative"),
    )


def _proficiency_indexes(prefix: str) -> tuple[Index, ...]:
    return (
        Index(f"idx_{prefix}_year", "year"),
        Index(f"idx_{prefix}_subj", "academic_subject"),
        Index(f"idx_{prefix}_grade", "grade"),
        Index(f"idx_{prefix}_subgroup", "subgroup"),
        Index(f"idx_{prefix}_subj_grade", "academic_subject", "grade"),
        Index(f"idx_{prefix}_year_subj_grade", "year", "academic_subject", "grade"),
    )


# =============================================================================
# Geography
# =============================================================================


class StateORM(Base):
    """U.S. states reference table."""

    __tablename__ = "states"

    state: Mapped[State] = mapped_column(state_enum, primary_key=True)
    state_name: Mapped[str] = mapped_column(Text, nullable=False)
    fips_code: Mapped[str] = mapped_column(Text, nullable=False)
    school_count: Mapped[int] = mapped_column(Integer, nullable=False)
    district_count: Mapped[int] = mapped_column(Integer, nullable=False)


class DistrictORM(Base):
    """School districts keyed by NCES ID."""

    __tablename__ = "districts"

    nces_district_id: Mapped[str] = mapped_column(Text, primary_key=True)
    district_name: Mapped[str] = mapped_column(Text, nullable=False)
    state: Mapped[State] = mapped_column(
        state_enum, ForeignKey(f"{ANALYTICS_SCHEMA}.states.state"), nullable=False
    )
    st_lea_id: Mapped[str] = mapped_column(Text, nullable=False)
    school_count: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (Index("idx_districts_state", "state"),)


class SchoolORM(TimestampMixin, Base):
    """Schools with location and grade offerings."""

    __tablename__ = "schools"

    nces_school_id: Mapped[str] = mapped_column(Text, primary_key=True)
    school_name: Mapped[str] = mapped_column(Text, nullable=False)
    nces_district_id: Mapped[str] = mapped_column(
        Text, ForeignKey(f"{ANALYTICS_SCHEMA}.districts.nces_district_id"), nullable=False
    )
    state: Mapped[State] = mapped_column(
        state_enum, ForeignKey(f"{ANALYTICS_SCHEMA}.states.state"), nullable=False
    )
    school_level: Mapped[SchoolLevel] = mapped_column(school_level_enum, nullable=False)
    school_type: Mapped[SchoolType] = mapped_column(school_type_enum, nullable=False)
    location_street1: Mapped[str] = mapped_column(Text, nullable=False)
    location_city: Mapped[str] = mapped_column(Text, nullable=False)
    location_zip: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    website: Mapped[str | None] = mapped_column(Text)
    latitude: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    longitude: Mapped[Decimal] = mapped_column(Numeric, nullable=False)
    charter_status: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    status: Mapped[int] = mapped_column(Integer, nullable=False)

    # Grade offerings
    pk_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    kg_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g1_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g2_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g3_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g4_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g5_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g6_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g7_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g8_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g9_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g10_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g11_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)
    g12_offered: Mapped[YesNo] = mapped_column(yes_no_enum, nullable=False)

    # Mailing address
    mailing_street1: Mapped[str] = mapped_column(Text, nullable=False)
    mailing_city: Mapped[str] = mapped_column(Text, nullable=False)
    mailing_state: Mapped[str] = mapped_column(Text, nullable=False)
    mailing_zip: Mapped[str] = mapped_column(Text, nullable=False)
    mailing_street2: Mapped[str | None] = mapped_column(Text)
    mailing_street3: Mapped[str | None] = mapped_column(Text)
    mailing_zip4: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("idx_schools_dist", "nces_district_id"),
        Index("idx_schools_state", "state"),
    )


# Column name -> grade, in display order
GRADE_OFFERED_COLUMNS: dict[str, Grade] = {
    "pk_offered": Grade.PREKINDERGARTEN,
    "kg_offered": Grade.KINDERGARTEN,
    "g1_offered": Grade.GRADE_1,
    "g2_offered": Grade.GRADE_2,
    "g3_offered": Grade.GRADE_3,
    "g4_offered": Grade.GRADE_4,
    "g5_offered": Grade.GRADE_5,
    "g6_offered": Grade.GRADE_6,
    "g7_offered": Grade.GRADE_7,
    "g8_offered": Grade.GRADE_8,
    "g9_offered": Grade.GRADE_9,
    "g10_offered": Grade.GRADE_10,
    "g11_offered": Grade.GRADE_11,
    "g12_offered": Grade.GRADE_12,
}


# =============================================================================
# Proficiency
# =============================================================================


class NationalProficiencyORM(ProficiencyMixin, Base):
    """National proficiency benchmarks."""

    __tablename__ = "national_proficiency"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        server_default=func.gen_random_uuid(),
    )

    __table_args__ = (
        *_proficiency_indexes("natprof"),
        *_proficiency_checks(),
        UniqueConstraint(
            "year",
            "academic_subject",
            "grade",
            "subgroup",
            name="unique_national_proficiency",
        ),
    )


class StateProficiencyORM(ProficiencyMixin, Base):
    """State-level proficiency."""

    __tablename__ = "state_proficiency"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        server_default=func.gen_random_uuid(),
    )
    state: Mapped[State] = mapped_column(
        state_enum, ForeignKey(f"{ANALYTICS_SCHEMA}.states.state"), nullable=False
    )

    __table_args__ = (
        Index("idx_stateprof_state", "state"),
        Index("idx_stateprof_year_state", "year", "state"),
        *_proficiency_indexes("stateprof"),
        *_proficiency_checks(),
    )


class DistrictProficiencyORM(ProficiencyMixin, Base):
    """District-level proficiency."""

    __tablename__ = "district_proficiency"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        server_default=func.gen_random_uuid(),
    )
    nces_district_id: Mapped[str] = mapped_column(
        Text, ForeignKey(f"{ANALYTICS_SCHEMA}.districts.nces_district_id"), nullable=False
    )

    __table_args__ = (
        Index("idx_distprof_dist", "nces_district_id"),
        Index("idx_distprof_year_dist", "year", "nces_district_id"),
        *_proficiency_indexes("distprof"),
        *_proficiency_checks(),
        UniqueConstraint(
            "nces_district_id",
            "year",
            "academic_subject",
            "grade",
            "subgroup",
            name="unique_district_proficiency",
        ),
    )


class SchoolProficiencyORM(ProficiencyMixin, Base):
    """School-level proficiency."""

    __tablename__ = "school_proficiency"

    nces_school_id: Mapped[str] = mapped_column(
        Text, ForeignKey(f"{ANALYTICS_SCHEMA}.schools.nces_school_id"), nullable=False
    )

    __table_args__ = (
        PrimaryKeyConstraint(
            "nces_school_id", "year", "academic_subject", "grade", "subgroup"
        ),
        Index("idx_schprof_school", "nces_school_id"),
        Index("idx_schprof_year_school", "year", "nces_school_id"),
        *_proficiency_indexes("schprof"),
        *_proficiency_checks(),
    )


# =============================================================================
# SAT
# =============================================================================


class StateSatPerformanceORM(TimestampMixin, Base):
    """Average SAT results per state, year and grade."""

    __tablename__ = "state_sat_performance"

    year: Mapped[CollegeBoardYear] = mapped_column(
        college_board_year_enum, nullable=False
    )
    state: Mapped[State] = mapped_column(
        state_enum, ForeignKey(f"{ANALYTICS_SCHEMA}.states.state"), nullable=False
    )
    grade: Mapped[SatGrade] = mapped_column(sat_grade_enum, nullable=False)
    avg_sat_erw: Mapped[Decimal | None] = mapped_column(Numeric)
    avg_sat_math: Mapped[Decimal | None] = mapped_column(Numeric)
    avg_sat_total: Mapped[Decimal | None] = mapped_column(Numeric)
    met_both_benchmarks: Mapped[Decimal | None] = mapped_column(Numeric)

    __table_args__ = (
        PrimaryKeyConstraint("year", "state", "grade"),
        Index("idx_statesatperf_state", "state"),
        Index("idx_statesatperf_year", "year"),
        Index("idx_statesatperf_grade", "grade"),
        Index("idx_statesatperf_year_state_grade", "year", "state", "grade"),
        Index("idx_statesatperf_state_grade", "state", "grade"),
    )


class StateSatImprovementORM(TimestampMixin, Base):
    """SAT total change between two school years."""

    __tablename__ = "state_sat_improvement"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        server_default=func.gen_random_uuid(),
    )
    base_year: Mapped[SchoolYear] = mapped_column(school_year_enum, nullable=False)
    comparison_year: Mapped[SchoolYear] = mapped_column(
        school_year_enum, nullable=False
    )
    state: Mapped[State] = mapped_column(
        state_enum, ForeignKey(f"{ANALYTICS_SCHEMA}.states.state"), nullable=False
    )
    grade: Mapped[SatGrade] = mapped_column(sat_grade_enum, nullable=False)
    sat_total_change: Mapped[Decimal] = mapped_column(Numeric, nullable=False)

    __table_args__ = (
        Index("idx_statesatimprov_state", "state"),
        Index("idx_statesatimprov_base_year", "base_year"),
        Index("idx_statesatimprov_comp_year", "comparison_year"),
        Index("idx_statesatimprov_grade", "grade"),
        Index("idx_statesatimprov_base_comp_year", "base_year", "comparison_year"),
        Index("idx_statesatimprov_state_grade", "state", "grade"),
        CheckConstraint("base_year < comparison_year", name="base_year_before_comp"),
    )


# =============================================================================
# Enrollment and student counts
# =============================================================================


class SchoolEnrollmentORM(TimestampMixin, Base):
    """Enrollment by school, grade, race and sex."""

    __tablename__ = "school_enrollments"

    id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
        server_default=func.gen_random_uuid(),
    )
    year: Mapped[SchoolYear] = mapped_column(school_year_enum, nullable=False)
    nces_school_id: Mapped[str] = mapped_column(
        Text, ForeignKey(f"{ANALYTICS_SCHEMA}.schools.nces_school_id"), nullable=False
    )
    grade: Mapped[Grade] = mapped_column(grade_enum, nullable=False)
    race: Mapped[Race] = mapped_column(race_enum, nullable=False)
    sex: Mapped[Sex] = mapped_column(sex_enum, nullable=False)
    student_count: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_sch_enroll_school", "nces_school_id"),
        Index("idx_sch_enroll_year", "year"),
        Index("idx_sch_enroll_grade", "grade"),
        Index("idx_sch_enroll_race", "race"),
        Index("idx_sch_enroll_sex", "sex"),
        UniqueConstraint(
            "nces_school_id",
            "year",
            "grade",
            "race",
            "sex",
            name="unique_school_enrollment",
        ),
    )


class NationalStudentCountORM(TimestampMixin, Base):
    """National student totals per year."""

    __tablename__ = "national_student_counts"

    year: Mapped[SchoolYear] = mapped_column(school_year_enum, primary_key=True)
    student_count: Mapped[int] = mapped_column(Integer, nullable=False)


class StateStudentCountORM(TimestampMixin, Base):
    """State student totals per year."""

    __tablename__ = "state_student_counts"

    state: Mapped[State] = mapped_column(
        state_enum, ForeignKey(f"{ANALYTICS_SCHEMA}.states.state"), nullable=False
    )
    year: Mapped[SchoolYear] = mapped_column(school_year_enum, nullable=False)
    student_count: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("state", "year"),
        Index("idx_statecount_state", "state"),
        Index("idx_statecount_year", "year"),
    )


class DistrictStudentCountORM(TimestampMixin, Base):
    """District student totals per year."""

    __tablename__ = "district_student_counts"

    nces_district_id: Mapped[str] = mapped_column(
        Text, ForeignKey(f"{ANALYTICS_SCHEMA}.districts.nces_district_id"), nullable=False
    )
    year: Mapped[SchoolYear] = mapped_column(school_year_enum, nullable=False)
    student_count: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("nces_district_id", "year"),
        Index("idx_distcount_district", "nces_district_id"),
        Index("idx_distcount_year", "year"),
    )


class SchoolStudentCountORM(TimestampMixin, Base):
    """School student totals per year."""

    __tablename__ = "school_student_counts"

    nces_school_id: Mapped[str] = mapped_column(
        Text, ForeignKey(f"{ANALYTICS_SCHEMA}.schools.nces_school_id"), nullable=False
    )
    year: Mapped[SchoolYear] = mapped_column(school_year_enum, nullable=False)
    student_count: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        PrimaryKeyConstraint("nces_school_id", "year"),
        Index("idx_schoolcount_school", "nces_school_id"),
        Index("idx_schoolcount_year", "year"),
    )
