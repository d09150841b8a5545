"""Analytics enumerations.

Mirrors the PostgreSQL enum types of the ``analytics`` schema. Member values
are the exact database labels.
"""
from __future__ import annotations

from enum import Enum


class SchoolYear(str, Enum):
    """Academic year of a report."""

    Y2020_2021 = "2020-2021"
    Y2021_2022 = "2021-2022"


class CollegeBoardYear(str, Enum):
    """College Board reporting year (SAT data)."""

    Y2020 = "2020"
    Y2021 = "2021"
    Y2022 = "2022"
    Y2023 = "2023"
    Y2024 = "2024"


class State(str, Enum):
    """U.S. state, district or territory postal code."""

    AL = "AL"
    AK = "AK"
    AZ = "AZ"
    AR = "AR"
    CA = "CA"
    CO = "CO"
    CT = "CT"
    DE = "DE"
    FL = "FL"
    GA = "GA"
    HI = "HI"
    ID = "ID"
    IL = "IL"
    IN = "IN"
    IA = "IA"
    KS = "KS"
    KY = "KY"
    LA = "LA"
    ME = "ME"
    MD = "MD"
    MA = "MA"
    MI = "MI"
    MN = "MN"
    MS = "MS"
    MO = "MO"
    MT = "MT"
    NE = "NE"
    NV = "NV"
    NH = "NH"
    NJ = "NJ"
    NM = "NM"
    NY = "NY"
    NC = "NC"
    ND = "ND"
    OH = "OH"
    OK = "OK"
    OR = "OR"
    PA = "PA"
    RI = "RI"
    SC = "SC"
    SD = "SD"
    TN = "TN"
    TX = "TX"
    UT = "UT"
    VT = "VT"
    VA = "VA"
    WA = "WA"
    WV = "WV"
    WI = "WI"
    WY = "WY"
    DC = "DC"
    PR = "PR"
    VI = "VI"


class AcademicSubject(str, Enum):
    """Assessed subject."""

    MATHEMATICS = "Mathematics"
    READING_LANGUAGE_ARTS = "Reading/Language Arts"
    SCIENCE = "Science"


class SchoolLevel(str, Enum):
    """NCES school level."""

    ADULT_EDUCATION = "Adult Education"
    ELEMENTARY = "Elementary"
    HIGH = "High"
    MIDDLE = "Middle"
    NOT_APPLICABLE = "Not applicable"
    NOT_REPORTED = "Not reported"
    OTHER = "Other"
    PREKINDERGARTEN = "Prekindergarten"
    SECONDARY = "Secondary"
    UNGRADED = "Ungraded"


class Grade(str, Enum):
    """Grade a metric applies to."""

    ALL_GRADES = "All Grades"
    PREKINDERGARTEN = "Prekindergarten"
    KINDERGARTEN = "Kindergarten"
    HIGH_SCHOOL = "High School"
    GRADE_1 = "Grade 1"
    GRADE_2 = "Grade 2"
    GRADE_3 = "Grade 3"
    GRADE_4 = "Grade 4"
    GRADE_5 = "Grade 5"
    GRADE_6 = "Grade 6"
    GRADE_7 = "Grade 7"
    GRADE_8 = "Grade 8"
    GRADE_9 = "Grade 9"
    GRADE_10 = "Grade 10"
    GRADE_11 = "Grade 11"
    GRADE_12 = "Grade 12"


class Subgroup(str, Enum):
    """Demographic subgroup of a proficiency figure."""

    ALL_STUDENTS = "All Students"
    AMERICAN_INDIAN_OR_ALASKA_NATIVE = "American Indian or Alaska Native"
    AMERICAN_INDIAN_ALASKA_NATIVE_NATIVE_AMERICAN = (
        "American Indian/Alaska Native/Native American"
    )
    ASIAN = "Asian"
    ASIAN_PACIFIC_ISLANDER = "Asian/Pacific Islander"
    BLACK_OR_AFRICAN_AMERICAN = "Black or African American"
    BLACK_NOT_HISPANIC_AFRICAN_AMERICAN = "Black (not Hispanic) African American"
    HISPANIC_LATINO = "Hispanic/Latino"
    NATIVE_HAWAIIAN_OR_OTHER_PACIFIC_ISLANDER = (
        "Native Hawaiian or Other Pacific Islander"
    )
    TWO_OR_MORE_RACES = "Two or more races"
    MULTICULTURAL = "Multicultural/Multiethnic/Multiracial/other"
    WHITE = "White"
    WHITE_OR_CAUCASIAN_NOT_HISPANIC = "White or Caucasian (not Hispanic)"
    MALE = "Male"
    FEMALE = "Female"
    CHILDREN_WITH_DISABILITIES = "Children with disabilities"
    ECONOMICALLY_DISADVANTAGED = "Economically Disadvantaged"
    ENGLISH_LEARNER = "English Learner"
    FOSTER_CARE_STUDENTS = "Foster care students"
    HOMELESS = "Homeless"
    MIGRATORY_STUDENTS = "Migratory students"
    MILITARY_CONNECTED = "Military connected"


class YesNo(str, Enum):
    """Tri-state flag as reported by NCES."""

    YES = "Yes"
    NO = "No"
    NOT_REPORTED = "Not reported"
    NOT_APPLICABLE = "Not applicable"


class SchoolType(str, Enum):
    """NCES school type."""

    REGULAR = "Regular School"
    ALTERNATIVE = "Alternative School"
    CAREER_AND_TECHNICAL = "Career and Technical School"
    SPECIAL_EDUCATION = "Special Education School"


class SatGrade(str, Enum):
    """Grade of SAT takers."""

    GRADE_9 = "Grade 9"
    GRADE_10 = "Grade 10"
    GRADE_11 = "Grade 11"
    GRADE_12 = "Grade 12"


class Race(str, Enum):
    """Race category of enrollment counts."""

    AMERICAN_INDIAN_OR_ALASKA_NATIVE = "American Indian or Alaska Native"
    ASIAN = "Asian"
    BLACK_OR_AFRICAN_AMERICAN = "Black or African American"
    HISPANIC_LATINO = "Hispanic/Latino"
    NATIVE_HAWAIIAN_OR_OTHER_PACIFIC_ISLANDER = (
        "Native Hawaiian or Other Pacific Islander"
    )
    NO_CATEGORY_CODES = "No Category Codes"
    NOT_SPECIFIED = "Not Specified"
    TWO_OR_MORE_RACES = "Two or more races"
    WHITE = "White"


class Sex(str, Enum):
    """Sex category of enrollment counts."""

    FEMALE = "Female"
    MALE = "Male"
    NO_CATEGORY_CODES = "No Category Codes"
    NOT_SPECIFIED = "Not Specified"


class CountLevel(str, Enum):
    """Aggregation level for student counts."""

    NATIONAL = "national"
    STATE = "state"
    DISTRICT = "district"
    SCHOOL = "school"
