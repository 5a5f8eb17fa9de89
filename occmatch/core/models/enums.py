"""Enumeration types and ordinal rank tables for occmatch models."""

from enum import Enum


class OccupationCategory(str, Enum):
    """Occupation categories present in the catalog."""

    EDUCATION = "Education"
    TRADES = "Trades"


class EducationLevel(str, Enum):
    """Client education levels, as entered on the intake form."""

    HIGH_SCHOOL = "High School"
    DIPLOMA_CERTIFICATE = "Diploma/Certificate"
    BACHELOR = "Bachelor's Degree"
    MASTER = "Master's Degree"
    PHD = "PhD/Doctorate"
    PROFESSIONAL = "Professional Degree"


class EnglishProficiency(str, Enum):
    """Self-reported English proficiency."""

    NONE = "None"
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    NATIVE = "Native"


class EligibilityAxis(str, Enum):
    """Independent dimensions of a skills assessment eligibility check."""

    QUALIFICATION = "qualification"
    EXPERIENCE = "experience"
    ENGLISH = "english"


class RecommendationPriority(str, Enum):
    """Priority attached to an eligibility recommendation."""

    HIGH = "high"
    MEDIUM = "medium"


class DocumentType(str, Enum):
    """Document groups used in the skills assessment checklist."""

    IDENTITY = "Identity"
    EDUCATION = "Education"
    EXPERIENCE = "Experience"
    PROFESSIONAL = "Professional"
    LANGUAGE = "Language"
    TRAINING = "Training"


# Ranks are keyed by the plain string value so free-text input can be looked up
# directly. Unknown values rank 0.
EDUCATION_RANKS: dict[str, int] = {
    EducationLevel.HIGH_SCHOOL.value: 1,
    EducationLevel.DIPLOMA_CERTIFICATE.value: 2,
    EducationLevel.BACHELOR.value: 3,
    EducationLevel.MASTER.value: 4,
    EducationLevel.PHD.value: 5,
    EducationLevel.PROFESSIONAL.value: 4,
}

ENGLISH_RANKS: dict[str, int] = {
    EnglishProficiency.NONE.value: 0,
    EnglishProficiency.BASIC.value: 1,
    EnglishProficiency.INTERMEDIATE.value: 2,
    EnglishProficiency.ADVANCED.value: 3,
    EnglishProficiency.NATIVE.value: 4,
}

SKILL_LEVEL_LABELS: dict[int, str] = {
    1: "Professional",
    2: "Associate Professional",
    3: "Skilled",
    4: "Semi-skilled",
    5: "Unskilled",
}


def education_rank(level: str | None) -> int:
    """Return the ordinal rank (0-5) of an education level string."""
    if not level:
        return 0
    return EDUCATION_RANKS.get(getattr(level, "value", level), 0)


def english_rank(proficiency: str | None) -> int:
    """Return the ordinal rank (0-4) of an English proficiency string."""
    if not proficiency:
        return 0
    return ENGLISH_RANKS.get(getattr(proficiency, "value", proficiency), 0)
