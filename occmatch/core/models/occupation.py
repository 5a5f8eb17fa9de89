"""Occupation record models for the ANZSCO catalog (Pydantic only)."""

import re
from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import FrozenModel, VersionedSchema
from .enums import SKILL_LEVEL_LABELS, EnglishProficiency, OccupationCategory

# Legacy marker for occupations that demand the native-equivalent English tier.
NATIVE_TIER_IELTS_MARKER = "7.5"

_LEADING_INT = re.compile(r"^[+-]?\d+")


# =============================================================================
# Legacy string heuristics
# =============================================================================


def parse_minimum_experience_years(minimum: str | None) -> int | None:
    """Parse the leading integer of a "<N> year(s) ..." requirement.

    Only the first whitespace-separated token is read. Trailing
    characters after the digits are ignored ("3+" -> 3), and a token with no
    leading digits yields None.

    Args:
        minimum: Raw ``workExperience.minimum`` text

    Returns:
        Minimum years, or None when the text has no leading integer
    """
    tokens = (minimum or "").split()
    if not tokens:
        return None
    match = _LEADING_INT.match(tokens[0])
    return int(match.group()) if match else None


def derive_english_tier(ielts: str | None) -> EnglishProficiency:
    """Return the English tier an IELTS descriptor demands.

    Args:
        ielts: Free-text IELTS band description

    Returns:
        NATIVE when the descriptor mentions a 7.5 band, otherwise ADVANCED
    """
    if ielts and NATIVE_TIER_IELTS_MARKER in ielts:
        return EnglishProficiency.NATIVE
    return EnglishProficiency.ADVANCED


def _pick(source: Any, *names: str) -> Any:
    """Read the first present key/attribute from a raw mapping or a model."""
    for name in names:
        if isinstance(source, dict):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return None


# =============================================================================
# Pydantic Schemas
# =============================================================================


class Qualifications(FrozenModel):
    """Qualification requirements; any single essential entry is sufficient."""

    essential: list[str] = Field(..., min_length=1, description="Essential qualifications")
    desirable: list[str] = Field(default_factory=list, description="Desirable qualifications")


class SkillsAssessment(FrozenModel):
    """Metadata about the authority that performs the skills assessment."""

    assessing_authority: str = Field(
        ..., alias="assessingAuthority", description="Assessing authority"
    )
    requirements: list[str] = Field(default_factory=list, description="Assessment components")
    processing_time: str = Field(
        ..., alias="processingTime", description="Processing time display string"
    )
    cost: str = Field(..., description="Assessment cost display string")


class WorkExperience(FrozenModel):
    """Work experience requirements."""

    minimum: str = Field(..., min_length=1, description='Minimum, e.g. "3 years post-qualification"')
    preferred: str | None = Field(None, description="Preferred experience")


class EnglishRequirements(FrozenModel):
    """English test thresholds as free-text band descriptions."""

    ielts: str = Field(..., alias="IELTS", description="IELTS band description")
    pte: str | None = Field(None, alias="PTE", description="PTE band description")
    toefl: str | None = Field(None, alias="TOEFL", description="TOEFL band description")


class OccupationRecord(FrozenModel):
    """A single ANZSCO occupation and its skills assessment requirements."""

    code: str = Field(..., min_length=1, description="ANZSCO classification code")
    title: str = Field(..., min_length=1, description="Occupation title")
    category: OccupationCategory = Field(..., description="Occupation category")
    skill_level: int = Field(..., alias="skillLevel", ge=1, le=5, description="1 = most skilled")
    description: str = Field("", description="Occupation summary")
    key_tasks: list[str] = Field(default_factory=list, alias="keyTasks", description="Key tasks")

    qualifications: Qualifications = Field(..., description="Qualification requirements")
    skills_assessment: SkillsAssessment = Field(
        ..., alias="skillsAssessment", description="Skills assessment metadata"
    )
    work_experience: WorkExperience = Field(
        ..., alias="workExperience", description="Work experience requirements"
    )
    english_requirements: EnglishRequirements = Field(
        ..., alias="englishRequirements", description="English language requirements"
    )

    # Structured fields derived from the legacy requirement strings
    minimum_experience_years: int | None = Field(
        None, alias="minimumExperienceYears", description="Parsed minimum years of experience"
    )
    english_tier_required: EnglishProficiency = Field(
        EnglishProficiency.ADVANCED,
        alias="englishTierRequired",
        description="Minimum English proficiency tier",
    )

    @field_validator("code", mode="before")
    @classmethod
    def _code_as_string(cls, value: Any) -> Any:
        # YAML reads unquoted codes as integers
        return str(value) if isinstance(value, int) else value

    @model_validator(mode="before")
    @classmethod
    def _derive_structured_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        experience = _pick(data, "workExperience", "work_experience")
        english = _pick(data, "englishRequirements", "english_requirements")

        derived = dict(data)
        for key in (
            "minimumExperienceYears",
            "minimum_experience_years",
            "englishTierRequired",
            "english_tier_required",
        ):
            derived.pop(key, None)
        derived["minimumExperienceYears"] = parse_minimum_experience_years(
            _pick(experience, "minimum") if experience is not None else None
        )
        derived["englishTierRequired"] = derive_english_tier(
            _pick(english, "IELTS", "ielts") if english is not None else None
        )
        return derived

    @property
    def skill_level_label(self) -> str:
        return SKILL_LEVEL_LABELS.get(self.skill_level, "Unknown")


class CatalogDocument(VersionedSchema):
    """On-disk catalog layout: a version tag plus occupations keyed by code."""

    occupations: dict[str, OccupationRecord] = Field(
        default_factory=dict, description="Occupations keyed by ANZSCO code"
    )

    @field_validator("occupations", mode="before")
    @classmethod
    def _string_keys(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(key): record for key, record in value.items()}
        return value
