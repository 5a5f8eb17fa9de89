"""Client-side inputs: the intake profile and readiness hints (Pydantic only)."""

from typing import Any

from pydantic import Field, field_validator

from .base import OccmatchBaseModel

FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class LanguageSkills(OccmatchBaseModel):
    """Self-reported language proficiency."""

    english: str | None = Field(None, description='English proficiency, e.g. "Advanced"')

    @field_validator("english", mode="before")
    @classmethod
    def _blank_english(cls, value: Any) -> Any:
        return _blank_to_none(value)


class ClientProfile(OccmatchBaseModel):
    """Client profile assembled from intake form state.

    Every field is optional: an absent, blank or otherwise falsy field means
    the matching eligibility axis is not evaluated. Form values are accepted
    as typed, so blank strings count as absent and negative years simply
    fail the experience comparison.
    """

    education_level: str | None = Field(None, description='Education level, e.g. "Bachelor\'s Degree"')
    work_experience_years: float | None = Field(None, description="Years of work experience")
    language_skills: LanguageSkills | None = Field(None, description="Language proficiency")
    occupation: str | None = Field(None, description="Current occupation as free text")

    @field_validator("education_level", "language_skills", "occupation", mode="before")
    @classmethod
    def _blank_text(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("work_experience_years", mode="before")
    @classmethod
    def _parse_years(cls, value: Any) -> Any:
        # Unparsable form text carries no usable number
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return None
        return value

    @property
    def english(self) -> str | None:
        return self.language_skills.english if self.language_skills else None


class ClientReadiness(OccmatchBaseModel):
    """Readiness flags that shorten the estimated timeline and cost."""

    has_documents: bool = Field(False, alias="hasDocuments", description="Documents already gathered")
    has_english_test: bool = Field(
        False, alias="hasEnglishTest", description="English test already taken"
    )

    @field_validator("has_documents", "has_english_test", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        if isinstance(value, str):
            return bool(value.strip()) and value.strip().lower() not in FALSE_STRINGS
        return bool(value)
