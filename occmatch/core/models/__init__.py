"""occmatch data models for occupations, client profiles and assessment results."""

from .base import FrozenModel, OccmatchBaseModel, VersionedSchema
from .client import ClientProfile, ClientReadiness, LanguageSkills
from .enums import (
    EDUCATION_RANKS,
    ENGLISH_RANKS,
    SKILL_LEVEL_LABELS,
    DocumentType,
    EducationLevel,
    EligibilityAxis,
    EnglishProficiency,
    OccupationCategory,
    RecommendationPriority,
    education_rank,
    english_rank,
)
from .occupation import (
    CatalogDocument,
    EnglishRequirements,
    OccupationRecord,
    Qualifications,
    SkillsAssessment,
    WorkExperience,
    derive_english_tier,
    parse_minimum_experience_years,
)
from .results import (
    AssessmentTimeline,
    CostBreakdown,
    DocumentRequirement,
    EligibilityChecks,
    EligibilityResult,
    MatchCandidate,
    Milestone,
    NextStep,
    OccupationAssessment,
    Recommendation,
    TimelineEstimate,
)

__all__ = [
    # Base
    "OccmatchBaseModel",
    "FrozenModel",
    "VersionedSchema",
    # Enums and ranks
    "OccupationCategory",
    "EducationLevel",
    "EnglishProficiency",
    "EligibilityAxis",
    "RecommendationPriority",
    "DocumentType",
    "EDUCATION_RANKS",
    "ENGLISH_RANKS",
    "SKILL_LEVEL_LABELS",
    "education_rank",
    "english_rank",
    # Occupation
    "OccupationRecord",
    "Qualifications",
    "SkillsAssessment",
    "WorkExperience",
    "EnglishRequirements",
    "CatalogDocument",
    "parse_minimum_experience_years",
    "derive_english_tier",
    # Client
    "ClientProfile",
    "LanguageSkills",
    "ClientReadiness",
    # Results
    "EligibilityChecks",
    "EligibilityResult",
    "Recommendation",
    "NextStep",
    "MatchCandidate",
    "DocumentRequirement",
    "TimelineEstimate",
    "CostBreakdown",
    "Milestone",
    "AssessmentTimeline",
    "OccupationAssessment",
]
