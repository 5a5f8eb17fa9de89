from .checklist import BASELINE_DOCUMENTS, CATEGORY_DOCUMENTS, generate_document_checklist
from .eligibility import (
    INVALID_OCCUPATION_REASON,
    check_english_requirement,
    check_experience,
    check_qualification_match,
    check_skills_assessment_eligibility,
    coerce_client_profile,
)
from .next_steps import generate_next_steps
from .timeline import calculate_assessment_timeline

__all__ = [
    "BASELINE_DOCUMENTS",
    "CATEGORY_DOCUMENTS",
    "INVALID_OCCUPATION_REASON",
    "calculate_assessment_timeline",
    "check_english_requirement",
    "check_experience",
    "check_qualification_match",
    "check_skills_assessment_eligibility",
    "coerce_client_profile",
    "generate_document_checklist",
    "generate_next_steps",
]
