"""Skills assessment eligibility evaluator.

Compares a client profile against one occupation along three independent
axes (qualification, experience, English) and combines them. An axis is only
evaluated when the profile carries a truthy value for it; otherwise it stays
False, which fails the overall verdict without producing a recommendation.
"""

from __future__ import annotations

from typing import Any

from ..catalog.loader import OccupationCatalog, resolve_catalog
from ..models.client import ClientProfile
from ..models.enums import (
    EligibilityAxis,
    EnglishProficiency,
    RecommendationPriority,
    education_rank,
    english_rank,
)
from ..models.occupation import OccupationRecord
from ..models.results import EligibilityChecks, EligibilityResult, Recommendation
from .next_steps import generate_next_steps
from ...observability.logger import get_logger

logger = get_logger(__name__)

INVALID_OCCUPATION_REASON = "Invalid occupation code"

# Keyword -> minimum education rank. The first keyword found in a
# qualification string decides it; strings with no keyword are satisfied.
QUALIFICATION_RULES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("Certificate III",), 2),
    (("Certificate IV",), 2),
    (("Bachelor",), 3),
    (("Postgraduate", "Master"), 4),
)

ENGLISH_TIER_MIN_RANK: dict[str, int] = {
    EnglishProficiency.NATIVE.value: 4,
    EnglishProficiency.ADVANCED.value: 3,
}


def coerce_client_profile(client_profile: ClientProfile | dict[str, Any] | None) -> ClientProfile:
    """Accept a ClientProfile, a plain dict of the same shape, or None."""
    if client_profile is None:
        return ClientProfile()
    if isinstance(client_profile, ClientProfile):
        return client_profile
    return ClientProfile.model_validate(client_profile)


def qualification_requirement_met(rank: int, requirement: str) -> bool:
    for keywords, min_rank in QUALIFICATION_RULES:
        if any(keyword in requirement for keyword in keywords):
            return rank >= min_rank
    return True


def check_qualification_match(education_level: str | None, essential: list[str]) -> bool:
    """True when the education level satisfies ANY essential qualification."""
    rank = education_rank(education_level)
    return any(qualification_requirement_met(rank, requirement) for requirement in essential)


def check_experience(years: float | None, minimum_years: int | None) -> bool:
    # An unparsable minimum never passes
    if years is None or minimum_years is None:
        return False
    return years >= minimum_years


def check_english_requirement(english: str | None, tier_required: str) -> bool:
    tier = getattr(tier_required, "value", tier_required)
    return english_rank(english) >= ENGLISH_TIER_MIN_RANK.get(tier, 3)


def _evaluate(profile: ClientProfile, occupation: OccupationRecord) -> EligibilityResult:
    qualification = experience = english = False
    evaluated: list[EligibilityAxis] = []
    recommendations: list[Recommendation] = []

    if profile.education_level:
        evaluated.append(EligibilityAxis.QUALIFICATION)
        qualification = check_qualification_match(
            profile.education_level, occupation.qualifications.essential
        )
        if not qualification:
            recommendations.append(
                Recommendation(
                    type=EligibilityAxis.QUALIFICATION,
                    message=f"Required: {', '.join(occupation.qualifications.essential)}",
                    priority=RecommendationPriority.HIGH,
                )
            )

    if profile.work_experience_years:
        evaluated.append(EligibilityAxis.EXPERIENCE)
        experience = check_experience(
            profile.work_experience_years, occupation.minimum_experience_years
        )
        if not experience:
            recommendations.append(
                Recommendation(
                    type=EligibilityAxis.EXPERIENCE,
                    message=f"Minimum {occupation.work_experience.minimum} required",
                    priority=RecommendationPriority.HIGH,
                )
            )

    if profile.english:
        evaluated.append(EligibilityAxis.ENGLISH)
        english = check_english_requirement(profile.english, occupation.english_tier_required)
        if not english:
            recommendations.append(
                Recommendation(
                    type=EligibilityAxis.ENGLISH,
                    message=f"English requirement: {occupation.english_requirements.ielts}",
                    priority=RecommendationPriority.MEDIUM,
                )
            )

    checks = EligibilityChecks(qualification=qualification, experience=experience, english=english)

    return EligibilityResult(
        eligible=checks.all_passed,
        checks=checks,
        occupation=occupation,
        recommendations=recommendations,
        next_steps=generate_next_steps(checks, occupation),
        evaluated_axes=evaluated,
    )


def check_skills_assessment_eligibility(
    client_profile: ClientProfile | dict[str, Any] | None,
    occupation_code: str,
    catalog: OccupationCatalog | None = None,
) -> EligibilityResult:
    """Evaluate a client profile against one occupation's requirements.

    Args:
        client_profile: Client profile (model or dict of the same shape)
        occupation_code: ANZSCO code of the occupation
        catalog: Catalog to resolve the code against (defaults to the global one)

    Returns:
        EligibilityResult. For an unknown code the result carries ``reason``
        and no ``checks``.
    """
    occupation = resolve_catalog(catalog).get_by_code(occupation_code)
    if occupation is None:
        logger.debug("occupation_code_unknown", occupation_code=occupation_code)
        return EligibilityResult(
            eligible=False,
            reason=INVALID_OCCUPATION_REASON,
            recommendations=[],
        )

    result = _evaluate(coerce_client_profile(client_profile), occupation)

    logger.debug(
        "eligibility_evaluated",
        occupation=occupation,
        eligible=result.eligible,
        evaluated_axes=result.evaluated_axes,
        recommendations=len(result.recommendations),
    )
    return result
