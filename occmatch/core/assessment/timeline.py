"""Skills assessment timeline and cost estimator.

All durations and amounts are fixed display strings; readiness flags swap
them for shorter or cheaper variants rather than doing arithmetic.
"""

from __future__ import annotations

from typing import Any

from ..catalog.loader import OccupationCatalog, resolve_catalog
from ..models.client import ClientReadiness
from ..models.results import AssessmentTimeline, CostBreakdown, Milestone, TimelineEstimate
from ...observability.logger import get_logger

logger = get_logger(__name__)

PREPARATION_DEFAULT = "4-8 weeks"
PREPARATION_WITH_DOCUMENTS = "2-4 weeks"
TOTAL_DEFAULT = "16-24 weeks"
TOTAL_WITH_DOCUMENTS = "14-20 weeks"

ENGLISH_TEST_COST = "AUD $300-400"
ENGLISH_TEST_COST_TAKEN = "AUD $0"
DOCUMENT_TRANSLATION_COST = "AUD $200-500"
TOTAL_COST_DEFAULT = "AUD $1,700-2,700"
TOTAL_COST_WITH_ENGLISH_TEST = "AUD $1,400-2,300"


def coerce_readiness(client_readiness: ClientReadiness | dict[str, Any] | None) -> ClientReadiness:
    if client_readiness is None:
        return ClientReadiness()
    if isinstance(client_readiness, ClientReadiness):
        return client_readiness
    return ClientReadiness.model_validate(client_readiness)


def calculate_assessment_timeline(
    occupation_code: str,
    client_readiness: ClientReadiness | dict[str, Any] | None = None,
    catalog: OccupationCatalog | None = None,
) -> AssessmentTimeline | None:
    """Estimate phases, costs and milestones for an occupation's assessment.

    Args:
        occupation_code: ANZSCO code
        client_readiness: Readiness flags (model, dict or None)
        catalog: Catalog to resolve the code against

    Returns:
        AssessmentTimeline, or None for an unknown code
    """
    occupation = resolve_catalog(catalog).get_by_code(occupation_code)
    if occupation is None:
        logger.debug("occupation_code_unknown", occupation_code=occupation_code)
        return None

    readiness = coerce_readiness(client_readiness)
    processing_time = occupation.skills_assessment.processing_time

    timeline = TimelineEstimate(
        preparation=PREPARATION_WITH_DOCUMENTS if readiness.has_documents else PREPARATION_DEFAULT,
        assessment=processing_time,
        total=TOTAL_WITH_DOCUMENTS if readiness.has_documents else TOTAL_DEFAULT,
    )
    costs = CostBreakdown(
        assessment=occupation.skills_assessment.cost,
        english_test=ENGLISH_TEST_COST_TAKEN if readiness.has_english_test else ENGLISH_TEST_COST,
        document_translation=DOCUMENT_TRANSLATION_COST,
        total=TOTAL_COST_WITH_ENGLISH_TEST if readiness.has_english_test else TOTAL_COST_DEFAULT,
    )

    milestones = [
        Milestone(
            phase="Document Preparation",
            duration=timeline.preparation,
            tasks=["Gather required documents", "Obtain translations", "Get certifications"],
        ),
        Milestone(
            phase="Application Submission",
            duration="1-2 weeks",
            tasks=["Complete application forms", "Pay assessment fees", "Submit application"],
        ),
        Milestone(
            phase="Assessment Processing",
            duration=processing_time,
            tasks=["Document review", "Qualification verification", "Experience assessment"],
        ),
        Milestone(
            phase="Outcome",
            duration="1 week",
            tasks=["Receive assessment result", "Plan next steps"],
        ),
    ]

    return AssessmentTimeline(timeline=timeline, costs=costs, milestones=milestones)
