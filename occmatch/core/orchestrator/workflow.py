"""AssessmentWorkflow - assembles everything shown for a selected occupation."""

from typing import Any

from ..assessment.checklist import generate_document_checklist
from ..assessment.eligibility import check_skills_assessment_eligibility, coerce_client_profile
from ..assessment.timeline import calculate_assessment_timeline
from ..catalog.loader import OccupationCatalog, resolve_catalog
from ..models.client import ClientProfile, ClientReadiness
from ..models.enums import EnglishProficiency
from ..models.results import OccupationAssessment
from ...observability.logger import get_logger, occupation_context

logger = get_logger(__name__)


class AssessmentWorkflow:
    """Runs the per-occupation steps once a single occupation is selected.

    1. Eligibility verdict (only when a client profile is supplied)
    2. Document checklist
    3. Timeline and cost estimate
    """

    def __init__(self, catalog: OccupationCatalog | None = None):
        self.catalog = resolve_catalog(catalog)

    def readiness_for(self, profile: ClientProfile | None) -> ClientReadiness:
        """Derive readiness flags from a client profile.

        Documents are never assumed to be ready; a client reporting Advanced
        English is treated as already holding a test result.
        """
        english = profile.english if profile is not None else None
        return ClientReadiness(
            has_documents=False,
            has_english_test=english == EnglishProficiency.ADVANCED.value,
        )

    def select(
        self,
        occupation_code: str,
        client: ClientProfile | dict[str, Any] | None = None,
    ) -> OccupationAssessment | None:
        """Build the assessment bundle for one occupation.

        Args:
            occupation_code: ANZSCO code of the selected occupation
            client: Optional client profile

        Returns:
            OccupationAssessment, or None for an unknown code
        """
        occupation = self.catalog.get_by_code(occupation_code)
        if occupation is None:
            logger.info("occupation_select_unknown_code", occupation_code=occupation_code)
            return None

        profile = coerce_client_profile(client) if client is not None else None

        with occupation_context(occupation.code):
            eligibility = None
            if profile is not None:
                eligibility = check_skills_assessment_eligibility(
                    profile, occupation.code, catalog=self.catalog
                )

            checklist = generate_document_checklist(occupation.code, catalog=self.catalog)
            timeline = calculate_assessment_timeline(
                occupation.code, self.readiness_for(profile), catalog=self.catalog
            )

            logger.info(
                "occupation_selected",
                eligible=eligibility.eligible if eligibility else None,
                documents=len(checklist),
            )

        return OccupationAssessment(
            occupation=occupation,
            eligibility=eligibility,
            document_checklist=checklist,
            timeline=timeline,
        )
