"""Match a client's free-text occupation to catalog occupations."""

from ..assessment.eligibility import check_skills_assessment_eligibility
from ..catalog.loader import OccupationCatalog, resolve_catalog
from ..models.client import ClientProfile, LanguageSkills
from ..models.enums import EnglishProficiency
from ..models.results import MatchCandidate
from .scorer import calculate_match_score
from ...observability.logger import get_logger

logger = get_logger(__name__)

# English is not part of the matching inputs; candidates are ranked as if the
# client had Advanced English.
ASSUMED_ENGLISH = EnglishProficiency.ADVANCED.value


def match_client_to_anzsco(
    client_occupation: str,
    education_level: str | None = None,
    experience_years: float | None = None,
    catalog: OccupationCatalog | None = None,
) -> list[MatchCandidate]:
    """Rank catalog occupations whose title contains the client's occupation.

    Args:
        client_occupation: Occupation as typed by the client
        education_level: Client education level
        experience_years: Client years of work experience
        catalog: Catalog to search (defaults to the global one)

    Returns:
        Candidates, eligible ones first, then by match score descending;
        ties keep catalog order
    """
    catalog = resolve_catalog(catalog)
    profile = ClientProfile(
        education_level=education_level,
        work_experience_years=experience_years,
        language_skills=LanguageSkills(english=ASSUMED_ENGLISH),
    )

    candidates: list[MatchCandidate] = []
    for occupation in catalog.search_by_title(client_occupation):
        eligibility = check_skills_assessment_eligibility(profile, occupation.code, catalog=catalog)
        candidates.append(
            MatchCandidate(
                occupation=occupation,
                match_score=calculate_match_score(client_occupation, occupation),
                eligible=eligibility.eligible,
                recommendations=eligibility.recommendations,
            )
        )

    # sorted() is stable, so equal keys keep catalog order
    ranked = sorted(candidates, key=lambda c: (not c.eligible, -c.match_score))

    logger.debug(
        "client_matched",
        client_occupation=client_occupation,
        candidates=len(ranked),
        eligible=sum(1 for c in ranked if c.eligible),
    )
    return ranked
