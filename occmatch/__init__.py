"""occmatch - ANZSCO occupation eligibility matching for skills assessments."""

from .core.assessment import (
    calculate_assessment_timeline,
    check_skills_assessment_eligibility,
    generate_document_checklist,
    generate_next_steps,
)
from .core.catalog import (
    CatalogError,
    OccupationCatalog,
    get_all_categories,
    get_assessing_authorities,
    get_default_catalog,
    get_occupation_by_code,
    get_occupations_by_category,
    get_skill_levels,
    load_catalog,
    search_occupations_by_title,
)
from .core.matching import calculate_match_score, match_client_to_anzsco
from .core.models import ClientProfile, ClientReadiness, OccupationRecord
from .observability.logger import APP_VERSION as __version__

__all__ = [
    "__version__",
    "CatalogError",
    "ClientProfile",
    "ClientReadiness",
    "OccupationCatalog",
    "OccupationRecord",
    "calculate_assessment_timeline",
    "calculate_match_score",
    "check_skills_assessment_eligibility",
    "generate_document_checklist",
    "generate_next_steps",
    "get_all_categories",
    "get_assessing_authorities",
    "get_default_catalog",
    "get_occupation_by_code",
    "get_occupations_by_category",
    "get_skill_levels",
    "load_catalog",
    "match_client_to_anzsco",
    "search_occupations_by_title",
]
