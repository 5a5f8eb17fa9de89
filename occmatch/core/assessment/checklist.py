"""Document checklist builder for skills assessment applications."""

from ..catalog.loader import OccupationCatalog, resolve_catalog
from ..models.enums import DocumentType, OccupationCategory
from ..models.occupation import OccupationRecord
from ..models.results import DocumentRequirement
from ...observability.logger import get_logger

logger = get_logger(__name__)

BASELINE_DOCUMENTS: tuple[DocumentRequirement, ...] = (
    DocumentRequirement(
        name="Passport",
        type=DocumentType.IDENTITY,
        required=True,
        description="Current passport with at least 6 months validity",
    ),
    DocumentRequirement(
        name="Birth Certificate",
        type=DocumentType.IDENTITY,
        required=True,
        description="Certified copy of birth certificate",
    ),
    DocumentRequirement(
        name="Academic Transcripts",
        type=DocumentType.EDUCATION,
        required=True,
        description="Official transcripts from all educational institutions",
    ),
    DocumentRequirement(
        name="Degree/Diploma Certificates",
        type=DocumentType.EDUCATION,
        required=True,
        description="Certified copies of all qualification certificates",
    ),
    DocumentRequirement(
        name="Employment References",
        type=DocumentType.EXPERIENCE,
        required=True,
        description="Detailed employment references covering required experience period",
    ),
    DocumentRequirement(
        name="CV/Resume",
        type=DocumentType.EXPERIENCE,
        required=True,
        description="Detailed CV highlighting relevant experience and skills",
    ),
)


def _education_documents(occupation: OccupationRecord) -> list[DocumentRequirement]:
    return [
        DocumentRequirement(
            name="Teaching Registration",
            type=DocumentType.PROFESSIONAL,
            required=True,
            description="Current teaching registration/license",
        ),
        DocumentRequirement(
            name="English Language Test Results",
            type=DocumentType.LANGUAGE,
            required=True,
            description=f"{occupation.english_requirements.ielts} - IELTS Academic results",
        ),
        DocumentRequirement(
            name="Curriculum Vitae (Teaching)",
            type=DocumentType.PROFESSIONAL,
            required=True,
            description="Detailed teaching CV with lesson plans and student outcomes",
        ),
    ]


def _trades_documents(occupation: OccupationRecord) -> list[DocumentRequirement]:
    return [
        DocumentRequirement(
            name="Trade Qualification Certificate",
            type=DocumentType.PROFESSIONAL,
            required=True,
            description="Certificate III/IV in relevant trade",
        ),
        DocumentRequirement(
            name="Trade License",
            type=DocumentType.PROFESSIONAL,
            required=True,
            description="Current trade license (if applicable)",
        ),
        DocumentRequirement(
            name="Apprenticeship Records",
            type=DocumentType.TRAINING,
            required=True,
            description="Records of apprenticeship completion",
        ),
        DocumentRequirement(
            name="Skills Logbook",
            type=DocumentType.PROFESSIONAL,
            required=False,
            description="Detailed record of skills and competencies",
        ),
    ]


# Category-specific additions; a category without an entry gets the baseline only.
CATEGORY_DOCUMENTS = {
    OccupationCategory.EDUCATION: _education_documents,
    OccupationCategory.TRADES: _trades_documents,
}


def generate_document_checklist(
    occupation_code: str,
    catalog: OccupationCatalog | None = None,
) -> list[DocumentRequirement]:
    """Build the document checklist for one occupation.

    Args:
        occupation_code: ANZSCO code
        catalog: Catalog to resolve the code against

    Returns:
        Baseline documents followed by category-specific ones; [] for an
        unknown code
    """
    occupation = resolve_catalog(catalog).get_by_code(occupation_code)
    if occupation is None:
        logger.debug("occupation_code_unknown", occupation_code=occupation_code)
        return []

    additions = CATEGORY_DOCUMENTS.get(OccupationCategory(occupation.category))
    documents = list(BASELINE_DOCUMENTS)
    if additions is not None:
        documents.extend(additions(occupation))
    return documents
