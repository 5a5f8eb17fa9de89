"""Result models for eligibility, matching, checklists and timelines (Pydantic only)."""

from pydantic import Field

from .base import FrozenModel
from .enums import DocumentType, EligibilityAxis, RecommendationPriority
from .occupation import OccupationRecord


# =============================================================================
# Eligibility
# =============================================================================


class EligibilityChecks(FrozenModel):
    """Per-axis outcome; an axis that was not evaluated stays False."""

    qualification: bool = Field(False, description="Qualification requirement met")
    experience: bool = Field(False, description="Experience requirement met")
    english: bool = Field(False, description="English requirement met")

    @property
    def all_passed(self) -> bool:
        return self.qualification and self.experience and self.english


class Recommendation(FrozenModel):
    """Remediation hint for a failing axis."""

    type: EligibilityAxis = Field(..., description="Axis the recommendation addresses")
    message: str = Field(..., description="Human-readable requirement text")
    priority: RecommendationPriority = Field(..., description="Recommendation priority")


class NextStep(FrozenModel):
    """An action-plan step. Priority 1 marks the most important steps."""

    step: str = Field(..., description="Step name")
    description: str = Field(..., description="What the client has to do")
    priority: int = Field(..., ge=1, description="Ordinal importance tag")
    timeframe: str = Field(..., description="Expected duration display string")


class EligibilityResult(FrozenModel):
    """Eligibility verdict for one client/occupation pair.

    For an unknown occupation code only ``eligible``, ``reason`` and an empty
    ``recommendations`` list are set; callers branch on ``reason``.
    """

    eligible: bool = Field(..., description="All three axes passed")
    reason: str | None = Field(None, description="Why no evaluation took place")
    checks: EligibilityChecks | None = Field(None, description="Per-axis outcome")
    occupation: OccupationRecord | None = Field(None, description="Evaluated occupation")
    recommendations: list[Recommendation] = Field(
        default_factory=list, description="One entry per failing evaluated axis"
    )
    next_steps: list[NextStep] | None = Field(None, alias="nextSteps", description="Action plan")
    evaluated_axes: list[EligibilityAxis] | None = Field(
        None, alias="evaluatedAxes", description="Axes the client profile had data for"
    )


# =============================================================================
# Matching
# =============================================================================


class MatchCandidate(FrozenModel):
    """Catalog occupation ranked against a free-text occupation name."""

    occupation: OccupationRecord = Field(..., description="Candidate occupation")
    match_score: float = Field(..., alias="matchScore", ge=0.0, le=100.0, description="Match 0-100")
    eligible: bool | None = Field(None, description="Eligibility when a profile was supplied")
    recommendations: list[Recommendation] = Field(
        default_factory=list, description="Recommendations from the eligibility check"
    )


# =============================================================================
# Checklist and timeline
# =============================================================================


class DocumentRequirement(FrozenModel):
    """Single entry of the skills assessment document checklist."""

    name: str = Field(..., description="Document name")
    type: DocumentType = Field(..., description="Document group")
    required: bool = Field(True, description="Mandatory for the application")
    description: str = Field(..., description="What exactly has to be supplied")


class TimelineEstimate(FrozenModel):
    """Phase durations as display strings."""

    preparation: str = Field(..., description="Document preparation")
    assessment: str = Field(..., description="Assessment processing")
    total: str = Field(..., description="End-to-end estimate")


class CostBreakdown(FrozenModel):
    """Cost estimates as display strings (not computed sums)."""

    assessment: str = Field(..., description="Assessing authority fee")
    english_test: str = Field(..., alias="englishTest", description="English test fee")
    document_translation: str = Field(
        ..., alias="documentTranslation", description="Translation costs"
    )
    total: str = Field(..., description="Total estimate")


class Milestone(FrozenModel):
    """A phase of the skills assessment process."""

    phase: str = Field(..., description="Phase name")
    duration: str = Field(..., description="Phase duration")
    tasks: list[str] = Field(default_factory=list, description="Tasks in this phase")


class AssessmentTimeline(FrozenModel):
    """Timeline, cost and milestone plan for one occupation."""

    timeline: TimelineEstimate = Field(..., description="Phase durations")
    costs: CostBreakdown = Field(..., description="Cost breakdown")
    milestones: list[Milestone] = Field(default_factory=list, description="Fixed phases")


class OccupationAssessment(FrozenModel):
    """Everything shown once a single occupation is selected."""

    occupation: OccupationRecord = Field(..., description="Selected occupation")
    eligibility: EligibilityResult | None = Field(
        None, description="Eligibility verdict when a client profile was supplied"
    )
    document_checklist: list[DocumentRequirement] = Field(
        default_factory=list, alias="documentChecklist", description="Required documents"
    )
    timeline: AssessmentTimeline = Field(..., description="Timeline and cost estimate")
