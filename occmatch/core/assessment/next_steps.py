"""Action-plan generation from eligibility checks."""

from ..models.occupation import OccupationRecord
from ..models.results import EligibilityChecks, NextStep


def generate_next_steps(checks: EligibilityChecks, occupation: OccupationRecord) -> list[NextStep]:
    """Turn failing axes into ordered remediation steps.

    One step per failing axis (qualification, experience, English, in that
    order); when every axis passed, a single application step instead.
    Priorities are importance tags, so two steps may share priority 1.

    Args:
        checks: Per-axis eligibility outcome
        occupation: Occupation the checks were computed for

    Returns:
        Ordered list of next steps
    """
    steps: list[NextStep] = []
    essential = ", ".join(occupation.qualifications.essential)

    if not checks.qualification:
        steps.append(
            NextStep(
                step="Qualification Assessment",
                description=f"Obtain required qualifications: {essential}",
                priority=1,
                timeframe="6-24 months",
            )
        )

    if not checks.experience:
        steps.append(
            NextStep(
                step="Gain Work Experience",
                description=f"Obtain {occupation.work_experience.minimum} in relevant field",
                priority=2,
                timeframe="1-3 years",
            )
        )

    if not checks.english:
        steps.append(
            NextStep(
                step="English Language Test",
                description=(
                    f"Achieve required English scores: {occupation.english_requirements.ielts}"
                ),
                priority=3,
                timeframe="3-6 months",
            )
        )

    if checks.all_passed:
        steps.append(
            NextStep(
                step="Skills Assessment Application",
                description=f"Apply through {occupation.skills_assessment.assessing_authority}",
                priority=1,
                timeframe=occupation.skills_assessment.processing_time,
            )
        )

    return steps
