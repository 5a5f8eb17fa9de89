"""CLI interface for occmatch using Typer."""

import json
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.assessment.checklist import generate_document_checklist
from ..core.assessment.eligibility import check_skills_assessment_eligibility
from ..core.assessment.timeline import calculate_assessment_timeline
from ..core.catalog.loader import CatalogError, OccupationCatalog, get_default_catalog
from ..core.config.loader import get_config_value, load_config
from ..core.matching.matcher import match_client_to_anzsco
from ..core.models.client import ClientProfile, ClientReadiness, LanguageSkills
from ..core.models.occupation import OccupationRecord
from ..core.orchestrator.workflow import AssessmentWorkflow
from ..observability.logger import get_logger, setup_logging
from ..search.service import OccupationSearchService

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="occmatch",
    help="ANZSCO occupation eligibility matcher for skills assessments",
    add_completion=False,
)

EducationOption = Annotated[
    str | None,
    typer.Option("--education", "-e", help="Education level, e.g. \"Bachelor's Degree\""),
]
ExperienceOption = Annotated[
    float | None,
    typer.Option("--experience", "-x", min=0, help="Years of work experience"),
]
EnglishOption = Annotated[
    str | None,
    typer.Option("--english", help="English proficiency: None, Basic, Intermediate, Advanced, Native"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print JSON instead of tables")]


def _load_settings() -> dict[str, Any]:
    """Load config and apply its logging settings."""
    config = load_config()
    setup_logging(
        log_level=get_config_value(config, "logging.level", "WARNING"),
        log_format=get_config_value(config, "logging.format", "console"),
        log_file=get_config_value(config, "logging.file"),
    )
    return config


def _get_catalog() -> OccupationCatalog:
    _load_settings()
    try:
        return get_default_catalog()
    except CatalogError as e:
        console.print(f"[red]! Error loading catalog:[/red] {e}")
        raise typer.Exit(code=1)


def _client_profile(
    education: str | None,
    experience: float | None,
    english: str | None,
    occupation: str | None = None,
) -> ClientProfile | None:
    if not any(value is not None for value in (education, experience, english, occupation)):
        return None
    return ClientProfile(
        education_level=education,
        work_experience_years=experience,
        language_skills=LanguageSkills(english=english) if english else None,
        occupation=occupation,
    )


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2))


def _unknown_code(code: str) -> None:
    console.print(f"[red]! Error:[/red] Unknown occupation code: {code}")
    raise typer.Exit(code=1)


def _occupation_table(records: list[OccupationRecord], extra: list[dict[str, Any]] | None = None) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Code", style="dim", width=8)
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Skill Level", justify="right")
    if extra is not None:
        table.add_column("Match", justify="right")
        table.add_column("Eligible", justify="center")

    for idx, record in enumerate(records):
        row = [record.code, record.title, record.category, str(record.skill_level)]
        if extra is not None:
            score = extra[idx].get("match_score")
            eligible = extra[idx].get("eligible")
            row.append(f"{score:.0f}%" if score is not None else "N/A")
            row.append("[green]yes[/green]" if eligible else "[red]no[/red]")
        table.add_row(*row)
    return table


@app.command()
def search(
    term: Annotated[str, typer.Argument(help="Occupation title text")] = "",
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Category filter (or 'all')")
    ] = None,
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", min=1, help="Max occupations when listing all")
    ] = None,
    output_json: JsonOption = False,
):
    """Search occupations by title or category."""
    catalog = _get_catalog()
    config = load_config()
    default_limit = limit or get_config_value(config, "search.default_limit", 10)

    service = OccupationSearchService(catalog=catalog, default_limit=int(default_limit))
    results = service.search(term=term, category=category)

    if output_json:
        _echo_json([result.to_dict() for result in results])
        return

    if not results:
        console.print("[yellow]No occupations found[/yellow]")
        return

    console.print(_occupation_table([result.occupation for result in results]))


@app.command()
def show(
    code: Annotated[str, typer.Argument(help="ANZSCO occupation code")],
    output_json: JsonOption = False,
):
    """Show one occupation's requirements."""
    catalog = _get_catalog()
    record = catalog.get_by_code(code)
    if record is None:
        _unknown_code(code)

    if output_json:
        _echo_json(record.to_dict())
        return

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Code", record.code)
    table.add_row("Title", record.title)
    table.add_row("Category", record.category)
    table.add_row("Skill Level", f"{record.skill_level} - {record.skill_level_label}")
    table.add_row("Qualifications", "\n".join(record.qualifications.essential))
    table.add_row("Experience", record.work_experience.minimum)
    table.add_row("IELTS", record.english_requirements.ielts)
    table.add_row("Authority", record.skills_assessment.assessing_authority)
    table.add_row("Processing", record.skills_assessment.processing_time)
    table.add_row("Cost", record.skills_assessment.cost)

    console.print(table)


@app.command()
def categories(output_json: JsonOption = False):
    """List occupation categories."""
    catalog = _get_catalog()
    values = catalog.categories()
    if output_json:
        _echo_json(values)
        return
    for value in values:
        console.print(f"- {value}")


@app.command()
def authorities(output_json: JsonOption = False):
    """List skills assessing authorities."""
    catalog = _get_catalog()
    values = catalog.assessing_authorities()
    if output_json:
        _echo_json(values)
        return
    for value in values:
        console.print(f"- {value}")


@app.command()
def eligibility(
    code: Annotated[str, typer.Argument(help="ANZSCO occupation code")],
    education: EducationOption = None,
    experience: ExperienceOption = None,
    english: EnglishOption = None,
    output_json: JsonOption = False,
):
    """Check a client's skills assessment eligibility for one occupation."""
    catalog = _get_catalog()
    profile = _client_profile(education, experience, english) or ClientProfile()
    result = check_skills_assessment_eligibility(profile, code, catalog=catalog)

    if output_json:
        _echo_json(result.to_dict())
        if result.reason:
            raise typer.Exit(code=1)
        return

    if result.reason:
        console.print(f"[red]! {result.reason}:[/red] {code}")
        raise typer.Exit(code=1)

    verdict = "[green]ELIGIBLE[/green]" if result.eligible else "[red]NOT ELIGIBLE[/red]"
    console.print(f"\n[bold]{result.occupation.title}[/bold] ({code}): {verdict}")

    checks = Table(show_header=True, header_style="bold magenta")
    checks.add_column("Axis")
    checks.add_column("Result", justify="center")
    for axis, passed in result.checks.model_dump().items():
        checks.add_row(axis, "[green]pass[/green]" if passed else "[red]fail[/red]")
    console.print(checks)

    if result.recommendations:
        console.print("\n[bold]Recommendations:[/bold]")
        for rec in result.recommendations:
            console.print(f"- {escape(f'[{rec.priority}]')} {escape(rec.message)}")

    console.print("\n[bold]Next steps:[/bold]")
    for step in result.next_steps or []:
        console.print(f"{step.priority}. {step.step} ({step.timeframe}): {step.description}")


@app.command()
def match(
    occupation: Annotated[str, typer.Argument(help="Client occupation as free text")],
    education: EducationOption = None,
    experience: ExperienceOption = None,
    output_json: JsonOption = False,
):
    """Rank catalog occupations against a client's occupation."""
    catalog = _get_catalog()
    candidates = match_client_to_anzsco(occupation, education, experience, catalog=catalog)

    if output_json:
        _echo_json([candidate.to_dict() for candidate in candidates])
        return

    if not candidates:
        console.print(f"[yellow]No occupations match:[/yellow] {occupation}")
        return

    console.print(
        _occupation_table(
            [candidate.occupation for candidate in candidates],
            extra=[
                {"match_score": candidate.match_score, "eligible": candidate.eligible}
                for candidate in candidates
            ],
        )
    )


@app.command()
def checklist(
    code: Annotated[str, typer.Argument(help="ANZSCO occupation code")],
    output_json: JsonOption = False,
):
    """Print the skills assessment document checklist."""
    catalog = _get_catalog()
    if catalog.get_by_code(code) is None:
        _unknown_code(code)

    documents = generate_document_checklist(code, catalog=catalog)

    if output_json:
        _echo_json([document.to_dict() for document in documents])
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Document")
    table.add_column("Type")
    table.add_column("Required", justify="center")
    table.add_column("Description")
    for document in documents:
        table.add_row(
            document.name,
            document.type,
            "yes" if document.required else "optional",
            document.description,
        )
    console.print(table)


@app.command()
def timeline(
    code: Annotated[str, typer.Argument(help="ANZSCO occupation code")],
    has_documents: Annotated[
        bool, typer.Option("--has-documents", help="Documents are already gathered")
    ] = False,
    has_english_test: Annotated[
        bool, typer.Option("--has-english-test", help="English test already taken")
    ] = False,
    output_json: JsonOption = False,
):
    """Estimate the skills assessment timeline and costs."""
    catalog = _get_catalog()
    readiness = ClientReadiness(has_documents=has_documents, has_english_test=has_english_test)
    plan = calculate_assessment_timeline(code, readiness, catalog=catalog)
    if plan is None:
        _unknown_code(code)

    if output_json:
        _echo_json(plan.to_dict())
        return

    console.print(
        f"\n[bold]Timeline:[/bold] preparation {plan.timeline.preparation}, "
        f"assessment {plan.timeline.assessment}, total {plan.timeline.total}"
    )
    console.print(
        f"[bold]Costs:[/bold] assessment {plan.costs.assessment}, "
        f"English test {plan.costs.english_test}, "
        f"translation {plan.costs.document_translation}, total {plan.costs.total}"
    )

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Phase")
    table.add_column("Duration")
    table.add_column("Tasks")
    for milestone in plan.milestones:
        table.add_row(milestone.phase, milestone.duration, "\n".join(milestone.tasks))
    console.print(table)


@app.command()
def assess(
    code: Annotated[str, typer.Argument(help="ANZSCO occupation code")],
    education: EducationOption = None,
    experience: ExperienceOption = None,
    english: EnglishOption = None,
    output_json: JsonOption = False,
):
    """Full assessment bundle: eligibility, checklist and timeline."""
    catalog = _get_catalog()
    workflow = AssessmentWorkflow(catalog=catalog)
    bundle = workflow.select(code, _client_profile(education, experience, english))
    if bundle is None:
        _unknown_code(code)

    if output_json:
        _echo_json(bundle.to_dict())
        return

    console.print(f"\n[bold blue]{bundle.occupation.title}[/bold blue] ({bundle.occupation.code})")
    if bundle.eligibility is not None:
        verdict = "[green]eligible[/green]" if bundle.eligibility.eligible else "[red]not eligible[/red]"
        console.print(f"Eligibility: {verdict}")
        for rec in bundle.eligibility.recommendations:
            console.print(f"  - {escape(f'[{rec.priority}]')} {escape(rec.message)}")

    required = sum(1 for document in bundle.document_checklist if document.required)
    console.print(
        f"Documents: {len(bundle.document_checklist)} ({required} required)"
    )
    console.print(
        f"Timeline: {bundle.timeline.timeline.total}, estimated cost {bundle.timeline.costs.total}"
    )


if __name__ == "__main__":
    app()
