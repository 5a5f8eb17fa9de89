"""Catalog loading and lookup operations."""

import pytest
from pydantic import ValidationError

from occmatch.core.catalog.loader import (
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
from occmatch.core.models.enums import OccupationCategory

BUNDLED_CODES = ["241111", "241213", "241411", "334111", "323211", "341111", "322311"]

RECORD_YAML = """\
  "334111":
    code: "334111"
    title: Plumber (General)
    category: {category}
    skillLevel: 3
    qualifications:
      essential: {essential}
    skillsAssessment:
      assessingAuthority: TRA (Trades Recognition Australia)
      processingTime: 12-16 weeks
      cost: AUD $1,200-1,500
    workExperience:
      minimum: 3 years post-qualification experience
    englishRequirements:
      IELTS: Overall 6.0 (each band 5.0)
"""


def _write_catalog(tmp_path, category="Trades", essential='["Certificate III in Plumbing"]'):
    path = tmp_path / "occupations.yaml"
    path.write_text(
        "occupations:\n" + RECORD_YAML.format(category=category, essential=essential),
        encoding="utf-8",
    )
    return path


def test_bundled_catalog_loads_in_file_order(catalog):
    assert len(catalog) == 7
    assert [record.code for record in catalog] == BUNDLED_CODES
    assert catalog.schema_version == "1.0.0"


def test_get_by_code(catalog):
    plumber = catalog.get_by_code("334111")
    assert plumber is not None
    assert plumber.title == "Plumber (General)"
    assert plumber.skills_assessment.processing_time == "12-16 weeks"

    assert catalog.get_by_code("999999") is None
    assert catalog.get_by_code(None) is None
    assert "334111" in catalog


def test_search_by_title_is_case_insensitive_substring(catalog):
    teachers = catalog.search_by_title("TEACHER")
    assert [record.code for record in teachers] == ["241111", "241213", "241411"]

    assert [record.code for record in catalog.search_by_title("plumb")] == ["334111"]
    assert catalog.search_by_title("astronaut") == []


def test_search_by_title_empty_term_matches_everything(catalog):
    assert [record.code for record in catalog.search_by_title("")] == BUNDLED_CODES


def test_get_by_category(catalog):
    trades = catalog.get_by_category("Trades")
    assert [record.code for record in trades] == ["334111", "323211", "341111", "322311"]

    education = catalog.get_by_category(OccupationCategory.EDUCATION)
    assert len(education) == 3

    assert catalog.get_by_category("Health") == []
    assert catalog.get_by_category("trades") == []


def test_categories_and_authorities_first_seen_order(catalog):
    assert catalog.categories() == ["Education", "Trades"]
    assert catalog.assessing_authorities() == [
        "AITSL (Australian Institute for Teaching and School Leadership)",
        "TRA (Trades Recognition Australia)",
    ]


def test_skill_levels(catalog):
    levels = catalog.skill_levels()
    assert levels[1] == "Professional"
    assert levels[5] == "Unskilled"
    assert len(levels) == 5


def test_catalog_is_read_only(catalog):
    with pytest.raises(TypeError):
        catalog.records["000000"] = catalog.get_by_code("334111")

    plumber = catalog.get_by_code("334111")
    with pytest.raises(ValidationError):
        plumber.title = "Changed"


def test_duplicate_codes_rejected(record_factory):
    record = record_factory()
    with pytest.raises(CatalogError):
        OccupationCatalog([record, record])


def test_module_level_lookups_use_injected_catalog(record_factory):
    custom = OccupationCatalog([record_factory(code="111111", title="Harbour Pilot")])

    assert get_occupation_by_code("111111", catalog=custom).title == "Harbour Pilot"
    assert search_occupations_by_title("pilot", catalog=custom)[0].code == "111111"
    assert get_occupations_by_category("Trades", catalog=custom)[0].code == "111111"
    assert get_all_categories(catalog=custom) == ["Trades"]
    assert get_assessing_authorities(catalog=custom) == ["TRA (Trades Recognition Australia)"]
    assert get_occupation_by_code("334111", catalog=custom) is None


def test_module_level_lookups_default_to_bundled_catalog():
    assert get_occupation_by_code("341111").title == "Electrician (General)"
    assert get_all_categories() == ["Education", "Trades"]
    assert get_skill_levels()[3] == "Skilled"
    assert get_default_catalog() is get_default_catalog()


def test_default_catalog_path_from_environment(tmp_path, monkeypatch):
    path = _write_catalog(tmp_path)
    monkeypatch.setenv("OCCMATCH_CATALOG__PATH", str(path))

    catalog = get_default_catalog()
    assert len(catalog) == 1
    assert catalog.get_by_code("241111") is None


def test_load_catalog_accepts_bare_mapping(tmp_path):
    path = tmp_path / "bare.yaml"
    path.write_text(RECORD_YAML.format(category="Trades", essential='["Certificate III"]'), encoding="utf-8")

    catalog = load_catalog(path)
    assert [record.code for record in catalog] == ["334111"]


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogError, match="not found"):
        load_catalog(tmp_path / "missing.yaml")


def test_load_catalog_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("occupations: [unclosed\n", encoding="utf-8")
    with pytest.raises(CatalogError, match="Invalid YAML"):
        load_catalog(path)


def test_load_catalog_requires_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 334111\n- 341111\n", encoding="utf-8")
    with pytest.raises(CatalogError, match="top-level mapping"):
        load_catalog(path)


def test_load_catalog_rejects_unknown_category(tmp_path):
    path = _write_catalog(tmp_path, category="Hospitality")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_rejects_empty_essential_qualifications(tmp_path):
    path = _write_catalog(tmp_path, essential="[]")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_rejects_key_code_mismatch(tmp_path):
    path = tmp_path / "mismatch.yaml"
    path.write_text(
        "occupations:\n"
        + RECORD_YAML.format(category="Trades", essential='["x"]').replace(
            '  "334111":', '  "341111":', 1
        ),
        encoding="utf-8",
    )
    with pytest.raises(CatalogError, match="does not match"):
        load_catalog(path)


def test_package_exports_public_api():
    import occmatch

    assert occmatch.__version__ == "0.1.0"
    assert occmatch.get_occupation_by_code is get_occupation_by_code
    assert occmatch.load_catalog is load_catalog
    assert set(occmatch.__all__) >= {"check_skills_assessment_eligibility", "match_client_to_anzsco"}
