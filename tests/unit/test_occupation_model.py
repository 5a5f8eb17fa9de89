"""Occupation record parsing and the derived requirement fields."""

import pytest

from occmatch.core.models.enums import EnglishProficiency, education_rank, english_rank
from occmatch.core.models.occupation import (
    EnglishRequirements,
    OccupationRecord,
    Qualifications,
    SkillsAssessment,
    WorkExperience,
    derive_english_tier,
    parse_minimum_experience_years,
)


@pytest.mark.parametrize(
    "minimum, expected",
    [
        ("3 years post-qualification experience", 3),
        ("1 year post-qualification teaching experience", 1),
        ("3+ years in the trade", 3),
        ("  2 years", 2),
        ("Several years of experience", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_minimum_experience_years(minimum, expected):
    assert parse_minimum_experience_years(minimum) == expected


def test_derive_english_tier():
    assert derive_english_tier("Overall 7.5 (Reading 7, Writing 7)") == EnglishProficiency.NATIVE
    assert derive_english_tier("Overall 6.0 (each band 5.0)") == EnglishProficiency.ADVANCED
    assert derive_english_tier(None) == EnglishProficiency.ADVANCED


def test_derived_fields_agree_with_legacy_strings_for_every_bundled_record(catalog):
    for record in catalog:
        expected_years = int(record.work_experience.minimum.split(" ")[0])
        assert record.minimum_experience_years == expected_years, record.code

        needs_native = "7.5" in record.english_requirements.ielts
        assert (record.english_tier_required == "Native") == needs_native, record.code


def test_bundled_tiers(catalog):
    assert catalog.get_by_code("241111").english_tier_required == "Native"
    assert catalog.get_by_code("241111").minimum_experience_years == 1
    assert catalog.get_by_code("322311").english_tier_required == "Advanced"
    assert catalog.get_by_code("322311").minimum_experience_years == 3


def test_supplied_derived_fields_are_recomputed(record_factory):
    record = record_factory(minimumExperienceYears=99, englishTierRequired="Native")
    assert record.minimum_experience_years == 3
    assert record.english_tier_required == "Advanced"


def test_record_built_from_snake_case_models():
    record = OccupationRecord(
        code=241213,
        title="Primary School Teacher",
        category="Education",
        skill_level=1,
        qualifications=Qualifications(essential=["Bachelor degree in Primary Education"]),
        skills_assessment=SkillsAssessment(
            assessing_authority="AITSL",
            processing_time="10-12 weeks",
            cost="AUD $500-800",
        ),
        work_experience=WorkExperience(minimum="2 years teaching"),
        english_requirements=EnglishRequirements(ielts="Overall 7.5"),
    )

    assert record.code == "241213"
    assert record.minimum_experience_years == 2
    assert record.english_tier_required == "Native"
    assert record.skill_level_label == "Professional"


def test_to_dict_uses_camel_case_aliases(catalog):
    data = catalog.get_by_code("334111").to_dict()

    assert data["skillLevel"] == 3
    assert data["minimumExperienceYears"] == 3
    assert data["englishTierRequired"] == "Advanced"
    assert data["englishRequirements"]["IELTS"] == "Overall 6.0 (each band 5.0)"
    assert data["skillsAssessment"]["assessingAuthority"] == "TRA (Trades Recognition Australia)"


def test_rank_tables():
    assert education_rank("High School") == 1
    assert education_rank("Professional Degree") == education_rank("Master's Degree") == 4
    assert education_rank("PhD/Doctorate") == 5
    assert education_rank("Certificate III") == 0
    assert education_rank(None) == 0

    assert english_rank("None") == 0
    assert english_rank(EnglishProficiency.NATIVE) == 4
    assert english_rank("Fluent") == 0
