"""Shared fixtures: the bundled catalog and small hand-built catalogs."""

from typing import Any

import pytest

from occmatch.core.catalog.loader import OccupationCatalog, load_catalog, set_default_catalog
from occmatch.core.models.occupation import OccupationRecord


def make_record(**overrides: Any) -> OccupationRecord:
    """Build a Trades occupation in the on-disk (camelCase) shape."""
    data: dict[str, Any] = {
        "code": "999001",
        "title": "Test Occupation",
        "category": "Trades",
        "skillLevel": 3,
        "qualifications": {"essential": ["Certificate III in Testing or equivalent"]},
        "skillsAssessment": {
            "assessingAuthority": "TRA (Trades Recognition Australia)",
            "requirements": ["Trade qualification assessment"],
            "processingTime": "12-16 weeks",
            "cost": "AUD $1,200-1,500",
        },
        "workExperience": {"minimum": "3 years post-qualification experience"},
        "englishRequirements": {"IELTS": "Overall 6.0 (each band 5.0)"},
    }
    data.update(overrides)
    return OccupationRecord.model_validate(data)


@pytest.fixture(autouse=True)
def reset_default_catalog():
    set_default_catalog(None)
    yield
    set_default_catalog(None)


@pytest.fixture
def catalog() -> OccupationCatalog:
    return load_catalog()


@pytest.fixture
def record_factory():
    return make_record
