"""Occupation search service modes."""

import pytest

from occmatch.core.models.client import ClientProfile
from occmatch.search.service import OccupationSearchService


@pytest.fixture
def service(catalog):
    return OccupationSearchService(catalog=catalog)


def _codes(results):
    return [result.occupation.code for result in results]


def test_title_search(service):
    results = service.search("plumb")

    assert _codes(results) == ["334111"]
    assert results[0].match_score is None
    assert results[0].eligible is None


def test_term_takes_precedence_over_category(service):
    assert _codes(service.search("teacher", category="Trades")) == ["241111", "241213", "241411"]


def test_blank_term_falls_back_to_category(service):
    assert _codes(service.search("   ", category="Trades")) == [
        "334111",
        "323211",
        "341111",
        "322311",
    ]


def test_all_categories_lists_catalog(service):
    assert len(service.search(category="all")) == 7
    assert len(service.search()) == 7


def test_listing_respects_default_limit(catalog):
    service = OccupationSearchService(catalog=catalog, default_limit=3)

    assert _codes(service.search()) == ["241111", "241213", "241411"]
    # Title searches are not capped
    assert len(service.search("e")) > 3


def test_client_occupation_switches_to_matching(service):
    client = {
        "occupation": "Plumber",
        "education_level": "Diploma/Certificate",
        "work_experience_years": 4,
    }
    results = service.search("teacher", client=client)

    assert _codes(results) == ["334111"]
    assert results[0].eligible is True
    assert results[0].match_score == pytest.approx(50.0)
    assert results[0].to_dict()["matchScore"] == pytest.approx(50.0)


def test_client_without_occupation_uses_term(service):
    results = service.search("fitter", client=ClientProfile(education_level="High School"))
    assert _codes(results) == ["323211"]


def test_default_catalog_is_used_when_none_injected():
    assert len(OccupationSearchService().search("electrician")) == 1
