"""Occupation search service: title search, category filter and client matching."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..core.assessment.eligibility import coerce_client_profile
from ..core.catalog.loader import OccupationCatalog, resolve_catalog
from ..core.matching.matcher import match_client_to_anzsco
from ..core.models.base import FrozenModel
from ..core.models.client import ClientProfile
from ..core.models.occupation import OccupationRecord
from ..observability.logger import get_logger

logger = get_logger(__name__)

ALL_CATEGORIES = "all"
DEFAULT_LIMIT = 10


class SearchResult(FrozenModel):
    occupation: OccupationRecord
    match_score: float | None = Field(None, alias="matchScore", ge=0.0, le=100.0)
    eligible: bool | None = None


class OccupationSearchService:
    def __init__(
        self,
        catalog: OccupationCatalog | None = None,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.catalog = resolve_catalog(catalog)
        self.default_limit = max(0, default_limit)

    def search(
        self,
        term: str | None = "",
        category: str | None = None,
        client: ClientProfile | dict[str, Any] | None = None,
    ) -> list[SearchResult]:
        """Search the catalog the way the occupation picker does.

        A non-blank term searches titles; otherwise a category other than
        "all" filters by category; otherwise the first ``default_limit``
        occupations are listed. When the client has an occupation on file the
        results are replaced by that client's ranked matches.
        """
        profile = coerce_client_profile(client) if client is not None else None

        if profile is not None and profile.occupation:
            return self._search_for_client(profile)

        if term and term.strip():
            records = self.catalog.search_by_title(term)
            mode = "title"
        elif category and category != ALL_CATEGORIES:
            records = self.catalog.get_by_category(category)
            mode = "category"
        else:
            records = list(self.catalog)[: self.default_limit]
            mode = "all"

        logger.debug("occupation_search", mode=mode, term=term, category=category, results=len(records))
        return [SearchResult(occupation=record) for record in records]

    def _search_for_client(self, profile: ClientProfile) -> list[SearchResult]:
        matches = match_client_to_anzsco(
            profile.occupation,
            profile.education_level,
            profile.work_experience_years,
            catalog=self.catalog,
        )
        logger.debug(
            "occupation_search",
            mode="client",
            client_occupation=profile.occupation,
            results=len(matches),
        )
        return [
            SearchResult(
                occupation=match.occupation,
                match_score=match.match_score,
                eligible=match.eligible,
            )
            for match in matches
        ]
