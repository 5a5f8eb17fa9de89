"""Occupation catalog: YAML loading plus the read-only lookup operations."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import ValidationError

from ..models.enums import SKILL_LEVEL_LABELS
from ..models.occupation import CatalogDocument, OccupationRecord
from ...observability.logger import get_logger

logger = get_logger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).with_name("occupations.yaml")


class CatalogError(RuntimeError):
    """Raised when the occupation catalog cannot be read or validated."""


class OccupationCatalog:
    """Immutable, in-memory table of occupations keyed by ANZSCO code.

    Iteration and every list-returning lookup follow the catalog's own order.
    """

    def __init__(
        self,
        occupations: Mapping[str, OccupationRecord] | list[OccupationRecord],
        schema_version: str = "1.0.0",
    ):
        records: dict[str, OccupationRecord] = {}
        items = occupations.values() if isinstance(occupations, Mapping) else occupations
        for record in items:
            if record.code in records:
                raise CatalogError(f"Duplicate occupation code '{record.code}'")
            records[record.code] = record
        self._records = MappingProxyType(records)
        self.schema_version = schema_version

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[OccupationRecord]:
        return iter(self._records.values())

    def __contains__(self, code: object) -> bool:
        return code in self._records

    @property
    def records(self) -> Mapping[str, OccupationRecord]:
        return self._records

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get_by_code(self, code: str | None) -> OccupationRecord | None:
        if code is None:
            return None
        return self._records.get(str(code))

    def search_by_title(self, term: str | None) -> list[OccupationRecord]:
        """Case-insensitive substring search over titles.

        An empty term is a substring of every title, so it returns the whole
        catalog.
        """
        needle = (term or "").lower()
        return [record for record in self if needle in record.title.lower()]

    def get_by_category(self, category: str | None) -> list[OccupationRecord]:
        value = getattr(category, "value", category)
        return [record for record in self if record.category == value]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(record.category for record in self))

    def skill_levels(self) -> dict[int, str]:
        return dict(SKILL_LEVEL_LABELS)

    def assessing_authorities(self) -> list[str]:
        """Distinct assessing authorities in first-seen order."""
        return list(
            dict.fromkeys(record.skills_assessment.assessing_authority for record in self)
        )


# =============================================================================
# Loading
# =============================================================================


def _read_document(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise CatalogError(f"Occupation catalog not found at '{path}'")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Failed to read occupation catalog '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in occupation catalog '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise CatalogError(f"Invalid occupation catalog '{path}': expected a top-level mapping.")

    # A bare code -> record mapping is accepted as well as the versioned layout
    if "occupations" not in parsed:
        parsed = {"occupations": parsed}
    return parsed


def load_catalog(path: str | Path | None = None) -> OccupationCatalog:
    """Load and validate an occupation catalog from YAML.

    Args:
        path: Catalog file (defaults to the bundled occupations.yaml)

    Returns:
        OccupationCatalog with derived requirement fields populated

    Raises:
        CatalogError: If the file is missing, unparsable or fails validation
    """
    catalog_path = Path(path) if path else BUNDLED_CATALOG_PATH
    data = _read_document(catalog_path)

    try:
        document = CatalogDocument.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid occupation catalog '{catalog_path}': {exc}") from exc

    for key, record in document.occupations.items():
        if key != record.code:
            raise CatalogError(
                f"Occupation key '{key}' does not match its code '{record.code}' in '{catalog_path}'"
            )

    catalog = OccupationCatalog(document.occupations, schema_version=document.schema_version)
    logger.info(
        "catalog_loaded",
        path=str(catalog_path),
        occupations=len(catalog),
        schema_version=catalog.schema_version,
    )
    return catalog


# Global catalog instance
_default_catalog: OccupationCatalog | None = None


def get_default_catalog() -> OccupationCatalog:
    """Get the process-wide catalog, loading it on first use.

    The path comes from configuration key ``catalog.path``; when unset the
    bundled catalog is used.

    Returns:
        OccupationCatalog: Global catalog
    """
    global _default_catalog
    if _default_catalog is None:
        from ..config.loader import get_config_value, load_config

        path = get_config_value(load_config(), "catalog.path")
        _default_catalog = load_catalog(path)
    return _default_catalog


def set_default_catalog(catalog: OccupationCatalog | None) -> None:
    """Replace the process-wide catalog (None forces a reload on next use)."""
    global _default_catalog
    _default_catalog = catalog


def resolve_catalog(catalog: OccupationCatalog | None = None) -> OccupationCatalog:
    return catalog if catalog is not None else get_default_catalog()


# =============================================================================
# Module-level lookups over the default (or an injected) catalog
# =============================================================================


def get_occupation_by_code(
    code: str | None, catalog: OccupationCatalog | None = None
) -> OccupationRecord | None:
    return resolve_catalog(catalog).get_by_code(code)


def search_occupations_by_title(
    term: str | None, catalog: OccupationCatalog | None = None
) -> list[OccupationRecord]:
    return resolve_catalog(catalog).search_by_title(term)


def get_occupations_by_category(
    category: str | None, catalog: OccupationCatalog | None = None
) -> list[OccupationRecord]:
    return resolve_catalog(catalog).get_by_category(category)


def get_all_categories(catalog: OccupationCatalog | None = None) -> list[str]:
    return resolve_catalog(catalog).categories()


def get_skill_levels(catalog: OccupationCatalog | None = None) -> dict[int, str]:
    return resolve_catalog(catalog).skill_levels()


def get_assessing_authorities(catalog: OccupationCatalog | None = None) -> list[str]:
    return resolve_catalog(catalog).assessing_authorities()
