from .loader import (
    BUNDLED_CATALOG_PATH,
    CatalogError,
    OccupationCatalog,
    get_all_categories,
    get_assessing_authorities,
    get_default_catalog,
    get_occupation_by_code,
    get_occupations_by_category,
    get_skill_levels,
    load_catalog,
    resolve_catalog,
    search_occupations_by_title,
    set_default_catalog,
)

__all__ = [
    "BUNDLED_CATALOG_PATH",
    "CatalogError",
    "OccupationCatalog",
    "load_catalog",
    "get_default_catalog",
    "set_default_catalog",
    "resolve_catalog",
    "get_occupation_by_code",
    "search_occupations_by_title",
    "get_occupations_by_category",
    "get_all_categories",
    "get_skill_levels",
    "get_assessing_authorities",
]
