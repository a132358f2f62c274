"""Category facets for one-click filtering."""

from collections.abc import Iterable

from catalog_admin.domain.models import ProductRecord


def extract_categories(catalog: Iterable[ProductRecord]) -> list[str]:
    """Get the distinct category tags of a catalog.

    Always computed over the unfiltered catalog so the facet list shows
    the complete tag space regardless of the active search.

    Args:
        catalog: Full catalog.

    Returns:
        Distinct tags sorted ascending.
    """
    tags: set[str] = set()
    for record in catalog:
        if record.categories:
            tags.update(record.categories)
    return sorted(tags)
