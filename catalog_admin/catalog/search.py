"""Search filter over the in-memory catalog.

Plain case-insensitive substring containment; no tokenizing, no fuzzy
matching. A record matches when any searched field contains the query.
"""

from collections.abc import Sequence

from catalog_admin.domain.models import ProductRecord


def normalize_query(query: str | None) -> str:
    """Lower-case a query, mapping blank input to an empty string."""
    if query is None or not query.strip():
        return ""
    return query.lower()


def matches(record: ProductRecord, needle: str) -> bool:
    """Check whether a record matches an already lower-cased query.

    Args:
        record: Product to test.
        needle: Lower-cased query.

    Returns:
        True if name, description, sku or any category contains the query.
    """
    if needle in record.name.lower():
        return True
    if needle in record.description.lower():
        return True
    if record.sku is not None and needle in record.sku.lower():
        return True
    if record.categories:
        return any(needle in tag.lower() for tag in record.categories)
    return False


def filter_products(
    catalog: Sequence[ProductRecord],
    query: str | None,
) -> list[ProductRecord]:
    """Reduce the catalog to records matching the query.

    Args:
        catalog: Full catalog in store order.
        query: Search string; empty or whitespace-only matches everything.

    Returns:
        Order-preserving subsequence of the catalog.
    """
    needle = normalize_query(query)
    if not needle:
        return list(catalog)
    return [record for record in catalog if matches(record, needle)]
