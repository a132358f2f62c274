"""Catalog view state.

An immutable state struct with pure transitions. Derived views (filtered
set, facets, visible page) are recomputed from it on demand and never
cached alongside it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from catalog_admin.catalog.facets import extract_categories
from catalog_admin.catalog.pagination import Page, Paginator
from catalog_admin.catalog.search import filter_products, normalize_query
from catalog_admin.domain.models import ProductRecord


@dataclass(frozen=True)
class CatalogState:
    """Snapshot of the catalog screen.

    Attributes:
        catalog: Last successfully fetched products, in store order.
        query: Current search string.
        page: Current 1-based page into the filtered sequence.
        loading: True only while a fetch is outstanding.
    """

    catalog: tuple[ProductRecord, ...] = ()
    query: str = ""
    page: int = 1
    loading: bool = False

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def is_filtered(self) -> bool:
        """Whether a non-blank search is active."""
        return bool(normalize_query(self.query))

    def filtered(self) -> list[ProductRecord]:
        """Catalog reduced by the current query."""
        return filter_products(self.catalog, self.query)

    def categories(self) -> list[str]:
        """Facets over the unfiltered catalog."""
        return extract_categories(self.catalog)

    def total_pages(self, paginator: Paginator) -> int:
        """Page count of the filtered sequence."""
        return paginator.total_pages(len(self.filtered()))

    def visible_page(self, paginator: Paginator) -> Page[ProductRecord]:
        """Current page of the filtered sequence."""
        return paginator.paginate(self.filtered(), self.page)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_loading(self) -> "CatalogState":
        return replace(self, loading=True)

    def loaded(self, records: Iterable[ProductRecord], paginator: Paginator) -> "CatalogState":
        """Replace the catalog wholesale and re-clamp the page."""
        state = replace(self, catalog=tuple(records), loading=False)
        return replace(state, page=paginator.clamp(state.page, state.total_pages(paginator)))

    def load_failed(self) -> "CatalogState":
        """Drop the catalog rather than keep stale data."""
        return replace(self, catalog=(), page=1, loading=False)

    def invalidated(self) -> "CatalogState":
        """Discard the catalog ahead of a full re-fetch."""
        return replace(self, catalog=(), page=1)

    def with_query(self, query: str) -> "CatalogState":
        """Set the search string; always returns to the first page."""
        return replace(self, query=query, page=1)

    def next_page(self, paginator: Paginator) -> "CatalogState":
        return replace(self, page=paginator.next_page(self.page, self.total_pages(paginator)))

    def previous_page(self, paginator: Paginator) -> "CatalogState":
        return replace(self, page=paginator.previous_page(self.page, self.total_pages(paginator)))

    def go_to_page(self, page: int, paginator: Paginator) -> "CatalogState":
        return replace(self, page=paginator.clamp(page, self.total_pages(paginator)))
