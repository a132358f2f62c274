"""Catalog query and export.

Search filtering, category facets, pagination, CSV export and the
immutable view state they are computed from.
"""

from catalog_admin.catalog.export import (
    CSV_MIME_TYPE,
    EXPORT_COLUMNS,
    CsvExporter,
    ExportPayload,
    export_filename,
)
from catalog_admin.catalog.facets import extract_categories
from catalog_admin.catalog.pagination import DEFAULT_PAGE_SIZE, Page, Paginator
from catalog_admin.catalog.search import filter_products, matches, normalize_query
from catalog_admin.catalog.state import CatalogState

__all__ = [
    # Search
    "filter_products",
    "matches",
    "normalize_query",
    # Facets
    "extract_categories",
    # Pagination
    "DEFAULT_PAGE_SIZE",
    "Page",
    "Paginator",
    # Export
    "CSV_MIME_TYPE",
    "EXPORT_COLUMNS",
    "CsvExporter",
    "ExportPayload",
    "export_filename",
    # State
    "CatalogState",
]
