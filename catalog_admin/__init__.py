"""Catalog Admin.

Client-side catalog query and export engine for the product admin
screen.

This package provides:
- Case-insensitive search over name, description, part code and tags
- Category facets over the full catalog
- Fixed-size pagination with clamped navigation
- CSV export of the filtered products through a pluggable sink
- A guarded two-step delete that re-fetches the catalog on success
"""

__version__ = "1.0.0"
