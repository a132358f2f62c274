"""Fixed-size pagination over a filtered sequence.

Pages are 1-indexed. Slicing never raises: a page outside the available
range yields an empty page, while navigation clamps into range.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 9


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results.

    Attributes:
        items: Items on this page.
        total: Total count across all pages.
        page: Current page (1-indexed).
        page_size: Items per page.
    """

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page > 1

    @property
    def show_controls(self) -> bool:
        """Pagination controls are only rendered for more than one page."""
        return self.total_pages > 1

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.page_size

    def serial(self, index: int) -> int:
        """Running 1-based row number for the item at ``index`` on this page."""
        return self.offset + index + 1


class Paginator:
    """Slices sequences into pages of a fixed size.

    Example usage:
        paginator = Paginator()
        page = paginator.paginate(products, 2)
        page.items        # products[9:18]
        paginator.next_page(2, page.total_pages)
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Initialize paginator.

        Args:
            page_size: Items per page.
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size

    def total_pages(self, total: int) -> int:
        """Number of pages for ``total`` items, 0 when there are none."""
        return (total + self.page_size - 1) // self.page_size

    def paginate(self, items: Sequence[T], page: int) -> Page[T]:
        """Get one page of a sequence.

        Args:
            items: Filtered sequence.
            page: 1-based page number.

        Returns:
            Page whose items are empty if ``page`` is out of range.
        """
        if page < 1:
            chunk: list[T] = []
        else:
            start = (page - 1) * self.page_size
            chunk = list(items[start : start + self.page_size])
        return Page(items=chunk, total=len(items), page=page, page_size=self.page_size)

    def clamp(self, page: int, total_pages: int) -> int:
        """Clamp a page number to ``[1, total_pages]``; 1 when there are no pages."""
        return max(1, min(page, total_pages))

    def next_page(self, page: int, total_pages: int) -> int:
        """Advance one page, staying put on the last one."""
        return self.clamp(page + 1, total_pages)

    def previous_page(self, page: int, total_pages: int) -> int:
        """Go back one page, staying put on the first one."""
        return self.clamp(page - 1, total_pages)
