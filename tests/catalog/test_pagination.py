"""Tests for pagination."""

import pytest

from catalog_admin.catalog.pagination import DEFAULT_PAGE_SIZE, Page, Paginator


class TestPaginator:
    """Tests for Paginator."""

    @pytest.fixture
    def paginator(self) -> Paginator:
        return Paginator()

    def test_default_page_size_is_nine(self, paginator: Paginator) -> None:
        assert DEFAULT_PAGE_SIZE == 9
        assert paginator.page_size == 9

    def test_rejects_non_positive_page_size(self) -> None:
        with pytest.raises(ValueError):
            Paginator(0)

    @pytest.mark.parametrize(
        ("total", "expected"),
        [(0, 0), (1, 1), (9, 1), (10, 2), (18, 2), (19, 3)],
    )
    def test_total_pages(self, paginator: Paginator, total: int, expected: int) -> None:
        assert paginator.total_pages(total) == expected

    def test_first_page_slice(self, paginator: Paginator) -> None:
        page = paginator.paginate(list(range(20)), 1)
        assert page.items == list(range(9))

    def test_last_partial_page(self, paginator: Paginator) -> None:
        page = paginator.paginate(list(range(20)), 3)
        assert page.items == [18, 19]
        assert page.total_pages == 3

    def test_out_of_range_page_is_empty(self, paginator: Paginator) -> None:
        assert paginator.paginate(list(range(5)), 4).items == []
        assert paginator.paginate(list(range(5)), 0).items == []

    def test_next_clamps_at_last_page(self, paginator: Paginator) -> None:
        assert paginator.next_page(1, 3) == 2
        assert paginator.next_page(3, 3) == 3

    def test_previous_clamps_at_first_page(self, paginator: Paginator) -> None:
        assert paginator.previous_page(2, 3) == 1
        assert paginator.previous_page(1, 3) == 1

    def test_navigation_with_no_pages_stays_on_first(self, paginator: Paginator) -> None:
        assert paginator.next_page(1, 0) == 1
        assert paginator.previous_page(1, 0) == 1

    def test_clamp(self, paginator: Paginator) -> None:
        assert paginator.clamp(7, 3) == 3
        assert paginator.clamp(-2, 3) == 1


class TestPage:
    """Tests for Page properties."""

    def test_single_page_hides_controls(self) -> None:
        page = Page(items=[1, 2, 3], total=3, page=1, page_size=9)
        assert page.total_pages == 1
        assert not page.show_controls
        assert not page.has_next
        assert not page.has_prev

    def test_middle_page(self) -> None:
        page = Page(items=list(range(9)), total=25, page=2, page_size=9)
        assert page.show_controls
        assert page.has_next
        assert page.has_prev

    def test_serial_numbers_continue_across_pages(self) -> None:
        page = Page(items=["a", "b"], total=11, page=2, page_size=9)
        assert [page.serial(i) for i in range(len(page.items))] == [10, 11]
