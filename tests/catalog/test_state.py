"""Tests for CatalogState transitions."""

import pytest

from catalog_admin.catalog.pagination import Paginator
from catalog_admin.catalog.state import CatalogState
from tests.conftest import make_catalog, make_product


@pytest.fixture
def paginator() -> Paginator:
    return Paginator(9)


class TestCatalogState:
    """Tests for CatalogState."""

    def test_defaults(self) -> None:
        state = CatalogState()
        assert state.catalog == ()
        assert state.query == ""
        assert state.page == 1
        assert state.loading is False

    def test_query_change_resets_page(self, paginator: Paginator) -> None:
        state = CatalogState().loaded(make_catalog(30), paginator).go_to_page(3, paginator)
        assert state.page == 3

        state = state.with_query("p-1")
        assert state.page == 1
        assert state.query == "p-1"

    def test_same_query_still_resets_page(self, paginator: Paginator) -> None:
        state = CatalogState().loaded(make_catalog(30), paginator).go_to_page(2, paginator)
        assert state.with_query("").page == 1

    def test_loaded_replaces_catalog_and_clamps_page(self, paginator: Paginator) -> None:
        state = CatalogState().loaded(make_catalog(30), paginator).go_to_page(4, paginator)
        assert state.page == 4

        state = state.start_loading().loaded(make_catalog(10), paginator)
        assert len(state.catalog) == 10
        assert state.page == 2
        assert state.loading is False

    def test_load_failed_empties_catalog(self, paginator: Paginator) -> None:
        state = CatalogState().loaded(make_catalog(5), paginator).start_loading().load_failed()
        assert state.catalog == ()
        assert state.loading is False

    def test_navigation_stays_within_filtered_pages(self, paginator: Paginator) -> None:
        state = CatalogState().loaded(make_catalog(20), paginator)
        state = state.next_page(paginator).next_page(paginator).next_page(paginator)
        assert state.page == 3
        state = state.previous_page(paginator).previous_page(paginator).previous_page(paginator)
        assert state.page == 1

    def test_filtered_and_facets_use_different_inputs(self, paginator: Paginator) -> None:
        catalog = [
            make_product("a", categories=["Engine"]),
            make_product("b", categories=["Body"]),
        ]
        state = CatalogState().loaded(catalog, paginator).with_query("engine")
        assert [p.id for p in state.filtered()] == ["a"]
        assert state.categories() == ["Body", "Engine"]

    def test_is_filtered_ignores_whitespace(self) -> None:
        assert not CatalogState(query="   ").is_filtered
        assert CatalogState(query="coil").is_filtered

    def test_transitions_do_not_mutate(self, paginator: Paginator) -> None:
        original = CatalogState()
        original.with_query("x")
        original.start_loading()
        assert original == CatalogState()
