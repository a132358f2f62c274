"""Tests for settings."""

import pydantic
import pytest

from catalog_admin.infrastructure.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CATALOG_ADMIN_PAGE_SIZE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.page_size == 9
        assert settings.currency_symbol == "₹"
        assert settings.placeholder_image == "/logo.png"
        assert settings.catalogue_document == "/catalogue.pdf"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CATALOG_ADMIN_STORE_BASE_URL", "https://store.example/api")
        monkeypatch.setenv("CATALOG_ADMIN_PAGE_SIZE", "12")
        settings = Settings(_env_file=None)
        assert settings.store_base_url == "https://store.example/api"
        assert settings.page_size == 12

    def test_rejects_zero_page_size(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CATALOG_ADMIN_PAGE_SIZE", "0")
        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None)
