"""Pytest configuration and fixtures for catalog admin tests."""

from datetime import date
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_admin.application.catalog_controller import CatalogController
from catalog_admin.application.notices import NoticeLog
from catalog_admin.application.session import Session
from catalog_admin.catalog.export import CsvExporter
from catalog_admin.domain.models import ProductRecord
from catalog_admin.infrastructure.export_sink import FileExportSink
from catalog_admin.infrastructure.store_client import ProductStoreClient, StoreError, StoreResponse


def make_product(product_id: str, **overrides: Any) -> ProductRecord:
    """Create a product with sensible defaults."""
    fields: dict[str, Any] = {
        "_id": product_id,
        "name": f"Product {product_id}",
        "description": f"Description of {product_id}",
    }
    fields.update(overrides)
    return ProductRecord.model_validate(fields)


def make_catalog(count: int) -> list[ProductRecord]:
    """Create ``count`` plain products p-1..p-count."""
    return [make_product(f"p-{i}") for i in range(1, count + 1)]


def make_success_response(data: Any = None) -> StoreResponse:
    """Create a successful store response."""
    return StoreResponse(success=True, data=data)


def make_error_response(
    error_code: str,
    message: str,
    status_code: int = 400,
) -> StoreResponse:
    """Create an error store response."""
    return StoreResponse(
        success=False,
        error=StoreError(
            error_code=error_code,
            message=message,
            status_code=status_code,
        ),
    )


@pytest.fixture
def coil_catalog() -> list[ProductRecord]:
    """Ten products, three of which mention "coil" in the description."""
    products = make_catalog(10)
    for index in (1, 4, 8):
        products[index] = make_product(
            products[index].id,
            description=f"Copper Coil assembly {index}",
        )
    return products


@pytest.fixture
def mock_store() -> MagicMock:
    """Create a mock product store client."""
    store = MagicMock(spec=ProductStoreClient)
    store.list_products = AsyncMock(return_value=make_success_response([]))
    store.delete_product = AsyncMock(return_value=make_success_response())
    store.close = AsyncMock()
    return store


@pytest.fixture
def notices() -> NoticeLog:
    return NoticeLog()


@pytest.fixture
def mock_sink() -> MagicMock:
    """Create a mock export sink."""
    return MagicMock(spec=FileExportSink)


@pytest.fixture
def session() -> Session:
    return Session(user_id="admin", token="token-123")


@pytest.fixture
def controller(
    session: Session,
    mock_store: MagicMock,
    notices: NoticeLog,
    mock_sink: MagicMock,
) -> CatalogController:
    """Create a controller over mocked collaborators with a fixed export date."""
    return CatalogController(
        session=session,
        store=mock_store,
        notifier=notices,
        sink=mock_sink,
        exporter=CsvExporter(today=lambda: date(2024, 3, 5)),
    )
