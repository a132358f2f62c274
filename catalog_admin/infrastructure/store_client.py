"""Product store API client.

Thin HTTP client for the product store's list and delete endpoints.
Failures are returned as ``StoreResponse`` values rather than raised so
callers can surface the store's own message to the user.
"""

from dataclasses import dataclass, field
from typing import Any

import httpx
import pydantic
import structlog

from catalog_admin.domain.models import ProductRecord

logger = structlog.get_logger()

FETCH_FAILED_MESSAGE = "Failed to fetch products"
DELETE_FAILED_MESSAGE = "Failed to delete product"
TRANSPORT_ERROR_CODES = frozenset({"TIMEOUT", "REQUEST_ERROR"})


@dataclass
class StoreError:
    """Represents a store error response."""

    error_code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class StoreResponse:
    """Represents a store response."""

    success: bool
    data: Any = None
    error: StoreError | None = None


def _error_body(response: httpx.Response) -> dict[str, Any]:
    """Decode an error body, tolerating empty or non-JSON payloads."""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class ProductStoreClient:
    """HTTP client for the product store.

    Example usage:
        client = ProductStoreClient("http://localhost:5000/api")
        response = await client.list_products()
        if response.success:
            products = response.data
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the store client.

        Args:
            base_url: Product store base URL.
            api_key: Optional bearer token.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ProductStoreClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(self, method: str, path: str) -> httpx.Response | StoreResponse:
        """Send a request, mapping transport failures to a ``StoreResponse``.

        Args:
            method: HTTP method.
            path: Endpoint path.

        Returns:
            The raw response, or a failed StoreResponse on transport errors.
        """
        client = await self._get_client()
        try:
            logger.debug("Making store request", method=method, path=path)
            return await client.request(method=method, url=path)
        except httpx.TimeoutException as e:
            logger.error("Store request timeout", path=path, error=str(e))
            return StoreResponse(
                success=False,
                error=StoreError(
                    error_code="TIMEOUT",
                    message=f"Request timed out: {path}",
                    status_code=504,
                ),
            )
        except httpx.RequestError as e:
            logger.error("Store request failed", path=path, error=str(e))
            return StoreResponse(
                success=False,
                error=StoreError(
                    error_code="REQUEST_ERROR",
                    message=f"Request failed: {e}",
                    status_code=500,
                ),
            )

    async def list_products(self) -> StoreResponse:
        """Fetch the whole catalog.

        Returns:
            StoreResponse whose data is a list of ProductRecord.
        """
        response = await self._request("GET", "/products")
        if isinstance(response, StoreResponse):
            return response

        if response.status_code >= 400:
            body = _error_body(response)
            return StoreResponse(
                success=False,
                error=StoreError(
                    error_code="FETCH_FAILED",
                    message=body.get("error") or FETCH_FAILED_MESSAGE,
                    status_code=response.status_code,
                    details=body,
                ),
            )

        try:
            payload = response.json()
            products = [ProductRecord.model_validate(item) for item in payload.get("data") or []]
        except (ValueError, AttributeError, pydantic.ValidationError) as e:
            logger.error("Invalid catalog payload", error=str(e))
            return StoreResponse(
                success=False,
                error=StoreError(
                    error_code="INVALID_RESPONSE",
                    message=FETCH_FAILED_MESSAGE,
                    status_code=response.status_code,
                ),
            )

        logger.info("Catalog fetched", count=len(products))
        return StoreResponse(success=True, data=products)

    async def delete_product(self, product_id: str) -> StoreResponse:
        """Delete one product.

        Args:
            product_id: Product identifier.

        Returns:
            StoreResponse; on failure the error carries the store's message.
        """
        response = await self._request("DELETE", f"/products/{product_id}")
        if isinstance(response, StoreResponse):
            return response

        if response.status_code >= 400:
            body = _error_body(response)
            return StoreResponse(
                success=False,
                error=StoreError(
                    error_code="DELETE_FAILED",
                    message=body.get("message") or DELETE_FAILED_MESSAGE,
                    status_code=response.status_code,
                    details=body,
                ),
            )

        logger.info("Product deleted", product_id=product_id)
        return StoreResponse(success=True)
