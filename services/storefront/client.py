"""HTTP client for the catalog service.

Every failure is converted to a single user-facing message at this boundary;
callers only ever see a product list or a ``CatalogFetchError``.
"""

import logging

import httpx
from pydantic import ValidationError

from storefront.models import Product, ProductListPayload

logger = logging.getLogger(__name__)

APPLICATION_ERROR = "Failed to fetch products"
MALFORMED_PAYLOAD_ERROR = "Received malformed product data"


class CatalogFetchError(Exception):
    """Fetching the product list failed; ``str(exc)`` is safe to show to users."""


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class CatalogClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def products_url(self) -> str:
        return f"{self.base_url}/api/products"

    def _fallback_message(self) -> str:
        return (
            "An error occurred while fetching products. "
            f"Make sure the server is running on {self.base_url}"
        )

    async def fetch_products(self) -> list[Product]:
        """GET /api/products and return the parsed catalog.

        Raises:
            CatalogFetchError: on transport failures, non-2xx responses,
                ``success: false`` payloads and payloads without product shape.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self.products_url)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Error fetching products: HTTP %d from %s", status, self.products_url)
            message = _server_message(exc.response) or f"Request failed with status code {status}"
            raise CatalogFetchError(message) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.error("Error fetching products: %r", exc)
            raise CatalogFetchError(str(exc) or self._fallback_message()) from exc

        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("Error fetching products: response is not JSON")
            raise CatalogFetchError(MALFORMED_PAYLOAD_ERROR) from exc

        if not isinstance(body, dict) or body.get("success") is not True:
            logger.error("Error fetching products: service reported failure")
            raise CatalogFetchError(APPLICATION_ERROR)

        try:
            payload = ProductListPayload.model_validate(body)
        except ValidationError as exc:
            logger.error("Error fetching products: %s", exc)
            raise CatalogFetchError(MALFORMED_PAYLOAD_ERROR) from exc

        logger.debug("Fetched %d products from %s", len(payload.data), self.products_url)
        return payload.data
