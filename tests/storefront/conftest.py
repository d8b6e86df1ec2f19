"""Shared fixtures for storefront tests."""

import httpx
import pytest

from storefront.client import CatalogClient

BASE_URL = "http://catalog.test"

CATALOG = [
    {"id": 1, "name": "Laptop", "price": 999.99},
    {"id": 2, "name": "Smartphone", "price": 599.99},
    {"id": 3, "name": "Tablet", "price": 399.99},
    {"id": 4, "name": "Headphones", "price": 149.99},
    {"id": 5, "name": "Smart Watch", "price": 299.99},
    {"id": 6, "name": "USB-C Cable", "price": 9.99},
]


@pytest.fixture
def catalog_payload():
    return {"success": True, "data": [dict(p) for p in CATALOG]}


@pytest.fixture
def make_client():
    """Build a CatalogClient whose requests are answered by *handler*."""

    def _make(handler) -> CatalogClient:
        return CatalogClient(BASE_URL, transport=httpx.MockTransport(handler))

    return _make
