"""MCP tool definitions for the product catalog.

Exposes the same read-only listing served at /api/products so that
agents can discover the catalog through the Model Context Protocol.
"""

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from catalog_service.catalog import list_products

mcp = FastMCP(
    "Product Catalog",
    stateless_http=True,
    json_response=True,
    streamable_http_path="/",
    transport_security=TransportSecuritySettings(
        enable_dns_rebinding_protection=False,
    ),
)


@mcp.tool()
def browse_products() -> list[dict]:
    """Browse the product catalog. Returns all available products with their
    id, name and price."""
    return list_products()
