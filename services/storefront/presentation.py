"""Rendering of the product grid and its aggregate footer.

Pure functions only: no network access and no state. Prices are summed as
received and rounded to cents only when formatted for display.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from storefront.models import Product

NO_PRODUCTS_MESSAGE = "No products found"
CURRENCY_SYMBOL = "$"
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class CatalogSummary:
    count: int
    total_value: float


def format_price(value: float) -> str:
    """Format *value* as currency with exactly two decimals, rounding half up."""
    cents = Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{cents}"


def summarize(products: Sequence[Product]) -> CatalogSummary:
    return CatalogSummary(
        count=len(products),
        total_value=sum((p.price for p in products), 0.0),
    )


def render_product_card(product: Product) -> Panel:
    body = Group(
        Text(f"ID: {product.id}", style="dim"),
        Text(format_price(product.price), style="bold green"),
    )
    return Panel(body, title=Text(product.name, style="bold"), width=28, padding=(1, 2))


def render_stats(summary: CatalogSummary) -> Panel:
    stats = Text.assemble(
        "Total Products: ",
        (str(summary.count), "bold"),
        "    ",
        "Total Value: ",
        (format_price(summary.total_value), "bold"),
    )
    return Panel(stats, border_style="blue")


def render_catalog(products: Sequence[Product]) -> RenderableType:
    if not products:
        return Text(NO_PRODUCTS_MESSAGE, style="italic")

    grid = Columns([render_product_card(p) for p in products], equal=True, expand=True)
    return Group(grid, render_stats(summarize(products)))
