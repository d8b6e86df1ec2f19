"""Storefront TUI - single page product catalog.

Layout:
┌──────────────────────────────────────────────────────────┐
│ 📦 Product Catalog                                       │
│ Textual + FastAPI + httpx Integration Demo               │
├──────────────────────────────────────────────────────────┤
│  loading indicator  |  error panel + Try Again  |  grid  │
├──────────────────────────────────────────────────────────┤
│ © 2024 Product Demo                    r Retry  q Quit   │
└──────────────────────────────────────────────────────────┘

Exactly one of the three middle panels is visible, chosen by the
controller's current state.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical, VerticalScroll
from textual.widgets import Button, Footer, LoadingIndicator, Static

from storefront.client import CatalogClient
from storefront.presentation import render_catalog
from storefront.state import CatalogController, Failed, Loaded, Loading, ViewState


class StorefrontApp(App):
    """Fetches the catalog once on mount and renders it."""

    TITLE = "Product Catalog"

    CSS = """
    #header-bar {
        dock: top;
        height: 3;
        padding: 0 2;
        background: $primary-background;
    }

    #subtitle {
        color: $text-muted;
    }

    #content-area {
        width: 100%;
        height: 1fr;
        padding: 1 2;
    }

    #loading-panel, #error-panel {
        height: auto;
        align: center middle;
    }

    #error-panel {
        border: round $error;
        padding: 1 2;
    }

    #products-panel {
        height: 1fr;
    }

    #footer-note {
        dock: bottom;
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("r", "retry", "Retry"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, client: CatalogClient) -> None:
        super().__init__()
        self.controller = CatalogController(client, on_change=self._show_state)

    def compose(self) -> ComposeResult:
        with Container(id="header-bar"):
            yield Static("[bold]📦 Product Catalog[/bold]", id="title")
            yield Static("Textual + FastAPI + httpx Integration Demo", id="subtitle")

        with Container(id="content-area"):
            with Vertical(id="loading-panel"):
                yield LoadingIndicator()
                yield Static("Loading products...")
            with Vertical(id="error-panel"):
                yield Static("[bold red]❌ Error[/bold red]")
                yield Static("", id="error-message")
                yield Button("Try Again", id="retry", variant="error")
            with VerticalScroll(id="products-panel"):
                yield Static("", id="products-view")

        yield Static("© 2024 Product Demo | Built with Textual, FastAPI, and httpx", id="footer-note")
        yield Footer()

    def on_mount(self) -> None:
        self.controller.start()

    async def on_unmount(self) -> None:
        await self.controller.close()

    async def action_quit(self) -> None:
        # Stop the fetch before the widgets it updates are torn down
        await self.controller.close()
        self.exit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "retry":
            self.controller.retry()

    def action_retry(self) -> None:
        self.controller.retry()

    def _show_state(self, state: ViewState) -> None:
        self.query_one("#loading-panel").display = isinstance(state, Loading)
        self.query_one("#error-panel").display = isinstance(state, Failed)
        self.query_one("#products-panel").display = isinstance(state, Loaded)

        if isinstance(state, Failed):
            self.query_one("#error-message", Static).update(Text(state.message))
        elif isinstance(state, Loaded):
            self.query_one("#products-view", Static).update(render_catalog(state.products))
