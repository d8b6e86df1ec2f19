"""View model for the storefront.

The view is always in exactly one of three states, modelled as a tagged union:
``Loading``, ``Failed(message)`` or ``Loaded(products)``. ``CatalogController``
owns the current state and is the only thing that moves it.
"""

import asyncio
import contextlib
import logging
from dataclasses import dataclass
from typing import Callable

from storefront.client import CatalogClient, CatalogFetchError
from storefront.models import Product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Loaded:
    products: tuple[Product, ...]


ViewState = Loading | Failed | Loaded
Listener = Callable[[ViewState], None]


class CatalogController:
    """Drives the Loading -> Failed | Loaded lifecycle.

    At most one fetch runs at a time: triggering another while one is in flight
    returns the running task instead of starting a second request. ``close``
    cancels the in-flight fetch and stops all further transitions, so a torn
    down view never receives a late update.
    """

    def __init__(self, client: CatalogClient, on_change: Listener | None = None):
        self._client = client
        self._listeners: list[Listener] = [on_change] if on_change is not None else []
        self._state: ViewState = Loading()
        self._task: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def start(self) -> asyncio.Task[None]:
        """Begin fetching the catalog. Must be called from a running event loop."""
        if self._closed:
            raise RuntimeError("CatalogController is closed")
        if self._task is not None and not self._task.done():
            logger.debug("Fetch already in flight, ignoring duplicate trigger")
            return self._task
        self._set_state(Loading())
        self._task = asyncio.create_task(self._fetch())
        return self._task

    def retry(self) -> asyncio.Task[None] | None:
        """Re-run the fetch after a failure. Ignored in any other state."""
        if not isinstance(self._state, Failed):
            return None
        logger.info("Retrying product fetch")
        return self.start()

    async def close(self) -> None:
        self._closed = True
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _fetch(self) -> None:
        try:
            products = await self._client.fetch_products()
        except CatalogFetchError as exc:
            self._set_state(Failed(str(exc)))
        else:
            self._set_state(Loaded(tuple(products)))

    def _set_state(self, state: ViewState) -> None:
        if self._closed:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)
