"""Application context for the storefront."""

from __future__ import annotations

import logging
from typing import Any

from cinevault.checkout import Checkout
from cinevault.config import StorefrontConfig
from cinevault.exceptions import CinevaultError
from cinevault.models.movie import MovieRecord
from cinevault.models.notification import Notification
from cinevault.notifications import NotificationCallback, Notifier
from cinevault.state.cart import CartStore
from cinevault.state.catalog import CatalogStore
from cinevault.state.persistence import PersistentCart, PersistentSession
from cinevault.state.session import SessionStore
from cinevault.storage import JsonFileStorage, KeyValueStorage, MemoryStorage

_logger = logging.getLogger(__name__)


def _default_storage(config: StorefrontConfig) -> KeyValueStorage:
    if config.storage_dir is None:
        return MemoryStorage()
    return JsonFileStorage(config.storage_dir)


class Storefront:
    """Owns the catalog, cart, session and notifier for one device profile.

    Build it once at start-up and pass it to whatever needs the stores.
    Entering the context rehydrates persisted state; leaving it flushes the
    cart and session one last time.

    Usage::

        async with Storefront(StorefrontConfig.from_env()) as shop:
            shop.cart.add_item(shop.catalog.featured()[0])
            await shop.session.login("user@example.com", "password")
            await shop.checkout.pay(details)
    """

    def __init__(
        self,
        config: StorefrontConfig | None = None,
        *,
        storage: KeyValueStorage | None = None,
        catalog: CatalogStore | None = None,
        on_notification: NotificationCallback | None = None,
    ) -> None:
        self._config = config or StorefrontConfig()
        self._storage = storage if storage is not None else _default_storage(self._config)
        self._catalog = (
            catalog if catalog is not None else CatalogStore.from_seed(highlight_count=self._config.highlight_count)
        )
        self._notifier = Notifier()
        if on_notification is not None:
            self._notifier.subscribe(on_notification)

        self._cart = PersistentCart(CartStore(notify=self._notifier.emit), self._storage)
        self._session = PersistentSession(
            SessionStore(
                auth_delay=self._config.auth_delay,
                demo=self._config.demo,
                notify=self._notifier.emit,
            ),
            self._storage,
        )
        self._checkout = Checkout(
            self._cart,
            self._session,
            tax_rate=self._config.tax_rate,
            payment_delay=self._config.payment_delay,
            notify=self._notifier.emit,
        )
        self._open = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Rehydrate cart and session from storage."""
        self._cart.load()
        self._session.load()
        self._open = True
        _logger.debug("Storefront opened with %d catalog movie(s)", len(self._catalog))

    def close(self) -> None:
        """Flush cart and session to storage."""
        if not self._open:
            return
        self._cart.save()
        self._session.save()
        self._open = False
        _logger.debug("Storefront closed")

    async def __aenter__(self) -> Storefront:
        self.open()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        self.close()

    def __enter__(self) -> Storefront:
        self.open()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def _require_open(self) -> None:
        if not self._open:
            raise CinevaultError("Storefront not opened. Use 'async with Storefront(...) as shop:'")

    # ------------------------------------------------------------------
    # Stores
    # ------------------------------------------------------------------

    @property
    def config(self) -> StorefrontConfig:
        return self._config

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def catalog(self) -> CatalogStore:
        return self._catalog

    @property
    def cart(self) -> PersistentCart:
        self._require_open()
        return self._cart

    @property
    def session(self) -> PersistentSession:
        self._require_open()
        return self._session

    @property
    def checkout(self) -> Checkout:
        self._require_open()
        return self._checkout

    # ------------------------------------------------------------------
    # Views spanning several stores
    # ------------------------------------------------------------------

    def library(self, *, query: str = "", genre: str | None = None) -> tuple[MovieRecord, ...]:
        """Owned movies in purchase order, optionally filtered.

        Purchases whose movie is no longer in the catalog are skipped.
        """
        self._require_open()
        owned = [
            movie
            for movie in (self._catalog.get(purchase.id) for purchase in self._session.purchases)
            if movie is not None
        ]
        return self._catalog.filter(owned, query=query, genre=genre)

    def library_genres(self) -> tuple[str, ...]:
        """Genres present among owned movies, for the library filter chips."""
        return self._catalog.genres(self.library())

    def add_to_cart(self, movie_id: int, quantity: int = 1) -> bool:
        """Add a catalog movie to the cart unless it is unknown, already owned or the quantity is below one."""
        self._require_open()
        movie = self._catalog.get(movie_id)
        if movie is None:
            return False
        if self._session.is_owned(movie_id):
            self._notifier.emit(Notification.info("You already own this movie"))
            return False
        return self._cart.add_item(movie, quantity) is not None
