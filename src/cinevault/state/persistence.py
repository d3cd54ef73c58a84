"""Persistence adapters for the cart and session stores.

Each adapter owns a pure store plus a :class:`~cinevault.storage.KeyValueStorage`
and exposes an explicit :meth:`load` / :meth:`save` pair. Every mutation made
through an adapter is followed by :meth:`save`, which writes the store's
whole snapshot under its own keys.

Blobs are plain JSON of the in-memory shape, with no schema version. A blob
that cannot be read, parsed or validated is treated as absent: the store
falls back to its empty/anonymous state and a warning is logged.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from cinevault._constants import CART_KEY, PURCHASES_KEY, USER_KEY
from cinevault.exceptions import CinevaultStorageError
from cinevault.models.cart import CartLineItem
from cinevault.models.movie import MovieRecord
from cinevault.models.user import PurchaseRecord, UserRecord
from cinevault.state.cart import CartStore
from cinevault.state.session import SessionStore
from cinevault.storage import KeyValueStorage

_logger = logging.getLogger(__name__)

T = TypeVar("T")

_CART_ADAPTER = TypeAdapter(list[CartLineItem])
_PURCHASES_ADAPTER = TypeAdapter(list[PurchaseRecord])
_USER_ADAPTER = TypeAdapter(UserRecord)


def _encode(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _decode(storage: KeyValueStorage, key: str, adapter: TypeAdapter[T]) -> T | None:
    """Read and validate *key*; ``None`` when absent or unusable."""
    try:
        raw = storage.get(key)
    except CinevaultStorageError:
        _logger.warning("Could not read persisted %r; treating it as absent", key, exc_info=True)
        return None
    if raw is None:
        return None
    try:
        return adapter.validate_python(json.loads(raw))
    except (ValueError, RecursionError, ValidationError) as exc:
        _logger.warning("Discarding unreadable persisted %r: %s", key, exc)
        return None


class PersistentCart:
    """:class:`CartStore` mirrored to the ``cart`` key."""

    def __init__(self, store: CartStore, storage: KeyValueStorage) -> None:
        self._store = store
        self._storage = storage

    @property
    def store(self) -> CartStore:
        return self._store

    def load(self) -> None:
        items = _decode(self._storage, CART_KEY, _CART_ADAPTER)
        self._store.restore(items or [])
        _logger.debug("Loaded cart with %d line(s)", len(self._store))

    def save(self) -> None:
        self._storage.set(CART_KEY, _encode([item.to_storage() for item in self._store.snapshot()]))

    # Mutations -------------------------------------------------------

    def add_item(self, movie: MovieRecord, quantity: int = 1) -> CartLineItem | None:
        line = self._store.add_item(movie, quantity)
        if line is not None:
            self.save()
        return line

    def remove_item(self, movie_id: int) -> bool:
        removed = self._store.remove_item(movie_id)
        self.save()
        return removed

    def clear(self) -> None:
        # Writes an explicit empty list so a reload never resurrects old lines.
        self._store.clear()
        self.save()

    # Derived views ---------------------------------------------------

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return self._store.items

    @property
    def is_empty(self) -> bool:
        return self._store.is_empty

    def total(self) -> float:
        return self._store.total()

    def item_count(self) -> int:
        return self._store.item_count()

    def contains(self, movie_id: int) -> bool:
        return self._store.contains(movie_id)


class PersistentSession:
    """:class:`SessionStore` mirrored to the ``user`` and ``purchasedMovies`` keys."""

    def __init__(self, store: SessionStore, storage: KeyValueStorage) -> None:
        self._store = store
        self._storage = storage

    @property
    def store(self) -> SessionStore:
        return self._store

    def load(self) -> None:
        user = _decode(self._storage, USER_KEY, _USER_ADAPTER)
        purchases = _decode(self._storage, PURCHASES_KEY, _PURCHASES_ADAPTER)
        self._store.restore(user, purchases or [])
        _logger.debug(
            "Loaded session authenticated=%s purchases=%d",
            self._store.is_authenticated,
            len(self._store.purchases),
        )

    def save(self) -> None:
        user = self._store.user
        if user is None:
            self._storage.delete(USER_KEY)
        else:
            self._storage.set(USER_KEY, _encode(user.to_storage()))
        self._storage.set(
            PURCHASES_KEY,
            _encode([purchase.to_storage() for purchase in self._store.purchases]),
        )

    # Authentication --------------------------------------------------

    @property
    def user(self) -> UserRecord | None:
        return self._store.user

    @property
    def is_authenticated(self) -> bool:
        return self._store.is_authenticated

    @property
    def pending(self) -> bool:
        return self._store.pending

    async def login(self, email: str, password: str) -> bool:
        ok = await self._store.login(email, password)
        if ok:
            self.save()
        return ok

    async def register(self, name: str, email: str, password: str) -> bool:
        ok = await self._store.register(name, email, password)
        if ok:
            self.save()
        return ok

    def logout(self) -> None:
        self._store.logout()
        self.save()

    # Ownership -------------------------------------------------------

    @property
    def purchases(self) -> tuple[PurchaseRecord, ...]:
        return self._store.purchases

    def record_purchase(self, movie_id: int) -> bool:
        added = self._store.record_purchase(movie_id)
        if added:
            self.save()
        return added

    def is_owned(self, movie_id: int) -> bool:
        return self._store.is_owned(movie_id)
