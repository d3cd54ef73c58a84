"""Shopping cart state container.

The store knows nothing about persistence; :class:`~cinevault.state.persistence.PersistentCart`
wraps it with an explicit load/save pair.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from cinevault.models.cart import CartLineItem
from cinevault.models.movie import MovieRecord
from cinevault.models.notification import Notification

_logger = logging.getLogger(__name__)


class CartStore:
    """Ordered line items, at most one per movie identifier.

    No operation raises: inputs are trusted catalog records.
    """

    def __init__(
        self,
        items: Iterable[CartLineItem] = (),
        *,
        notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self._items: list[CartLineItem] = []
        self._notify = notify
        self.restore(items)

    def _emit(self, notification: Notification) -> None:
        if self._notify is not None:
            self._notify(notification)

    def _index(self, movie_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.movie_id == movie_id:
                return index
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, movie: MovieRecord, quantity: int = 1) -> CartLineItem | None:
        """Add *quantity* copies of *movie*, merging into an existing line.

        A quantity below one is ignored and ``None`` is returned.
        """
        if quantity < 1:
            _logger.debug("Ignoring add of %r with quantity %d", movie.title, quantity)
            return None
        index = self._index(movie.id)
        if index is not None:
            line = self._items[index].with_quantity(self._items[index].quantity + quantity)
            self._items[index] = line
            self._emit(Notification.success(f'Updated quantity for "{movie.title}" in cart'))
            return line

        line = CartLineItem(movie=movie, quantity=quantity)
        self._items.append(line)
        self._emit(Notification.success(f'Added "{movie.title}" to cart'))
        return line

    def remove_item(self, movie_id: int) -> bool:
        """Drop the line for *movie_id*; returns ``False`` when there was none."""
        index = self._index(movie_id)
        if index is None:
            return False
        removed = self._items.pop(index)
        self._emit(Notification.success(f'Removed "{removed.movie.title}" from cart'))
        return True

    def clear(self) -> None:
        self._items.clear()
        self._emit(Notification.success("Cart cleared"))

    def restore(self, items: Iterable[CartLineItem]) -> None:
        """Replace the contents without notifying, merging duplicate lines."""
        self._items = []
        for item in items:
            index = self._index(item.movie_id)
            if index is None:
                self._items.append(item)
            else:
                self._items[index] = self._items[index].with_quantity(self._items[index].quantity + item.quantity)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return tuple(self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def snapshot(self) -> list[CartLineItem]:
        return list(self._items)

    def total(self) -> float:
        """Sum of price times quantity, rounded to cents."""
        return round(sum(item.line_total for item in self._items), 2)

    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def contains(self, movie_id: int) -> bool:
        return self._index(movie_id) is not None

    def __len__(self) -> int:
        return len(self._items)
