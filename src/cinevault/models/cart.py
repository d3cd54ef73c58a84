"""Cart line item model."""

from __future__ import annotations

from pydantic import Field

from cinevault.models._base import StoreBaseModel
from cinevault.models.movie import MovieRecord


class CartLineItem(StoreBaseModel):
    """One cart entry pairing a movie with a quantity.

    The full :class:`MovieRecord` is embedded so the cart can price itself
    (and be restored from storage) without a catalog lookup.
    """

    movie: MovieRecord
    quantity: int = Field(default=1, gt=0)

    @property
    def movie_id(self) -> int:
        return self.movie.id

    @property
    def line_total(self) -> float:
        return self.movie.price * self.quantity

    def with_quantity(self, quantity: int) -> CartLineItem:
        """Return a copy of this line with a new quantity."""
        return CartLineItem(movie=self.movie, quantity=quantity)
