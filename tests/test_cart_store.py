from __future__ import annotations

from datetime import date

from cinevault.models.movie import MovieRecord
from cinevault.models.notification import Notification, NotificationLevel
from cinevault.state.cart import CartStore


def _movie(movie_id: int, price: float = 9.99, title: str | None = None) -> MovieRecord:
    return MovieRecord(
        id=movie_id,
        title=title or f"Movie {movie_id}",
        release_date=date(2024, 1, 1),
        price=price,
    )


def test_repeated_add_merges_into_one_line() -> None:
    cart = CartStore()
    movie = _movie(1)

    cart.add_item(movie, 2)
    cart.add_item(movie, 3)

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 5
    assert cart.item_count() == 5


def test_add_defaults_to_quantity_one() -> None:
    cart = CartStore()
    line = cart.add_item(_movie(1))
    assert line.quantity == 1
    assert cart.contains(1)


def test_lines_keep_insertion_order() -> None:
    cart = CartStore()
    cart.add_item(_movie(2))
    cart.add_item(_movie(1))
    cart.add_item(_movie(2))
    assert [item.movie_id for item in cart.items] == [2, 1]


def test_remove_absent_is_noop() -> None:
    cart = CartStore()
    cart.add_item(_movie(1), 2)
    before = cart.items

    assert cart.remove_item(42) is False
    assert cart.items == before


def test_remove_present_line() -> None:
    cart = CartStore()
    cart.add_item(_movie(1))
    cart.add_item(_movie(2))

    assert cart.remove_item(1) is True
    assert not cart.contains(1)
    assert [item.movie_id for item in cart.items] == [2]


def test_total_sums_price_times_quantity() -> None:
    cart = CartStore()
    cart.add_item(_movie(1, price=19.99), 1)
    cart.add_item(_movie(2, price=14.99), 2)
    assert cart.total() == 49.97


def test_empty_cart_derived_values() -> None:
    cart = CartStore()
    assert cart.total() == 0
    assert cart.item_count() == 0
    assert cart.is_empty
    assert not cart.contains(1)


def test_clear_empties_every_line() -> None:
    cart = CartStore()
    cart.add_item(_movie(1))
    cart.add_item(_movie(2), 4)
    cart.clear()
    assert cart.is_empty
    assert cart.item_count() == 0


def test_mixed_sequence_keeps_one_line_per_movie() -> None:
    cart = CartStore()
    operations = [("add", 1, 1), ("add", 2, 2), ("add", 1, 3), ("remove", 2, 0), ("add", 2, 1), ("add", 3, 1)]
    for op, movie_id, qty in operations:
        if op == "add":
            cart.add_item(_movie(movie_id), qty)
        else:
            cart.remove_item(movie_id)

    ids = [item.movie_id for item in cart.items]
    assert len(ids) == len(set(ids))
    assert cart.item_count() == sum(item.quantity for item in cart.items) == 6


def test_restore_merges_duplicate_lines_without_notifying() -> None:
    seen: list[Notification] = []
    cart = CartStore(notify=seen.append)
    movie = _movie(1)
    cart.add_item(movie)
    seen.clear()

    cart.restore([cart.items[0], cart.items[0].with_quantity(2)])

    assert [(item.movie_id, item.quantity) for item in cart.items] == [(1, 3)]
    assert seen == []


def test_notifications_for_each_mutation() -> None:
    seen: list[Notification] = []
    cart = CartStore(notify=seen.append)
    movie = _movie(1, title="Barbie")

    cart.add_item(movie)
    cart.add_item(movie)
    cart.remove_item(1)
    cart.remove_item(1)
    cart.clear()

    assert [n.message for n in seen] == [
        'Added "Barbie" to cart',
        'Updated quantity for "Barbie" in cart',
        'Removed "Barbie" from cart',
        "Cart cleared",
    ]
    assert all(n.level == NotificationLevel.SUCCESS for n in seen)


def test_non_positive_quantity_is_ignored() -> None:
    seen: list[Notification] = []
    cart = CartStore(notify=seen.append)
    cart.add_item(_movie(1), 2)
    seen.clear()

    assert cart.add_item(_movie(1), -2) is None
    assert cart.add_item(_movie(2), 0) is None

    assert [(item.movie_id, item.quantity) for item in cart.items] == [(1, 2)]
    assert seen == []
