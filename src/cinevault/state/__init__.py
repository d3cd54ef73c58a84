"""State/store layer.

Three independent containers (catalog, cart, session) plus the adapters
that mirror cart and session to durable key-value storage.
"""

from cinevault.state.cart import CartStore
from cinevault.state.catalog import CatalogStore, load_seed_movies
from cinevault.state.persistence import PersistentCart, PersistentSession
from cinevault.state.session import SessionStore

__all__ = [
    "CartStore",
    "CatalogStore",
    "PersistentCart",
    "PersistentSession",
    "SessionStore",
    "load_seed_movies",
]
