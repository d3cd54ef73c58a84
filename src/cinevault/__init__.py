"""cinevault - State layer for a client-side movie storefront."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cinevault")
except PackageNotFoundError:
    __version__ = "0+local"
from cinevault.checkout import Checkout, CheckoutResult
from cinevault.config import DemoAccount, StorefrontConfig
from cinevault.exceptions import (
    CinevaultCatalogError,
    CinevaultConfigError,
    CinevaultError,
    CinevaultStorageError,
)
from cinevault.models import (
    CartLineItem,
    ContactDetails,
    MovieRecord,
    Notification,
    NotificationLevel,
    Order,
    OrderSummary,
    PaymentDetails,
    PurchaseRecord,
    UserRecord,
)
from cinevault.notifications import Notifier
from cinevault.state import (
    CartStore,
    CatalogStore,
    PersistentCart,
    PersistentSession,
    SessionStore,
)
from cinevault.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from cinevault.storefront import Storefront

__all__ = [
    "__version__",
    "CartLineItem",
    "CartStore",
    "CatalogStore",
    "Checkout",
    "CheckoutResult",
    "CinevaultCatalogError",
    "CinevaultConfigError",
    "CinevaultError",
    "CinevaultStorageError",
    "ContactDetails",
    "DemoAccount",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "MovieRecord",
    "Notification",
    "NotificationLevel",
    "Notifier",
    "Order",
    "OrderSummary",
    "PaymentDetails",
    "PersistentCart",
    "PersistentSession",
    "PurchaseRecord",
    "SessionStore",
    "Storefront",
    "StorefrontConfig",
    "UserRecord",
]
