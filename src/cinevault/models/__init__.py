"""Data models for storefront records."""

from cinevault.models._base import StoreBaseModel, UtcDatetime
from cinevault.models.cart import CartLineItem
from cinevault.models.checkout import (
    ContactDetails,
    Order,
    OrderSummary,
    PaymentDetails,
    format_card_number,
    format_currency,
    format_expiry,
    sanitize_cvv,
)
from cinevault.models.movie import MovieRecord
from cinevault.models.notification import Notification, NotificationLevel
from cinevault.models.user import PurchaseRecord, UserRecord

__all__ = [
    "CartLineItem",
    "ContactDetails",
    "MovieRecord",
    "Notification",
    "NotificationLevel",
    "Order",
    "OrderSummary",
    "PaymentDetails",
    "PurchaseRecord",
    "StoreBaseModel",
    "UserRecord",
    "UtcDatetime",
    "format_card_number",
    "format_currency",
    "format_expiry",
    "sanitize_cvv",
]
