"""Typed models for the mock checkout flow.

Contact and payment details are plain form inputs: they are accepted as
typed strings and checked by :meth:`validate`, which returns the first
user-facing error message instead of raising. Input formatters mirror what
the payment form does while the user types.
"""

from __future__ import annotations

import re
import secrets
from collections.abc import Iterable
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from cinevault.models._base import StoreBaseModel, UtcDatetime
from cinevault.models.cart import CartLineItem

_NON_DIGIT = re.compile(r"\D")

CARD_NUMBER_DIGITS = 16
EXPIRY_LENGTH = len("MM/YY")
CVV_MIN_LENGTH = 3
CVV_MAX_LENGTH = 4


def _digits(value: str) -> str:
    return _NON_DIGIT.sub("", value)


def format_card_number(value: str) -> str:
    """Keep digits only and group them in blocks of four (``"4242 4242 ..."``)."""
    digits = _digits(value)
    return " ".join(digits[i : i + 4] for i in range(0, len(digits), 4))


def format_expiry(value: str) -> str:
    """Keep up to four digits and insert the ``MM/YY`` slash once past the month."""
    digits = _digits(value)[:4]
    if len(digits) > 2:
        return f"{digits[:2]}/{digits[2:]}"
    return digits


def sanitize_cvv(value: str) -> str:
    """Digits only, at most four."""
    return _digits(value)[:CVV_MAX_LENGTH]


def format_currency(amount: float) -> str:
    """Format a USD amount the way the storefront displays prices."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


class _FormDetails(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class ContactDetails(_FormDetails):
    """Account information collected on the checkout page."""

    full_name: str = ""
    email: str = ""

    def validate_details(self) -> str | None:
        """Return the first validation error, or ``None`` when the form is complete."""
        if not self.full_name:
            return "Please enter your full name"
        if not self.email or "@" not in self.email:
            return "Please enter a valid email"
        return None


class PaymentDetails(_FormDetails):
    """Card details collected on the payment page.

    Values are expected in the formatted shape produced by
    :func:`format_card_number`, :func:`format_expiry` and
    :func:`sanitize_cvv`, but raw input is accepted too.
    """

    card_number: str = ""
    card_name: str = ""
    expiry_date: str = ""
    cvv: str = ""
    method: str = "credit-card"

    def validate_details(self) -> str | None:
        """Return the first validation error, or ``None`` when the card looks usable."""
        if len(_digits(self.card_number)) < CARD_NUMBER_DIGITS:
            return "Please enter a valid card number"
        if not self.card_name:
            return "Please enter the name on card"
        if len(self.expiry_date) < EXPIRY_LENGTH:
            return "Please enter a valid expiry date (MM/YY)"
        if len(self.cvv) < CVV_MIN_LENGTH:
            return "Please enter a valid security code"
        return None


class OrderSummary(StoreBaseModel):
    """Subtotal, tax and total for a set of cart lines."""

    subtotal: float = 0.0
    tax_rate: float = Field(default=0.0, ge=0.0)
    tax: float = 0.0
    total: float = 0.0

    @classmethod
    def from_items(cls, items: Iterable[CartLineItem], tax_rate: float) -> OrderSummary:
        subtotal = sum(item.line_total for item in items)
        tax = subtotal * tax_rate
        return cls(
            subtotal=round(subtotal, 2),
            tax_rate=tax_rate,
            tax=round(tax, 2),
            total=round(subtotal + tax, 2),
        )


def new_order_number() -> str:
    """Random display number in the ``ORD-000000`` format."""
    return f"ORD-{secrets.randbelow(1_000_000):06d}"


class Order(StoreBaseModel):
    """A completed (mock) purchase."""

    order_number: str = Field(default_factory=new_order_number)
    placed_at: UtcDatetime = Field(default_factory=lambda: datetime.now(UTC))
    items: tuple[CartLineItem, ...] = ()
    summary: OrderSummary = Field(default_factory=OrderSummary)

    @property
    def movie_ids(self) -> tuple[int, ...]:
        return tuple(item.movie_id for item in self.items)
