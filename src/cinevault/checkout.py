"""Mock checkout flow.

The flow has three steps, each guarded by the same preconditions (a signed-in
user and a non-empty cart):

1. :meth:`Checkout.submit_contact` validates name and email;
2. :meth:`Checkout.pay` validates the card form and waits out a simulated
   processing delay;
3. :meth:`Checkout.complete` records ownership for every cart line and
   empties the cart.

No money moves anywhere. Failures come back as a :class:`CheckoutResult`
with ``ok=False`` plus an error notification.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from cinevault._constants import PAYMENT_DELAY_SECONDS, TAX_RATE
from cinevault._redact import redact_for_log
from cinevault.models.cart import CartLineItem
from cinevault.models.checkout import ContactDetails, Order, OrderSummary, PaymentDetails
from cinevault.models.notification import Notification
from cinevault.state.persistence import PersistentCart, PersistentSession

_logger = logging.getLogger(__name__)


class CheckoutResult(BaseModel):
    """Outcome of a checkout step."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    error: str | None = None
    order: Order | None = None

    @classmethod
    def failure(cls, error: str) -> CheckoutResult:
        return cls(ok=False, error=error)


_SUCCESS = CheckoutResult(ok=True)


class Checkout:
    """Checkout bound to one storefront's cart and session."""

    def __init__(
        self,
        cart: PersistentCart,
        session: PersistentSession,
        *,
        tax_rate: float = TAX_RATE,
        payment_delay: float = PAYMENT_DELAY_SECONDS,
        notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self._cart = cart
        self._session = session
        self._tax_rate = tax_rate
        self._payment_delay = payment_delay
        self._notify = notify
        self._processing = 0

    def _emit(self, notification: Notification) -> None:
        if self._notify is not None:
            self._notify(notification)

    def _fail(self, error: str) -> CheckoutResult:
        self._emit(Notification.error(error))
        return CheckoutResult.failure(error)

    @property
    def processing(self) -> bool:
        """Whether a payment is waiting on its simulated processing delay."""
        return self._processing > 0

    def summary(self) -> OrderSummary:
        return OrderSummary.from_items(self._cart.items, self._tax_rate)

    def begin(self) -> CheckoutResult:
        """Check the preconditions shared by every step."""
        if not self._session.is_authenticated:
            return self._fail("Please login to continue checkout")
        if self._cart.is_empty:
            return self._fail("Your cart is empty")
        return _SUCCESS

    def prefill(self) -> ContactDetails:
        """Contact form values taken from the signed-in user, if any."""
        user = self._session.user
        if user is None:
            return ContactDetails()
        return ContactDetails(full_name=user.name, email=user.email)

    def submit_contact(self, details: ContactDetails) -> CheckoutResult:
        started = self.begin()
        if not started.ok:
            return started
        error = details.validate_details()
        if error is not None:
            return self._fail(error)
        return _SUCCESS

    async def pay(self, details: PaymentDetails) -> CheckoutResult:
        """Validate the card form, simulate processing, then complete the order.

        The order covers the cart as it was when the card was accepted. Lines
        added while the payment is processing stay in the cart.
        """
        started = self.begin()
        if not started.ok:
            return started
        error = details.validate_details()
        if error is not None:
            return self._fail(error)

        items = self._cart.items
        _logger.debug("Processing payment %s", redact_for_log(details.model_dump()))
        self._processing += 1
        try:
            await asyncio.sleep(self._payment_delay)
        finally:
            self._processing -= 1
        return self._finish(items)

    def complete(self) -> CheckoutResult:
        """Turn the cart into owned titles and empty it."""
        started = self.begin()
        if not started.ok:
            return started
        return self._finish(self._cart.items)

    def _finish(self, items: tuple[CartLineItem, ...]) -> CheckoutResult:
        order = Order(items=items, summary=OrderSummary.from_items(items, self._tax_rate))
        bought = {item.movie_id for item in items}
        for item in items:
            self._session.record_purchase(item.movie_id)
        if all(line.movie_id in bought for line in self._cart.items):
            self._cart.clear()
        else:
            for item in items:
                self._cart.remove_item(item.movie_id)

        _logger.debug("Completed order %s with %d line(s)", order.order_number, len(items))
        self._emit(Notification.success("Purchase complete! Your movies are now available in your library."))
        return CheckoutResult(ok=True, order=order)
