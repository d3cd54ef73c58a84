"""Mock authentication and ownership state.

Two independent axes live here:

* authentication: ``anonymous`` ↔ ``authenticated`` via :meth:`SessionStore.login`,
  :meth:`SessionStore.register` and :meth:`SessionStore.logout`;
* ownership: purchase records, which survive logout and apply to whoever
  signs in next on the same profile.

Login and registration suspend once on a fixed artificial delay. State is
only touched after the delay resolves, so cancelling the coroutine leaves
the session exactly as it was.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
import string
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from cinevault._constants import AUTH_DELAY_SECONDS, DEMO_USER_ID
from cinevault._redact import redact_for_log
from cinevault.config import DemoAccount
from cinevault.models.notification import Notification
from cinevault.models.user import PurchaseRecord, UserRecord

_logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 7


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_user_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def _display_name(email: str) -> str:
    local, _, _ = email.partition("@")
    return local or email


class SessionStore:
    """Current user plus purchase history for one device profile."""

    def __init__(
        self,
        *,
        auth_delay: float = AUTH_DELAY_SECONDS,
        demo: DemoAccount | None = None,
        clock: Callable[[], datetime] = _utcnow,
        notify: Callable[[Notification], None] | None = None,
    ) -> None:
        self._auth_delay = auth_delay
        self._demo = demo or DemoAccount()
        self._clock = clock
        self._notify = notify
        self._user: UserRecord | None = None
        self._purchases: list[PurchaseRecord] = []
        self._in_flight = 0

    def _emit(self, notification: Notification) -> None:
        if self._notify is not None:
            self._notify(notification)

    async def _simulate_round_trip(self) -> None:
        self._in_flight += 1
        try:
            await asyncio.sleep(self._auth_delay)
        finally:
            self._in_flight -= 1

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    @property
    def user(self) -> UserRecord | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def pending(self) -> bool:
        """Whether a login or registration is waiting on its simulated round trip."""
        return self._in_flight > 0

    async def login(self, email: str, password: str) -> bool:
        """Sign in; any non-empty email/password pair is accepted."""
        _logger.debug("Login attempt %s", redact_for_log({"email": email, "password": password}))
        await self._simulate_round_trip()

        email = email.strip()
        if not email or not password:
            self._emit(Notification.error("Invalid email or password"))
            return False

        if self._demo.matches(email, password):
            user = UserRecord(id=DEMO_USER_ID, email=self._demo.email, name=self._demo.name)
        else:
            user = UserRecord(id=_new_user_id(), email=email, name=_display_name(email))

        self._user = user
        _logger.debug("Logged in user id=%s", user.id)
        self._emit(Notification.success("Logged in successfully"))
        return True

    async def register(self, name: str, email: str, password: str) -> bool:
        """Create a session for a new account; no uniqueness check is made."""
        _logger.debug(
            "Registration attempt %s",
            redact_for_log({"name": name, "email": email, "password": password}),
        )
        await self._simulate_round_trip()

        name = name.strip()
        email = email.strip()
        if not name or not email or not password:
            self._emit(Notification.error("All fields are required"))
            return False

        self._user = UserRecord(id=_new_user_id(), email=email, name=name)
        _logger.debug("Registered user id=%s", self._user.id)
        self._emit(Notification.success("Registered and logged in successfully"))
        return True

    def logout(self) -> None:
        """Forget the current user. Purchases are kept on purpose."""
        self._user = None
        self._emit(Notification.success("Logged out successfully"))

    # ------------------------------------------------------------------
    # Ownership
    # ------------------------------------------------------------------

    @property
    def purchases(self) -> tuple[PurchaseRecord, ...]:
        return tuple(self._purchases)

    def record_purchase(self, movie_id: int) -> bool:
        """Record ownership of *movie_id*; returns ``False`` if it was already owned."""
        if self.is_owned(movie_id):
            return False
        self._purchases.append(PurchaseRecord(id=movie_id, purchase_date=self._clock()))
        return True

    def is_owned(self, movie_id: int) -> bool:
        return any(purchase.id == movie_id for purchase in self._purchases)

    # ------------------------------------------------------------------
    # Persistence hooks
    # ------------------------------------------------------------------

    def restore(self, user: UserRecord | None, purchases: Iterable[PurchaseRecord]) -> None:
        """Replace state without notifying; duplicate purchases keep the first record."""
        self._user = user
        self._purchases = []
        seen: set[int] = set()
        for purchase in purchases:
            if purchase.id in seen:
                continue
            seen.add(purchase.id)
            self._purchases.append(purchase)
