"""User and ownership models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import ConfigDict, Field, field_validator

from cinevault.models._base import StoreBaseModel, UtcDatetime


class UserRecord(StoreBaseModel):
    """The currently signed-in user.

    Parameters
    ----------
    id : str
        Opaque user identifier (``"1"`` for the demo account).
    email : str
        Email address used to sign in.
    name : str
        Display name.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str
    email: str
    name: str

    @field_validator("id", "email", "name")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must be non-empty")
        return value


class PurchaseRecord(StoreBaseModel):
    """Durable proof that a movie was bought on this device.

    Ownership is not tied to the signed-in user: records survive logout and
    are shared by every later session on the same profile.
    """

    id: int
    """Identifier of the purchased movie."""
    purchase_date: UtcDatetime = Field(default_factory=lambda: datetime.now(UTC))
