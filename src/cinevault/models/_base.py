"""Base model for persisted storefront records.

Every record the stores hold inherits from :class:`StoreBaseModel` which
provides:

* ``alias_generator=to_camel`` so the persisted JSON uses camelCase keys
  while Python code uses snake_case fields.
* ``populate_by_name=True`` so records can be built with either spelling.
* Immutability (``frozen=True``); stores replace records, never mutate them.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
"""Annotated type that always yields a timezone-aware datetime."""


class StoreBaseModel(BaseModel):
    """Base for records held by the catalog, cart and session stores."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_storage(self) -> dict[str, Any]:
        """Return a JSON-compatible dict using the persisted (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True)
