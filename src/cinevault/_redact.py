"""Helpers for safe debug logging.

Login, registration and payment calls carry passwords and card data. This
module masks those fields before anything reaches a DEBUG log.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MASK = "<redacted>"

# Compared after lower-casing and dropping "_" / "-", so "card_number",
# "cardNumber" and "card-number" all match.
_SECRET_FIELDS: frozenset[str] = frozenset({"password", "cardnumber", "cardname", "expirydate", "cvv"})


def _is_secret(field: str) -> bool:
    return field.lower().replace("_", "").replace("-", "") in _SECRET_FIELDS


def redact_for_log(form: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of a credential or payment form with secret fields masked.

    Nested forms are masked too; other values are passed through unchanged.
    """
    redacted: dict[str, Any] = {}
    for field, value in form.items():
        key = str(field)
        if _is_secret(key):
            redacted[key] = _MASK
        elif isinstance(value, Mapping):
            redacted[key] = redact_for_log(value)
        else:
            redacted[key] = value
    return redacted
