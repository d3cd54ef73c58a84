"""Custom exception hierarchy for cinevault.

Business outcomes (failed login, empty cart, unknown movie) are reported
through return values and notifications, never through these exceptions.
They cover faults the caller cannot fix by re-submitting a form.
"""

from __future__ import annotations


class CinevaultError(Exception):
    """Base exception for all cinevault errors."""


class CinevaultConfigError(CinevaultError):
    """Invalid or missing configuration."""


class CinevaultStorageError(CinevaultError):
    """A storage backend failed to read or write a key."""

    def __init__(self, message: str, *, key: str = "") -> None:
        self.key = key
        super().__init__(message)


class CinevaultCatalogError(CinevaultError):
    """The seed catalog could not be loaded or is malformed."""
