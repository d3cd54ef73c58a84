"""Storefront configuration for cinevault."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cinevault._constants import (
    AUTH_DELAY_SECONDS,
    DEMO_EMAIL,
    DEMO_NAME,
    DEMO_PASSWORD,
    HIGHLIGHT_COUNT,
    PAYMENT_DELAY_SECONDS,
    TAX_RATE,
)
from cinevault.exceptions import CinevaultConfigError


def _env_float(env: Mapping[str, str], key: str) -> float | None:
    value = env.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise CinevaultConfigError(f"{key} must be a number, got {value!r}") from exc


def _env_int(env: Mapping[str, str], key: str) -> int | None:
    value = env.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise CinevaultConfigError(f"{key} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class DemoAccount:
    """Fixed credential pair that signs in as a well-known demo user."""

    email: str = DEMO_EMAIL
    password: str = DEMO_PASSWORD
    name: str = DEMO_NAME

    def matches(self, email: str, password: str) -> bool:
        return email == self.email and password == self.password


@dataclasses.dataclass(frozen=True)
class StorefrontConfig:
    """Storefront configuration.

    Parameters
    ----------
    storage_dir : Path or None
        Profile directory for persisted state. ``None`` keeps everything in
        memory for the lifetime of the process.
    auth_delay : float
        Simulated latency of login and registration, in seconds.
    payment_delay : float
        Simulated card processing time, in seconds.
    tax_rate : float
        Tax applied on top of the cart subtotal at checkout (``0.1`` = 10%).
    highlight_count : int
        Number of records in the "featured" and "new releases" views.
    demo : DemoAccount
        Credentials that sign in as the fixed demo user.
    """

    storage_dir: Path | None = None
    auth_delay: float = AUTH_DELAY_SECONDS
    payment_delay: float = PAYMENT_DELAY_SECONDS
    tax_rate: float = TAX_RATE
    highlight_count: int = HIGHLIGHT_COUNT
    demo: DemoAccount = dataclasses.field(default_factory=DemoAccount)

    def __post_init__(self) -> None:
        if self.auth_delay < 0:
            raise CinevaultConfigError("auth_delay must be >= 0")
        if self.payment_delay < 0:
            raise CinevaultConfigError("payment_delay must be >= 0")
        if self.tax_rate < 0:
            raise CinevaultConfigError("tax_rate must be >= 0")
        if self.highlight_count < 0:
            raise CinevaultConfigError("highlight_count must be >= 0")

    @classmethod
    def from_env(cls, **overrides: Any) -> StorefrontConfig:
        """Create configuration from environment variables.

        Reads optional ``CINEVAULT_*`` variables. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        StorefrontConfig
            Populated configuration.

        Raises
        ------
        CinevaultConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        demo_kwargs: dict[str, str] = {}
        _ENV_DEMO_MAP = {
            "CINEVAULT_DEMO_EMAIL": "email",
            "CINEVAULT_DEMO_PASSWORD": "password",
            "CINEVAULT_DEMO_NAME": "name",
        }
        for env_key, field_name in _ENV_DEMO_MAP.items():
            val = env.get(env_key)
            if val is not None:
                demo_kwargs[field_name] = val

        demo_overrides = overrides.pop("demo", None)
        if isinstance(demo_overrides, dict):
            demo_kwargs.update(demo_overrides)
        elif isinstance(demo_overrides, DemoAccount):
            demo_kwargs = dataclasses.asdict(demo_overrides)

        config_kwargs: dict[str, Any] = {"demo": DemoAccount(**demo_kwargs)}

        storage_dir = env.get("CINEVAULT_STORAGE_DIR")
        if storage_dir:
            config_kwargs["storage_dir"] = Path(storage_dir).expanduser()

        _ENV_FLOAT_MAP = {
            "CINEVAULT_AUTH_DELAY": "auth_delay",
            "CINEVAULT_PAYMENT_DELAY": "payment_delay",
            "CINEVAULT_TAX_RATE": "tax_rate",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            if field_name in overrides:
                continue
            parsed = _env_float(env, env_key)
            if parsed is not None:
                config_kwargs[field_name] = parsed

        if "highlight_count" not in overrides:
            count = _env_int(env, "CINEVAULT_HIGHLIGHT_COUNT")
            if count is not None:
                config_kwargs["highlight_count"] = count

        if isinstance(overrides.get("storage_dir"), str):
            overrides["storage_dir"] = Path(overrides["storage_dir"]).expanduser()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
