# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for wirehttp."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

# camelCase spellings accepted alongside the snake_case option names.
OPTION_ALIASES = {
    "connectTimeout": "connect_timeout",
    "skipSsl": "skip_ssl",
    "followRedirects": "follow_redirects",
    "maxRedirects": "max_redirects",
}


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def normalize_option_keys(options: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a copy of ``options`` with camelCase option names folded to snake_case."""
    if not options:
        return {}
    normalized: dict[str, Any] = {}
    for key, value in options.items():
        normalized[OPTION_ALIASES.get(key, key)] = value
    return normalized


@dataclass(frozen=True)
class ClientDefaults:
    """Client-level request defaults; the field defaults are the fixed baseline."""

    headers: dict[str, str] = field(default_factory=dict)
    timeout: int = 10
    connect_timeout: int = 5
    skip_ssl: bool = False
    follow_redirects: bool = True
    max_redirects: int = 5

    @classmethod
    def from_env(cls) -> ClientDefaults:
        """Create defaults from environment variables (evaluated at call time)."""
        return cls(
            timeout=_int_env("WIRE_HTTP_TIMEOUT", cls.timeout),
            connect_timeout=_int_env("WIRE_HTTP_CONNECT_TIMEOUT", cls.connect_timeout),
            skip_ssl=_bool_env("WIRE_HTTP_SKIP_SSL", cls.skip_ssl),
            follow_redirects=_bool_env("WIRE_HTTP_FOLLOW_REDIRECTS", cls.follow_redirects),
            max_redirects=_int_env("WIRE_HTTP_MAX_REDIRECTS", cls.max_redirects),
        )

    def merged(self, overrides: Mapping[str, Any] | None = None, **kwargs: Any) -> ClientDefaults:
        """
        Return a copy with every non-None override applied.

        Unknown keys are ignored. ``headers`` replaces the stored headers as a whole.
        """
        known = {f.name for f in fields(self)}
        values = normalize_option_keys({**(overrides or {}), **kwargs})
        changes = {key: value for key, value in values.items() if key in known and value is not None}
        if "headers" in changes:
            changes["headers"] = dict(changes["headers"])
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class RequestOptions:
    """Per-call options. ``None`` means "not given, use the client default"."""

    headers: Mapping[str, str] | None = None
    query: Mapping[str, Any] | None = None
    body: Any = None
    timeout: int | None = None
    connect_timeout: int | None = None
    skip_ssl: bool | None = None
    follow_redirects: bool | None = None
    max_redirects: int | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> RequestOptions:
        """Build options from a plain mapping, accepting snake_case or camelCase keys."""
        known = {f.name for f in fields(cls)}
        values = normalize_option_keys(options)
        return cls(**{key: value for key, value in values.items() if key in known})


def load_client_defaults() -> ClientDefaults:
    """Load client defaults from environment with the fixed baseline as fallback."""
    return ClientDefaults.from_env()


__all__ = [
    "ClientDefaults",
    "OPTION_ALIASES",
    "RequestOptions",
    "load_client_defaults",
    "normalize_option_keys",
]
