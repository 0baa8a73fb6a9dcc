# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fluent builder for HttpClient instances."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .client import HttpClient
from .config import ClientDefaults, load_client_defaults, normalize_option_keys
from .http.transport import Transport, create_default_transport
from .http.url import strip_trailing_slashes


class HttpClientBuilder:
    """
    Accumulates a base URL, a transport and client defaults, then builds an HttpClient.

    Builders are meant for sequential fluent use and are not thread-safe.
    """

    def __init__(self, base_url: str = ""):
        self._base_url = strip_trailing_slashes(base_url)
        self._transport: Transport | None = None
        self._overrides: dict[str, Any] = {}

    @classmethod
    def create(cls, base_url: str = "") -> HttpClientBuilder:
        return cls(base_url)

    def with_transport(self, transport: Transport) -> HttpClientBuilder:
        self._transport = transport
        return self

    def with_defaults(self, defaults: Mapping[str, Any] | None = None, **kwargs: Any) -> HttpClientBuilder:
        """
        Merge typed defaults field by field.

        Non-None values replace earlier ones. ``headers`` are merged key by key into
        any headers set before.
        """
        for key, value in normalize_option_keys({**(defaults or {}), **kwargs}).items():
            if value is None:
                continue
            if key == "headers":
                self._overrides["headers"] = {**self._overrides.get("headers", {}), **dict(value)}
            else:
                self._overrides[key] = value
        return self

    def base_headers(self, headers: Mapping[str, str]) -> HttpClientBuilder:
        """Replace the default headers."""
        self._overrides["headers"] = dict(headers)
        return self

    def timeout(self, seconds: int) -> HttpClientBuilder:
        self._overrides["timeout"] = seconds
        return self

    def connect_timeout(self, seconds: int) -> HttpClientBuilder:
        self._overrides["connect_timeout"] = seconds
        return self

    def skip_ssl(self, enabled: bool = True) -> HttpClientBuilder:
        self._overrides["skip_ssl"] = enabled
        return self

    def follow_redirects(self, enabled: bool = True) -> HttpClientBuilder:
        self._overrides["follow_redirects"] = enabled
        return self

    def max_redirects(self, count: int) -> HttpClientBuilder:
        self._overrides["max_redirects"] = count
        return self

    def build_defaults(self) -> ClientDefaults:
        """Return the accumulated defaults merged over the baseline."""
        return load_client_defaults().merged(self._overrides)

    def build(self) -> HttpClient:
        return HttpClient(
            base_url=self._base_url,
            transport=self._transport or create_default_transport(),
            defaults=self.build_defaults(),
        )


__all__ = ["HttpClientBuilder"]
