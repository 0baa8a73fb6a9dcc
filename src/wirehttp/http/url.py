# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared by the client and transports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode


def strip_trailing_slashes(url: str) -> str:
    """Return ``url`` without trailing slashes (``http://host/api//`` -> ``http://host/api``)."""
    return str(url or "").rstrip("/")


def join_url(base_url: str, endpoint: str) -> str:
    """
    Join a base URL and an endpoint with exactly one slash.

    An empty base URL means the endpoint is already absolute and is returned unchanged.
    """
    if not base_url:
        return endpoint
    return f"{base_url}/{str(endpoint).lstrip('/')}"


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
        return
    pairs.append((prefix, _scalar(value)))


def build_query(query: Mapping[str, Any] | None) -> str:
    """
    Encode a query mapping into a query string.

    Nested mappings and sequences use bracket notation (``filter[status]=open``,
    ``ids[0]=1``), booleans become ``1``/``0`` and ``None`` values are dropped.
    """
    if not query:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        _flatten(str(key), value, pairs)
    return urlencode(pairs)


def append_query(url: str, query: Mapping[str, Any] | None) -> str:
    """Append an encoded query to ``url`` using ``&`` when it already has a query string."""
    query_string = build_query(query)
    if not query_string:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query_string}"


__all__ = ["append_query", "build_query", "join_url", "strip_trailing_slashes"]
