# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across wirehttp."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .headers import header_value

Headers = dict[str, str]


@dataclass(frozen=True)
class HttpRequest:
    """Fully resolved description of one outgoing call, consumed by Transport implementations."""

    method: str
    url: str
    headers: Headers = field(default_factory=dict)
    query: dict[str, Any] = field(default_factory=dict)
    body: Any = None
    timeout: int = 10
    connect_timeout: int = 5
    skip_ssl: bool = False
    follow_redirects: bool = True
    max_redirects: int = 5


@dataclass(frozen=True)
class TransportResult:
    """Raw outcome of a transport call: status, parsed headers and the undecoded body."""

    status: int = 0
    headers: Headers = field(default_factory=dict)
    body: str | bytes | None = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TransportResult:
        """Helper to normalize ``{"status", "headers", "body"}`` mappings returned by transports."""
        raw_status = data.get("status")
        raw_headers = data.get("headers") or {}
        return cls(
            status=int(raw_status) if raw_status is not None else 0,
            headers={str(key): "" if value is None else str(value) for key, value in dict(raw_headers).items()},
            body=data.get("body", ""),
        )


@dataclass(frozen=True)
class Decoded:
    """A body that parsed as JSON."""

    value: Any


@dataclass(frozen=True)
class Raw:
    """A body that did not parse as JSON, kept exactly as received."""

    text: str | bytes


Payload = Union[Decoded, Raw]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def decode_body(body: str | bytes | None) -> Payload:
    """
    Attempt to decode ``body`` as JSON.

    There is no content-type check: a successful parse yields ``Decoded`` and any
    failure, including an empty body, yields ``Raw`` with the original body.
    """
    raw = "" if body is None else body
    try:
        return Decoded(json.loads(raw, parse_constant=_reject_constant))
    except (ValueError, TypeError, RecursionError):
        return Raw(raw)


@dataclass(frozen=True)
class HttpResponse:
    """Normalized outcome of one completed call."""

    status_code: int
    headers: Headers = field(default_factory=dict)
    payload: Payload = field(default_factory=lambda: Raw(""))
    duration_ms: float = 0.0

    @property
    def body(self) -> Any:
        """The decoded JSON value, or the raw body when it was not JSON."""
        if isinstance(self.payload, Decoded):
            return self.payload.value
        return self.payload.text

    @property
    def is_json(self) -> bool:
        return isinstance(self.payload, Decoded)

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        return header_value(self.headers, name, default)


__all__ = [
    "Decoded",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "Payload",
    "Raw",
    "TransportResult",
    "decode_body",
]
