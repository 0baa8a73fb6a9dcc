# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport abstraction and factory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .models import HttpRequest, TransportResult


@runtime_checkable
class Transport(Protocol):
    """
    Minimal protocol for performing one resolved HTTP call.

    Implementations return the raw status, headers and body, either as a
    ``TransportResult`` or as a ``{"status", "headers", "body"}`` mapping, and raise
    ``TransportError`` when the call cannot be completed.
    """

    def send(self, request: HttpRequest) -> TransportResult | Mapping[str, Any]: ...


def create_default_transport() -> Transport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxTransport

    return HttpxTransport()


__all__ = ["Transport", "create_default_transport"]
