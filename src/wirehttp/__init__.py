# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
wirehttp package entrypoint.

A small fluent HTTP client: a builder collects a base URL and request defaults, the
client turns each call into an immutable HttpRequest, hands it to a swappable
Transport and normalizes the raw result into an HttpResponse with JSON decoding
and timing. The default transport is backed by httpx.
"""

from .builder import HttpClientBuilder
from .client import HttpClient
from .config import ClientDefaults, RequestOptions, load_client_defaults
from .errors import ErrorCategory, TransportError
from .http import (
    Decoded,
    FakeTransport,
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    Raw,
    Transport,
    TransportResult,
    create_default_transport,
    decode_body,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "ClientDefaults",
    "Decoded",
    "ErrorCategory",
    "FakeTransport",
    "HttpClient",
    "HttpClientBuilder",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Raw",
    "RequestOptions",
    "Transport",
    "TransportError",
    "TransportResult",
    "create_default_transport",
    "decode_body",
    "load_client_defaults",
    "setup_logging",
    "__version__",
]
