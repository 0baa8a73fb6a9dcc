# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transport layer exports."""

from .fake import FakeTransport
from .headers import (
    encode_request_headers,
    header_value,
    parse_header_block,
    parse_header_lines,
    parse_raw_headers,
)
from .httpx_transport import HttpxTransport
from .models import (
    Decoded,
    Headers,
    HttpRequest,
    HttpResponse,
    Payload,
    Raw,
    TransportResult,
    decode_body,
)
from .transport import Transport, create_default_transport
from .url import append_query, build_query, join_url, strip_trailing_slashes

__all__ = [
    "encode_request_headers",
    "Decoded",
    "FakeTransport",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Payload",
    "Raw",
    "Transport",
    "TransportResult",
    "append_query",
    "build_query",
    "create_default_transport",
    "decode_body",
    "header_value",
    "join_url",
    "parse_header_block",
    "parse_header_lines",
    "parse_raw_headers",
    "strip_trailing_slashes",
]
