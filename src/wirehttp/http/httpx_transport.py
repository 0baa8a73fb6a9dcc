# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed Transport implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from ..errors import TransportError
from .headers import encode_request_headers, parse_raw_headers
from .models import HttpRequest, TransportResult
from .transport import Transport
from .url import append_query

logger = logging.getLogger(__name__)


def _limit(seconds: int) -> float | None:
    # 0 leaves the limit to the backend, which for httpx means none.
    return float(seconds) if seconds and seconds > 0 else None


def build_timeout(request: HttpRequest) -> httpx.Timeout:
    """Translate the request's whole-call and connect limits into an httpx.Timeout."""
    return httpx.Timeout(_limit(request.timeout), connect=_limit(request.connect_timeout))


def _body_kwargs(body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, Mapping):
        return {"data": dict(body)}
    if isinstance(body, (str, bytes, bytearray)):
        return {"content": body}
    raise TypeError(f"Unsupported request body type: {type(body).__name__}; pass str, bytes or a mapping")


def _response_body(resp: httpx.Response) -> str | bytes:
    # Bodies that do not decode under the declared charset are returned as raw bytes.
    try:
        return resp.content.decode(resp.encoding or "utf-8")
    except (UnicodeDecodeError, LookupError):
        return resp.content


class HttpxTransport(Transport):
    """
    Synchronous httpx transport.

    A fresh ``httpx.Client`` is opened for every call so per-request SSL and redirect
    policy apply and no connection state is shared between callers.
    """

    def __init__(self, client_factory: Callable[..., httpx.Client] | None = None):
        self._client_factory = client_factory or httpx.Client

    def send(self, request: HttpRequest) -> TransportResult:
        url = append_query(request.url, request.query)
        body_kwargs = _body_kwargs(request.body)

        try:
            headers = encode_request_headers(request.headers)
            with self._client_factory(
                verify=not request.skip_ssl,
                follow_redirects=request.follow_redirects,
                max_redirects=request.max_redirects,
                timeout=build_timeout(request),
            ) as client:
                resp = client.request(request.method, url, headers=headers, **body_kwargs)
                body = _response_body(resp)
        except (httpx.HTTPError, httpx.InvalidURL, OSError, UnicodeEncodeError) as exc:
            logger.debug("%s %s failed: %s", request.method, url, exc)
            raise TransportError.from_exception(exc) from exc

        return TransportResult(
            status=resp.status_code,
            headers=parse_raw_headers(resp.headers.raw),
            body=body,
        )


__all__ = ["HttpxTransport", "build_timeout"]
