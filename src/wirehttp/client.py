# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fluent HTTP client: builds requests, dispatches them and normalizes responses."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from .config import ClientDefaults, RequestOptions, load_client_defaults
from .http.models import HttpRequest, HttpResponse, TransportResult, decode_body
from .http.transport import Transport, create_default_transport
from .http.url import join_url, strip_trailing_slashes

logger = logging.getLogger(__name__)

Options = RequestOptions | Mapping[str, Any] | None


def _resolve(value: Any, default: Any) -> Any:
    return default if value is None else value


class HttpClient:
    """
    Long-lived client bound to a base URL, a transport and request defaults.

    The client keeps no per-call state, so one instance can be shared between threads
    as long as its transport can. Status codes are never interpreted: 4xx and 5xx come
    back as ordinary responses.
    """

    def __init__(
        self,
        base_url: str = "",
        transport: Transport | None = None,
        defaults: ClientDefaults | Mapping[str, Any] | None = None,
    ):
        self._base_url = strip_trailing_slashes(base_url)
        self._transport = transport or create_default_transport()
        if isinstance(defaults, ClientDefaults):
            self._defaults = defaults
        else:
            self._defaults = load_client_defaults().merged(defaults)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def defaults(self) -> ClientDefaults:
        return self._defaults

    def with_base_url(self, base_url: str) -> HttpClient:
        """Return a new client with a different base URL, sharing transport and defaults."""
        return HttpClient(base_url, transport=self._transport, defaults=self._defaults)

    def build_request(self, method: str, endpoint: str, options: Options = None) -> HttpRequest:
        """Resolve per-call options against the client defaults into an HttpRequest."""
        opts = options if isinstance(options, RequestOptions) else RequestOptions.from_mapping(options)
        defaults = self._defaults

        return HttpRequest(
            method=str(method).upper(),
            url=join_url(self._base_url, endpoint),
            headers={**defaults.headers, **(opts.headers or {})},
            query=dict(opts.query or {}),
            body=opts.body,
            timeout=int(_resolve(opts.timeout, defaults.timeout)),
            connect_timeout=int(_resolve(opts.connect_timeout, defaults.connect_timeout)),
            skip_ssl=bool(_resolve(opts.skip_ssl, defaults.skip_ssl)),
            follow_redirects=bool(_resolve(opts.follow_redirects, defaults.follow_redirects)),
            max_redirects=int(_resolve(opts.max_redirects, defaults.max_redirects)),
        )

    def send(self, request: HttpRequest) -> HttpResponse:
        """Dispatch a request through the transport and normalize the result."""
        start = time.perf_counter()
        result = self._transport.send(request)
        duration_ms = (time.perf_counter() - start) * 1000

        if not isinstance(result, TransportResult):
            result = TransportResult.from_mapping(result or {})

        logger.debug("%s %s -> %s (%.1f ms)", request.method, request.url, result.status, duration_ms)
        return HttpResponse(
            status_code=result.status,
            headers=dict(result.headers),
            payload=decode_body("" if result.body is None else result.body),
            duration_ms=max(duration_ms, 0.0),
        )

    def request(self, method: str, endpoint: str, options: Options = None) -> HttpResponse:
        return self.send(self.build_request(method, endpoint, options))

    def get(self, endpoint: str, options: Options = None) -> HttpResponse:
        return self.request("GET", endpoint, options)

    def post(self, endpoint: str, options: Options = None) -> HttpResponse:
        return self.request("POST", endpoint, options)

    def put(self, endpoint: str, options: Options = None) -> HttpResponse:
        return self.request("PUT", endpoint, options)

    def patch(self, endpoint: str, options: Options = None) -> HttpResponse:
        return self.request("PATCH", endpoint, options)

    def delete(self, endpoint: str, options: Options = None) -> HttpResponse:
        return self.request("DELETE", endpoint, options)


__all__ = ["HttpClient", "Options"]
