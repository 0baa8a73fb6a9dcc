# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Recording, programmable Transport for tests."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .headers import parse_header_block
from .models import HttpRequest, TransportResult
from .transport import Transport


def _encode_body(body: Any) -> Any:
    if isinstance(body, (Mapping, list)):
        return json.dumps(body, separators=(",", ":"))
    return body


def _coerce_headers(headers: Mapping[str, str] | str | bytes | None) -> dict[str, str]:
    if headers is None:
        return {}
    if isinstance(headers, (str, bytes)):
        return parse_header_block(headers)
    return dict(headers)


class FakeTransport(Transport):
    """
    Deterministic, programmable Transport for tests.

    Every request is recorded in ``requests``. Programmed results are returned first in,
    first out; once only one remains it is returned for every further call.
    """

    def __init__(
        self,
        status: int = 200,
        headers: Mapping[str, str] | str | None = None,
        body: Any = None,
    ):
        self.requests: list[HttpRequest] = []
        self._results: list[TransportResult | BaseException] = []
        self._index = 0
        self.queue_response(status, headers, body)

    def queue_response(
        self,
        status: int = 200,
        headers: Mapping[str, str] | str | None = None,
        body: Any = None,
    ) -> FakeTransport:
        """Queue a result. Mapping and list bodies are JSON-encoded."""
        self._results.append(TransportResult(status=status, headers=_coerce_headers(headers), body=_encode_body(body)))
        return self

    def will_throw(self, exc: BaseException) -> FakeTransport:
        """Make every following call raise ``exc``, discarding programmed results."""
        self._results = [exc]
        self._index = 0
        return self

    def last_request(self) -> HttpRequest | None:
        return self.requests[-1] if self.requests else None

    def request_count(self) -> int:
        return len(self.requests)

    def clear_requests(self) -> None:
        self.requests = []

    def send(self, request: HttpRequest) -> TransportResult:
        self.requests.append(request)

        result = self._results[min(self._index, len(self._results) - 1)]
        if self._index < len(self._results) - 1:
            self._index += 1

        if isinstance(result, BaseException):
            raise result
        return result


__all__ = ["FakeTransport"]
