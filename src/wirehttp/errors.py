# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    REDIRECT_ERROR = "REDIRECT_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class TransportError(RuntimeError):
    """
    Raised when a transport cannot complete a call at all.

    HTTP error statuses are not transport errors; they come back as normal responses.
    """

    def __init__(self, message: str = "", code: int = 0, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category

    @classmethod
    def from_exception(cls, exc: BaseException, prefix: str = "Transport error") -> TransportError:
        """Wrap a backend exception, keeping its message and category."""
        message = str(exc) or type(exc).__name__
        error = cls(f"{prefix}: {message}", category=categorize_exception(exc))
        error.__cause__ = exc
        return error


def _cause_chain(exc: BaseException):
    cause = exc.__cause__ or exc.__context__
    while cause is not None:
        yield cause
        cause = cause.__cause__ or cause.__context__


def _looks_like_dns_failure(exc: BaseException) -> bool:
    return any(isinstance(cause, (socket.gaierror, socket.herror)) for cause in _cause_chain(exc))


def _looks_like_ssl_failure(exc: BaseException) -> bool:
    if any(isinstance(cause, ssl_module.SSLError) for cause in _cause_chain(exc)):
        return True
    text = str(exc).lower()
    return "certificate" in text or "ssl" in text or "tls" in text


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, TransportError):
        return exc.category

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, httpx.TooManyRedirects):
        return ErrorCategory.REDIRECT_ERROR

    if isinstance(exc, httpx.ConnectError):
        if _looks_like_dns_failure(exc):
            return ErrorCategory.DNS_ERROR
        if _looks_like_ssl_failure(exc):
            return ErrorCategory.SSL_ERROR
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, TimeoutError):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = ["ErrorCategory", "TransportError", "categorize_exception"]
