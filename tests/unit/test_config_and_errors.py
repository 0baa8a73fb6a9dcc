# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx
import pytest

from wirehttp import config
from wirehttp.config import ClientDefaults, RequestOptions, normalize_option_keys
from wirehttp.errors import ErrorCategory, TransportError, categorize_exception


def test_client_defaults_baseline():
    defaults = ClientDefaults()
    assert defaults.headers == {}
    assert defaults.timeout == 10
    assert defaults.connect_timeout == 5
    assert defaults.skip_ssl is False
    assert defaults.follow_redirects is True
    assert defaults.max_redirects == 5


def test_client_defaults_env_overrides(monkeypatch):
    monkeypatch.setenv("WIRE_HTTP_TIMEOUT", "30")
    monkeypatch.setenv("WIRE_HTTP_CONNECT_TIMEOUT", "2")
    monkeypatch.setenv("WIRE_HTTP_SKIP_SSL", "yes")
    monkeypatch.setenv("WIRE_HTTP_FOLLOW_REDIRECTS", "off")
    monkeypatch.setenv("WIRE_HTTP_MAX_REDIRECTS", "9")

    defaults = config.load_client_defaults()

    assert defaults.timeout == 30
    assert defaults.connect_timeout == 2
    assert defaults.skip_ssl is True
    assert defaults.follow_redirects is False
    assert defaults.max_redirects == 9


def test_client_defaults_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("WIRE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("WIRE_HTTP_CONNECT_TIMEOUT", "")
    monkeypatch.setenv("WIRE_HTTP_MAX_REDIRECTS", "1.5")

    defaults = config.load_client_defaults()

    assert defaults.timeout == ClientDefaults.timeout
    assert defaults.connect_timeout == ClientDefaults.connect_timeout
    assert defaults.max_redirects == ClientDefaults.max_redirects


def test_load_client_defaults_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("WIRE_HTTP_TIMEOUT", "7")
    assert config.load_client_defaults().timeout == 7
    monkeypatch.setenv("WIRE_HTTP_TIMEOUT", "8")
    assert config.load_client_defaults().timeout == 8


def test_client_defaults_merged_ignores_none_and_unknown_keys():
    base = ClientDefaults()
    merged = base.merged({"timeout": 20, "skipSsl": True, "connect_timeout": None, "bogus": 1})
    assert merged.timeout == 20
    assert merged.skip_ssl is True
    assert merged.connect_timeout == 5
    assert base.timeout == 10


def test_client_defaults_merged_copies_headers():
    headers = {"Accept": "application/json"}
    merged = ClientDefaults().merged(headers=headers)
    headers["Accept"] = "text/plain"
    assert merged.headers == {"Accept": "application/json"}


def test_client_defaults_merged_without_changes_returns_same_instance():
    base = ClientDefaults()
    assert base.merged() is base
    assert base.merged({"timeout": None}) is base


def test_normalize_option_keys_folds_camel_case():
    assert normalize_option_keys({"connectTimeout": 1, "maxRedirects": 2, "timeout": 3}) == {
        "connect_timeout": 1,
        "max_redirects": 2,
        "timeout": 3,
    }
    assert normalize_option_keys(None) == {}


def test_request_options_from_mapping_accepts_both_spellings():
    snake = RequestOptions.from_mapping({"connect_timeout": 3, "skip_ssl": True, "unknown": "x"})
    camel = RequestOptions.from_mapping({"connectTimeout": 3, "skipSsl": True})
    assert snake == camel
    assert snake.connect_timeout == 3
    assert snake.skip_ssl is True
    assert snake.timeout is None


def test_transport_error_defaults():
    error = TransportError()
    assert isinstance(error, RuntimeError)
    assert str(error) == ""
    assert error.code == 0
    assert error.category is ErrorCategory.UNKNOWN_ERROR


def test_transport_error_message_and_code():
    error = TransportError("Timeout exceeded", 408, ErrorCategory.TIMEOUT)
    assert str(error) == "Timeout exceeded"
    assert error.message == "Timeout exceeded"
    assert error.code == 408
    assert error.category is ErrorCategory.TIMEOUT


def test_transport_error_from_exception_chains_cause():
    original = httpx.ConnectTimeout("timed out")
    error = TransportError.from_exception(original)
    assert str(error) == "Transport error: timed out"
    assert error.category is ErrorCategory.TIMEOUT
    assert error.__cause__ is original


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (httpx.ReadTimeout("slow"), ErrorCategory.TIMEOUT),
        (httpx.TooManyRedirects("loop"), ErrorCategory.REDIRECT_ERROR),
        (httpx.ConnectError("Connection refused"), ErrorCategory.CONNECTION_ERROR),
        (httpx.ConnectError("[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed"), ErrorCategory.SSL_ERROR),
        (httpx.RemoteProtocolError("bad"), ErrorCategory.CONNECTION_ERROR),
        (ssl.SSLError("bad handshake"), ErrorCategory.SSL_ERROR),
        (socket.gaierror("no host"), ErrorCategory.DNS_ERROR),
        (ConnectionRefusedError("refused"), ErrorCategory.CONNECTION_ERROR),
        (TimeoutError("late"), ErrorCategory.TIMEOUT),
        (ValueError("other"), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_exception(exc, expected):
    assert categorize_exception(exc) is expected


def test_categorize_connect_error_caused_by_dns_failure():
    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("[Errno -2] Name or service not known") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR


def test_setup_logging_uses_requested_level(monkeypatch):
    import logging

    from wirehttp.log import setup_logging

    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    setup_logging("debug")
    assert captured["level"] == logging.DEBUG

    setup_logging("not-a-level")
    assert captured["level"] == logging.WARNING
