# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header serialization and parsing utilities.

Headers are stored as plain dicts keyed by the name exactly as given or received.
Lookups that should ignore case go through ``header_value``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def _text(value: object) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return "" if value is None else str(value)


def encode_request_headers(headers: Mapping[str, object] | None) -> dict[str, bytes]:
    """Trim header names and values and encode the values as UTF-8 bytes for the wire."""
    if not headers:
        return {}
    return {str(name).strip(): _text(value).strip().encode("utf-8") for name, value in headers.items()}


def parse_header_lines(lines: Iterable[str]) -> dict[str, str]:
    """
    Parse ``Name: Value`` lines into a mapping.

    Each line is split on its first colon and both sides are trimmed. Lines without a
    colon (the status line, blank separators, malformed input) are skipped. When a name
    repeats, the last value wins.
    """
    headers: dict[str, str] = {}
    for line in lines:
        if ":" not in line:
            continue
        name, value = line.split(":", 1)
        headers[name.strip()] = value.strip()
    return headers


def parse_header_block(raw: str | bytes) -> dict[str, str]:
    """Parse a raw CRLF-separated header block such as ``HTTP/1.1 200 OK\\r\\nA: b\\r\\n\\r\\n``."""
    return parse_header_lines(_text(raw).split("\r\n"))


def parse_raw_headers(raw: Iterable[tuple[object, object]]) -> dict[str, str]:
    """Parse ``(name, value)`` pairs as received on the wire, keeping the wire casing."""
    return parse_header_lines(f"{_text(name)}: {_text(value)}" for name, value in raw)


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths the exact and common casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in headers:
            value = headers.get(key)
            return default if value is None else str(value).strip()

    for key, value in headers.items():
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


__all__ = [
    "encode_request_headers",
    "header_value",
    "parse_header_block",
    "parse_header_lines",
    "parse_raw_headers",
]
