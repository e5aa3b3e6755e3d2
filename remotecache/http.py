"""Parsing of HTTP cache request paths."""

from __future__ import annotations

import enum
import re

# SHA-256 of the empty blob, which is always available.
EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

_BLOB_NAME_SHA256 = re.compile(r"/?(.*/)?(ac/|cas/)([a-f0-9]{64})")

_HTML_ESCAPES = {
    "&": "&amp;",
    "'": "&#39;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
}


class EntryKind(enum.Enum):
    """The kind of a cache entry."""

    AC = "ac"
    CAS = "cas"
    RAW = "raw"

    def __str__(self) -> str:
        return self.value


class RequestURLError(ValueError):
    """Raised when a request path does not name a cache entry."""


def _escape_html(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(char, char) for char in text)


def parse_request_url(url: str, validate_ac: bool) -> tuple[EntryKind, str, str]:
    """Split a request path into ``(kind, hash, instance)``.

    Paths look like ``[instance/](ac/|cas/)<sha256>``. Action cache
    entries are ``EntryKind.AC`` when ``validate_ac`` is true and
    ``EntryKind.RAW`` otherwise. Raises ``RequestURLError`` for any
    other path.
    """
    match = _BLOB_NAME_SHA256.fullmatch(url)
    if match is None:
        raise RequestURLError(
            "resource name must be a SHA256 hash in hex, "
            f"got '{_escape_html(url)}'"
        )

    prefix, section, hash = match.groups()
    instance = (prefix or "").removesuffix("/")

    if section == "cas/":
        return EntryKind.CAS, hash, instance
    if validate_ac:
        return EntryKind.AC, hash, instance
    return EntryKind.RAW, hash, instance


def entry_path(kind: EntryKind, hash: str) -> str:
    """Return the canonical ``/<kind>/<hash>`` path of a cache entry."""
    return f"/{kind}/{hash}"