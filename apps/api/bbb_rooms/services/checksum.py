"""Checksum signing for remote conferencing API calls.

The remote server recomputes the checksum from the query string it receives,
so the string that gets signed must be byte-for-byte the one that is sent.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Mapping
from urllib.parse import quote, urlencode


@dataclass(frozen=True, slots=True)
class SignedRequest:
    operation: str
    query: str
    checksum: str

    def url(self, base_url: str) -> str:
        """Render the final request URL with the checksum appended last."""

        return f"{base_url}/api/{self.operation}?{self.query}&checksum={self.checksum}"


def sign(operation: str, canonical_query: str, secret: str) -> str:
    """Return the SHA-256 hex digest of ``operation + canonical_query + secret``."""

    return hashlib.sha256(f"{operation}{canonical_query}{secret}".encode("utf-8")).hexdigest()


def canonical_query(params: Mapping[str, str]) -> str:
    """Serialize ``params`` in insertion order with percent-encoded values."""

    return urlencode(list(params.items()), quote_via=quote)


def signed_request(operation: str, params: Mapping[str, str], secret: str) -> SignedRequest:
    query = canonical_query(params)
    return SignedRequest(operation=operation, query=query, checksum=sign(operation, query, secret))
