"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Handlers build one and
hand it to ``request.respond()``; the ASGI layer sends it.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Constructors --

    @classmethod
    def text(cls, text: str, *, status: int = 200) -> Response:
        """A plain-text response."""
        return cls(body=text, status=status)

    @classmethod
    def json(cls, obj: Any, *, status: int = 200) -> Response:
        """A JSON response (compact separators, UTF-8)."""
        body = json_module.dumps(obj, separators=(",", ":"), ensure_ascii=False)
        return cls(body=body, status=status, content_type="application/json; charset=utf-8")

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    # -- Access --

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name* (case-insensitive)."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return default

    @property
    def body_bytes(self) -> bytes:
        """The body encoded to bytes (UTF-8 for ``str`` bodies)."""
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    @property
    def text_body(self) -> str:
        """The body decoded as UTF-8."""
        if isinstance(self.body, str):
            return self.body
        return self.body.decode("utf-8")
