"""The request wrapper handed to middleware and handlers.

Unlike the response, a request is deliberately mutable: middleware
annotate it (``request.user = ...``) for the middleware and handler
that run after them. The body is read in full before dispatch.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, field
from typing import Any

from tern._internal.asgi import HTTPScope, Scope
from tern.http.headers import Headers
from tern.http.response import Response
from tern.http.timing import RequestTimer


@dataclass(eq=False)
class Request:
    """An HTTP request plus its per-request timer and response slot.

    Build one by hand in tests::

        request = Request("GET", "/users")

    or from an ASGI scope with :meth:`from_asgi`.
    """

    method: str
    path: str
    headers: Headers = field(default_factory=Headers)
    query_string: str = ""
    body: bytes = b""
    client: tuple[str, int] | None = None
    timer: RequestTimer = field(default_factory=RequestTimer)

    # Set by respond(); read by the ASGI layer after the handler returns
    response: Response | None = field(default=None, repr=False)

    @property
    def url(self) -> str:
        """Path plus query string, as the client sent it."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """The body parsed as JSON."""
        return json_module.loads(self.body)

    def respond(self, response: Response) -> None:
        """Set the response to send. A later call replaces an earlier one."""
        self.response = response

    @classmethod
    def from_asgi(cls, scope: Scope, body: bytes = b"") -> Request:
        """Create a Request from an ASGI ``http`` scope and its full body."""
        http = HTTPScope.from_scope(scope)
        return cls(
            method=http.method,
            path=http.path,
            headers=Headers.from_raw(http.headers),
            query_string=http.query_string.decode("latin-1"),
            body=body,
            client=http.client,
            timer=RequestTimer(prefix=f"{http.method} {http.path}"),
        )
