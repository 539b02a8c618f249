"""Built-in middleware: request ids and bearer-token annotation.

Both only annotate the request. ``BearerAuthMiddleware`` can also
reject a request by raising ``Unauthorized`` when configured to.
"""

import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from tern._internal.invoke import invoke
from tern.errors import Unauthorized
from tern.http.request import Request

REQUEST_ID_HEADER = "x-request-id"


class RequestIdMiddleware:
    """Attach ``request.request_id``.

    Uses the client's ``X-Request-ID`` header when present, otherwise a
    fresh 8-character id::

        app.add_middleware(RequestIdMiddleware())
    """

    __slots__ = ("header",)

    def __init__(self, header: str = REQUEST_ID_HEADER) -> None:
        self.header = header

    async def __call__(self, request: Request) -> None:
        request.request_id = request.headers.get(self.header) or uuid.uuid4().hex[:8]


@dataclass(frozen=True, slots=True)
class BearerAuthConfig:
    """Bearer-token middleware configuration.

    ``verify_token`` maps a token to a user object, or ``None`` when the
    token is not valid. It may be sync or async.
    """

    verify_token: Callable[[str], Awaitable[Any] | Any]
    required: bool = False


class BearerAuthMiddleware:
    """Resolve ``Authorization: Bearer <token>`` into ``request.user``.

    ``request.user`` is ``None`` for anonymous requests unless
    ``required=True``, in which case ``Unauthorized`` is raised and the
    rest of the chain does not run.

    Usage::

        async def verify(token: str) -> User | None:
            return await tokens.lookup(token)

        app.add_middleware(BearerAuthMiddleware(BearerAuthConfig(verify_token=verify)))
    """

    __slots__ = ("config",)

    def __init__(self, config: BearerAuthConfig) -> None:
        self.config = config

    async def __call__(self, request: Request) -> None:
        user = None
        token = _bearer_token(request.headers.get("authorization"))
        if token:
            user = await invoke(self.config.verify_token, token)
        if user is None and self.config.required:
            raise Unauthorized()
        request.user = user


def _bearer_token(value: str | None) -> str | None:
    """Extract the token from an Authorization header value."""
    if not value:
        return None
    scheme, _, token = value.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None
