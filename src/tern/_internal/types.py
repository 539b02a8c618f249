"""Shared type aliases used across tern modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from tern.http.request import Request

# Route handler: receives the request, responds through request.respond()
Handler: TypeAlias = Callable[["Request"], Awaitable[None] | None]

# Middleware: same shape as a handler, run for side effects
MiddlewareFunc: TypeAlias = Callable[["Request"], Awaitable[None] | None]
