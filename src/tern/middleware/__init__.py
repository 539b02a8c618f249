"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request) -> None

Built-in middleware:
    BearerAuthMiddleware -- Resolve a bearer token into request.user
    RequestIdMiddleware -- Attach request.request_id
"""

from tern.middleware.builtin import BearerAuthConfig, BearerAuthMiddleware, RequestIdMiddleware
from tern.middleware.protocol import Middleware

__all__ = [
    "BearerAuthConfig",
    "BearerAuthMiddleware",
    "Middleware",
    "RequestIdMiddleware",
]
