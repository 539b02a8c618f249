"""Middleware protocol.

A middleware is any callable matching::

    async def my_mw(request: Request) -> None: ...

No base class required, and plain ``def`` functions work too. A
middleware runs for its side effects on the request; it cannot end
dispatch early except by raising.
"""

from typing import Protocol

from tern.http.request import Request


class Middleware(Protocol):
    """Protocol for tern middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def load_user(request: Request) -> None:
            request.user = await users.get(request.headers.get("x-user-id"))

        # Class middleware
        class Stamp:
            def __call__(self, request: Request) -> None:
                request.stamped = True
    """

    async def __call__(self, request: Request) -> None: ...
