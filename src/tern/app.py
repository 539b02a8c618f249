"""Tern application class.

A Router that is also an ASGI 3 application. Register routes and
middleware during setup; serve with any ASGI server afterwards.
"""

import logging
from collections.abc import Iterable

from tern._internal.asgi import Receive, Scope, Send
from tern._internal.types import MiddlewareFunc
from tern.config import AppConfig
from tern.routing.route import Route
from tern.routing.router import Router
from tern.server.handler import handle_request

logger = logging.getLogger("tern.server")


class App(Router):
    """The tern application.

    Usage::

        app = App(AppConfig(enable_timing=True))

        async def hello(request):
            request.respond(Response.text("Hello, World!"))

        app.get("/", hello)

        # uvicorn module:app, hypercorn module:app, ...

    Dispatch per request: find the route (404 when there is none), run
    the middleware chain, run the handler, send ``request.response``.
    """

    __slots__ = ()

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        routes: Iterable[Route] = (),
        middleware: Iterable[MiddlewareFunc] = (),
    ) -> None:
        super().__init__(config or AppConfig(), routes=routes, middleware=middleware)

    @property
    def config(self) -> AppConfig:
        return self._config  # type: ignore[return-value]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        if scope["type"] == "http":
            await handle_request(scope, receive, send, router=self, config=self.config)
        elif scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.info(
                    "Starting with %d route(s), %d middleware",
                    len(self._routes),
                    len(self._middleware),
                )
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
