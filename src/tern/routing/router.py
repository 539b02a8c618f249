"""Append-only router with ordered middleware.

Routes and middleware are registered during setup and treated as
read-only once requests start arriving. No locking is done; the
tables are only ever appended to.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

from tern._internal.invoke import invoke
from tern._internal.types import Handler, MiddlewareFunc
from tern.config import RouterConfig
from tern.routing.method import RequestMethod
from tern.routing.route import Route

logger = logging.getLogger("tern.routing")


class Timer(Protocol):
    """The timing collaborator a request carries when timing is enabled."""

    def time(self, label: str) -> None: ...

    def time_end(self, label: str) -> float | None: ...


class Routable(Protocol):
    """Anything with a method and a path can be looked up."""

    method: str
    path: str


class TimedRequest(Routable, Protocol):
    timer: Timer


class Router:
    """Route table plus middleware chain.

    Usage::

        router = Router()
        router.add_middleware(load_user)
        router.get("/users", list_users)

        route = router.find_route(request)
        if route is None:
            ...  # 404
        await router.run_middleware(request)
        await invoke(route.handler, request)

    Registration order is priority order: when two routes share a method
    and path, the first one registered is the one ``find_route`` returns.
    """

    __slots__ = ("_config", "_middleware", "_routes")

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        routes: Iterable[Route] = (),
        middleware: Iterable[MiddlewareFunc] = (),
    ) -> None:
        self._config: RouterConfig = config or RouterConfig()
        self._routes: list[Route] = list(routes)
        self._middleware: list[MiddlewareFunc] = list(middleware)

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes, in registration order."""
        return tuple(self._routes)

    @property
    def middleware(self) -> tuple[MiddlewareFunc, ...]:
        """Registered middleware, in registration order."""
        return tuple(self._middleware)

    # -- Registration --

    def add_route(self, method: RequestMethod, path: str, handler: Handler) -> Route:
        """Append a route for *method* and *path*.

        The path is stored as given. Duplicates are accepted; only the
        first registered one is ever matched.
        """
        route = Route(method=RequestMethod(method), path=path, handler=handler)
        self._routes.append(route)
        logger.debug("Registered route %s %s", route.method, route.path)
        return route

    def add_middleware(self, middleware: MiddlewareFunc) -> None:
        """Append a middleware. It runs after every earlier one."""
        self._middleware.append(middleware)

    def post(self, path: str, handler: Handler) -> Route:
        """Add a ``POST`` route."""
        return self.add_route(RequestMethod.POST, path, handler)

    def get(self, path: str, handler: Handler) -> Route:
        """Add a ``GET`` route."""
        return self.add_route(RequestMethod.GET, path, handler)

    def put(self, path: str, handler: Handler) -> Route:
        """Add a ``PUT`` route."""
        return self.add_route(RequestMethod.PUT, path, handler)

    def delete(self, path: str, handler: Handler) -> Route:
        """Add a ``DELETE`` route."""
        return self.add_route(RequestMethod.DELETE, path, handler)

    def options(self, path: str, handler: Handler) -> Route:
        """Add an ``OPTIONS`` route."""
        return self.add_route(RequestMethod.OPTIONS, path, handler)

    def head(self, path: str, handler: Handler) -> Route:
        """Add a ``HEAD`` route."""
        return self.add_route(RequestMethod.HEAD, path, handler)

    def patch(self, path: str, handler: Handler) -> Route:
        """Add a ``PATCH`` route."""
        return self.add_route(RequestMethod.PATCH, path, handler)

    # -- Dispatch --

    def find_route(self, request: Routable) -> Route | None:
        """Return the first route matching the request's method and path.

        Returns ``None`` when nothing matches. A path registered only for
        another method is still a miss.
        """
        for route in self._routes:
            if route.matches(request.method, request.path):
                return route
        logger.debug("No route for %s %s", request.method, request.path)
        return None

    async def run_middleware(self, request: TimedRequest) -> None:
        """Run every middleware on *request*, one at a time, in order.

        Each middleware is awaited before the next one starts, so later
        middleware can rely on what earlier ones attached to the request.
        An exception stops the chain and propagates to the caller.
        """
        timing = self._config.enable_timing
        if timing:
            request.timer.time(self._config.timing_label)
        for middleware in self._middleware:
            await invoke(middleware, request)
        if timing:
            request.timer.time_end(self._config.timing_label)
