"""Tern — request routing and middleware chaining for small HTTP servers.

Exact (method, path) routes, first registration wins, middleware run
strictly in order before the handler.

Basic usage::

    from tern import App, Response

    app = App()

    async def index(request):
        request.respond(Response.text("Hello, World!"))

    app.get("/", index)

Standalone router::

    from tern import Router

    router = Router()
    router.post("/items", create_item)
    route = router.find_route(request)  # None when nothing matches
"""

__version__ = "0.1.0-dev"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "Middleware",
    "NotFound",
    "Request",
    "RequestMethod",
    "RequestTimer",
    "Response",
    "Route",
    "Router",
    "RouterConfig",
    "TernError",
    "Unauthorized",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import tern`` fast while providing a clean top-level API.
    """
    if name == "App":
        from tern.app import App

        return App

    if name in ("AppConfig", "RouterConfig"):
        from tern import config as _config

        return getattr(_config, name)

    if name in ("Router", "Route", "RequestMethod"):
        from tern.routing import method as _method
        from tern.routing import route as _route
        from tern.routing import router as _router

        for module in (_router, _route, _method):
            if hasattr(module, name):
                return getattr(module, name)

    if name == "Request":
        from tern.http.request import Request

        return Request

    if name == "Response":
        from tern.http.response import Response

        return Response

    if name == "RequestTimer":
        from tern.http.timing import RequestTimer

        return RequestTimer

    if name == "Middleware":
        from tern.middleware.protocol import Middleware

        return Middleware

    if name in ("TernError", "ConfigurationError", "HTTPError", "NotFound", "Unauthorized"):
        from tern import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
