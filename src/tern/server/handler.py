"""ASGI handler — the dispatch loop around the router.

The only component that touches raw ASGI directly. Reads the request
body, builds a Request, looks up the route, runs the middleware chain,
invokes the handler, and sends whatever the handler responded with.
"""

import logging

from tern._internal.asgi import Receive, Scope, Send
from tern._internal.invoke import invoke
from tern.config import AppConfig
from tern.errors import HTTPError, NotFound, PayloadTooLarge
from tern.http.request import Request
from tern.http.response import Response
from tern.routing.router import Router
from tern.server.errors import http_error_response, internal_error_response
from tern.server.sender import send_response

logger = logging.getLogger("tern.server")


async def read_body(receive: Receive, limit: int) -> bytes:
    """Read the full request body, raising ``PayloadTooLarge`` past *limit*."""
    chunks: list[bytes] = []
    size = 0
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        chunk = message.get("body", b"")
        size += len(chunk)
        if size > limit:
            raise PayloadTooLarge(limit)
        chunks.append(chunk)
        if not message.get("more_body", False):
            break
    return b"".join(chunks)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    config: AppConfig,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    try:
        body = await read_body(receive, config.max_content_length)
    except PayloadTooLarge as exc:
        await send_response(http_error_response(exc), send)
        return

    request = Request.from_asgi(scope, body)

    try:
        response = await dispatch(router, request)
    except HTTPError as exc:
        response = http_error_response(exc)
    except Exception as exc:
        response = internal_error_response(exc, request, debug=config.debug)

    await send_response(response, send, head=request.method == "HEAD")


async def dispatch(router: Router, request: Request) -> Response:
    """Match, run middleware, run the handler, return its response.

    Failures from middleware and handlers propagate to the caller.
    """
    route = router.find_route(request)
    if route is None:
        raise NotFound(f"No route matches {request.method} {request.path!r}")

    await router.run_middleware(request)
    await invoke(route.handler, request)

    if request.response is None:
        logger.warning(
            "Handler %s for %s %s did not respond; sending 204",
            getattr(route.handler, "__qualname__", route.handler),
            request.method,
            request.path,
        )
        return Response(status=204)
    return request.response
