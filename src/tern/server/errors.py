"""Error mapping for tern requests.

Turns failures that escaped the router (HTTPError or anything else)
into Response objects. The router never catches; this is where the
catching happens.
"""

import logging

from tern.errors import HTTPError
from tern.http.request import Request
from tern.http.response import Response

logger = logging.getLogger("tern.server")


def http_error_response(exc: HTTPError) -> Response:
    """Response for an HTTPError raised by middleware or a handler."""
    response = Response(body=exc.detail or str(exc.status), status=exc.status)
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def internal_error_response(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Log an unexpected failure and build the 500 response for it."""
    logger.error(
        "Unhandled error during %s %s",
        request.method,
        request.path,
        exc_info=exc,
    )
    if debug:
        return Response(body=f"Internal Server Error: {exc!r}", status=500)
    return Response(body="Internal Server Error", status=500)
