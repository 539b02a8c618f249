"""The closed set of HTTP methods a route can be registered for."""

from enum import StrEnum


class RequestMethod(StrEnum):
    """HTTP request method.

    Members are ``str`` subclasses, so ``RequestMethod.GET == "GET"``.
    Comparison is exact: ``"get"`` does not equal ``RequestMethod.GET``.
    """

    POST = "POST"
    GET = "GET"
    OPTIONS = "OPTIONS"
    DELETE = "DELETE"
    PUT = "PUT"
    HEAD = "HEAD"
    PATCH = "PATCH"
