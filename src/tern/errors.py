"""Tern exception hierarchy.

Shared across Router, App and middleware so every module raises and
catches the same types.
"""

from dataclasses import dataclass


class TernError(Exception):
    """Base for all tern-specific errors."""


class ConfigurationError(TernError):
    """Raised when a config value cannot be used."""


@dataclass(frozen=True, slots=True)
class HTTPError(TernError):
    """An error that maps directly to an HTTP status code.

    Raised by middleware or handlers. ``App`` catches these and turns
    them into a response; the router itself never catches anything.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request method and path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class Unauthorized(HTTPError):  # noqa: N818
    """401 — the request carried no usable credentials."""

    def __init__(self, detail: str = "Unauthorized") -> None:
        super().__init__(
            status=401,
            detail=detail,
            headers=(("WWW-Authenticate", "Bearer"),),
        )


class PayloadTooLarge(HTTPError):  # noqa: N818
    """413 — request body exceeds ``max_content_length``."""

    def __init__(self, limit: int) -> None:
        super().__init__(status=413, detail=f"Request body exceeds {limit} bytes")
