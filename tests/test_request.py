"""Tests for tern.http.request — the mutable request wrapper."""

import pytest

from tern.http.headers import Headers
from tern.http.request import Request
from tern.http.response import Response
from tern.http.timing import RequestTimer


class TestRequest:
    def test_defaults(self) -> None:
        request = Request("GET", "/")
        assert request.body == b""
        assert request.query_string == ""
        assert len(request.headers) == 0
        assert isinstance(request.timer, RequestTimer)
        assert request.response is None

    def test_middleware_can_attach_attributes(self) -> None:
        request = Request("GET", "/")
        request.user = "x"
        assert request.user == "x"

    def test_url_includes_query(self) -> None:
        assert Request("GET", "/s", query_string="q=1").url == "/s?q=1"
        assert Request("GET", "/s").url == "/s"

    def test_text_and_json(self) -> None:
        request = Request(
            "POST",
            "/items",
            headers=Headers([("Content-Type", "application/json")]),
            body=b'{"name": "tern"}',
        )
        assert request.content_type == "application/json"
        assert request.text() == '{"name": "tern"}'
        assert request.json() == {"name": "tern"}

    def test_respond_replaces_previous(self) -> None:
        request = Request("GET", "/")
        request.respond(Response.text("first"))
        request.respond(Response.text("second", status=201))
        assert request.response == Response.text("second", status=201)

    def test_timers_are_per_request(self) -> None:
        assert Request("GET", "/").timer is not Request("GET", "/").timer


class TestFromAsgi:
    def test_builds_from_scope(self) -> None:
        scope = {
            "type": "http",
            "method": "POST",
            "path": "/items",
            "query_string": b"draft=1",
            "headers": [(b"content-type", b"text/plain")],
            "client": ("127.0.0.1", 5000),
        }
        request = Request.from_asgi(scope, b"hello")
        assert request.method == "POST"
        assert request.path == "/items"
        assert request.query_string == "draft=1"
        assert request.headers["Content-Type"] == "text/plain"
        assert request.body == b"hello"
        assert request.client == ("127.0.0.1", 5000)
        assert request.timer.prefix == "POST /items"

    def test_minimal_scope(self) -> None:
        request = Request.from_asgi({"type": "http", "method": "GET", "path": "/"})
        assert request.client is None
        assert request.body == b""

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ValueError):
            Request("POST", "/", body=b"{not json").json()
