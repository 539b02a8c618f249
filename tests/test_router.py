"""Tests for tern.routing.router — registration and lookup."""

import pytest

from tern.config import RouterConfig
from tern.http.request import Request
from tern.routing.method import RequestMethod
from tern.routing.route import Route
from tern.routing.router import Router


def h1(request: Request) -> None:
    return None


def h2(request: Request) -> None:
    return None


class TestRegistration:
    def test_empty_router(self) -> None:
        router = Router()
        assert router.routes == ()
        assert router.middleware == ()
        assert router.config == RouterConfig()

    def test_add_route_appends_in_call_order(self) -> None:
        router = Router()
        router.add_route(RequestMethod.GET, "/a", h1)
        router.add_route(RequestMethod.POST, "/b", h2)
        router.add_route(RequestMethod.GET, "/a", h2)

        assert [(r.method, r.path, r.handler) for r in router.routes] == [
            ("GET", "/a", h1),
            ("POST", "/b", h2),
            ("GET", "/a", h2),
        ]

    def test_add_route_returns_route(self) -> None:
        router = Router()
        route = router.add_route(RequestMethod.PUT, "/x", h1)
        assert route == Route(RequestMethod.PUT, "/x", h1)
        assert router.routes[-1] is route

    def test_earlier_routes_untouched(self) -> None:
        router = Router()
        first = router.add_route(RequestMethod.GET, "/a", h1)
        for i in range(10):
            router.add_route(RequestMethod.GET, f"/n{i}", h2)
        assert router.routes[0] is first
        assert len(router.routes) == 11

    def test_accepts_method_string(self) -> None:
        router = Router()
        route = router.add_route("DELETE", "/x", h1)  # type: ignore[arg-type]
        assert route.method is RequestMethod.DELETE

    def test_no_path_validation(self) -> None:
        router = Router()
        router.add_route(RequestMethod.GET, "no-leading-slash", h1)
        router.add_route(RequestMethod.GET, "", h1)
        assert [r.path for r in router.routes] == ["no-leading-slash", ""]

    def test_routes_snapshot_is_immutable(self) -> None:
        router = Router()
        router.get("/a", h1)
        snapshot = router.routes
        router.get("/b", h1)
        assert len(snapshot) == 1
        assert len(router.routes) == 2

    def test_seeded_tables(self) -> None:
        seeded = Route(RequestMethod.GET, "/seed", h1)
        router = Router(routes=[seeded], middleware=[h2])
        router.get("/later", h1)
        assert router.routes[0] is seeded
        assert router.middleware == (h2,)

    def test_add_middleware_appends(self) -> None:
        router = Router()
        router.add_middleware(h1)
        router.add_middleware(h2)
        router.add_middleware(h1)
        assert router.middleware == (h1, h2, h1)


class TestVerbHelpers:
    @pytest.mark.parametrize(
        ("verb", "method"),
        [
            ("post", RequestMethod.POST),
            ("get", RequestMethod.GET),
            ("put", RequestMethod.PUT),
            ("delete", RequestMethod.DELETE),
            ("options", RequestMethod.OPTIONS),
            ("head", RequestMethod.HEAD),
            ("patch", RequestMethod.PATCH),
        ],
    )
    def test_equivalent_to_add_route(self, verb: str, method: RequestMethod) -> None:
        via_helper = Router()
        getattr(via_helper, verb)("/thing", h1)

        via_add = Router()
        via_add.add_route(method, "/thing", h1)

        assert via_helper.routes == via_add.routes


class TestFindRoute:
    def test_first_match_wins(self) -> None:
        router = Router()
        router.get("/a", h1)
        router.get("/a", h2)

        route = router.find_route(Request("GET", "/a"))
        assert route is not None
        assert route.handler is h1

    def test_empty_table_returns_none(self) -> None:
        assert Router().find_route(Request("GET", "/x")) is None

    def test_method_must_match(self) -> None:
        router = Router()
        router.post("/b", h1)
        assert router.find_route(Request("GET", "/b")) is None
        assert router.find_route(Request("POST", "/b")) is router.routes[0]

    def test_path_must_match_exactly(self) -> None:
        router = Router()
        router.get("/users", h1)
        assert router.find_route(Request("GET", "/users/")) is None
        assert router.find_route(Request("GET", "/users/42")) is None
        assert router.find_route(Request("GET", "/Users")) is None

    def test_lower_case_method_misses(self) -> None:
        router = Router()
        router.get("/a", h1)
        assert router.find_route(Request("get", "/a")) is None

    def test_query_string_ignored(self) -> None:
        router = Router()
        router.get("/search", h1)
        request = Request("GET", "/search", query_string="q=tern")
        assert router.find_route(request) is router.routes[0]

    def test_skips_non_matching_to_first_match(self) -> None:
        router = Router()
        router.post("/a", h2)
        router.get("/b", h2)
        router.get("/a", h1)
        router.get("/a", h2)
        route = router.find_route(Request("GET", "/a"))
        assert route is router.routes[2]

    def test_accepts_any_object_with_method_and_path(self) -> None:
        class Descriptor:
            method = "HEAD"
            path = "/ping"

        router = Router()
        router.head("/ping", h1)
        assert router.find_route(Descriptor()) is router.routes[0]
