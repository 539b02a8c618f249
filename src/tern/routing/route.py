"""Route frozen dataclass."""

from dataclasses import dataclass

from tern._internal.types import Handler
from tern.routing.method import RequestMethod


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Created by ``Router.add_route()`` and never changed afterwards.
    """

    method: RequestMethod
    path: str
    handler: Handler

    def matches(self, method: str, path: str) -> bool:
        """True when both method and path are exactly equal."""
        return self.method == method and self.path == path
