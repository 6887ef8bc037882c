"""RouteEntry frozen dataclass."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from perch.routing.definitions import RouteDefinition


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A registered route: canonical pattern, merged definition, handler.

    Created by ``BaseRouter.register()`` and owned by the router's table.
    Unpacks like the three-item route shape::

        pattern, definition, handler = entry
    """

    pattern: str
    definition: RouteDefinition
    handler: Any = None

    def copy(self) -> "RouteEntry":
        """Return a copy with its own top-level definition mapping.

        Nested values inside the definition (lists, dicts, callables) are
        shared with the original.
        """
        return RouteEntry(
            pattern=self.pattern,
            definition=dict(self.definition),
            handler=self.handler,
        )

    def __iter__(self) -> Iterator[Any]:
        yield self.pattern
        yield self.definition
        yield self.handler
