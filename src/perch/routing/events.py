"""Route event channel — synchronous broadcast of table additions.

Every ``BaseRouter.register()`` publishes the new ``RouteEntry`` on the
router's channel. Delivery is synchronous: ``publish()`` returns after
every current subscriber has run. Nothing is buffered, so a subscriber
only sees routes added after it subscribed.

Each subscriber receives its own copy of the entry, so no subscriber
can alter the router's table or what other subscribers see.
"""

import threading
from collections.abc import Callable
from typing import TypeAlias

from perch.routing.route import RouteEntry

ROUTE_ADDED = "route:add"

RouteListener: TypeAlias = Callable[[RouteEntry], object]


class RouteEventChannel:
    """Subscribe/unsubscribe/publish for the ``route:add`` topic.

    Usage::

        channel = RouteEventChannel()

        @channel.subscribe
        def log_route(entry: RouteEntry) -> None:
            print(entry.pattern)

        channel.publish(entry)
        channel.unsubscribe(log_route)
    """

    __slots__ = ("_listeners", "_lock")

    topic = ROUTE_ADDED

    def __init__(self) -> None:
        self._listeners: list[RouteListener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: RouteListener) -> RouteListener:
        """Add a listener. Returns it, so this works as a decorator."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: RouteListener) -> None:
        """Remove a listener. Unknown listeners are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def publish(self, entry: RouteEntry) -> None:
        """Deliver ``entry`` to every current listener, in subscription order.

        Listener exceptions propagate to the caller.
        """
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(entry.copy())

    def __len__(self) -> int:
        return len(self._listeners)
