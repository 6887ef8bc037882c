"""Base router shared by the server-side and client-side routers.

Builds the route table from a route-definition source: each declaration
is normalized into a ``RouteDefinition``, its action is resolved through
the controller loader, its pattern is made absolute, and the concrete
router's ``get_handler()`` turns all three into a handler. The resulting
``RouteEntry`` is appended to the table and published on ``events``.

Concrete routers override ``get_handler()`` (and, where they need it,
``initialize()``)::

    class ServerRouter(BaseRouter):
        def get_handler(self, action, pattern, definition):
            return make_request_handler(action, pattern, definition)

    router = ServerRouter(RouterConfig(paths=RouterPaths(entry_path="site")))
    router.build()

URL matching against the stored patterns belongs to the concrete router.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, ClassVar

from perch.config import RouterConfig
from perch.errors import ConfigurationError, RouteBuildError
from perch.routing.definitions import RouteDefinition, parse_definitions
from perch.routing.events import RouteEventChannel, RouteListener
from perch.routing.resolve import (
    ControllerLoader,
    ConventionControllerLoader,
    get_action,
    get_redirect,
)
from perch.routing.route import RouteEntry
from perch.routing.source import RouteSource, load_route_source

logger = logging.getLogger("perch.routing")


def canonical_pattern(pattern: str) -> str:
    """Prefix a pattern with ``/`` unless it already starts with one."""
    if pattern.startswith("/"):
        return pattern
    return f"/{pattern}"


class BaseRouter:
    """Route table builder with pluggable handler creation.

    Args:
        config: Paths and ordering options. Defaults to ``RouterConfig()``.
        controller_loader: Resolves controller names. Defaults to a
            ``ConventionControllerLoader`` over ``config.paths.controller_dir``.
        route_source: The route-declaring function, a path, or an import
            string. Defaults to ``config.paths.routes``.

    """

    # Register captured routes last-declared first, unless config says otherwise
    reverse_routes: ClassVar[bool] = False

    def __init__(
        self,
        config: RouterConfig | None = None,
        *,
        controller_loader: ControllerLoader | None = None,
        route_source: str | Path | RouteSource | None = None,
    ) -> None:
        self.config = config or RouterConfig()
        self.controllers: ControllerLoader = controller_loader or ConventionControllerLoader(
            self.config.paths.controller_dir
        )
        self.route_source = route_source if route_source is not None else self.config.paths.routes
        self.events = RouteEventChannel()
        self._routes: list[RouteEntry] = []
        self._lock = threading.RLock()
        self.initialize()

    def initialize(self) -> None:
        """Hook for subclasses, called at the end of ``__init__``."""

    @property
    def reverse(self) -> bool:
        """Whether ``build()`` registers captured routes in reverse order."""
        if self.config.reverse_routes is None:
            return self.reverse_routes
        return self.config.reverse_routes

    # -- Handler factory ----------------------------------------------------

    def get_handler(
        self,
        action: Callable[..., Any] | None,
        pattern: str,
        definition: RouteDefinition,
    ) -> Any:
        """Create the handler stored with a route. Override in subclasses.

        ``action`` is ``None`` when the controller or action could not be
        resolved; the subclass decides whether that is an error.
        """
        return None

    # -- Resolution ---------------------------------------------------------

    def get_controller(self, name: str) -> Any | None:
        """Look a controller up by name. Never raises."""
        return self.controllers.load(name)

    def get_action(self, definition: RouteDefinition) -> Callable[..., Any] | None:
        """Return the action a definition names, or ``None``."""
        return get_action(definition, self.get_controller)

    def get_redirect(self, definition: RouteDefinition, params: Any) -> Any | None:
        """Return the redirect target for a definition, or ``None``."""
        return get_redirect(definition, params)

    # -- Registration -------------------------------------------------------

    def register(self, pattern: str, *fragments: Any) -> RouteEntry:
        """Add one route to the table and publish it.

        Returns a copy of the stored entry.

        This is the capture callback route sources receive::

            router.register("users/:id", "users#show", {"auth": True})

        Raises ``ConfigurationError`` if ``pattern`` is not a non-empty
        string or a fragment is neither a string nor a mapping.
        """
        if not isinstance(pattern, str) or not pattern:
            msg = f"Route pattern must be a non-empty string, got {pattern!r}"
            raise ConfigurationError(msg)

        definition = parse_definitions(fragments)
        action = self.get_action(definition)
        pattern = canonical_pattern(pattern)
        handler = self.get_handler(action, pattern, definition)
        entry = RouteEntry(pattern=pattern, definition=definition, handler=handler)

        with self._lock:
            self._routes.append(entry)
        logger.debug(
            "Registered route %s -> %s#%s%s",
            pattern,
            definition.get("controller"),
            definition.get("action"),
            "" if action is not None else " (no action)",
        )
        self.events.publish(entry)
        return entry.copy()

    route = register

    def build(self) -> list[RouteEntry]:
        """Rebuild the table from the route source and return a snapshot.

        The previous table is discarded first. Declarations are captured
        in full before any is registered, so ``reverse`` applies to the
        whole set at once.

        Raises ``RouteBuildError`` wrapping whatever loading the source,
        running it, or registering a route raised. The table is left as
        far as the build got.
        """
        with self._lock:
            self._routes = []
            captured: list[tuple[Any, ...]] = []

            def capture(*args: Any) -> None:
                captured.append(args)

            try:
                source = load_route_source(self.route_source)
                source(capture)
                if self.reverse:
                    captured.reverse()
                for args in captured:
                    if not args:
                        msg = "Route declarations need a pattern as their first argument"
                        raise ConfigurationError(msg)
                    self.register(*args)
            except Exception as exc:
                raise RouteBuildError(exc) from exc

            logger.info("Built %d routes", len(self._routes))
            return self.routes()

    def routes(self) -> list[RouteEntry]:
        """Return an independent copy of the current table."""
        with self._lock:
            return [entry.copy() for entry in self._routes]

    # -- Events -------------------------------------------------------------

    def subscribe(self, listener: RouteListener) -> RouteListener:
        """Call ``listener`` with each route added from now on."""
        return self.events.subscribe(listener)

    def unsubscribe(self, listener: RouteListener) -> None:
        self.events.unsubscribe(listener)

    # -- View defaults ------------------------------------------------------

    @staticmethod
    def default_handler_params(
        view_path: str | Mapping[str, Any] | None,
        view_locals: Mapping[str, Any] | None,
        definition: RouteDefinition,
    ) -> tuple[str, Mapping[str, Any] | None]:
        """Fill in an omitted view path as ``"<controller>/<action>"``.

        Actions may hand back a view path and locals, or just the locals.
        In the second case the locals arrive in ``view_path``::

            default_handler_params({"user": u}, None, {"controller": "users", "action": "show"})
            # ("users/show", {"user": u})
        """
        if not isinstance(view_path, str):
            view_locals = view_path
            view_path = f"{definition.get('controller')}/{definition.get('action')}"
        return view_path, view_locals
