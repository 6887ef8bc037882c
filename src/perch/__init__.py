"""Perch — route table building for isomorphic web-view routers.

One route file, read by both the server-side and the client-side router::

    # app/routes.py
    def routes(match):
        match("users", "users#index")
        match("users/:id", "users#show")
        match("people/:id", {"redirect": lambda params: f"/users/{params['id']}"})

A concrete router supplies the handler factory::

    from perch import BaseRouter, RouterConfig, RouterPaths

    class ServerRouter(BaseRouter):
        def get_handler(self, action, pattern, definition):
            ...

    router = ServerRouter(RouterConfig(paths=RouterPaths(entry_path="site")))
    for entry in router.build():
        print(entry.pattern, entry.definition)
"""

__version__ = "0.1.0-dev"
__all__ = [
    "BaseRouter",
    "ConfigurationError",
    "ConventionControllerLoader",
    "MappingControllerLoader",
    "PerchError",
    "RouteBuildError",
    "RouteEntry",
    "RouteEventChannel",
    "RouterConfig",
    "RouterPaths",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "BaseRouter":
        from perch.routing.router import BaseRouter

        return BaseRouter

    if name in ("RouterConfig", "RouterPaths"):
        from perch import config as _config

        return getattr(_config, name)

    if name == "RouteEntry":
        from perch.routing.route import RouteEntry

        return RouteEntry

    if name == "RouteEventChannel":
        from perch.routing.events import RouteEventChannel

        return RouteEventChannel

    if name in ("ConventionControllerLoader", "MappingControllerLoader"):
        from perch.routing import resolve as _resolve

        return getattr(_resolve, name)

    if name in ("ConfigurationError", "PerchError", "RouteBuildError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
