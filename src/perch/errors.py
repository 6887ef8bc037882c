"""Perch exception hierarchy.

Shared across the router, the resolvers, and the route-source loader so
every module raises and catches the same types.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when router configuration or a route declaration is invalid.

    Typically surfaces from ``BaseRouter.build()`` wrapped in a
    :class:`RouteBuildError`.
    """


class RouteBuildError(PerchError):
    """A failure while building the route table.

    Wraps whatever the route-definition source or a registration raised.
    The original exception is chained as ``__cause__`` and kept on
    ``cause`` for callers that report it.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Error building routes: {cause}")
        self.cause = cause
