"""Controller, action, and redirect resolution.

The router never touches the filesystem itself: it asks a
``ControllerLoader`` for a controller by name. Two loaders ship here:
one that follows the ``<controller_dir>/<name>_controller.py``
convention and one backed by a plain mapping.

Loaders never raise. A controller that cannot be loaded is absent, and
an absent controller resolves to an absent action; the handler factory
decides what an absent action means.
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Protocol

from perch._internal.modules import exec_file
from perch.routing.definitions import RouteDefinition

logger = logging.getLogger("perch.routing")

_CONTROLLER_SUFFIX = "_controller"


class ControllerLoader(Protocol):
    """Resolves a controller name to a controller object, or ``None``."""

    def load(self, name: str) -> Any | None: ...


class ConventionControllerLoader:
    """Load controllers from ``<controller_dir>/<name>_controller.py``.

    Each controller file is executed once in its own module namespace and
    cached. Any failure (missing file, syntax error, an exception from
    the module body) is logged at DEBUG and reported as absent.
    """

    __slots__ = ("_cache", "controller_dir")

    def __init__(self, controller_dir: str | Path) -> None:
        self.controller_dir = Path(controller_dir)
        self._cache: dict[str, Any] = {}

    def load(self, name: str) -> Any | None:
        if not name:
            return None
        if name in self._cache:
            return self._cache[name]

        path = self.controller_dir / f"{name}{_CONTROLLER_SUFFIX}.py"
        try:
            module = exec_file(path, f"_perch_controller_{name}")
        except Exception:
            logger.debug("Controller %r could not be loaded from %s", name, path, exc_info=True)
            return None

        self._cache[name] = module
        return module


class MappingControllerLoader:
    """Look controllers up in a name -> controller mapping."""

    __slots__ = ("_controllers",)

    def __init__(self, controllers: Mapping[str, Any]) -> None:
        self._controllers = controllers

    def load(self, name: str) -> Any | None:
        if not name:
            return None
        return self._controllers.get(name)


def get_action(
    definition: RouteDefinition,
    load_controller: Callable[[str], Any | None],
) -> Callable[..., Any] | None:
    """Resolve the action a definition names, or ``None``.

    ``load_controller`` maps a controller name to a controller or ``None``:
    a loader's ``load``, or ``BaseRouter.get_controller``.

    The controller may be a module or object (action is an attribute) or
    a mapping (action is a key).
    """
    controller = load_controller(definition.get("controller") or "")
    action_name = definition.get("action")
    if controller is None or not action_name:
        return None
    if isinstance(controller, Mapping):
        return controller.get(action_name)
    return getattr(controller, action_name, None)


def get_redirect(definition: RouteDefinition, params: Any) -> Any | None:
    """Compute the redirect target for a definition.

    A callable ``redirect`` is called with the request parameters; any
    other value is returned as-is. No ``redirect`` gives ``None``.
    """
    redirect = definition.get("redirect")
    if redirect is not None and callable(redirect):
        return redirect(params)
    return redirect
