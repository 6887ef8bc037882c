"""Route-definition sources — where the router's declarations come from.

A route source is a single function that receives a capture callback and
calls it once per route, pattern first::

    # app/routes.py
    def routes(match):
        match("", "home#index")
        match("users", "users#index")
        match("users/:id", "users#show")

:func:`load_route_source` accepts that function directly, a path to the
file defining it, or an import string.
"""

import importlib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeAlias

from perch._internal.modules import exec_file
from perch.errors import ConfigurationError

# The callback a route source receives: (pattern, *fragments)
Capture: TypeAlias = Callable[..., Any]

RouteSource: TypeAlias = Callable[[Capture], Any]

DEFAULT_SOURCE_ATTR = "routes"


def load_route_source(target: str | Path | RouteSource) -> RouteSource:
    """Resolve a route source to its declaring function.

    Accepts, in order of precedence:

    - a callable, returned unchanged;
    - a path to a ``.py`` file, or an extension-less path whose ``.py``
      sibling exists (``"app/routes"`` -> ``app/routes.py``); the file's
      ``routes`` attribute is used;
    - an import string ``"module:attribute"``; the attribute defaults to
      ``routes`` when omitted.

    A ``Path`` always names a file, so a missing file raises
    ``FileNotFoundError`` rather than falling back to an import.

    Raises:
        FileNotFoundError: If a ``.py`` path does not exist.
        ModuleNotFoundError: If the import string's module cannot be imported.
        ConfigurationError: If the resolved object is missing or not callable.

    """
    if callable(target):
        return target

    path = _source_file(target)
    if path is not None:
        module = exec_file(path, f"_perch_routes_{path.stem}")
        origin = str(path)
        attr_name = DEFAULT_SOURCE_ATTR
    else:
        module_path, _, attr_name = str(target).partition(":")
        attr_name = attr_name or DEFAULT_SOURCE_ATTR
        module = importlib.import_module(module_path)
        origin = module_path

    source = getattr(module, attr_name, None)
    if source is None or not callable(source):
        msg = f"Route source {origin!r} does not define a callable {attr_name!r}"
        raise ConfigurationError(msg)
    return source


def _source_file(target: str | Path) -> Path | None:
    """Return the ``.py`` file a target names, or ``None`` for import strings."""
    path = Path(target)
    if path.suffix == ".py":
        return path
    if not path.name:
        return None
    candidate = path.with_name(f"{path.name}.py")
    # Path objects always name files; strings fall back to imports
    if candidate.is_file() or isinstance(target, Path):
        return candidate
    return None
