"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation, with the
path defaults derived from ``entry_path`` at construction time.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RouterPaths:
    """Filesystem locations the router loads from.

    Only ``entry_path`` is needed; the others default relative to it::

        paths = RouterPaths(entry_path="/srv/site")
        paths.routes          # Path("/srv/site/app/routes")
        paths.controller_dir  # Path("/srv/site/app/controllers")
    """

    entry_path: str | Path = "."
    routes: str | Path | None = None
    controller_dir: str | Path | None = None

    def __post_init__(self) -> None:
        entry = Path(self.entry_path)
        object.__setattr__(self, "entry_path", entry)
        routes = entry / "app" / "routes" if self.routes is None else Path(self.routes)
        object.__setattr__(self, "routes", routes)
        controller_dir = (
            entry / "app" / "controllers" if self.controller_dir is None else Path(self.controller_dir)
        )
        object.__setattr__(self, "controller_dir", controller_dir)


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    ``reverse_routes`` left as ``None`` defers to the router class
    attribute of the same name::

        config = RouterConfig(paths=RouterPaths(entry_path="site"), reverse_routes=True)
    """

    paths: RouterPaths = field(default_factory=RouterPaths)

    # Register captured routes last-declared first
    reverse_routes: bool | None = None
