"""Views — a minimal server-side router built on perch.

Demonstrates a route file, convention-loaded controllers, computed and
static redirects, default view paths, and the route-added event.

The handler looks routes up by their exact pattern; a real server
router would match request paths against the patterns instead.

Run:
    python app.py
"""

from pathlib import Path

from perch import BaseRouter, RouterConfig, RouterPaths


class ViewRouter(BaseRouter):
    """Renders each action's result as ``"<view path>: <locals>"``."""

    def initialize(self) -> None:
        self.log: list[str] = []
        self.subscribe(lambda entry: self.log.append(entry.pattern))

    def get_handler(self, action, pattern, definition):
        def handler(params):
            redirect = self.get_redirect(definition, params)
            if redirect is not None:
                return f"302 {redirect}"
            if action is None:
                return f"404 {pattern}"
            view_path, view_locals = self.default_handler_params(*action(params), definition)
            return f"200 {view_path}: {view_locals}"

        return handler

    def dispatch(self, pattern: str, params: dict | None = None) -> str:
        for entry in self.routes():
            if entry.pattern == pattern:
                return entry.handler(params or {})
        return f"404 {pattern}"


router = ViewRouter(RouterConfig(paths=RouterPaths(entry_path=Path(__file__).parent)))
router.build()


if __name__ == "__main__":
    for entry in router.routes():
        print(f"{entry.pattern:<20} {entry.definition}")
