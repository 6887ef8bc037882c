"""Tests for perch.config — RouterPaths and RouterConfig frozen dataclasses."""

from pathlib import Path

import pytest

from perch.config import RouterConfig, RouterPaths


class TestRouterPaths:
    def test_defaults(self) -> None:
        paths = RouterPaths()
        assert paths.entry_path == Path(".")
        assert paths.routes == Path("app/routes")
        assert paths.controller_dir == Path("app/controllers")

    def test_derived_from_entry_path(self) -> None:
        paths = RouterPaths(entry_path="/srv/site")
        assert paths.entry_path == Path("/srv/site")
        assert paths.routes == Path("/srv/site/app/routes")
        assert paths.controller_dir == Path("/srv/site/app/controllers")

    def test_explicit_paths_kept(self) -> None:
        paths = RouterPaths(entry_path="/srv/site", routes="config/routes.py", controller_dir="ctl")
        assert paths.routes == Path("config/routes.py")
        assert paths.controller_dir == Path("ctl")

    def test_accepts_path_objects(self) -> None:
        paths = RouterPaths(entry_path=Path("/srv/site"))
        assert paths.routes == Path("/srv/site/app/routes")

    def test_frozen(self) -> None:
        paths = RouterPaths()
        with pytest.raises(AttributeError):
            paths.routes = Path("elsewhere")  # type: ignore[misc]


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()
        assert cfg.paths == RouterPaths()
        assert cfg.reverse_routes is None

    def test_override(self) -> None:
        cfg = RouterConfig(paths=RouterPaths(entry_path="site"), reverse_routes=True)
        assert cfg.paths.controller_dir == Path("site/app/controllers")
        assert cfg.reverse_routes is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()
        with pytest.raises(AttributeError):
            cfg.reverse_routes = True  # type: ignore[misc]
