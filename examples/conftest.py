"""Pytest fixtures for the perch examples.

``example_router`` executes the ``app.py`` next to the requesting test
under a fresh module name. The module builds its router at import, so
every test gets a newly constructed router whose table, controller cache,
and route-added listeners start from nothing.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_router(request: pytest.FixtureRequest):
    """Return the ``router`` built by the example's ``app.py``."""
    app_path = Path(request.path).parent / "app.py"
    spec = importlib.util.spec_from_file_location(f"perch_example_{app_path.parent.name}", app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.router
