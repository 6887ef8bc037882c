"""Loading Python files that live outside any package.

Route files and controller files are plain ``.py`` files under the
application's entry path, not importable modules. Each load executes the
file in a fresh module namespace that is not registered in ``sys.modules``.
"""

import importlib.util
from pathlib import Path
from types import ModuleType


def exec_file(path: Path, module_name: str) -> ModuleType:
    """Execute a Python file in an isolated module namespace.

    Raises ``FileNotFoundError`` if the file does not exist, ``ImportError``
    if no loader can be created for it, and whatever the module body raises.
    """
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
