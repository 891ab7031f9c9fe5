"""Import test modules by path so their ``@test`` declarations register."""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

from pitstop.errors import DuplicateTestError, ModuleLoadError

logger = logging.getLogger(__name__)


def _module_name(path: Path, index: int) -> str:
    return f"pitstop_tests_{index}_{path.stem}"


def load_modules(paths: list[Path]) -> list[ModuleType]:
    """Execute each test module once, in the given order.

    Duplicate paths are imported once. A module that fails to import
    raises ModuleLoadError naming the path; a duplicate test name raised
    while importing propagates unchanged.
    """
    modules: list[ModuleType] = []
    seen: set[Path] = set()

    for index, path in enumerate(paths):
        resolved = path.resolve()
        if resolved in seen:
            logger.debug(f"Skipping already loaded module {path}")
            continue
        seen.add(resolved)

        name = _module_name(resolved, index)
        spec = importlib.util.spec_from_file_location(name, str(resolved))
        if spec is None or spec.loader is None:
            raise ModuleLoadError(f"Cannot import {path}: not a Python module")

        module = importlib.util.module_from_spec(spec)
        # Module directory first on the path so sibling helpers import
        sys.path.insert(0, str(resolved.parent))
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except DuplicateTestError:
            sys.modules.pop(name, None)
            raise
        except Exception as e:
            sys.modules.pop(name, None)
            raise ModuleLoadError(
                f"Failed to import {path}: {type(e).__name__}: {e}"
            ) from e
        finally:
            sys.path.remove(str(resolved.parent))

        logger.debug(f"Loaded test module {path} as '{name}'")
        modules.append(module)

    return modules
