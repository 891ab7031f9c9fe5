"""Name-to-procedure registry populated by the ``@test`` decorator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from contextlib import contextmanager
from typing import Callable, Iterator, overload

from pitstop.errors import DuplicateTestError, RegistrySealedError

logger = logging.getLogger(__name__)

TestProcedure = Callable[[], None]


@dataclass(frozen=True)
class TestEntry:
    __test__ = False

    name: str
    procedure: TestProcedure


class Registry:
    """Collects test declarations and hands them to the runner in name order.

    Declarations are recorded as they are imported. The registry is
    sealed when a run starts; registering afterwards is an error, as is
    registering a name twice.
    """

    def __init__(self) -> None:
        self._declared: list[TestEntry] = []
        self._names: set[str] = set()
        self.sealed = False

    def register(self, name: str, procedure: TestProcedure) -> TestEntry:
        if self.sealed:
            raise RegistrySealedError(
                f"Cannot register test '{name}': the run has already started"
            )
        if name in self._names:
            raise DuplicateTestError(f"Test '{name}' is already registered")
        entry = TestEntry(name=name, procedure=procedure)
        self._declared.append(entry)
        self._names.add(name)
        logger.debug(f"Registered test '{name}'")
        return entry

    @overload
    def test(self, name_or_func: TestProcedure) -> TestProcedure: ...

    @overload
    def test(
        self, name_or_func: str | None = None
    ) -> Callable[[TestProcedure], TestProcedure]: ...

    def test(self, name_or_func=None):
        """Decorator declaring a test.

        Usable bare (``@test``, named after the function) or with an
        explicit name (``@test("parses empty input")``). The function is
        returned unchanged.
        """
        if callable(name_or_func):
            self.register(name_or_func.__name__, name_or_func)
            return name_or_func

        def decorator(func: TestProcedure) -> TestProcedure:
            self.register(name_or_func or func.__name__, func)
            return func

        return decorator

    def seal(self) -> list[TestEntry]:
        """Freeze the registry and return its entries in run order."""
        self.sealed = True
        return self.entries()

    def entries(self) -> list[TestEntry]:
        return sorted(self._declared, key=lambda entry: entry.name)

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries()]

    def __len__(self) -> int:
        return len(self._declared)

    def __contains__(self, name: object) -> bool:
        return name in self._names


default_registry = Registry()
_collecting: Registry = default_registry


def test(name_or_func=None):
    """Declare a test in the collecting registry. See :meth:`Registry.test`.

    Outside a :func:`collecting` block this is the process-wide
    ``default_registry``.
    """
    return _collecting.test(name_or_func)


# Keep pytest from collecting the decorator itself when a test module imports it
test.__test__ = False


@contextmanager
def collecting(registry: Registry) -> Iterator[Registry]:
    """Route module-level ``@test`` declarations into ``registry`` for the block."""
    global _collecting
    previous = _collecting
    _collecting = registry
    try:
        yield registry
    finally:
        _collecting = previous
