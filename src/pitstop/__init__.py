"""pitstop: a small self-registering unit-test harness.

Declare tests with ``@test``, check conditions with the ``assert_*``
functions, and call :func:`main` to run them::

    from pitstop import assert_equal, main, test

    @test
    def addition():
        assert_equal(1 + 1, 2)

    if __name__ == "__main__":
        raise SystemExit(main())
"""

from pitstop.assertions import (
    TOLERANCE,
    TestFailure,
    assert_almost_equal,
    assert_equal,
    assert_exception,
    assert_false,
    assert_no_exception,
    assert_true,
    assert_unequal,
)
from pitstop.errors import (
    DuplicateTestError,
    ModuleLoadError,
    PitstopError,
    RegistrySealedError,
)
from pitstop.formatting import Style, ansi
from pitstop.registry import Registry, TestEntry, collecting, default_registry, test
from pitstop.runner import (
    FailureRecord,
    Outcome,
    Runner,
    RunSummary,
    TestResult,
    exit_status,
    main,
)

__all__ = [
    "TOLERANCE",
    "DuplicateTestError",
    "FailureRecord",
    "ModuleLoadError",
    "Outcome",
    "PitstopError",
    "Registry",
    "RegistrySealedError",
    "RunSummary",
    "Runner",
    "Style",
    "TestEntry",
    "TestFailure",
    "TestResult",
    "ansi",
    "assert_almost_equal",
    "assert_equal",
    "assert_exception",
    "assert_false",
    "assert_no_exception",
    "assert_true",
    "assert_unequal",
    "collecting",
    "default_registry",
    "exit_status",
    "main",
    "test",
]
