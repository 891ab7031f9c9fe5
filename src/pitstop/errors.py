"""Exceptions raised by pitstop itself (not by tests under run)."""


class PitstopError(Exception):
    """Base class for harness errors."""


class DuplicateTestError(PitstopError, ValueError):
    """A test name was registered twice."""


class RegistrySealedError(PitstopError, RuntimeError):
    """A test was registered after the run started."""


class ModuleLoadError(PitstopError):
    """A test module could not be imported."""
