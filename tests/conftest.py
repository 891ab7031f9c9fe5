"""Pytest configuration and fixtures."""

import io
import logging

import pytest

from pitstop.registry import Registry
from pitstop.runner import Runner


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from pitstop loggers after each test so names can be reused."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("pitstop"):
            continue
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def run_report(registry):
    """Run the fixture registry and return (summary, printed report)."""

    def _run(color: bool = True):
        out = io.StringIO()
        summary = Runner(registry=registry, stream=out, color=color).run()
        return summary, out.getvalue()

    return _run
