"""Assertion primitives raising a structured failure on violation."""

from pitstop.assertions.base import TestFailure
from pitstop.assertions.checks import (
    TOLERANCE,
    assert_almost_equal,
    assert_equal,
    assert_exception,
    assert_false,
    assert_no_exception,
    assert_true,
    assert_unequal,
)

__all__ = [
    "TOLERANCE",
    "TestFailure",
    "assert_almost_equal",
    "assert_equal",
    "assert_exception",
    "assert_false",
    "assert_no_exception",
    "assert_true",
    "assert_unequal",
]
