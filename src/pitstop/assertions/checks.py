"""Assertion functions used inside test bodies.

Each function returns normally when its check holds and raises
:class:`TestFailure` otherwise. Messages cite the source text of the
checked expressions, never their values. The text and line are captured
from the calling frame unless passed explicitly.
"""

from __future__ import annotations

import inspect
import logging
from types import FrameType
from typing import Any, Callable

from pitstop.assertions.base import TestFailure
from pitstop.assertions.capture import call_site

logger = logging.getLogger(__name__)

TOLERANCE = 0.0001


def _describe(
    frame: FrameType | None,
    func_name: str,
    params: tuple[str, ...],
    texts: tuple[str | None, ...],
    line: int | None,
) -> tuple[list[str], int]:
    """Fill in whichever of ``texts`` and ``line`` the caller left out."""
    if line is not None and all(t is not None for t in texts):
        return list(texts), line
    if frame is None:
        return [t if t is not None else "<unknown>" for t in texts], line or 0
    site = call_site(frame, func_name, params)
    resolved = [t if t is not None else site.texts[i] for i, t in enumerate(texts)]
    return resolved, line if line is not None else site.line


def _raises(call: Callable[[], Any]) -> bool:
    """Invoke ``call`` and report whether it raised an ``Exception``.

    A nested assertion failure is not an "exception" in this sense; it
    propagates so the enclosing test still fails. Errors outside the
    ``Exception`` hierarchy propagate as well.
    """
    try:
        call()
    except TestFailure:
        raise
    except Exception as e:
        logger.debug(f"Call raised {type(e).__name__}: {e}")
        return True
    return False


def assert_true(expr: Any, text: str | None = None, line: int | None = None) -> None:
    if not expr:
        (text,), line = _describe(
            inspect.currentframe().f_back, "assert_true", ("expr",), (text,), line
        )
        raise TestFailure(f'Expected TRUE, but was FALSE: "{text}"', line)


def assert_false(expr: Any, text: str | None = None, line: int | None = None) -> None:
    if expr:
        (text,), line = _describe(
            inspect.currentframe().f_back, "assert_false", ("expr",), (text,), line
        )
        raise TestFailure(f'Expected FALSE, but was TRUE: "{text}"', line)


def assert_equal(
    lhs: Any,
    rhs: Any,
    lhs_text: str | None = None,
    rhs_text: str | None = None,
    line: int | None = None,
) -> None:
    """Fail unless ``lhs == rhs`` under the operands' own equality."""
    if not (lhs == rhs):
        (lhs_text, rhs_text), line = _describe(
            inspect.currentframe().f_back,
            "assert_equal",
            ("lhs", "rhs"),
            (lhs_text, rhs_text),
            line,
        )
        raise TestFailure(
            f"Expected EQUAL, but was NOT EQUAL: [{lhs_text}] and [{rhs_text}]", line
        )


def assert_unequal(
    lhs: Any,
    rhs: Any,
    lhs_text: str | None = None,
    rhs_text: str | None = None,
    line: int | None = None,
) -> None:
    """Fail unless ``lhs != rhs``."""
    if not (lhs != rhs):
        (lhs_text, rhs_text), line = _describe(
            inspect.currentframe().f_back,
            "assert_unequal",
            ("lhs", "rhs"),
            (lhs_text, rhs_text),
            line,
        )
        raise TestFailure(
            f"Expected UNEQUAL, but was NOT UNEQUAL: [{lhs_text}] and [{rhs_text}]",
            line,
        )


def assert_almost_equal(
    lhs: float,
    rhs: float,
    lhs_text: str | None = None,
    rhs_text: str | None = None,
    line: int | None = None,
) -> None:
    """Fail unless the operands are within ``TOLERANCE`` of each other.

    The tolerance is absolute: ``abs(lhs - rhs) <= 0.0001``. It does not
    scale with the magnitude of the operands.
    """
    if not abs(float(lhs) - float(rhs)) <= TOLERANCE:
        (lhs_text, rhs_text), line = _describe(
            inspect.currentframe().f_back,
            "assert_almost_equal",
            ("lhs", "rhs"),
            (lhs_text, rhs_text),
            line,
        )
        raise TestFailure(
            "Expected ALMOST EQUAL, but was NOT ALMOST EQUAL: "
            f"[{lhs_text}] and [{rhs_text}]",
            line,
        )


def assert_exception(
    call: Callable[[], Any], text: str | None = None, line: int | None = None
) -> None:
    """Fail unless invoking ``call`` raises an ``Exception``."""
    frame = inspect.currentframe().f_back
    if not _raises(call):
        (text,), line = _describe(frame, "assert_exception", ("call",), (text,), line)
        raise TestFailure(f'Expected EXCEPTION, but got NO EXCEPTION: "{text}"', line)


def assert_no_exception(
    call: Callable[[], Any], text: str | None = None, line: int | None = None
) -> None:
    """Fail if invoking ``call`` raises an ``Exception``."""
    frame = inspect.currentframe().f_back
    if _raises(call):
        (text,), line = _describe(
            frame, "assert_no_exception", ("call",), (text,), line
        )
        raise TestFailure(f'Expected NO EXCEPTION, but got EXCEPTION: "{text}"', line)
