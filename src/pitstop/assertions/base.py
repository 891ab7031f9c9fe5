"""Failure signal raised by the assertion functions."""

from __future__ import annotations

from pitstop.formatting import Style, paint


class TestFailure(AssertionError):
    """Raised when an assertion's condition is violated.

    Attributes:
        reason: Human-readable description of the violated expectation,
            citing the source text of the checked expression(s).
        line: Line number of the assertion call site.
    """

    __test__ = False

    def __init__(self, reason: str, line: int):
        super().__init__(reason, line)
        self.reason = reason
        self.line = line

    def render(self) -> str:
        """Message shown in the failure report, with the line number in bold."""
        return f"Line {paint(str(self.line), Style.BOLD)}: {self.reason}"

    def __str__(self) -> str:
        return f"Line {self.line}: {self.reason}"
