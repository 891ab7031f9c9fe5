from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from pitstop.assertions.base import TestFailure
from pitstop.formatting import Style, paint, strip_ansi
from pitstop.registry import Registry, TestEntry, default_registry

UNKNOWN_ERROR_MESSAGE = "Totally unknown error was thrown!"


def _describe_error(error: Exception) -> str:
    """Text of an error raised by a test, even when its __str__ itself fails."""
    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__}>"


class Outcome(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    EXCEPTION = "EXCEPTION"
    UNRECOGNIZED = "UNRECOGNIZED EXCEPTION"


_OUTCOME_STYLES: dict[Outcome, tuple[Style, ...]] = {
    Outcome.PASS: (Style.GREEN,),
    Outcome.FAIL: (Style.RED,),
    Outcome.EXCEPTION: (Style.YELLOW,),
    Outcome.UNRECOGNIZED: (Style.RED, Style.BOLD),
}


@dataclass
class FailureRecord:
    test_name: str
    message: str


@dataclass
class TestResult:
    __test__ = False

    name: str
    outcome: Outcome
    message: str | None = None


@dataclass
class RunSummary:
    results: list[TestResult] = field(default_factory=list)
    failures: list[FailureRecord] = field(default_factory=list)
    interrupted: bool = False

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return self.total - len(self.failures)

    @property
    def all_passed(self) -> bool:
        return not self.failures and not self.interrupted


class Runner:
    """Runs every registered test once, in name order, and prints a report.

    Each test runs inside its own failure boundary: whatever it raises is
    classified and recorded, and the next test runs regardless.
    """

    def __init__(
        self,
        registry: Registry | None = None,
        stream: TextIO | None = None,
        color: bool = True,
        logger: logging.Logger | None = None,
    ):
        self.registry = registry if registry is not None else default_registry
        self.stream = stream
        self.color = color
        self.logger = logger or logging.getLogger(__name__)
        self.interrupted = False

    def run(self) -> RunSummary:
        entries = self.registry.seal()
        self.logger.debug(f"Starting run of {len(entries)} test(s)")

        summary = RunSummary()
        try:
            for entry in entries:
                result = self._run_test(entry)
                summary.results.append(result)
                if result.outcome is not Outcome.PASS:
                    summary.failures.append(
                        FailureRecord(test_name=entry.name, message=result.message)
                    )
        except KeyboardInterrupt:
            self.interrupted = True
            summary.interrupted = True
            self._write("\n")
            self.logger.warning(
                f"Run interrupted by user (Ctrl+C) after {summary.total} of "
                f"{len(entries)} test(s)"
            )

        self._report(summary)
        self.logger.debug(
            f"Run finished: {summary.passed}/{summary.total} test(s) passed"
        )
        return summary

    def _run_test(self, entry: TestEntry) -> TestResult:
        self._write(f'Running test "{entry.name}" . . . ')
        self.logger.debug(f"Running test '{entry.name}'")

        try:
            entry.procedure()
            result = TestResult(entry.name, Outcome.PASS)
        except TestFailure as tf:
            result = TestResult(entry.name, Outcome.FAIL, tf.render())
        except Exception as e:
            self.logger.debug(f"Test '{entry.name}' raised", exc_info=True)
            result = TestResult(
                entry.name,
                Outcome.EXCEPTION,
                f"Unexpected exception {type(e).__name__}: {_describe_error(e)}",
            )
        except KeyboardInterrupt:
            raise
        except BaseException as e:
            self.logger.debug(
                f"Test '{entry.name}' raised {type(e).__name__}", exc_info=True
            )
            result = TestResult(entry.name, Outcome.UNRECOGNIZED, UNKNOWN_ERROR_MESSAGE)

        self._write(
            paint(f"{result.outcome.value}\n", *_OUTCOME_STYLES[result.outcome])
        )
        self.logger.debug(f"Test '{entry.name}': {result.outcome.value}")
        return result

    def _report(self, summary: RunSummary) -> None:
        if summary.failures:
            self._write("\n- - - Failures - - -\n")
            for failure in summary.failures:
                self._write(f" -> [{failure.test_name}] {failure.message}\n")
        self._write("\n")
        self._write(f"Total passed: [{summary.passed} / {summary.total}]\n")

    def _write(self, text: str) -> None:
        if not self.color:
            text = strip_ansi(text)
        stream = self.stream or sys.stdout
        stream.write(text)
        stream.flush()


def exit_status(summary: RunSummary, strict: bool = False) -> int:
    """Process exit code for a finished run.

    Without ``strict`` the run always reports success; outcomes are
    communicated through the printed report only.
    """
    if strict and not summary.all_passed:
        return 1
    return 0


def main() -> int:
    """Run every test in the process-wide registry and return the exit code."""
    return exit_status(Runner().run())
