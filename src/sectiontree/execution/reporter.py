"""
Failure reporting for test invocations.

The reporter classifies a fault that escaped a test body into the three
failure kinds and renders it together with the chain of sections that was
active when it was raised. The chain identifies which leaf path was being
explored, which is what a reader needs to reproduce the failure.

Report layout:

    Caught exception of type 'RuntimeError'
      boom
    Testcase state:
       tests/test_stack.py:10: stack operations
       -> tests/test_stack.py:14: pop on empty stack
"""

import logging
import traceback

from sectiontree.config import RunConfig
from sectiontree.core.state import ExecutionState
from sectiontree.exceptions import (
    AssertionFailure,
    CheckFailed,
    ErrorLevel,
    UnexpectedFault,
)
from sectiontree.execution.models import FailureReport, SectionRecord
from sectiontree.structure.registry import TestCase

logger = logging.getLogger(__name__)

MARKER = "-> "
INDENT = 3


def exception_type_name(exc: BaseException) -> str:
    """Display name of an exception's type; builtins are shown unqualified."""
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def classify(
    exc: Exception, test_file: str | None = None
) -> AssertionFailure | UnexpectedFault:
    """
    Map a fault escaping a test body onto the failure taxonomy.

    Expectation failures are returned as they are. A failing bare `assert`
    becomes CheckFailed at the innermost frame inside `test_file`, so an
    AssertionError raised by a helper is reported at the test line that called
    it. Anything else is wrapped in UnexpectedFault.

    Params:
        exc: Fault caught at the top of an invocation
        test_file: File of the test case; the innermost frame is used when omitted
            or when no frame belongs to it

    Returns:
        The classified failure
    """
    if isinstance(exc, AssertionFailure):
        return exc

    if isinstance(exc, AssertionError) and exc.__traceback__ is not None:
        frames = traceback.extract_tb(exc.__traceback__)
        in_test_file = [f for f in frames if f.filename == test_file]
        frame = in_test_file[-1] if in_test_file else frames[-1]
        expression = (frame.line or "").strip()
        if expression.startswith("assert "):
            expression = expression[len("assert ") :]
        if exc.args:
            expression = f"{expression}\n  {exc}"
        failure = CheckFailed(frame.filename, frame.lineno or 0, expression)
        failure.__cause__ = exc
        return failure

    return UnexpectedFault(exc)


def snapshot_chain(state: ExecutionState) -> list[SectionRecord]:
    return [
        SectionRecord(file=node.file, line=node.line, description=node.description)
        for node in state.chain
    ]


class Reporter:
    """Renders failure blocks and writes them to the configured stream."""

    def __init__(self, config: RunConfig | None = None):
        self.config = config if config is not None else RunConfig()

    def render_chain(self, test_case: TestCase, chain: list[SectionRecord]) -> str:
        """
        Render the test case followed by its active sections, root first.

        The innermost active entry is marked; the test case line carries the
        marker when no section is active.

        Params:
            test_case: Test case that was being invoked
            chain: Active sections at failure time

        Returns:
            Multi-line chain text ending with a newline
        """
        lines = ["Testcase state:"]
        root_marker = "" if chain else MARKER
        lines.append(f"{root_marker:>{INDENT}}{test_case.format_location()}")
        for depth, record in enumerate(chain, start=1):
            marker = MARKER if depth == len(chain) else ""
            location = f"{record.file}:{record.line}: {record.description}"
            lines.append(f"{marker:>{INDENT + INDENT * depth}}{location}")
        return "\n".join(lines) + "\n"

    def render(
        self,
        test_case: TestCase,
        chain: list[SectionRecord],
        raised: Exception,
        failure: AssertionFailure | UnexpectedFault,
    ) -> str:
        """Full diagnostic block for one failing invocation."""
        parts = [f"Caught exception of type '{exception_type_name(raised)}'\n"]

        if isinstance(failure, AssertionFailure):
            parts.append(f"{failure}\n")
        elif str(failure.original):
            parts.append(f"  {failure.original}\n")

        parts.append(self.render_chain(test_case, chain))

        if self.config.error_level == ErrorLevel.DEVELOPER:
            parts.append("Traceback:\n")
            parts.extend(traceback.format_exception(raised))

        return "".join(parts)

    def build_report(
        self, test_case: TestCase, state: ExecutionState, raised: Exception
    ) -> FailureReport:
        """Classify `raised` and capture the active chain of `state`."""
        failure = classify(raised, test_case.file)
        chain = snapshot_chain(state)
        rendered = self.render(test_case, chain, raised, failure)

        if isinstance(failure, AssertionFailure):
            file, line, expression = failure.file, failure.line, failure.expression
        else:
            file = line = expression = None
            if raised.__traceback__ is not None:
                frame = traceback.extract_tb(raised.__traceback__)[-1]
                file, line = frame.filename, frame.lineno

        return FailureReport(
            kind=failure.kind,
            exception_type=exception_type_name(raised),
            message=str(failure),
            file=file,
            line=line,
            expression=expression,
            chain=chain,
            rendered=rendered,
        )

    def report(
        self, test_case: TestCase, state: ExecutionState, raised: Exception
    ) -> FailureReport:
        """
        Report a failing invocation on the configured stream.

        Params:
            test_case: Test case whose invocation failed
            state: Execution state of the failed invocation, chain still intact
            raised: Fault caught by the runner

        Returns:
            FailureReport describing the failure
        """
        failure_report = self.build_report(test_case, state, raised)
        stream = self.config.output()
        stream.write(failure_report.rendered)
        stream.flush()
        logger.debug(
            "Reported %s in %s", failure_report.kind.value, test_case.description
        )
        return failure_report
