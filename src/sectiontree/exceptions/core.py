"""
Exception classes for SectionTree test execution.

This module defines the error taxonomy raised by expectation primitives,
the wrapper used for any other fault escaping a test invocation, and the
errors raised while bootstrapping the test case registry.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Failure report detail level."""

    USER = "user"  # Check location, expression and section chain only
    DEVELOPER = "developer"  # Adds the Python traceback of the failure


class FailureKind(Enum):
    """Classification of a failing invocation."""

    CHECK_FAILED = "check_failed"
    EXPECTED_FAULT_MISSING = "expected_fault_missing"
    UNEXPECTED_FAULT = "unexpected_fault"


@dataclass
class CheckLocation:
    """
    Source position of an expectation primitive.

    Params:
        file: Python file containing the check
        line: Line number of the check
        expression: Source text of the checked expression
    """

    file: str
    line: int
    expression: str

    def format_location(self) -> str:
        return f"{self.file}:{self.line}"


class SectionTreeError(Exception):
    """Base exception for all SectionTree errors."""

    pass


class AssertionFailure(SectionTreeError):
    """Base for expectation failures raised from inside a test body."""

    kind: FailureKind = FailureKind.CHECK_FAILED
    headline: str = "ASSERTION FAILED"

    def __init__(self, file: str, line: int, expression: str):
        """
        Initialize the exception.

        Params:
            file: Python file containing the failing primitive
            line: Line number of the failing primitive
            expression: Source text of the checked expression or operation
        """
        self.location = CheckLocation(file=file, line=line, expression=expression)
        super().__init__(f"{file}:{line}: {self.headline}\n  {expression}")

    @property
    def file(self) -> str:
        return self.location.file

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def expression(self) -> str:
        return self.location.expression


class CheckFailed(AssertionFailure):
    """Raised when a boolean expectation evaluates false."""

    kind = FailureKind.CHECK_FAILED
    headline = "ASSERTION FAILED"


class ExpectedFaultMissing(AssertionFailure):
    """Raised when an operation expected to fault completed without faulting."""

    kind = FailureKind.EXPECTED_FAULT_MISSING
    headline = "No exception caught in"

    def __init__(
        self,
        file: str,
        line: int,
        expression: str,
        expected: tuple[type[BaseException], ...] = (),
    ):
        """
        Initialize the exception.

        Params:
            file: Python file containing the failing primitive
            line: Line number of the failing primitive
            expression: Source text of the operation that did not fault
            expected: Fault types that were expected
        """
        self.expected = expected
        super().__init__(file, line, expression)


class UnexpectedFault(SectionTreeError):
    """Wraps any other fault that escaped a test invocation."""

    kind = FailureKind.UNEXPECTED_FAULT

    def __init__(self, original: BaseException):
        """
        Initialize the exception.

        Params:
            original: The fault raised by the test body
        """
        self.original = original
        super().__init__(str(original))
        self.__cause__ = original


class RegistryClosedError(SectionTreeError):
    """Raised when a test case is registered after the registry was sealed."""

    def __init__(self, description: str):
        self.description = description
        super().__init__(
            f"Cannot register test case '{description}': registry is sealed"
        )


class TestFileLoadError(SectionTreeError):
    """Raised when a test file cannot be imported during bootstrap."""

    __test__ = False

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The test file that failed to load
            reason: The underlying reason for the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load test file '{path}': {reason}")
