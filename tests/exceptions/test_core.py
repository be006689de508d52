"""
Tests for the exception taxonomy and its message formatting.
"""

from sectiontree.exceptions import (
    AssertionFailure,
    CheckFailed,
    CheckLocation,
    ErrorLevel,
    ExpectedFaultMissing,
    FailureKind,
    RegistryClosedError,
    SectionTreeError,
    TestFileLoadError,
    UnexpectedFault,
)


class TestErrorLevel:
    """Tests for ErrorLevel enum."""

    def test_levels_exist(self):
        assert ErrorLevel.USER.value == "user"
        assert ErrorLevel.DEVELOPER.value == "developer"


class TestCheckLocation:
    """Tests for CheckLocation dataclass."""

    def test_format_location(self):
        location = CheckLocation(file="suite.py", line=7, expression="x > 0")
        assert location.format_location() == "suite.py:7"


class TestExpectationFailures:
    """Tests for CheckFailed and ExpectedFaultMissing."""

    def test_check_failed_message(self):
        error = CheckFailed("suite.py", 7, "x > 0")

        assert str(error) == "suite.py:7: ASSERTION FAILED\n  x > 0"
        assert (error.file, error.line, error.expression) == ("suite.py", 7, "x > 0")
        assert error.kind == FailureKind.CHECK_FAILED

    def test_expected_fault_missing_message(self):
        error = ExpectedFaultMissing("suite.py", 9, "parse('1')", (ValueError,))

        assert str(error) == "suite.py:9: No exception caught in\n  parse('1')"
        assert error.expected == (ValueError,)
        assert error.kind == FailureKind.EXPECTED_FAULT_MISSING

    def test_hierarchy(self):
        assert issubclass(CheckFailed, AssertionFailure)
        assert issubclass(ExpectedFaultMissing, AssertionFailure)
        assert issubclass(AssertionFailure, SectionTreeError)
        assert issubclass(UnexpectedFault, SectionTreeError)
        assert not issubclass(CheckFailed, AssertionError)


class TestOtherErrors:
    """Tests for wrapper and bootstrap errors."""

    def test_unexpected_fault_wraps_original(self):
        original = OSError("disk full")
        error = UnexpectedFault(original)

        assert error.original is original
        assert error.__cause__ is original
        assert str(error) == "disk full"
        assert error.kind == FailureKind.UNEXPECTED_FAULT

    def test_registry_closed_message(self):
        error = RegistryClosedError("late case")
        assert "late case" in str(error)
        assert "sealed" in str(error)

    def test_file_load_error_message(self):
        error = TestFileLoadError("tests_x.py", "no such file")
        assert str(error) == "Cannot load test file 'tests_x.py': no such file"
        assert error.path == "tests_x.py"
