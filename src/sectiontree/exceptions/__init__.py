"""
SectionTree exception classes.

This package provides all exception types used by the section traversal,
the runner and the expectation primitives.
"""

from sectiontree.exceptions.core import (
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

__all__ = [
    "SectionTreeError",
    "AssertionFailure",
    "CheckFailed",
    "CheckLocation",
    "ExpectedFaultMissing",
    "UnexpectedFault",
    "RegistryClosedError",
    "TestFileLoadError",
    "ErrorLevel",
    "FailureKind",
]
