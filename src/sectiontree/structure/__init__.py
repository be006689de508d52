"""
SectionTree structure components.

This package provides the test case registry and the bootstrap step that
populates it from test files.
"""

from sectiontree.structure.loader import load_test_file, load_test_files
from sectiontree.structure.registry import (
    TestCase,
    TestCaseRegistry,
    default_registry,
    register,
    testcase,
)

__all__ = [
    "TestCase",
    "TestCaseRegistry",
    "default_registry",
    "register",
    "testcase",
    "load_test_file",
    "load_test_files",
]
