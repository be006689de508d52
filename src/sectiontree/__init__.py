"""
SectionTree - nested test sections discovered by re-running the test body

A test case body declares sections inline; the runner re-invokes the body once
per leaf path until every section has been visited.
"""

from importlib.metadata import version

from sectiontree.assertions import check, expect_raises
from sectiontree.config import RunConfig
from sectiontree.core import ExecutionState, Guard, SectionNode
from sectiontree.exceptions import ErrorLevel
from sectiontree.execution import Runner, run_all
from sectiontree.structure import TestCaseRegistry, register, testcase

__version__ = version("sectiontree")

__all__ = [
    "__version__",
    "testcase",
    "register",
    "check",
    "expect_raises",
    "run_all",
    "Runner",
    "RunConfig",
    "ErrorLevel",
    "ExecutionState",
    "Guard",
    "SectionNode",
    "TestCaseRegistry",
]
