"""
SectionTree execution components.

This package provides the run loop, failure reporting and result records.
"""

from sectiontree.execution.models import (
    FailureReport,
    RunSummary,
    SectionRecord,
    TestCaseResult,
)
from sectiontree.execution.reporter import Reporter, classify, exception_type_name
from sectiontree.execution.runner import Runner, run_all

__all__ = [
    "Runner",
    "run_all",
    "Reporter",
    "classify",
    "exception_type_name",
    "FailureReport",
    "RunSummary",
    "SectionRecord",
    "TestCaseResult",
]
