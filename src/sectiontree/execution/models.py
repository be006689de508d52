"""
Result records produced by the runner and the reporter.
"""

from pydantic import BaseModel, ConfigDict

from sectiontree.exceptions import FailureKind


class SectionRecord(BaseModel):
    """Snapshot of one section on the active chain at failure time."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    description: str


class FailureReport(BaseModel):
    """One failing invocation of a test case."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    exception_type: str
    message: str
    file: str | None = None
    line: int | None = None
    expression: str | None = None
    chain: list[SectionRecord] = []
    rendered: str = ""

    @property
    def leaf(self) -> SectionRecord | None:
        """Innermost active section, or None when the failure was outside any section."""
        return self.chain[-1] if self.chain else None


class TestCaseResult(BaseModel):
    """Outcome of running one test case to exhaustion."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    description: str
    invocations: int
    failures: list[FailureReport] = []

    @property
    def passed(self) -> bool:
        return not self.failures


class RunSummary(BaseModel):
    """Outcome of running every registered test case."""

    model_config = ConfigDict(frozen=True)

    results: list[TestCaseResult] = []

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)
