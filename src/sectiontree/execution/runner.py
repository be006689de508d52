"""
Run loop that explores every leaf path of each registered test case.

A test case is invoked repeatedly, each time with a fresh ExecutionState.
Every invocation enters the first unvisited section at each nesting level it
reaches and completes exactly one new leaf path. When an invocation finishes
without completing a new path, the section tree is exhausted and the test
case is done.

Faults escaping an invocation are reported and recorded, and exploration
continues: section exit bookkeeping runs while the fault unwinds, so the
failing leaf is marked done and never retried.
"""

import logging

from sectiontree.config import RunConfig
from sectiontree.core.state import ExecutionState
from sectiontree.execution.models import FailureReport, RunSummary, TestCaseResult
from sectiontree.execution.reporter import Reporter
import sectiontree.structure.registry as registry_module
from sectiontree.structure.registry import TestCase, TestCaseRegistry

logger = logging.getLogger(__name__)


class Runner:
    """Drives repeated invocation of test cases until their trees are exhausted."""

    def __init__(self, config: RunConfig | None = None):
        self.config = config if config is not None else RunConfig()
        self.reporter = Reporter(self.config)

    def invoke(self, test_case: TestCase) -> tuple[ExecutionState, FailureReport | None]:
        """
        Call the test body once with a fresh ExecutionState.

        Params:
            test_case: Test case to invoke

        Returns:
            The invocation's state and its failure report, if it failed
        """
        state = ExecutionState(test_case.sections)
        try:
            test_case.entrypoint(state)
        except Exception as e:
            return state, self.reporter.report(test_case, state, e)
        return state, None

    def run_test_case(self, test_case: TestCase) -> TestCaseResult:
        """
        Invoke `test_case` until no unvisited section remains.

        A test case without sections runs exactly once.

        Params:
            test_case: Test case to run

        Returns:
            TestCaseResult with the invocation count and every failure
        """
        failures: list[FailureReport] = []
        invocations = 0

        while True:
            invocations += 1
            logger.debug(
                "Invocation %d of %s", invocations, test_case.format_location()
            )
            state, failure = self.invoke(test_case)
            if failure is not None:
                failures.append(failure)

            # Only an invocation that completes no new path ends the loop
            if not state.path_completed:
                break

        logger.debug(
            "Finished %s after %d invocations with %d failures",
            test_case.description,
            invocations,
            len(failures),
        )
        return TestCaseResult(
            file=test_case.file,
            line=test_case.line,
            description=test_case.description,
            invocations=invocations,
            failures=failures,
        )

    def run(self, registry: TestCaseRegistry) -> RunSummary:
        """Seal `registry` and run every test case in registration order."""
        registry.seal()
        results = [self.run_test_case(test_case) for test_case in registry]
        return RunSummary(results=results)


def run_all(
    registry: TestCaseRegistry | None = None, config: RunConfig | None = None
) -> bool:
    """
    Run every registered test case to exhaustion.

    Params:
        registry: Registry to run (defaults to the process-wide one)
        config: Run settings (defaults to USER level reports on stderr)

    Returns:
        True if no invocation of any test case failed
    """
    target = registry if registry is not None else registry_module.default_registry
    summary = Runner(config).run(target)
    return summary.passed
