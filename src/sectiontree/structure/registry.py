"""
Registry of declared test cases.

This module contains the TestCase record and the ordered registry that the
runner iterates. Registration order is declaration order; once the registry
is sealed no further test cases may be added.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from sectiontree.core.section_node import SectionTable
from sectiontree.core.types import Entrypoint, Location
from sectiontree.exceptions import RegistryClosedError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TestCase:
    """A registered test function together with its location and description."""

    __test__ = False

    file: str
    line: int
    description: str
    entrypoint: Entrypoint
    sections: SectionTable = field(default_factory=SectionTable, repr=False)

    def format_location(self) -> str:
        return f"{self.file}:{self.line}: {self.description}"


class TestCaseRegistry:
    """Ordered collection of test cases.

    The registry is filled during an explicit initialization step (importing
    test files, or calling `register` directly) and then sealed before the
    runner iterates it. Each TestCase owns the SectionTable that carries
    `done` markers across its invocations.
    """

    __test__ = False

    def __init__(self):
        self.test_cases: list[TestCase] = []
        self.sealed = False

    def register(
        self, location: Location, description: str, entrypoint: Entrypoint
    ) -> TestCase:
        """
        Append a test case to the registry.

        Params:
            location: (file, line) where the test case is declared
            description: Human readable test case name
            entrypoint: Function called with a fresh ExecutionState per invocation

        Returns:
            The registered TestCase handle

        Raises:
            RegistryClosedError: If the registry has already been sealed
        """
        if self.sealed:
            raise RegistryClosedError(description)

        file, line = location
        test_case = TestCase(
            file=file, line=line, description=description, entrypoint=entrypoint
        )
        self.test_cases.append(test_case)
        logger.debug("Registered test case %s", test_case.format_location())
        return test_case

    def seal(self) -> None:
        """Finish initialization; later registrations are rejected."""
        self.sealed = True

    def list_test_cases(self) -> list[TestCase]:
        return list(self.test_cases)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self.test_cases)

    def __len__(self) -> int:
        return len(self.test_cases)


default_registry = TestCaseRegistry()


def register(
    location: Location, description: str, entrypoint: Entrypoint
) -> TestCase:
    """Register a test case in the process-wide default registry."""
    return default_registry.register(location, description, entrypoint)


def testcase(
    description: str, registry: TestCaseRegistry | None = None
) -> Callable[[Entrypoint], Entrypoint]:
    """Decorator registering a test body under `description`.

    The function's definition site becomes the test case location. The
    function itself is returned unchanged.

    Params:
        description: Human readable test case name
        registry: Target registry (defaults to the process-wide one)

    Returns:
        Decorator that registers and returns the function
    """

    def decorator(func: Entrypoint) -> Entrypoint:
        target = registry if registry is not None else default_registry
        code = getattr(func, "__code__", None)
        if code is not None:
            location = (code.co_filename, code.co_firstlineno)
        else:
            location = (getattr(func, "__module__", "<unknown>"), 0)
        target.register(location, description, func)
        return func

    return decorator


testcase.__test__ = False
