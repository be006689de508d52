"""
Scoped controller deciding whether a section body runs on this invocation.

A Guard is created each time control reaches a section site. Entering it
performs the entry test and pushes the section onto the active chain; leaving
it, normally or while an exception propagates, performs the bookkeeping that
marks at most one new leaf path as completed per invocation.
"""

import logging
from types import TracebackType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sectiontree.core.section_node import SectionNode
    from sectiontree.core.state import ExecutionState

logger = logging.getLogger(__name__)


class Guard:
    """Context manager wrapping one section site for one invocation.

    Usage:
        with state.section("empty stack") as entered:
            if entered:
                ...

    `__enter__` returns whether the body should run. `__exit__` never
    suppresses the exception it sees.
    """

    def __init__(self, node: "SectionNode", state: "ExecutionState"):
        self.node = node
        self.state = state

    def should_enter(self) -> bool:
        """Entry test: the section is unvisited and no path completed yet."""
        return not self.node.done and not self.state.path_completed

    def __enter__(self) -> bool:
        if not self.should_enter():
            return False

        self.state.push(self.node)
        self.node.entered_this_run = True
        logger.debug("Entered section %s", self.node.format_location())
        return True

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        node = self.node
        state = self.state

        # The chain stays intact while unwinding so the failure can be reported
        if node.entered_this_run and exc_type is None:
            state.pop(node)

        node.entered_this_run = False

        if node.done or state.path_completed:
            return False

        state.path_completed = True
        node.done = True
        logger.debug("Completed leaf path at %s", node.format_location())
        return False
