"""
Per-invocation traversal cursor.

An ExecutionState is created fresh for every call of a test body. It records
the chain of sections currently entered and whether a new leaf path has
already been completed during this call.
"""

import inspect

from sectiontree.core.guard import Guard
from sectiontree.core.section_node import SectionNode, SectionSite, SectionTable


class ExecutionState:
    """Active section chain and early-termination flag of one invocation.

    Params:
        sections: Section table of the test case being invoked. A private
            table is used when omitted, which is enough for a single call.
    """

    def __init__(self, sections: SectionTable | None = None):
        self.path_completed = False
        self.chain: list[SectionNode] = []
        self.sections = sections if sections is not None else SectionTable()

    @property
    def active_head(self) -> SectionNode | None:
        return self.chain[0] if self.chain else None

    @property
    def active_cursor(self) -> SectionNode | None:
        return self.chain[-1] if self.chain else None

    def push(self, node: SectionNode) -> None:
        """Link `node` as the new innermost entry of the active chain."""
        node.previous_active = self.active_cursor
        self.chain.append(node)

    def pop(self, node: SectionNode) -> None:
        """Restore the cursor to the section active before `node` entered."""
        if node in self.chain:
            del self.chain[self.chain.index(node) :]

    def section(self, description: str) -> Guard:
        """
        Declare a section at the caller's source position.

        The caller's file, line and bytecode offset identify the section across
        invocations, so the same node is reused each time this line runs.

        Params:
            description: Human readable section name

        Returns:
            Guard to be used as a context manager around the section body
        """
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        if caller is None:
            site = SectionSite(file="<unknown>", line=0)
        else:
            site = SectionSite(
                file=caller.f_code.co_filename,
                line=caller.f_lineno,
                offset=caller.f_lasti,
            )
        del frame, caller

        node = self.sections.get_or_create(site, description)
        return Guard(node, self)
