"""
Persistent section records shared by every invocation of a test case.

A section declaration site is identified by where it sits in the source, so
the same node is found again on each re-invocation of the test body and its
`done` marker carries forward.
"""

from dataclasses import dataclass, field

from attrs import frozen


@frozen
class SectionSite:
    """Declaration site of a section: file, line and bytecode offset of the call."""

    file: str
    line: int
    offset: int = 0


@dataclass(eq=False)
class SectionNode:
    """
    One declared section of a test case.

    Params:
        site: Where the section is declared
        description: Human readable section name
        done: Set once a leaf path through this section completed; never reset
        entered_this_run: True only while the section is on the active chain
        previous_active: Section that was innermost when this one was entered
    """

    site: SectionSite
    description: str
    done: bool = False
    entered_this_run: bool = False
    previous_active: "SectionNode | None" = field(default=None, repr=False)

    @property
    def file(self) -> str:
        return self.site.file

    @property
    def line(self) -> int:
        return self.site.line

    def format_location(self) -> str:
        return f"{self.site.file}:{self.site.line}: {self.description}"


class SectionTable:
    """Section nodes of one test case, keyed by declaration site.

    Nodes are created the first time their site is reached and then reused for
    the lifetime of the table.
    """

    def __init__(self):
        self.nodes: dict[SectionSite, SectionNode] = {}

    def get_or_create(self, site: SectionSite, description: str) -> SectionNode:
        """
        Look up the node declared at `site`, creating it on first sight.

        Params:
            site: Declaration site of the section
            description: Section name used when the node is created

        Returns:
            The persistent SectionNode for this site
        """
        node = self.nodes.get(site)
        if node is None:
            node = SectionNode(site=site, description=description)
            self.nodes[site] = node
        return node

    def list_nodes(self) -> list[SectionNode]:
        """Nodes in first-seen order."""
        return list(self.nodes.values())

    def __len__(self) -> int:
        return len(self.nodes)
