"""
Core SectionTree components.

This package provides the section traversal state machine: persistent
section nodes, the per-invocation execution state and the guard used at
each section site.
"""

from sectiontree.core.guard import Guard
from sectiontree.core.section_node import SectionNode, SectionSite, SectionTable
from sectiontree.core.state import ExecutionState
from sectiontree.core.types import Entrypoint, Location

__all__ = [
    "Guard",
    "SectionNode",
    "SectionSite",
    "SectionTable",
    "ExecutionState",
    "Entrypoint",
    "Location",
]
