"""
Core type definitions for SectionTree.

This module contains type aliases shared by the registry and the runner.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sectiontree.core.state import ExecutionState

Entrypoint = Callable[["ExecutionState"], None]

Location = tuple[str, int]
