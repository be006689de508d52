"""Settings shared by the runner and the reporter."""

import sys
from typing import TextIO

from attrs import field, frozen

from sectiontree.exceptions import ErrorLevel


@frozen
class RunConfig:
    """Settings of one run.

    `stream` is resolved at write time so a replaced `sys.stderr` (e.g. under
    capture) is honoured when none is given explicitly.
    """

    stream: TextIO | None = field(default=None, eq=False)
    error_level: ErrorLevel = ErrorLevel.USER

    def output(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stderr
