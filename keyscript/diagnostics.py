"""Console sink for program output and runtime diagnostics.

PRINT writes program output through `write_line`; the evaluator reports
unresolved keywords and escaped returns through `report`. Both streams are
injectable so hosts and tests can capture them.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class Console:
    """Line-oriented output channel with a separate diagnostic stream."""

    __slots__ = ("_out", "_err")

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        # None means "the process stream at write time", which keeps
        # redirection (and pytest's capsys) working.
        self._out: TextIO | None = out
        self._err: TextIO | None = err

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def write_line(self, text: str) -> None:
        print(text, file=self.out)

    def report(self, message: str) -> None:
        """Log a diagnostic and write it to the error stream."""
        logger.info(message)
        print(message, file=self.err)
