"""
Progress reporting for batch conversions.
"""

from typing import Callable, Optional, TextIO

import sys


ProgressCallback = Callable[[int, int], None]
"""
Called as ``progress(done, total)`` after each recipe file has been processed.
"""


class ProgressBar:
    """
    A :py:data:`ProgressCallback` which draws a text progress bar, e.g.::

        [=========================                         ] 50% (3/6)

    A heading line is written on the initial ``done == 0`` call. The bar is
    redrawn in place using a carriage return. Call
    :py:meth:`finish` to move onto a new line once processing is complete.
    """

    def __init__(self, stream: Optional[TextIO] = None, width: int = 50) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.width = width

    def format(self, done: int, total: int) -> str:
        percent = done * 100 // total if total else 100
        filled = percent * self.width // 100
        bar = "=" * filled + " " * (self.width - filled)
        return f"[{bar}] {percent}% ({done}/{total})"

    def __call__(self, done: int, total: int) -> None:
        if done == 0:
            self.stream.write(f"Converting {total} cooklang files...\n")
        self.stream.write("\r" + self.format(done, total))
        self.stream.flush()

    def finish(self) -> None:
        self.stream.write("\n")
        self.stream.flush()
