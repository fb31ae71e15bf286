# termnav/terminal.py
"""Host terminal I/O used by screens: print a line, read a line, wait."""
import logging
import time
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class Terminal:
    """Thin wrapper over a rich Console plus a blocking sleep.

    Screens and stacks only talk to these three methods, so tests (or hosts
    with their own I/O) can hand in any object that provides them.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_line(self, text: str) -> None:
        """Print one line of text verbatim (no rich markup)."""
        self.console.print(text, markup=False, highlight=False)

    def read_line(self) -> str:
        """Read one line of input. End of input is treated as an empty line."""
        try:
            return self.console.input()
        except EOFError:
            logger.debug("Input exhausted, treating as empty line")
            return ""

    def sleep(self, seconds: float) -> None:
        """Block the calling thread for `seconds`."""
        if seconds <= 0:
            return
        time.sleep(seconds)
