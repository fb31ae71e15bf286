# termnav/app.py
"""Application entry point: executes a root screen."""
import logging
from typing import Optional

from termnav.screens import Displayable

logger = logging.getLogger(__name__)


class Application:
    """Holds the screen executed when the app starts.

    The root may be a plain Screen or a NavigationStack. run() does not loop;
    the session continues only as far as screen callbacks push, pop or
    execute further screens.
    """

    def __init__(self, root_screen: Optional[Displayable] = None):
        self.root_screen = root_screen

    def run(self) -> None:
        if self.root_screen is None:
            logger.debug("No root screen, nothing to run")
            return
        self.root_screen.execute()
