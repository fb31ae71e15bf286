# termnav/navigation.py
"""Navigation stack of screens, like a navigation controller for the terminal."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from termnav.config import settings
from termnav.screens import Displayable
from termnav.terminal import Terminal

logger = logging.getLogger(__name__)


class NavigationStack(Displayable):
    """Ordered stack of screens where only the last one is visible.

    Pushing or popping re-executes the stack, which shows the title header
    (if any) and runs the new top screen. A screen's callback may push or pop
    on the same stack, so a session is a synchronous chain of executions.

    Example:
        nav = NavigationStack(title="Menu")
        nav.push_screen(Screen("Enter your name:", parse_text, greet), animated=True)
    """

    def __init__(
        self,
        title: str = "",
        animation_delay: Optional[float] = None,
        screens: Optional[Iterable[Displayable]] = None,
        terminal: Optional[Terminal] = None,
    ):
        if animation_delay is None:
            animation_delay = settings.animation_delay
        if not math.isfinite(animation_delay) or animation_delay < 0:
            raise ValueError(f"animation_delay must be a finite number >= 0, got {animation_delay}")

        self.title = title
        self.animation_delay = animation_delay
        self.screens: list[Displayable] = list(screens or [])
        self.terminal = terminal or Terminal()

    @property
    def bottom_screen(self) -> Optional[Displayable]:
        """First screen pushed (the root), or None when empty."""
        return self.screens[0] if self.screens else None

    @property
    def top_screen(self) -> Optional[Displayable]:
        """Last screen pushed; the one that gets executed."""
        return self.screens[-1] if self.screens else None

    visible_screen = top_screen

    def push_screen(self, screen: Displayable, animated: bool) -> None:
        """Add screen on top of the stack and execute it.

        With animated=True, block for animation_delay seconds first.
        """
        if animated:
            self.terminal.sleep(self.animation_delay)
        self.screens.append(screen)
        logger.debug("Pushed %r (depth %d)", screen, len(self.screens))
        self.execute()

    def pop_screen(self, animated: bool) -> Optional[Displayable]:
        """Remove the top screen and execute the one below it.

        Returns the removed screen, or None if the stack was already empty
        (in which case nothing waits and nothing is executed).
        """
        if not self.screens:
            return None
        if animated:
            self.terminal.sleep(self.animation_delay)
        removed = self.screens.pop()
        logger.debug("Popped %r (depth %d)", removed, len(self.screens))
        self.execute()
        return removed

    def execute(self) -> None:
        """Print the title header, then execute the visible screen."""
        # Re-read on every call: callbacks may have pushed/popped meanwhile
        visible = self.top_screen
        if visible is None:
            return
        if self.title:
            self.terminal.print_line(f" {self.title}")
            self.terminal.print_line(settings.separator)
        visible.execute()

    def is_empty(self) -> bool:
        return not self.screens

    def __len__(self) -> int:
        return len(self.screens)

    def __repr__(self) -> str:
        return f"NavigationStack(title={self.title!r}, depth={len(self.screens)})"
