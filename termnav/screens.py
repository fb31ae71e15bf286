# termnav/screens.py
"""Screens: a prompt, a parse step and a completion callback."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

from termnav.terminal import Terminal

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Parser: raw input -> value, or None when the input is rejected.
Parser = Callable[[str], Optional[T]]
# Completer: consumes a parsed value.
Completer = Callable[[T], None]


class Displayable(ABC):
    """Anything that can be shown in the terminal: a Screen or a NavigationStack."""

    @abstractmethod
    def execute(self) -> None:
        """Run this screen's interaction."""
        pass


class Screen(Displayable, Generic[T]):
    """A single prompt/parse/react step, like a view controller for the terminal.

    Example:
        age = Screen("How old are you?", parse_int, lambda n: print(f"You're {n} years old"))
        age.execute()

    Screens can be chained by executing (or pushing) the next one from the
    completion callback:

        def ask_age(name):
            Screen("How old are you?", parse_int,
                   lambda age: print(f"Hi {name}, you're {age} years old")).execute()

        Screen("What's your name?", parse_text, ask_age).execute()
    """

    def __init__(
        self,
        prompt: str,
        parse: Parser[T],
        on_complete: Completer[T],
        terminal: Optional[Terminal] = None,
    ):
        self.prompt = prompt
        self.parse = parse
        self.on_complete = on_complete
        self.terminal = terminal or Terminal()

    def execute(self) -> None:
        """Show the prompt, read a line and hand the parsed value to on_complete.

        Input that fails to parse ends the step silently: no output, no
        callback, no retry.
        """
        self.terminal.print_line(self.prompt)
        raw = self.terminal.read_line()

        value = self.parse(raw)
        if value is None:
            logger.debug("Input rejected for %r: %r", self.prompt, raw)
            return

        self.on_complete(value)

    def __repr__(self) -> str:
        return f"Screen(prompt={self.prompt!r})"
