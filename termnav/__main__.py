# termnav/__main__.py
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from termnav.app import Application
from termnav.config import settings
from termnav.navigation import NavigationStack
from termnav.parsers import parse_choice, parse_int, parse_text
from termnav.screens import Screen
from termnav.terminal import Terminal

app = typer.Typer(help="termnav - navigation stacks of terminal screens")
console = Console()

BACK_OPTION = "b"
QUIT_OPTION = "q"


def setup_logging(verbose: bool) -> None:
    """Route log records through rich. The library itself never configures logging."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_menu(
    terminal: Terminal,
    title: str = "Menu",
    delay: Optional[float] = None,
    animated: bool = True,
) -> NavigationStack:
    """Menu stack: pick 1 or 2, then go back or quit from the detail screen."""
    nav = NavigationStack(title=title, animation_delay=delay, terminal=terminal)

    def on_detail(option: str):
        if option == BACK_OPTION:
            nav.pop_screen(animated=animated)
        else:
            terminal.print_line("Goodbye!")

    def on_pick(choice: int):
        terminal.print_line(f"chose {choice}")
        detail = Screen(
            f"Option {choice} selected. Type '{BACK_OPTION}' to go back or '{QUIT_OPTION}' to quit",
            parse_choice([BACK_OPTION, QUIT_OPTION]),
            on_detail,
            terminal=terminal,
        )
        nav.push_screen(detail, animated=animated)

    nav.screens.append(Screen("Pick 1 or 2", parse_choice([1, 2]), on_pick, terminal=terminal))
    return nav


def build_greeter(terminal: Terminal, delay: Optional[float] = None) -> NavigationStack:
    """Name then age, chained by pushing the second screen from the first."""
    nav = NavigationStack(title="Greeter", animation_delay=delay, terminal=terminal)

    def ask_age(name: str):
        age_screen = Screen(
            "How old are you?",
            parse_int,
            lambda age: terminal.print_line(f"Hi {name}, you're {age} years old"),
            terminal=terminal,
        )
        nav.push_screen(age_screen, animated=True)

    nav.screens.append(Screen("What's your name?", parse_text, ask_age, terminal=terminal))
    return nav


def run_app(root: NavigationStack) -> None:
    try:
        Application(root).run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Show debug logging"),
):
    """Interactive demos built from screens and navigation stacks."""
    setup_logging(verbose)


@app.command()
def menu(
    title: str = typer.Option("Menu", "--title", "-t", help="Header printed above each screen"),
    delay: Optional[float] = typer.Option(None, "--delay", "-d", min=0, help="Animation delay in seconds"),
    animated: bool = typer.Option(True, "--animated/--no-animated", help="Wait before push/pop"),
):
    """Pick an option from a menu, then go back or quit."""
    run_app(build_menu(Terminal(console), title=title, delay=delay, animated=animated))


@app.command()
def greet(
    delay: Optional[float] = typer.Option(None, "--delay", "-d", min=0, help="Animation delay in seconds"),
):
    """Ask for a name and an age, then say hi."""
    run_app(build_greeter(Terminal(console), delay=delay))


if __name__ == "__main__":
    app()
