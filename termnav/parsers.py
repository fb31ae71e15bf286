# termnav/parsers.py
"""Common parse functions for screens. Each returns None on rejected input."""
from typing import Any, Callable, Iterable, Optional

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


def parse_any(raw: str) -> str:
    """Accept the raw input as-is, including an empty line."""
    return raw


def parse_text(raw: str) -> Optional[str]:
    """Stripped text; blank input is rejected."""
    text = raw.strip()
    return text or None


def parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_float(raw: str) -> Optional[float]:
    try:
        return float(raw.strip())
    except ValueError:
        return None


def parse_yes_no(raw: str) -> Optional[bool]:
    answer = raw.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    return None


def parse_choice(options: Iterable[Any]) -> Callable[[str], Optional[Any]]:
    """Build a parser accepting only one of `options`.

    String options match case-insensitively and return the option as given;
    int options match digit input (e.g. parse_choice([1, 2]) accepts "2").
    Any other option matches its str() form, so parse_choice([0.5]) accepts "0.5".
    """
    allowed = list(options)

    def parse(raw: str) -> Optional[Any]:
        text = raw.strip()
        for option in allowed:
            if isinstance(option, str):
                if option.lower() == text.lower():
                    return option
            elif isinstance(option, int) and not isinstance(option, bool):
                if parse_int(text) == option:
                    return option
            elif str(option) == text:
                return option
        return None

    return parse
