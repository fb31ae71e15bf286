# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add repo root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


class FakeTerminal:
    """Scripted input, recorded output and sleeps."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.output: list[str] = []
        self.sleeps: list[float] = []
        self.reads = 0

    def print_line(self, text: str) -> None:
        self.output.append(text)

    def read_line(self) -> str:
        self.reads += 1
        if not self.lines:
            return ""
        return self.lines.pop(0)

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)


@pytest.fixture
def fake_terminal():
    return FakeTerminal()


@pytest.fixture
def make_terminal():
    def _make(*lines):
        return FakeTerminal(lines)
    return _make
