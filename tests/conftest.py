import io

import pytest
from rich.console import Console

from restaurant.session import Session


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def output(console):
    """Return a reader for everything printed to the console so far."""
    return lambda: console.file.getvalue()


@pytest.fixture
def make_session(console):
    """Build a session whose prompts are answered by the given lines."""

    def _make(*answers: str, **kwargs) -> Session:
        stream = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return Session(console=console, stream=stream, **kwargs)

    return _make
