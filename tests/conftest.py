"""Shared pytest fixtures for the OEIS lookup tests."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

_project_src = Path(__file__).parent.parent / "src"
if str(_project_src) not in sys.path:
    sys.path.insert(0, str(_project_src))

from oeis_lookup.clients.session import reset_shared_session  # noqa: E402

DATA_DIR = Path(__file__).parent / "data"

SEARCH_URL = "https://oeis.org/search"

BANNER = [
    "# Greetings from The On-Line Encyclopedia of Integer Sequences! http://oeis.org/",
    "",
    "Search: id:a000001",
    "Showing 1-1 of 1",
    "",
]
FOOTER = "# Content is available under The OEIS End-User License Agreement: http://oeis.org/LICENSE"


@pytest.fixture(autouse=True)
def _fresh_session() -> Iterator[None]:
    """Give every test its own shared requests session."""
    reset_shared_session()
    yield
    reset_shared_session()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def fibonacci_text() -> str:
    """Response body for A000045 (Fibonacci numbers)."""
    return (DATA_DIR / "a000045.txt").read_text(encoding="utf-8")


@pytest.fixture
def signed_text() -> str:
    """Response body for A033999, a signed sequence."""
    return (DATA_DIR / "a033999.txt").read_text(encoding="utf-8")


@pytest.fixture
def no_results_text() -> str:
    return (DATA_DIR / "no_results.txt").read_text(encoding="utf-8")


@pytest.fixture
def make_response() -> Callable[..., str]:
    """Wrap record lines into a complete response body."""

    def _make(*lines: str) -> str:
        return "\n".join([*BANNER, *lines, "", FOOTER]) + "\n"

    return _make
