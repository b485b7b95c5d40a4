"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from bibfront.models import BibEntry, Journal, PageRange, Paper  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

_MINIMAL_TAGS = {
    "author": "Doe, John",
    "title": "A Title",
    "journal": "J. Test",
    "url": "http://x",
    "year": "2020",
}


@pytest.fixture
def minimal_tags() -> dict[str, str]:
    """Smallest tag mapping that converts successfully."""
    return dict(_MINIMAL_TAGS)


@pytest.fixture
def make_entry() -> Callable[..., BibEntry]:
    """Factory for entries built on the minimal tag mapping.

    Keyword arguments override tags; a value of None removes the tag.
    """

    def _factory(citekey: str = "doe2020", entry_type: str = "article", **tags: str | None):
        merged: dict[str, str] = dict(_MINIMAL_TAGS)
        for name, value in tags.items():
            if value is None:
                merged.pop(name, None)
            else:
                merged[name] = value
        return BibEntry(entry_type, citekey, merged)

    return _factory


@pytest.fixture
def make_paper() -> Callable[..., Paper]:
    """Factory for papers with every optional field absent."""

    def _factory(**overrides: object) -> Paper:
        fields: dict[str, object] = {
            "authors": ("John Doe",),
            "pages": PageRange(),
            "volume": None,
            "series": None,
            "venue": Journal("J. Test"),
            "title": "A Title",
            "publisher": None,
            "year": 2020,
            "doi": "",
            "url": "http://x",
            "abstract": "",
        }
        fields.update(overrides)
        return Paper(**fields)  # type: ignore[arg-type]

    return _factory
