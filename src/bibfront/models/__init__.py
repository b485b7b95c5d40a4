"""Data models for bibliography entries and normalized papers."""

from bibfront.models.records import (
    BibEntry,
    Conference,
    Journal,
    PageRange,
    Paper,
    TagMap,
    Venue,
)

__all__ = [
    "BibEntry",
    "Conference",
    "Journal",
    "PageRange",
    "Paper",
    "TagMap",
    "Venue",
]
