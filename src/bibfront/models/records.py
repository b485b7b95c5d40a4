"""Record data models for bibfront.

This module defines the immutable types that flow through the conversion
pipeline: the raw entry produced by the reader and the normalized ``Paper``
consumed by the renderer.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

# Per-entry mapping from lowercase tag name to unprocessed value
TagMap = Mapping[str, str]


@dataclass(frozen=True)
class BibEntry:
    """One parsed bibliography entry.

    Attributes
    ----------
    entry_type : str
        Lowercased entry type (e.g., 'article', 'inproceedings').
    citekey : str
        Citation key as written in the source.
    tags : dict[str, str]
        Tag name (lowercase) to raw string value.
    line_start : int
        0-based line number of the ``@type{`` header in the source file.
    """

    entry_type: str
    citekey: str
    tags: dict[str, str] = field(default_factory=dict)
    line_start: int = 0


@dataclass(frozen=True)
class PageRange:
    """First and last page numbers, each optional.

    Attributes
    ----------
    first : int | None
        First page, None when no numeric token was found.
    last : int | None
        Last page, None when fewer than two numeric tokens were found.
    """

    first: int | None = None
    last: int | None = None


@dataclass(frozen=True)
class Journal:
    """Journal venue."""

    name: str


@dataclass(frozen=True)
class Conference:
    """Conference venue (resolved from ``booktitle``)."""

    name: str


Venue = Journal | Conference


@dataclass(frozen=True)
class Paper:
    """Fully normalized bibliography entry.

    Attributes
    ----------
    authors : tuple[str, ...]
        Display-formatted author names in citation order.
    pages : PageRange
        Page range, possibly empty.
    volume : int | None
        Volume number.
    series : int | None
        Series (or issue) number.
    venue : Venue
        Journal or conference the work appeared in.
    title : str
        Title as supplied.
    publisher : str | None
        Publisher, None when the tag is absent.
    year : int
        Publication year.
    doi : str
        DOI, empty string when absent.
    url : str
        Link to the work.
    abstract : str
        Abstract, empty string when absent.
    """

    authors: tuple[str, ...]
    pages: PageRange
    volume: int | None
    series: int | None
    venue: Venue
    title: str
    publisher: str | None
    year: int
    doi: str
    url: str
    abstract: str = ""
