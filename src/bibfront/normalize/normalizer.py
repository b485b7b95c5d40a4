"""Record assembly from a single entry's tag mapping.

This module runs every field normalizer once and combines the results into
a ``Paper``. The first mandatory field that fails aborts assembly; no
partial record is ever returned.
"""

from bibfront.models.records import BibEntry, Paper, TagMap

from ._fields import (
    extract_abstract,
    extract_doi,
    extract_publisher,
    extract_title,
    extract_url,
    extract_year,
    normalize_authors,
    normalize_pages,
    normalize_series,
    normalize_volume,
    resolve_venue,
)
from .errors import EntryError


def build_paper(tags: TagMap, *, citekey: str | None = None) -> Paper:
    """Normalize a tag mapping into a Paper.

    Parameters
    ----------
    tags : TagMap
        Mapping from lowercase tag name to raw value.
    citekey : str | None, optional
        Citation key, attached to any error raised.

    Returns
    -------
    Paper
        Normalized record.

    Raises
    ------
    EntryError
        If a mandatory tag (author, title, url, venue, year) is missing
        or the year cannot be parsed.
    """
    try:
        return Paper(
            authors=normalize_authors(tags),
            pages=normalize_pages(tags),
            volume=normalize_volume(tags),
            series=normalize_series(tags),
            venue=resolve_venue(tags),
            title=extract_title(tags),
            publisher=extract_publisher(tags),
            year=extract_year(tags),
            doi=extract_doi(tags),
            url=extract_url(tags),
            abstract=extract_abstract(tags),
        )
    except EntryError as e:
        if citekey is None or e.citekey is not None:
            raise
        raise e.with_citekey(citekey) from e


def normalize_entry(entry: BibEntry) -> Paper:
    """Normalize a parsed entry, tagging errors with its citekey."""
    return build_paper(entry.tags, citekey=entry.citekey)
