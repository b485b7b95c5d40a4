"""Field normalization functions.

Each function takes an entry's tag mapping and returns one normalized
record field. Optional fields fall back to an empty value; mandatory
fields raise an EntryError subclass.
"""

from .authors import normalize_authors
from .numbers import normalize_series, normalize_volume
from .pages import normalize_pages
from .text import extract_abstract, extract_doi, extract_publisher, extract_title, extract_url
from .venue import resolve_venue
from .year import extract_year

__all__ = [
    "extract_abstract",
    "extract_doi",
    "extract_publisher",
    "extract_title",
    "extract_url",
    "extract_year",
    "normalize_authors",
    "normalize_pages",
    "normalize_series",
    "normalize_volume",
    "resolve_venue",
]
