"""Centralized tag mappings for BibTeX entries.

Defines which tags feed which record field, in priority order. The first
tag present in the entry wins, even when its value is empty.
"""

# field -> list of tag names (priority order)
TAG_MAPPINGS: dict[str, list[str]] = {
    "author": ["author"],
    "pages": ["pages"],
    "volume": ["volume"],
    "series": ["series", "number"],
    "date": ["date"],
    "year": ["year"],
    "doi": ["doi"],
    "title": ["title"],
    "url": ["url"],
    "abstract": ["abstract"],
    "publisher": ["publisher"],
    "journal": ["journal", "journaltitle"],
    "conference": ["booktitle"],
}


def get_tags(field: str) -> list[str]:
    """Get tag names for a record field.

    Parameters
    ----------
    field : str
        Field name (e.g., 'series', 'journal').

    Returns
    -------
    list[str]
        Tag names for the field, in priority order.

    Raises
    ------
    ValueError
        If the field has no mapping.
    """
    if field not in TAG_MAPPINGS:
        raise ValueError(
            f"Unknown record field: {field!r}. Known fields: {sorted(TAG_MAPPINGS)}"
        )
    return TAG_MAPPINGS[field]
