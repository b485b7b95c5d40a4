"""Venue resolution."""

from bibfront.models.records import Conference, Journal, TagMap, Venue

from .._helpers import find_tag_value
from ..errors import MissingFieldError


def resolve_venue(tags: TagMap) -> Venue:
    """Resolve the publication venue.

    ``journal`` then ``journaltitle`` give a Journal; otherwise
    ``booktitle`` gives a Conference.

    Parameters
    ----------
    tags : TagMap
        Entry tag mapping.

    Returns
    -------
    Venue
        Journal or Conference.

    Raises
    ------
    MissingFieldError
        If none of ``journal``, ``journaltitle``, ``booktitle`` is present.
    """
    journal, _ = find_tag_value(tags, "journal")
    if journal is not None:
        return Journal(journal)

    booktitle, _ = find_tag_value(tags, "conference")
    if booktitle is not None:
        return Conference(booktitle)

    raise MissingFieldError(
        "missing venue: expected 'journal', 'journaltitle' or 'booktitle'", "venue"
    )
