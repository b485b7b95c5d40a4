"""Author normalization."""

from bibfront.models.records import TagMap

from .._helpers import AUTHOR_SEPARATOR, require_tag_value


def normalize_authors(tags: TagMap) -> tuple[str, ...]:
    """Split the ``author`` tag into display-formatted names.

    Authors are separated by the literal ``" and "``. A name written
    "Last, First Middle" becomes "First Middle Last"; a name without a
    comma is kept as written.

    Parameters
    ----------
    tags : TagMap
        Entry tag mapping.

    Returns
    -------
    tuple[str, ...]
        Author names in source order.

    Raises
    ------
    MissingFieldError
        If the entry has no ``author`` tag.
    """
    raw = require_tag_value(tags, "author")

    # Author lists may be wrapped across lines in the source
    raw = raw.replace("\n", " ")

    return tuple(_reorder_name(part) for part in raw.split(AUTHOR_SEPARATOR))


def _reorder_name(name: str) -> str:
    return " ".join(reversed(name.split(","))).strip()
