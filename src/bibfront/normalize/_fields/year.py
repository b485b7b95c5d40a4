"""Year extraction."""

from bibfront.models.records import TagMap

from .._helpers import find_tag_value, parse_int
from ..errors import InvalidFieldError, MissingFieldError


def extract_year(tags: TagMap) -> int:
    """Extract the publication year.

    ``date`` takes precedence over ``year``. For ``date`` only the part
    before the first ``-`` is used, which handles ISO dates such as
    ``2021-05-01``.

    Parameters
    ----------
    tags : TagMap
        Entry tag mapping.

    Returns
    -------
    int
        Publication year.

    Raises
    ------
    MissingFieldError
        If neither ``date`` nor ``year`` is present.
    InvalidFieldError
        If the selected value is not an integer.
    """
    date_raw, _ = find_tag_value(tags, "date")
    if date_raw is not None:
        year_raw = date_raw.split("-", 1)[0]
        source = "date"
    else:
        year_raw, _ = find_tag_value(tags, "year")
        source = "year"

    if year_raw is None:
        raise MissingFieldError("missing mandatory tag 'date' or 'year'", "year")

    year = parse_int(year_raw)
    if year is None:
        raise InvalidFieldError(f"invalid year {year_raw!r} in tag '{source}'", "year")
    return year
