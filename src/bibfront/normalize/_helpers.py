"""Helper functions and compiled regex patterns for normalization."""

import re

from bibfront.models.records import TagMap

from .errors import MissingFieldError
from .tag_mappings import get_tags

# Pre-compiled regex patterns
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
NON_DIGIT_RE = re.compile(r"[^0-9]")
AUTHOR_SEPARATOR = " and "

# Numeric tags hold signed 64-bit values
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def parse_int(value: str | None) -> int | None:
    """Parse a whole string as a signed decimal integer.

    Surrounding whitespace, underscores and non-ASCII digits are rejected,
    so ``" 12"`` and ``"1_000"`` both yield None. Values outside the signed
    64-bit range also yield None.

    Parameters
    ----------
    value : str | None
        Raw value.

    Returns
    -------
    int | None
        Parsed integer, or None if absent, not an integer or out of range.
    """
    if value is None or not INTEGER_RE.fullmatch(value):
        return None
    number = int(value)
    if not I64_MIN <= number <= I64_MAX:
        return None
    return number


def find_tag_value(tags: TagMap, field: str) -> tuple[str | None, str | None]:
    """Find the first tag present for ``field`` respecting priority.

    Parameters
    ----------
    tags : TagMap
        Entry tag mapping.
    field : str
        Record field name from ``TAG_MAPPINGS``.

    Returns
    -------
    tuple[str | None, str | None]
        (value, tag_name) if found, (None, None) otherwise.
    """
    for tag_name in get_tags(field):
        if tag_name in tags:
            return tags[tag_name], tag_name
    return None, None


def require_tag_value(tags: TagMap, field: str) -> str:
    """Like :func:`find_tag_value` but raise when no tag is present.

    Raises
    ------
    MissingFieldError
        If none of the field's tags is present.
    """
    value, _ = find_tag_value(tags, field)
    if value is None:
        names = " or ".join(f"'{t}'" for t in get_tags(field))
        raise MissingFieldError(f"missing mandatory tag {names}", field)
    return value
