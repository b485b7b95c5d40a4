"""Pages normalization."""

from bibfront.models.records import PageRange, TagMap

from .._helpers import NON_DIGIT_RE, find_tag_value, parse_int


def normalize_pages(tags: TagMap) -> PageRange:
    """Extract first and last page from the ``pages`` tag.

    The value is split on every non-digit character, so ``123-145``,
    ``123--145``, ``123–145`` and ``p. 12, 34`` are all understood. The
    first two numeric runs become the first and last page; anything after
    is ignored. Runs too large for a signed 64-bit value are skipped.

    Parameters
    ----------
    tags : TagMap
        Entry tag mapping.

    Returns
    -------
    PageRange
        Page range, empty when the tag is absent or has no digits.
    """
    pages_raw, _ = find_tag_value(tags, "pages")
    if pages_raw is None:
        return PageRange()

    parsed = (parse_int(token) for token in NON_DIGIT_RE.split(pages_raw) if token)
    numbers = [number for number in parsed if number is not None]
    first = numbers[0] if len(numbers) > 0 else None
    last = numbers[1] if len(numbers) > 1 else None
    return PageRange(first, last)
